# src/env/ud_env.py
from __future__ import annotations
from typing import Optional, Dict, Any
import numpy as np
import gymnasium as gym
import pygame

from src.game.config import WIDTH, HEIGHT, FPS
from src.game.render import SceneRenderer
from src.game.world import SimulationState, advance, new_state
from src.env.observations import OBS_SIZE, build_observation


class UDEnv(gym.Env):
    """
    Unicorn Dash Gymnasium environment (vector observations).
    - One sim tick per frame, same stages as the game loop.
    - Agent acts every `frame_skip` ticks (default 4) -> 15 decisions/sec.
    - Reward: score points collected during the step.
    - Never terminates (no loss condition); truncates on the optional time limit.
    """
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": FPS}

    def __init__(self,
                 render_mode: Optional[str] = None,
                 frame_skip: int = 4,
                 time_limit_seconds: Optional[float] = 30.0):
        super().__init__()
        assert frame_skip >= 1, "frame_skip must be >= 1"
        assert render_mode is None or render_mode in self.metadata["render_modes"]
        self.render_mode = render_mode
        self.frame_skip = int(frame_skip)

        self.time_limit_decisions = None
        if time_limit_seconds is not None:
            self.time_limit_decisions = int(FPS * time_limit_seconds / self.frame_skip)

        # Actions: 0 = NOOP, 1 = JUMP
        self.action_space = gym.spaces.Discrete(2)

        # [y, vy, grounded, support, p1_dx, p1_top, p2_dx, p2_top, item_dx, item_y]
        low = np.array([0.0, -1.0, 0.0, 0.0, -1.0, 0.0, -1.0, 0.0, -1.0, 0.0], dtype=np.float32)
        high = np.ones(OBS_SIZE, dtype=np.float32)
        self.observation_space = gym.spaces.Box(low=low, high=high, dtype=np.float32)

        self.state: Optional[SimulationState] = None
        self.timestep: int = 0

        # Rendering
        self.screen = None
        self.renderer: Optional[SceneRenderer] = None
        self.clock = None

    # -------------------- Core API --------------------

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None):
        super().reset(seed=seed)

        # Seeding policy:
        # - If a seed is provided, use it directly for the spawner for strict reproducibility.
        # - If not, let the spawner randomize internally (None).
        level_seed = int(seed) if seed is not None else None
        self.state = new_state(level_seed)
        self.timestep = 0

        obs = self._get_obs()
        info = {"seed": self.state.seed, "score": 0}
        return obs, info

    def step(self, action):
        assert self.action_space.contains(action), f"Invalid action {action}"
        assert self.state is not None, "call reset() first"

        jumped = False
        if int(action) == 1:
            jumped = self.state.player.try_jump()

        points = 0
        for _ in range(self.frame_skip):
            points += advance(self.state)

        self.timestep += 1
        terminated = False
        truncated = (self.time_limit_decisions is not None
                     and self.timestep >= self.time_limit_decisions)

        obs = self._get_obs()
        info = {
            "score": self.state.score.value,
            "timestep": self.timestep,
            "tick": self.state.tick,
            "seed": self.state.seed,
            "grounded": self.state.player.grounded,
            "jumped": jumped,
        }

        if self.render_mode == "human":
            self.render()

        return obs, float(points), terminated, truncated, info

    def _get_obs(self) -> np.ndarray:
        assert self.state is not None
        return build_observation(self.state)

    # -------------------- Rendering --------------------

    def render(self):
        if self.render_mode is None or self.state is None:
            return None

        if self.renderer is None:
            pygame.init()
            if self.render_mode == "human":
                self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
                pygame.display.set_caption("Unicorn Dash — Gym Env")
                self.clock = pygame.time.Clock()
            else:
                self.screen = pygame.Surface((WIDTH, HEIGHT))
            self.renderer = SceneRenderer(self.screen)

        self.renderer.draw(self.state)

        if self.render_mode == "human":
            pygame.event.pump()
            pygame.display.flip()
            self.clock.tick(self.metadata["render_fps"])
            return None

        arr = pygame.surfarray.array3d(self.screen)  # (W, H, 3)
        return np.transpose(arr, (1, 0, 2))

    def close(self):
        if self.renderer is not None:
            if self.render_mode == "human":
                pygame.display.quit()
            pygame.quit()
            self.screen = None
            self.renderer = None
            self.clock = None
