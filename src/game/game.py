# src/game/game.py
import argparse
import enum
import logging
import sys
import pygame
from pygame import K_ESCAPE
from .config import (
    WIDTH, HEIGHT, FPS, SEED_DEFAULT, ASSET_DIR, ASSET_FILES, STRICT_ASSETS
)
from .assets import AssetGate, load_assets
from .logging_config import configure_logging
from .render import SceneRenderer
from .world import SimulationState, advance, new_state

logger = logging.getLogger(__name__)


class LoopState(enum.Enum):
    LOADING = "loading"
    RUNNING = "running"
    STOPPED = "stopped"
    FAILED = "failed"


class GameLoop:
    """
    Frame-driven driver: LOADING until the asset gate completes, then one
    tick per frame (simulate -> render) while RUNNING. Closing the window is
    the only way to STOPPED; there is no loss condition.
    """
    def __init__(self, state: SimulationState, renderer: SceneRenderer | None = None,
                 strict_assets: bool = False):
        self.state = state
        self.renderer = renderer
        self.strict_assets = strict_assets
        self.status = LoopState.LOADING
        self.failed_assets: dict = {}

    @property
    def running(self) -> bool:
        return self.status is LoopState.RUNNING

    def _set_status(self, status: LoopState):
        if status is not self.status:
            logger.info("loop %s -> %s", self.status.value, status.value)
            self.status = status

    def on_assets_complete(self, gate: AssetGate):
        if self.status is not LoopState.LOADING:
            return
        self.failed_assets = dict(gate.failed)
        if gate.failed and self.strict_assets:
            self._set_status(LoopState.FAILED)
        else:
            if gate.failed:
                logger.warning("starting with placeholders for %s", ", ".join(sorted(gate.failed)))
            self._set_status(LoopState.RUNNING)

    def stop(self):
        if self.status in (LoopState.LOADING, LoopState.RUNNING):
            self._set_status(LoopState.STOPPED)

    def jump(self) -> bool:
        if not self.running:
            return False
        return self.state.player.try_jump()

    def handle_event(self, event: pygame.event.Event):
        if event.type == pygame.QUIT:
            self.stop()
        elif event.type == pygame.KEYDOWN and event.key == K_ESCAPE:
            self.stop()
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button in (1, 2, 3):
            self.jump()
        elif event.type == pygame.FINGERDOWN:
            self.jump()

    def tick(self) -> bool:
        """Run one frame if RUNNING. Returns whether anything happened."""
        if not self.running:
            return False
        advance(self.state)
        if self.renderer is not None:
            self.renderer.draw(self.state)
        return True

    def run(self, clock: pygame.time.Clock | None = None, fps: int = FPS):
        clock = clock or pygame.time.Clock()
        while self.running:
            clock.tick(fps)
            for event in pygame.event.get():
                self.handle_event(event)
            if self.tick():
                pygame.display.flip()
        logger.info("loop ended (%s) at tick %d, score %d",
                    self.status.value, self.state.tick, self.state.score.value)


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Unicorn Dash")
    p.add_argument("--seed", type=int, default=None,
                   help="Level seed. Omit for SEED_DEFAULT, use -1 for random each launch.")
    p.add_argument("--assets", default=ASSET_DIR, help="Folder holding the sprite images")
    p.add_argument("--strict-assets", action="store_true", default=STRICT_ASSETS,
                   help="Refuse to start if any sprite fails to load")
    p.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    return p.parse_args(argv)


def run(argv=None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)

    # Resolve seed: None -> use SEED_DEFAULT; -1 -> random
    if args.seed is None:
        launch_seed = SEED_DEFAULT
    elif args.seed == -1:
        launch_seed = None
    else:
        launch_seed = args.seed

    pygame.init()
    pygame.display.set_caption("Unicorn Dash")
    screen = pygame.display.set_mode((WIDTH, HEIGHT))

    state = new_state(launch_seed)
    state.score.on_change = lambda value: pygame.display.set_caption(f"Unicorn Dash — {value}")
    loop = GameLoop(state, strict_assets=args.strict_assets)
    gate = AssetGate(ASSET_FILES, on_complete=loop.on_assets_complete)
    images = load_assets(gate, args.assets)
    loop.renderer = SceneRenderer(screen, images)
    logger.info("seed %s", state.seed)

    try:
        loop.run()
    finally:
        pygame.quit()
    return 1 if loop.status is LoopState.FAILED else 0


if __name__ == "__main__":
    sys.exit(run())
