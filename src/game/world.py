# src/game/world.py
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Callable, Optional
from .config import SCROLL_SPEED
from .collision import resolve_collisions
from .level import Spawner
from .player import Player, make_player

logger = logging.getLogger(__name__)


@dataclass
class ScoreBoard:
    """Monotonic score; on_change fires right after every increase."""
    value: int = 0
    on_change: Optional[Callable[[int], None]] = None

    def add(self, points: int) -> int:
        if points < 0:
            raise ValueError(f"score cannot decrease (got {points})")
        if points:
            self.value += points
            logger.debug("score +%d -> %d", points, self.value)
            if self.on_change is not None:
                self.on_change(self.value)
        return self.value


@dataclass
class SimulationState:
    player: Player
    spawner: Spawner
    score: ScoreBoard = field(default_factory=ScoreBoard)
    scroll_offset: float = 0.0  # total distance scrolled, drives the grass pattern
    tick: int = 0

    @property
    def seed(self) -> int:
        return self.spawner.seed


def new_state(seed: int | None = None) -> SimulationState:
    return SimulationState(player=make_player(), spawner=Spawner(seed))


def advance(state: SimulationState) -> int:
    """
    One simulation tick: integrate -> scroll/cull -> collide -> spawn.
    Collision runs after integration so the support height it writes is the one
    the next tick integrates against. Returns points earned this tick.
    """
    state.scroll_offset += SCROLL_SPEED
    state.player.update_physics()
    state.spawner.move()
    points = resolve_collisions(state)
    state.spawner.generate()
    state.tick += 1
    return points
