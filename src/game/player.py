# src/game/player.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Tuple
import pygame
from .config import (
    PLAYER_X, PLAYER_W, PLAYER_H, GROUND_Y, GRAVITY, JUMP_POWER
)

logger = logging.getLogger(__name__)


@dataclass
class Player:
    """
    Runner pinned at a fixed x; only the vertical axis is simulated.
    - y is the TOP of the player box (screen coords, +y is down)
    - support_y is the y the player rests at: ground baseline or platform top - height
    """
    x: float
    y: float
    vy: float = 0.0
    width: int = PLAYER_W
    height: int = PLAYER_H
    grounded: bool = True
    support_y: float = float(GROUND_Y)
    anim_offset: float = 0.0

    @property
    def foot(self) -> float:
        return self.y + self.height

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), int(self.y), self.width, self.height)

    def bounds(self) -> Tuple[float, float, float, float]:
        """(left, top, right, bottom) as floats."""
        return self.x, self.y, self.x + self.width, self.y + self.height

    def inset_bounds(self, inset: float) -> Tuple[float, float]:
        # Lateral skin so a platform edge grazing the box doesn't count as support
        return self.x + inset, self.x + self.width - inset

    def try_jump(self) -> bool:
        """Jump only if grounded. Returns True if performed."""
        if not self.grounded:
            return False
        self.vy = JUMP_POWER
        self.grounded = False
        logger.debug("jump from y=%.1f", self.y)
        return True

    def update_physics(self):
        """Integrate one tick under gravity against last tick's support height."""
        self.vy += GRAVITY
        self.y += self.vy

        if self.y >= self.support_y:
            self.y = self.support_y
            self.vy = 0.0
            self.grounded = True
        else:
            self.grounded = False

        # Legs cycle faster while falling
        self.anim_offset += 0.4 if self.vy > 0 else 0.2

    def land_on(self, support_y: float):
        self.y = support_y
        self.vy = 0.0
        self.grounded = True
        self.support_y = support_y


def make_player() -> Player:
    """Player at rest on the ground baseline."""
    return Player(x=float(PLAYER_X), y=float(GROUND_Y))
