# src/game/level.py
from __future__ import annotations
import enum
import math
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple
from .config import (
    WIDTH, SCROLL_SPEED,
    PLATFORM_W, PLATFORM_H, PLATFORM_TARGET, PLATFORM_SPACING, PLATFORM_SPAWN_JITTER,
    PLATFORM_INITIAL_X, PLATFORM_INITIAL_STEP, TIER_HIGH, TIER_MID, TIER_LOW,
    COLLECTIBLE_W, COLLECTIBLE_H, COLLECTIBLE_TARGET, COLLECTIBLE_INITIAL,
    COLLECTIBLE_SPACING, COLLECTIBLE_SPAWN_JITTER, COLLECTIBLE_Y_MIN, COLLECTIBLE_Y_SPAN,
    COLLECTIBLE_INITIAL_X, COLLECTIBLE_INITIAL_STEP, BOB_SPEED, BOB_AMPLITUDE,
    DECORATION_COUNT, DECORATION_Y_MIN, DECORATION_Y_SPAN, DECORATION_W_MIN, DECORATION_W_SPAN,
    DECORATION_H_MIN, DECORATION_H_SPAN, DECORATION_SPEED_MIN, DECORATION_SPEED_SPAN,
    DECORATION_OPACITY_MIN, DECORATION_OPACITY_SPAN, DECORATION_RESPAWN_JITTER,
)


class Tier(enum.Enum):
    HIGH = "high"
    MID = "mid"
    LOW = "low"


_TIER_RANGES = {
    Tier.HIGH: TIER_HIGH,
    Tier.MID: TIER_MID,
    Tier.LOW: TIER_LOW,
}


def tier_range(tier: Tier) -> Tuple[int, int]:
    """Half-open [lo, hi) band of platform tops for a tier."""
    try:
        return _TIER_RANGES[tier]
    except KeyError:
        raise ValueError(f"not a platform tier: {tier!r}") from None


def random_tier(rng: random.Random) -> Tier:
    return rng.choice(list(Tier))


def tier_height(tier: Tier, rng: random.Random) -> float:
    lo, hi = tier_range(tier)
    return lo + rng.random() * (hi - lo)


@dataclass
class Platform:
    x: float
    y: float
    tier: Tier
    width: int = PLATFORM_W
    height: int = PLATFORM_H

    @property
    def right(self) -> float:
        return self.x + self.width


@dataclass
class Collectible:
    x: float
    y: float
    bob_offset: float = 0.0
    collected: bool = False
    width: int = COLLECTIBLE_W
    height: int = COLLECTIBLE_H

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bob_y(self) -> float:
        """Drawn y; pickup tests use the unbobbed y."""
        return self.y + math.sin(self.bob_offset) * BOB_AMPLITUDE


@dataclass
class Decoration:
    """Background cloud scrolling at its own speed; recycled, never destroyed."""
    x: float
    y: float
    width: float
    height: float
    speed: float
    opacity: float

    @property
    def right(self) -> float:
        return self.x + self.width


class Spawner:
    """
    Keeps the scrolling platforms, collectibles and background decorations alive.
    move() scrolls and culls, generate() tops sequences back up (at most one of
    each kind per call, gated by spacing from the right edge).
    """
    def __init__(self, seed: int | None = None):
        if seed is None:
            seed = random.randrange(0, 2**32 - 1)
        self.seed = seed
        self.rng = random.Random(seed)
        self.platforms: List[Platform] = []
        self.collectibles: List[Collectible] = []
        self.decorations: List[Decoration] = []
        self._init_start()

    def _init_start(self):
        tiers = (Tier.HIGH, Tier.MID, Tier.LOW)
        for i in range(PLATFORM_TARGET):
            tier = tiers[i % 3]
            x = PLATFORM_INITIAL_X + i * PLATFORM_INITIAL_STEP
            self.platforms.append(Platform(x=x, y=tier_height(tier, self.rng), tier=tier))

        for i in range(COLLECTIBLE_INITIAL):
            x = COLLECTIBLE_INITIAL_X + i * COLLECTIBLE_INITIAL_STEP
            self.collectibles.append(self._create_collectible(x))

        for _ in range(DECORATION_COUNT):
            self.decorations.append(self._create_decoration())

    def _create_platform(self, x: float) -> Platform:
        tier = random_tier(self.rng)
        return Platform(x=x, y=tier_height(tier, self.rng), tier=tier)

    def _create_collectible(self, x: float) -> Collectible:
        y = COLLECTIBLE_Y_MIN + self.rng.random() * COLLECTIBLE_Y_SPAN
        return Collectible(x=x, y=y, bob_offset=self.rng.random() * math.pi * 2)

    def _create_decoration(self) -> Decoration:
        rng = self.rng
        return Decoration(
            x=rng.random() * WIDTH * 2,
            y=DECORATION_Y_MIN + rng.random() * DECORATION_Y_SPAN,
            width=DECORATION_W_MIN + rng.random() * DECORATION_W_SPAN,
            height=DECORATION_H_MIN + rng.random() * DECORATION_H_SPAN,
            speed=DECORATION_SPEED_MIN + rng.random() * DECORATION_SPEED_SPAN,
            opacity=DECORATION_OPACITY_MIN + rng.random() * DECORATION_OPACITY_SPAN,
        )

    def move(self):
        """Scroll everything left, cull platforms/collectibles, recycle decorations."""
        for platform in self.platforms:
            platform.x -= SCROLL_SPEED
        for item in self.collectibles:
            item.x -= SCROLL_SPEED
            item.bob_offset += BOB_SPEED

        # Rebuild rather than remove while iterating; collected items go the same way
        self.platforms = [p for p in self.platforms if p.right >= 0]
        self.collectibles = [c for c in self.collectibles if c.right >= 0]

        for deco in self.decorations:
            deco.x -= deco.speed
            if deco.right < 0:
                deco.x = WIDTH + self.rng.random() * DECORATION_RESPAWN_JITTER
                deco.y = DECORATION_Y_MIN + self.rng.random() * DECORATION_Y_SPAN

    def generate(self) -> Tuple[Optional[Platform], Optional[Collectible]]:
        """Append at most one platform and one collectible. Returns what was added."""
        new_platform = None
        if len(self.platforms) < PLATFORM_TARGET:
            last = self.platforms[-1] if self.platforms else None
            if last is None or last.x < WIDTH - PLATFORM_SPACING:
                new_platform = self._create_platform(WIDTH + self.rng.random() * PLATFORM_SPAWN_JITTER)
                self.platforms.append(new_platform)

        new_item = None
        if len(self.collectibles) < COLLECTIBLE_TARGET:
            last = self.collectibles[-1] if self.collectibles else None
            if last is None or last.x < WIDTH - COLLECTIBLE_SPACING:
                new_item = self._create_collectible(WIDTH + self.rng.random() * COLLECTIBLE_SPAWN_JITTER)
                self.collectibles.append(new_item)

        return new_platform, new_item
