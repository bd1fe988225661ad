# src/game/collision.py
from __future__ import annotations
from typing import Iterable, List, Optional, Tuple
from .config import (
    GROUND_Y, LANDING_INSET, LANDING_BAND, STANDING_TOLERANCE, COLLECTIBLE_REWARD
)
from .level import Collectible, Platform
from .player import Player

Box = Tuple[float, float, float, float]  # left, top, right, bottom


def aabb_overlap(a: Box, b: Box) -> bool:
    """Strict overlap: boxes that only touch along an edge don't collide."""
    return a[0] < b[2] and a[2] > b[0] and a[1] < b[3] and a[3] > b[1]


def resolve_pickups(player: Player, collectibles: Iterable[Collectible],
                    reward: int = COLLECTIBLE_REWARD) -> int:
    """Mark every uncollected item the player overlaps. Returns points earned."""
    me = player.bounds()
    points = 0
    for item in collectibles:
        if item.collected:
            continue
        box = (item.x, item.y, item.x + item.width, item.y + item.height)
        if aabb_overlap(me, box):
            item.collected = True
            points += reward
    return points


def resolve_support(player: Player, platforms: List[Platform],
                    ground_y: float = GROUND_Y) -> Optional[Platform]:
    """
    Recompute the player's support height for the next tick.
      - landing: foot within [top, top + LANDING_BAND] while not rising -> snap onto platform
      - standing: foot within STANDING_TOLERANCE of top -> platform keeps supporting
    Platforms are checked in list order and the last match wins.
    """
    left, right = player.inset_bounds(LANDING_INSET)
    support: Optional[Platform] = None

    for p in platforms:
        if not (left < p.right and right > p.x):
            continue

        foot = player.foot
        if p.y <= foot <= p.y + LANDING_BAND and player.vy >= 0:
            player.land_on(p.y - player.height)
            support = p

        if abs(player.foot - p.y) <= STANDING_TOLERANCE:
            player.support_y = p.y - player.height
            support = p

    # Nothing underfoot: only an airborne player falls back to the ground line
    if support is None and player.y < ground_y:
        player.support_y = float(ground_y)

    return support


def resolve_collisions(state) -> int:
    """Pickups first, then support. Credits the score and returns points earned."""
    points = resolve_pickups(state.player, state.spawner.collectibles)
    if points:
        state.score.add(points)
    resolve_support(state.player, state.spawner.platforms)
    return points
