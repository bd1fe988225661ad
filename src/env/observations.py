# src/env/observations.py
from __future__ import annotations
from typing import List, Optional
import numpy as np

from src.game.config import WIDTH, HEIGHT, JUMP_POWER
from src.game.level import Collectible, Platform

OBS_SIZE = 10
# Horizontal lookahead used to normalize dx features
LOOKAHEAD_PX = float(WIDTH)


def _clamp(x: float, lo: float, hi: float) -> float:
    return lo if x < lo else (hi if x > hi else x)


def _norm_dx(dx: float) -> float:
    return _clamp(dx / LOOKAHEAD_PX, -1.0, 1.0)


def _norm_y(y: float) -> float:
    return _clamp(y / float(HEIGHT), 0.0, 1.0)


def _platforms_ahead(platforms: List[Platform], left: float, n: int = 2) -> List[Platform]:
    """Platforms whose right edge is still ahead of the player's left edge, nearest first."""
    ahead = [p for p in platforms if p.right > left]
    ahead.sort(key=lambda p: p.x)
    return ahead[:n]


def _collectible_ahead(items: List[Collectible], left: float) -> Optional[Collectible]:
    ahead = [c for c in items if not c.collected and c.right > left]
    return min(ahead, key=lambda c: c.x) if ahead else None


def build_observation(state) -> np.ndarray:
    """
    Returns a fixed (10,) float32 vector:
      [ y_norm, vy_norm, grounded, support_norm,
        plat1_dx, plat1_top, plat2_dx, plat2_top,
        item_dx, item_y ]
    - y/top values are screen y / HEIGHT in [0,1]
    - dx values are (x - player.x) / WIDTH in [-1,1]
    - vy is scaled by |JUMP_POWER| and clipped to [-1,1]
    - sentinel for a missing platform/item: dx=1.0, y=1.0
    """
    player = state.player
    spawner = state.spawner

    feats: List[float] = [
        _norm_y(player.y),
        _clamp(player.vy / abs(JUMP_POWER), -1.0, 1.0),
        1.0 if player.grounded else 0.0,
        _norm_y(player.support_y),
    ]

    plats = _platforms_ahead(spawner.platforms, player.x)
    for i in range(2):
        if i < len(plats):
            feats.extend([_norm_dx(plats[i].x - player.x), _norm_y(plats[i].y)])
        else:
            feats.extend([1.0, 1.0])

    item = _collectible_ahead(spawner.collectibles, player.x)
    if item is None:
        feats.extend([1.0, 1.0])
    else:
        feats.extend([_norm_dx(item.x - player.x), _norm_y(item.y)])

    return np.asarray(feats, dtype=np.float32)
