# src/game/assets.py
from __future__ import annotations
import logging
import os
from typing import Callable, Dict, Iterable, Optional
import pygame
from .config import ASSET_DIR, ASSET_FILES

logger = logging.getLogger(__name__)


class AssetGate:
    """
    Counted barrier in front of the game loop.
    Every asset must report exactly once, loaded or failed; the Nth report
    completes the gate and fires on_complete. A failure still counts, the
    caller decides what a partial set means.
    """
    def __init__(self, names: Iterable[str],
                 on_complete: Optional[Callable[["AssetGate"], None]] = None):
        self.names = tuple(names)
        self.on_complete = on_complete
        self.loaded: list[str] = []
        self.failed: Dict[str, BaseException] = {}

    @property
    def pending(self) -> set[str]:
        return set(self.names) - set(self.loaded) - set(self.failed)

    @property
    def complete(self) -> bool:
        return not self.pending

    def _signal(self, name: str):
        if name not in self.names:
            raise ValueError(f"unknown asset {name!r}")
        if name in self.loaded or name in self.failed:
            raise ValueError(f"asset {name!r} already reported")

    def _maybe_complete(self):
        if self.complete:
            logger.info("assets ready: %d loaded, %d failed", len(self.loaded), len(self.failed))
            if self.on_complete is not None:
                self.on_complete(self)

    def mark_loaded(self, name: str):
        self._signal(name)
        self.loaded.append(name)
        self._maybe_complete()

    def mark_failed(self, name: str, error: BaseException):
        self._signal(name)
        self.failed[name] = error
        logger.error("failed to load asset %r: %s", name, error)
        self._maybe_complete()


def load_assets(gate: AssetGate, asset_dir: str = ASSET_DIR,
                files: Dict[str, str] = ASSET_FILES) -> Dict[str, pygame.Surface]:
    """Load every image the gate waits on. Failed names are absent from the result."""
    images: Dict[str, pygame.Surface] = {}
    for name in gate.names:
        path = os.path.join(asset_dir, files[name])
        try:
            img = pygame.image.load(path)
        except (pygame.error, OSError) as e:
            gate.mark_failed(name, e)
            continue
        # convert_alpha needs a video mode; headless loads keep the raw surface
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            img = img.convert_alpha()
        images[name] = img
        logger.debug("loaded asset %r from %s", name, path)
        gate.mark_loaded(name)
    return images
