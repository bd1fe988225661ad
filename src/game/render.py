# src/game/render.py
from __future__ import annotations
from typing import Dict, Optional
import pygame
from .config import (
    WIDTH, HEIGHT, GROUND_Y,
    COLOR_SKY, COLOR_MEADOW, COLOR_GRASS, COLOR_GRASS_LINE, COLOR_SHADOW, COLOR_HUD,
    COLOR_PLAYER, COLOR_MANE, COLOR_CLOUD, COLOR_RAINBOW,
)


def _lerp_color(a, b, t: float):
    return tuple(int(a[i] + (b[i] - a[i]) * t) for i in range(3))


def _make_gradient(w: int, h: int) -> pygame.Surface:
    """Sky at the top, meadow at 70%, dark grass at the bottom."""
    surf = pygame.Surface((w, h))
    split = int(h * 0.7)
    for y in range(h):
        if y < split:
            c = _lerp_color(COLOR_SKY, COLOR_MEADOW, y / max(1, split))
        else:
            c = _lerp_color(COLOR_MEADOW, COLOR_GRASS, (y - split) / max(1, h - split))
        pygame.draw.line(surf, c, (0, y), (w, y))
    return surf


class SceneRenderer:
    """
    Draws one frame from the simulation state. Read-only: never mutates state.
    Images missing from `images` (failed loads) are replaced by simple shapes.
    """
    def __init__(self, surface: pygame.Surface, images: Optional[Dict[str, pygame.Surface]] = None):
        self.surface = surface
        self.images = dict(images or {})
        self.background = _make_gradient(surface.get_width(), surface.get_height())
        self._font: Optional[pygame.font.Font] = None

    @property
    def font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, 36)
        return self._font

    def _blit_scaled(self, name: str, rect: pygame.Rect, alpha: Optional[int] = None,
                     flip_x: bool = False) -> bool:
        img = self.images.get(name)
        if img is None:
            return False
        img = pygame.transform.smoothscale(img, rect.size) if img.get_bitsize() >= 24 \
            else pygame.transform.scale(img, rect.size)
        if flip_x:
            img = pygame.transform.flip(img, True, False)
        if alpha is not None:
            img.set_alpha(alpha)
        self.surface.blit(img, rect)
        return True

    def _draw_cloud(self, rect: pygame.Rect, alpha: int = 255):
        if self._blit_scaled("cloud", rect, alpha=alpha if alpha < 255 else None):
            return
        puff = pygame.Surface(rect.size, pygame.SRCALPHA)
        color = (*COLOR_CLOUD, alpha)
        w, h = rect.size
        pygame.draw.ellipse(puff, color, (0, h // 3, w, h * 2 // 3))
        pygame.draw.ellipse(puff, color, (w // 5, 0, w // 2, h * 3 // 4))
        pygame.draw.ellipse(puff, color, (w // 2, h // 6, w // 2 - 2, h * 2 // 3))
        self.surface.blit(puff, rect)

    def _draw_rainbow(self, rect: pygame.Rect):
        if self._blit_scaled("rainbow", rect):
            return
        band = max(2, rect.width // 12)
        for i, color in enumerate(COLOR_RAINBOW):
            arc = rect.inflate(-2 * band * i, -2 * band * i)
            arc.height = max(band, arc.height)
            pygame.draw.arc(self.surface, color, arc, 0.0, 3.1416, band)

    def _draw_player(self, player):
        rect = player.rect
        # Source art faces left
        if self._blit_scaled("unicorn", rect, flip_x=True):
            return
        pygame.draw.ellipse(self.surface, COLOR_PLAYER, rect.inflate(0, -rect.height // 3))
        head = pygame.Rect(rect.right - rect.width // 3, rect.top, rect.width // 3, rect.height // 2)
        pygame.draw.ellipse(self.surface, COLOR_PLAYER, head)
        pygame.draw.line(self.surface, COLOR_MANE, head.midtop, (head.right, rect.top - 12), 4)

    def _draw_grass(self, scroll_offset: float, grass_y: int):
        phase = scroll_offset % 20
        for i in range(-50, WIDTH + 50, 20):
            x = int(i - phase)
            pygame.draw.line(self.surface, COLOR_GRASS_LINE, (x, grass_y), (x + 15, grass_y), 4)
            pygame.draw.line(self.surface, COLOR_GRASS_LINE, (x + 5, grass_y), (x + 5, grass_y - 8), 4)
            pygame.draw.line(self.surface, COLOR_GRASS_LINE, (x + 10, grass_y), (x + 10, grass_y - 6), 4)

    def _draw_shadow(self, player):
        cx = int(player.x + player.width / 2)
        cy = int(player.support_y + player.height + 10)
        shadow = pygame.Surface((80, 20), pygame.SRCALPHA)
        pygame.draw.ellipse(shadow, COLOR_SHADOW, shadow.get_rect())
        self.surface.blit(shadow, (cx - 40, cy - 10))

    def draw_score(self, score: int):
        txt = self.font.render(f"Score: {score}", True, COLOR_HUD)
        self.surface.blit(txt, (16, 12))

    def draw(self, state):
        player = state.player
        spawner = state.spawner

        self.surface.blit(self.background, (0, 0))

        for deco in spawner.decorations:
            rect = pygame.Rect(int(deco.x), int(deco.y), int(deco.width), int(deco.height))
            self._draw_cloud(rect, alpha=int(deco.opacity * 255))

        self._draw_grass(state.scroll_offset, GROUND_Y + player.height)

        for platform in spawner.platforms:
            self._draw_cloud(pygame.Rect(int(platform.x), int(platform.y), platform.width, platform.height))

        for item in spawner.collectibles:
            if not item.collected:
                self._draw_rainbow(pygame.Rect(int(item.x), int(item.bob_y), item.width, item.height))

        self._draw_player(player)
        self._draw_shadow(player)
        self.draw_score(state.score.value)


def make_surface() -> pygame.Surface:
    """Offscreen frame the size of the window, for headless rendering."""
    return pygame.Surface((WIDTH, HEIGHT))
