# src/tests/conftest.py
import os

# Headless pygame for every suite; must be set before any display init
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from src.game.world import new_state


@pytest.fixture
def state():
    return new_state(seed=123)


@pytest.fixture
def pygame_display():
    pygame.init()
    pygame.display.set_mode((64, 64))
    yield
    pygame.quit()
