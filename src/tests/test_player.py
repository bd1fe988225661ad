# src/tests/test_player.py
"""
Integrator + jump tests.

Usage (from repo root):
  pytest src/tests/test_player.py
"""
import pytest

from src.game.config import GRAVITY, GROUND_Y, JUMP_POWER, PLAYER_X
from src.game.player import Player, make_player


def test_make_player_rests_on_ground():
    p = make_player()
    assert p.x == PLAYER_X
    assert p.y == GROUND_Y
    assert p.support_y == GROUND_Y
    assert p.grounded and p.vy == 0.0


def test_gravity_added_before_clamp():
    p = Player(x=PLAYER_X, y=250.0, vy=-5.0, grounded=False)
    for _ in range(5):
        prev_vy = p.vy
        p.update_physics()
        assert p.vy == pytest.approx(prev_vy + GRAVITY)
    assert not p.grounded


def test_landing_clamps_and_zeroes_velocity():
    p = Player(x=PLAYER_X, y=GROUND_Y - 2.0, vy=6.0, grounded=False)
    p.update_physics()
    assert p.y == GROUND_Y
    assert p.vy == 0.0
    assert p.grounded


def test_landing_uses_current_support_height():
    p = Player(x=PLAYER_X, y=196.0, vy=4.0, grounded=False, support_y=200.0)
    p.update_physics()
    assert p.y == 200.0
    assert p.vy == 0.0 and p.grounded


def test_resting_player_stays_put():
    p = make_player()
    for _ in range(100):
        p.update_physics()
        assert p.y == GROUND_Y
        assert p.y <= p.support_y
        assert p.vy == 0.0 and p.grounded


def test_jump_arc_returns_to_ground():
    p = make_player()
    assert p.try_jump()
    assert p.vy == JUMP_POWER
    assert not p.grounded

    heights = []
    for _ in range(200):
        p.update_physics()
        heights.append(p.y)
        if p.grounded:
            break

    assert p.grounded and p.y == GROUND_Y and p.vy == 0.0
    # Rising first: y (top, screen coords) decreases right after the jump
    assert heights[0] < GROUND_Y
    assert heights[1] < heights[0]
    apex = min(heights)
    assert apex < GROUND_Y - 150


def test_jump_is_edge_triggered():
    p = make_player()
    assert p.try_jump()
    p.update_physics()
    vy = p.vy
    assert not p.try_jump()
    assert p.vy == vy


def test_animation_speeds_up_while_falling():
    p = Player(x=PLAYER_X, y=100.0, vy=2.0, grounded=False)
    p.update_physics()
    assert p.anim_offset == pytest.approx(0.4)
    p = make_player()
    p.update_physics()
    assert p.anim_offset == pytest.approx(0.2)


def test_short_of_support_stays_airborne():
    p = Player(x=PLAYER_X, y=195.0, vy=4.0, grounded=False, support_y=200.0)
    p.update_physics()
    assert p.y == pytest.approx(199.8)
    assert not p.grounded and p.vy == pytest.approx(4.8)
