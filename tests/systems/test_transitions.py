"""
test_transitions.py
-------------------
Unit tests for the lightspeed curve and the respawn sequence.
"""

import math
import random

import pygame
import pytest

from swarmfall.core.runtime.game_settings import Display
from swarmfall.entities.player import PlayerAgent
from swarmfall.systems.effects.transitions import LightspeedTransition, RespawnTransition

from conftest import make_enemy


# ===========================================================
# Lightspeed
# ===========================================================

@pytest.mark.parametrize("progress, expected", [
    (0.0, 1.0),
    (0.2, 5.75),   # 1 + 0.5^2 * 19
    (0.4, 20.0),
    (0.5, 20.0),
    (0.8, 5.75),   # 20 - (1 - 0.5^2) * 19
    (0.9, 20 - (1 - 0.25 ** 2) * 19),
])
def test_lightspeed_curve(progress, expected):
    assert LightspeedTransition.curve(progress) == pytest.approx(expected)


def test_lightspeed_runs_for_duration_then_resets():
    lightspeed = LightspeedTransition()
    lightspeed.start(10_000)
    assert lightspeed.update(12_000) == pytest.approx(20.0)
    assert lightspeed.active

    assert lightspeed.update(14_000) == 1.0
    assert not lightspeed.active


def test_inactive_lightspeed_holds_at_one():
    lightspeed = LightspeedTransition()
    assert lightspeed.update(99_999) == 1.0


# ===========================================================
# Respawn
# ===========================================================

def test_pick_target_respects_band_and_distance():
    rng = random.Random(4)
    player_pos = pygame.Vector2(100, Display.HEIGHT / 2)
    for _ in range(200):
        x, y = RespawnTransition.pick_target(player_pos, rng)
        assert 400 <= x <= Display.WIDTH - 100
        assert 50 <= y <= Display.HEIGHT - 50
        assert math.hypot(x - player_pos.x, y - player_pos.y) >= 400


def test_pick_target_falls_back_to_farthest_candidate():
    # Player in the middle of the band: nothing is 400+ away when the rng is stuck
    stuck = random.Random()
    stuck.random = lambda: 0.5
    player_pos = pygame.Vector2(780, 360)
    x, y = RespawnTransition.pick_target(player_pos, stuck)
    assert (x, y) == pytest.approx((400 + 0.5 * 780, 50 + 0.5 * 620))


def test_respawn_interpolates_and_clears_transit():
    rng = random.Random(9)
    player = PlayerAgent()
    enemies = [make_enemy(600, 300, index=0), make_enemy(660, 300, index=1)]
    respawn = RespawnTransition()
    respawn.start(1000, player, enemies, rng)

    targets = [(e.transit.target_x, e.transit.target_y) for e in enemies]
    assert all(e.transit is not None for e in enemies)

    assert respawn.update(1750, enemies) is False
    first = enemies[0]
    assert first.pos.x == pytest.approx((600 + targets[0][0]) / 2)
    assert first.pos.y == pytest.approx((300 + targets[0][1]) / 2)
    assert respawn.flash_alpha == pytest.approx(abs(math.sin(750 / 100)))

    assert respawn.update(2500, enemies) is True
    assert not respawn.active
    assert respawn.flash_alpha == 1.0
    assert all(e.transit is None for e in enemies)
    assert (first.pos.x, first.pos.y) == pytest.approx(targets[0])


def test_cancel_clears_transit():
    enemies = [make_enemy(600, 300)]
    respawn = RespawnTransition()
    respawn.start(0, PlayerAgent(), enemies, random.Random(1))
    respawn.cancel(enemies)
    assert enemies[0].transit is None
    assert respawn.update(100, enemies) is False
