"""
test_starfield.py
-----------------
Unit tests for the scrolling starfield.
"""

import random

from swarmfall.core.runtime.game_settings import Display
from swarmfall.graphics.background_manager import Starfield, StarfieldElement


def test_populates_stars_within_ranges():
    field = Starfield(random.Random(3))
    assert len(field) == 100
    for star in field.stars:
        assert 0 <= star.x <= Display.WIDTH
        assert 0 <= star.y <= Display.HEIGHT
        assert 0.5 <= star.size <= 2.5
        assert 0.1 <= star.base_speed <= 0.5
        assert 0.3 <= star.opacity <= 1.0


def test_speed_scales_with_multiplier():
    rng = random.Random(1)
    star = StarfieldElement(500, 100, 1, 0.4, rng)
    star.update(20, rng)
    assert star.speed == 8
    assert star.x == 492


def test_star_wraps_to_right_edge():
    rng = random.Random(1)
    star = StarfieldElement(-9.9, 100, 1, 0.5, rng)
    star.update(1, rng)
    assert star.x == Display.WIDTH + 10
    assert 0 <= star.y <= Display.HEIGHT


def test_twinkle_pauses_at_high_speed():
    rng = random.Random(1)
    star = StarfieldElement(500, 100, 1, 0.1, rng)
    opacity = star.opacity
    star.update(5, rng)
    assert star.opacity == opacity

    star.update(4.9, rng)
    assert star.opacity != opacity


def test_twinkle_reverses_at_bounds():
    rng = random.Random(1)
    star = StarfieldElement(500, 100, 1, 0.1, rng)
    star.opacity = 0.99
    star.twinkle_direction = 1
    star.twinkle_speed = 0.03
    star.update(1, rng)
    assert star.twinkle_direction == -1
