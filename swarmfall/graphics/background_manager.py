"""
background_manager.py
---------------------
Scrolling starfield behind the play-field.

Provides a single decorative star layer with:
- Right-to-left scrolling scaled by the lightspeed multiplier
- Wrap-around at the left edge with a fresh random height
- Opacity twinkle that pauses while the field is at high speed

The starfield keeps updating on every screen (start, playing, respawning,
game over) so the background never freezes.
"""

import random

from swarmfall.core.debug.debug_logger import DebugLogger
from swarmfall.core.runtime.game_settings import Display, Starfield as StarfieldSettings


class StarfieldElement:
    """
    Single background star.

    ``base_speed`` is the unscaled drift; ``speed`` holds the last applied
    (multiplied) drift so renderers can stretch streaks during lightspeed.
    """

    __slots__ = (
        "x", "y", "size", "base_speed", "speed",
        "opacity", "twinkle_speed", "twinkle_direction",
    )

    MIN_OPACITY = 0.3
    MAX_OPACITY = 1.0

    def __init__(self, x, y, size, speed, rng):
        self.x = x
        self.y = y
        self.size = size
        self.base_speed = speed
        self.speed = speed
        self.opacity = self.MIN_OPACITY + rng.random() * (self.MAX_OPACITY - self.MIN_OPACITY)
        self.twinkle_speed = 0.02 + rng.random() * 0.03
        self.twinkle_direction = 1 if rng.random() > 0.5 else -1

    def update(self, multiplier, rng, width=Display.WIDTH, height=Display.HEIGHT):
        self.speed = self.base_speed * multiplier
        self.x -= self.speed

        margin = StarfieldSettings.WRAP_MARGIN
        if self.x < -margin:
            self.x = width + margin
            self.y = rng.random() * height

        if multiplier < StarfieldSettings.TWINKLE_CUTOFF:
            self.opacity += self.twinkle_speed * self.twinkle_direction
            if self.opacity >= self.MAX_OPACITY or self.opacity <= self.MIN_OPACITY:
                self.twinkle_direction *= -1


class Starfield:
    """Owns the star layer and advances it once per tick."""

    def __init__(self, rng: random.Random = None, count: int = StarfieldSettings.COUNT,
                 width: int = Display.WIDTH, height: int = Display.HEIGHT):
        self.rng = rng or random.Random()
        self.width = width
        self.height = height
        self.stars = []
        self.populate(count)

    def populate(self, count):
        """Scatter ``count`` stars uniformly over the field."""
        rng = self.rng
        size_lo, size_hi = StarfieldSettings.SIZE_RANGE
        speed_lo, speed_hi = StarfieldSettings.SPEED_RANGE

        self.stars = [
            StarfieldElement(
                rng.random() * self.width,
                rng.random() * self.height,
                size_lo + rng.random() * (size_hi - size_lo),
                speed_lo + rng.random() * (speed_hi - speed_lo),
                rng,
            )
            for _ in range(count)
        ]
        DebugLogger.init_entry(f"Starfield ({count} stars)")

    def update(self, multiplier: float = 1.0):
        rng = self.rng
        for star in self.stars:
            star.update(multiplier, rng, self.width, self.height)

    def __len__(self):
        return len(self.stars)
