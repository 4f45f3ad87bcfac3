"""
projectile.py
-------------
Laser projectile fired by the player.

Coordinate System
-----------------
``pos.x`` is the left edge of the beam and ``pos.y`` its vertical center,
so the beam covers [x, x + width] x [y - height/2, y + height/2] whatever
the firing direction.
"""

import pygame

from swarmfall.core.runtime.game_settings import Display, ProjectileDefaults


class Projectile:
    """Straight-line laser; ``has_hit`` marks it as spent after its first hit."""

    __slots__ = ('pos', 'velocity', 'direction', 'width', 'height', 'has_hit')

    def __init__(self, x: float, y: float, direction: int):
        self.pos = pygame.Vector2(x, y)
        self.direction = direction
        self.velocity = ProjectileDefaults.SPEED * direction
        self.width = ProjectileDefaults.WIDTH
        self.height = ProjectileDefaults.HEIGHT
        self.has_hit = False

    def update(self):
        self.pos.x += self.velocity

    def bounds(self):
        """Float bounds as (left, top, right, bottom)."""
        half_h = self.height / 2
        return (self.pos.x, self.pos.y - half_h,
                self.pos.x + self.width, self.pos.y + half_h)

    def is_offscreen(self) -> bool:
        return self.pos.x > Display.WIDTH or self.pos.x < 0
