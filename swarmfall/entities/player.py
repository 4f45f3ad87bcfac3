"""
player.py
---------
Player ship: held-key movement inside the field and the auto-fire timer.

Responsibilities
----------------
- Translate an input snapshot into movement clamped to the field.
- Track facing direction from the last horizontal input.
- Decide when the auto-fire interval has elapsed and build projectiles.
"""

import pygame

from swarmfall.core.runtime.game_settings import Display, PlayerDefaults
from swarmfall.entities.projectile import Projectile


class PlayerAgent:
    """Player-controlled ship."""

    __slots__ = ('pos', 'width', 'height', 'speed', 'direction', 'last_fire_time')

    def __init__(self):
        self.pos = pygame.Vector2(PlayerDefaults.START_X, PlayerDefaults.START_Y)
        self.width = PlayerDefaults.WIDTH
        self.height = PlayerDefaults.HEIGHT
        self.speed = PlayerDefaults.SPEED
        self.direction = 1
        self.last_fire_time = 0.0

    # ===========================================================
    # Movement
    # ===========================================================

    def move(self, intent) -> bool:
        """
        Apply held movement keys for one tick.

        Each axis only moves while the ship's half-size stays inside the
        field. Horizontal input also sets the facing direction.

        Args:
            intent: Object with boolean up/down/left/right attributes

        Returns:
            True when the ship moved this tick
        """
        moved = False
        half_w = self.width / 2
        half_h = self.height / 2

        if intent.up and self.pos.y > half_h:
            self.pos.y -= self.speed
            moved = True
        if intent.down and self.pos.y < Display.HEIGHT - half_h:
            self.pos.y += self.speed
            moved = True
        if intent.left and self.pos.x > half_w:
            self.pos.x -= self.speed
            self.direction = -1
            moved = True
        if intent.right and self.pos.x < Display.WIDTH - half_w:
            self.pos.x += self.speed
            self.direction = 1
            moved = True

        return moved

    def reset_position(self):
        self.pos.update(PlayerDefaults.START_X, PlayerDefaults.START_Y)

    # ===========================================================
    # Weapon
    # ===========================================================

    def fire_due(self, now: float) -> bool:
        return now - self.last_fire_time > PlayerDefaults.FIRE_INTERVAL_MS

    def fire(self, now: float) -> Projectile:
        """Build a projectile at the nose of the ship and restart the fire timer."""
        offset_x = self.width / 2 if self.direction == 1 else -self.width / 2
        self.last_fire_time = now
        return Projectile(self.pos.x + offset_x, self.pos.y, self.direction)
