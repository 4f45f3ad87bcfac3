"""
collision_manager.py
--------------------
Hit tests between projectiles, enemies and the player.

Responsibilities
----------------
- Broad phase: axis-aligned overlap between a projectile beam and an
  enemy's centered hit box.
- Narrow phase: sample every display pixel the overlap covers, mapped
  into the sprite's natural pixels, and report a hit on the first opaque
  sample.
- Fail open: when sprite data is missing or sampling faults, a broad-phase
  overlap counts as a hit.
- Player contact and near-miss (proximity) queries on center distance.
"""

import math

from swarmfall.core.debug.debug_logger import DebugLogger
from swarmfall.core.runtime.game_settings import CollisionSettings
from swarmfall.systems.collision.sprite_metrics import SpriteMetricsRegistry


def _overlaps(a, b):
    """Inclusive overlap test on (left, top, right, bottom) tuples."""
    return not (a[2] < b[0] or a[0] > b[2] or a[3] < b[1] or a[1] > b[3])


class CollisionEngine:
    """Stateless hit tests; sprite opacity comes from the metrics registry."""

    def __init__(self, sprite_metrics: SpriteMetricsRegistry = None):
        self.sprite_metrics = sprite_metrics or SpriteMetricsRegistry()
        self.fallback_hits = 0

    # ===========================================================
    # Projectile vs Enemy
    # ===========================================================

    def projectile_hits_enemy(self, projectile, enemy) -> bool:
        """
        Two-phase hit test.

        Args:
            projectile: Object with ``bounds()`` as (left, top, right, bottom)
            enemy: Enemy with ``bounds()``, ``width``, ``height`` and ``sprite_variant``

        Returns:
            True when the beam touches an opaque part of the enemy sprite,
            or overlaps its box while no usable sprite data exists.
        """
        beam = projectile.bounds()
        box = enemy.bounds()
        if not _overlaps(beam, box):
            return False

        metrics = self.sprite_metrics.get(enemy.sprite_variant)
        if not metrics.loaded:
            return True

        try:
            return self._sample_overlap(beam, box, enemy, metrics)
        except Exception as e:
            self.fallback_hits += 1
            DebugLogger.warn(f"Pixel test failed for {enemy.sprite_variant}, using box hit: {e}",
                             category="collision")
            return True

    @staticmethod
    def _sample_overlap(beam, box, enemy, metrics) -> bool:
        display_w = int(enemy.width)
        display_h = int(enemy.height)
        if display_w <= 0 or display_h <= 0:
            raise ValueError(f"degenerate display size {enemy.width}x{enemy.height}")

        # Beam edges relative to the sprite's top-left corner
        left = beam[0] - box[0]
        right = beam[2] - box[0]
        top = beam[1] - box[1]
        bottom = beam[3] - box[1]

        x_start = math.floor(max(0.0, left))
        x_end = math.ceil(min(display_w, right))
        y_start = math.floor(max(0.0, top))
        y_end = math.ceil(min(display_h, bottom))

        scale_x = metrics.width / enemy.width
        scale_y = metrics.height / enemy.height
        max_nx = metrics.width - 1
        max_ny = metrics.height - 1

        for y in range(y_start, y_end):
            ny = min(int(y * scale_y), max_ny)
            for x in range(x_start, x_end):
                nx = min(int(x * scale_x), max_nx)
                if metrics.is_opaque_at(nx, ny):
                    return True
        return False

    # ===========================================================
    # Player vs Enemy
    # ===========================================================

    @staticmethod
    def distance(player, enemy) -> float:
        return player.pos.distance_to(enemy.pos)

    @staticmethod
    def contact_threshold(player, enemy) -> float:
        return player.width / 2 + enemy.width / 2

    def is_contact(self, player, enemy) -> bool:
        return self.distance(player, enemy) < self.contact_threshold(player, enemy)

    def is_proximate(self, player, enemy) -> bool:
        """Near miss: inside the proximity radius but not touching."""
        dist = self.distance(player, enemy)
        return self.contact_threshold(player, enemy) <= dist < CollisionSettings.PROXIMITY_RADIUS
