"""
transitions.py
--------------
Timed, wall-clock driven sequences layered over gameplay.

Responsibilities
----------------
- LightspeedTransition: between-wave star acceleration curve.
- RespawnTransition: post-hit sequence that relocates the swarm away
  from the player and drives the player's flash alpha.

Both read the monotonic ``now`` handed to each tick and never the
system clock directly.
"""

import math
import random

from swarmfall.core.debug.debug_logger import DebugLogger
from swarmfall.core.runtime.game_settings import Display, Lightspeed, Respawn
from swarmfall.entities.enemy import Transit


# ===========================================================
# Lightspeed
# ===========================================================

class LightspeedTransition:
    """Star speed multiplier: ease-in to max, cruise, ease-out back to 1."""

    def __init__(self, duration_ms: float = Lightspeed.DURATION_MS):
        self.duration_ms = duration_ms
        self.active = False
        self.started_at = 0.0
        self.multiplier = 1.0

    def start(self, now: float):
        self.active = True
        self.started_at = now
        self.multiplier = 1.0
        DebugLogger.action("Lightspeed engaged", category="wave")

    def cancel(self):
        self.active = False
        self.multiplier = 1.0

    @staticmethod
    def curve(progress: float) -> float:
        """
        Multiplier at ``progress`` in [0, 1).

        0.0-0.4: quadratic ease-in from 1 to 20
        0.4-0.6: hold at 20
        0.6-1.0: quadratic ease-out from 20 back to 1
        """
        peak = Lightspeed.MAX_MULTIPLIER
        span = peak - 1
        if progress < Lightspeed.ACCEL_END:
            t = progress / Lightspeed.ACCEL_END
            return 1 + t * t * span
        if progress < Lightspeed.CRUISE_END:
            return peak
        q = (progress - Lightspeed.CRUISE_END) / (1 - Lightspeed.CRUISE_END)
        ease_out = 1 - (1 - q) * (1 - q)
        return peak - ease_out * span

    def update(self, now: float) -> float:
        """Advance the curve and return the current multiplier."""
        if not self.active:
            return self.multiplier

        progress = (now - self.started_at) / self.duration_ms
        if progress >= 1:
            self.active = False
            self.multiplier = 1.0
            return self.multiplier

        self.multiplier = self.curve(max(0.0, progress))
        return self.multiplier


# ===========================================================
# Respawn
# ===========================================================

class RespawnTransition:
    """
    Relocates enemies after the player loses a life.

    Each enemy carries a ``Transit`` (start, target) while the sequence
    runs; positions are interpolated linearly over the duration and the
    transit is cleared when the sequence ends or is cancelled.
    """

    def __init__(self, duration_ms: float = Respawn.DURATION_MS):
        self.duration_ms = duration_ms
        self.active = False
        self.started_at = 0.0
        self.flash_alpha = 1.0

    def start(self, now, player, enemies, rng: random.Random):
        self.active = True
        self.started_at = now
        self.flash_alpha = 1.0

        for enemy in enemies:
            target_x, target_y = self.pick_target(player.pos, rng)
            enemy.transit = Transit(enemy.pos.x, enemy.pos.y, target_x, target_y)

        DebugLogger.action(f"Respawn sequence: relocating {len(enemies)} enemies", category="session")

    @staticmethod
    def pick_target(player_pos, rng: random.Random):
        """
        Random point inside the target band at least the minimum distance
        from ``player_pos``.

        Sampling is capped; when every attempt lands too close, the farthest
        candidate seen is used.
        """
        min_x = Respawn.TARGET_MIN_X
        span_x = Display.WIDTH - Respawn.TARGET_RIGHT_MARGIN - min_x
        min_y = Respawn.TARGET_MARGIN_Y
        span_y = Display.HEIGHT - 2 * Respawn.TARGET_MARGIN_Y

        best = None
        best_dist = -1.0
        for _ in range(Respawn.MAX_PLACEMENT_ATTEMPTS):
            x = min_x + rng.random() * span_x
            y = min_y + rng.random() * span_y
            dist = math.hypot(x - player_pos.x, y - player_pos.y)
            if dist >= Respawn.MIN_ENEMY_DISTANCE:
                return x, y
            if dist > best_dist:
                best, best_dist = (x, y), dist

        DebugLogger.warn(f"Respawn placement fell back to farthest point ({best_dist:.0f})",
                         category="session")
        return best

    def update(self, now, enemies) -> bool:
        """
        Advance the sequence. Returns True on the tick it completes.
        """
        if not self.active:
            return False

        elapsed = now - self.started_at
        if elapsed < self.duration_ms:
            self.flash_alpha = abs(math.sin(elapsed / Respawn.FLASH_PERIOD_MS))
            progress = max(0.0, elapsed / self.duration_ms)
            for enemy in enemies:
                if enemy.transit is not None:
                    enemy.pos.update(enemy.transit.point_at(progress))
            return False

        for enemy in enemies:
            if enemy.transit is not None:
                enemy.pos.update(enemy.transit.target_x, enemy.transit.target_y)
        self.cancel(enemies)
        return True

    def cancel(self, enemies):
        """Stop the sequence and clear every in-flight transit."""
        self.active = False
        self.flash_alpha = 1.0
        for enemy in enemies:
            enemy.transit = None
