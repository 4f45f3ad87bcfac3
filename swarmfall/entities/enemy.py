"""
enemy.py
--------
Swarm enemy entity.

Responsibilities
----------------
- Hold per-wave scaled stats (speed, health) and formation slot.
- Carry the swarm state machine fields (behavior, leader phase, scatter
  vector, vertical steering) that SwarmController drives.
- Carry the optional respawn transit target used by the encounter director.

Coordinate System
-----------------
``pos`` is the enemy center; the hit box is a width x height rectangle
centered on it.
"""

import math
import random
from dataclasses import dataclass
from typing import Optional

import pygame

from swarmfall.core.runtime.game_settings import Display, Bounds, EnemyDefaults, Swarm
from swarmfall.entities.entity_state import EnemyBehavior, LeaderPhase


# ===========================================================
# Difficulty Curve
# ===========================================================

def scaled_speed(group_number: int) -> float:
    """Enemy speed for a wave: base x 1.07^(g-1)."""
    return EnemyDefaults.BASE_SPEED * math.pow(EnemyDefaults.SPEED_GROWTH, group_number - 1)


def scaled_health(group_number: int) -> int:
    """Enemy health for a wave: ceil(base x 1.1^(g-1))."""
    return math.ceil(EnemyDefaults.BASE_HEALTH * math.pow(EnemyDefaults.HEALTH_GROWTH, group_number - 1))


@dataclass
class Transit:
    """Straight-line move from start to target used during the respawn sequence."""
    start_x: float
    start_y: float
    target_x: float
    target_y: float

    def point_at(self, progress: float):
        return (self.start_x + (self.target_x - self.start_x) * progress,
                self.start_y + (self.target_y - self.start_y) * progress)


# ===========================================================
# Enemy
# ===========================================================

class Enemy:
    """One member of the swarm."""

    __slots__ = (
        'pos', 'width', 'height', 'sprite_variant',
        'speed', 'health', 'max_health', 'group_number', 'formation_index',
        'behavior', 'leader_phase', 'moving_right', 'moving_down', 'vertical_speed',
        'last_direction_change', 'direction_change_delay',
        'scatter_started_at', 'scatter_duration', 'scatter_velocity',
        'transit',
    )

    def __init__(self, x: float, y: float, formation_index: int, group_number: int,
                 now: float, rng: random.Random = None, sprite_variant: str = None,
                 sprite_size=None):
        """
        Args:
            x, y: Center position
            formation_index: Slot behind the leader (0 = leader)
            group_number: Wave that spawned this enemy, drives stat scaling
            now: Monotonic time in ms, seeds the steering cooldown
            rng: Random source (module random when omitted)
            sprite_variant: Sprite key, picked at random when omitted
            sprite_size: (width, height) display size, default square
        """
        rng = rng or random
        self.pos = pygame.Vector2(x, y)
        self.sprite_variant = sprite_variant or rng.choice(EnemyDefaults.SPRITE_VARIANTS)
        self.width, self.height = sprite_size or (EnemyDefaults.WIDTH, EnemyDefaults.HEIGHT)

        self.group_number = group_number
        self.speed = scaled_speed(group_number)
        self.health = scaled_health(group_number)
        self.max_health = self.health
        self.formation_index = formation_index

        self.behavior = EnemyBehavior.FORMATION
        self.leader_phase = LeaderPhase.ADVANCE
        self.moving_right = False
        self.moving_down = rng.random() > 0.5
        self.vertical_speed = (self.speed * Swarm.VERTICAL_SPEED_MIN
                               + rng.random() * self.speed * Swarm.VERTICAL_SPEED_SPAN)

        low, high = Swarm.INITIAL_TURN_DELAY_MS
        self.last_direction_change = now
        self.direction_change_delay = low + rng.random() * (high - low)

        self.scatter_started_at = 0.0
        self.scatter_duration = 0.0
        self.scatter_velocity = pygame.Vector2(0, 0)

        self.transit: Optional[Transit] = None

    # ===========================================================
    # Queries
    # ===========================================================

    @property
    def is_leader(self) -> bool:
        return self.formation_index == 0

    @property
    def health_ratio(self) -> float:
        return self.health / self.max_health if self.max_health else 0.0

    def bounds(self):
        """Float bounds as (left, top, right, bottom)."""
        half_w = self.width / 2
        half_h = self.height / 2
        return (self.pos.x - half_w, self.pos.y - half_h,
                self.pos.x + half_w, self.pos.y + half_h)

    def is_offscreen(self) -> bool:
        return self.pos.x < Bounds.ENEMY_CLEANUP_X

    def formation_slot(self, leader: "Enemy") -> pygame.Vector2:
        """Position this enemy holds behind ``leader``."""
        return pygame.Vector2(leader.pos.x + self.formation_index * Swarm.FORMATION_SPACING,
                              leader.pos.y)

    # ===========================================================
    # Damage
    # ===========================================================

    def take_damage(self, amount: int = 1) -> bool:
        """Reduce health and return True when the enemy is destroyed."""
        self.health = max(0, self.health - amount)
        return self.health <= 0

    # ===========================================================
    # Leadership
    # ===========================================================

    def promote_to_leader(self):
        """Become the leader and continue in the sweep phase moving right."""
        self.formation_index = 0
        self.leader_phase = LeaderPhase.SWEEP
        self.moving_right = True

    def __repr__(self):
        return (f"Enemy(idx={self.formation_index}, g={self.group_number}, "
                f"hp={self.health}/{self.max_health}, {self.behavior.name}, "
                f"pos=({self.pos.x:.1f}, {self.pos.y:.1f}))")


def spawn_position(rng: random.Random):
    """Entry point just right of the field at a random height."""
    x = Display.WIDTH + Bounds.ENEMY_SPAWN_OFFSET
    y = Bounds.ENEMY_SPAWN_MARGIN_Y + rng.random() * (Display.HEIGHT - 2 * Bounds.ENEMY_SPAWN_MARGIN_Y)
    return x, y
