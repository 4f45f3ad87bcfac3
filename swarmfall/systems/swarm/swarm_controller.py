"""
swarm_controller.py
-------------------
Leader/follower swarm AI.

Responsibilities
----------------
- Drive the per-enemy behavior machine: FORMATION, SCATTERING, RETURNING.
- Steer the leader through its ADVANCE and SWEEP phases (vertical bounce,
  projectile dodge, homing toward the player).
- Snap followers to their slot behind the leader.
- Start scatter bursts when a swarm member is destroyed.
- Remove enemies while keeping exactly one leader and contiguous slots.

Behavior Flow
-------------
FORMATION --(kill nearby)--> SCATTERING --(duration over)--> RETURNING
    ^                                                            |
    +--------------------(within snap distance)------------------+
"""

import math
import random

import pygame

from swarmfall.core.debug.debug_logger import DebugLogger
from swarmfall.core.runtime.game_settings import Display, Bounds, Swarm
from swarmfall.entities.entity_state import EnemyBehavior, LeaderPhase


class SwarmController:
    """Moves every enemy of the swarm once per tick."""

    def __init__(self, rng: random.Random = None):
        self.rng = rng or random.Random()

    # ===========================================================
    # Queries
    # ===========================================================

    @staticmethod
    def find_leader(enemies):
        for enemy in enemies:
            if enemy.is_leader:
                return enemy
        return None

    @staticmethod
    def next_formation_index(enemies) -> int:
        """Slot for a newly spawned enemy; 0 (leader) when the swarm is empty."""
        if not enemies:
            return 0
        return max(e.formation_index for e in enemies) + 1

    # ===========================================================
    # Update
    # ===========================================================

    def update(self, enemies, player, projectiles, now):
        """
        Advance the whole swarm by one tick.

        The leader is resolved once before moving anyone; members are
        processed from the back of the list forward.
        """
        leader = self.find_leader(enemies)
        for enemy in reversed(enemies):
            self.update_enemy(enemy, leader, player, projectiles, now)

    def update_enemy(self, enemy, leader, player, projectiles, now):
        if enemy.behavior is EnemyBehavior.SCATTERING:
            if now - enemy.scatter_started_at < enemy.scatter_duration:
                self._scatter_step(enemy)
                return
            enemy.behavior = EnemyBehavior.RETURNING

        if enemy.behavior is EnemyBehavior.RETURNING:
            if self._return_step(enemy, leader):
                return

        if enemy.is_leader:
            if enemy.leader_phase is LeaderPhase.ADVANCE:
                self._advance_step(enemy)
            else:
                self._sweep_step(enemy, player, projectiles, now)
        elif leader is not None:
            enemy.pos.update(enemy.formation_slot(leader))

    # ===========================================================
    # Scatter & Return
    # ===========================================================

    @staticmethod
    def _scatter_step(enemy):
        inset = Bounds.FIELD_INSET
        max_x = Display.WIDTH - inset
        max_y = Display.HEIGHT - inset

        enemy.pos += enemy.scatter_velocity

        if enemy.pos.x < inset or enemy.pos.x > max_x:
            enemy.scatter_velocity.x *= -1
        if enemy.pos.y < inset or enemy.pos.y > max_y:
            enemy.scatter_velocity.y *= -1

        enemy.pos.x = max(inset, min(max_x, enemy.pos.x))
        enemy.pos.y = max(inset, min(max_y, enemy.pos.y))

    @staticmethod
    def _return_step(enemy, leader) -> bool:
        """Head back to the formation slot. Returns True while still travelling."""
        if leader is None:
            enemy.behavior = EnemyBehavior.FORMATION
            return False

        offset = enemy.formation_slot(leader) - enemy.pos
        dist = offset.length()
        if dist > Swarm.RETURN_SNAP_DISTANCE:
            enemy.pos += offset / dist * (enemy.speed * Swarm.RETURN_SPEED_MULT)
            return True

        enemy.behavior = EnemyBehavior.FORMATION
        return False

    def start_scatter(self, enemy, swarm, now):
        """
        Launch ``enemy`` on a random scatter heading.

        Every other member of ``swarm`` within the repel radius pushes the
        heading away from itself. Members sharing the exact same position
        are skipped since they give no direction.
        """
        rng = self.rng
        dur_lo, dur_hi = Swarm.SCATTER_DURATION_MS
        speed_lo, speed_hi = Swarm.SCATTER_SPEED

        enemy.behavior = EnemyBehavior.SCATTERING
        enemy.scatter_started_at = now
        enemy.scatter_duration = dur_lo + rng.random() * (dur_hi - dur_lo)

        angle = rng.random() * math.tau
        speed = speed_lo + rng.random() * (speed_hi - speed_lo)
        velocity = pygame.Vector2(math.cos(angle) * speed, math.sin(angle) * speed)

        for other in swarm:
            if other is enemy:
                continue
            delta = other.pos - enemy.pos
            dist = delta.length()
            if 0 < dist < Swarm.SCATTER_REPEL_RADIUS:
                velocity -= delta / dist * Swarm.SCATTER_REPEL_STRENGTH

        enemy.scatter_velocity = velocity

    def scatter(self, enemies, destroyed, now) -> int:
        """
        Scatter every survivor after ``destroyed`` is killed.

        ``destroyed`` is still part of ``enemies`` here and still repels its
        neighbours. Nothing happens for a lone enemy. Returns the number of
        enemies that scattered.
        """
        if len(enemies) <= 1:
            return 0
        count = 0
        for enemy in enemies:
            if enemy is destroyed:
                continue
            self.start_scatter(enemy, enemies, now)
            count += 1
        DebugLogger.trace(f"Swarm scatter x{count}", category="swarm")
        return count

    # ===========================================================
    # Leader Steering
    # ===========================================================

    @staticmethod
    def _advance_step(enemy):
        """Entry run: drift left with a clamped vertical bounce until the left inset."""
        inset = Bounds.FIELD_INSET
        max_y = Display.HEIGHT - inset

        enemy.pos.x -= enemy.speed
        enemy.pos.y += enemy.vertical_speed if enemy.moving_down else -enemy.vertical_speed

        if enemy.pos.y > max_y:
            enemy.moving_down = False
            enemy.pos.y = max_y
        if enemy.pos.y < inset:
            enemy.moving_down = True
            enemy.pos.y = inset

        if enemy.pos.x < inset:
            enemy.leader_phase = LeaderPhase.SWEEP
            enemy.moving_right = True

    def _sweep_step(self, enemy, player, projectiles, now):
        """Sweep the field horizontally; re-aim vertically whenever the cooldown expires."""
        inset = Bounds.FIELD_INSET

        if enemy.moving_right:
            enemy.pos.x += enemy.speed
            if enemy.pos.x > Display.WIDTH - inset:
                enemy.moving_right = False
        else:
            enemy.pos.x -= enemy.speed
            if enemy.pos.x < inset:
                enemy.moving_right = True

        if now - enemy.last_direction_change > enemy.direction_change_delay:
            self._choose_vertical(enemy, player, projectiles)
            low, high = Swarm.TURN_DELAY_MS
            enemy.last_direction_change = now
            enemy.direction_change_delay = low + self.rng.random() * (high - low)

        if enemy.moving_down:
            enemy.pos.y += enemy.vertical_speed
            if enemy.pos.y > Display.HEIGHT - inset:
                enemy.moving_down = False
        else:
            enemy.pos.y -= enemy.vertical_speed
            if enemy.pos.y < inset:
                enemy.moving_down = True

    @staticmethod
    def _choose_vertical(enemy, player, projectiles):
        # Dodge the first projectile inside the window, otherwise home on the player
        for projectile in projectiles:
            dx = projectile.pos.x - enemy.pos.x
            dy = projectile.pos.y - enemy.pos.y
            if abs(dx) < Swarm.DODGE_WINDOW_X and abs(dy) < Swarm.DODGE_WINDOW_Y:
                enemy.moving_down = dy < 0
                return

        to_player = player.pos.y - enemy.pos.y
        if abs(to_player) > Swarm.HOMING_DEADZONE:
            enemy.moving_down = to_player > 0

    # ===========================================================
    # Membership
    # ===========================================================

    @staticmethod
    def remove_enemy(enemies, enemy) -> bool:
        """
        Remove ``enemy`` from the swarm list.

        When the leader leaves, the member with the lowest slot is promoted
        (forced into SWEEP, moving right) and all slots are renumbered
        0..n-1 in slot order. Returns True when a promotion happened.
        """
        was_leader = enemy.is_leader
        enemies.remove(enemy)
        if not was_leader or not enemies:
            return False

        ordered = sorted(enemies, key=lambda e: e.formation_index)
        ordered[0].promote_to_leader()
        for index, member in enumerate(ordered):
            member.formation_index = index

        DebugLogger.action(f"Leader promoted: {ordered[0]!r}", category="swarm")
        return True
