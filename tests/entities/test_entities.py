"""
test_entities.py
----------------
Unit tests for the player, projectile and enemy entities.

Responsibilities
----------------
- Verify per-wave stat scaling.
- Verify player movement bounds, facing and auto-fire timing.
- Verify projectile motion and off-field detection.
- Verify enemy damage, formation slots and respawn transit paths.
"""

import math

import pytest

from swarmfall.core.runtime.game_settings import Display, PlayerDefaults
from swarmfall.core.services.input_manager import InputSnapshot
from swarmfall.entities.enemy import Enemy, Transit, scaled_health, scaled_speed, spawn_position
from swarmfall.entities.entity_state import EnemyBehavior, LeaderPhase
from swarmfall.entities.player import PlayerAgent
from swarmfall.entities.projectile import Projectile

from conftest import make_enemy


# ===========================================================
# Difficulty Curve
# ===========================================================

@pytest.mark.parametrize("group, speed, health", [
    (1, 1.5, 2),
    (2, 1.605, 3),          # ceil(2.2)
    (5, 1.5 * 1.07 ** 4, 3),  # ceil(2.9282)
    (8, 1.5 * 1.07 ** 7, 4),  # ceil(3.897...)
])
def test_stat_scaling(group, speed, health):
    assert scaled_speed(group) == pytest.approx(speed)
    assert scaled_health(group) == health


def test_enemy_uses_scaled_stats():
    enemy = make_enemy(500, 300, group=3)
    assert enemy.speed == pytest.approx(1.5 * 1.07 ** 2)
    assert enemy.health == enemy.max_health == math.ceil(2 * 1.1 ** 2)
    assert enemy.speed * 0.3 <= enemy.vertical_speed <= enemy.speed * 0.9
    assert 800 <= enemy.direction_change_delay <= 2000


def test_new_enemy_starts_in_formation_advancing():
    enemy = make_enemy(500, 300)
    assert enemy.behavior is EnemyBehavior.FORMATION
    assert enemy.leader_phase is LeaderPhase.ADVANCE
    assert enemy.transit is None
    assert (enemy.width, enemy.height) == (40, 40)


def test_spawn_position_inside_entry_band(rng):
    for _ in range(50):
        x, y = spawn_position(rng)
        assert x == Display.WIDTH + 50
        assert 100 <= y <= Display.HEIGHT - 100


# ===========================================================
# Enemy Behavior
# ===========================================================

def test_take_damage_reports_destruction():
    enemy = make_enemy(500, 300)
    assert enemy.take_damage() is False
    assert enemy.health == 1
    assert enemy.health_ratio == pytest.approx(0.5)
    assert enemy.take_damage() is True
    assert enemy.health == 0


def test_formation_slot_is_behind_leader():
    leader = make_enemy(300, 200, index=0)
    follower = make_enemy(0, 0, index=3)
    slot = follower.formation_slot(leader)
    assert (slot.x, slot.y) == (480, 200)


def test_promote_to_leader_forces_sweep_right():
    enemy = make_enemy(300, 200, index=2)
    enemy.promote_to_leader()
    assert enemy.is_leader
    assert enemy.leader_phase is LeaderPhase.SWEEP
    assert enemy.moving_right is True


def test_enemy_offscreen_only_past_cleanup_line():
    enemy = make_enemy(-50, 300)
    assert not enemy.is_offscreen()
    enemy.pos.x = -50.5
    assert enemy.is_offscreen()


def test_transit_interpolates_linearly():
    transit = Transit(0, 100, 400, 300)
    assert transit.point_at(0.0) == (0, 100)
    assert transit.point_at(0.5) == (200, 200)
    assert transit.point_at(1.0) == (400, 300)


def test_enemy_bounds_are_centered():
    enemy = Enemy(100, 200, 0, 1, 0, sprite_variant="ghost", sprite_size=(40, 20))
    assert enemy.bounds() == (80, 190, 120, 210)


# ===========================================================
# Player
# ===========================================================

def test_player_moves_and_faces_horizontal_input():
    player = PlayerAgent()
    assert player.move(InputSnapshot(left=True)) is True
    assert player.pos.x == PlayerDefaults.START_X - 5
    assert player.direction == -1

    assert player.move(InputSnapshot(right=True, up=True)) is True
    assert player.direction == 1
    assert player.pos.y == PlayerDefaults.START_Y - 5


def test_player_blocked_at_field_edge():
    player = PlayerAgent()
    player.pos.update(25, 25)
    assert player.move(InputSnapshot(left=True, up=True)) is False
    assert (player.pos.x, player.pos.y) == (25, 25)
    assert player.direction == 1


def test_player_idle_input_does_not_move():
    player = PlayerAgent()
    assert player.move(InputSnapshot()) is False


def test_fire_due_after_interval():
    player = PlayerAgent()
    player.last_fire_time = 1000
    assert not player.fire_due(1700)
    assert player.fire_due(1701)


@pytest.mark.parametrize("direction, expected_x, velocity", [
    (1, PlayerDefaults.START_X + 25, 8),
    (-1, PlayerDefaults.START_X - 25, -8),
])
def test_fire_spawns_at_ship_nose(direction, expected_x, velocity):
    player = PlayerAgent()
    player.direction = direction
    projectile = player.fire(5000)
    assert projectile.pos.x == expected_x
    assert projectile.pos.y == player.pos.y
    assert projectile.velocity == velocity
    assert player.last_fire_time == 5000


def test_reset_position_returns_to_start():
    player = PlayerAgent()
    player.pos.update(900, 10)
    player.reset_position()
    assert (player.pos.x, player.pos.y) == (PlayerDefaults.START_X, PlayerDefaults.START_Y)


# ===========================================================
# Projectile
# ===========================================================

def test_projectile_moves_and_leaves_field():
    projectile = Projectile(Display.WIDTH - 4, 100, 1)
    assert not projectile.is_offscreen()
    projectile.update()
    assert projectile.pos.x == Display.WIDTH + 4
    assert projectile.is_offscreen()

    backwards = Projectile(4, 100, -1)
    backwards.update()
    assert backwards.is_offscreen()


def test_projectile_bounds_start_at_left_edge():
    projectile = Projectile(100, 50, -1)
    assert projectile.bounds() == (100, 48, 130, 52)
    assert projectile.has_hit is False
