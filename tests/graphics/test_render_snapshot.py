"""
test_render_snapshot.py
-----------------------
Tests for the read-only frame views handed to renderers.
"""

import dataclasses

import pytest

from swarmfall.core.runtime.session_stats import SessionPhase
from swarmfall.entities.projectile import Projectile
from swarmfall.graphics.render_snapshot import build_snapshot

from conftest import make_swarm


def test_snapshot_copies_field(playing_state):
    state = playing_state
    make_swarm(state, 2)
    state.projectiles.append(Projectile(200, 300, 1))
    state.particles.spawn_explosion(10, 10, "#FFFFFF")
    state.session.score = 300
    state.session.high_score = 900

    snap = build_snapshot(state)

    assert snap.phase == "playing"
    assert snap.lightspeed_multiplier == 1.0
    assert [e.is_leader for e in snap.enemies] == [True, False]
    assert snap.enemies[0].behavior == "FORMATION"
    assert snap.enemies[0].health_ratio == 1.0
    assert snap.projectiles[0].x == 200
    assert len(snap.particles) == 20
    assert snap.particles[0].kind == "explosion"
    assert len(snap.stars) == 100
    assert (snap.hud.score, snap.hud.high_score, snap.hud.lives) == (300, 900, 3)


def test_snapshot_is_detached_from_state(playing_state):
    state = playing_state
    enemy = make_swarm(state, 1)[0]
    snap = build_snapshot(state)

    enemy.pos.x += 100
    assert snap.enemies[0].x == 600

    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.hud.score = 5


def test_player_flash_during_respawn(playing_state):
    state = playing_state
    state.session.set_phase(SessionPhase.RESPAWNING)
    state.respawn.start(0, state.player, state.enemies, state.rng)
    state.respawn.update(50, state.enemies)
    snap = build_snapshot(state)
    assert snap.phase == "respawning"
    assert 0 <= snap.player.alpha <= 1
