"""
conftest.py
-----------
Shared pytest configuration and fixtures for swarmfall tests.

Contains:
- Seeded simulation state factories
- Score store doubles (in-memory and always-failing)
- Sprite metrics doubles for the narrow collision phase
- Event recording helper
- Pytest configuration and hooks
"""

import os
import random

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from swarmfall.core.debug.debug_logger import LoggerConfig
from swarmfall.core.runtime.session_stats import SessionPhase
from swarmfall.core.runtime.simulation_clock import SimulationClock
from swarmfall.core.runtime.simulation_state import SimulationState
from swarmfall.core.services.event_manager import BaseEvent
from swarmfall.core.services.score_store import MemoryScoreStore, ScoreManager, ScoreStore, StorageError
from swarmfall.entities.enemy import Enemy
from swarmfall.entities.entity_state import LeaderPhase
from swarmfall.entities.projectile import Projectile
from swarmfall.systems.collision.sprite_metrics import SpriteMetrics
from swarmfall.systems.level.encounter_director import EncounterDirector


SEED = 1234


# ===========================================================
# Logging
# ===========================================================

@pytest.fixture(autouse=True)
def quiet_logger(monkeypatch):
    """Keep console output out of test reports."""
    monkeypatch.setattr(LoggerConfig, "ENABLE_LOGGING", False)


# ===========================================================
# Persistence Doubles
# ===========================================================

class FailingScoreStore(ScoreStore):
    """Store whose medium is always unavailable."""

    def __init__(self):
        self.get_calls = 0
        self.set_calls = 0

    def get(self, key):
        self.get_calls += 1
        raise StorageError("storage unavailable")

    def set(self, key, value):
        self.set_calls += 1
        raise StorageError("storage unavailable")


@pytest.fixture
def memory_store():
    return MemoryScoreStore()


@pytest.fixture
def failing_store():
    return FailingScoreStore()


@pytest.fixture
def score_manager(memory_store):
    return ScoreManager(memory_store, clock=lambda: 1700000000.0)


# ===========================================================
# Simulation Fixtures
# ===========================================================

@pytest.fixture
def rng():
    return random.Random(SEED)


@pytest.fixture
def state(score_manager):
    """Fresh state at the start screen with a seeded random source."""
    return SimulationState.create(seed=SEED, score_manager=score_manager)


@pytest.fixture
def playing_state(state):
    """State already in PLAYING with no spawns pending."""
    state.session.set_phase(SessionPhase.PLAYING)
    state.session.enemies_spawned_in_group = 5
    return state


@pytest.fixture
def director(state):
    return EncounterDirector(state)


@pytest.fixture
def clock(state):
    return SimulationClock(state)


@pytest.fixture
def events(state):
    """Every event dispatched on the state's channel, in order."""
    recorded = []

    def record(event):
        recorded.append(event)

    for event_type in BaseEvent.__subclasses__():
        state.events.subscribe(event_type, record)
    return recorded


# ===========================================================
# Entity Helpers
# ===========================================================

def make_enemy(x, y, index=0, group=1, now=0.0, variant="black", phase=None, size=None):
    """Enemy with a fixed sprite variant and a deterministic random source."""
    enemy = Enemy(x, y, formation_index=index, group_number=group, now=now,
                  rng=random.Random(index), sprite_variant=variant, sprite_size=size)
    if phase is not None:
        enemy.leader_phase = phase
    return enemy


def make_swarm(state, count, x=600.0, y=300.0, now=0.0, group=1):
    """Leader at (x, y) plus followers in their formation slots, added to ``state``."""
    members = [make_enemy(x + i * 60, y, index=i, group=group, now=now, phase=LeaderPhase.SWEEP)
               for i in range(count)]
    state.enemies.extend(members)
    return members


def beam_at(enemy, direction=1):
    """Projectile whose beam starts on the enemy's left half, vertically centered."""
    return Projectile(enemy.pos.x - 10, enemy.pos.y, direction)


def uniform_metrics(width=20, height=20, opaque=True):
    return SpriteMetrics(width, height, opacity=lambda x, y: opaque, loaded=True)


def exploding_metrics(width=20, height=20):
    def explode(x, y):
        raise IndexError("sample outside sprite")
    return SpriteMetrics(width, height, opacity=explode, loaded=True)


# ===========================================================
# Pytest Configuration
# ===========================================================

def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "scenario: multi-step gameplay scenarios")


def pytest_collection_modifyitems(config, items):
    """Add the unit marker to everything not explicitly marked integration."""
    for item in items:
        if "integration" not in item.keywords:
            item.add_marker(pytest.mark.unit)
