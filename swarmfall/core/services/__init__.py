"""
Core services exports.

Provides configuration loading, the event channel, input snapshots and
high score persistence.
"""

from swarmfall.core.services.config_manager import load_config
from swarmfall.core.services.event_manager import (
    EventManager,
    BaseEvent,
    ShotFiredEvent,
    EnemyDamagedEvent,
    EnemyDestroyedEvent,
    WaveClearedEvent,
    PlayerHitEvent,
    HighScoreEvent,
    GameOverEvent,
)
from swarmfall.core.services.input_manager import InputManager, InputSnapshot
from swarmfall.core.services.score_store import (
    StorageError,
    ScoreStore,
    MemoryScoreStore,
    JsonFileScoreStore,
    ScoreManager,
)

__all__ = [
    # Config
    'load_config',
    # Events
    'EventManager',
    'BaseEvent',
    'ShotFiredEvent',
    'EnemyDamagedEvent',
    'EnemyDestroyedEvent',
    'WaveClearedEvent',
    'PlayerHitEvent',
    'HighScoreEvent',
    'GameOverEvent',
    # Input
    'InputManager',
    'InputSnapshot',
    # Persistence
    'StorageError',
    'ScoreStore',
    'MemoryScoreStore',
    'JsonFileScoreStore',
    'ScoreManager',
]
