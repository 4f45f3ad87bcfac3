"""
Runtime configuration exports.

Provides simulation-wide constants and the session state machine. All
exports are lightweight with no initialization overhead; the clock, state
and loop are imported from their own modules.
"""

from swarmfall.core.runtime.game_settings import (
    Display,
    Physics,
    Bounds,
    PlayerDefaults,
    ProjectileDefaults,
    EnemyDefaults,
    Swarm,
    Waves,
    Lightspeed,
    Respawn,
    ParticleLimits,
    Starfield,
    CollisionSettings,
    Colors,
    Persistence,
)
from swarmfall.core.runtime.session_stats import Session, SessionPhase

__all__ = [
    # Field & Timing
    'Display',
    'Physics',
    'Bounds',
    # Entities
    'PlayerDefaults',
    'ProjectileDefaults',
    'EnemyDefaults',
    # Encounter
    'Swarm',
    'Waves',
    'Lightspeed',
    'Respawn',
    # Effects & Collision
    'ParticleLimits',
    'Starfield',
    'CollisionSettings',
    'Colors',
    # Persistence
    'Persistence',
    # Session
    'Session',
    'SessionPhase',
]
