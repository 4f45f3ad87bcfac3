"""
swarmfall/entities/__init__.py
------------------------------
Entity module exports.

Exports:
    PlayerAgent    - Player ship (movement, auto-fire)
    Projectile     - Laser beam fired by the player
    Enemy          - Swarm member with per-wave scaled stats
    Transit        - Respawn relocation path carried by an enemy
    EnemyBehavior  - FORMATION / SCATTERING / RETURNING
    LeaderPhase    - ADVANCE / SWEEP
"""

from swarmfall.entities.entity_state import EnemyBehavior, LeaderPhase
from swarmfall.entities.player import PlayerAgent
from swarmfall.entities.projectile import Projectile
from swarmfall.entities.enemy import Enemy, Transit

__all__ = [
    # States
    'EnemyBehavior',
    'LeaderPhase',
    # Entities
    'PlayerAgent',
    'Projectile',
    'Enemy',
    'Transit',
]
