"""
entity_state.py
---------------
Runtime state enumerations for swarm enemies.
"""

from enum import IntEnum


class EnemyBehavior(IntEnum):
    """
    Per-enemy swarm state machine.

      FORMATION  -> holds its slot (leader drives, followers trail)
      SCATTERING -> ballistic dispersal after a kill
      RETURNING  -> accelerating back to its slot behind the leader
    """
    FORMATION = 0
    SCATTERING = 1
    RETURNING = 2


class LeaderPhase(IntEnum):
    """
    Two-phase traversal used while an enemy leads the formation.

      ADVANCE -> push left across the field, plain vertical bouncing
      SWEEP   -> side-to-side sweep with dodge/homing vertical control
    """
    ADVANCE = 0
    SWEEP = 1
