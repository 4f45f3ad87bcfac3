"""
Level system exports.

Provides wave spawning and the encounter rules.
"""

from swarmfall.systems.level.wave_scheduler import WaveScheduler
from swarmfall.systems.level.encounter_director import EncounterDirector

__all__ = [
    'WaveScheduler',
    'EncounterDirector',
]
