"""
Timed effect exports.

Provides the between-wave lightspeed curve and the post-hit respawn sequence.
"""

from swarmfall.systems.effects.transitions import LightspeedTransition, RespawnTransition

__all__ = [
    'LightspeedTransition',
    'RespawnTransition',
]
