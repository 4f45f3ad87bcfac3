"""
Collision system exports.

Provides two-phase projectile hit tests and sprite opacity lookups.
"""

from swarmfall.systems.collision.collision_manager import CollisionEngine
from swarmfall.systems.collision.sprite_metrics import SpriteMetrics, SpriteMetricsRegistry

__all__ = [
    'CollisionEngine',
    'SpriteMetrics',
    'SpriteMetricsRegistry',
]
