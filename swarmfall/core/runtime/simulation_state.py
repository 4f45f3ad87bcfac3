"""
simulation_state.py
-------------------
The one container every system reads and mutates during a tick.

Responsibilities
----------------
- Hold the session counters, player, live projectiles and enemies.
- Hold the particle pool, starfield and the two timed transitions.
- Own the random source, event channel, sprite metrics and score manager
  so nothing in the simulation reaches for module-level state.
"""

import random
from dataclasses import dataclass, field
from typing import List

from swarmfall.core.debug.debug_logger import DebugLogger
from swarmfall.core.runtime.session_stats import Session
from swarmfall.core.services.event_manager import EventManager
from swarmfall.core.services.score_store import ScoreManager
from swarmfall.entities.enemy import Enemy
from swarmfall.entities.player import PlayerAgent
from swarmfall.entities.projectile import Projectile
from swarmfall.graphics.background_manager import Starfield
from swarmfall.graphics.particles.particle_manager import ParticleSystem
from swarmfall.systems.collision.sprite_metrics import SpriteMetricsRegistry
from swarmfall.systems.effects.transitions import LightspeedTransition, RespawnTransition


@dataclass
class SimulationState:
    session: Session
    player: PlayerAgent
    particles: ParticleSystem
    starfield: Starfield
    rng: random.Random
    score_manager: ScoreManager
    sprite_metrics: SpriteMetricsRegistry
    events: EventManager = field(default_factory=EventManager)
    lightspeed: LightspeedTransition = field(default_factory=LightspeedTransition)
    respawn: RespawnTransition = field(default_factory=RespawnTransition)
    projectiles: List[Projectile] = field(default_factory=list)
    enemies: List[Enemy] = field(default_factory=list)
    next_spawn_at: float = 0.0

    @classmethod
    def create(cls, seed=None, score_manager: ScoreManager = None,
               sprite_metrics: SpriteMetricsRegistry = None):
        """
        Build a fresh state at the start screen.

        Args:
            seed: Seed for the shared random source (None = nondeterministic)
            score_manager: High score persistence (in-memory when omitted)
            sprite_metrics: Sprite opacity registry (empty = box collisions)
        """
        rng = random.Random(seed)
        score_manager = score_manager or ScoreManager()
        state = cls(
            session=Session(high_score=score_manager.get_high_score()),
            player=PlayerAgent(),
            particles=ParticleSystem(rng),
            starfield=Starfield(rng),
            rng=rng,
            score_manager=score_manager,
            sprite_metrics=sprite_metrics or SpriteMetricsRegistry(),
        )
        DebugLogger.init_entry("SimulationState")
        return state

    @property
    def phase(self):
        return self.session.phase

    def clear_field(self):
        """Drop every entity, particle and in-flight transition."""
        self.respawn.cancel(self.enemies)
        self.lightspeed.cancel()
        self.projectiles.clear()
        self.enemies.clear()
        self.particles.clear()
        self.next_spawn_at = 0.0
