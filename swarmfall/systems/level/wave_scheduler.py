"""
wave_scheduler.py
-----------------
Spawns the enemies each wave requests, one at a time.

Responsibilities
----------------
- Release up to ``Waves.ENEMIES_PER_WAVE`` enemies per wave, spaced by the
  spawn delay and gated by ``state.next_spawn_at``.
- Place new enemies just right of the field at a random height.
- Size enemies from their sprite metrics when those are loaded.
- Hold the next wave back until lightspeed has finished.
"""

from swarmfall.core.debug.debug_logger import DebugLogger
from swarmfall.core.runtime.game_settings import EnemyDefaults, Lightspeed, Waves
from swarmfall.entities.enemy import Enemy, spawn_position
from swarmfall.systems.swarm.swarm_controller import SwarmController


class WaveScheduler:
    """Handles spawn timing for the current wave."""

    def __init__(self, state):
        self.state = state

    @property
    def wave_complete_spawning(self) -> bool:
        return self.state.session.enemies_spawned_in_group >= Waves.ENEMIES_PER_WAVE

    def update(self, now):
        """Spawn the next enemy when one is owed and the gate is open. Returns it or None."""
        state = self.state
        if self.wave_complete_spawning or now < state.next_spawn_at:
            return None

        enemy = self.spawn_enemy(now)
        state.session.enemies_spawned_in_group += 1
        state.next_spawn_at = now + Waves.SPAWN_DELAY_MS
        return enemy

    def spawn_enemy(self, now) -> Enemy:
        state = self.state
        rng = state.rng

        variant = rng.choice(EnemyDefaults.SPRITE_VARIANTS)
        metrics = state.sprite_metrics.get(variant)
        size = metrics.display_size() if metrics.loaded else None

        x, y = spawn_position(rng)
        enemy = Enemy(
            x, y,
            formation_index=SwarmController.next_formation_index(state.enemies),
            group_number=state.session.group_index,
            now=now,
            rng=rng,
            sprite_variant=variant,
            sprite_size=size,
        )
        state.enemies.append(enemy)
        DebugLogger.trace(f"Spawned {enemy!r}", category="wave")
        return enemy

    def hold_for_lightspeed(self, now):
        """Delay the next wave until lightspeed plus a short buffer has passed."""
        self.state.next_spawn_at = now + Lightspeed.DURATION_MS + Waves.POST_WAVE_BUFFER_MS

    def requeue_escaped(self, count: int = 1):
        """Let the wave spawn replacements for enemies that left the field."""
        session = self.state.session
        session.enemies_spawned_in_group = max(0, session.enemies_spawned_in_group - count)
