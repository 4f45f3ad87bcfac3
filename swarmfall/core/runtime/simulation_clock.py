"""
simulation_clock.py
-------------------
Runs one simulation tick in a fixed order.

Tick Order
----------
0. Confirm input (start / restart)
1. Starfield and lightspeed
2. Respawn sequence (only this while respawning)
3. Nothing more unless playing
4. Player movement and auto-fire
5. Wave spawner
6. Projectiles
7. Swarm movement and off-field cleanup
8. Player contact and near-miss sparkles
9. Projectile hits (also after a contact in the same tick)
10. Particle update
11. Particle cap

Every timer in the tick reads the single ``now_ms`` passed in.
"""

from swarmfall.core.debug.debug_logger import DebugLogger
from swarmfall.core.runtime.session_stats import SessionPhase
from swarmfall.core.services.input_manager import IDLE
from swarmfall.systems.level.encounter_director import EncounterDirector


class SimulationClock:
    """Drives a SimulationState forward one frame at a time."""

    def __init__(self, state, director: EncounterDirector = None):
        self.state = state
        self.director = director or EncounterDirector(state)
        self.tick_count = 0
        self.last_tick_ms = None

    def tick(self, now_ms: float, snapshot=IDLE):
        """
        Advance the simulation by one frame.

        Args:
            now_ms: Monotonic time in milliseconds, read once by the caller
            snapshot: InputSnapshot for this frame

        Returns:
            The session phase after the tick
        """
        if self.last_tick_ms is not None and now_ms < self.last_tick_ms:
            DebugLogger.warn(f"Clock went backwards ({self.last_tick_ms} -> {now_ms})", category="timing")
        self.last_tick_ms = now_ms
        self.tick_count += 1

        state = self.state
        director = self.director

        if snapshot.confirm:
            director.handle_confirm(now_ms)

        state.starfield.update(state.lightspeed.multiplier)
        state.lightspeed.update(now_ms)

        phase = state.session.phase
        if phase is SessionPhase.RESPAWNING:
            director.update_respawn(now_ms)
            return state.session.phase
        if phase is not SessionPhase.PLAYING:
            return phase

        director.update_player(now_ms, snapshot)
        director.spawn(now_ms)
        director.update_projectiles()
        director.update_enemies(now_ms)
        director.check_contact(now_ms)
        director.resolve_hits(now_ms)

        state.particles.update()
        state.particles.enforce_limit()

        return state.session.phase
