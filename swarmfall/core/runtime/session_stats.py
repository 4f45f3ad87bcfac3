"""
session_stats.py
----------------
Counters and phase for one playthrough.

Responsibilities
----------------
- Track score, lives, wave index and per-wave spawn/defeat counters.
- Own the session phase (START, PLAYING, RESPAWNING, GAME_OVER).
- Keep shot/hit totals and the derived accuracy for end-of-run display.
- Remember the high score across restarts.
"""

from enum import Enum

from swarmfall.core.debug.debug_logger import DebugLogger
from swarmfall.core.runtime.game_settings import Session as SessionDefaults


class SessionPhase(Enum):
    """Top-level state machine of a run."""
    START = "start"
    PLAYING = "playing"
    RESPAWNING = "respawning"
    GAME_OVER = "game_over"


# ===========================================================
# Session
# ===========================================================

class Session:
    """Mutable per-run state. ``reset()`` starts a new run and keeps the high score."""

    def __init__(self, high_score: int = 0):
        self.high_score = high_score
        self.phase = SessionPhase.START
        self.reset()

    # ===========================================================
    # Scoring
    # ===========================================================

    def add_score(self, amount: int) -> int:
        """Add points and return the new score."""
        self.score += amount
        return self.score

    def record_shot(self):
        self.total_shots += 1

    def record_hit(self):
        self.total_hits += 1

    @property
    def accuracy(self) -> float:
        """Hit percentage, 0 when nothing was fired."""
        if self.total_shots == 0:
            return 0.0
        return self.total_hits / self.total_shots * 100

    # ===========================================================
    # Lives
    # ===========================================================

    def lose_life(self) -> int:
        """
        Remove one life, never going below zero.

        Moves the phase to GAME_OVER when the last life is gone and
        returns the remaining lives.
        """
        self.lives = max(0, self.lives - 1)
        if self.lives == 0:
            self.set_phase(SessionPhase.GAME_OVER)
        return self.lives

    # ===========================================================
    # Waves
    # ===========================================================

    def advance_group(self):
        """Move to the next wave and clear the per-wave counters."""
        self.group_index += 1
        self.enemies_defeated_in_group = 0
        self.enemies_spawned_in_group = 0

    # ===========================================================
    # Phase
    # ===========================================================

    def set_phase(self, phase: SessionPhase):
        if phase is self.phase:
            return
        DebugLogger.state(f"Phase {self.phase.name} -> {phase.name}")
        self.phase = phase

    @property
    def is_playing(self) -> bool:
        return self.phase is SessionPhase.PLAYING

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def reset(self):
        """Reset all counters for a new run. Preserves the high score."""
        self.score = 0
        self.lives = SessionDefaults.STARTING_LIVES
        self.group_index = 1
        self.enemies_defeated_in_group = 0
        self.enemies_spawned_in_group = 0
        self.total_shots = 0
        self.total_hits = 0
        self.confetti_spawned = False
