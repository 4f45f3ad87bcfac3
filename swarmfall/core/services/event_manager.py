"""
event_manager.py
----------------
Pub/sub channel the simulation uses to announce gameplay events to
outside collaborators (HUD, audio, persistence, tests).

Each SimulationState owns its own EventManager, so two simulations never
share subscribers.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Type
from swarmfall.core.debug.debug_logger import DebugLogger


# ===========================================================
# Event Definitions
# ===========================================================

@dataclass(frozen=True)
class BaseEvent:
    """Base class for all events."""
    pass


@dataclass(frozen=True)
class ShotFiredEvent(BaseEvent):
    """A projectile left the player's weapon."""
    position: tuple
    direction: int
    chained: bool = False


@dataclass(frozen=True)
class EnemyDamagedEvent(BaseEvent):
    """An enemy survived a hit."""
    position: tuple
    health: int


@dataclass(frozen=True)
class EnemyDestroyedEvent(BaseEvent):
    """An enemy reached zero health."""
    position: tuple
    group_number: int
    points: int
    was_leader: bool


@dataclass(frozen=True)
class WaveClearedEvent(BaseEvent):
    """Every enemy requested by a wave was defeated."""
    cleared_group: int
    next_group: int


@dataclass(frozen=True)
class PlayerHitEvent(BaseEvent):
    """An enemy touched the player."""
    position: tuple
    lives_left: int


@dataclass(frozen=True)
class HighScoreEvent(BaseEvent):
    """The running score passed the recorded high score for the first time."""
    score: int
    previous: int


@dataclass(frozen=True)
class GameOverEvent(BaseEvent):
    """The last life was lost."""
    score: int
    new_high_score: bool


# ===========================================================
# Event Manager
# ===========================================================

class EventManager:
    """Central event dispatcher using pub-sub pattern."""

    def __init__(self):
        self._subscribers: Dict[Type[BaseEvent], List[Callable]] = {}

    # ===========================================================
    # Subscription
    # ===========================================================

    def subscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """
        Register a callback for an event type.

        Args:
            event_type: Event class to listen for
            callback: Function to call when event fires
        """
        callbacks = self._subscribers.setdefault(event_type, [])
        if callback in callbacks:
            return

        callbacks.append(callback)
        callback_name = getattr(callback, '__name__', repr(callback))
        DebugLogger.system(
            f"Subscribed '{callback_name}' to '{event_type.__name__}'",
            category="events"
        )

    def unsubscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """Remove a callback from an event type."""
        if event_type in self._subscribers:
            try:
                self._subscribers[event_type].remove(callback)
            except ValueError:
                pass

    # ===========================================================
    # Dispatch
    # ===========================================================

    def dispatch(self, event: BaseEvent) -> None:
        """
        Send event to all registered callbacks.

        A failing subscriber is logged and skipped; the tick that raised
        the event keeps running.
        """
        callbacks = self._subscribers.get(type(event))
        if not callbacks:
            return

        for callback in list(callbacks):
            try:
                callback(event)
            except Exception as e:
                callback_name = getattr(callback, '__name__', repr(callback))
                DebugLogger.warn(f"Error in event callback {callback_name}: {e}")

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def clear_all(self) -> None:
        """Remove all subscribers."""
        self._subscribers.clear()

    def get_subscriber_count(self, event_type: Type[BaseEvent] = None) -> int:
        """Count subscribers for one event type, or all of them."""
        if event_type:
            return len(self._subscribers.get(event_type, []))
        return sum(len(subs) for subs in self._subscribers.values())
