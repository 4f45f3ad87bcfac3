"""
test_event_manager.py
---------------------
Tests for the per-simulation event channel.
"""

import pytest

from swarmfall.core.services.event_manager import (
    EventManager,
    GameOverEvent,
    PlayerHitEvent,
)


@pytest.fixture
def manager():
    return EventManager()


def test_dispatch_reaches_only_matching_subscribers(manager):
    hits, overs = [], []
    manager.subscribe(PlayerHitEvent, hits.append)
    manager.subscribe(GameOverEvent, overs.append)

    manager.dispatch(PlayerHitEvent(position=(1, 2), lives_left=2))

    assert hits == [PlayerHitEvent(position=(1, 2), lives_left=2)]
    assert overs == []


def test_duplicate_subscription_ignored(manager):
    seen = []
    manager.subscribe(PlayerHitEvent, seen.append)
    manager.subscribe(PlayerHitEvent, seen.append)
    assert manager.get_subscriber_count(PlayerHitEvent) == 1


def test_unsubscribe(manager):
    seen = []
    manager.subscribe(PlayerHitEvent, seen.append)
    manager.unsubscribe(PlayerHitEvent, seen.append)
    manager.unsubscribe(GameOverEvent, seen.append)
    manager.dispatch(PlayerHitEvent(position=(0, 0), lives_left=1))
    assert seen == []


def test_failing_subscriber_does_not_stop_others(manager):
    seen = []

    def broken(event):
        raise RuntimeError("boom")

    manager.subscribe(GameOverEvent, broken)
    manager.subscribe(GameOverEvent, seen.append)

    manager.dispatch(GameOverEvent(score=10, new_high_score=False))
    assert len(seen) == 1


def test_channels_are_independent():
    a, b = EventManager(), EventManager()
    seen = []
    a.subscribe(GameOverEvent, seen.append)
    b.dispatch(GameOverEvent(score=1, new_high_score=True))
    assert seen == []


def test_clear_all(manager):
    manager.subscribe(GameOverEvent, print)
    manager.subscribe(PlayerHitEvent, print)
    assert manager.get_subscriber_count() == 2
    manager.clear_all()
    assert manager.get_subscriber_count() == 0


def test_events_are_frozen():
    event = GameOverEvent(score=1, new_high_score=False)
    with pytest.raises(AttributeError):
        event.score = 2
