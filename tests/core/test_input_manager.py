"""
test_input_manager.py
---------------------
Tests for key-table sampling and the edge-triggered confirm.
"""

from collections import defaultdict

import pygame

from swarmfall.core.services.input_manager import IDLE, InputManager, InputSnapshot


def keys_down(*codes):
    table = defaultdict(bool)
    for code in codes:
        table[code] = True
    return table


def test_idle_snapshot():
    assert IDLE == InputSnapshot()
    assert not IDLE.moving


def test_arrows_and_wasd_both_move():
    manager = InputManager()
    snap = manager.snapshot(keys_down(pygame.K_UP, pygame.K_d))
    assert snap.up and snap.right
    assert not snap.down and not snap.left
    assert snap.moving


def test_confirm_is_edge_triggered():
    manager = InputManager()
    assert manager.snapshot(keys_down(pygame.K_SPACE)).confirm is True
    assert manager.snapshot(keys_down(pygame.K_SPACE)).confirm is False
    assert manager.snapshot(keys_down()).confirm is False
    assert manager.snapshot(keys_down(pygame.K_RETURN)).confirm is True


def test_reset_rearms_confirm():
    manager = InputManager()
    manager.snapshot(keys_down(pygame.K_SPACE))
    manager.reset()
    assert manager.snapshot(keys_down(pygame.K_SPACE)).confirm is True


def test_custom_bindings():
    manager = InputManager({
        "move_up": [pygame.K_i],
        "move_down": [pygame.K_k],
        "move_left": [pygame.K_j],
        "move_right": [pygame.K_l],
        "confirm": [pygame.K_p],
    })
    assert manager.snapshot(keys_down(pygame.K_UP)).up is False
    assert manager.snapshot(keys_down(pygame.K_i)).up is True


def test_missing_action_never_fires():
    manager = InputManager({"confirm": [pygame.K_SPACE]})
    snap = manager.snapshot(keys_down(pygame.K_UP, pygame.K_SPACE))
    assert not snap.moving
    assert snap.confirm
