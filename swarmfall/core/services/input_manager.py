"""
input_manager.py
----------------
Keyboard adapter that turns pygame key state into input snapshots.

Provides:
- Action-based key bindings (arrows or WASD to move, space/enter to confirm)
- Level-triggered movement flags
- Edge-triggered confirm (true only on the frame the key goes down)
"""

from dataclasses import dataclass

import pygame

from swarmfall.core.debug.debug_logger import DebugLogger


# ===========================================================
# Snapshot
# ===========================================================

@dataclass(frozen=True)
class InputSnapshot:
    """Everything the simulation reads from the player for one tick."""
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    confirm: bool = False

    @property
    def moving(self) -> bool:
        return self.up or self.down or self.left or self.right


IDLE = InputSnapshot()


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    "move_up": [pygame.K_UP, pygame.K_w],
    "move_down": [pygame.K_DOWN, pygame.K_s],
    "move_left": [pygame.K_LEFT, pygame.K_a],
    "move_right": [pygame.K_RIGHT, pygame.K_d],
    "confirm": [pygame.K_SPACE, pygame.K_RETURN],
}


class InputManager:
    """
    Builds one InputSnapshot per frame from the pressed-key table.

    Usage:
        snapshot = input_manager.snapshot()           # reads pygame.key.get_pressed()
        snapshot = input_manager.snapshot(fake_keys)  # any table indexable by key code
    """

    def __init__(self, key_bindings=None):
        self.key_bindings = {action: tuple(keys)
                             for action, keys in (key_bindings or DEFAULT_KEY_BINDINGS).items()}
        missing = set(DEFAULT_KEY_BINDINGS) - set(self.key_bindings)
        if missing:
            DebugLogger.warn(f"Unbound actions: {sorted(missing)}", category="input")
        self._confirm_was_held = False
        DebugLogger.init_entry("InputManager")

    def _held(self, keys, action) -> bool:
        return any(keys[k] for k in self.key_bindings.get(action, ()))

    def snapshot(self, keys=None) -> InputSnapshot:
        """
        Sample the key table once.

        Args:
            keys: Pressed-key table; defaults to ``pygame.key.get_pressed()``

        Returns:
            InputSnapshot with ``confirm`` set only on the rising edge
        """
        if keys is None:
            keys = pygame.key.get_pressed()

        confirm_held = self._held(keys, "confirm")
        confirm = confirm_held and not self._confirm_was_held
        self._confirm_was_held = confirm_held
        if confirm:
            DebugLogger.trace("Confirm pressed", category="input")

        return InputSnapshot(
            up=self._held(keys, "move_up"),
            down=self._held(keys, "move_down"),
            left=self._held(keys, "move_left"),
            right=self._held(keys, "move_right"),
            confirm=confirm,
        )

    def reset(self):
        """Forget the previous confirm state so the next press counts as an edge."""
        self._confirm_was_held = False
