"""
game_loop.py
------------
Frame scheduler around the simulation clock.

Responsibilities
----------------
- Initialize pygame and open the window (interactive mode)
- Poll window events and build one InputSnapshot per frame
- Read the monotonic clock once per frame and tick the simulation
- Hand a RenderSnapshot to the optional renderer callback
- Run a fixed number of ticks without a window (headless mode)
"""

import pygame

from swarmfall.core.runtime.game_settings import Display, Physics
from swarmfall.core.runtime.simulation_clock import SimulationClock
from swarmfall.core.runtime.simulation_state import SimulationState
from swarmfall.core.services.input_manager import InputManager, InputSnapshot
from swarmfall.core.debug.debug_logger import DebugLogger
from swarmfall.graphics.render_snapshot import build_snapshot


BACKGROUND_COLOR = (10, 10, 10)


class GameLoop:
    """Core runtime controller for one simulation."""

    def __init__(self, state: SimulationState = None, renderer=None, sprite_paths: dict = None):
        """
        Args:
            state: Simulation to drive (fresh state when omitted)
            renderer: Optional ``callable(surface, snapshot)`` drawing a frame
            sprite_paths: Optional sprite variant -> image path for pixel collisions
        """
        DebugLogger.section("Initializing GameLoop")
        self.state = state or SimulationState.create()
        self.clock = SimulationClock(self.state)
        self.renderer = renderer
        self.input_manager = InputManager()
        self.running = False

        if sprite_paths:
            loaded = self.state.sprite_metrics.load_images(sprite_paths)
            DebugLogger.init_entry(f"Sprite metrics {loaded}/{len(sprite_paths)}")

    # ===========================================================
    # Interactive Loop
    # ===========================================================

    def run(self):
        """Open the window and run until it is closed."""
        pygame.init()
        screen = pygame.display.set_mode((Display.WIDTH, Display.HEIGHT))
        pygame.display.set_caption(Display.CAPTION)
        frame_clock = pygame.time.Clock()
        DebugLogger.init_entry("Pygame")

        DebugLogger.section("Game Loop")
        self.running = True
        try:
            while self.running:
                self._handle_events()
                if not self.running:
                    break

                snapshot = self.input_manager.snapshot()
                now_ms = pygame.time.get_ticks()
                self.clock.tick(now_ms, snapshot)

                screen.fill(BACKGROUND_COLOR)
                if self.renderer is not None:
                    self.renderer(screen, build_snapshot(self.state))
                pygame.display.flip()

                frame_clock.tick(Display.FPS)
        finally:
            pygame.quit()
            DebugLogger.system("Pygame terminated")

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                DebugLogger.action("Quit signal received")
                return

    # ===========================================================
    # Headless Loop
    # ===========================================================

    def run_headless(self, ticks: int, script=None, start_ms: float = 0.0):
        """
        Run ``ticks`` frames on a synthetic 60 Hz clock.

        Args:
            ticks: Number of frames to simulate
            script: Optional ``callable(tick_index) -> InputSnapshot``;
                    the default presses confirm on the first frame only
            start_ms: Clock value of the first frame

        Returns:
            RenderSnapshot of the final frame
        """
        DebugLogger.section(f"Headless run ({ticks} ticks)")
        for i in range(ticks):
            if script is not None:
                snapshot = script(i)
            else:
                snapshot = InputSnapshot(confirm=(i == 0))
            self.clock.tick(start_ms + i * Physics.FRAME_MS, snapshot)
        return build_snapshot(self.state)
