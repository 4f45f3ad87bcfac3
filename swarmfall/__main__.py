"""
__main__.py
-----------
Command line entry point: ``python -m swarmfall``.

Usage:
    python -m swarmfall                      # open the game window
    python -m swarmfall --headless 3600      # simulate one minute, print stats
    python -m swarmfall --headless 600 --seed 7 --log-level VERBOSE
    python -m swarmfall --sprites assets/enemies  # pixel-accurate hits from sprite alpha
"""

import argparse
import os
import sys

from swarmfall.core.debug.debug_logger import DebugLogger
from swarmfall.core.runtime.game_loop import GameLoop
from swarmfall.core.runtime.game_settings import EnemyDefaults, Persistence
from swarmfall.core.runtime.simulation_state import SimulationState
from swarmfall.core.services.config_manager import load_config
from swarmfall.core.services.score_store import JsonFileScoreStore, MemoryScoreStore, ScoreManager


LOGGING_DEFAULTS = {"enabled": True, "level": "INFO", "categories": {}}


def sprite_paths_from_dir(directory):
    """Map each enemy sprite variant to ``<directory>/<variant>.png`` when that file exists."""
    paths = {}
    for variant in EnemyDefaults.SPRITE_VARIANTS:
        path = os.path.join(directory, f"{variant}.png")
        if os.path.isfile(path):
            paths[variant] = path
        else:
            DebugLogger.warn(f"No sprite for '{variant}' in {directory}", category="loading")
    return paths


def configure_logging(level_override=None):
    """Apply config/logging.json, then the command line level if given."""
    cfg = load_config("logging.json", LOGGING_DEFAULTS)
    DebugLogger.configure(
        level=level_override or cfg.get("level"),
        categories=cfg.get("categories"),
        enabled=cfg.get("enabled"),
    )


def build_parser():
    parser = argparse.ArgumentParser(prog="swarmfall", description="Swarmfall arcade shooter simulation")
    parser.add_argument("--headless", type=int, metavar="TICKS",
                        help="Run TICKS frames without a window and print the final stats")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the simulation's random source")
    parser.add_argument("--scores", default=Persistence.DEFAULT_PATH,
                        help="High score file (default: %(default)s)")
    parser.add_argument("--no-save", action="store_true",
                        help="Keep the high score in memory only")
    parser.add_argument("--sprites", metavar="DIR",
                        help="Directory with black.png, ghost.png and space.png for pixel-accurate hits")
    parser.add_argument("--log-level", choices=["NONE", "ERROR", "WARN", "INFO", "VERBOSE"],
                        help="Override the configured log level")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    store = MemoryScoreStore() if args.no_save else JsonFileScoreStore(args.scores)
    state = SimulationState.create(seed=args.seed, score_manager=ScoreManager(store))
    sprite_paths = sprite_paths_from_dir(args.sprites) if args.sprites else None
    loop = GameLoop(state, sprite_paths=sprite_paths)

    if args.headless is None:
        loop.run()
        return 0

    snapshot = loop.run_headless(args.headless)
    hud = snapshot.hud
    print(f"phase={snapshot.phase} score={hud.score} lives={hud.lives} wave={hud.group} "
          f"high_score={hud.high_score} shots={hud.total_shots} hits={hud.total_hits} "
          f"accuracy={hud.accuracy:.1f}%")
    return 0


if __name__ == "__main__":
    sys.exit(main())
