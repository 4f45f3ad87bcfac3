"""
test_headless_run.py
--------------------
End-to-end runs through GameLoop without opening a window.
"""

import json

import pygame
import pytest

from swarmfall.__main__ import main, sprite_paths_from_dir
from swarmfall.core.debug.debug_logger import LoggerConfig
from swarmfall.core.runtime.game_loop import GameLoop
from swarmfall.core.runtime.simulation_state import SimulationState
from swarmfall.core.services.input_manager import InputSnapshot
from swarmfall.core.services.score_store import ScoreManager


pytestmark = pytest.mark.integration


def test_one_minute_headless_run(score_manager):
    state = SimulationState.create(seed=3, score_manager=score_manager)
    snapshot = GameLoop(state).run_headless(3600)

    assert snapshot.phase in ("playing", "respawning", "game_over")
    assert snapshot.hud.total_shots > 0
    assert 0 <= snapshot.hud.lives <= 3
    assert snapshot.hud.score % 100 == 0
    assert state.particles.count <= 500
    leaders = [e for e in snapshot.enemies if e.is_leader]
    assert len(leaders) == (1 if snapshot.enemies else 0)


def test_scripted_restart_returns_to_start():
    state = SimulationState.create(seed=5, score_manager=ScoreManager())
    loop = GameLoop(state)

    def script(i):
        return InputSnapshot(confirm=(i == 0))

    loop.run_headless(1, script=script)
    state.session.lives = 1
    state.session.lose_life()
    snapshot = loop.run_headless(3, script=script, start_ms=16)

    assert snapshot.phase == "start"
    assert snapshot.hud.lives == 3


def test_cli_headless_prints_stats(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr(LoggerConfig, "LOG_LEVEL", LoggerConfig.LOG_LEVEL)
    scores = tmp_path / "scores.json"

    assert main(["--headless", "120", "--seed", "1", "--scores", str(scores), "--log-level", "NONE"]) == 0

    out = capsys.readouterr().out
    assert "phase=playing" in out
    assert "shots=" in out


def test_cli_no_save_leaves_disk_alone(tmp_path, monkeypatch):
    monkeypatch.setattr(LoggerConfig, "LOG_LEVEL", LoggerConfig.LOG_LEVEL)
    monkeypatch.chdir(tmp_path)
    assert main(["--headless", "10", "--no-save", "--log-level", "NONE"]) == 0
    assert list(tmp_path.iterdir()) == []


def test_cli_reads_existing_high_score(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr(LoggerConfig, "LOG_LEVEL", LoggerConfig.LOG_LEVEL)
    scores = tmp_path / "scores.json"
    scores.write_text(json.dumps({"swarmfallHighScore": json.dumps({"highScore": 4400, "lastPlayed": 0})}),
                      encoding="utf-8")

    main(["--headless", "5", "--scores", str(scores), "--log-level", "NONE"])

    assert "high_score=4400" in capsys.readouterr().out


def save_sprite(path, alpha):
    surface = pygame.Surface((8, 8), pygame.SRCALPHA)
    surface.fill((255, 255, 255, alpha))
    pygame.image.save(surface, str(path))


def test_sprite_dir_maps_existing_variants(tmp_path):
    save_sprite(tmp_path / "ghost.png", 255)
    save_sprite(tmp_path / "space.png", 255)

    paths = sprite_paths_from_dir(str(tmp_path))

    assert set(paths) == {"ghost", "space"}
    assert paths["ghost"] == str(tmp_path / "ghost.png")


def test_sprite_paths_reach_collision_registry(tmp_path):
    save_sprite(tmp_path / "black.png", 0)
    state = SimulationState.create(seed=2, score_manager=ScoreManager())

    GameLoop(state, sprite_paths=sprite_paths_from_dir(str(tmp_path)))

    metrics = state.sprite_metrics.get("black")
    assert metrics.loaded
    assert not metrics.is_opaque_at(4, 4)
    assert not state.sprite_metrics.is_loaded("ghost")


def test_cli_accepts_sprite_dir(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr(LoggerConfig, "LOG_LEVEL", LoggerConfig.LOG_LEVEL)
    save_sprite(tmp_path / "ghost.png", 255)

    assert main(["--headless", "5", "--no-save", "--sprites", str(tmp_path), "--log-level", "NONE"]) == 0
    assert "phase=playing" in capsys.readouterr().out
