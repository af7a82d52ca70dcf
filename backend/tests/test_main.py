"""
Tests for main.py - the headless autopilot runner.
"""

import json
import sys
import os
from unittest.mock import Mock, patch

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import config as config_module
from config import EngineConfig
from domain import DOWN, UP, RIGHT, GameStatus
from engine import GameEngine
from main import PlayerDriver, run_simulation, main
from players import RandomPlayer
from services.high_score_store import InMemoryHighScoreStore
from services.scheduler import ManualScheduler


class TestPlayerDriver:
    """Tests for the listener that feeds player moves into the engine."""

    def test_player_move_applied_before_next_tick(self):
        scheduler = ManualScheduler()
        engine = GameEngine(config=EngineConfig(initial_food=(15, 15)), scheduler=scheduler)
        player = Mock()
        player.get_move.return_value = DOWN
        engine.listeners.append(PlayerDriver(engine, player))

        engine.start()
        scheduler.fire()
        assert engine.body[0] == (8, 9)

    def test_player_not_asked_when_not_running(self):
        engine = GameEngine(scheduler=ManualScheduler())
        player = Mock()
        engine.listeners.append(PlayerDriver(engine, player))
        engine.reset()
        player.get_move.assert_not_called()

    def test_none_keeps_heading(self):
        scheduler = ManualScheduler()
        engine = GameEngine(config=EngineConfig(initial_food=(15, 15)), scheduler=scheduler)
        player = Mock()
        player.get_move.return_value = None
        engine.listeners.append(PlayerDriver(engine, player))
        engine.start()
        scheduler.fire()
        assert engine.body[0] == (9, 8)


class TestRunSimulation:
    """Tests for run_simulation."""

    def test_game_runs_to_completion(self):
        result = run_simulation(EngineConfig(board_size=10, initial_body=((3, 3), (2, 3))),
                                RandomPlayer(), seed=3, max_ticks=5000)
        assert result["status"] in ("game_over", "paused")
        assert result["tick_count"] > 0
        assert len(result["body"]) == 2 + result["score"]
        assert result["high_score"] >= result["score"]

    def test_max_ticks_pauses_the_game(self):
        player = Mock()
        player.get_move.return_value = None
        result = run_simulation(EngineConfig(initial_food=(15, 15)), player, max_ticks=3)
        assert result["status"] == "paused"
        assert result["tick_count"] == 3
        assert result["death_reason"] is None

    def test_wall_run_reports_reason(self):
        player = Mock()
        player.get_move.return_value = RIGHT
        result = run_simulation(EngineConfig(initial_food=(0, 0)), player)
        assert result["status"] == "game_over"
        assert result["death_reason"] == "wall"
        assert result["tick_count"] == 11

    def test_shared_store_keeps_high_score(self):
        store = InMemoryHighScoreStore(12)
        player = Mock()
        player.get_move.return_value = UP
        result = run_simulation(EngineConfig(initial_food=(0, 0)), player, store=store)
        assert result["high_score"] == 12


class TestMain:
    """Tests for the command line entry point."""

    def test_main_prints_summary(self, monkeypatch, capsys):
        monkeypatch.setattr(config_module, "load_dotenv", lambda *args, **kwargs: False)
        monkeypatch.delenv("SNAKE_BOARD_SIZE", raising=False)
        monkeypatch.delenv("SNAKE_SPEED_LEVEL", raising=False)
        with patch.object(sys, "argv", ["main.py", "--seed", "1", "--max_ticks", "20"]):
            main()

        out = capsys.readouterr().out
        summary = json.loads(out.split("Simulation Result Summary:")[1])
        assert summary["tick_count"] <= 20

    def test_main_small_board_recentres_snake(self, monkeypatch, capsys):
        monkeypatch.setattr(config_module, "load_dotenv", lambda *args, **kwargs: False)
        monkeypatch.delenv("SNAKE_BOARD_SIZE", raising=False)
        monkeypatch.delenv("SNAKE_SPEED_LEVEL", raising=False)
        with patch.object(sys, "argv", ["main.py", "--board_size", "5", "--max_ticks", "3", "--seed", "1"]):
            main()

        out = capsys.readouterr().out
        summary = json.loads(out.split("Simulation Result Summary:")[1])
        assert summary["board_size"] == 5
        assert summary["tick_count"] >= 1
        assert all(0 <= x < 5 and 0 <= y < 5 for x, y in summary["body"])

    def test_main_rejects_bad_speed(self, monkeypatch):
        monkeypatch.setattr(config_module, "load_dotenv", lambda *args, **kwargs: False)
        with patch.object(sys, "argv", ["main.py", "--speed", "9"]):
            with pytest.raises(ValueError):
                main()
