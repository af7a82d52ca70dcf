"""
Tests for config.py - EngineConfig validation and environment loading.
"""

import sys
import os

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import config as config_module
from config import EngineConfig, load_config, get_log_level
from domain import RIGHT, UP


@pytest.fixture(autouse=True)
def no_dotenv(monkeypatch):
    """Keep a developer's local .env out of the tests."""
    monkeypatch.setattr(config_module, "load_dotenv", lambda *args, **kwargs: False)
    for name in ("SNAKE_BOARD_SIZE", "SNAKE_SPEED_LEVEL", "SNAKE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


class TestEngineConfig:
    """Tests for EngineConfig."""

    def test_defaults(self):
        config = EngineConfig().validate()
        assert config.board_size == 20
        assert config.initial_body == ((8, 8), (7, 8), (6, 8))
        assert config.initial_direction == RIGHT
        assert config.initial_food is None
        assert config.speed_level == 3
        assert (config.min_speed_level, config.max_speed_level) == (1, 5)

    def test_lists_are_normalised_to_tuples(self):
        config = EngineConfig(initial_body=[[1, 1], [0, 1]], initial_food=[3, 3])
        assert config.initial_body == ((1, 1), (0, 1))
        assert config.initial_food == (3, 3)

    def test_direction_from_string(self):
        assert EngineConfig(initial_direction="up").initial_direction == UP

    @pytest.mark.parametrize("kwargs", [
        {"initial_body": ()},
        {"initial_body": ((20, 0),)},
        {"initial_body": ((1, 1), (1, 1))},
        {"initial_food": (8, 8)},
        {"initial_food": (-1, 3)},
        {"speed_level": 0},
        {"speed_level": 6},
        {"min_speed_level": 4, "max_speed_level": 2},
        {"board_size": 0},
    ])
    def test_invalid_configs(self, kwargs):
        with pytest.raises(ValueError):
            EngineConfig(**kwargs).validate()


class TestLoadConfig:
    """Tests for load_config and get_log_level."""

    def test_defaults_without_env(self):
        config = load_config()
        assert config.board_size == 20
        assert config.speed_level == 3

    def test_reads_env(self, monkeypatch):
        monkeypatch.setenv("SNAKE_BOARD_SIZE", "30")
        monkeypatch.setenv("SNAKE_SPEED_LEVEL", "5")
        config = load_config()
        assert config.board_size == 30
        assert config.speed_level == 5

    def test_small_board_recentres_snake(self, monkeypatch):
        monkeypatch.setenv("SNAKE_BOARD_SIZE", "6")
        config = load_config()
        assert config.initial_body == ((3, 3), (2, 3), (1, 3))

    def test_arguments_override_env(self, monkeypatch):
        monkeypatch.setenv("SNAKE_BOARD_SIZE", "30")
        monkeypatch.setenv("SNAKE_SPEED_LEVEL", "1")
        config = load_config(board_size=5, speed_level=4)
        assert config.board_size == 5
        assert config.speed_level == 4
        assert config.initial_body == ((2, 2), (1, 2), (0, 2))

    def test_non_positive_board_argument_rejected(self):
        with pytest.raises(ValueError):
            load_config(board_size=0)

    def test_non_integer_env_rejected(self, monkeypatch):
        monkeypatch.setenv("SNAKE_SPEED_LEVEL", "fast")
        with pytest.raises(ValueError):
            load_config()

    def test_log_level(self, monkeypatch):
        assert get_log_level() == "INFO"
        monkeypatch.setenv("SNAKE_LOG_LEVEL", "debug")
        assert get_log_level() == "DEBUG"
