"""
Tests for the players package.
"""

import random
import sys
import os

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import UP, DOWN, LEFT, RIGHT, VALID_MOVES, GameStatus, GameSnapshot
from players import Player, RandomPlayer


def _snapshot(body, direction=RIGHT, board_size=10):
    return GameSnapshot(
        body=tuple(body),
        food=None,
        score=0,
        high_score=0,
        status=GameStatus.RUNNING,
        direction=direction,
        board_size=board_size,
        speed_level=3,
    )


class TestPlayer:
    """Tests for the Player base class."""

    def test_get_move_not_implemented(self):
        with pytest.raises(NotImplementedError):
            Player().get_move(_snapshot([(5, 5)]))


class TestRandomPlayer:
    """Tests for the RandomPlayer class."""

    def test_returns_valid_move(self):
        player = RandomPlayer(rng=random.Random(0))
        assert player.get_move(_snapshot([(5, 5), (4, 5)])) in VALID_MOVES

    def test_never_reverses(self):
        player = RandomPlayer(rng=random.Random(0))
        for _ in range(50):
            assert player.get_move(_snapshot([(5, 5), (4, 5)], direction=RIGHT)) != LEFT

    def test_avoids_walls_in_corner(self):
        """Snake in the top-left corner heading UP - only RIGHT is safe."""
        player = RandomPlayer(rng=random.Random(0))
        snapshot = _snapshot([(0, 0), (0, 1)], direction=UP)
        for _ in range(20):
            assert player.get_move(snapshot) == RIGHT

    def test_avoids_own_body_including_tail(self):
        # Heading LEFT at (5, 5): LEFT hits the tail (4, 5), DOWN hits (5, 6).
        player = RandomPlayer(rng=random.Random(0))
        snapshot = _snapshot([(5, 5), (5, 6), (4, 6), (4, 5)], direction=LEFT)
        for _ in range(20):
            assert player.get_move(snapshot) == UP

    def test_no_safe_move_keeps_heading(self):
        player = RandomPlayer(rng=random.Random(0))
        snapshot = _snapshot([(0, 0), (1, 0)], direction=LEFT, board_size=1)
        assert player.get_move(snapshot) == LEFT

    def test_seeded_players_agree(self):
        snapshot = _snapshot([(5, 5)], direction=DOWN)
        a = RandomPlayer(rng=random.Random(42))
        b = RandomPlayer(rng=random.Random(42))
        assert [a.get_move(snapshot) for _ in range(10)] == [b.get_move(snapshot) for _ in range(10)]
