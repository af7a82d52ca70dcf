import argparse
import json
import logging
import random
from typing import Dict, Optional

from config import EngineConfig, load_config, get_log_level
from domain.game_state import GameSnapshot, GameStatus
from engine import GameEngine
from players import Player, RandomPlayer
from services.high_score_store import InMemoryHighScoreStore
from services.listeners import GameListener, LoggingListener
from services.scheduler import LoopScheduler

logger = logging.getLogger(__name__)


class PlayerDriver(GameListener):
    """
    Feeds a player's direction requests into the engine after every snapshot,
    the way a keyboard handler would between two ticks.
    """

    def __init__(self, engine: GameEngine, player: Player, show_board: bool = False):
        self.engine = engine
        self.player = player
        self.show_board = show_board

    def on_snapshot(self, snapshot: GameSnapshot) -> None:
        if snapshot.status != GameStatus.RUNNING:
            return
        if self.show_board:
            print("\n" + snapshot.print_board() + "\n")
        move = self.player.get_move(snapshot)
        if move is not None:
            self.engine.set_direction(move)


# -------------------------------
# Simulation Function
# -------------------------------

def run_simulation(
    config: EngineConfig,
    player: Player,
    max_ticks: Optional[int] = None,
    realtime: bool = False,
    show_board: bool = False,
    seed: Optional[int] = None,
    store: Optional[InMemoryHighScoreStore] = None
) -> Dict:
    """
    Runs a single headless game driven by `player`.

    Args:
        config: engine configuration
        player: input source choosing directions
        max_ticks: stop after this many ticks even if the snake is alive
        realtime: sleep for the tick interval between ticks
        show_board: print the board after every tick
        seed: seed for food placement
        store: high score store shared across runs

    Returns:
        The final snapshot as a JSON-friendly dict.
    """
    scheduler = LoopScheduler() if realtime else LoopScheduler(sleep=lambda _seconds: None)
    engine = GameEngine(
        config=config,
        scheduler=scheduler,
        high_score_store=store or InMemoryHighScoreStore(),
        listeners=[LoggingListener()],
        rng=random.Random(seed),
    )
    engine.listeners.append(PlayerDriver(engine, player, show_board=show_board))

    engine.start()
    scheduler.run(max_ticks=max_ticks)

    if engine.status == GameStatus.RUNNING:
        engine.pause()

    engine.print_board()

    return engine.snapshot().to_dict()


# -------------------------------
# Example Usage (Main Entry Point)
# -------------------------------
def main():
    parser = argparse.ArgumentParser(
        description="Run a headless snake game with an autopilot player."
    )
    parser.add_argument("--board_size", type=int, required=False, default=None,
                        help="Width and height of the board (default: SNAKE_BOARD_SIZE or 20)")
    parser.add_argument("--speed", type=int, required=False, default=None,
                        help="Speed level 1-5 (default: SNAKE_SPEED_LEVEL or 3)")
    parser.add_argument("--max_ticks", type=int, required=False, default=None,
                        help="Stop after this many ticks")
    parser.add_argument("--games", type=int, required=False, default=1,
                        help="Number of games to play in a row")
    parser.add_argument("--seed", type=int, required=False, default=None,
                        help="Random seed for food placement and the player")
    parser.add_argument("--realtime", action="store_true",
                        help="Wait the tick interval between ticks")
    parser.add_argument("--show_board", action="store_true",
                        help="Print the board after every tick")

    args = parser.parse_args()

    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    config = load_config(board_size=args.board_size, speed_level=args.speed)

    store = InMemoryHighScoreStore()
    results = []
    for i in range(args.games):
        seed = None if args.seed is None else args.seed + i
        result = run_simulation(
            config,
            RandomPlayer(rng=random.Random(seed)),
            max_ticks=args.max_ticks,
            realtime=args.realtime,
            show_board=args.show_board,
            seed=seed,
            store=store,
        )
        results.append(result)

    print("\nSimulation Result Summary:")
    print(json.dumps(results if len(results) > 1 else results[0], indent=2))


if __name__ == "__main__":
    main()
