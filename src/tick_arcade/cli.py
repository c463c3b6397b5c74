"""CLI for headless tic-tac-toe tournaments and snake autopilot runs."""

from __future__ import annotations

import argparse
import logging
import sys

import numpy as np

logger = logging.getLogger(__name__)

_SPEED_CHOICES = {
    "slow": "SLOW",
    "normal": "NORMAL",
    "fast": "FAST",
    "very-fast": "VERY_FAST",
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tick-arcade",
        description="Headless runs of the snake and auto tic-tac-toe engines.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- tournament ---
    tour_p = sub.add_parser(
        "tournament", help="Let the tic-tac-toe agents play N games.",
    )
    tour_p.add_argument("--games", type=int, default=10)
    tour_p.add_argument(
        "--speed", choices=sorted(_SPEED_CHOICES), default="normal",
        help="Recorded playback speed (headless runs do not sleep).",
    )
    tour_p.add_argument("--seed", type=int, default=None)
    tour_p.add_argument(
        "--show-boards", action="store_true",
        help="Print every finished board.",
    )

    # --- snake ---
    snake_p = sub.add_parser(
        "snake", help="Run a snake game with a random autopilot.",
    )
    snake_p.add_argument("--max-ticks", type=int, default=500)
    snake_p.add_argument("--grid-size", type=int, default=None)
    snake_p.add_argument("--seed", type=int, default=None)

    return parser


def _run_tournament(args: argparse.Namespace) -> int:
    from tick_arcade.config import GameSpeed, TicTacToeConfig
    from tick_arcade.render import render_board
    from tick_arcade.tictactoe.board import GameStatus
    from tick_arcade.tictactoe.engine import TicTacToeEngine

    if args.games < 1:
        print("--games must be at least 1.")  # noqa: T201
        return 2

    config = TicTacToeConfig(speed=GameSpeed[_SPEED_CHOICES[args.speed]])
    engine = TicTacToeEngine(config, seed=args.seed)
    if args.show_boards:
        def _print_finished(snapshot):
            if snapshot.status is not GameStatus.PLAYING:
                print(render_board(snapshot) + "\n")  # noqa: T201

        engine.subscribe(_print_finished)

    while engine.stats.games_played < args.games:
        engine.advance()

    stats = engine.stats
    print(  # noqa: T201
        f"Tournament: {stats.games_played} games | "
        f"X {stats.x_wins} | O {stats.o_wins} | draws {stats.draws}"
    )
    return 0


def _run_snake(args: argparse.Namespace) -> int:
    from tick_arcade.config import SnakeConfig
    from tick_arcade.engine import SnakeEngine
    from tick_arcade.render import render_snake
    from tick_arcade.snake import Direction

    config = (
        SnakeConfig(grid_size=args.grid_size)
        if args.grid_size is not None else SnakeConfig()
    )
    engine = SnakeEngine(config, seed=args.seed)
    rng = np.random.default_rng(args.seed)
    directions = list(Direction)

    for _ in range(args.max_ticks):
        # Mostly keep heading; occasionally turn. Reversals are dropped.
        if rng.random() < 0.2:
            engine.set_direction(directions[int(rng.integers(len(directions)))])
        engine.step()
        if engine.game_over:
            break

    print(render_snake(engine.state))  # noqa: T201
    logger.info(
        "Autopilot finished: %d ticks, score %d.",
        engine.tick_count, engine.state.score,
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``tick-arcade`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "tournament": _run_tournament,
        "snake": _run_snake,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
