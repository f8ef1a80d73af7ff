#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--size N] [--mines M] [--seed S]
    python main.py watch [--games G] [--delay D] [--size N] [--mines M]
"""
import argparse
import time

from src.minesweeper.board import DEFAULT, Board, BoardConfig
from src.minesweeper.console import Console
from src.minesweeper.environment import MinesweeperEnv


def play(args: argparse.Namespace, config: BoardConfig) -> None:
    """Play one game on the console."""
    board = Board(config, seed=args.seed)
    Console(board).run()


def watch(args: argparse.Namespace, config: BoardConfig) -> None:
    """Watch a random player guess its way through several games."""
    env = MinesweeperEnv(config=config, render_mode="ansi")
    env.action_space.seed(args.seed)

    print(f"Board: {config.size}x{config.size} with {config.num_mines} mines")

    wins = 0
    for game in range(args.games):
        seed = args.seed if game == 0 else None
        env.reset(seed=seed)
        done = False
        step = 0

        while not done:
            action = env.action_space.sample(mask=env.get_action_mask())
            row, col = divmod(int(action), config.size)

            _, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            print(f"\n=== Game {game + 1}/{args.games} | Step {step} ===")
            print(f"Guess: ({row}, {col}) | Reward: {reward:+.1f}\n")
            print(env.render())
            time.sleep(args.delay)

        if info["game_state"] == "WON":
            wins += 1
            print("*** WIN! ***")
        else:
            print("*** LOST (hit mine) ***")

    print(f"\n=== Final: {wins}/{args.games} wins ({100 * wins / max(args.games, 1):.0f}%) ===")


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the board size, mine count and seed flags to a parser."""
    parser.add_argument(
        "--size", type=int, default=DEFAULT.size, help="Board size (NxN)"
    )
    parser.add_argument(
        "--mines", type=int, default=DEFAULT.num_mines, help="Number of mines"
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for mine placement"
    )


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Text-based Minesweeper")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play a game on the console")
    add_board_arguments(play_parser)

    watch_parser = subparsers.add_parser(
        "watch", help="Watch a random player play"
    )
    add_board_arguments(watch_parser)
    watch_parser.add_argument(
        "--games", type=int, default=5, help="Number of games"
    )
    watch_parser.add_argument(
        "--delay", type=float, default=0.3, help="Delay between moves"
    )

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return

    try:
        config = BoardConfig(size=args.size, num_mines=args.mines)
    except ValueError as error:
        parser.error(str(error))

    if args.command == "play":
        play(args, config)
    elif args.command == "watch":
        watch(args, config)


if __name__ == "__main__":
    main()
