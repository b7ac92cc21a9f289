#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--rows R --cols C --mines M] [--preset NAME] [--seed N]
    python main.py simulate [--games N] [--seed N]
"""
import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional, Tuple

import numpy as np

sys.path.insert(0, str(Path(__file__).parent / "src"))

from minesweeper import (
    BoardConfig,
    GameSession,
    InvalidConfiguration,
    MinesweeperEnv,
    PRESETS,
    INSTRUCTIONS,
    render_board,
    status_line,
)


def build_config(args: argparse.Namespace) -> BoardConfig:
    """Resolve the board configuration from preset and explicit flags."""
    base = PRESETS[args.preset]
    return BoardConfig(
        rows=args.rows if args.rows is not None else base.rows,
        cols=args.cols if args.cols is not None else base.cols,
        num_mines=args.mines if args.mines is not None else base.num_mines,
    )


def parse_move(line: str) -> Optional[Tuple[str, int, int]]:
    """Parse 'r ROW COL' or 'f ROW COL'; None if the line is not a move."""
    parts = line.split()
    if len(parts) != 3 or parts[0].lower() not in ("r", "f"):
        return None
    try:
        return parts[0].lower(), int(parts[1]), int(parts[2])
    except ValueError:
        return None


def show(session: GameSession) -> None:
    """Print the status line and board."""
    print()
    print(status_line(session))
    print(render_board(session.board, show_coordinates=True))


def play_game(session: GameSession) -> bool:
    """
    Play one game in the terminal.

    Returns:
        False if the player quit, True when the game ended normally.
    """
    last_tick = time.monotonic()

    while not session.is_over:
        show(session)
        try:
            line = input("move (r ROW COL / f ROW COL / q)> ")
        except EOFError:
            return False

        # One tick per whole second spent waiting for input
        now = time.monotonic()
        while now - last_tick >= 1.0:
            session.on_tick()
            last_tick += 1.0

        if line.strip().lower() == "q":
            return False

        move = parse_move(line)
        if move is None:
            print("Unrecognised move.")
            continue

        action, row, col = move
        if action == "f":
            session.on_cell_secondary_action(row, col)
        elif session.on_cell_primary_action(row, col).is_noop:
            print(f"Nothing to reveal at ({row}, {col}).")

    show(session)
    if session.is_won:
        print(f"\nYou Win! Time: {session.elapsed}s")
    else:
        print("\nBoom! You hit a mine.")
    return True


def play(args: argparse.Namespace, config: BoardConfig) -> None:
    """Run interactive games until the player declines a replay."""
    print("How to Play")
    print(INSTRUCTIONS)

    session = GameSession(config, seed=args.seed)
    while play_game(session):
        try:
            answer = input("Play Again? [y/N] ")
        except EOFError:
            break
        if answer.strip().lower() not in ("y", "yes"):
            break
        session = session.replay()


def simulate(args: argparse.Namespace, config: BoardConfig) -> None:
    """Play random games through the environment and print statistics."""
    env = MinesweeperEnv(config=config)
    env.action_space.seed(args.seed)
    num_cells = config.total_cells

    wins = 0
    steps = []
    revealed = []

    print(f"Simulating {args.games} random games on "
          f"{config.rows}x{config.cols} with {config.num_mines} mines...")

    for game in range(args.games):
        seed = None if args.seed is None else args.seed + game
        env.reset(seed=seed)
        done = False
        info = {}

        while not done:
            mask = env.get_action_mask()
            # Reveal actions only
            mask[num_cells:] = 0
            action = env.action_space.sample(mask=mask)
            _, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated

        wins += info["game_state"] == "WON"
        steps.append(info["steps"])
        revealed.append(info["revealed"])

    print("Results:")
    print(f"  Win rate: {wins / args.games:.1%}")
    print(f"  Avg steps: {np.mean(steps):.1f}")
    print(f"  Avg revealed: {np.mean(revealed):.1f} cells")


def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    def add_board_arguments(sub: argparse.ArgumentParser) -> None:
        sub.add_argument(
            "--preset", choices=sorted(PRESETS), default="classic",
            help="Board size preset",
        )
        sub.add_argument("--rows", type=int, default=None, help="Number of rows")
        sub.add_argument("--cols", type=int, default=None, help="Number of columns")
        sub.add_argument("--mines", type=int, default=None, help="Number of mines")
        sub.add_argument("--seed", type=int, default=None, help="Random seed")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    add_board_arguments(play_parser)

    simulate_parser = subparsers.add_parser(
        "simulate", help="Play random games and report statistics"
    )
    add_board_arguments(simulate_parser)
    simulate_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return

    try:
        config = build_config(args)
    except InvalidConfiguration as exc:
        parser.error(str(exc))

    if args.command == "play":
        play(args, config)
    elif args.command == "simulate":
        simulate(args, config)


if __name__ == "__main__":
    main()
