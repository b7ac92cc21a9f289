#!/usr/bin/env python3
"""Watch a random player click through Minesweeper."""
import time
import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from minesweeper import BoardConfig, MinesweeperEnv, status_line


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(delay: float = 0.3, games: int = 5, size: int = 8, mines: int = 10,
         seed: int = None):
    """Run demo games with visualization."""
    config = BoardConfig(rows=size, cols=size, num_mines=mines)
    env = MinesweeperEnv(config=config, render_mode="ansi")
    env.action_space.seed(seed)
    num_cells = config.total_cells

    print(f"Board: {size}x{size} with {mines} mines ({100*mines/(size*size):.1f}% density)")
    print("Starting in 2 seconds...")
    time.sleep(2)

    wins = 0

    for game in range(games):
        env.reset(seed=None if seed is None else seed + game)

        clear_screen()
        print(f"=== Game {game + 1}/{games} ===")
        print(f"Wins so far: {wins}\n")
        print(env.render())
        time.sleep(delay)

        done = False
        step = 0

        while not done:
            mask = env.get_action_mask()
            mask[num_cells:] = 0
            action = env.action_space.sample(mask=mask)
            row, col = divmod(int(action), size)

            _, _, terminated, truncated, info = env.step(action)
            env.session.on_tick()
            done = terminated or truncated
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{games} | Step {step} ===")
            print(status_line(env.session))
            print(f"Last move: ({row}, {col})\n")
            print(env.render())

            if done:
                if info.get("game_state") == "WON":
                    wins += 1
                    print("\n*** WIN! ***")
                else:
                    print("\n*** LOST (hit mine) ***")

            time.sleep(delay)

        time.sleep(1.0)  # Pause between games

    print(f"\n=== Final: {wins}/{games} wins ({100*wins/games:.0f}%) ===")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between moves")
    parser.add_argument("--games", type=int, default=5, help="Number of games")
    parser.add_argument("--size", type=int, default=8, help="Board size (NxN)")
    parser.add_argument("--mines", type=int, default=10, help="Number of mines")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args()

    demo(delay=args.delay, games=args.games, size=args.size, mines=args.mines,
         seed=args.seed)
