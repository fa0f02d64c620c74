from __future__ import annotations

import argparse
import logging
import os
from typing import Optional

from .controller import GameController
from .side import Side

DEFAULT_SIZE = int(os.getenv('GAME2048_SIZE', '4'))
_seed_env = os.getenv('GAME2048_SEED')
DEFAULT_SEED: Optional[int] = int(_seed_env) if _seed_env else None


def configure_logging() -> None:
    debug = os.getenv('GAME2048_DEBUG', '0').lower() in ('1', 'true', 'yes', 'on')
    level = 'DEBUG' if debug else os.getenv('GAME2048_LOG_LEVEL', 'WARNING').upper()
    logging.basicConfig(level=level, format='%(asctime)s %(name)s %(levelname)s %(message)s')


def _ask(prompt: str) -> Optional[str]:
    """Reads one line from stdin; None when input is closed or interrupted."""
    try:
        return input(prompt).strip()
    except (EOFError, KeyboardInterrupt):
        print()
        return None


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description='Play 2048 in the terminal')
    parser.add_argument('--size', type=int, default=DEFAULT_SIZE, help='Board size (NxN)')
    parser.add_argument('--seed', type=int, default=DEFAULT_SEED, help='RNG seed for tile spawns')
    args = parser.parse_args(argv)
    configure_logging()

    controller = GameController(size=args.size, seed=args.seed)
    model = controller.new_game()
    print(model)

    while True:
        if model.game_over():
            print(f"Game over. Score {model.score()}, best {model.max_score()}.")
            text = _ask('Play again? [y/N] ')
            if text is None or text.lower() not in ('y', 'yes'):
                break
            controller.new_game()
            print(model)
            continue
        text = _ask('Move (w/a/s/d, up/down/left/right, q to quit): ')
        if text is None or text.lower() in ('q', 'quit', 'exit'):
            break
        try:
            side = Side.parse(text)
        except ValueError:
            print('Could not parse. Try again.')
            continue
        if not controller.play(side):
            print('Nothing moved.')
            continue
        print(model)
