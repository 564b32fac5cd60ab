from __future__ import annotations

import argparse
import dataclasses
import logging
from typing import List, Optional, Sequence

from .config import Settings, configure_logging
from .state import GameState

logger = logging.getLogger(__name__)

HELP = "Commands: 0-8 play a square, 'j N' jump to step N, 'h' history, 'q' quit"


def _parse_moves(text: str) -> List[int]:
    try:
        return [int(t) for t in text.replace(' ', ',').split(',') if t != '']
    except ValueError:
        raise argparse.ArgumentTypeError(f"moves must be comma separated integers, got {text!r}") from None


def show(game: GameState) -> None:
    print(game.current_snapshot().pretty())
    print(game.current_status())


def show_history(game: GameState) -> None:
    for step, desc in enumerate(game.move_descriptions()):
        marker = '>' if step == game.step_number else ' '
        print(f"{marker} {step}: {desc}")


def handle_command(game: GameState, text: str) -> bool:
    """Applies one console command. Returns False when the user asked to quit."""
    text = text.strip()
    if text in ('q', 'quit', 'exit'):
        return False
    if text in ('h', 'history'):
        show_history(game)
        return True
    try:
        if text.startswith('j'):
            game.jump_to(int(text[1:].strip()))
        else:
            if not game.apply_move(int(text)):
                print('Square ignored.')
    except ValueError as e:
        print(f'Could not use {text!r}: {e}')
        print(HELP)
    return True


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description='Tic-tac-toe with move history and time travel')
    parser.add_argument('--moves', type=_parse_moves, default=None,
                        help='Play these squares (e.g. 0,4,8) and print the result')
    parser.add_argument('--debug', action='store_true', help='Verbose logging')
    args = parser.parse_args(argv)

    settings = Settings.from_env()
    if args.debug:
        settings = dataclasses.replace(settings, debug=True)
    configure_logging(settings)

    game = GameState()
    if args.moves is not None:
        logger.debug('replaying %s', args.moves)
        for index in args.moves:
            try:
                game.apply_move(index)
            except ValueError as e:
                parser.error(str(e))
        show(game)
        show_history(game)
        return

    game.subscribe(show)
    show(game)
    print(HELP)
    while True:
        try:
            text = input('> ')
        except EOFError:
            break
        if not handle_command(game, text):
            break


if __name__ == '__main__':
    main()
