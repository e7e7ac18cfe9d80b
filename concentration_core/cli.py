from __future__ import annotations

import argparse
import logging
import os
from typing import Callable, Optional

from .board import CardIndexError, pretty
from .model import ConcentrationModel
from .view import moves_label, status_message

logger = logging.getLogger(__name__)

HELP = "Enter a card 0-15, u = undo, r = reset, c = cheat, q = quit."


class TerminalView:
    """Observer that redraws the board on stdout after every change."""

    def __init__(self, write: Callable[[str], None] = print):
        self.write = write

    def update(self, model: ConcentrationModel, arg: Optional[object]) -> None:
        if arg is not None:
            self.write("Cheat Window:")
            self.write(pretty(model.get_cheat()))
        else:
            self.write(pretty(model.get_cards()))
        self.write(f"{status_message(model)}    {moves_label(model)}")


def play(
    model: ConcentrationModel,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """Line-driven game loop. Returns on 'q' or end of input."""
    view = TerminalView(write)
    model.add_observer(view)
    write(pretty(model.get_cards()))
    write(status_message(model))
    write(HELP)
    try:
        while True:
            try:
                text = read('> ').strip().lower()
            except EOFError:
                return
            if not text:
                continue
            if text in ('q', 'quit'):
                return
            if text in ('u', 'undo'):
                if not model.can_undo():
                    write('Nothing to undo.')
                model.undo()
            elif text in ('r', 'reset'):
                model.reset()
            elif text in ('c', 'cheat'):
                model.cheat()
            else:
                try:
                    model.select_card(int(text))
                except ValueError:
                    write('Could not parse. ' + HELP)
                except CardIndexError as e:
                    logger.warning("rejected selection: %s", e)
                    write('No such card. ' + HELP)
    finally:
        model.remove_observer(view)


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description='Concentration memory-match game')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for deal')
    args = parser.parse_args(argv)

    debug = os.getenv('CONCENTRATION_DEBUG', '0').lower() in ('1', 'true', 'yes', 'on')
    logging.basicConfig(level=logging.DEBUG if debug else logging.WARNING)

    play(ConcentrationModel(seed=args.seed))
