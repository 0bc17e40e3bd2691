from __future__ import annotations

import argparse
import logging
from typing import Any, Optional, Sequence

from .card import COLS, ROWS, index_of, pretty
from .model import CHEAT, ConcentrationModel
from .view import cheat_view, moves_label, status_message

HELP = "Commands: 'r c' or 'r,c' to flip a card, 'u' undo, 'reset', 'cheat', 'q' quit."


def parse_index(text: str) -> Optional[int]:
    """Parses 'r c', 'r,c' or a bare flat index; None when it cannot."""
    sep = ',' if ',' in text else ' '
    parts = [t for t in text.split(sep) if t != '']
    try:
        nums = [int(p) for p in parts]
    except ValueError:
        return None
    if len(nums) == 1:
        return nums[0]
    if len(nums) == 2:
        r, c = nums
        if 0 <= r < ROWS and 0 <= c < COLS:
            return index_of(r, c)
    return None


def render(model: ConcentrationModel, payload: Any) -> None:
    """Observer that prints the board after each change."""
    cards = model.get_cards()
    if payload == CHEAT:
        print('Cheat:')
        print(pretty(cheat_view(cards)))
        return
    print(pretty(cards))
    print(f'{status_message(cards)}  [{moves_label(model.get_move_count())}]')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Concentration memory game')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for the deal')
    parser.add_argument('--cheat', action='store_true', help='Show the full deck before play')
    parser.add_argument('--log-level', default='WARNING', help='Logging level (DEBUG, INFO, ...)')
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.WARNING))

    model = ConcentrationModel(seed=args.seed)
    model.subscribe(render)
    print(HELP)
    print(pretty(model.get_cards()))
    if args.cheat:
        model.cheat()

    while not model.is_won():
        try:
            text = input('> ').strip().lower()
        except EOFError:
            break
        if text in ('q', 'quit'):
            break
        if text in ('u', 'undo'):
            if not model.undo():
                print('Nothing to undo.')
            continue
        if text == 'reset':
            model.reset()
            continue
        if text == 'cheat':
            model.cheat()
            continue
        index = parse_index(text)
        if index is None:
            print('Could not parse. ' + HELP)
            continue
        if not model.select_card(index):
            print('That card cannot be selected.')

    if model.is_won():
        print(f'Solved in {moves_label(model.get_move_count())}.')
