from __future__ import annotations

from typing import Iterable, Sequence, Tuple

from .card import Card


def status_message(cards: Sequence[Card]) -> str:
    """Prompt line shown above the board."""
    face_up = sum(1 for card in cards if card.face_up)
    if face_up == len(cards):
        return 'You Win!'
    if face_up % 2 == 0:
        return 'Select the first card.'
    return 'Select the second card.'


def moves_label(count: int) -> str:
    return f'{count} Moves'


def cheat_view(cards: Iterable[Card]) -> Tuple[Card, ...]:
    """Face-up copies of every card, for a throwaway reveal."""
    return tuple(card.revealed() for card in cards)
