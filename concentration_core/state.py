from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .card import Card, FaceValue


class Phase(Enum):
    """Where the current selection cycle stands."""
    IDLE = 'idle'                  # no transient face-up card
    ONE_SELECTED = 'one_selected'  # first card of a pair is showing
    MISMATCHED = 'mismatched'      # two differing cards wait to be cleared


@dataclass(frozen=True)
class GameState:
    """Immutable game snapshot; the model's undo history is a stack of these."""
    deck: Tuple[FaceValue, ...]  # row-major face values, fixed for a deal
    face_up: Tuple[int, ...]     # transient selection, in click order (0..2)
    matched: Tuple[int, ...]     # sorted, permanently revealed positions
    move_count: int

    @property
    def phase(self) -> Phase:
        if not self.face_up:
            return Phase.IDLE
        if len(self.face_up) == 1:
            return Phase.ONE_SELECTED
        return Phase.MISMATCHED

    def is_matched(self, index: int) -> bool:
        return index in self.matched

    def is_face_up(self, index: int) -> bool:
        return index in self.face_up or index in self.matched

    def is_won(self) -> bool:
        return len(self.matched) == len(self.deck)

    def cards(self) -> Tuple[Card, ...]:
        return tuple(Card(number, self.is_face_up(i)) for i, number in enumerate(self.deck))
