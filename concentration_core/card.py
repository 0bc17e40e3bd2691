from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, List, Tuple

ROWS = 4
COLS = 4
DECK_SIZE = ROWS * COLS
NUM_FACES = DECK_SIZE // 2

FaceValue = int  # 0 .. NUM_FACES - 1
Coord = Tuple[int, int]

FACE_NAMES: Tuple[str, ...] = (
    'abra',
    'bulbasaur',
    'charmander',
    'jigglypuff',
    'meowth',
    'pikachu',
    'squirtle',
    'venomoth',
)
FACE_DOWN_NAME = 'pokeball'


@dataclass(frozen=True)
class Card:
    """A single card: its face value and which side is showing."""
    number: FaceValue
    face_up: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.number < NUM_FACES:
            raise ValueError(f'face value out of range: {self.number}')

    def copy(self) -> 'Card':
        return replace(self)

    def revealed(self) -> 'Card':
        """Returns a face-up copy, leaving this card untouched."""
        return replace(self, face_up=True)

    @property
    def name(self) -> str:
        return FACE_NAMES[self.number] if self.face_up else FACE_DOWN_NAME


def index_of(r: int, c: int) -> int:
    """Row-major index of a grid coordinate."""
    return r * COLS + c


def coord_of(index: int) -> Coord:
    return index // COLS, index % COLS


def pretty(cards: Iterable[Card]) -> str:
    """Generates a human-readable grid; face-down cards show as '..'."""
    cells = [f'{card.number:02d}' if card.face_up else '..' for card in cards]
    lines: List[str] = []
    for r in range(0, len(cells), COLS):
        lines.append(' '.join(cells[r:r + COLS]))
    return '\n'.join(lines)
