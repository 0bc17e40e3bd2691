from __future__ import annotations

import random
from collections import Counter
from typing import List, Optional, Sequence, Tuple

from .card import DECK_SIZE, NUM_FACES, FaceValue


def new_deck(seed: Optional[int] = None, rng: Optional[random.Random] = None) -> Tuple[FaceValue, ...]:
    """Creates a shuffled 16-card deck holding every face value exactly twice."""
    rng = rng or random.Random(seed)
    deck: List[FaceValue] = [face for face in range(NUM_FACES) for _ in range(2)]
    rng.shuffle(deck)
    return tuple(deck)


def check_deck(deck: Sequence[FaceValue]) -> None:
    """Raises ValueError unless the deck is a 2-of-each permutation."""
    if len(deck) != DECK_SIZE:
        raise ValueError(f'Invalid deck: expected {DECK_SIZE} cards, got {len(deck)}')
    counts = Counter(deck)
    if set(counts) != set(range(NUM_FACES)) or any(n != 2 for n in counts.values()):
        raise ValueError(f'Invalid deck: expected two of each face, got {dict(counts)}')
