from __future__ import annotations

import logging
import operator
import random
import threading
from typing import Any, Callable, List, Optional, Sequence, Tuple

from .card import Card
from .deal import check_deck, new_deck
from .moves import initial_state, select_card
from .state import GameState, Phase

log = logging.getLogger(__name__)

# Payload sent to observers by cheat(); ordinary mutations send None.
CHEAT = 'cheat'

Observer = Callable[['ConcentrationModel', Any], None]


class ConcentrationModel:
    """
    Game engine for a 4x4 Concentration board.

    Holds the current GameState, a stack of earlier states for undo and the
    registered observers. Every call that changes what a player would see
    notifies each observer once, in registration order, after the new state
    is in place. Ignored calls notify nobody.
    """

    def __init__(self, seed: Optional[int] = None, deck: Optional[Sequence[int]] = None) -> None:
        self._rng = random.Random(seed)
        self._lock = threading.RLock()
        self._observers: List[Observer] = []
        self._history: List[GameState] = []
        if deck is None:
            deck = new_deck(rng=self._rng)
        check_deck(deck)
        self._state = initial_state(deck)

    # ---------- observers ----------

    def subscribe(self, callback: Observer) -> Observer:
        """Registers callback(model, payload); returns it so it can be used as a decorator."""
        with self._lock:
            self._observers.append(callback)
        return callback

    def unsubscribe(self, callback: Observer) -> None:
        with self._lock:
            if callback in self._observers:
                self._observers.remove(callback)

    def _notify(self, payload: Any = None) -> None:
        for callback in list(self._observers):
            callback(self, payload)

    # ---------- mutations ----------

    def select_card(self, index: int) -> bool:
        """Clicks the card at index. Returns False when the click was ignored."""
        if isinstance(index, bool):
            raise TypeError('card index must be an int, not bool')
        index = operator.index(index)
        with self._lock:
            before = self._state
            after = select_card(before, index)
            if after is before:
                log.debug('select %d ignored (phase=%s)', index, before.phase.value)
                return False
            self._history.append(before)
            self._state = after
            if after.move_count != before.move_count:
                outcome = 'mismatch' if after.phase is Phase.MISMATCHED else 'match'
                log.debug('select %d: %s, moves=%d', index, outcome, after.move_count)
            else:
                log.debug('select %d: flipped', index)
            self._notify()
            return True

    def reset(self) -> None:
        """Deals a fresh shuffled deck and forgets moves and history."""
        with self._lock:
            self._state = initial_state(new_deck(rng=self._rng))
            self._history.clear()
            log.debug('reset')
            self._notify()

    def undo(self) -> bool:
        """Steps back over the last applied selection. Returns False when there is nothing to undo."""
        with self._lock:
            if not self._history:
                return False
            self._state = self._history.pop()
            log.debug('undo, moves=%d, history=%d', self._state.move_count, len(self._history))
            self._notify()
            return True

    def cheat(self) -> None:
        """Asks observers to show a full reveal. Game state is not touched."""
        with self._lock:
            log.debug('cheat requested')
            self._notify(CHEAT)

    # ---------- accessors ----------

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def phase(self) -> Phase:
        return self._state.phase

    def get_cards(self) -> Tuple[Card, ...]:
        return self._state.cards()

    def get_move_count(self) -> int:
        return self._state.move_count

    def matched_count(self) -> int:
        return len(self._state.matched)

    def is_won(self) -> bool:
        return self._state.is_won()

    def can_undo(self) -> bool:
        return bool(self._history)
