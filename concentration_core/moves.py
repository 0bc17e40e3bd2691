from __future__ import annotations

from typing import Sequence

from .card import DECK_SIZE, FaceValue
from .state import GameState, Phase


def initial_state(deck: Sequence[FaceValue]) -> GameState:
    """A fresh deal: everything face-down, no moves yet."""
    return GameState(deck=tuple(deck), face_up=tuple(), matched=tuple(), move_count=0)


def is_selectable(state: GameState, index: int) -> bool:
    """True when the card at index is on the board and currently face-down."""
    if not 0 <= index < DECK_SIZE:
        return False
    return not state.is_face_up(index)


def clear_mismatch(state: GameState) -> GameState:
    """Flips a pending mismatched pair back face-down. Does not count a move."""
    if state.phase is not Phase.MISMATCHED:
        return state
    return GameState(state.deck, tuple(), state.matched, state.move_count)


def flip(state: GameState, index: int) -> GameState:
    """Turns one more card face-up as part of the transient selection."""
    return GameState(state.deck, state.face_up + (index,), state.matched, state.move_count)


def resolve_pair(state: GameState) -> GameState:
    """
    Compares the two face-up cards, counting one move.
    A match joins the matched set; a mismatch stays showing until cleared.
    """
    if len(state.face_up) != 2:
        return state
    first, second = state.face_up
    moves = state.move_count + 1
    if state.deck[first] == state.deck[second]:
        matched = tuple(sorted(state.matched + (first, second)))
        return GameState(state.deck, tuple(), matched, moves)
    return GameState(state.deck, state.face_up, state.matched, moves)


def select_card(state: GameState, index: int) -> GameState:
    """
    Applies a player's click on index and returns the new state.
    The same object is returned when the click is ignored.
    """
    if not is_selectable(state, index):
        return state
    state = clear_mismatch(state)
    state = flip(state, index)
    if len(state.face_up) == 2:
        state = resolve_pair(state)
    return state
