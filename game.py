from __future__ import annotations

# Facade module that re-exports Concentration core functionality.
# Used by the Flask app and tests; the logic lives under concentration_core/*.

from concentration_core.card import (
    COLS,
    DECK_SIZE,
    FACE_DOWN_NAME,
    FACE_NAMES,
    NUM_FACES,
    ROWS,
    Card,
    Coord,
    FaceValue,
    coord_of,
    index_of,
    pretty,
)
from concentration_core.deal import check_deck, new_deck
from concentration_core.state import GameState, Phase
from concentration_core.moves import (
    clear_mismatch,
    flip,
    initial_state,
    is_selectable,
    resolve_pair,
    select_card,
)
from concentration_core.model import CHEAT, ConcentrationModel, Observer
from concentration_core.view import cheat_view, moves_label, status_message


def main() -> None:
    # CLI driver delegated to concentration_core.cli
    from concentration_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
