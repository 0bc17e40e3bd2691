"""
Concentration core Python package.

Pure game logic for the memory-matching card game, kept free of I/O so the
Flask app, the CLI and the tests can share it.
Modules:
- card.py: Card, grid constants, text rendering
- deal.py: shuffled 2-of-each deck
- state.py: GameState, Phase
- moves.py: pure selection transitions
- model.py: ConcentrationModel (history, observers)
- view.py: status/cheat helpers for front ends
"""
