"""
Concentration core Python package.

Pure game logic for the memory-match game, kept free of any rendering code
so the terminal and web front ends can share it.
Modules:
- board.py: Card, CardIndexError, board helpers
- deal.py: shuffled deal with an injectable random source
- state.py: Snapshot (undo history entry)
- observer.py: Observer protocol, ObserverRegistry, CHEAT marker
- model.py: ConcentrationModel
- view.py, cli.py: presentation helpers and the terminal front end
"""
