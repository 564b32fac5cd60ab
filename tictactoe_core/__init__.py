"""
Tic-tac-toe core Python package.

Pure game logic, kept apart from the Flask and console front-ends so it can be
tested on its own.
Modules:
- board.py: Cell, Board, WINNING_LINES
- winner.py: evaluate, winning_line, WinDetector
- state.py: GameState (snapshot history, cursor, time travel)
- config.py: Settings, configure_logging
- cli.py: console front-end
"""
