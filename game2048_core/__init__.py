"""
2048 core Python package.

Pure game logic for the sliding-tile merging puzzle, kept free of any UI so
the Flask app, the CLI and the tests can all drive it the same way.
Modules:
- tile.py: Tile
- side.py: Side
- board.py: Board, Coord
- moves.py: compaction and merge sweeps used by a tilt
- rules.py: MAX_PIECE and game-over predicates
- model.py: Model (score, max score, game over, observers)
- controller.py: GameController (random tile spawning, move driver)
- cli.py: interactive terminal game
"""
