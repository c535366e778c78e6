"""Classic AI search, constraint-satisfaction and game-playing algorithms."""

__version__ = "0.1.0"