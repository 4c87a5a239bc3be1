"""Solutions to classic algorithmic puzzles on numbers, strings, arrays, grids and graphs."""

__version__ = "0.1.0"