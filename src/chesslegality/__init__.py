"""Move legality and move suggestion for chess pieces on an 8x8 board."""

__version__ = "0.1.0"
