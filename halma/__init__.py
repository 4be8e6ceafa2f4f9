"""Halma on an 8x8 board: board, rules, a greedy computer player and a terminal game."""

__version__ = "0.1.0"
__all__ = ["board", "rules", "ai", "cli"]