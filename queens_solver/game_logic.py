"""Colour-region queens puzzle: cell colours and a backtracking solver."""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from enum import Enum
from typing import Optional

__all__ = ["CellColor", "NoSolutionError", "queens"]


class CellColor(Enum):
    """Colour of a board cell; the value is the name used in cell labels."""

    PEACH_ORANGE = "Peach Orange"
    SOFT_BLUE = "Soft Blue"
    PASTEL_GREEN = "Pastel Green"
    LIGHT_GRAY = "Light Gray"
    VIBRANT_CORAL = "Vibrant Coral"
    LIME_YELLOW = "Lime Yellow"
    LAVENDER = "Lavender"
    WARM_BEIGE = "Warm Beige"
    DARK_GRAY = "Dark Gray"
    PINK = "Pink"

    @classmethod
    def from_aria_label(cls, label: str) -> Optional["CellColor"]:
        """Return the first colour whose name occurs in ``label``, or None."""
        return next((color for color in cls if color.value in label), None)


class NoSolutionError(ValueError):
    """Raised when a board admits no valid placement of queens."""


def queens(board: Sequence[Sequence[Hashable]]) -> list[int]:
    """Solve the board and return the flattened indices of the queens.

    One queen goes in every row and column, no two queens touch diagonally,
    and no two queens share a colour. Index of cell (row, col) is
    ``row * n + col``; results come in row order.
    """
    n = len(board)
    placed: list[int] = []
    used_columns: set[int] = set()
    used_colors: set[Hashable] = set()

    def is_valid(row: int, col: int) -> bool:
        if col in used_columns:
            return False
        if placed and abs(placed[-1] - col) == 1:
            return False
        return board[row][col] not in used_colors

    def backtrack(row: int) -> bool:
        if row == n:
            return True
        for col in range(n):
            if not is_valid(row, col):
                continue
            color = board[row][col]
            placed.append(col)
            used_columns.add(col)
            used_colors.add(color)
            if backtrack(row + 1):
                return True
            placed.pop()
            used_columns.discard(col)
            used_colors.discard(color)
        return False

    if not backtrack(0):
        raise NoSolutionError("No solution found")
    return [row * n + col for row, col in enumerate(placed)]