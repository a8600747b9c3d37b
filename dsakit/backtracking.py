"""Backtracking puzzles: the Josephus problem and N queens."""

from __future__ import annotations

from collections.abc import Sequence


def josephus(n: int, k: int) -> int:
    """Return the zero-based safe position among ``n`` people counting by ``k``."""
    if n < 1:
        raise ValueError("n must be at least 1")
    position = 0
    for size in range(2, n + 1):
        position = (position + k) % size
    return position


def _is_safe(columns: list[int], col: int) -> bool:
    row = len(columns)
    return all(
        placed != col and abs(placed - col) != row - placed_row
        for placed_row, placed in enumerate(columns)
    )


def _place(columns: list[int], n: int) -> bool:
    if len(columns) == n:
        return True
    for col in range(n):
        if _is_safe(columns, col):
            columns.append(col)
            if _place(columns, n):
                return True
            columns.pop()
    return False


def solve_n_queens(n: int) -> list[list[int]] | None:
    """Return the first N-queens board found row by row, or None if none exists.

    The board is a list of rows holding 1 where a queen stands and 0 elsewhere.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    columns: list[int] = []
    if not _place(columns, n):
        return None
    return [[1 if c == col else 0 for c in range(n)] for col in columns]


def format_board(board: Sequence[Sequence[int]]) -> str:
    """Render a board as lines of space-separated cells."""
    return "\n".join(" ".join(str(cell) for cell in row) for row in board)