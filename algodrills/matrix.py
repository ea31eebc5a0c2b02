"""Matrix drills: zeroing rows and columns, and checking Sudoku boards."""

from __future__ import annotations

from collections.abc import Sequence

_SUDOKU_SIZE = 9
_EMPTY = "."


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero, in place, every row and column that holds a zero."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        if i in zero_rows:
            row[:] = [0] * len(row)
        else:
            for j in zero_cols:
                row[j] = 0


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """Tell whether the filled cells of a 9x9 board break no Sudoku rule.

    Empty cells hold ``"."``; the board need not be solvable.
    """
    if len(board) != _SUDOKU_SIZE or any(len(row) != _SUDOKU_SIZE for row in board):
        raise ValueError("a Sudoku board must be 9 rows of 9 cells")
    seen: set[tuple] = set()
    for i, row in enumerate(board):
        for j, cell in enumerate(row):
            if cell == _EMPTY:
                continue
            keys = (("row", i, cell), ("col", j, cell), ("box", i // 3, j // 3, cell))
            if any(key in seen for key in keys):
                return False
            seen.update(keys)
    return True