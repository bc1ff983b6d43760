"""In-place operations on rectangular integer matrices."""

from __future__ import annotations


def rotate_matrix(matrix: list[list[int]]) -> None:
    """Rotate a square matrix 90 degrees clockwise, in place."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("rotate_matrix() requires a square matrix")
    rotated = [list(reversed(column)) for column in zip(*matrix)]
    for row, new_row in zip(matrix, rotated):
        row[:] = new_row


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero every row and column that holds a zero, in place."""
    zero_rows = {i for i, row in enumerate(matrix) if any(v == 0 for v in row)}
    zero_cols = {
        j for row in matrix for j, value in enumerate(row) if value == 0
    }
    for i, row in enumerate(matrix):
        if i in zero_rows:
            row[:] = [0] * len(row)
            continue
        for j in zero_cols:
            if j < len(row):
                row[j] = 0