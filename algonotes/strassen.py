"""Matrix multiplication: the row-by-column definition and Strassen's method.

Matrices are lists of rows. For square ``X = [[A, B], [C, D]]`` and
``Y = [[E, F], [G, H]]`` Strassen computes seven products::

    P1 = A (F - H)      P5 = (A + D)(E + H)
    P2 = (A + B) H      P6 = (B - D)(G + H)
    P3 = (C + D) E      P7 = (A - C)(E + F)
    P4 = D (G - E)

and assembles ``XY = [[P5 + P4 - P2 + P6, P1 + P2], [P3 + P4, P1 + P5 - P3 - P7]]``.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

Matrix = list[list[Any]]


def matrix_order(matrix: Sequence[Sequence[Any]]) -> tuple[int, int]:
    """Return ``(rows, columns)``; raise ValueError if empty or ragged."""
    if not matrix:
        raise ValueError("matrix is empty")
    columns = len(matrix[0])
    if any(len(row) != columns for row in matrix):
        raise ValueError("matrix rows have different lengths")
    return len(matrix), columns


def naive_multiply(a: Sequence[Sequence[Any]], b: Sequence[Sequence[Any]]) -> Matrix:
    """Multiply two matrices by the row-by-column definition."""
    try:
        _, inner_a = matrix_order(a)
        inner_b, _ = matrix_order(b)
    except ValueError as exc:
        raise ValueError("Multiplication is not defined") from exc
    if inner_a != inner_b:
        raise ValueError("Multiplication is not defined")

    columns = list(zip(*b))
    return [[sum(p * q for p, q in zip(row, col)) for col in columns] for row in a]


def add_matrices(
    a: Sequence[Sequence[Any]], b: Sequence[Sequence[Any]], sign: int = 1
) -> Matrix:
    """Return ``a + sign * b`` element by element."""
    return [[p + sign * q for p, q in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def _quadrants(m: Sequence[Sequence[Any]], mid: int) -> tuple[Matrix, Matrix, Matrix, Matrix]:
    top, bottom = m[:mid], m[mid:]
    return (
        [list(row[:mid]) for row in top],
        [list(row[mid:]) for row in top],
        [list(row[:mid]) for row in bottom],
        [list(row[mid:]) for row in bottom],
    )


def strassen_multiply(x: Sequence[Sequence[Any]], y: Sequence[Sequence[Any]]) -> Matrix:
    """Multiply two square matrices whose size is 2 or less, or a power of two."""
    n = len(x)
    if n <= 2:
        return naive_multiply(x, y)

    if matrix_order(x) != (n, n) or matrix_order(y) != (n, n):
        raise ValueError("Strassen's method needs two square matrices of the same size")
    if n & (n - 1):
        raise ValueError("Strassen's method needs a size that is a power of two")

    mid = n // 2
    a, b, c, d = _quadrants(x, mid)
    e, f, g, h = _quadrants(y, mid)

    p1 = strassen_multiply(a, add_matrices(f, h, -1))
    p2 = strassen_multiply(add_matrices(a, b), h)
    p3 = strassen_multiply(add_matrices(c, d), e)
    p4 = strassen_multiply(d, add_matrices(g, e, -1))
    p5 = strassen_multiply(add_matrices(a, d), add_matrices(e, h))
    p6 = strassen_multiply(add_matrices(b, d, -1), add_matrices(g, h))
    p7 = strassen_multiply(add_matrices(a, c, -1), add_matrices(e, f))

    c11 = add_matrices(add_matrices(p5, p4), add_matrices(p6, p2, -1))
    c12 = add_matrices(p1, p2)
    c21 = add_matrices(p3, p4)
    c22 = add_matrices(add_matrices(p5, p1), add_matrices(p3, p7), -1)

    top = [left + right for left, right in zip(c11, c12)]
    bottom = [left + right for left, right in zip(c21, c22)]
    return top + bottom


def format_matrix(matrix: Sequence[Sequence[Any]]) -> str:
    """Render a matrix one row per line, each value followed by a space."""
    return "".join("".join(f"{val} " for val in row) + "\n" for row in matrix)