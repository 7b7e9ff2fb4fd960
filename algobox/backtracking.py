"""Backtracking puzzles: N-queens, Sudoku and the Tower of Hanoi."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

__all__ = [
    "Move",
    "n_queens_solutions",
    "first_n_queens",
    "count_n_queens",
    "render_queens",
    "solve_sudoku",
    "hanoi_moves",
]

SUDOKU_SIZE = 9
BOX_SIZE = 3


@dataclass(frozen=True)
class Move:
    """One Tower of Hanoi move: a disk going from one rod to another."""

    disk: int
    source: str
    target: str

    def __str__(self) -> str:
        return f"Move disk {self.disk} from {self.source} to {self.target}"


def n_queens_solutions(n: int) -> Iterator[tuple[int, ...]]:
    """Yield every placement of ``n`` non-attacking queens.

    A placement is a tuple giving the queen's column for each row, and
    placements come in lexicographic order.
    """
    if n < 0:
        raise ValueError(f"board size must be non-negative, got {n}")
    columns: list[int] = []
    used_columns: set[int] = set()
    used_diagonals: set[int] = set()
    used_antidiagonals: set[int] = set()

    def place(row: int) -> Iterator[tuple[int, ...]]:
        if row == n:
            yield tuple(columns)
            return
        for col in range(n):
            if (
                col in used_columns
                or col - row in used_diagonals
                or col + row in used_antidiagonals
            ):
                continue
            columns.append(col)
            used_columns.add(col)
            used_diagonals.add(col - row)
            used_antidiagonals.add(col + row)
            yield from place(row + 1)
            columns.pop()
            used_columns.remove(col)
            used_diagonals.remove(col - row)
            used_antidiagonals.remove(col + row)

    yield from place(0)


def first_n_queens(n: int) -> tuple[int, ...] | None:
    """Return the first placement found for ``n`` queens, or None."""
    return next(n_queens_solutions(n), None)


def count_n_queens(n: int) -> int:
    """Return how many placements of ``n`` non-attacking queens exist."""
    return sum(1 for _ in n_queens_solutions(n))


def render_queens(solution: Sequence[int]) -> str:
    """Draw a placement as rows of ``Q`` and ``.`` separated by spaces."""
    size = len(solution)
    return "\n".join(
        " ".join("Q" if col == queen else "." for col in range(size)) for queen in solution
    )


def _validate_grid(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    rows = [list(row) for row in grid]
    if len(rows) != SUDOKU_SIZE or any(len(row) != SUDOKU_SIZE for row in rows):
        raise ValueError("a sudoku grid must be 9 rows of 9 cells")
    if any(not 0 <= cell <= SUDOKU_SIZE for row in rows for cell in row):
        raise ValueError("sudoku cells must hold 0 (empty) or a digit 1-9")
    return rows


def solve_sudoku(grid: Sequence[Sequence[int]]) -> list[list[int]] | None:
    """Fill the empty (0) cells of a 9x9 grid so every row, column and box
    holds each digit once.

    Returns a new solved grid, or None when no solution exists. The input is
    not modified.
    """
    board = _validate_grid(grid)
    empties = [
        (r, c) for r in range(SUDOKU_SIZE) for c in range(SUDOKU_SIZE) if board[r][c] == 0
    ]

    def allowed(row: int, col: int, digit: int) -> bool:
        if digit in board[row]:
            return False
        if any(board[r][col] == digit for r in range(SUDOKU_SIZE)):
            return False
        top, left = row - row % BOX_SIZE, col - col % BOX_SIZE
        return all(
            board[r][c] != digit
            for r in range(top, top + BOX_SIZE)
            for c in range(left, left + BOX_SIZE)
        )

    def fill(index: int) -> bool:
        if index == len(empties):
            return True
        row, col = empties[index]
        for digit in range(1, SUDOKU_SIZE + 1):
            if allowed(row, col, digit):
                board[row][col] = digit
                if fill(index + 1):
                    return True
                board[row][col] = 0
        return False

    return board if fill(0) else None


def hanoi_moves(
    n: int, source: str = "A", target: str = "C", auxiliary: str = "B"
) -> Iterator[Move]:
    """Yield the moves that carry ``n`` disks from ``source`` to ``target``."""
    if n < 0:
        raise ValueError(f"number of disks must be non-negative, got {n}")
    if n == 0:
        return
    yield from hanoi_moves(n - 1, source, auxiliary, target)
    yield Move(n, source, target)
    yield from hanoi_moves(n - 1, auxiliary, target, source)