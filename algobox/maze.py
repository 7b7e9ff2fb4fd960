"""Text mazes: generation by randomised depth-first search, and a DFS solver."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable
from dataclasses import dataclass

__all__ = ["Maze", "main", "WALL", "PATH", "SOLUTION"]

WALL = "#"
PATH = " "
SOLUTION = "."

# North, south, east, west.
_DIRECTIONS = ((-1, 0), (1, 0), (0, 1), (0, -1))


def _shuffled_directions(rng: random.Random) -> list[tuple[int, int]]:
    directions = list(_DIRECTIONS)
    rng.shuffle(directions)
    return directions


@dataclass(frozen=True)
class Maze:
    """A rectangular grid of walls and paths.

    The entrance is the cell at row 0, column 1 and the exit is at the last
    row, second-to-last column.
    """

    cells: tuple[str, ...]

    def __post_init__(self) -> None:
        rows = tuple(self.cells)
        if len(rows) < 3 or len(rows[0]) < 3:
            raise ValueError("a maze needs at least 3 rows and 3 columns")
        if any(len(row) != len(rows[0]) for row in rows):
            raise ValueError("all maze rows must have the same length")
        object.__setattr__(self, "cells", rows)

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0])

    @property
    def entrance(self) -> tuple[int, int]:
        return (0, 1)

    @property
    def exit(self) -> tuple[int, int]:
        return (self.rows - 1, self.cols - 2)

    @classmethod
    def generate(cls, rows: int, cols: int, rng: random.Random | None = None) -> Maze:
        """Carve a maze out of solid wall starting from cell (1, 1).

        Odd dimensions give a maze whose exit is always reachable.
        """
        if rows < 3 or cols < 3:
            raise ValueError("a maze needs at least 3 rows and 3 columns")
        rng = rng if rng is not None else random.Random()
        grid = [[WALL] * cols for _ in range(rows)]
        grid[1][1] = PATH
        stack = [(1, 1, _shuffled_directions(rng))]
        while stack:
            r, c, directions = stack[-1]
            if not directions:
                stack.pop()
                continue
            dr, dc = directions.pop(0)
            nr, nc = r + 2 * dr, c + 2 * dc
            if 0 < nr < rows - 1 and 0 < nc < cols - 1 and grid[nr][nc] == WALL:
                grid[r + dr][c + dc] = PATH
                grid[nr][nc] = PATH
                stack.append((nr, nc, _shuffled_directions(rng)))
        grid[0][1] = PATH
        grid[rows - 1][cols - 2] = PATH
        return cls(_join(grid))

    def solve(self) -> Maze | None:
        """Return a copy with the path from entrance to exit marked, or None.

        Neighbours are tried north, south, east, west; the exit cell itself
        is left unmarked.
        """
        grid = [list(row) for row in self.cells]
        start_r, start_c = self.entrance
        end = self.exit
        if grid[start_r][start_c] != PATH:
            return None

        def is_open(r: int, c: int) -> bool:
            return 0 <= r < self.rows and 0 <= c < self.cols and grid[r][c] == PATH

        grid[start_r][start_c] = SOLUTION
        stack = [(start_r, start_c, 0)]
        while stack:
            r, c, tried = stack[-1]
            if tried == len(_DIRECTIONS):
                grid[r][c] = PATH
                stack.pop()
                continue
            stack[-1] = (r, c, tried + 1)
            dr, dc = _DIRECTIONS[tried]
            nr, nc = r + dr, c + dc
            if (nr, nc) == end:
                return Maze(_join(grid))
            if is_open(nr, nc):
                grid[nr][nc] = SOLUTION
                stack.append((nr, nc, 0))
        return None

    def render(self) -> str:
        """Return the maze as lines of text."""
        return "\n".join(self.cells)

    def __str__(self) -> str:
        return self.render()


def _join(grid: Iterable[Iterable[str]]) -> tuple[str, ...]:
    return tuple("".join(row) for row in grid)


def _read_size() -> tuple[int, int] | None:
    try:
        line = input("Enter maze size (rows cols, odd numbers recommended): ")
    except EOFError:
        return None
    parts = line.split()
    try:
        return int(parts[0]), int(parts[1])
    except (IndexError, ValueError):
        return None


def main(argv: list[str] | None = None) -> int:
    """Generate a maze, print it, then print it solved."""
    parser = argparse.ArgumentParser(prog="maze", description="Generate and solve a text maze.")
    parser.add_argument("rows", nargs="?", type=int)
    parser.add_argument("cols", nargs="?", type=int)
    parser.add_argument("--seed", type=int, default=None, help="seed for the random generator")
    args = parser.parse_args(argv)

    if args.rows is None or args.cols is None:
        size = _read_size()
        if size is None:
            return 1
        rows, cols = size
    else:
        rows, cols = args.rows, args.cols

    try:
        maze = Maze.generate(rows, cols, random.Random(args.seed))
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    print("\nGenerated Maze:")
    print(maze.render())
    solved = maze.solve()
    if solved is not None:
        print("\nSolved Maze:")
        print(solved.render())
    else:
        print("No solution found!")
    return 0