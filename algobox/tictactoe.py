"""Two-player Tic-Tac-Toe on the command line."""

from __future__ import annotations

import re
import sys

__all__ = ["Board", "main"]

EMPTY = " "
MARKS = ("X", "O")

_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class Board:
    """A 3x3 board whose cells are numbered 1 to 9, row by row."""

    def __init__(self) -> None:
        self._cells = [EMPTY] * 9

    def place(self, cell: int, mark: str) -> None:
        """Put ``mark`` on ``cell``; raise ValueError for a bad or taken cell."""
        if mark not in MARKS:
            raise ValueError(f"mark must be X or O, got {mark!r}")
        if not 1 <= cell <= 9:
            raise ValueError("Choose a number between 1 and 9.")
        if self._cells[cell - 1] != EMPTY:
            raise ValueError("Cell already taken. Choose another.")
        self._cells[cell - 1] = mark

    def winner(self) -> str | None:
        """Return the mark holding a full row, column or diagonal, or None."""
        for a, b, c in _LINES:
            if self._cells[a] != EMPTY and self._cells[a] == self._cells[b] == self._cells[c]:
                return self._cells[a]
        return None

    def moves_left(self) -> bool:
        """Return True while some cell is still empty."""
        return EMPTY in self._cells

    def render(self) -> str:
        """Draw the board, showing the number of each empty cell."""
        rows = []
        for start in range(0, 9, 3):
            shown = (
                str(index + 1) if self._cells[index] == EMPTY else self._cells[index]
                for index in range(start, start + 3)
            )
            rows.append("|".join(f" {c} " for c in shown))
        return "\n---+---+---\n".join(rows)

    def __str__(self) -> str:
        return self.render()


def _leading_int(text: str) -> int | None:
    found = re.match(r"\s*([+-]?\d+)", text)
    return int(found.group(1)) if found else None


def _show(board: Board) -> None:
    print("\nCurrent board:")
    print(board.render())
    print()


def _play_round() -> bool:
    """Play one game; return False if input ran out."""
    board = Board()
    player = "X"
    print("Tic-Tac-Toe (CLI)")
    print("Players: X and O")
    print("Enter cell numbers 1-9 as shown on board to place your mark.")

    while board.winner() is None and board.moves_left():
        _show(board)
        while True:
            try:
                raw = input(f"Player {player}, enter your move (1-9): ")
            except EOFError:
                return False
            choice = _leading_int(raw)
            if choice is None:
                print("Invalid input. Please enter a number 1-9.")
                continue
            try:
                board.place(choice, player)
            except ValueError as exc:
                print(exc)
                continue
            break
        if board.winner() is None and board.moves_left():
            player = "O" if player == "X" else "X"

    _show(board)
    winner = board.winner()
    if winner is not None:
        print(f"Player {winner} wins! 🎉")
    else:
        print("It's a draw! 🤝")
    return True


def main(argv: list[str] | None = None) -> int:
    """Run games until the players decline another."""
    del argv
    while True:
        if not _play_round():
            return 1
        try:
            answer = input("Play again? (y/n): ").strip()
        except EOFError:
            answer = "n"
        if answer[:1] not in ("y", "Y"):
            break
    print("Thanks for playing! Goodbye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())