"""The Quarto game board."""

from __future__ import annotations

from typing import Iterable

from .pieces import EMPTY_PAWN, TRAITS, Pawn

_LEGEND = (
    "\nChaque lettre représente une caractéristique\n\n"
    "Taille : Grand(G) ou Petit(P)\n"
    "Forme : Rond(R) ou Carrée(C)\n"
    "Couleur : Jaune(J) ou Brun(B)\n"
    "Remplissage : Entier(E) ou Troué(T)\n\n"
    "VIDE indique une case vide\n\n"
)


def _line_shares_trait(pawns: Iterable[Pawn]) -> bool:
    line = list(pawns)
    if any(pawn.is_empty() for pawn in line):
        return False
    return any(len({getattr(pawn, trait) for pawn in line}) == 1 for trait in TRAITS)


class Board:
    """A square grid of pawns, empty squares holding the empty pawn."""

    def __init__(self, size: int = 4) -> None:
        if size < 1:
            raise ValueError("board size must be positive")
        self.size = size
        self._cells = [[EMPTY_PAWN] * size for _ in range(size)]

    def _check_index(self, index: int, what: str) -> None:
        if not 0 <= index < self.size:
            raise IndexError(f"{what} {index} out of range")

    def place(self, row: int, column: int, pawn: Pawn) -> None:
        """Put ``pawn`` on an empty square."""
        self._check_index(row, "row")
        self._check_index(column, "column")
        if pawn.is_empty():
            raise ValueError("cannot place an empty pawn")
        if self.is_occupied(row, column):
            raise ValueError(f"square ({row}, {column}) is already occupied")
        self._cells[row][column] = pawn

    def is_occupied(self, row: int, column: int) -> bool:
        """Return True when the square holds a pawn."""
        self._check_index(row, "row")
        self._check_index(column, "column")
        return not self._cells[row][column].is_empty()

    def row_is_full(self, row: int) -> bool:
        """Return True when no square of the row is empty."""
        self._check_index(row, "row")
        return not any(pawn.is_empty() for pawn in self._cells[row])

    def column_is_full(self, column: int) -> bool:
        """Return True when no square of the column is empty."""
        self._check_index(column, "column")
        return not any(line[column].is_empty() for line in self._cells)

    def row_shares_trait(self, row: int) -> bool:
        """Return True when the row is full and all its pawns share a trait."""
        self._check_index(row, "row")
        return _line_shares_trait(self._cells[row])

    def column_shares_trait(self, column: int) -> bool:
        """Return True when the column is full and all its pawns share a trait."""
        self._check_index(column, "column")
        return _line_shares_trait(line[column] for line in self._cells)

    def is_win(self, row: int, column: int) -> bool:
        """Return True when the move at (row, column) completed a winning line."""
        return self.row_shares_trait(row) or self.column_shares_trait(column)

    def rows(self) -> tuple[tuple[Pawn, ...], ...]:
        """Return the board contents row by row."""
        return tuple(tuple(line) for line in self._cells)

    def render(self) -> str:
        """Return the legend followed by the grid, 'VIDE' marking empty squares."""
        grid = "".join(
            "".join(("VIDE" if pawn.is_empty() else pawn.code()) + " " for pawn in line) + "\n"
            for line in self._cells
        )
        return _LEGEND + grid + "\n"