"""Quarto pawns: their four traits, the full set, shuffling and drawing."""

from __future__ import annotations

import random
from dataclasses import dataclass
from itertools import product
from typing import MutableSequence, Sequence

EMPTY_MARK = "0"

LENGTHS = ("G", "P")
FORMS = ("R", "C")
COLORS = ("J", "B")
FILLS = ("E", "T")

TRAITS = ("length", "form", "color", "fill")


@dataclass(frozen=True)
class Pawn:
    """A pawn described by one letter per trait; all '0' marks an empty square."""

    length: str = EMPTY_MARK
    form: str = EMPTY_MARK
    color: str = EMPTY_MARK
    fill: str = EMPTY_MARK

    def is_empty(self) -> bool:
        """Return True when this pawn stands for an empty square."""
        return self.length == EMPTY_MARK

    def code(self) -> str:
        """Return the four trait letters, e.g. 'GRJE'."""
        return f"{self.length}{self.form}{self.color}{self.fill}"


EMPTY_PAWN = Pawn()


def make_pawn_set() -> list[Pawn]:
    """Return the sixteen distinct pawns, large ones first, fill alternating fastest."""
    return [
        Pawn(length, form, color, fill)
        for length, form, color, fill in product(LENGTHS, FORMS, COLORS, FILLS)
    ]


def shuffle_pawns(pawns: Sequence[Pawn], rng: random.Random | None = None) -> list[Pawn]:
    """Return a shuffled copy of ``pawns``."""
    generator = rng if rng is not None else random.Random()
    shuffled = list(pawns)
    generator.shuffle(shuffled)
    return shuffled


def take_pawn(pawns: MutableSequence[Pawn], index: int) -> Pawn:
    """Remove and return the pawn at ``index``; the last pawn takes its place."""
    if not 0 <= index < len(pawns):
        raise IndexError(f"pawn index {index} out of range")
    chosen = pawns[index]
    pawns[index] = pawns[-1]
    pawns.pop()
    return chosen