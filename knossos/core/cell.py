"""
Cell wall state as a compact 4-bit mask.

A set bit means the passage on that side has been carved; a clear bit means
the wall is standing. A freshly allocated cell therefore has mask ``0b0000``
(four walls) and a dead end has exactly one bit set.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass

from .coords import DIRECTIONS, Direction

PASSAGE_MASK = 0b1111


@dataclass(frozen=True)
class Cell:
    """
    Immutable wall state of one maze cell.

    Attributes:
        bits: Raw passage mask using the :class:`Direction` bit assignment

    Cells are values: the grid stores their masks and hands out fresh
    ``Cell`` objects, so a cell obtained from a maze can never be used to
    break wall symmetry.
    """

    bits: int = 0

    def __post_init__(self):
        if isinstance(self.bits, bool) or not isinstance(self.bits, int) or not 0 <= self.bits <= PASSAGE_MASK:
            raise ValueError(f"Cell mask must be an integer in [0, {PASSAGE_MASK}], got {self.bits!r}")
        object.__setattr__(self, "bits", int(self.bits))

    @classmethod
    def from_bits(cls, bits: int) -> Cell:
        """Build a cell from a raw mask as produced by :meth:`to_bits`."""
        return cls(operator.index(bits))

    def is_carved(self, direction: Direction) -> bool:
        """True if the passage towards ``direction`` is open."""
        return bool(self.bits & direction)

    def is_wall(self, direction: Direction) -> bool:
        """True if the wall towards ``direction`` is standing."""
        return not self.bits & direction

    def with_wall(self, direction: Direction, open_: bool) -> Cell:
        """Copy of this cell with the wall towards ``direction`` opened or closed."""
        if open_:
            return Cell(int(self.bits | direction))
        return Cell(int(self.bits & ~direction & PASSAGE_MASK))

    def open_count(self) -> int:
        """Number of carved sides (0-4)."""
        return bin(self.bits).count("1")

    def walls_count(self) -> int:
        """Number of standing walls (0-4)."""
        return 4 - self.open_count()

    def is_end(self) -> bool:
        """True for a maze end: exactly three walls, one way in."""
        return self.walls_count() == 3

    def passages(self) -> list[Direction]:
        """Carved directions in N, S, W, E order."""
        return [d for d in DIRECTIONS if self.bits & d]

    def to_bits(self) -> int:
        """Stable raw mask for renderers and external storage."""
        return self.bits

    def to_bit_string(self) -> str:
        """Fixed-width binary text of the mask, e.g. ``"0011"`` for N|S."""
        return format(self.bits, "04b")

    def __repr__(self) -> str:
        names = "|".join(d.name for d in self.passages()) or "WALLED"
        return f"Cell({names})"
