"""Offcut pool: the shared inventory of piece lengths.

The pool is a multiset of integer lengths kept sorted in descending order.
Pieces of equal length are interchangeable, so the pool stores plain ints
and never tracks identity.

Allocation attempts draw pieces through a :class:`PoolDraw`, which buffers
everything taken during the attempt. A committed draw leaves the pieces
consumed; an uncommitted draw puts them back when the block exits, so a
failed attempt leaves the pool exactly as it found it.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)


class OffcutPool:
    """Descending-sorted multiset of available offcut lengths."""

    def __init__(self, lengths: Iterable[int] = ()) -> None:
        pieces = [int(length) for length in lengths]
        if any(length < 0 for length in pieces):
            raise ValueError("Offcut lengths must be non-negative")
        self._pieces: list[int] = sorted(pieces, reverse=True)

    def __len__(self) -> int:
        return len(self._pieces)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._pieces))

    def __getitem__(self, index: int) -> int:
        return self._pieces[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, OffcutPool):
            return self._pieces == other._pieces
        if isinstance(other, list):
            return self._pieces == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"OffcutPool({self._pieces!r})"

    @property
    def lengths(self) -> list[int]:
        """Copy of the pool contents, longest first."""
        return list(self._pieces)

    @property
    def total_length(self) -> int:
        """Combined length of every piece in the pool."""
        return sum(self._pieces)

    def smallest_at_least(self, length: int) -> int | None:
        """Index of the shortest piece that is at least ``length`` long.

        Among equal lengths the first occurrence wins. Returns None when
        every piece is shorter than ``length``.
        """
        best: int | None = None
        for index, piece in enumerate(self._pieces):
            if piece < length:
                # Sorted descending: nothing further qualifies
                break
            if best is None or piece < self._pieces[best]:
                best = index
        return best

    def largest_at_most(self, length: int) -> int | None:
        """Index of the longest piece that is no longer than ``length``.

        Returns None when every piece exceeds ``length``.
        """
        for index, piece in enumerate(self._pieces):
            if piece <= length:
                return index
        return None

    def take(self, index: int) -> int:
        """Remove and return the piece at ``index``."""
        return self._pieces.pop(index)

    def restore(self, lengths: Iterable[int]) -> None:
        """Put pieces back and re-establish descending order."""
        self._pieces.extend(lengths)
        self._pieces.sort(reverse=True)

    def draw(self) -> PoolDraw:
        """Start a buffered draw for one allocation attempt."""
        return PoolDraw(self)


class PoolDraw:
    """Pieces taken from a pool during a single allocation attempt.

    Use as a context manager. Pieces taken through the draw are returned to
    the pool on exit unless :meth:`commit` was called.

    Example:
        >>> pool = OffcutPool([60, 50, 10])
        >>> with pool.draw() as draw:
        ...     draw.take(pool.largest_at_most(55))
        50
        >>> pool.lengths
        [60, 50, 10]
    """

    def __init__(self, pool: OffcutPool) -> None:
        self._pool = pool
        self._taken: list[int] = []
        self._committed = False

    def __enter__(self) -> PoolDraw:
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if not self._committed and self._taken:
            logger.debug("Returning %d pieces to the pool: %s", len(self._taken), self._taken)
            self._pool.restore(self._taken)
            self._taken = []
        return False

    @property
    def taken(self) -> list[int]:
        """Pieces drawn so far, in selection order."""
        return list(self._taken)

    @property
    def total(self) -> int:
        return sum(self._taken)

    def take(self, index: int) -> int:
        piece = self._pool.take(index)
        self._taken.append(piece)
        return piece

    def commit(self) -> None:
        """Keep every drawn piece out of the pool."""
        self._committed = True
