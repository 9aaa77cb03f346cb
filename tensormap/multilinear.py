"""Multilinear maps (tensors) stored as a flat field of floats."""

from __future__ import annotations

import math
import operator
from collections.abc import Iterable, Sequence
from typing import Union

# Byte sizes of the stored layout: a header holding the dimension count,
# one length word per dimension, then one float per element.
_HEADER_BYTES = 8
_LENGTH_BYTES = 8
_FLOAT_BYTES = 8

Index = Union[int, Sequence[int]]


def _as_lengths(lens: Iterable[int]) -> tuple[int, ...]:
    if lens is None:
        raise ValueError("lens must not be None")
    lengths = tuple(operator.index(length) for length in lens)
    if not lengths:
        raise ValueError("a multilinear map needs at least one dimension")
    if any(length < 0 for length in lengths):
        raise ValueError("dimension lengths must be non-negative")
    return lengths


def mmap_size(lens: Iterable[int]) -> int:
    """Return the bytes needed to hold a map with the given dimension lengths."""
    lengths = _as_lengths(lens)
    return (
        math.prod(lengths) * _FLOAT_BYTES
        + len(lengths) * _LENGTH_BYTES
        + _HEADER_BYTES
    )


class MMap:
    """A zero-initialised tensor whose elements live in one flat field."""

    def __init__(self, lens: Iterable[int]) -> None:
        self.lens: tuple[int, ...] = _as_lengths(lens)
        self.field: list[float] = [0.0] * math.prod(self.lens)

    @property
    def dim(self) -> int:
        """Number of dimensions."""
        return len(self.lens)

    @property
    def nbytes(self) -> int:
        """Bytes this map occupies in its stored layout."""
        return mmap_size(self.lens)

    def field_index(self, idxs: Iterable[int]) -> int:
        """Map a multi-index onto a position in the flat field.

        Each index is reduced modulo the length of its dimension; the first
        index varies fastest.
        """
        indices = tuple(operator.index(i) for i in idxs)
        if not indices:
            raise ValueError("at least one index is required")
        if any(i < 0 for i in indices):
            raise ValueError("indices must be non-negative")

        used = min(len(indices), self.dim)
        position = 0
        for axis in range(used - 1, 0, -1):
            length = self._length(axis)
            position = (position + indices[axis] % length) * length

        position += indices[len(indices) - used] % self._length(0)
        return position * math.prod(self.lens[1 : self.dim - used + 1])

    def _length(self, axis: int) -> int:
        length = self.lens[axis]
        if length == 0:
            raise ValueError(f"dimension {axis} has zero length")
        return length

    def _position(self, idxs: Index) -> int:
        if isinstance(idxs, (tuple, list)):
            return self.field_index(idxs)
        return operator.index(idxs)

    def __getitem__(self, idxs: Index) -> float:
        return self.field[self._position(idxs)]

    def __setitem__(self, idxs: Index, value: float) -> None:
        self.field[self._position(idxs)] = float(value)

    def __len__(self) -> int:
        return len(self.field)

    def __repr__(self) -> str:
        return f"MMap(lens={self.lens!r})"