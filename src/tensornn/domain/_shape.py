"""
Shape value type.

A :class:`Shape` is an ordered, immutable tuple of non-negative dimension
sizes. It defines how many elements a tensor holds and how a multi-index maps
onto the tensor's flat storage.

Indexing convention
-------------------
Storage is row-major with the last dimension varying fastest. For a shape
``(d0, d1, ..., dk-1)`` the strides are::

    stride[k-1] = 1
    stride[j]   = stride[j+1] * d[j+1]

and the element at ``(i0, ..., ik-1)`` lives at ``sum(i_j * stride[j])``.

Notes
-----
This module contains no NumPy logic and is safe to depend on from any layer.
"""

from __future__ import annotations

import operator
from numbers import Integral
from typing import Iterable, Iterator, Sequence, Tuple, Union

from ._errors import InvalidShapeError


def _normalize_dimensions(dimensions: Iterable[object]) -> Tuple[int, ...]:
    """
    Validate and convert raw dimensions into a tuple of ints.

    Raises
    ------
    InvalidShapeError
        If any dimension is not an integer (bools included) or is negative.
    """
    raw = tuple(dimensions)
    out = []
    for d in raw:
        if isinstance(d, bool):
            raise InvalidShapeError(raw, f"dimension {d!r} is not an integer")
        try:
            v = operator.index(d)
        except TypeError:
            raise InvalidShapeError(raw, f"dimension {d!r} is not an integer") from None
        if v < 0:
            raise InvalidShapeError(raw, f"dimension {v} is negative")
        out.append(v)
    return tuple(out)


class Shape:
    """
    Immutable, hashable tensor shape.

    Examples
    --------
    >>> Shape(2, 3, 4).volume
    24
    >>> Shape((2, 3)).strides
    (3, 1)
    >>> Shape(2, 3) == (2, 3)
    True
    """

    __slots__ = ("_dimensions", "_strides")

    def __init__(self, *dimensions: Union[int, Iterable[int]]) -> None:
        """
        Build a shape from positional dimensions or a single iterable.

        Parameters
        ----------
        *dimensions : int or Iterable[int]
            Either ``Shape(2, 3)``, ``Shape((2, 3))`` or ``Shape(other_shape)``.

        Raises
        ------
        InvalidShapeError
            If any dimension is not a non-negative integer.
        """
        if len(dimensions) == 1 and not isinstance(dimensions[0], Integral):
            first = dimensions[0]
            if isinstance(first, Shape):
                dims = first._dimensions
            else:
                try:
                    dims = _normalize_dimensions(first)  # type: ignore[arg-type]
                except TypeError:
                    raise InvalidShapeError(
                        (first,), "dimension is not an integer"
                    ) from None
        else:
            dims = _normalize_dimensions(dimensions)

        strides = [1] * len(dims)
        for j in range(len(dims) - 2, -1, -1):
            strides[j] = strides[j + 1] * dims[j + 1]

        self._dimensions: Tuple[int, ...] = dims
        self._strides: Tuple[int, ...] = tuple(strides)

    @property
    def dimensions(self) -> Tuple[int, ...]:
        """The dimension sizes as a tuple."""
        return self._dimensions

    @property
    def rank(self) -> int:
        """Number of dimensions."""
        return len(self._dimensions)

    @property
    def volume(self) -> int:
        """
        Total element count (product of all dimensions).

        A rank-0 shape has volume 1.
        """
        v = 1
        for d in self._dimensions:
            v *= d
        return v

    @property
    def strides(self) -> Tuple[int, ...]:
        """Row-major element strides, last axis contiguous."""
        return self._strides

    def offset(self, index: Sequence[int]) -> int:
        """
        Compute the flat storage offset of a multi-index.

        Parameters
        ----------
        index : Sequence[int]
            One non-negative index per dimension.

        Returns
        -------
        int
            ``sum(index[j] * strides[j])``.

        Raises
        ------
        IndexError
            If the index has the wrong length or any component is out of range.
        """
        if len(index) != len(self._dimensions):
            raise IndexError(
                f"index {tuple(index)!r} has {len(index)} components, "
                f"shape {self._dimensions!r} has rank {len(self._dimensions)}"
            )
        off = 0
        for axis, (i, d, s) in enumerate(zip(index, self._dimensions, self._strides)):
            i = operator.index(i)
            if not 0 <= i < d:
                raise IndexError(
                    f"index {i} is out of range for axis {axis} with size {d}"
                )
            off += i * s
        return off

    def __len__(self) -> int:
        return len(self._dimensions)

    def __iter__(self) -> Iterator[int]:
        return iter(self._dimensions)

    def __getitem__(self, axis: int) -> int:
        return self._dimensions[axis]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Shape):
            return self._dimensions == other._dimensions
        if isinstance(other, tuple):
            return self._dimensions == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._dimensions)

    def __repr__(self) -> str:
        return f"Shape{self._dimensions!r}"
