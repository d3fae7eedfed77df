"""
Concrete Tensor implementation (NumPy backend).

This module provides the concrete ``Tensor`` value type that satisfies the
domain-level ``ITensor`` protocol: a :class:`Shape` plus a flat, row-major
float32 buffer whose length always equals ``shape.volume``.

Design notes
------------
- Tensors are immutable values. The element buffer is copied on construction
  and marked read-only, so neither the caller's source sequence nor any
  operator can change a tensor after the fact.
- Operators live in mixins (``tensor.mixins``) and always return tensors with
  freshly allocated storage via :meth:`Tensor._from_array`.
- There is no device, dtype or autograd state; everything is float32 on CPU.
"""

from __future__ import annotations

from typing import Any, Sequence, Union

import numpy as np

from ...domain._errors import ElementCountMismatchError
from ...domain._shape import Shape
from ...domain._tensor import ITensor
from .mixins import (
    TensorMixinArithmetic,
    TensorMixinNN,
    TensorMixinUnary,
    TensorShapeAndIndexingMixin,
)


class Tensor(
    TensorMixinArithmetic,
    TensorMixinUnary,
    TensorMixinNN,
    TensorShapeAndIndexingMixin,
    ITensor,
):
    """
    Immutable float32 tensor.

    Examples
    --------
    >>> t = Tensor((2, 2), [1.0, -2.0, 3.0, -4.0])
    >>> t.relu().elements.tolist()
    [1.0, 0.0, 3.0, 0.0]
    >>> t[1, 0]
    3.0
    """

    def __init__(
        self,
        shape: Union[Shape, Sequence[int]],
        elements: Any,
    ) -> None:
        """
        Construct a tensor from a shape and its flat elements.

        Parameters
        ----------
        shape : Shape or Sequence[int]
            Tensor shape.
        elements : Any
            Row-major elements (list, tuple, ``numpy.ndarray`` ...). The values
            are copied into a new float32 buffer; nested input is flattened in
            row-major order.

        Raises
        ------
        InvalidShapeError
            If ``shape`` has a negative or non-integer dimension.
        ElementCountMismatchError
            If the number of elements differs from ``shape.volume``.
        """
        shape = Shape(shape)
        data = np.array(elements, dtype=np.float32).reshape(-1)
        if data.size != shape.volume:
            raise ElementCountMismatchError(shape.dimensions, data.size)
        data.setflags(write=False)
        self._shape = shape
        self._data = data

    @classmethod
    def _from_array(cls, arr: np.ndarray) -> "Tensor":
        """
        Wrap a freshly allocated array without copying it.

        The array's own shape becomes the tensor shape. Callers must not keep
        a writable reference to ``arr``.
        """
        obj = cls.__new__(cls)
        data = np.ascontiguousarray(arr, dtype=np.float32).reshape(-1)
        data.setflags(write=False)
        obj._shape = Shape(arr.shape)
        obj._data = data
        return obj

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------
    @classmethod
    def zeros(cls, shape: Union[Shape, Sequence[int]]) -> "Tensor":
        """Tensor of the given shape filled with ``0.0``."""
        shape = Shape(shape)
        return cls._from_array(np.zeros(shape.dimensions, dtype=np.float32))

    @classmethod
    def ones(cls, shape: Union[Shape, Sequence[int]]) -> "Tensor":
        """Tensor of the given shape filled with ``1.0``."""
        shape = Shape(shape)
        return cls._from_array(np.ones(shape.dimensions, dtype=np.float32))

    @classmethod
    def from_numpy(cls, arr: Any) -> "Tensor":
        """
        Build a tensor from an array-like, taking the shape from the array.

        The data is copied and cast to float32.
        """
        arr = np.asarray(arr)
        return cls(arr.shape, arr)

    # ------------------------------------------------------------------
    # Value accessors
    # ------------------------------------------------------------------
    @property
    def shape(self) -> Shape:
        """
        Return the tensor shape.

        Returns
        -------
        Shape
            The tensor's shape.
        """
        return self._shape

    @property
    def elements(self) -> np.ndarray:
        """
        Return the flat, read-only, row-major float32 element buffer.
        """
        return self._data

    @property
    def rank(self) -> int:
        return self._shape.rank

    def to_numpy(self) -> np.ndarray:
        """
        Return a writable copy of the elements shaped by ``shape.dimensions``.
        """
        return self._data.reshape(self._shape.dimensions).copy()

    def __eq__(self, other: object) -> bool:
        """
        Exact equality: same shape and bitwise-equal float values.

        NaN never compares equal, matching float semantics.
        """
        if not isinstance(other, Tensor):
            return NotImplemented
        return self._shape == other._shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Tensor(shape={self._shape.dimensions}, elements={self._data.tolist()})"
