"""
Tensor shape and element-access mixin (NumPy CPU backend).

Reshaping keeps the row-major element order and copies into fresh storage,
like every other operator result.
"""

from __future__ import annotations

from typing import Sequence, Union

from ....domain._errors import ShapeMismatchError
from ....domain._shape import Shape
from ....domain._tensor import ITensor


class TensorShapeAndIndexingMixin:
    """
    Shape-transforming and indexing methods for the concrete Tensor.

    Assumes the host class provides ``_shape``, ``_data`` and ``_from_array``.
    """

    def reshape(self, shape: Union[Shape, Sequence[int]]) -> ITensor:
        """
        Return a tensor with the same elements and a new shape.

        Parameters
        ----------
        shape : Shape or Sequence[int]
            Target shape. Its volume must equal this tensor's volume.

        Raises
        ------
        ShapeMismatchError
            If the volumes differ.
        """
        target = Shape(shape)
        if target.volume != self._shape.volume:
            raise ShapeMismatchError("reshape", self._shape, target)
        return self.__class__._from_array(self._data.reshape(target.dimensions).copy())

    def __getitem__(self, index: Union[int, Sequence[int]]) -> float:
        """
        Read a single element by multi-index.

        ``t[i, j, k]`` returns the element at flat offset
        ``i * strides[0] + j * strides[1] + k``. A rank-1 tensor also accepts
        a bare integer.

        Raises
        ------
        IndexError
            If the index length does not match the rank or is out of range.
        """
        if not isinstance(index, tuple):
            index = (index,)
        return float(self._data[self._shape.offset(index)])
