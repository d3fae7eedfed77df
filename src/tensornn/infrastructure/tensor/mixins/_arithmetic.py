"""
Elementwise arithmetic and matrix-product mixin (NumPy CPU backend).

Binary operators accept either a tensor of exactly the same shape or a Python
/ NumPy scalar on either side. There is no broadcasting. Every operator
returns a newly allocated tensor; operands are never modified.

New tensors are constructed through ``self.__class__._from_array`` so this
module does not import the concrete ``Tensor`` class.
"""

from __future__ import annotations

from numbers import Real
from typing import Callable, Optional, Union

import numpy as np

from ....domain._errors import ShapeMismatchError
from ....domain._tensor import ITensor, Number
from ...ops.matmuladd_cpu import matmuladd, resolve_accumulate_mode


class TensorMixinArithmetic:
    """
    Elementwise ``+ - * /``, unary negation and rank-2 ``matmul``.

    Notes
    -----
    Assumes the host class provides ``_shape``, ``_data`` (flat float32
    buffer) and the ``_from_array`` constructor.
    """

    def _binary(
        self,
        other: Union[ITensor, Number],
        fn: Callable[[np.ndarray, np.ndarray], np.ndarray],
        op: str,
        reflected: bool = False,
    ) -> ITensor:
        if isinstance(other, TensorMixinArithmetic):
            if other._shape != self._shape:
                raise ShapeMismatchError(op, self._shape, other._shape)
            rhs = other._data
        elif isinstance(other, (Real, np.floating, np.integer)) and not isinstance(other, bool):
            rhs = np.float32(other)
        else:
            return NotImplemented

        lhs = self._data
        if reflected:
            lhs, rhs = rhs, lhs
        with np.errstate(over="ignore", invalid="ignore", divide="ignore"):
            out = fn(lhs, rhs).astype(np.float32, copy=False)
        return self.__class__._from_array(out.reshape(self._shape.dimensions))

    def __add__(self, other: Union[ITensor, Number]) -> ITensor:
        return self._binary(other, np.add, "add")

    def __radd__(self, other: Number) -> ITensor:
        return self._binary(other, np.add, "add", reflected=True)

    def __sub__(self, other: Union[ITensor, Number]) -> ITensor:
        return self._binary(other, np.subtract, "sub")

    def __rsub__(self, other: Number) -> ITensor:
        return self._binary(other, np.subtract, "sub", reflected=True)

    def __mul__(self, other: Union[ITensor, Number]) -> ITensor:
        return self._binary(other, np.multiply, "mul")

    def __rmul__(self, other: Number) -> ITensor:
        return self._binary(other, np.multiply, "mul", reflected=True)

    def __truediv__(self, other: Union[ITensor, Number]) -> ITensor:
        """
        Elementwise true division.

        Division by zero follows IEEE-754 (``inf`` / ``nan``) and is not
        reported.
        """
        return self._binary(other, np.true_divide, "div")

    def __rtruediv__(self, other: Number) -> ITensor:
        return self._binary(other, np.true_divide, "div", reflected=True)

    def __neg__(self) -> ITensor:
        return self.__class__._from_array(
            np.negative(self._data).reshape(self._shape.dimensions)
        )

    def matmul(self, other: ITensor, *, accumulate: Optional[str] = None) -> ITensor:
        """
        Matrix product of two rank-2 tensors.

        Each output row is built with :func:`matmuladd`, starting from zero,
        so the result uses the same accumulation order as ``conv2d``.

        Parameters
        ----------
        other : ITensor
            Right-hand matrix of shape ``(k, n)``.
        accumulate : str or None, optional
            ``matmuladd`` mode.

        Returns
        -------
        ITensor
            Tensor of shape ``(m, n)``.

        Raises
        ------
        ShapeMismatchError
            If either operand is not rank 2 or the inner dimensions differ.
        """
        a_shape, b_shape = self._shape, other.shape
        if a_shape.rank != 2 or b_shape.rank != 2 or a_shape[1] != b_shape[0]:
            raise ShapeMismatchError("matmul", a_shape, b_shape)

        mode = resolve_accumulate_mode(accumulate)
        m, k = a_shape
        n = b_shape[1]
        a = self._data.reshape(m, k)
        b = other.elements.reshape(k, n)
        out = np.zeros((m, n), dtype=np.float32)
        for r in range(m):
            matmuladd(a[r], b, out[r], mode=mode)
        return self.__class__._from_array(out)

    def __matmul__(self, other: ITensor) -> ITensor:
        if not isinstance(other, TensorMixinArithmetic):
            return NotImplemented
        return self.matmul(other)
