"""
Tensor interface definitions.

This module defines the domain-level interface for tensor values using
structural typing. It captures the value-type surface that operators and
callers rely on: a :class:`Shape`, a flat row-major float32 element buffer,
and the inference operators that map a tensor to a fresh tensor.

Notes
-----
Tensors are immutable values. No method declared here mutates ``self``;
every operator returns a newly allocated tensor.
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence, Union, runtime_checkable

from ._shape import Shape
from .types._numpy import NDArrayLike

Number = Union[int, float]


@runtime_checkable
class ITensor(Protocol):
    """
    Tensor interface.

    An ``ITensor`` pairs a :class:`Shape` with ``shape.volume`` float32
    elements stored row-major, last dimension fastest.
    """

    # ---------------------------------------------------------------------
    # Core value
    # ---------------------------------------------------------------------
    @property
    def shape(self) -> Shape:
        """
        Return the shape of the tensor.

        Returns
        -------
        Shape
            The tensor's shape.
        """
        ...

    @property
    def elements(self) -> NDArrayLike:
        """
        Return the flat, read-only element buffer.

        Returns
        -------
        NDArrayLike
            One-dimensional float32 buffer of length ``shape.volume``.
        """
        ...

    @property
    def rank(self) -> int:
        """Number of dimensions."""
        ...

    def to_numpy(self) -> NDArrayLike:
        """
        Return a writable copy of the elements shaped by ``shape.dimensions``.
        """
        ...

    # ---------------------------------------------------------------------
    # Inference operators
    # ---------------------------------------------------------------------
    def relu(self) -> "ITensor":
        """Elementwise ``max(x, 0)``."""
        ...

    def softmax(self) -> "ITensor":
        """Global (whole-tensor) softmax without max-subtraction."""
        ...

    def max_pool(self, kernel_size: Sequence[int], strides: Sequence[int]) -> "ITensor":
        """Border-clamped spatial max pooling over a rank-3 tensor."""
        ...

    def conv2d(
        self,
        filter: "ITensor",
        strides: Sequence[int],
        *,
        accumulate: Optional[str] = None,
    ) -> "ITensor":
        """Border-clamped 2D cross-correlation of a rank-3 tensor."""
        ...
