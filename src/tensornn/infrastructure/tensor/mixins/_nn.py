"""
Neural-network inference operators as Tensor methods.

Each method runs the matching CPU kernel, which checks its preconditions
before computing, and wraps the freshly allocated result. The free functions in
``tensornn.infrastructure._functional`` delegate here.
"""

from __future__ import annotations

from typing import Optional, Sequence

from ....domain._tensor import ITensor
from ...ops.activation_cpu import relu_forward_cpu, softmax_forward_cpu
from ...ops.conv2d_cpu import conv2d_forward_cpu
from ...ops.pool2d_cpu import maxpool2d_forward_cpu


class TensorMixinNN:
    """
    Activation and spatial-window operators.

    Assumes the host class provides ``_shape``, ``_data``, ``to_numpy`` and
    ``_from_array``.
    """

    def relu(self) -> ITensor:
        """
        Elementwise rectified linear unit, ``max(x, 0)``.

        Returns
        -------
        ITensor
            Tensor of identical shape.
        """
        out = relu_forward_cpu(self._data)
        return self.__class__._from_array(out.reshape(self._shape.dimensions))

    def softmax(self) -> ITensor:
        """
        Whole-tensor softmax.

        All elements are exponentiated and divided by one global sum, so the
        output sums to 1 over the entire tensor regardless of rank. There is
        no max-subtraction; large inputs produce ``inf`` / ``nan`` silently.

        Returns
        -------
        ITensor
            Tensor of identical shape.
        """
        out = softmax_forward_cpu(self._data)
        return self.__class__._from_array(out.reshape(self._shape.dimensions))

    def max_pool(self, kernel_size: Sequence[int], strides: Sequence[int]) -> ITensor:
        """
        Border-clamped max pooling over a ``(rows, cols, channels)`` tensor.

        Parameters
        ----------
        kernel_size : Sequence[int]
            ``(height, width, depth)``; depth must be 1.
        strides : Sequence[int]
            ``(row_stride, col_stride, depth_stride)``; depth stride must be 1.

        Returns
        -------
        ITensor
            Tensor of shape ``(ceil(rows / row_stride), ceil(cols / col_stride), channels)``.
        """
        out = maxpool2d_forward_cpu(
            self.to_numpy(), kernel_size=kernel_size, strides=strides
        )
        return self.__class__._from_array(out)

    def conv2d(
        self,
        filter: ITensor,
        strides: Sequence[int],
        *,
        accumulate: Optional[str] = None,
    ) -> ITensor:
        """
        Border-clamped 2D cross-correlation (no bias, no padding).

        Parameters
        ----------
        filter : ITensor
            Rank-4 ``(filter_height, filter_width, in_channels, out_channels)``.
        strides : Sequence[int]
            ``(row_stride, col_stride, depth_stride)``; depth stride must be 1.
        accumulate : str or None, optional
            ``matmuladd`` mode (``"reference"``, ``"vectorized"``, ``"blas"``).

        Returns
        -------
        ITensor
            Tensor of shape
            ``(ceil(rows / row_stride), ceil(cols / col_stride), out_channels)``.
        """
        out = conv2d_forward_cpu(
            self.to_numpy(),
            filter.to_numpy(),
            strides=strides,
            accumulate=accumulate,
        )
        return self.__class__._from_array(out)
