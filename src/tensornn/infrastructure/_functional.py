"""
Functional entry points for the inference operators.

These free functions are the library's primary API surface. Each one takes a
tensor (and the operator's parameters) and returns a new tensor; they simply
delegate to the corresponding ``Tensor`` method so both spellings behave
identically::

    y = conv2d(x, w, [1, 1, 1])
    y = x.conv2d(w, [1, 1, 1])

All precondition violations raise subclasses of
:class:`~tensornn.domain._errors.PreconditionError` before any computation.
"""

from __future__ import annotations

from typing import Optional, Sequence

from .tensor._tensor import Tensor


def relu(tensor: Tensor) -> Tensor:
    """Elementwise ``max(x, 0)``; shape preserved."""
    return tensor.relu()


def softmax(tensor: Tensor) -> Tensor:
    """
    Whole-tensor softmax: ``exp(x) / sum(exp(x))`` with a single global sum.

    Not stabilized and not per-axis; see :meth:`Tensor.softmax`.
    """
    return tensor.softmax()


def max_pool(
    tensor: Tensor,
    kernel_size: Sequence[int],
    strides: Sequence[int],
) -> Tensor:
    """
    Border-clamped max pooling of a ``(rows, cols, channels)`` tensor.

    Parameters
    ----------
    tensor : Tensor
        Rank-3 input.
    kernel_size : Sequence[int]
        ``(height, width, 1)``.
    strides : Sequence[int]
        ``(row_stride, col_stride, 1)``.
    """
    return tensor.max_pool(kernel_size, strides)


def conv2d(
    tensor: Tensor,
    filter: Tensor,
    strides: Sequence[int],
    *,
    accumulate: Optional[str] = None,
) -> Tensor:
    """
    Border-clamped 2D cross-correlation of a ``(rows, cols, in_channels)``
    tensor with a ``(fh, fw, in_channels, out_channels)`` filter.

    Parameters
    ----------
    tensor : Tensor
        Rank-3 input.
    filter : Tensor
        Rank-4 filter.
    strides : Sequence[int]
        ``(row_stride, col_stride, 1)``.
    accumulate : str or None, optional
        ``matmuladd`` mode; defaults to ``TENSORNN_ACCUMULATE`` or
        ``"vectorized"``.
    """
    return tensor.conv2d(filter, strides, accumulate=accumulate)
