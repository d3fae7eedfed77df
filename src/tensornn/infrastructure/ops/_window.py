"""
Spatial-window arithmetic shared by the windowed CPU kernels.

Both ``max_pool`` and ``conv2d`` slide a window over the first two axes of a
``(rows, cols, channels)`` tensor using the same rules:

- Output extent is ``ceil_div(extent, stride)`` so every input position at the
  given stride is covered, including a final partial window.
- The window for a kernel of size ``k`` spans offsets
  ``[min_d, max_d]`` with ``min_d = -((k - 1) // 2)`` and
  ``max_d = min_d + k - 1`` around the anchor ``out_index * stride``.
  Even kernels therefore extend one step further after the anchor than
  before it.
- The window is clamped to the valid input range. There is no padding;
  out-of-range taps are dropped, so border windows are smaller.

Precondition helpers live here too so every kernel raises the same errors
with the same messages.
"""

from __future__ import annotations

import operator
from typing import Sequence, Tuple, Type

from ...domain._errors import (
    InvalidRankError,
    PreconditionError,
    UnsupportedKernelSizeError,
    UnsupportedStrideError,
)


def ceil_div(n: int, stride: int) -> int:
    """
    Integer ceiling division ``ceil(n / stride)``.

    Parameters
    ----------
    n : int
        Non-negative dividend (an input extent).
    stride : int
        Positive divisor.

    Returns
    -------
    int
        ``(n + stride - 1) // stride``.

    Raises
    ------
    UnsupportedStrideError
        If ``stride < 1``.
    PreconditionError
        If ``n < 0``.

    Examples
    --------
    >>> ceil_div(5, 2)
    3
    >>> ceil_div(4, 2)
    2
    """
    if stride < 1:
        raise UnsupportedStrideError("stride", stride, "must be >= 1")
    if n < 0:
        raise PreconditionError(f"`n` must be >= 0: {n}")
    return (n + stride - 1) // stride


def window_offsets(kernel: int) -> Tuple[int, int]:
    """
    Return the inclusive ``(min_d, max_d)`` tap offsets for a kernel extent.

    >>> window_offsets(3)
    (-1, 1)
    >>> window_offsets(2)
    (0, 1)
    >>> window_offsets(4)
    (-1, 2)
    """
    min_d = -((kernel - 1) // 2)
    return min_d, min_d + kernel - 1


def clamp_window(anchor: int, min_d: int, max_d: int, extent: int) -> Tuple[int, int]:
    """
    Clamp the window around ``anchor`` to ``[0, extent - 1]``.

    Returns
    -------
    tuple[int, int]
        Inclusive ``(lo, hi)`` bounds of the in-range taps.
    """
    return max(anchor + min_d, 0), min(anchor + max_d, extent - 1)


def check_rank(name: str, actual: int, expected: int) -> None:
    """Raise :class:`InvalidRankError` unless ``actual == expected``."""
    if actual != expected:
        raise InvalidRankError(name, expected, actual)


def _integer_entries(
    name: str, values: Sequence[int], error: Type[PreconditionError]
) -> Tuple[int, ...]:
    """
    Convert each entry with ``operator.index``, rejecting bools and
    non-integral values with ``error`` instead of truncating them.
    """
    out = []
    for axis, v in enumerate(values):
        if isinstance(v, bool):
            raise error(f"{name}[{axis}]", v, "must be an integer")
        try:
            out.append(operator.index(v))
        except TypeError:
            raise error(f"{name}[{axis}]", v, "must be an integer") from None
    return tuple(out)


def check_strides(strides: Sequence[int]) -> Tuple[int, int]:
    """
    Validate a rank-3 ``(row, col, depth)`` stride triple.

    Returns
    -------
    tuple[int, int]
        The spatial ``(row_stride, col_stride)``.
    """
    check_rank("strides", len(strides), 3)
    s = _integer_entries("strides", strides, UnsupportedStrideError)
    if s[2] != 1:
        raise UnsupportedStrideError("strides[2]", s[2], "!= 1 is not supported")
    for axis in (0, 1):
        if s[axis] < 1:
            raise UnsupportedStrideError(f"strides[{axis}]", s[axis], "must be >= 1")
    return s[0], s[1]


def check_kernel_size(kernel_size: Sequence[int]) -> Tuple[int, int]:
    """
    Validate a rank-3 ``(height, width, depth)`` pooling kernel size.

    Returns
    -------
    tuple[int, int]
        The spatial ``(kernel_height, kernel_width)``.
    """
    check_rank("kernel_size", len(kernel_size), 3)
    k = _integer_entries("kernel_size", kernel_size, UnsupportedKernelSizeError)
    if k[2] != 1:
        raise UnsupportedKernelSizeError("kernel_size[2]", k[2], "!= 1 is not supported")
    for axis in (0, 1):
        if k[axis] < 1:
            raise UnsupportedKernelSizeError(
                f"kernel_size[{axis}]", k[axis], "must be >= 1"
            )
    return k[0], k[1]
