"""
CPU reference Conv2D kernel for tensornn.

This module implements 2D cross-correlation over a single ``(rows, cols,
in_channels)`` image with a ``(filter_height, filter_width, in_channels,
out_channels)`` filter, using explicit loops over output positions and taps
and delegating the per-tap channel mixing to :func:`matmuladd`.

Design goals
------------
- Same window placement and border clamping as max pooling
  (see :mod:`._window`): taps outside the input are skipped, never padded.
- Deterministic accumulation: output vectors start at zero and taps are
  visited row-major over ``(y2, x2)``. With the ``"reference"`` or
  ``"vectorized"`` accumulate modes the float32 rounding sequence of every
  output element is fixed.

Non-goals
---------
- Bias, dilation, groups, kernel flipping, batching.

Tensor layout
-------------
- input : ``(rows, cols, in_channels)``
- filter: ``(filter_height, filter_width, in_channels, out_channels)``
- output: ``(ceil_div(rows, row_stride), ceil_div(cols, col_stride), out_channels)``
"""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from ...domain._errors import ChannelMismatchError
from ._window import ceil_div, check_rank, check_strides, clamp_window, window_offsets
from .matmuladd_cpu import matmuladd, resolve_accumulate_mode


def conv2d_forward_cpu(
    x: np.ndarray,
    w: np.ndarray,
    *,
    strides: Sequence[int],
    accumulate: Optional[str] = None,
) -> np.ndarray:
    """
    Compute the forward pass of a border-clamped 2D cross-correlation.

    Parameters
    ----------
    x : np.ndarray
        Input array of shape ``(rows, cols, in_channels)``.
    w : np.ndarray
        Filter of shape ``(filter_height, filter_width, in_channels, out_channels)``.
    strides : Sequence[int]
        ``(row_stride, col_stride, depth_stride)``; ``depth_stride`` must be 1.
    accumulate : str or None, optional
        ``matmuladd`` mode. Resolved once per call; see
        :func:`resolve_accumulate_mode`.

    Returns
    -------
    np.ndarray
        Freshly allocated float32 output.

    Raises
    ------
    InvalidRankError
        If ``x`` is not rank 3, ``w`` is not rank 4 or ``strides`` is not length 3.
    UnsupportedStrideError
        If ``strides[2] != 1`` or a spatial stride is < 1.
    ChannelMismatchError
        If ``x.shape[2] != w.shape[2]``.
    """
    check_rank("input", x.ndim, 3)
    check_rank("filter", w.ndim, 4)
    s_h, s_w = check_strides(strides)
    if x.shape[2] != w.shape[2]:
        raise ChannelMismatchError(x.shape[2], w.shape[2])

    mode = resolve_accumulate_mode(accumulate)

    rows, cols, _ = x.shape
    f_h, f_w, _, out_channels = w.shape
    min_dy, max_dy = window_offsets(f_h)
    min_dx, max_dx = window_offsets(f_w)

    out_rows = ceil_div(rows, s_h)
    out_cols = ceil_div(cols, s_w)
    y = np.zeros((out_rows, out_cols, out_channels), dtype=np.float32)

    for i in range(out_rows):
        in_y = i * s_h
        y0, y1 = clamp_window(in_y, min_dy, max_dy, rows)
        top = in_y + min_dy
        for j in range(out_cols):
            in_x = j * s_w
            x0, x1 = clamp_window(in_x, min_dx, max_dx, cols)
            left = in_x + min_dx
            acc = y[i, j]
            for y2 in range(y0, y1 + 1):
                for x2 in range(x0, x1 + 1):
                    matmuladd(x[y2, x2], w[y2 - top, x2 - left], acc, mode=mode)

    return y
