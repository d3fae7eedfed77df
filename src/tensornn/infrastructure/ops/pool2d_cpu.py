"""
CPU reference implementation of 2D max pooling (NumPy backend).

Tensor layout
-------------
Inputs are rank-3 ``(rows, cols, channels)`` arrays (HWC, no batch axis).

Window semantics
----------------
- Output spatial extent is ``ceil_div(rows, row_stride)`` x
  ``ceil_div(cols, col_stride)``; channels are preserved.
- The window around anchor ``(y * row_stride, x * col_stride)`` uses the
  asymmetric centering from :mod:`._window` and is clamped to the input.
- There is no padding of any kind: border windows simply contain fewer taps,
  so no padding value can ever win the maximum.
- Pooling across the channel axis is unsupported (kernel depth and depth
  stride must both be 1).
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from ._window import (
    ceil_div,
    check_kernel_size,
    check_rank,
    check_strides,
    clamp_window,
    window_offsets,
)


def maxpool2d_forward_cpu(
    x: np.ndarray,
    *,
    kernel_size: Sequence[int],
    strides: Sequence[int],
) -> np.ndarray:
    """
    Border-clamped max pooling forward pass (CPU, NumPy).

    Parameters
    ----------
    x : np.ndarray
        Input array of shape ``(rows, cols, channels)``.
    kernel_size : Sequence[int]
        ``(height, width, depth)``; ``depth`` must be 1.
    strides : Sequence[int]
        ``(row_stride, col_stride, depth_stride)``; ``depth_stride`` must be 1.

    Returns
    -------
    np.ndarray
        Freshly allocated float32 array of shape
        ``(ceil_div(rows, row_stride), ceil_div(cols, col_stride), channels)``.

    Raises
    ------
    InvalidRankError
        If ``x`` is not rank 3 or ``kernel_size`` / ``strides`` are not length 3.
    UnsupportedKernelSizeError
        If ``kernel_size[2] != 1`` or a spatial kernel extent is < 1.
    UnsupportedStrideError
        If ``strides[2] != 1`` or a spatial stride is < 1.
    """
    check_rank("input", x.ndim, 3)
    k_h, k_w = check_kernel_size(kernel_size)
    s_h, s_w = check_strides(strides)

    rows, cols, channels = x.shape
    min_dy, max_dy = window_offsets(k_h)
    min_dx, max_dx = window_offsets(k_w)

    out_rows = ceil_div(rows, s_h)
    out_cols = ceil_div(cols, s_w)
    y = np.empty((out_rows, out_cols, channels), dtype=np.float32)

    for i in range(out_rows):
        y0, y1 = clamp_window(i * s_h, min_dy, max_dy, rows)
        for j in range(out_cols):
            x0, x1 = clamp_window(j * s_w, min_dx, max_dx, cols)
            # anchors are always in range, so the clamped window is never empty
            y[i, j, :] = x[y0 : y1 + 1, x0 : x1 + 1, :].max(axis=(0, 1))

    return y
