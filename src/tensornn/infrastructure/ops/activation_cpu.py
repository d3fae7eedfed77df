"""
CPU elementwise activation kernels (NumPy backend).

Both kernels take an array of any shape and return a freshly allocated
float32 array of the same shape. The input is never modified.
"""

from __future__ import annotations

import numpy as np


def relu_forward_cpu(x: np.ndarray) -> np.ndarray:
    """
    Elementwise ``max(x, 0)``.

    NaN inputs propagate to the output.
    """
    return np.maximum(x, np.float32(0.0)).astype(np.float32, copy=False)


def exp_forward_cpu(x: np.ndarray) -> np.ndarray:
    """
    Elementwise exponential.

    Overflow to ``inf`` is not guarded; NumPy's floating-point warnings are
    suppressed so such values propagate silently.
    """
    with np.errstate(over="ignore", invalid="ignore"):
        return np.exp(x, dtype=np.float32)


def softmax_forward_cpu(x: np.ndarray) -> np.ndarray:
    """
    Whole-tensor softmax.

    Every element is exponentiated, a single scalar sum is taken over *all*
    elements regardless of shape, and each exponentiated element is divided
    by that sum.

    Notes
    -----
    - There is no per-axis normalization: a ``(2, 3)`` input sums to one over
      all six outputs, not per row.
    - There is no max-subtraction. Large inputs overflow to ``inf`` and the
      result becomes ``nan``; this propagates without warnings or errors.
    """
    exps = exp_forward_cpu(x)
    with np.errstate(over="ignore", invalid="ignore", divide="ignore"):
        total = np.sum(exps, dtype=np.float32)
        return (exps / total).astype(np.float32, copy=False)
