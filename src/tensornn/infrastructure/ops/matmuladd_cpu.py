"""
Vector-matrix multiply-accumulate kernels (CPU, NumPy).

``matmuladd`` is the single inner loop that dominates ``conv2d``: for one
input pixel's channel vector and one filter tap it computes::

    out[c] += sum_i vec[i] * mat[i, c]

in place, accumulating over ``i`` in ascending order for every output
channel ``c``.

Accumulation modes
------------------
- ``"reference"``: explicit scalar loops, the readable ground truth.
- ``"vectorized"``: one NumPy row update per input index ``i``. Each output
  element sees exactly the same float32 multiply/add sequence as the
  reference loop, so results are bit-identical, just without the Python
  inner loop over ``c``.
- ``"blas"``: ``out += vec @ mat``. Fastest, but the reduction order is left
  to the BLAS backend and results may differ in the last bits.

The default mode comes from the ``TENSORNN_ACCUMULATE`` environment variable
and falls back to ``"vectorized"``.
"""

from __future__ import annotations

import os
import warnings
from typing import Optional

import numpy as np

from ...domain._errors import ShapeMismatchError

ACCUMULATE_ENV_VAR = "TENSORNN_ACCUMULATE"
ACCUMULATE_MODES = ("reference", "vectorized", "blas")
DEFAULT_ACCUMULATE_MODE = "vectorized"


def resolve_accumulate_mode(mode: Optional[str] = None) -> str:
    """
    Resolve the accumulation mode to use.

    Parameters
    ----------
    mode : str or None, optional
        Explicit mode. If None, ``TENSORNN_ACCUMULATE`` is consulted.

    Returns
    -------
    str
        One of ``"reference"``, ``"vectorized"``, ``"blas"``.

    Raises
    ------
    ValueError
        If an explicit ``mode`` is not a known mode.

    Notes
    -----
    An unknown value in the environment variable is not fatal: a
    ``RuntimeWarning`` is emitted and the default mode is used.
    """
    if mode is not None:
        if mode not in ACCUMULATE_MODES:
            raise ValueError(
                f"Unknown accumulate mode {mode!r}; expected one of {ACCUMULATE_MODES}"
            )
        return mode

    env = os.environ.get(ACCUMULATE_ENV_VAR, "").strip().lower()
    if not env:
        return DEFAULT_ACCUMULATE_MODE
    if env not in ACCUMULATE_MODES:
        warnings.warn(
            f"Ignoring {ACCUMULATE_ENV_VAR}={env!r}; expected one of "
            f"{ACCUMULATE_MODES}. Falling back to {DEFAULT_ACCUMULATE_MODE!r}.",
            RuntimeWarning,
            stacklevel=2,
        )
        return DEFAULT_ACCUMULATE_MODE
    return env


def _matmuladd_reference(vec: np.ndarray, mat: np.ndarray, out: np.ndarray) -> None:
    n, m = mat.shape
    for i in range(n):
        left = vec[i]
        for c in range(m):
            out[c] += left * mat[i, c]


def _matmuladd_vectorized(vec: np.ndarray, mat: np.ndarray, out: np.ndarray) -> None:
    for i in range(mat.shape[0]):
        out += vec[i] * mat[i]


def _matmuladd_blas(vec: np.ndarray, mat: np.ndarray, out: np.ndarray) -> None:
    out += vec @ mat


_KERNELS = {
    "reference": _matmuladd_reference,
    "vectorized": _matmuladd_vectorized,
    "blas": _matmuladd_blas,
}


def matmuladd(
    vec: np.ndarray,
    mat: np.ndarray,
    out: np.ndarray,
    *,
    mode: Optional[str] = None,
) -> None:
    """
    Accumulate ``vec @ mat`` into ``out`` in place.

    Parameters
    ----------
    vec : np.ndarray
        Input vector of length ``n`` (one pixel's channel vector).
    mat : np.ndarray
        Weight matrix of shape ``(n, m)``. A flat buffer of length ``n * m``
        laid out row-major is also accepted.
    out : np.ndarray
        Writable output vector of length ``m`` already holding partial
        results. Updated in place.
    mode : str or None, optional
        Accumulation mode, see :func:`resolve_accumulate_mode`.

    Raises
    ------
    ShapeMismatchError
        If the lengths of ``vec``, ``mat`` and ``out`` do not line up.
    """
    n = vec.shape[0]
    m = out.shape[0]
    if mat.ndim == 1:
        if mat.shape[0] != n * m:
            raise ShapeMismatchError("matmuladd", (n, m), mat.shape)
        mat = mat.reshape(n, m)
    elif mat.shape != (n, m):
        raise ShapeMismatchError("matmuladd", (n, m), mat.shape)

    _KERNELS[resolve_accumulate_mode(mode)](vec, mat, out)
