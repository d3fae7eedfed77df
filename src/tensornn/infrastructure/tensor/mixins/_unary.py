"""
Elementwise unary mixin (NumPy CPU backend).
"""

from __future__ import annotations

from ....domain._tensor import ITensor
from ...ops.activation_cpu import exp_forward_cpu


class TensorMixinUnary:
    """
    Elementwise unary tensor operations.

    Assumes the host class provides ``_shape``, ``_data`` and ``_from_array``.
    """

    def exp(self) -> ITensor:
        """
        Compute the elementwise exponential of the tensor.

        Returns
        -------
        ITensor
            A tensor of the same shape as ``self`` with ``exp`` applied
            elementwise. Overflow yields ``inf`` silently.
        """
        out = exp_forward_cpu(self._data)
        return self.__class__._from_array(out.reshape(self._shape.dimensions))
