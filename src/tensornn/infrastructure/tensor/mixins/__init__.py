"""
Tensor mixins.

The concrete ``Tensor`` is assembled from these cohesive mixins; none of them
imports ``Tensor`` itself. New tensors are always built through the host
class's ``_from_array`` constructor.
"""

from ._arithmetic import TensorMixinArithmetic
from ._nn import TensorMixinNN
from ._shape_and_indexing import TensorShapeAndIndexingMixin
from ._unary import TensorMixinUnary

__all__ = [
    TensorMixinArithmetic.__name__,
    TensorMixinNN.__name__,
    TensorShapeAndIndexingMixin.__name__,
    TensorMixinUnary.__name__,
]
