"""
tensornn: float32 tensors and inference kernels.

Public API
----------
- ``Shape``, ``Tensor``
- ``relu``, ``softmax``, ``max_pool``, ``conv2d``
- ``matmuladd``, ``ceil_div``, ``resolve_accumulate_mode``
- precondition errors (all subclasses of ``PreconditionError``)
"""

from .domain._errors import (
    ChannelMismatchError,
    ElementCountMismatchError,
    InvalidRankError,
    InvalidShapeError,
    PreconditionError,
    ShapeMismatchError,
    UnsupportedKernelSizeError,
    UnsupportedStrideError,
)
from .domain._shape import Shape
from .infrastructure._functional import conv2d, max_pool, relu, softmax
from .infrastructure.ops._window import ceil_div
from .infrastructure.ops.matmuladd_cpu import matmuladd, resolve_accumulate_mode
from .infrastructure.tensor import Tensor

__version__ = "1.0.0"

__all__ = [
    "Shape",
    "Tensor",
    "relu",
    "softmax",
    "max_pool",
    "conv2d",
    "matmuladd",
    "ceil_div",
    "resolve_accumulate_mode",
    "PreconditionError",
    "InvalidShapeError",
    "ElementCountMismatchError",
    "InvalidRankError",
    "UnsupportedStrideError",
    "UnsupportedKernelSizeError",
    "ChannelMismatchError",
    "ShapeMismatchError",
]
