"""
Precondition errors for tensornn.

Every failure in this library is a precondition violation detected before an
operator starts computing: a malformed shape, a rank mismatch, an unsupported
stride or kernel size, or operands whose channels/shapes do not line up.
These are programmer errors at the call site rather than data-dependent
failures, so they are raised immediately and never retried or recovered.

All concrete errors derive from :class:`PreconditionError`, which itself
derives from ``ValueError`` so callers can catch either the library-specific
hierarchy or the builtin category.

Floating-point overflow and NaN propagation are *not* errors and are never
raised from here.
"""

from __future__ import annotations

from typing import Any, Sequence


class PreconditionError(ValueError):
    """
    Base class for all tensornn precondition violations.

    The message always names the violated invariant and the offending
    value(s).
    """


class InvalidShapeError(PreconditionError):
    """
    Raised when a shape dimension is not a non-negative integer.

    Attributes
    ----------
    dimensions : Sequence[Any]
        The dimensions the caller attempted to build a shape from.
    """

    def __init__(self, dimensions: Sequence[Any], reason: str) -> None:
        """
        Initialize the InvalidShapeError.

        Parameters
        ----------
        dimensions : Sequence[Any]
            Offending dimension sequence.
        reason : str
            Which constraint was violated.
        """
        super().__init__(f"Invalid shape {tuple(dimensions)!r}: {reason}")
        self.dimensions = tuple(dimensions)


class ElementCountMismatchError(PreconditionError):
    """
    Raised when a tensor's element count does not match its shape volume.

    Attributes
    ----------
    shape : tuple[int, ...]
        Dimensions of the requested shape.
    count : int
        Number of elements actually supplied.
    """

    def __init__(self, shape: Sequence[int], count: int) -> None:
        """
        Initialize the ElementCountMismatchError.

        Parameters
        ----------
        shape : Sequence[int]
            Requested dimensions.
        count : int
            Number of supplied elements.
        """
        volume = 1
        for d in shape:
            volume *= d
        super().__init__(
            f"`elements` length must equal the shape volume {volume} "
            f"for shape {tuple(shape)!r}: {count}"
        )
        self.shape = tuple(shape)
        self.count = count


class InvalidRankError(PreconditionError):
    """
    Raised when a tensor or parameter list does not have the required rank.

    Attributes
    ----------
    name : str
        Name of the offending argument (e.g. ``"filter"``, ``"strides"``).
    expected : int
        Required rank / length.
    actual : int
        Observed rank / length.
    """

    def __init__(self, name: str, expected: int, actual: int) -> None:
        """
        Initialize the InvalidRankError.

        Parameters
        ----------
        name : str
            Argument name used in the message.
        expected : int
            Required rank.
        actual : int
            Observed rank.
        """
        super().__init__(f"`{name}` rank must be {expected}: {actual}")
        self.name = name
        self.expected = expected
        self.actual = actual


class UnsupportedStrideError(PreconditionError):
    """
    Raised when a stride value is not supported.

    Only a depth stride of exactly 1 is supported; spatial strides must be
    at least 1.
    """

    def __init__(self, name: str, value: int, reason: str) -> None:
        """
        Initialize the UnsupportedStrideError.

        Parameters
        ----------
        name : str
            Which stride entry was rejected (e.g. ``"strides[2]"``).
        value : int
            The rejected value.
        reason : str
            Constraint that was violated.
        """
        super().__init__(f"`{name}` {reason}: {value}")
        self.name = name
        self.value = value


class UnsupportedKernelSizeError(PreconditionError):
    """
    Raised when a pooling kernel size is not supported.

    Pooling across the channel axis is unsupported, so the kernel depth must
    be exactly 1; kernel height and width must be at least 1.
    """

    def __init__(self, name: str, value: int, reason: str) -> None:
        """
        Initialize the UnsupportedKernelSizeError.

        Parameters
        ----------
        name : str
            Which kernel entry was rejected (e.g. ``"kernel_size[2]"``).
        value : int
            The rejected value.
        reason : str
            Constraint that was violated.
        """
        super().__init__(f"`{name}` {reason}: {value}")
        self.name = name
        self.value = value


class ChannelMismatchError(PreconditionError):
    """
    Raised when the input channel count does not match the filter's
    input-channel axis.

    Attributes
    ----------
    input_channels : int
        Channel count of the input tensor (``shape[2]``).
    filter_channels : int
        Input-channel axis of the filter (``filter.shape[2]``).
    """

    def __init__(self, input_channels: int, filter_channels: int) -> None:
        super().__init__(
            "The number of channels of the input tensor and the filter are not "
            f"compatible: {input_channels} != {filter_channels}"
        )
        self.input_channels = input_channels
        self.filter_channels = filter_channels


class ShapeMismatchError(PreconditionError):
    """
    Raised when the operands of an elementwise or matrix operation have
    incompatible shapes.
    """

    def __init__(self, op: str, shape_a: Sequence[int], shape_b: Sequence[int]) -> None:
        super().__init__(
            f"{op}: incompatible shapes {tuple(shape_a)!r} and {tuple(shape_b)!r}"
        )
        self.op = op
        self.shape_a = tuple(shape_a)
        self.shape_b = tuple(shape_b)
