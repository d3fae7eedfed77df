"""
Domain-level structural typing for NumPy-like n-dimensional arrays.

:class:`NDArrayLike` lets the domain layer describe array-shaped data (the
flat element buffer of a tensor, the result of ``to_numpy()``) without
importing NumPy. ``numpy.ndarray`` satisfies it structurally.
"""

from __future__ import annotations

from typing import Any, Protocol, Tuple, runtime_checkable


@runtime_checkable
class NDArrayLike(Protocol):
    """
    Structural interface for objects that behave like NumPy ndarrays.

    Only the subset of the ndarray API that tensor code relies on is modelled.
    """

    @property
    def shape(self) -> Tuple[int, ...]:
        """Size of each dimension."""
        ...

    @property
    def ndim(self) -> int:
        """Number of dimensions."""
        ...

    @property
    def size(self) -> int:
        """Total number of elements."""
        ...

    @property
    def dtype(self) -> Any:
        """Backend-defined dtype object (e.g. ``numpy.dtype``)."""
        ...

    def reshape(self, *shape: int) -> NDArrayLike:
        """Return an array with a new shape."""
        ...

    def copy(self) -> NDArrayLike:
        """Return a copy of the array."""
        ...

    def tolist(self) -> list[Any]:
        """Convert the array to a (possibly nested) Python list."""
        ...

    def __array__(self, dtype: Any = ...) -> Any:
        """Return a backend-native array (enables ``np.asarray(obj)``)."""
        ...

    def __getitem__(self, key: Any) -> Any: ...

    def __len__(self) -> int: ...
