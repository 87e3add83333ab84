from __future__ import annotations

from typing import Any

import numpy as np


class CacheMatrix:
    """Matrix holder that can carry a lazily computed inverse.

    Replacing the matrix through :meth:`set_matrix` drops the cached inverse,
    so a cached value is always the inverse of the current matrix as long as
    only :func:`cachematrix.cache_solve` stores it.

    No shape or invertibility checks are done here; a bad matrix surfaces
    when the inverse is first requested.
    """

    def __init__(self, x: Any):
        self._matrix = x
        self._cached_inverse: Any = None

    def set_matrix(self, value: Any) -> None:
        self._matrix = value
        self._cached_inverse = None

    def get_matrix(self) -> Any:
        return self._matrix

    @property
    def matrix(self) -> Any:
        return self._matrix

    def set_inverse(self, value: Any) -> None:
        """Store ``value`` as the cached inverse.

        Meant to be called by ``cache_solve`` only. The value is trusted as
        given; storing anything other than the true inverse leaves the cache
        out of sync with the matrix until the next :meth:`set_matrix`.
        """
        self._cached_inverse = value

    def get_inverse(self) -> Any:
        """Return the cached inverse, or ``None`` if none has been stored."""
        return self._cached_inverse

    def __repr__(self) -> str:
        shape = getattr(self._matrix, "shape", None)
        if shape is None:
            try:
                shape = (len(self._matrix), len(self._matrix[0]))
            except (TypeError, IndexError, KeyError):
                shape = None
        cached = self._cached_inverse is not None
        return f"CacheMatrix(shape={shape}, cached_inverse={cached})"


def make_cache_matrix(x: Any = None) -> CacheMatrix:
    """Wrap ``x`` in a :class:`CacheMatrix`; defaults to an empty 0x0 matrix."""
    if x is None:
        x = np.empty((0, 0))
    return CacheMatrix(x)
