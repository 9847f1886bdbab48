# gpreg/core/points.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Ordered store of training input vectors.
"""
import gpreg.num as gnp


class PointSet:
    """Ordered sequence of input vectors of a common dimension.

    A PointSet may be shared between a GaussianProcess and an external
    owner. The GP does not observe changes: after appending points
    outside of ``GaussianProcess.add_point``, call
    ``GaussianProcess.refresh()``.

    Parameters
    ----------
    points : array_like, shape (n, d) or (n,), optional
        Initial points, one per row. A 1D array is read as n points of
        dimension one, as in ``GaussianProcess.predict``.
    dimension : int, optional
        Input dimension. Inferred from the first point if omitted.
    """

    def __init__(self, points=None, dimension=None):
        if dimension is not None and dimension < 1:
            raise ValueError("dimension must be >= 1")
        self._dimension = dimension
        self._points = []
        if points is not None:
            points = gnp.asarray(points)
            if points.ndim == 1:
                points = points.reshape(-1, 1)
            if points.ndim != 2:
                raise ValueError("points should be a 2D array")
            for x in points:
                self.append(x)

    def __repr__(self):
        return f"PointSet(size={len(self)}, dimension={self._dimension})"

    def __len__(self):
        return len(self._points)

    def __getitem__(self, i):
        return self._points[i]

    def __iter__(self):
        return iter(self._points)

    @property
    def dimension(self):
        return self._dimension

    def append(self, x):
        x = gnp.array(x).reshape(-1)
        if x.shape[0] == 0:
            raise ValueError("Cannot append an empty vector")
        if self._dimension is None:
            self._dimension = x.shape[0]
        elif x.shape[0] != self._dimension:
            raise ValueError(
                f"Point of dimension {x.shape[0]} does not match PointSet dimension {self._dimension}"
            )
        self._points.append(x)

    def as_array(self):
        """Return the points as an (n, d) array (a copy)."""
        if len(self._points) == 0:
            return gnp.zeros((0, self._dimension or 0))
        return gnp.vstack(self._points)

    def pop(self):
        """Remove and return the last point."""
        if len(self._points) == 0:
            raise IndexError("pop from an empty PointSet")
        return self._points.pop()
