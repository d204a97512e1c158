"""Grid indexing helpers and coordinate axes."""

from __future__ import annotations

import math
from enum import IntEnum


class Axis(IntEnum):
    """Coordinate axes; ``C`` addresses the component of a vector field."""

    X = 0
    Y = 1
    Z = 2
    C = 3


def petsc_index(z, y, x, c, size_z, size_y, size_x, size_c):
    """Return the flat index of ``(z, y, x, c)`` in natural (z-major) ordering.

    ``size_z`` is accepted for symmetry but does not affect the result.
    """
    del size_z
    return ((z * size_y + y) * size_x + x) * size_c + c


def to_step(s, ds):
    """Convert the length ``s`` into a whole number of steps of size ``ds``.

    Halves are rounded away from zero.
    """
    value = s / ds
    rounded = math.floor(abs(value) + 0.5)
    return rounded if value >= 0 else -rounded


def scalar_index(z, y, x, shape):
    """Flat index of a scalar field cell; ``shape`` is ``(size_z, size_y, size_x)``."""
    size_z, size_y, size_x = shape
    return petsc_index(z, y, x, 0, size_z, size_y, size_x, 1)


def vector_index(z, y, x, c, shape):
    """Flat index of a 3-component vector field entry; ``shape`` is ``(size_z, size_y, size_x)``."""
    size_z, size_y, size_x = shape
    return petsc_index(z, y, x, c, size_z, size_y, size_x, 3)