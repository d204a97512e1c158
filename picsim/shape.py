"""Precomputed shape-function values around a particle."""

from __future__ import annotations

import math
from enum import IntEnum
from itertools import product

import numpy as np

from picsim.indexing import Axis, petsc_index
from picsim.vector3 import Vector3, maximum, minimum

_COMPONENTS = 2 * Vector3.dim


class ShapeType(IntEnum):
    """Which set of values is addressed; ``No``/``Old`` and ``Sh``/``New`` share storage."""

    No = 0
    Sh = 1
    Old = 2
    New = 3


def _round_half_away(value):
    rounded = math.floor(abs(value) + 0.5)
    return float(rounded if value >= 0 else -rounded)


def _slot(t, c):
    return (int(t) % 2) * Vector3.dim + int(c)


class Shape:
    """Shape values on the grid nodes touched by a particle.

    One of the ``setup`` methods must be called before values are read.
    """

    def __init__(self, spacing, form_factor):
        self.spacing = Vector3(*spacing)
        self.form_factor = form_factor
        self.start = Vector3(0, 0, 0)
        self.size = Vector3(0, 0, 0)
        self._values = None

    @staticmethod
    def make_r(r, spacing):
        """Position in units of grid cells."""
        return Vector3(*(a / d for a, d in zip(r, spacing)))

    @staticmethod
    def make_g(p_r, radius):
        """Lowest node of the stencil, measured from the nearest node."""
        return Vector3(*(int(_round_half_away(v) - radius) for v in p_r))

    @staticmethod
    def make_start(p_r, radius):
        """First node (inclusive) that the shape may touch."""
        return Vector3(*(int(_round_half_away(v - radius)) for v in p_r))

    @staticmethod
    def make_end(p_r, radius):
        """Node past the last one that the shape may touch."""
        return Vector3(*(math.floor(v + radius) + 1 for v in p_r))

    def index(self, z, y, x):
        """Flat index of node ``(z, y, x)`` relative to ``start``."""
        return petsc_index(z, y, x, 0, self.size.z, self.size.y, self.size.x, 1)

    def setup(self, r):
        """Fill the unshifted (``No``) and half-shifted (``Sh``) values at ``r``."""
        p_r = self.make_r(r, self.spacing)
        radius = self.form_factor.radius
        self.start = self.make_start(p_r, radius)
        self.size = self.make_end(p_r, radius) - self.start
        self._fill(p_r, p_r, ShapeType.No, ShapeType.Sh)

    def setup_moving(self, old_r, new_r):
        """Fill the ``Old`` and ``New`` values for a particle moving from ``old_r`` to ``new_r``."""
        old_p_r = self.make_r(old_r, self.spacing)
        new_p_r = self.make_r(new_r, self.spacing)
        radius = self.form_factor.radius
        self.start = self.make_start(minimum(old_p_r, new_p_r), radius)
        self.size = self.make_end(maximum(old_p_r, new_p_r), radius) - self.start
        self._fill(old_p_r, new_p_r, ShapeType.Old, ShapeType.New)

    def _fill(self, p_r1, p_r2, t1, t2):
        sfunc = self.form_factor.function
        shift = 0.5 if t2 == ShapeType.Sh else 0.0
        s1 = _slot(t1, 0)
        s2 = _slot(t2, 0)
        count = max(self.size.elements_product(), 0)
        values = np.zeros((count, _COMPONENTS))
        nodes = product(range(self.size.z), range(self.size.y), range(self.size.x))
        for row, (z, y, x) in zip(values, nodes):
            g = (self.start.x + x, self.start.y + y, self.start.z + z)
            row[s1:s1 + 3] = [sfunc(p - gc) for p, gc in zip(p_r1, g)]
            row[s2:s2 + 3] = [sfunc(p - (gc + shift)) for p, gc in zip(p_r2, g)]
        self._values = values

    def __call__(self, i, t, c):
        if self._values is None:
            raise RuntimeError("shape is not set up")
        return float(self._values[i, _slot(t, c)])

    def electric(self, i):
        """Shape products at the electric-field positions of node ``i``."""
        no, sh = ShapeType.No, ShapeType.Sh
        X, Y, Z = Axis.X, Axis.Y, Axis.Z
        return Vector3(
            self(i, no, Z) * self(i, no, Y) * self(i, sh, X),
            self(i, no, Z) * self(i, sh, Y) * self(i, no, X),
            self(i, sh, Z) * self(i, no, Y) * self(i, no, X),
        )

    def magnetic(self, i):
        """Shape products at the magnetic-field positions of node ``i``."""
        no, sh = ShapeType.No, ShapeType.Sh
        X, Y, Z = Axis.X, Axis.Y, Axis.Z
        return Vector3(
            self(i, sh, Z) * self(i, sh, Y) * self(i, no, X),
            self(i, sh, Z) * self(i, no, Y) * self(i, sh, X),
            self(i, no, Z) * self(i, sh, Y) * self(i, sh, X),
        )