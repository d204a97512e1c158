"""Constant finite-difference operators on the simulation grid.

Operators are assembled as sparse matrices acting on fields stored in
natural (z-major) ordering, with the component index varying fastest for
vector fields. Yee staggering is used, so every derivative operator exists
in a forward (positive) and a backward (negative) variant.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from enum import Enum
from itertools import product

import numpy as np
from scipy import sparse

from picsim.configuration import BoundaryType
from picsim.indexing import Axis, petsc_index

X, Y, Z = Axis.X, Axis.Y, Axis.Z


class YeeShift(Enum):
    """Direction of the one-sided difference on the staggered grid."""

    POSITIVE = "positive"
    NEGATIVE = "negative"


class _Operator:
    """Common grid bookkeeping: local corners, global sizes and index mapping."""

    def __init__(self, world, mdof=3, ndof=3):
        self.world = world
        self.mdof = mdof
        self.ndof = ndof
        self.start = tuple(int(v) for v in world.start_n)
        self.size = tuple(int(e - s) for s, e in zip(world.start_n, world.end_n))
        self.global_size = tuple(int(v) for v in world.steps)

    @property
    def nodes(self):
        """Number of grid nodes covered by the operator."""
        return math.prod(self.global_size)

    def _local_nodes(self):
        sx, sy, sz = self.start
        nx, ny, nz = self.size
        return product(range(sz, sz + nz), range(sy, sy + ny), range(sx, sx + nx))

    def _wrap(self, k, axis):
        n = self.global_size[axis]
        if self.world.bounds[axis] is BoundaryType.PERIODIC:
            return k % n
        return k if 0 <= k < n else None

    def _flat(self, stencil, dof):
        """Global index of ``(z, y, x, c)``; ``None`` if it falls outside the grid."""
        z, y, x, c = stencil
        wx, wy, wz = self._wrap(x, X), self._wrap(y, Y), self._wrap(z, Z)
        if wx is None or wy is None or wz is None:
            return None
        nx, ny, nz = self.global_size
        return petsc_index(wz, wy, wx, c, nz, ny, nx, dof)


class Identity(_Operator):
    """Identity operator over the grid nodes."""

    def __init__(self, world):
        super().__init__(world)

    def create(self):
        """Sparse identity matrix with one row per grid node."""
        return sparse.identity(math.prod(self.size), format="csr")


class FiniteDifferenceOperator(_Operator, ABC):
    """Abstract derivative operator in finite-difference approximation.

    ``values`` holds three equal chunks of coefficients, one per inserted
    row; each chunk is matched with the columns produced by the stencil.
    """

    def __init__(self, world, mdof, ndof, values):
        super().__init__(world, mdof, ndof)
        values = tuple(values)
        if len(values) % 3:
            raise ValueError("the number of stencil values must be a multiple of 3")
        chunk = len(values) // 3
        self.values = values
        self._chunks = [values[k * chunk:(k + 1) * chunk] for k in range(3)]

    def create_positive(self):
        """Matrix of the forward-shifted operator."""
        return self._fill_matrix(YeeShift.POSITIVE)

    def create_negative(self):
        """Matrix of the backward-shifted operator."""
        return self._fill_matrix(YeeShift.NEGATIVE)

    @abstractmethod
    def _fill_stencil(self, shift, x, y, z):
        """Return three ``(row, columns)`` pairs of ``(z, y, x, c)`` stencils."""

    def _fill_matrix(self, shift):
        rows, cols, data = [], [], []
        for z, y, x in self._local_nodes():
            for (row, columns), chunk in zip(self._fill_stencil(shift, x, y, z), self._chunks):
                i = self._flat(row, self.mdof)
                if i is None:
                    continue
                for column, value in zip(columns, chunk):
                    j = self._flat(column, self.ndof)
                    if j is None:
                        continue
                    rows.append(i)
                    cols.append(j)
                    data.append(value)
        shape = (self.nodes * self.mdof, self.nodes * self.ndof)
        matrix = sparse.coo_matrix(
            (np.asarray(data, dtype=float), (np.asarray(rows, dtype=int), np.asarray(cols, dtype=int))),
            shape=shape,
        )
        # Duplicate entries are summed, as when values are added one by one.
        return matrix.tocsr()


class Rotor(FiniteDifferenceOperator):
    """Curl of a vector field."""

    def __init__(self, world, spacing):
        dx, dy, dz = spacing
        super().__init__(world, 3, 3, (
            +1.0 / dy, -1.0 / dy, -1.0 / dz, +1.0 / dz,
            +1.0 / dz, -1.0 / dz, -1.0 / dx, +1.0 / dx,
            +1.0 / dx, -1.0 / dx, -1.0 / dy, +1.0 / dy,
        ))

    def _fill_stencil(self, shift, xc, yc, zc):
        if shift is YeeShift.POSITIVE:
            xp, yp, zp = xc + 1, yc + 1, zc + 1
            return [
                ((zc, yc, xc, X), [(zc, yp, xc, Z), (zc, yc, xc, Z), (zp, yc, xc, Y), (zc, yc, xc, Y)]),
                ((zc, yc, xc, Y), [(zp, yc, xc, X), (zc, yc, xc, X), (zc, yc, xp, Z), (zc, yc, xc, Z)]),
                ((zc, yc, xc, Z), [(zc, yc, xp, Y), (zc, yc, xc, Y), (zc, yp, xc, X), (zc, yc, xc, X)]),
            ]
        xm, ym, zm = xc - 1, yc - 1, zc - 1
        return [
            ((zc, yc, xc, X), [(zc, yc, xc, Z), (zc, ym, xc, Z), (zc, yc, xc, Y), (zm, yc, xc, Y)]),
            ((zc, yc, xc, Y), [(zc, yc, xc, X), (zm, yc, xc, X), (zc, yc, xc, Z), (zc, yc, xm, Z)]),
            ((zc, yc, xc, Z), [(zc, yc, xc, Y), (zc, yc, xm, Y), (zc, yc, xc, X), (zc, ym, xc, X)]),
        ]


class Divergence(FiniteDifferenceOperator):
    """Divergence: maps a vector field to a scalar field."""

    def __init__(self, world, spacing):
        dx, dy, dz = spacing
        super().__init__(world, 1, 3, (
            +1.0 / dx, -1.0 / dx,
            +1.0 / dy, -1.0 / dy,
            +1.0 / dz, -1.0 / dz,
        ))

    def _fill_stencil(self, shift, xc, yc, zc):
        row = (zc, yc, xc, 0)
        if shift is YeeShift.POSITIVE:
            xp, yp, zp = xc + 1, yc + 1, zc + 1
            return [
                (row, [(zc, yc, xp, X), (zc, yc, xc, X)]),
                (row, [(zc, yp, xc, Y), (zc, yc, xc, Y)]),
                (row, [(zp, yc, xc, Z), (zc, yc, xc, Z)]),
            ]
        xm, ym, zm = xc - 1, yc - 1, zc - 1
        return [
            (row, [(zc, yc, xc, X), (zc, yc, xm, X)]),
            (row, [(zc, yc, xc, Y), (zc, ym, xc, Y)]),
            (row, [(zc, yc, xc, Z), (zm, yc, xc, Z)]),
        ]


class Gradient(FiniteDifferenceOperator):
    """Gradient: maps a scalar field to a vector field."""

    def __init__(self, world, spacing):
        dx, dy, dz = spacing
        super().__init__(world, 3, 1, (
            +1.0 / dx, -1.0 / dx,
            +1.0 / dy, -1.0 / dy,
            +1.0 / dz, -1.0 / dz,
        ))

    def _fill_stencil(self, shift, xc, yc, zc):
        if shift is YeeShift.POSITIVE:
            xp, yp, zp = xc + 1, yc + 1, zc + 1
            return [
                ((zc, yc, xc, X), [(zc, yc, xp, 0), (zc, yc, xc, 0)]),
                ((zc, yc, xc, Y), [(zc, yp, xc, 0), (zc, yc, xc, 0)]),
                ((zc, yc, xc, Z), [(zp, yc, xc, 0), (zc, yc, xc, 0)]),
            ]
        xm, ym, zm = xc - 1, yc - 1, zc - 1
        return [
            ((zc, yc, xc, X), [(zc, yc, xc, 0), (zc, yc, xm, 0)]),
            ((zc, yc, xc, Y), [(zc, yc, xc, 0), (zc, ym, xc, 0)]),
            ((zc, yc, xc, Z), [(zc, yc, xc, 0), (zm, yc, xc, 0)]),
        ]