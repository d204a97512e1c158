"""A sort of particles living in the local part of the domain."""

from __future__ import annotations

import math
import threading
from itertools import chain

from picsim.configuration import BoundaryType
from picsim.indexing import Axis, petsc_index
from picsim.point import bound_periodic

_DIM = 3
_NEIGHBORS = _DIM**3


def _contiguous_index(z, y, x):
    return petsc_index(z, y, x, 0, _DIM, _DIM, _DIM, 1)


_CENTER = _contiguous_index(1, 1, 1)


def _side(r, axis, world):
    """0 below the local region, 1 inside it, 2 at or above its end."""
    if r[axis] < world.start[axis]:
        return 0
    if r[axis] < world.end[axis]:
        return 1
    return 2


def _correct_coordinates(point, world):
    for axis in (Axis.X, Axis.Y, Axis.Z):
        if world.bounds[axis] is BoundaryType.PERIODIC:
            bound_periodic(point, axis, world.sizes)


class Particles:
    """Points of one particle sort together with its physical parameters."""

    def __init__(self, world, parameters):
        self.world = world
        self.parameters = parameters
        self.points = []
        self._lock = threading.Lock()

    def add_particle(self, point):
        """Append ``point``; safe to call from several threads."""
        with self._lock:
            self.points.append(point)

    def particles_number(self, point):
        """Number of particles in a cell."""
        return self.parameters.Np

    def density(self, point):
        """Reference density of the sort."""
        return self.parameters.n

    def charge(self, point):
        """Charge of a particle of the sort."""
        return self.parameters.q

    def mass(self, point):
        """Mass of a particle of the sort."""
        return self.parameters.m

    def velocity(self, point):
        """Relativistic velocity ``p / sqrt(m^2 + p^2)``."""
        p = point.p
        m = self.mass(point)
        return p / math.sqrt(m * m + p.squared())

    def communicate(self):
        """Hand particles that left the local region over to the neighbours.

        Coordinates are wrapped along periodic axes first. Particles heading
        towards a missing neighbour are dropped.
        """
        world = self.world
        outgoing = [[] for _ in range(_NEIGHBORS)]
        points = self.points

        i, end = 0, len(points)
        while i < end:
            point = points[i]
            index = _contiguous_index(
                _side(point.r, Axis.Z, world),
                _side(point.r, Axis.Y, world),
                _side(point.r, Axis.X, world),
            )
            if index == _CENTER:
                i += 1
                continue
            _correct_coordinates(point, world)
            outgoing[index].append(point)
            end -= 1
            points[i], points[end] = points[end], points[i]
        del points[end:]

        if outgoing[_CENTER]:
            raise RuntimeError(
                "particles should not be passed to their own process, "
                f"{len(outgoing[_CENTER])} particles were passed"
            )

        incoming = [[] for _ in range(_NEIGHBORS)]
        for s in range(_NEIGHBORS):
            if s == _CENTER:
                continue
            r = (_NEIGHBORS - 1) - s
            if world.neighbor_exists(s) and world.neighbor_exists(r):
                incoming[r] = outgoing[s]

        points.extend(
            chain.from_iterable(
                batch for index, batch in enumerate(incoming) if index != _CENTER
            )
        )