"""Particle phase-space point and boundary conditions applied to it."""

from __future__ import annotations

from dataclasses import dataclass, field

from picsim.vector3 import Vector3


@dataclass
class Point:
    """Position ``r`` and momentum ``p`` of a single particle."""

    r: Vector3 = field(default_factory=Vector3)
    p: Vector3 = field(default_factory=Vector3)

    @property
    def x(self):
        return self.r.x

    @x.setter
    def x(self, value):
        self.r.x = value

    @property
    def y(self):
        return self.r.y

    @y.setter
    def y(self, value):
        self.r.y = value

    @property
    def z(self):
        return self.r.z

    @z.setter
    def z(self, value):
        self.r.z = value

    @property
    def px(self):
        return self.p.x

    @px.setter
    def px(self, value):
        self.p.x = value

    @property
    def py(self):
        return self.p.y

    @py.setter
    def py(self, value):
        self.p.y = value

    @property
    def pz(self):
        return self.p.z

    @pz.setter
    def pz(self, value):
        self.p.z = value


def bound_reflective(point, axis, geom):
    """Reflect ``point`` from the walls at 0 and ``geom[axis]``, flipping its momentum."""
    s = point.r[axis]
    if s < 0.0:
        point.r[axis] = 0.0
        point.p[axis] = -point.p[axis]
    elif s > geom[axis]:
        point.r[axis] = geom[axis]
        point.p[axis] = -point.p[axis]


def bound_periodic(point, axis, geom):
    """Wrap the coordinate of ``point`` along ``axis`` into ``[0, geom[axis]]``."""
    s = point.r[axis]
    if s < 0.0:
        point.r[axis] = geom[axis] - (0.0 - s)
    elif s > geom[axis]:
        point.r[axis] = 0.0 + (s - geom[axis])