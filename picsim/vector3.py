"""Three-component vector with arithmetic and geometric helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Number

_FIELDS = ("x", "y", "z")


def _format_component(value):
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return f"{value:f}"


@dataclass(slots=True)
class Vector3:
    """Mutable 3D vector; components may be integers or reals."""

    x: float = 0
    y: float = 0
    z: float = 0

    dim = 3

    @classmethod
    def filled(cls, value):
        """Vector with every component equal to ``value``."""
        return cls(value, value, value)

    def __getitem__(self, index):
        return (self.x, self.y, self.z)[index]

    def __setitem__(self, index, value):
        setattr(self, _FIELDS[index], value)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __len__(self):
        return 3

    def __add__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self):
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar):
        if not isinstance(scalar, Number):
            return NotImplemented
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __truediv__(self, scalar):
        if not isinstance(scalar, Number):
            return NotImplemented
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __iadd__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __isub__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def __imul__(self, scalar):
        if not isinstance(scalar, Number):
            return NotImplemented
        self.x *= scalar
        self.y *= scalar
        self.z *= scalar
        return self

    def __itruediv__(self, scalar):
        if not isinstance(scalar, Number):
            return NotImplemented
        self.x /= scalar
        self.y /= scalar
        self.z /= scalar
        return self

    def __str__(self):
        return "".join(_format_component(v) + " " for v in self)

    def elementwise_product(self, other):
        """Component-wise product with ``other``."""
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def normalized(self):
        """Unit vector in the same direction."""
        return self / self.length()

    def length(self):
        """Euclidean norm."""
        return math.sqrt(self.squared())

    def elements_product(self):
        """Product of all components."""
        return self.x * self.y * self.z

    def dot(self, other):
        """Scalar product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def squared(self):
        """Scalar product with itself."""
        return self.dot(self)

    def abs_max(self):
        """Largest absolute component value."""
        return max(abs(self.x), abs(self.y), abs(self.z))

    def parallel_to(self, ref):
        """Projection of this vector onto ``ref``."""
        return (self.dot(ref) * ref) / ref.squared()

    def transverse_to(self, ref):
        """Component of this vector perpendicular to ``ref``."""
        return self - self.parallel_to(ref)

    def swap_order(self):
        """Exchange the x and z components in place."""
        self.x, self.z = self.z, self.x

    def cross(self, other):
        """Vector product."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            -(self.x * other.z - self.z * other.x),
            self.x * other.y - self.y * other.x,
        )


def minimum(lhs, rhs):
    """Component-wise minimum of two vectors."""
    return Vector3(*(min(a, b) for a, b in zip(lhs, rhs)))


def maximum(lhs, rhs):
    """Component-wise maximum of two vectors."""
    return Vector3(*(max(a, b) for a, b in zip(lhs, rhs)))