"""Four-component vector: three spatial components plus ``c``."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Number

_FIELDS = ("x", "y", "z", "c")


def _format_component(value):
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return f"{value:f}"


@dataclass(slots=True)
class Vector4:
    """Mutable 4D vector; components may be integers or reals."""

    x: float = 0
    y: float = 0
    z: float = 0
    c: float = 0

    dim = 4

    @classmethod
    def filled(cls, value):
        """Vector with every component equal to ``value``."""
        return cls(value, value, value, value)

    def __getitem__(self, index):
        return (self.x, self.y, self.z, self.c)[index]

    def __setitem__(self, index, value):
        setattr(self, _FIELDS[index], value)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.c

    def __len__(self):
        return 4

    def _map2(self, other, op):
        return Vector4(*(op(a, b) for a, b in zip(self, other)))

    def __add__(self, other):
        if not isinstance(other, Vector4):
            return NotImplemented
        return self._map2(other, lambda a, b: a + b)

    def __sub__(self, other):
        if not isinstance(other, Vector4):
            return NotImplemented
        return self._map2(other, lambda a, b: a - b)

    def __neg__(self):
        return Vector4(-self.x, -self.y, -self.z, -self.c)

    def __mul__(self, scalar):
        if not isinstance(scalar, Number):
            return NotImplemented
        return Vector4(*(v * scalar for v in self))

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __truediv__(self, scalar):
        if not isinstance(scalar, Number):
            return NotImplemented
        return Vector4(*(v / scalar for v in self))

    def __iadd__(self, other):
        if not isinstance(other, Vector4):
            return NotImplemented
        self.x, self.y, self.z, self.c = self + other
        return self

    def __isub__(self, other):
        if not isinstance(other, Vector4):
            return NotImplemented
        self.x, self.y, self.z, self.c = self - other
        return self

    def __imul__(self, scalar):
        if not isinstance(scalar, Number):
            return NotImplemented
        self.x, self.y, self.z, self.c = self * scalar
        return self

    def __str__(self):
        return "".join(_format_component(v) + " " for v in self)

    def elementwise_product(self, other):
        """Component-wise product with ``other``."""
        return self._map2(other, lambda a, b: a * b)

    def normalized(self):
        """Unit vector in the same direction."""
        return self / self.length()

    def length(self):
        """Euclidean norm."""
        return math.sqrt(self.squared())

    def elements_product(self):
        """Product of all components."""
        return self.x * self.y * self.z * self.c

    def dot(self, other):
        """Scalar product."""
        return sum(a * b for a, b in zip(self, other))

    def squared(self):
        """Scalar product with itself."""
        return self.dot(self)

    def parallel_to(self, ref):
        """Projection of this vector onto ``ref``."""
        return (self.dot(ref) * ref) / ref.squared()

    def transverse_to(self, ref):
        """Component of this vector perpendicular to ``ref``."""
        return self - self.parallel_to(ref)

    def swap_order(self):
        """Exchange the x and z components in place."""
        self.x, self.z = self.z, self.x


def minimum(lhs, rhs):
    """Component-wise minimum of two vectors."""
    return Vector4(*(min(a, b) for a, b in zip(lhs, rhs)))


def maximum(lhs, rhs):
    """Component-wise maximum of two vectors."""
    return Vector4(*(max(a, b) for a, b in zip(lhs, rhs)))