"""Particle sort parameters and B-spline shape (form-factor) functions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass
class SortParameters:
    """Physical description of one sort (species) of particles."""

    Np: int  # number of particles in a cell
    n: float  # reference density
    q: float  # reference charge
    m: float  # mass of a particle
    px: float = 0.0  # initial impulse along x
    py: float = 0.0
    pz: float = 0.0
    Tx: float = 0.0  # temperature along x
    Ty: float = 0.0
    Tz: float = 0.0
    sort_name: str = ""


def spline_of_0th_order(s):
    """Nearest-grid-point shape."""
    s = abs(s)
    if s <= 0.5:
        return 1.0
    return 0.0


def spline_of_1st_order(s):
    """Cloud-in-cell (linear) shape."""
    s = abs(s)
    if s <= 1.0:
        return 1.0 - s
    return 0.0


def spline_of_2nd_order(s):
    """Triangular-shaped-cloud (quadratic) shape."""
    s = abs(s)
    if s <= 0.5:
        return 0.75 - s * s
    if 0.5 < s < 1.5:
        return 0.5 * (1.5 - s) * (1.5 - s)
    return 0.0


def spline_of_3rd_order(s):
    """Cubic B-spline shape."""
    s = abs(s)
    s2 = s**2
    s3 = s**3
    if s < 1.0:
        return (4.0 - 6.0 * s2 + 3.0 * s3) / 6.0
    if 1.0 <= s < 2.0:
        return (2.0 - s) ** 3 / 6.0
    return 0.0


def spline_of_4th_order(s):
    """Quartic B-spline shape."""
    s = abs(s)
    s2 = s**2
    s3 = s**3
    s4 = s**4
    if s <= 0.5:
        return 115.0 / 192.0 - 5.0 / 8.0 * s2 + 1.0 / 4.0 * s4
    if 0.5 < s <= 1.5:
        return (55.0 + 20.0 * s - 120.0 * s2 + 80.0 * s3 - 16.0 * s4) / 96.0
    if 1.5 < s < 2.5:
        return (5.0 - 2.0 * s) ** 4 / 384.0
    return 0.0


def spline_of_5th_order(s):
    """Quintic B-spline shape."""
    s = abs(s)
    s2 = s**2
    s3 = s**3
    s4 = s**4
    s5 = s**5
    if s <= 1.0:
        return 11.0 / 20.0 - 0.5 * s2 + 0.25 * s4 - 1.0 / 12.0 * s5
    if 1.0 < s <= 2.0:
        return (
            17.0 / 40.0
            + 5.0 / 8.0 * s
            - 7.0 / 4.0 * s2
            + 5.0 / 4.0 * s3
            - 3.0 / 8.0 * s4
            + 1.0 / 24.0 * s5
        )
    if 2.0 < s < 3.0:
        return (3.0 - s) ** 5 / 120.0
    return 0.0


@dataclass(frozen=True)
class FormFactor:
    """A shape function together with its support radius."""

    order: int
    radius: float
    function: Callable[[float], float]

    @property
    def width(self):
        """Number of grid nodes the shape may touch along one axis."""
        return int(2.0 * self.radius) + 1

    def __call__(self, s):
        return self.function(s)


_FORM_FACTORS = {
    0: (0.5, spline_of_0th_order),
    1: (1.0, spline_of_1st_order),
    2: (1.5, spline_of_2nd_order),
    3: (2.0, spline_of_3rd_order),
    4: (2.5, spline_of_4th_order),
    5: (3.0, spline_of_5th_order),
}

DEFAULT_ORDER = 2


def form_factor(order):
    """Return the form factor of the given spline ``order`` (0 to 5)."""
    try:
        radius, function = _FORM_FACTORS[order]
    except KeyError:
        raise ValueError(f"unknown particles form factor: {order!r}") from None
    return FormFactor(order, radius, function)