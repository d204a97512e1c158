"""Local part of the computational domain owned by this process."""

from __future__ import annotations

import math
from dataclasses import dataclass
from itertools import product
from typing import ClassVar

from picsim.configuration import BoundaryType
from picsim.splines import DEFAULT_ORDER, form_factor as make_form_factor
from picsim.vector3 import Vector3


@dataclass
class World:
    """Grid decomposition, local corners and neighbour layout.

    The whole grid is owned by a single process, so the local region spans
    the full domain and the only reachable neighbour is the process itself,
    across periodic boundaries.
    """

    dof: ClassVar[int] = Vector3.dim

    bounds: tuple
    procs: tuple
    spacing: Vector3
    sizes: Vector3
    steps: Vector3
    stencil_width: int
    start_n: Vector3
    end_n: Vector3
    start: Vector3
    end: Vector3
    neighbors: tuple

    @staticmethod
    def from_configuration(configuration):
        """Build the world described by ``configuration``."""
        shape_form_factor = make_form_factor(DEFAULT_ORDER)
        geometry = configuration.geometry
        bounds = configuration.boundaries()
        procs = configuration.processors()
        if any(p > 1 for p in procs):
            raise ValueError(f"only a single process is supported, got {procs}")

        spacing = geometry.spacing
        start_n = Vector3(0, 0, 0)
        end_n = geometry.steps

        neighbors = []
        for oz, oy, ox in product(range(3), repeat=3):
            reachable = all(
                offset == 1 or bound is BoundaryType.PERIODIC
                for offset, bound in zip((ox, oy, oz), bounds)
            )
            neighbors.append(0 if reachable else None)

        return World(
            bounds=bounds,
            procs=procs,
            spacing=spacing,
            sizes=geometry.sizes,
            steps=geometry.steps,
            stencil_width=math.ceil(shape_form_factor.radius),
            start_n=start_n,
            end_n=end_n,
            start=start_n.elementwise_product(spacing) * 1.0,
            end=end_n.elementwise_product(spacing) * 1.0,
            neighbors=tuple(neighbors),
        )

    def neighbor_exists(self, index):
        """True if the neighbour at contiguous ``index`` (z-major, 27 entries) exists."""
        return self.neighbors[index] is not None