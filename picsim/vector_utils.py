"""Conversions between three- and four-component vectors."""

from __future__ import annotations

from picsim.vector3 import Vector3
from picsim.vector4 import Vector4


def vector_cast(vector, dimension=None, element_type=None):
    """Convert ``vector`` to a vector of ``dimension`` components of ``element_type``.

    ``dimension`` defaults to that of ``vector``; ``element_type`` (e.g. ``int``
    or ``float``) defaults to keeping the components as they are. Widening to
    four components sets ``c`` to zero; narrowing to three drops ``c``.
    """
    if dimension is None:
        dimension = len(vector)
    convert = element_type if element_type is not None else (lambda v: v)

    spatial = [convert(v) for v in (vector[0], vector[1], vector[2])]
    if dimension == 3:
        return Vector3(*spatial)
    if dimension == 4:
        c = vector[3] if len(vector) == 4 else 0
        return Vector4(*spatial, convert(c))
    raise ValueError(f"unsupported vector dimension: {dimension}")