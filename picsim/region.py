"""Containment and intersection tests for axis-aligned integer regions."""

from __future__ import annotations


def _ends(start, size):
    return [s + n for s, n in zip(start, size)]


def is_point_within_bounds(point, b_start, b_size):
    """True if ``point`` lies in the bounds, both ends inclusive."""
    b_end = _ends(b_start, b_size)
    return all(s <= p <= e for p, s, e in zip(point, b_start, b_end))


def is_region_within_bounds(r_start, r_size, b_start, b_size):
    """True if the region ``[r_start, r_start + r_size]`` fits inside the bounds."""
    r_end = _ends(r_start, r_size)
    b_end = _ends(b_start, b_size)
    return all(
        bs <= rs < be and bs <= re <= be
        for rs, re, bs, be in zip(r_start, r_end, b_start, b_end)
    )


def is_region_intersect_bounds(r_start, r_size, b_start, b_size):
    """True if the region and the bounds overlap with non-zero volume."""
    r_end = _ends(r_start, r_size)
    b_end = _ends(b_start, b_size)
    return all(
        rs < be and re > bs
        for rs, re, bs, be in zip(r_start, r_end, b_start, b_end)
    )