"""Colours as vectors of red, green and blue components."""

from __future__ import annotations

from minirt.interval import Interval
from minirt.vector import Vec

_BYTE_RANGE = Interval(0.0, 255.0)


def color(r: float, g: float, b: float) -> Vec:
    """Return a colour with the given components."""
    return Vec(r, g, b)


def multiply(c1: Vec, c2: Vec) -> Vec:
    """Return the component-wise product of two colours."""
    return color(c1.x * c2.x, c1.y * c2.y, c1.z * c2.z)


def hadamard(c1: Vec, c2: Vec) -> Vec:
    """Return the Hadamard (component-wise) product of two colours."""
    return multiply(c1, c2)


def to_byte_range(c: Vec) -> Vec:
    """Scale a unit colour to 0..255, clamping each component."""
    scaled = c * 255.0
    return color(
        _BYTE_RANGE.clamp(scaled.x),
        _BYTE_RANGE.clamp(scaled.y),
        _BYTE_RANGE.clamp(scaled.z),
    )


def to_unit(c: Vec) -> Vec:
    """Scale a 0..255 colour down to unit range."""
    return c / 255.0


def to_int(c: Vec) -> int:
    """Pack a unit colour into a 0xRRGGBB integer."""
    b = to_byte_range(c)
    return int(b.x) << 16 | int(b.y) << 8 | int(b.z)