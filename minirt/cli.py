"""Command-line entry point printing a demonstration of vector operations."""

from __future__ import annotations

import argparse

from minirt.vector import Vec


def demo_lines() -> list[str]:
    """Return the output lines of the vector demonstration."""
    v1 = Vec(1.0, 2.0, 3.0)
    v2 = Vec(4.0, 5.0, 6.0)
    return [
        str(v1 + v2),
        str(v1 - v2),
        str(-v1),
        str(v1 * 2.0),
        str(v1 / 2.0),
        str(v1.cross(v2)),
        f"vec_dot: {v1.dot(v2):f}",
        f"vec_mag: {v1.magnitude():f}",
        f"vec_sqmag: {v1.squared_magnitude():f}",
        str(v1.normalized()),
        str(Vec.zero()),
    ]


def main(argv: list[str] | None = None) -> int:
    """Print the vector demonstration and return the exit status."""
    parser = argparse.ArgumentParser(prog="minirt", description="Print vector operation results.")
    parser.parse_args(argv)
    for line in demo_lines():
        print(line)
    return 0