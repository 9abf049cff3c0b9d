"""Vectors, intervals, colors, a pixel image, a window and a scene for a small ray tracer."""

__version__ = "0.1.0"

__all__ = ["vector", "interval", "color", "image", "window", "scene", "cli"]