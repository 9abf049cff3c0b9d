"""An off-screen pixel buffer drawn in square grid cells."""

from __future__ import annotations

import enum
from collections.abc import Iterator

_BYTES_PER_PIXEL = 4


class PixelQuality(enum.Enum):
    """How coarsely the image is drawn."""

    LOW = enum.auto()
    HIGH = enum.auto()


_GRID_SIZES = {PixelQuality.LOW: 4, PixelQuality.HIGH: 1}


class Image:
    """A width x height buffer of 32-bit pixels stored as RGBA bytes."""

    def __init__(self, width: int, height: int, grid: int = 1) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        if grid <= 0:
            raise ValueError(f"grid size must be positive, got {grid}")
        self.width = width
        self.height = height
        self.grid = grid
        self.data = bytearray(width * height * _BYTES_PER_PIXEL)

    def _offset(self, x: int, y: int) -> int:
        return (y * self.width + x) * _BYTES_PER_PIXEL

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; coordinates outside the image are ignored."""
        if not self._inside(x, y):
            return
        value = color & 0xFFFFFFFF
        offset = self._offset(x, y)
        self.data[offset:offset + _BYTES_PER_PIXEL] = bytes(
            ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, (value >> 24) & 0xFF)
        )

    def pixel_at(self, x: int, y: int) -> int:
        """Return the pixel value at (x, y)."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} image")
        offset = self._offset(x, y)
        r, g, b, a = self.data[offset:offset + _BYTES_PER_PIXEL]
        return a << 24 | r << 16 | g << 8 | b

    def set_quality(self, quality: PixelQuality) -> None:
        """Choose the grid cell size for the given quality."""
        self.grid = _GRID_SIZES.get(quality, 1)

    def fill_grid(self, start_x: int, start_y: int, color: int) -> None:
        """Fill one grid cell whose top-left corner is (start_x, start_y)."""
        if self.grid == 1:
            self.put_pixel(start_x, start_y, color)
            return
        for dy in range(self.grid):
            for dx in range(self.grid):
                self.put_pixel(start_x + dx, start_y + dy, color)

    def grid_origins(self) -> Iterator[tuple[int, int]]:
        """Yield the top-left corner of every grid cell, row by row."""
        for y in range(0, self.height, self.grid):
            for x in range(0, self.width, self.grid):
                yield x, y

    def clear(self) -> None:
        """Set every pixel to zero."""
        self.data[:] = bytes(len(self.data))