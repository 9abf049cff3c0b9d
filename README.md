# minirt

Building blocks for a small ray tracer:

- `minirt.vector`: the immutable `Vec` type for 3D vectors. It supports `+`,
  `-`, unary `-`, multiplication and division by a number, and has `dot()`,
  `cross()`, `squared_magnitude()`, `magnitude()`, `normalized()` (the zero
  vector comes back unchanged) and `Vec.zero()`. `str(v)` gives
  `vec(x, y, z)` with six decimals. The module also has `point()` and
  `is_equal()`, which compares two numbers within `EPSILON` (0.00001).
- `minirt.interval`: `Interval(low, high)`, a closed range with `clamp()` and
  membership tests (`value in interval`).
- `minirt.color`: colors are `Vec`s of red, green and blue. `color()`,
  `multiply()` and `hadamard()` (component-wise products), `to_byte_range()`
  (scale a 0..1 color to 0..255 and clamp), `to_unit()` (divide by 255) and
  `to_int()`, which packs a 0..1 color into a `0xRRGGBB` integer.
- `minirt.image`: `Image(width, height)`, a buffer of 32-bit pixels.
  `put_pixel()` ignores coordinates outside the image, `pixel_at()` raises
  `IndexError` for them. `set_quality(PixelQuality.LOW)` draws in 4×4 cells,
  `PixelQuality.HIGH` in single pixels; `grid_origins()` yields the corner of
  every cell and `fill_grid()` fills one. `clear()` zeroes the buffer.
- `minirt.window`: `Window(width, height, title)` shows an `Image` with
  pygame. `open()`, `clear()`, `present()`, `close()`, `destroy()`,
  `poll_closed()` and `run_event_loop()`, which waits until the window is
  closed and then destroys it. Failures raise `WindowError`. `Key` lists key
  codes by name.
- `minirt.scene`: `Scene(width, height, title)` owns a window. `init_render()`
  opens it, `draw()` fills the image with the background color,
  `render()` draws, shows the frame and runs the event loop.

## Installation

```
pip install .
```

The window and scene use pygame; the vector, interval, color and image
modules use only the standard library.

## Command line

```
minirt
```

prints a demonstration of the vector operations on `(1, 2, 3)` and
`(4, 5, 6)`: sum, difference, negation, scaling, division, cross product, dot
product, magnitude, squared magnitude, the normalized vector and the zero
vector. It takes no options besides `--help`.

## Using the library

```python
from minirt.vector import Vec
from minirt.color import color, to_int

a = Vec(1.0, 2.0, 3.0)
b = Vec(4.0, 5.0, 6.0)

print(a + b)            # vec(5.000000, 7.000000, 9.000000)
print(a.cross(b))       # vec(-3.000000, 6.000000, -3.000000)
print(a.dot(b))         # 32.0
print(a.normalized())   # vec(0.267261, 0.534522, 0.801784)

print(hex(to_int(color(1.0, 0.5, 0.0))))
```

Opening a window and rendering a scene:

```python
from minirt.scene import Scene

with Scene(800, 600, "minirt") as scene:
    scene.init_render()
    scene.render()      # returns when the window is closed
```

## What it does not do

This is not yet a ray tracer. There are no objects, lights or cameras. No
scene files are read, and `Scene.draw()` only fills the window with one
background color. The window reacts only to being closed. `Key` names key
codes, but key presses and mouse clicks are not handled. The `minirt` command
prints the vector demonstration and does not open a window.

## Tests

```
pip install .[test]
pytest
```