"""A scene drawn into a window."""

from __future__ import annotations

from minirt.color import color, to_int
from minirt.window import Window, WindowError

_BACKGROUND = color(0.2, 0.1, 0.2)


class Scene:
    """Everything needed to draw a frame: currently a window."""

    def __init__(self, width: int, height: int, title: str) -> None:
        self.window = Window(width, height, title)

    def init_render(self) -> None:
        """Open the window so that frames can be drawn."""
        self.window.open()

    def draw(self) -> None:
        """Clear the window and fill the image with the background colour."""
        image = self.window.image
        if image is None:
            raise WindowError("window is not open")
        self.window.clear()
        pixel = to_int(_BACKGROUND)
        for x, y in image.grid_origins():
            image.fill_grid(x, y, pixel)

    def render(self) -> None:
        """Draw a frame, show it and handle events until the window closes."""
        self.draw()
        self.window.present()
        self.window.run_event_loop()

    def destroy(self) -> None:
        """Release the window."""
        self.window.destroy()

    def __enter__(self) -> Scene:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.destroy()