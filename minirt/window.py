"""A display window that shows an off-screen image."""

from __future__ import annotations

import enum

import pygame

from minirt.image import Image

MOUSE_LEFT = 1
MOUSE_RIGHT = 3


class Key(enum.IntEnum):
    """Key codes recognised by the window."""

    UP = 0xFF52
    DOWN = 0xFF54
    LEFT = 0xFF51
    RIGHT = 0xFF53
    W = 0x0077
    A = 0x0061
    S = 0x0073
    D = 0x0064
    Q = 0x0071
    E = 0x0065
    L = 0x006C
    PAD_2 = 0xFF99
    PAD_4 = 0xFF96
    PAD_6 = 0xFF98
    PAD_8 = 0xFF97
    PAD_7 = 0xFF95
    PAD_9 = 0xFF9A
    PAD_PLUS = 0xFFAB
    PAD_MINUS = 0xFFAD
    ESC = 0xFF1B
    CTRL = 0xFFE3
    SHIFT = 0xFFE1
    ALT = 0xFFE9
    TAB = 0xFF09
    SPACE = 0x0020


class WindowError(RuntimeError):
    """Raised when the display or window cannot be used."""


class Window:
    """A titled window of fixed size backed by an Image."""

    def __init__(self, width: int, height: int, title: str) -> None:
        self.width = width
        self.height = height
        self.title = title
        self.surface: pygame.Surface | None = None
        self.image: Image | None = None
        try:
            pygame.display.init()
        except pygame.error as exc:
            raise WindowError(f"cannot initialise display: {exc}") from exc
        self._display_ready = True

    @property
    def is_open(self) -> bool:
        return self.surface is not None

    def _require_open(self) -> pygame.Surface:
        if self.surface is None:
            raise WindowError("window is not open")
        return self.surface

    def open(self) -> None:
        """Show the window and create its image."""
        if not self._display_ready:
            raise WindowError("display has been destroyed")
        try:
            self.surface = pygame.display.set_mode((self.width, self.height))
        except pygame.error as exc:
            raise WindowError(f"cannot open window: {exc}") from exc
        pygame.display.set_caption(self.title)
        self.image = Image(self.width, self.height)

    def clear(self) -> None:
        """Paint the window black."""
        self._require_open().fill((0, 0, 0))

    def present(self) -> None:
        """Copy the image onto the window and show it."""
        surface = self._require_open()
        if self.image is None:
            raise WindowError("window has no image")
        frame = pygame.image.frombuffer(bytes(self.image.data), (self.width, self.height), "RGBX")
        surface.blit(frame, (0, 0))
        pygame.display.flip()

    def close(self) -> None:
        """Hide the window."""
        if self.surface is None or not self._display_ready:
            raise WindowError("window is not open")
        pygame.display.quit()
        pygame.display.init()
        self.surface = None

    def destroy(self) -> None:
        """Close the window, drop its image and release the display."""
        if self.surface is not None:
            self.close()
        self.image = None
        if self._display_ready:
            pygame.display.quit()
            self._display_ready = False

    def poll_closed(self) -> bool:
        """Drain pending events; return True if the window was asked to close."""
        closed = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                closed = True
        return closed

    def run_event_loop(self) -> None:
        """Process events until the window is closed, then destroy it."""
        while not self.poll_closed():
            pygame.time.wait(10)
        self.destroy()

    def __enter__(self) -> Window:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.destroy()