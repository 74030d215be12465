"""Pixel conversion, an in-memory frame buffer and an on-screen window."""

from __future__ import annotations

import math
import os
from types import TracebackType

from raytracer.vector import Vector

FILL_COLOUR = 0xFF00FF


def _channel(value: float) -> int:
    gamma = 0.0 if value < 0.0 else math.sqrt(value)
    return min(255, math.floor(gamma * 255.0 + 0.5))


def colour_to_pixel(colour: Vector) -> int:
    """Gamma-correct a linear colour and pack it as 0xRRGGBB."""
    r = _channel(colour.x)
    g = _channel(colour.y)
    b = _channel(colour.z)
    return (r << 16) | (g << 8) | b


def _unpack(pixel: int) -> tuple[int, int, int]:
    return (pixel >> 16) & 0xFF, (pixel >> 8) & 0xFF, pixel & 0xFF


class FrameBuffer:
    """A width x height grid of packed pixels, initially magenta."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("frame buffer dimensions must be positive")
        self.width = width
        self.height = height
        self._pixels = [FILL_COLOUR] * (width * height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return y * self.width + x

    def set_pixel(self, x: int, y: int, colour: Vector) -> None:
        self._pixels[self._index(x, y)] = colour_to_pixel(colour)

    def get_pixel(self, x: int, y: int) -> int:
        return self._pixels[self._index(x, y)]


class RenderWindow:
    """A window showing the image as it is rendered."""

    def __init__(self, width: int, height: int, scale: int = 1) -> None:
        os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
        import pygame

        self._pygame = pygame
        pygame.display.init()
        self._display = pygame.display.set_mode((width * scale, height * scale))
        pygame.display.set_caption("Ray Tracing")
        self._surface = pygame.Surface((width, height))
        self._surface.fill(_unpack(FILL_COLOUR))
        self._scale = scale
        self._open = True

    def set_pixel(self, x: int, y: int, colour: Vector) -> None:
        self._surface.set_at((x, y), _unpack(colour_to_pixel(colour)))

    def update(self) -> None:
        """Copy the rendered image to the screen."""
        if self._scale == 1:
            self._display.blit(self._surface, (0, 0))
        else:
            self._pygame.transform.scale(
                self._surface, self._display.get_size(), self._display
            )
        self._pygame.display.flip()

    def quit_requested(self) -> bool:
        """Drain pending events; True if the window was asked to close."""
        events = self._pygame.event.get()
        return any(event.type == self._pygame.QUIT for event in events)

    def close(self) -> None:
        if self._open:
            self._open = False
            self._pygame.display.quit()
            self._pygame.quit()

    def __enter__(self) -> RenderWindow:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()