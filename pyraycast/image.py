"""An in-memory pixel buffer that can be saved as a plain-text PPM image."""

from __future__ import annotations

from os import PathLike
from typing import Union

from .colour import GREY, RGB

DEFAULT_WIDTH = 512
DEFAULT_HEIGHT = 512
_MAX_CHANNEL = 255


class Image:
    """A grid of integer RGB pixels whose origin is the bottom-left corner."""

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        background: RGB = GREY,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("image dimensions must be positive")
        self.width = width
        self.height = height
        fill = background.as_ints()
        self._rows: list[list[tuple[int, int, int]]] = [
            [fill] * width for _ in range(height)
        ]

    def __getitem__(self, position: tuple[int, int]) -> tuple[int, int, int]:
        """Return the pixel at ``(x, y)`` with y counted from the bottom."""
        x, y = position
        self._check_bounds(x, y)
        return self._rows[self.height - y - 1][x]

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel position ({x}, {y}) out of bounds")

    def put_pixel(self, x: int, y: int, colour: RGB) -> None:
        """Set the pixel at ``(x, y)``; y counts up from the bottom row."""
        self._check_bounds(x, y)
        self._rows[self.height - y - 1][x] = colour.as_ints()

    def to_ppm(self) -> str:
        """Return the image in plain-text (P3) PPM format, top row first."""
        body = "".join(
            f"{r} {g} {b} " for row in self._rows for r, g, b in row
        )
        return f"P3\n{self.width} {self.height}\n{_MAX_CHANNEL}\n{body}"

    def write_ppm(self, path: Union[str, PathLike]) -> None:
        """Write the image to ``path`` as a plain-text PPM file."""
        with open(path, "w", encoding="ascii") as fh:
            fh.write(self.to_ppm())