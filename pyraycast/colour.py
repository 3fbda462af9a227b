"""RGB colours with 0-255 channels."""

from __future__ import annotations

from dataclasses import dataclass

_CHANNEL_MAX = 255.0


@dataclass(frozen=True)
class RGB:
    """A colour with floating-point channels on a 0-255 scale."""

    r: float
    g: float
    b: float

    def scale(self, s: float) -> RGB:
        """Return the colour with every channel multiplied by ``s``."""
        return RGB(s * self.r, s * self.g, s * self.b)

    def __add__(self, other: RGB) -> RGB:
        """Add channel-wise, clamping each channel at 255."""
        return RGB(
            min(self.r + other.r, _CHANNEL_MAX),
            min(self.g + other.g, _CHANNEL_MAX),
            min(self.b + other.b, _CHANNEL_MAX),
        )

    def as_ints(self) -> tuple[int, int, int]:
        """Return the channels truncated toward zero."""
        return int(self.r), int(self.g), int(self.b)

    def __str__(self) -> str:
        return f"Red: {self.r:f} Blue: {self.b:f} Green: {self.g:f}"


GREY = RGB(20, 20, 20)
WHITE = RGB(255, 255, 255)
RED = RGB(255, 0, 0)
GREEN = RGB(0, 255, 0)
BLUE = RGB(0, 0, 255)
YELLOW = RGB(255, 255, 0)