"""Colours given by red, green and blue components."""

from __future__ import annotations

import functools
import math
import random as _random
from typing import ClassVar

_NAMED_COLORS = (
    "BLACK",
    "BLUE",
    "CYAN",
    "GRAY",
    "GREEN",
    "MAGENTA",
    "RED",
    "WHITE",
    "YELLOW",
)


@functools.total_ordering
class Color:
    """An immutable 24-bit colour; the default is black.

    Each component runs from 0 (none of it) to 255 (as much as possible).
    Colours compare and order by their packed 0xRRGGBB value.
    """

    __slots__ = ("_rgb",)

    WHITE: ClassVar[Color]
    BLACK: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    BLUE: ClassVar[Color]
    YELLOW: ClassVar[Color]
    CYAN: ClassVar[Color]
    MAGENTA: ClassVar[Color]
    GRAY: ClassVar[Color]

    def __init__(self, red: int = 0, green: int = 0, blue: int = 0) -> None:
        if not all(0 <= part < 256 for part in (red, green, blue)):
            raise ValueError("Color values out of range.")
        self._rgb = (int(red) << 16) + (int(green) << 8) + int(blue)

    @classmethod
    def from_hex(cls, hex_value: int) -> Color:
        """Build a colour from a packed 0xRRGGBB value."""
        if hex_value < 0 or hex_value > 0xFFFFFF:
            raise ValueError("Color.from_hex(): Value out of range.")
        return cls((hex_value >> 16) & 0xFF, (hex_value >> 8) & 0xFF, hex_value & 0xFF)

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float) -> Color:
        """Build a colour from hue, saturation and value, each in [0, 1]."""
        if not (0 <= h <= 1 and 0 <= s <= 1 and 0 <= v <= 1):
            raise ValueError("Color.from_hsv(): Values out of range.")

        def channel(n: int) -> int:
            k = math.fmod(n + h * 6, 6)
            return int(255 * (v - v * s * max(0.0, min(k, 4 - k, 1.0))))

        return cls(channel(5), channel(3), channel(1))

    @classmethod
    def random(cls, rng: _random.Random | None = None) -> Color:
        """Return a colour with every component chosen at random."""
        rng = rng if rng is not None else _random.Random()
        return cls(rng.randint(0, 255), rng.randint(0, 255), rng.randint(0, 255))

    @property
    def red(self) -> int:
        """How much red is in the colour."""
        return (self._rgb >> 16) & 0xFF

    @property
    def green(self) -> int:
        """How much green is in the colour."""
        return (self._rgb >> 8) & 0xFF

    @property
    def blue(self) -> int:
        """How much blue is in the colour."""
        return self._rgb & 0xFF

    def to_rgb(self) -> int:
        """Return the colour packed as a 24-bit 0xRRGGBB integer."""
        return self._rgb

    def to_html(self) -> str:
        """Return the colour as an HTML string such as ``#a0b0c0``."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._rgb == other._rgb

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._rgb < other._rgb

    def __hash__(self) -> int:
        return hash(self._rgb)

    def __repr__(self) -> str:
        return f"Color({self.red}, {self.green}, {self.blue})"

    def __str__(self) -> str:
        for name in _NAMED_COLORS:
            if self == getattr(Color, name):
                return f"Color.{name}"
        return self.to_html()


Color.WHITE = Color.from_hex(0xFFFFFF)
Color.BLACK = Color.from_hex(0x000000)
Color.RED = Color.from_hex(0xFF0000)
Color.GREEN = Color.from_hex(0x00FF00)
Color.BLUE = Color.from_hex(0x0000FF)
Color.YELLOW = Color.from_hex(0xFFFF00)
Color.CYAN = Color.from_hex(0x00FFFF)
Color.MAGENTA = Color.from_hex(0xFF00FF)
Color.GRAY = Color.from_hex(0x808080)