"""Styled fonts: a family, a style, a size and a colour."""

from __future__ import annotations

import dataclasses
import enum
import sys
from dataclasses import dataclass, field

from disasterprep.color import Color


class FontFamily(enum.Enum):
    """Families of available fonts."""

    SERIF = enum.auto()
    SANS_SERIF = enum.auto()
    MONOSPACE = enum.auto()
    UNICODE_SERIF = enum.auto()
    UNICODE_SANS_SERIF = enum.auto()
    UNICODE_MONOSPACE = enum.auto()


class FontStyle(enum.Enum):
    """Font styles."""

    NORMAL = enum.auto()
    BOLD = enum.auto()
    ITALIC = enum.auto()
    BOLD_ITALIC = enum.auto()


_MAC_NAMES = {
    FontFamily.SERIF: "Didot",
    FontFamily.SANS_SERIF: "Helvetica",
    FontFamily.MONOSPACE: "Monaco",
    FontFamily.UNICODE_SERIF: "Times",
    FontFamily.UNICODE_SANS_SERIF: "Lucida Grande",
    FontFamily.UNICODE_MONOSPACE: "Lucida Grande",
}

_WINDOWS_NAMES = {
    FontFamily.SERIF: "Serif",
    FontFamily.SANS_SERIF: "Sans Serif",
    FontFamily.MONOSPACE: "Monospace",
    FontFamily.UNICODE_SERIF: "Times New Roman",
    FontFamily.UNICODE_SANS_SERIF: "Lucida Sans Unicode",
    FontFamily.UNICODE_MONOSPACE: "Lucida Sans Unicode",
}

_OTHER_NAMES = {
    FontFamily.SERIF: "Serif",
    FontFamily.SANS_SERIF: "Sans Serif",
    FontFamily.MONOSPACE: "Monospace",
    FontFamily.UNICODE_SERIF: "Serif",
    FontFamily.UNICODE_SANS_SERIF: "Sans Serif",
    FontFamily.UNICODE_MONOSPACE: "Monospace",
}

_STYLE_NAMES = {
    FontStyle.BOLD: "BOLD",
    FontStyle.BOLD_ITALIC: "BOLDITALIC",
    FontStyle.ITALIC: "ITALIC",
}


def _family_name(family: FontFamily) -> str:
    if sys.platform == "darwin":
        names = _MAC_NAMES
    elif sys.platform == "win32":
        names = _WINDOWS_NAMES
    else:
        names = _OTHER_NAMES
    try:
        return names[family]
    except KeyError:
        raise ValueError("Unknown font family.") from None


@dataclass(frozen=True)
class Font:
    """An immutable styled font."""

    family: FontFamily = FontFamily.SANS_SERIF
    style: FontStyle = FontStyle.NORMAL
    size: int = 13
    color: Color = field(default_factory=lambda: Color.BLACK)

    def with_family(self, family: FontFamily) -> Font:
        """Return a copy of this font in another family."""
        return dataclasses.replace(self, family=family)

    def with_style(self, style: FontStyle) -> Font:
        """Return a copy of this font in another style."""
        return dataclasses.replace(self, style=style)

    def with_size(self, size: int) -> Font:
        """Return a copy of this font at another size."""
        return dataclasses.replace(self, size=size)

    def with_color(self, color: Color) -> Font:
        """Return a copy of this font in another colour."""
        return dataclasses.replace(self, color=color)

    def library_string(self) -> str:
        """Return the font as a ``Family-STYLE-size`` string.

        The style part is left out for normal text.
        """
        result = _family_name(self.family)
        if self.style is not FontStyle.NORMAL:
            try:
                result += "-" + _STYLE_NAMES[self.style]
            except KeyError:
                raise ValueError("Unknown font style.") from None
        return f"{result}-{self.size}"