"""Bitmap font metrics and the character sets the game can show and save."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from foxgame.util import Vec2


class Font(enum.Enum):
    LARGE = "large"
    SMALL = "small"


class Align(enum.Enum):
    BEG = "beg"
    MID = "mid"
    END = "end"


def _ascii_lower(c: str) -> str:
    return c.lower() if "A" <= c <= "Z" else c


@dataclass(frozen=True)
class FontData:
    """Glyph size, spacing and atlas layout of one bitmap font."""

    char_width: float
    char_height: float
    char_spacing: float
    atlas_width: int
    atlas_chars: str

    def valid_char(self, c: str) -> bool:
        """Whether the font has a glyph for the character."""
        return _ascii_lower(c) in self.atlas_chars

    def typable_char(self, c: str) -> bool:
        """Whether the character may be typed and saved to files (ASCII only)."""
        return self.valid_char(c) and c.isascii()

    def char_index(self, c: str) -> int:
        """Index of the character's glyph in the atlas; unknown characters map to 0."""
        index = self.atlas_chars.find(_ascii_lower(c))
        return index if index >= 0 else 0

    def advance(self) -> float:
        return self.char_width + self.char_spacing


_FONTS = {
    Font.LARGE: FontData(
        char_width=9.0,
        char_height=10.0,
        char_spacing=-1.0,
        atlas_width=13,
        atlas_chars=" 0123456789!?abcdefghijklmnopqrstuvwxyz[]():;.,*+-=/",
    ),
    Font.SMALL: FontData(
        char_width=9.0,
        char_height=9.0,
        char_spacing=-1.0,
        atlas_width=13,
        atlas_chars=" 0123456789:;abcdefghijklmnopqrstuvwxyz()[]<>!?.,\"'|\\/+-=*_'@£&🮤🮥🮧🮦↞↠▪🔄",
    ),
}


def font_data(font: Font) -> FontData:
    return _FONTS[font]


def text_size(text: str, size: Vec2, font: Font) -> Vec2:
    """The on-screen size of a line of text at the given scale."""
    d = font_data(font)
    return Vec2(len(text) * d.advance(), d.char_height) * size


def text_origin(text: str, pos: Vec2, size: Vec2, align: Align, font: Font) -> Vec2:
    """The top-left pixel where the text starts when aligned at pos."""
    extent = text_size(text, size, font)
    if align is Align.BEG:
        origin = pos - extent
    elif align is Align.MID:
        origin = pos - extent / 2.0
    else:
        origin = pos
    return origin.floor()