"""Level data as saved in a level pack file, and its binary encoding."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from foxgame.fonts import Font, font_data
from foxgame.util import Vec2

# Pack names and authors, level names, world names and sign lines
MAX_FIELD_LEN = 24
# Names are read back at most this many characters long
MAX_NAME_LEN = 22

LevelPosition = tuple[int, int]
SignLines = tuple[str, str, str, str]


class LevelPackError(ValueError):
    """Raised when level or pack bytes cannot be decoded."""


def pos_to_level_pos(pos: Vec2) -> LevelPosition:
    """Convert a world position to the tile it is in, clamped to a byte."""
    tile = (pos / 16.0).floor().clamp(Vec2.splat(0.0), Vec2.splat(255.0))
    return int(tile.x), int(tile.y)


def level_pos_to_pos(level_pos: LevelPosition) -> Vec2:
    return Vec2(float(level_pos[0]), float(level_pos[1])) * 16.0


def string_to_bytes(s: str) -> bytes:
    """Encode a string as a fixed field; characters that can't be typed become zero."""
    font = font_data(Font.SMALL)
    field_bytes = bytearray(MAX_FIELD_LEN)
    for i, c in enumerate(s[:MAX_FIELD_LEN]):
        if font.typable_char(c):
            field_bytes[i] = ord(c)
    return bytes(field_bytes)


def bytes_to_string(data: bytes, begin: int, max_len: int) -> str:
    """Decode a zero-terminated string of at most max_len characters starting at begin."""
    font = font_data(Font.SMALL)
    chars = []
    for index in range(begin, begin + max_len):
        if index >= len(data):
            raise LevelPackError(f"string at byte {begin} runs past the end of the data")
        b = data[index]
        if b == 0:
            break
        c = chr(b)
        if not font.typable_char(c):
            raise LevelPackError(f"invalid character byte 0x{b:02X} at byte {index}")
        chars.append(c)
    return "".join(chars)


class _Reader:
    """Reads bytes from a buffer, raising LevelPackError when it runs out."""

    def __init__(self, data: bytes, cursor: int) -> None:
        self.data = data
        self.cursor = cursor

    def byte(self) -> int:
        if self.cursor >= len(self.data):
            raise LevelPackError(f"unexpected end of data at byte {self.cursor}")
        value = self.data[self.cursor]
        self.cursor += 1
        return value

    def many(self, count: int) -> list[int]:
        return [self.byte() for _ in range(count)]

    def position(self) -> LevelPosition:
        return self.byte(), self.byte()

    def string(self, max_len: int) -> str:
        value = bytes_to_string(self.data, self.cursor, max_len)
        self.cursor += MAX_FIELD_LEN
        return value


@dataclass
class LevelData:
    """One level as stored in a pack: tiles are byte values, positions are in tiles."""

    name: str
    world: int
    bg_col: tuple[int, int, int]
    width: int
    height: int
    tiles: list[int]
    tiles_bg: list[int]
    spawn: LevelPosition
    finish: LevelPosition
    checkpoints: list[LevelPosition] = field(default_factory=list)
    signs: list[tuple[LevelPosition, SignLines]] = field(default_factory=list)
    doors: list[tuple[int, LevelPosition, LevelPosition]] = field(default_factory=list)
    entities: list[tuple[LevelPosition, int]] = field(default_factory=list)

    def to_bytes(self) -> bytes:
        out = bytearray(string_to_bytes(self.name))
        out.append(self.world)
        out.extend(self.bg_col)
        out.append(self.width)
        out.append(self.height)
        out.extend(self.tiles)
        out.extend(self.tiles_bg)
        out.extend(self.spawn)
        out.extend(self.finish)

        out.append(len(self.checkpoints))
        for checkpoint in self.checkpoints:
            out.extend(checkpoint)

        out.append(len(self.signs))
        for pos, lines in self.signs:
            for line in lines:
                out.extend(string_to_bytes(line))
            out.extend(pos)

        out.append(len(self.doors))
        for kind, pos, dest in self.doors:
            out.append(kind)
            out.extend(pos)
            out.extend(dest)

        out.append(len(self.entities))
        for pos, kind in self.entities:
            out.append(kind)
            out.extend(pos)
        return bytes(out)

    @classmethod
    def from_bytes(
        cls, data: bytes, cursor: int = 0, max_signs: Optional[int] = None
    ) -> tuple[LevelData, int]:
        """Decode one level starting at cursor; return it and the cursor just past it."""
        reader = _Reader(data, cursor)

        name = reader.string(MAX_NAME_LEN)
        world = reader.byte()
        r, g, b = reader.many(3)
        width, height = reader.many(2)
        tile_count = width * height
        tiles = reader.many(tile_count)
        tiles_bg = reader.many(tile_count)
        spawn = reader.position()
        finish = reader.position()

        checkpoints = [reader.position() for _ in range(reader.byte())]

        signs_len = reader.byte()
        if max_signs is not None and signs_len > max_signs:
            raise LevelPackError(f"level has {signs_len} signs, more than {max_signs}")
        signs = []
        for _ in range(signs_len):
            lines = tuple(reader.string(MAX_FIELD_LEN) for _ in range(4))
            signs.append((reader.position(), lines))

        doors = []
        for _ in range(reader.byte()):
            kind = reader.byte()
            pos = reader.position()
            dest = reader.position()
            doors.append((kind, pos, dest))

        entities = []
        for _ in range(reader.byte()):
            kind = reader.byte()
            entities.append((reader.position(), kind))

        level = cls(
            name=name,
            world=world,
            bg_col=(r, g, b),
            width=width,
            height=height,
            tiles=tiles,
            tiles_bg=tiles_bg,
            spawn=spawn,
            finish=finish,
            checkpoints=checkpoints,
            signs=signs,
            doors=doors,
            entities=entities,
        )
        return level, reader.cursor

    def spawn_pos(self) -> Vec2:
        return level_pos_to_pos(self.spawn)

    def finish_pos(self) -> Vec2:
        return level_pos_to_pos(self.finish)


def _is_finite(v: Vec2) -> bool:
    return math.isfinite(v.x) and math.isfinite(v.y)