import pytest

from foxgame.levelpack import (
    MAX_FIELD_LEN,
    LevelData,
    LevelPackError,
    bytes_to_string,
    level_pos_to_pos,
    pos_to_level_pos,
    string_to_bytes,
)
from foxgame.util import Vec2


def sample_level(**overrides):
    values = dict(
        name="Hill",
        world=1,
        bg_col=(10, 20, 30),
        width=2,
        height=2,
        tiles=[1, 2, 3, 4],
        tiles_bg=[0, 0, 0, 5],
        spawn=(0, 1),
        finish=(1, 1),
        checkpoints=[(1, 0)],
        signs=[((0, 0), ("hi", "there", "", "bye!"))],
        doors=[(1, (0, 0), (1, 1))],
        entities=[((1, 1), 3)],
    )
    values.update(overrides)
    return LevelData(**values)


def test_pos_to_level_pos_clamps():
    assert pos_to_level_pos(Vec2(-5.0, 5000.0)) == (0, 255)


@pytest.mark.parametrize("tile", [(0, 0), (3, 7), (255, 255)])
def test_level_pos_round_trip(tile):
    assert pos_to_level_pos(level_pos_to_pos(tile)) == tile


def test_pos_inside_tile_maps_to_tile():
    base = level_pos_to_pos((4, 9))
    assert pos_to_level_pos(base + Vec2(15.9, 0.1)) == (4, 9)


def test_string_to_bytes_is_fixed_length():
    assert len(string_to_bytes("")) == MAX_FIELD_LEN
    assert len(string_to_bytes("x" * 40)) == MAX_FIELD_LEN


def test_string_round_trip_keeps_case():
    encoded = string_to_bytes("Fox Level 1!")
    assert bytes_to_string(encoded, 0, MAX_FIELD_LEN) == "Fox Level 1!"


def test_untypable_char_terminates_string():
    encoded = string_to_bytes("a~b")
    assert bytes_to_string(encoded, 0, MAX_FIELD_LEN) == "a"


def test_bytes_to_string_rejects_invalid_byte():
    with pytest.raises(LevelPackError):
        bytes_to_string(b"a\x80b", 0, 3)


def test_bytes_to_string_rejects_missing_bytes():
    with pytest.raises(LevelPackError):
        bytes_to_string(b"abc", 0, 10)


def test_bytes_to_string_respects_max_len():
    assert bytes_to_string(b"abcdef", 0, 3) == "abc"


def test_level_round_trip():
    level = sample_level()
    encoded = level.to_bytes()
    decoded, cursor = LevelData.from_bytes(encoded, 0)
    assert decoded == level
    assert cursor == len(encoded)


def test_level_header_layout():
    level = sample_level()
    encoded = level.to_bytes()
    assert encoded[:MAX_FIELD_LEN] == string_to_bytes("Hill")
    assert encoded[MAX_FIELD_LEN] == 1
    assert tuple(encoded[MAX_FIELD_LEN + 1 : MAX_FIELD_LEN + 4]) == (10, 20, 30)


def test_level_from_bytes_at_offset():
    encoded = sample_level().to_bytes()
    data = b"\xff\xff\xff" + encoded
    decoded, cursor = LevelData.from_bytes(data, 3)
    assert decoded == sample_level()
    assert cursor == len(data)


def test_consecutive_levels_decode():
    a = sample_level(name="one")
    b = sample_level(name="two", world=2, signs=[])
    data = a.to_bytes() + b.to_bytes()
    first, cursor = LevelData.from_bytes(data, 0)
    second, end = LevelData.from_bytes(data, cursor)
    assert (first, second) == (a, b)
    assert end == len(data)


def test_level_name_is_read_back_shortened():
    level = sample_level(name="x" * 24)
    decoded, _ = LevelData.from_bytes(level.to_bytes(), 0)
    assert decoded.name == "x" * 22


def test_sign_lines_keep_full_field():
    line = "y" * 24
    level = sample_level(signs=[((1, 1), (line, line, line, line))])
    decoded, _ = LevelData.from_bytes(level.to_bytes(), 0)
    assert decoded.signs[0][1] == (line, line, line, line)


@pytest.mark.parametrize("cut", [1, 30, 40, -1])
def test_truncated_level_raises(cut):
    encoded = sample_level().to_bytes()
    with pytest.raises(LevelPackError):
        LevelData.from_bytes(encoded[:cut], 0)


def test_too_many_signs_raises():
    encoded = sample_level().to_bytes()
    with pytest.raises(LevelPackError):
        LevelData.from_bytes(encoded, 0, max_signs=0)


def test_sign_limit_allows_exact_count():
    level = sample_level()
    decoded, _ = LevelData.from_bytes(level.to_bytes(), 0, max_signs=1)
    assert decoded.signs == level.signs