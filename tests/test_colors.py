import pytest

from fdfview.colors import COLOR_TABLE, lookup_color, parse_color


def test_lookup_known_name():
    assert lookup_color("red") == 0xFF0000


def test_lookup_none_is_transparent():
    assert lookup_color("none") == -1


def test_lookup_ignores_case():
    assert lookup_color("GhostWhite") == lookup_color("ghostwhite")
    assert lookup_color("RED") == lookup_color("red")


def test_lookup_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_lookup_unknown_raises():
    with pytest.raises(KeyError):
        lookup_color("not a colour")


def test_numbered_shade():
    assert lookup_color("snow2") == 0xEEE9E9
    assert lookup_color("red4") == 0x8B0000


def test_gray_and_grey_agree():
    for number in range(101):
        assert lookup_color(f"gray{number}") == lookup_color(f"grey{number}")


def test_gray_extremes():
    assert lookup_color("gray0") == 0x0
    assert lookup_color("gray100") == 0xFFFFFF


def test_gray_levels_are_grey_and_increase():
    values = [lookup_color(f"gray{n}") for n in range(101)]
    assert values == sorted(values)
    for value in values:
        assert value & 0xFF == (value >> 8) & 0xFF == (value >> 16) & 0xFF


def test_table_keys_are_lowercase_and_found_in_any_case():
    for key, value in COLOR_TABLE.items():
        assert key == key.lower()
        assert lookup_color(key) == value
        assert lookup_color(key.upper()) == value


def test_parse_hex():
    assert parse_color("#ff00ff") == 0xFF00FF
    assert parse_color("#ABCDEF", "ignored") == 0xABCDEF


def test_parse_hex_stops_at_non_digit():
    assert parse_color("#12zz") == 0x12
    assert parse_color("#") == 0


def test_parse_name_with_suffix():
    assert parse_color("ghost", "white") == lookup_color("ghost white")


def test_parse_name_without_suffix():
    assert parse_color("Blue") == lookup_color("blue")


def test_parse_unknown_gives_zero():
    assert parse_color("no such colour") == 0


def test_parse_none():
    assert parse_color("None") == -1


def test_parse_long_name_is_truncated():
    assert parse_color("a" * 70, "b") == 0
    assert parse_color("red", "x" * 100) == 0