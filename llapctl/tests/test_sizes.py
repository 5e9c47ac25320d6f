import pytest

from llapctl.errors import FormatError
from llapctl.utils import parse_int, parse_suffixed


@pytest.mark.parametrize("value,expected", [
    ("2g", 2 * 1024 ** 3),
    ("512m", 512 * 1024 ** 2),
    ("100", 100),
    ("-1", -1),
    ("1K", 1024),
    ("3t", 3 * 1024 ** 4),
    ("1p", 1024 ** 5),
    (" 16m ", 16 * 1024 ** 2),
])
def test_parse_suffixed(value, expected):
    assert parse_suffixed(value) == expected


@pytest.mark.parametrize("value", ["", "  ", "g", "1.5g", "12q", "abc", "8e", "9223372036854775808"])
def test_parse_suffixed_rejects(value):
    with pytest.raises(FormatError):
        parse_suffixed(value)


def test_parse_suffixed_limits():
    assert parse_suffixed("7e") == 7 * 1024 ** 6
    assert parse_suffixed("-8e") == -(2 ** 63)


def test_format_error_is_value_error():
    with pytest.raises(ValueError):
        parse_suffixed("lots")


def test_parse_int():
    assert parse_int("42") == 42
    assert parse_int("+7") == 7
    assert parse_int("-2147483648") == -2147483648
    for bad in ["", "1_000", "0x10", "2147483648", "4 "]:
        with pytest.raises(FormatError):
            parse_int(bad)
