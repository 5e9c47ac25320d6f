"""Parsing of integer and binary-suffixed size strings."""
import re

from ..errors import FormatError

INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1
LONG_MIN = -(2 ** 63)
LONG_MAX = 2 ** 63 - 1

# Binary prefixes, each one a further factor of 1024
SIZE_PREFIXES = {
    "k": 1024,
    "m": 1024 ** 2,
    "g": 1024 ** 3,
    "t": 1024 ** 4,
    "p": 1024 ** 5,
    "e": 1024 ** 6,
}

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _to_int(value: str, low: int, high: int, original: str) -> int:
    if not _INTEGER.fullmatch(value):
        raise FormatError(f"Invalid number: '{original}'")
    number = int(value)
    if not low <= number <= high:
        raise FormatError(f"Number out of range: '{original}'")
    return number


def parse_int(value: str) -> int:
    """Parse a signed 32-bit decimal integer.

    Only an optional sign followed by ASCII digits is accepted, so
    ``" 4"``, ``"4.0"`` and ``"1_000"`` are all rejected.

    Raises:
        FormatError: If the value is not a decimal integer or overflows
    """
    return _to_int(value, INT_MIN, INT_MAX, value)


def parse_suffixed(value: str) -> int:
    """Parse a size string with an optional binary suffix to a byte count.

    Supports: k, m, g, t, p, e (case-insensitive)

    Examples:
        >>> parse_suffixed("2g")
        2147483648
        >>> parse_suffixed("512M")
        536870912
        >>> parse_suffixed("100")
        100
        >>> parse_suffixed("-1")
        -1

    Raises:
        FormatError: On an empty value, an unknown suffix, a non-integer
            quantity or a result outside the signed 64-bit range
    """
    text = value.strip()
    if not text:
        raise FormatError(f"Invalid size: '{value}'")

    suffix = text[-1]
    if suffix.isdigit():
        return _to_int(text, LONG_MIN, LONG_MAX, value)

    multiplier = SIZE_PREFIXES.get(suffix.lower())
    if multiplier is None:
        raise FormatError(
            f"Invalid size prefix '{suffix}' in '{value}'. "
            f"Allowed prefixes are {', '.join(SIZE_PREFIXES)} (case insensitive)"
        )
    number = _to_int(text[:-1], LONG_MIN // multiplier, LONG_MAX // multiplier, value)
    return number * multiplier
