"""Hex colour strings to and from RGBColor.

Accepts exactly six hex digits, case-insensitive, with an optional leading
'#'. Unlike a lenient parser this never guesses: short forms such as '#fff'
and stray characters are rejected with a typed error.
"""

from lighttemp.core.errors import InvalidDigit, InvalidLength
from lighttemp.core.types import RGBColor

HEX_DIGITS = frozenset('0123456789abcdefABCDEF')


def _pair_value(pair: str) -> int:
    """Decode two already-validated hex digits.

    '0'..'9' sit at codes 48..57 and 'A'..'F' at 65..70, so subtracting 48
    and then a further 7 for letters maps both ranges onto 0..15.
    """
    total = 0
    for char in pair.upper():
        code = ord(char)
        total = total * 16 + (code - 48)
        if code >= 65:
            total -= 7
    return total


def decode(value: str) -> RGBColor:
    """Parse '#rrggbb' or 'rrggbb' into an RGBColor."""
    digits = value[1:] if value.startswith('#') else value
    if len(digits) != 6:
        raise InvalidLength(value, len(digits))
    for position, char in enumerate(digits):
        if char not in HEX_DIGITS:
            raise InvalidDigit(value, char, position)
    return RGBColor(
        r=_pair_value(digits[0:2]),
        g=_pair_value(digits[2:4]),
        b=_pair_value(digits[4:6]),
    )


def encode(color: RGBColor) -> str:
    """Format an RGBColor as lowercase '#rrggbb'."""
    return color.hex
