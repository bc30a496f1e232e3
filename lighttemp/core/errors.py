"""Typed failures raised by the lighttemp core.

The core never returns NaN or infinity for a colour it cannot place; it
raises one of these instead. The CLI turns them into an exit status.
"""


class LightTempError(Exception):
    """Base class for every lighttemp failure."""


class HexDecodeError(LightTempError, ValueError):
    """A hex colour string could not be decoded."""


class InvalidLength(HexDecodeError):
    def __init__(self, value: str, length: int):
        super().__init__(f'Hex colour {value!r} must have 6 digits, got {length}')
        self.value = value
        self.length = length


class InvalidDigit(HexDecodeError):
    def __init__(self, value: str, char: str, position: int):
        super().__init__(f'Hex colour {value!r} has invalid digit {char!r} at position {position}')
        self.value = value
        self.char = char
        self.position = position


class DegenerateColourError(LightTempError, ArithmeticError):
    """The colour maps to an undefined point in the temperature formula."""


class DegenerateChromaticity(DegenerateColourError):
    """X + Y + Z is zero, so the chromaticity (x, y) is undefined."""


class DegenerateMcCamyDenominator(DegenerateColourError):
    """y equals McCamy's epicentre 0.1858, so n is undefined."""


class EmptyImage(LightTempError, ValueError):
    """An image (or crop) has no pixels to average."""


class UnreadableImage(LightTempError, OSError):
    """A photo or RAW file exists but cannot be decoded."""
