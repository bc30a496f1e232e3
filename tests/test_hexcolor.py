"""Tests for lighttemp.core.hexcolor — hex string decoding and encoding."""

import pytest
from lighttemp.core.errors import HexDecodeError, InvalidDigit, InvalidLength
from lighttemp.core.hexcolor import decode, encode
from lighttemp.core.types import RGBColor


class TestDecode:
    def test_red_with_hash(self):
        assert decode('#FF0000') == RGBColor(255, 0, 0)

    def test_green_without_hash(self):
        assert decode('00ff00') == RGBColor(0, 255, 0)

    def test_blue(self):
        assert decode('#0000ff') == RGBColor(0, 0, 255)

    def test_black(self):
        assert decode('#000000') == RGBColor(0, 0, 0)

    def test_white(self):
        assert decode('FFFFFF') == RGBColor(255, 255, 255)

    def test_mixed_digits(self):
        assert decode('#2563eb') == RGBColor(37, 99, 235)

    def test_average_colour_sample(self):
        assert decode('996633') == RGBColor(153, 102, 51)

    def test_case_insensitive(self):
        assert decode('ab12CD') == decode('AB12cd')
        assert decode('ab12CD') == RGBColor(0xAB, 0x12, 0xCD)

    def test_every_digit(self):
        # 0..F across the string exercises both code ranges of the arithmetic
        assert decode('0123ab') == RGBColor(0x01, 0x23, 0xAB)
        assert decode('456789') == RGBColor(0x45, 0x67, 0x89)
        assert decode('cdefCD') == RGBColor(0xCD, 0xEF, 0xCD)


class TestDecodeInvalidLength:
    def test_short_hex(self):
        with pytest.raises(InvalidLength):
            decode('#FFF')

    def test_too_long(self):
        with pytest.raises(InvalidLength):
            decode('#FF00000')

    def test_empty(self):
        with pytest.raises(InvalidLength):
            decode('')

    def test_only_hash(self):
        with pytest.raises(InvalidLength):
            decode('#')

    def test_only_one_hash_stripped(self):
        with pytest.raises(InvalidLength):
            decode('##FF0000')

    def test_reports_length(self):
        with pytest.raises(InvalidLength) as info:
            decode('#FF00000')
        assert info.value.length == 7


class TestDecodeInvalidDigit:
    def test_letters_beyond_f(self):
        with pytest.raises(InvalidDigit):
            decode('GG0000')

    def test_reports_char_and_position(self):
        with pytest.raises(InvalidDigit) as info:
            decode('#00z000')
        assert info.value.char == 'z'
        assert info.value.position == 2

    def test_punctuation(self):
        with pytest.raises(InvalidDigit):
            decode('12:456')

    def test_whitespace(self):
        with pytest.raises(InvalidDigit):
            decode(' 12345')

    def test_hash_in_middle(self):
        with pytest.raises(InvalidDigit):
            decode('12#456')

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            decode('GG0000')
        with pytest.raises(HexDecodeError):
            decode('#FFF')


class TestEncode:
    def test_lowercase_with_hash(self):
        assert encode(RGBColor(171, 18, 205)) == '#ab12cd'

    def test_zero_padded(self):
        assert encode(RGBColor(1, 2, 3)) == '#010203'

    def test_decode_accepts_encoded(self):
        colour = RGBColor(153, 102, 51)
        assert decode(encode(colour)) == colour


class TestRGBColor:
    def test_hex_property(self):
        assert RGBColor(255, 255, 255).hex == '#ffffff'

    def test_as_tuple(self):
        assert RGBColor(1, 2, 3).as_tuple() == (1, 2, 3)

    def test_rejects_out_of_range(self):
        with pytest.raises(ValueError):
            RGBColor(256, 0, 0)
        with pytest.raises(ValueError):
            RGBColor(0, -1, 0)

    def test_rejects_float(self):
        with pytest.raises(ValueError):
            RGBColor(1.5, 0, 0)

    def test_is_hashable_value(self):
        assert {RGBColor(1, 2, 3), RGBColor(1, 2, 3)} == {RGBColor(1, 2, 3)}
