"""Tests for colors.py — HSV/HSL conversion, named colors, hex parsing."""

import pytest

from sysfs_led.colors import (
    BLACK,
    BLUE,
    CYAN,
    GREEN,
    MAGENTA,
    NAMED_COLORS,
    RED,
    WHITE,
    YELLOW,
    Color,
)

HSV_VECTORS = [
    ((0, 0, 0), (0, 0, 0)),
    ((0, 0, 255), (255, 255, 255)),
    ((0, 255, 255), (255, 0, 0)),
    ((86, 255, 255), (0, 255, 0)),
    ((172, 255, 255), (0, 0, 255)),
    ((43, 255, 255), (254, 255, 0)),
    ((129, 255, 255), (0, 254, 255)),
    ((215, 255, 255), (255, 0, 254)),
    ((0, 0, 192), (192, 192, 192)),
    ((0, 0, 128), (128, 128, 128)),
    ((0, 255, 128), (128, 0, 0)),
    ((43, 255, 128), (127, 128, 0)),
    ((86, 255, 128), (0, 128, 0)),
    ((215, 255, 128), (128, 0, 127)),
    ((128, 255, 128), (0, 128, 126)),
    ((172, 255, 128), (0, 0, 128)),
]

HSL_VECTORS = [
    ((0, 0, 0), (0, 0, 0)),
    ((0, 0, 255), (255, 255, 255)),
    ((255, 0, 255), (255, 255, 255)),
    ((255, 255, 255), (255, 255, 255)),
    ((0, 0, 127), (127, 127, 127)),
    ((0, 255, 127), (255, 0, 0)),
    ((21, 255, 127), (255, 125, 0)),
    ((43, 255, 127), (254, 255, 0)),
    ((64, 255, 127), (128, 255, 0)),
    ((128, 255, 127), (0, 255, 251)),
    ((193, 255, 127), (125, 0, 255)),
    ((21, 127, 127), (190, 126, 64)),
    ((43, 127, 127), (189, 190, 64)),
    ((64, 127, 127), (127, 190, 64)),
    ((128, 127, 127), (64, 190, 188)),
    ((193, 127, 127), (126, 64, 190)),
]


class TestColor:
    """Color value type."""

    def test_fields(self):
        c = Color(1, 2, 3)
        assert (c.red, c.green, c.blue) == (1, 2, 3)

    def test_from_rgb(self):
        assert Color.from_rgb(10, 20, 30) == Color(10, 20, 30)

    def test_unpacks_like_tuple(self):
        r, g, b = Color(7, 8, 9)
        assert (r, g, b) == (7, 8, 9)

    def test_structural_equality_and_hash(self):
        assert Color(1, 2, 3) == Color(1, 2, 3)
        assert len({Color(1, 2, 3), Color(1, 2, 3), Color(3, 2, 1)}) == 2

    def test_immutable(self):
        with pytest.raises(AttributeError):
            RED.red = 0

    @pytest.mark.parametrize("channels", [(256, 0, 0), (0, -1, 0), (0, 0, 1000)])
    def test_out_of_range_rejected(self, channels):
        with pytest.raises(ValueError):
            Color(*channels)

    def test_non_int_rejected(self):
        with pytest.raises(TypeError):
            Color(1.5, 0, 0)

    def test_str_is_hex(self):
        assert str(Color(255, 128, 0)) == "#ff8000"


class TestNamedColors:

    @pytest.mark.parametrize("color,expected", [
        (BLACK, (0, 0, 0)),
        (WHITE, (255, 255, 255)),
        (RED, (255, 0, 0)),
        (GREEN, (0, 255, 0)),
        (BLUE, (0, 0, 255)),
        (YELLOW, (255, 255, 0)),
        (CYAN, (0, 255, 255)),
        (MAGENTA, (255, 0, 255)),
    ])
    def test_constant_values(self, color, expected):
        assert tuple(color) == expected

    def test_lookup_table_has_all_eight(self):
        assert len(NAMED_COLORS) == 8
        assert NAMED_COLORS["cyan"] is CYAN


class TestFromHsv:

    @pytest.mark.parametrize("hsv,rgb", HSV_VECTORS)
    def test_reference_vectors(self, hsv, rgb):
        assert Color.from_hsv(*hsv) == Color(*rgb)

    @pytest.mark.parametrize("hue", [0, 42, 43, 100, 200, 255])
    @pytest.mark.parametrize("value", [0, 1, 127, 255])
    def test_zero_saturation_is_grey(self, hue, value):
        assert Color.from_hsv(hue, 0, value) == Color(value, value, value)

    def test_last_sector_uses_default_ordering(self):
        # hue 255 -> region 5, fpart 240
        assert Color.from_hsv(255, 255, 255) == Color(255, 0, 15)

    def test_sector_boundary_banding(self):
        # 42 is the last hue of sector 0, 43 the first of sector 1
        assert Color.from_hsv(42, 255, 255) == Color(255, 252, 0)
        assert Color.from_hsv(43, 255, 255) == Color(254, 255, 0)

    def test_out_of_range_input(self):
        with pytest.raises(ValueError):
            Color.from_hsv(256, 0, 0)


class TestFromHsl:

    @pytest.mark.parametrize("hsl,rgb", HSL_VECTORS)
    def test_reference_vectors(self, hsl, rgb):
        assert Color.from_hsl(*hsl) == Color(*rgb)

    @pytest.mark.parametrize("hue", [0, 43, 128, 255])
    @pytest.mark.parametrize("lightness", [0, 64, 200, 255])
    def test_zero_saturation_is_grey(self, hue, lightness):
        assert Color.from_hsl(hue, 0, lightness) == Color(lightness, lightness, lightness)

    def test_saturation_threshold_is_128(self):
        # 127 uses s*l, 128 uses s*(255-l)
        assert Color.from_hsl(0, 127, 255) == Color(255, 129, 129)
        assert Color.from_hsl(0, 128, 255) == Color(255, 255, 255)

    def test_zero_lightness_full_saturation_narrows_chroma(self):
        # chroma = 508 is narrowed to 252, m clamps at 0
        assert Color.from_hsl(0, 255, 0) == Color(252, 0, 0)

    def test_sums_saturate_instead_of_wrapping(self):
        for hue in range(256):
            for lightness in (0, 64, 127, 128, 200, 255):
                c = Color.from_hsl(hue, 255, lightness)
                assert all(0 <= ch <= 255 for ch in c)

    def test_out_of_range_input(self):
        with pytest.raises(ValueError):
            Color.from_hsl(0, 300, 0)


class TestFromHex:

    @pytest.mark.parametrize("text,expected", [
        ("ff0000", (255, 0, 0)),
        ("#00ff00", (0, 255, 0)),
        ("0000FF", (0, 0, 255)),
        (" #102030 ", (16, 32, 48)),
    ])
    def test_valid(self, text, expected):
        assert tuple(Color.from_hex(text)) == expected

    @pytest.mark.parametrize("text", ["", "fff", "#12345", "zzzzzz", "1234567"])
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            Color.from_hex(text)

    @pytest.mark.parametrize("text", ["0x1234", "+fffff", "-fffff", "ff_f00", "##ff0000", "#\uff10ff000"])
    def test_rejects_int_literal_syntax(self, text):
        with pytest.raises(ValueError):
            Color.from_hex(text)

    def test_hex_property(self):
        assert Color.from_hex("#0a0b0c").hex == "0a0b0c"
