"""
Colorspace tools for RGB LEDs.

All conversions work on 8-bit integer channels the way LED firmware does:
hue 0-255 covers the full 0-360 degree circle, saturation/value/lightness
0-255 cover 0-100%. Every division is a floor shift, so a given input
always lands on the same output. Color sweeps depend on that banding at
the hue sector boundaries, so don't replace the shifts with float math.

Usage:
    from sysfs_led.colors import Color, RED

    Color.from_rgb(255, 128, 0)
    Color.from_hsv(43, 255, 255)     # (254, 255, 0)
    Color.from_hsl(128, 255, 127)    # (0, 255, 251)
    Color.from_hex('#ff8000')
"""
from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Iterator, Tuple

# Hue range 0-255 is split into six sectors of this width
HUE_SECTOR = 43

_U8_MAX = 0xFF
_U16_MAX = 0xFFFF


def _check_u8(name: str, value: int) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= _U8_MAX:
        raise ValueError(f"{name} must be in 0-255, got {value}")
    return value


def _sat_add_u8(a: int, b: int) -> int:
    return min(a + b, _U8_MAX)


def _sat_mul_u16(a: int, b: int) -> int:
    return min(a * b, _U16_MAX)


def _hue_sector(hue: int) -> Tuple[int, int]:
    """Split hue into (region 0-5, fractional part scaled to 0-252)."""
    return hue // HUE_SECTOR, (hue % HUE_SECTOR) * 6


@dataclass(frozen=True)
class Color:
    """Immutable RGB color, one 8-bit value per channel."""
    red: int
    green: int
    blue: int

    def __post_init__(self):
        _check_u8('red', self.red)
        _check_u8('green', self.green)
        _check_u8('blue', self.blue)

    def __iter__(self) -> Iterator[int]:
        return iter((self.red, self.green, self.blue))

    # =====================================================================
    # Constructors
    # =====================================================================

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int) -> Color:
        return cls(red, green, blue)

    @classmethod
    def from_hsv(cls, hue: int, saturation: int, value: int) -> Color:
        """Create a Color from hue, saturation and value components.

        Hue is the angle on a circle, 0 = 0 degrees and 255 = 360 degrees.
        Saturation and value are percents, 0 = 0% and 255 = 100%.
        """
        _check_u8('hue', hue)
        _check_u8('saturation', saturation)
        _check_u8('value', value)

        if saturation == 0:
            # greyscale
            return cls(value, value, value)

        region, f = _hue_sector(hue)
        v, s = value, saturation

        p = (v * (255 - s)) >> 8
        q = (v * (255 - ((s * f) >> 8))) >> 8
        t = (v * (255 - ((s * (255 - f)) >> 8))) >> 8

        if region == 0:
            return cls(v, t, p)
        if region == 1:
            return cls(q, v, p)
        if region == 2:
            return cls(p, v, t)
        if region == 3:
            return cls(p, q, v)
        if region == 4:
            return cls(t, p, v)
        return cls(v, p, q)

    @classmethod
    def from_hsl(cls, hue: int, saturation: int, lightness: int) -> Color:
        """Create a Color from hue, saturation and lightness components.

        Same scales as from_hsv(). Chroma is approximated in fixed point
        with a branch at saturation 128, and intermediate sums saturate at
        255 instead of wrapping.
        """
        _check_u8('hue', hue)
        _check_u8('saturation', saturation)
        _check_u8('lightness', lightness)

        if saturation == 0:
            # greyscale
            return cls(lightness, lightness, lightness)

        region, f = _hue_sector(hue)
        s, l = saturation, lightness

        if s < 128:
            chroma = _sat_mul_u16(s, l) >> 7
        else:
            chroma = _sat_mul_u16(s, 255 - l) >> 7

        # chroma can reach 508; narrowing keeps only the low byte
        m = max(l - (chroma >> 1), 0) & _U8_MAX
        c = _sat_add_u8(chroma & _U8_MAX, m)
        x1 = _sat_add_u8((_sat_mul_u16(chroma, f) >> 8) & _U8_MAX, m)
        x2 = _sat_add_u8((_sat_mul_u16(chroma, 255 - f) >> 8) & _U8_MAX, m)

        if region == 0:
            return cls(c, x1, m)
        if region == 1:
            return cls(x2, c, m)
        if region == 2:
            return cls(m, c, x1)
        if region == 3:
            return cls(m, x2, c)
        if region == 4:
            return cls(x1, m, c)
        return cls(c, m, x2)

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Parse 'rrggbb' or '#rrggbb'."""
        digits = text.strip()
        if digits.startswith('#'):
            digits = digits[1:]
        if len(digits) != 6:
            raise ValueError(f"expected 6 hex digits, got {text!r}")
        # int(x, 16) alone would also take signs, underscores and 0x
        if not all(ch in string.hexdigits for ch in digits):
            raise ValueError(f"invalid hex color: {text!r}")
        value = int(digits, 16)
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    # =====================================================================
    # Views
    # =====================================================================

    @property
    def hex(self) -> str:
        return f"{self.red:02x}{self.green:02x}{self.blue:02x}"

    def __str__(self) -> str:
        return f"#{self.hex}"


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)
YELLOW = Color(255, 255, 0)
CYAN = Color(0, 255, 255)
MAGENTA = Color(255, 0, 255)

NAMED_COLORS = {
    'black': BLACK,
    'white': WHITE,
    'red': RED,
    'green': GREEN,
    'blue': BLUE,
    'yellow': YELLOW,
    'cyan': CYAN,
    'magenta': MAGENTA,
}
