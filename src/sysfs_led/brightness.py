"""
LED brightness specifications.

A Brightness is always resolved against a hardware-reported maximum,
which is usually 255 but not always (some drivers report 1, 100 or
4095). Prefer ``Brightness.percent()`` over ``Brightness.absolute()``
unless the maximum of the target device is known.

The kernel defines LED brightness as an enum, so arithmetic here is
done on unsigned 32-bit values that saturate instead of overflowing.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

U32_MAX = 0xFFFFFFFF


class BrightnessKind(Enum):
    FULL = "full"
    OFF = "off"
    PERCENT = "percent"
    ABSOLUTE = "absolute"


@dataclass(frozen=True)
class Brightness:
    """Output brightness of an LED.

    Build instances with the classmethods (``full``, ``off``, ``percent``,
    ``absolute``) or the module constants ``FULL`` and ``OFF``. Percent
    and absolute values are not clamped here; resolution clamps them.
    """
    kind: BrightnessKind
    value: int = 0

    def __post_init__(self):
        if not isinstance(self.kind, BrightnessKind):
            raise TypeError(f"kind must be a BrightnessKind, got {self.kind!r}")
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError(f"brightness value must be an int, got {type(self.value).__name__}")
        if self.value < 0:
            raise ValueError(f"brightness value must be non-negative, got {self.value}")
        if self.kind in (BrightnessKind.FULL, BrightnessKind.OFF) and self.value:
            raise ValueError(f"{self.kind.value} brightness takes no value")

    @classmethod
    def full(cls) -> Brightness:
        return cls(BrightnessKind.FULL)

    @classmethod
    def off(cls) -> Brightness:
        return cls(BrightnessKind.OFF)

    @classmethod
    def percent(cls, p: int) -> Brightness:
        return cls(BrightnessKind.PERCENT, p)

    @classmethod
    def absolute(cls, a: int) -> Brightness:
        return cls(BrightnessKind.ABSOLUTE, a)

    @classmethod
    def parse(cls, text: str) -> Brightness:
        """Parse 'full', 'off', 'N%' or 'N'."""
        token = text.strip().lower()
        if token in ('full', 'on', 'max'):
            return cls.full()
        if token == 'off':
            return cls.off()
        is_percent = token.endswith('%')
        number = token[:-1] if is_percent else token
        # plain decimal only: int() would also take signs and underscores
        if not number.isdigit() or not number.isascii():
            raise ValueError(f"invalid brightness: {text!r}")
        if is_percent:
            return cls.percent(int(number))
        return cls.absolute(int(number))

    def to_absolute(self, max_brightness: int) -> int:
        return resolve_absolute(self, max_brightness)

    def to_percent(self, max_brightness: int) -> int:
        return resolve_percent(self, max_brightness)

    def __str__(self) -> str:
        if self.kind is BrightnessKind.PERCENT:
            return f"{self.value}%"
        if self.kind is BrightnessKind.ABSOLUTE:
            return str(self.value)
        return self.kind.value


FULL = Brightness.full()
OFF = Brightness.off()


def _sat_mul_u32(a: int, b: int) -> int:
    return min(a * b, U32_MAX)


def resolve_absolute(brightness: Brightness, max_brightness: int) -> int:
    """Resolve to a raw hardware value in 0..max_brightness."""
    kind = brightness.kind
    if kind is BrightnessKind.FULL:
        return max_brightness
    if kind is BrightnessKind.OFF:
        return 0
    if kind is BrightnessKind.PERCENT:
        return _sat_mul_u32(max_brightness, min(brightness.value, 100)) // 100
    return min(max_brightness, brightness.value)


def resolve_percent(brightness: Brightness, max_brightness: int) -> int:
    """Resolve to a percentage of max_brightness.

    Note: FULL resolves to ``max_brightness`` rather than 100. Callers
    that need 100 for FULL must special-case it.

    Raises:
        ValueError: If max_brightness is 0.
    """
    if max_brightness == 0:
        raise ValueError("max_brightness must be non-zero to resolve a percentage")
    kind = brightness.kind
    if kind is BrightnessKind.FULL:
        return max_brightness
    if kind is BrightnessKind.OFF:
        return 0
    if kind is BrightnessKind.PERCENT:
        return min(brightness.value, 100)
    return _sat_mul_u32(min(brightness.value, max_brightness), 100) // max_brightness
