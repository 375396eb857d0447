"""
LED devices managed by the Linux LED class driver.

``Led`` and ``RgbLed`` are the capability contracts; ``SysfsLed`` and
``SysfsRgbLed`` implement them on top of sysfs attribute files. Nothing
here is synchronized: a device object should be driven by one owner at
a time.

Usage:
    from sysfs_led import Brightness, SysfsLed, SysfsRgbLed
    from sysfs_led.colors import Color

    led = SysfsLed('input3::capslock')
    led.set_brightness(Brightness.percent(50))

    rgb = SysfsRgbLed('redLed', 'grnLed', 'bluLed')
    rgb.set_color(Color.from_hsl(128, 255, 127))
"""
from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from typing import Optional

from .brightness import OFF, U32_MAX, Brightness
from .colors import BLACK, Color
from .errors import AttributeParseError
from .sysfs import (
    ATTR_BRIGHTNESS,
    ATTR_MAX_BRIGHTNESS,
    PathLike,
    read_attribute,
    require_device_files,
    write_attribute,
)

log = logging.getLogger(__name__)


# =========================================================================
# Capability contracts
# =========================================================================

class Led(ABC):
    """An LED that can be turned on or off at some level of brightness."""

    @abstractmethod
    def brightness(self) -> Brightness:
        """Current brightness."""

    @abstractmethod
    def set_brightness(self, brightness: Brightness) -> None:
        """Apply a brightness."""


class RgbLed(Led):
    """An LED built from red, green and blue component LEDs."""

    @abstractmethod
    def color(self) -> Color:
        """Current color."""

    @abstractmethod
    def set_color(self, color: Color) -> None:
        """Apply a color."""


def _parse_uint(attribute: str, text: str) -> int:
    if not text.isdigit() or not text.isascii():
        raise AttributeParseError(attribute, text)
    value = int(text)
    if value > U32_MAX:
        raise AttributeParseError(attribute, text)
    return value


# =========================================================================
# Single-channel LED
# =========================================================================

class SysfsLed(Led):
    """Access to one LED class device directory."""

    def __init__(self, name: str, root: Optional[PathLike] = None):
        """Open the LED called name under root (default: configured LED root)."""
        if root is None:
            from .conf import get_led_root
            root = get_led_root()
        self._init_path(os.path.join(root, name))

    @classmethod
    def from_path(cls, path: PathLike) -> SysfsLed:
        """Open an LED class device at an arbitrary directory."""
        led = cls.__new__(cls)
        led._init_path(path)
        return led

    def _init_path(self, path: PathLike) -> None:
        require_device_files(path)
        self.device_path = os.fspath(path)
        log.debug("Opened LED %s", self.device_path)

    @property
    def name(self) -> str:
        return os.path.basename(os.path.normpath(self.device_path))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.device_path!r})"

    # -- attribute access (used by triggers too) --

    def read_attribute(self, name: str) -> str:
        return read_attribute(self.device_path, name)

    def write_attribute(self, name: str, value: str) -> None:
        write_attribute(self.device_path, name, value)

    def _read_uint(self, name: str) -> int:
        return _parse_uint(name, self.read_attribute(name))

    # -- Led --

    def max_brightness(self) -> int:
        """Raw max_brightness reported by the driver."""
        return self._read_uint(ATTR_MAX_BRIGHTNESS)

    def brightness(self) -> Brightness:
        return Brightness.absolute(self._read_uint(ATTR_BRIGHTNESS))

    def set_brightness(self, brightness: Brightness) -> None:
        # max_brightness can change under us; the driver owns that race
        max_brightness = self.max_brightness()
        value = brightness.to_absolute(max_brightness)
        log.debug("%s: brightness %s -> %d/%d", self.name, brightness, value, max_brightness)
        self.write_attribute(ATTR_BRIGHTNESS, str(value))


# =========================================================================
# RGB LED from three single-channel LEDs
# =========================================================================

class SysfsRgbLed(RgbLed):
    """Access to an RGB LED configured as three separate LED class devices.

    Color channel values are written as absolute brightness on each
    channel, which is only right when every channel reports
    max_brightness 255. Pass ``rescale=True`` to scale each channel onto
    its own max_brightness instead.

    Channel writes are sequential and stop at the first failure, so a
    failed set_color() can leave the LED showing a mix of old and new
    channel values. Re-apply the color to reach a known state.
    """

    def __init__(self, red: str, green: str, blue: str,
                 root: Optional[PathLike] = None, rescale: bool = False):
        self.red = SysfsLed(red, root)
        self.green = SysfsLed(green, root)
        self.blue = SysfsLed(blue, root)
        self.rescale = rescale

    @classmethod
    def from_path(cls, red: PathLike, green: PathLike, blue: PathLike,
                  rescale: bool = False) -> SysfsRgbLed:
        return cls.from_leds(SysfsLed.from_path(red),
                             SysfsLed.from_path(green),
                             SysfsLed.from_path(blue),
                             rescale=rescale)

    @classmethod
    def from_leds(cls, red: SysfsLed, green: SysfsLed, blue: SysfsLed,
                  rescale: bool = False) -> SysfsRgbLed:
        led = cls.__new__(cls)
        led.red = red
        led.green = green
        led.blue = blue
        led.rescale = rescale
        return led

    @property
    def channels(self):
        return (self.red, self.green, self.blue)

    def __repr__(self) -> str:
        names = ", ".join(repr(ch.device_path) for ch in self.channels)
        return f"{type(self).__name__}({names})"

    # Brightness of the LED as a whole isn't modeled; use the color's
    # lightness instead.
    def brightness(self) -> Brightness:
        return OFF

    def set_brightness(self, brightness: Brightness) -> None:
        return None

    def color(self) -> Color:
        # TODO: map channel brightness back onto 0-255; always BLACK for now
        for channel in self.channels:
            channel.brightness()
        return BLACK

    def set_color(self, color: Color) -> None:
        maxima = [channel.max_brightness() for channel in self.channels]
        if self.rescale:
            values = [value * max_b // 255 for value, max_b in zip(color, maxima)]
        else:
            values = list(color)
        log.debug("RGB %s -> %s (max %s)", color, values, maxima)
        for channel, value in zip(self.channels, values):
            channel.set_brightness(Brightness.absolute(value))
