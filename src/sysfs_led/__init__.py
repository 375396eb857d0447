"""
sysfs-led - LED control for the Linux sysfs LED class

Brightness control for single LEDs, RGB color from three single-color
LEDs, and kernel blink/activity triggers.

Usage:
    # As a library
    from sysfs_led import Brightness, SysfsLed, SysfsRgbLed, triggers
    from sysfs_led.colors import Color

    led = SysfsLed('input3::capslock')
    led.set_brightness(Brightness.percent(50))
    triggers.timer(led, 250, 750)

    rgb = SysfsRgbLed('redLed', 'grnLed', 'bluLed')
    rgb.set_color(Color.from_hsv(172, 255, 255))

    # Command line
    sysfs-led list
    sysfs-led brightness input3::capslock 50%
    sysfs-led color ff8000 --leds redLed grnLed bluLed
"""

from sysfs_led.__version__ import __version__

from sysfs_led.brightness import FULL, OFF, Brightness, BrightnessKind
from sysfs_led.colors import Color
from sysfs_led.errors import (
    AttributeParseError,
    InvalidDevicePath,
    LedError,
    UnsupportedTrigger,
)
from sysfs_led.led import Led, RgbLed, SysfsLed, SysfsRgbLed
from sysfs_led.sysfs import SYSFS_LED_CLASS, list_leds
from sysfs_led import triggers

__all__ = [
    # Version
    "__version__",
    # Brightness
    "Brightness",
    "BrightnessKind",
    "FULL",
    "OFF",
    # Color
    "Color",
    # Devices
    "Led",
    "RgbLed",
    "SysfsLed",
    "SysfsRgbLed",
    "SYSFS_LED_CLASS",
    "list_leds",
    "triggers",
    # Errors
    "LedError",
    "InvalidDevicePath",
    "UnsupportedTrigger",
    "AttributeParseError",
]
