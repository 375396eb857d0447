"""Exceptions raised by sysfs_led.

I/O failures are not wrapped: reads and writes against sysfs raise the
builtin ``OSError`` (or a subclass) unchanged, so callers can inspect
``errno`` directly.
"""
from __future__ import annotations


class LedError(Exception):
    """Base class for errors raised by this package."""


class InvalidDevicePath(LedError):
    """Device directory is missing one of the required LED class attributes."""

    def __init__(self, path: str):
        self.path = str(path)
        super().__init__(f"invalid device path: '{self.path}'")


class UnsupportedTrigger(LedError):
    """Driver rejected a trigger (kernel trigger module not loaded?)."""

    def __init__(self, trigger: str):
        self.trigger = trigger
        super().__init__(f"trigger unsupported: '{trigger}'")


class AttributeParseError(LedError, ValueError):
    """A numeric attribute did not hold a non-negative decimal integer."""

    def __init__(self, attribute: str, value: str):
        self.attribute = attribute
        self.value = value
        super().__init__(f"cannot parse {attribute}: {value!r}")
