"""
Attribute access for devices of the Linux LED class.

Every LED is a directory (normally /sys/class/leds/<name>) holding one
file per attribute. Values are read whole and stripped, and written whole
with the previous content truncated. Files are never created: writing an
attribute the driver doesn't expose fails with FileNotFoundError.

See https://www.kernel.org/doc/Documentation/ABI/testing/sysfs-class-led
"""
from __future__ import annotations

import logging
import os
from typing import List, Optional, Tuple, Union

from .errors import InvalidDevicePath

log = logging.getLogger(__name__)

PathLike = Union[str, 'os.PathLike[str]']

SYSFS_LED_CLASS = '/sys/class/leds'

# Attribute names
ATTR_BRIGHTNESS = 'brightness'
ATTR_MAX_BRIGHTNESS = 'max_brightness'
ATTR_TRIGGER = 'trigger'
ATTR_DELAY_ON = 'delay_on'
ATTR_DELAY_OFF = 'delay_off'
ATTR_INVERT = 'invert'

REQUIRED_ATTRIBUTES = (ATTR_BRIGHTNESS, ATTR_MAX_BRIGHTNESS, ATTR_TRIGGER)


def read_attribute(device_path: PathLike, name: str) -> str:
    """Read one attribute and return its stripped text."""
    path = os.path.join(device_path, name)
    with open(path, 'r', encoding='utf-8') as f:
        return f.read().strip()


def write_attribute(device_path: PathLike, name: str, value: str) -> None:
    """Overwrite one attribute with value."""
    path = os.path.join(device_path, name)
    log.debug("write %s = %r", path, value)
    fd = os.open(path, os.O_WRONLY | os.O_TRUNC)
    with os.fdopen(fd, 'w', encoding='utf-8') as f:
        f.write(value)


def has_device_files(device_path: PathLike) -> bool:
    """True if all required attributes exist as regular files."""
    return all(os.path.isfile(os.path.join(device_path, name))
               for name in REQUIRED_ATTRIBUTES)


def require_device_files(device_path: PathLike) -> None:
    """Raise InvalidDevicePath unless device_path looks like an LED device."""
    if not has_device_files(device_path):
        raise InvalidDevicePath(os.fspath(device_path))


def list_leds(root: Optional[PathLike] = None) -> List[str]:
    """List LED device names under root, sorted. Missing root gives []."""
    if root is None:
        from .conf import get_led_root
        root = get_led_root()
    if not os.path.isdir(root):
        return []
    return [name for name in sorted(os.listdir(root))
            if has_device_files(os.path.join(root, name))]


def parse_triggers(text: str) -> Tuple[List[str], Optional[str]]:
    """Split a trigger attribute into (available, active).

    The kernel lists every trigger separated by spaces and brackets the
    active one: 'none [timer] heartbeat' -> (['none', 'timer', 'heartbeat'], 'timer').
    """
    available = []
    active = None
    for token in text.split():
        if token.startswith('[') and token.endswith(']'):
            token = token[1:-1]
            active = token
        available.append(token)
    return available, active
