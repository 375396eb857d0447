"""Settings and config persistence for sysfs-led.

Config is stored at ~/.config/sysfs-led/config.json (XDG-compliant).

Usage:
    from sysfs_led.conf import get_led_root, get_rgb_channels

    get_led_root()          # '/sys/class/leds' unless overridden
    get_rgb_channels()      # ('red', 'green', 'blue') or None

The LED root resolves in order: SYSFS_LED_ROOT environment variable,
'led_root' config key, then the kernel default.
"""
from __future__ import annotations

import json
import logging
import os
from typing import Optional, Tuple

from .sysfs import SYSFS_LED_CLASS

log = logging.getLogger(__name__)

# =========================================================================
# Config file location (XDG-compliant)
# =========================================================================

_XDG_CONFIG = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
CONFIG_DIR = os.path.join(_XDG_CONFIG, 'sysfs-led')
CONFIG_PATH = os.path.join(CONFIG_DIR, 'config.json')

ENV_LED_ROOT = 'SYSFS_LED_ROOT'


# =========================================================================
# Low-level config persistence
# =========================================================================

def load_config() -> dict:
    """Load user config from disk. Returns empty dict on missing/corrupt file."""
    try:
        with open(CONFIG_PATH, 'r') as f:
            config = json.load(f)
    except FileNotFoundError:
        return {}
    except (json.JSONDecodeError, OSError) as e:
        log.warning("Ignoring unreadable config %s: %s", CONFIG_PATH, e)
        return {}
    if not isinstance(config, dict):
        log.warning("Ignoring config %s: top level is not an object", CONFIG_PATH)
        return {}
    return config


def save_config(config: dict):
    """Save user config to disk."""
    os.makedirs(CONFIG_DIR, exist_ok=True)
    with open(CONFIG_PATH, 'w') as f:
        json.dump(config, f, indent=2)


# =========================================================================
# LED root
# =========================================================================

def get_led_root() -> str:
    """Directory under which LED names resolve."""
    env_root = os.environ.get(ENV_LED_ROOT)
    if env_root:
        return env_root
    return load_config().get('led_root') or SYSFS_LED_CLASS


def save_led_root(root: Optional[str]):
    """Persist the LED root. None restores the kernel default."""
    config = load_config()
    if root:
        config['led_root'] = root
    else:
        config.pop('led_root', None)
    save_config(config)


# =========================================================================
# RGB channel persistence (CLI color commands)
# =========================================================================

def get_rgb_channels() -> Optional[Tuple[str, str, str]]:
    """Saved (red, green, blue) LED names, or None if unset."""
    channels = load_config().get('rgb_channels')
    if isinstance(channels, list) and len(channels) == 3:
        return (str(channels[0]), str(channels[1]), str(channels[2]))
    return None


def save_rgb_channels(red: str, green: str, blue: str):
    """Persist the LED names that make up the RGB LED."""
    config = load_config()
    config['rgb_channels'] = [red, green, blue]
    save_config(config)
