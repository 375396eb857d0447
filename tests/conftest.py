"""Fake sysfs LED class directories for device tests."""
import os

import pytest


def make_led_dir(root, name, brightness="0", max_brightness="255",
                 trigger="[none] timer heartbeat cpu0 cpu1", **extra):
    """Create an LED class device directory with the given attribute values.

    Pass an attribute as None to leave its file out.
    """
    path = os.path.join(root, name)
    os.makedirs(path, exist_ok=True)
    attrs = {
        "brightness": brightness,
        "max_brightness": max_brightness,
        "trigger": trigger,
    }
    attrs.update(extra)
    for attr, value in attrs.items():
        if value is None:
            continue
        with open(os.path.join(path, attr), "w") as f:
            f.write(value)
    return path


def read_attr(path, name):
    with open(os.path.join(path, name)) as f:
        return f.read()


@pytest.fixture
def led_root(tmp_path, monkeypatch):
    """An empty LED root, also exported as SYSFS_LED_ROOT."""
    root = tmp_path / "leds"
    root.mkdir()
    monkeypatch.setenv("SYSFS_LED_ROOT", str(root))
    return str(root)


@pytest.fixture
def rgb_root(led_root):
    """LED root holding redLed/grnLed/bluLed with timer trigger files."""
    for name in ("redLed", "grnLed", "bluLed"):
        make_led_dir(led_root, name, delay_on="", delay_off="", invert="")
    return led_root
