"""
Kernel LED triggers.

A trigger hands control of an LED to the kernel: blink on a timer, beat
with system load, or flash on activity of one CPU. Each trigger is a
function dispatching on the device type, so single-channel and RGB LEDs
can support different sets:

    SysfsLed     none, timer, heartbeat, cpu
    SysfsRgbLed  none

The trigger's extra attributes (delay_on, invert, ...) only appear after
the trigger is selected, so the trigger itself is always written first.
"""
from __future__ import annotations

import errno
import logging
from functools import singledispatch
from typing import List, Optional

from .errors import UnsupportedTrigger
from .led import SysfsLed, SysfsRgbLed
from .sysfs import (
    ATTR_DELAY_OFF,
    ATTR_DELAY_ON,
    ATTR_INVERT,
    ATTR_TRIGGER,
    parse_triggers,
)

log = logging.getLogger(__name__)

TRIGGER_NONE = 'none'
TRIGGER_TIMER = 'timer'
TRIGGER_HEARTBEAT = 'heartbeat'
TRIGGER_CPU = 'cpu'


def _select_trigger(led: SysfsLed, trigger: str) -> None:
    """Write the trigger attribute; EINVAL means the driver doesn't know it."""
    try:
        led.write_attribute(ATTR_TRIGGER, trigger)
    except OSError as e:
        if e.errno == errno.EINVAL:
            raise UnsupportedTrigger(trigger) from e
        raise
    log.debug("%s: trigger %s", led.name, trigger)


def _unsupported(led, trigger: str):
    raise TypeError(f"{type(led).__name__} does not support the {trigger} trigger")


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


# =========================================================================
# none
# =========================================================================

@singledispatch
def none(led) -> None:
    """Disable automatic triggering."""
    _unsupported(led, TRIGGER_NONE)


@none.register
def _(led: SysfsLed) -> None:
    _select_trigger(led, TRIGGER_NONE)


@none.register
def _(led: SysfsRgbLed) -> None:
    # First failure stops the remaining channels
    for channel in led.channels:
        _select_trigger(channel, TRIGGER_NONE)


# =========================================================================
# timer
# =========================================================================

@singledispatch
def timer(led, delay_on: int, delay_off: int) -> None:
    """Blink: delay_on ms on, delay_off ms off."""
    _unsupported(led, TRIGGER_TIMER)


@timer.register
def _(led: SysfsLed, delay_on: int, delay_off: int) -> None:
    _check_non_negative('delay_on', delay_on)
    _check_non_negative('delay_off', delay_off)
    _select_trigger(led, TRIGGER_TIMER)
    led.write_attribute(ATTR_DELAY_ON, str(delay_on))
    led.write_attribute(ATTR_DELAY_OFF, str(delay_off))


# =========================================================================
# heartbeat
# =========================================================================

@singledispatch
def heartbeat(led, invert: bool = False) -> None:
    """Double-pulse at a rate that follows the load average."""
    _unsupported(led, TRIGGER_HEARTBEAT)


@heartbeat.register
def _(led: SysfsLed, invert: bool = False) -> None:
    _select_trigger(led, TRIGGER_HEARTBEAT)
    led.write_attribute(ATTR_INVERT, '1' if invert else '0')


# =========================================================================
# cpu
# =========================================================================

def cpu_trigger_name(index: int) -> str:
    """'cpu0', 'cpu1', ..."""
    _check_non_negative('cpu index', index)
    return f"{TRIGGER_CPU}{index}"


@singledispatch
def cpu(led, index: int) -> None:
    """Flash on activity of CPU number index."""
    _unsupported(led, TRIGGER_CPU)


@cpu.register
def _(led: SysfsLed, index: int) -> None:
    # ledtrig-cpu registers every possible CPU, online or not; the
    # driver rejects unknown indexes with EINVAL
    _select_trigger(led, cpu_trigger_name(index))


# =========================================================================
# Introspection
# =========================================================================

def available_triggers(led: SysfsLed) -> List[str]:
    """Triggers the kernel offers for this LED."""
    return parse_triggers(led.read_attribute(ATTR_TRIGGER))[0]


def current_trigger(led: SysfsLed) -> Optional[str]:
    """Active trigger, or None if the attribute doesn't mark one."""
    return parse_triggers(led.read_attribute(ATTR_TRIGGER))[1]
