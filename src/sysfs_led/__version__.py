"""sysfs-led version information."""

__version__ = "0.3.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 0.1.0 - Initial release: SysfsLed brightness, SysfsRgbLed color, HSV/HSL
#         conversion, none/timer/heartbeat/cpu triggers
# 0.2.0 - Brightness.parse, Color.from_hex, trigger introspection
#         (available_triggers/current_trigger), EINVAL -> UnsupportedTrigger
# 0.3.0 - sysfs-led CLI (list, brightness, color, trigger, demo, sweep),
#         conf.py (XDG config, SYSFS_LED_ROOT), opt-in per-channel rescale
#         for SysfsRgbLed
