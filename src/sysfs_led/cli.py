#!/usr/bin/env python3
"""
sysfs-led - Command Line Interface

Entry point for the sysfs-led package.
"""

import argparse
import logging
import time

from sysfs_led.__version__ import __version__

log = logging.getLogger(__name__)


def _setup_logging(verbose=0):
    """Configure logging from -v count."""
    if verbose >= 2:
        logging.basicConfig(level=logging.DEBUG, format='[%(levelname)s] %(name)s: %(message)s')
    elif verbose == 1:
        logging.basicConfig(level=logging.INFO, format='[%(levelname)s] %(message)s')
    else:
        logging.basicConfig(level=logging.WARNING)


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="sysfs-led",
        description="Control LEDs of the Linux sysfs LED class",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    sysfs-led list                               List LEDs
    sysfs-led brightness input3::capslock        Show brightness
    sysfs-led brightness input3::capslock 50%    Set brightness
    sysfs-led color ff8000 --leds r g b --save   Set RGB color, remember LEDs
    sysfs-led color --hsl 128 255 127            HSL color on saved RGB LED
    sysfs-led trigger led0 timer --delay-on 100  Blink
    sysfs-led sweep --lightness 32 --loop        Hue sweep
        """
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v, -vv)"
    )
    parser.add_argument(
        "--root",
        help="LED class directory (default: $SYSFS_LED_ROOT, config, /sys/class/leds)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # List command
    subparsers.add_parser("list", help="List LEDs with brightness and trigger")

    # Brightness command
    bright_parser = subparsers.add_parser("brightness", help="Show or set LED brightness")
    bright_parser.add_argument("name", help="LED name")
    bright_parser.add_argument("level", nargs="?", help="full, off, N%% or raw value N")

    # Color command
    color_parser = subparsers.add_parser("color", help="Set RGB LED color")
    color_group = color_parser.add_mutually_exclusive_group(required=True)
    color_group.add_argument("hex", nargs="?", help="Hex code (ff0000) or color name (red)")
    color_group.add_argument("--hsv", nargs=3, type=int, metavar=("H", "S", "V"),
                             help="Hue, saturation, value (0-255 each)")
    color_group.add_argument("--hsl", nargs=3, type=int, metavar=("H", "S", "L"),
                             help="Hue, saturation, lightness (0-255 each)")
    color_parser.add_argument("--leds", nargs=3, metavar=("RED", "GREEN", "BLUE"),
                              help="LED names of the red, green and blue channels")
    color_parser.add_argument("--rescale", action="store_true",
                              help="Scale channels to each LED's max_brightness")
    color_parser.add_argument("--save", action="store_true",
                              help="Remember --leds as the default RGB LED")

    # Trigger command
    trigger_parser = subparsers.add_parser("trigger", help="Set LED trigger")
    trigger_parser.add_argument("name", help="LED name")
    trigger_parser.add_argument("kind", nargs="?",
                                choices=["none", "timer", "heartbeat", "cpu"],
                                help="Trigger to apply (omit to show available)")
    trigger_parser.add_argument("--delay-on", type=int, default=500, help="Timer on time (ms)")
    trigger_parser.add_argument("--delay-off", type=int, default=500, help="Timer off time (ms)")
    trigger_parser.add_argument("--invert", action="store_true", help="Invert heartbeat")
    trigger_parser.add_argument("--cpu", type=int, default=0, help="CPU index for cpu trigger")

    # Demo command
    demo_parser = subparsers.add_parser("demo", help="Light each channel in turn")
    demo_parser.add_argument("red", help="Red LED name")
    demo_parser.add_argument("green", help="Green LED name")
    demo_parser.add_argument("blue", help="Blue LED name")
    demo_parser.add_argument("--delay", type=float, default=3.0, help="Seconds per channel")

    # Sweep command
    sweep_parser = subparsers.add_parser("sweep", help="Sweep hue across the RGB LED")
    sweep_parser.add_argument("--saturation", "-s", type=int, default=128)
    sweep_parser.add_argument("--lightness", "-l", type=int, default=32)
    sweep_parser.add_argument("--delay", type=float, default=0.02, help="Seconds per hue step")
    sweep_parser.add_argument("--leds", nargs=3, metavar=("RED", "GREEN", "BLUE"))
    sweep_parser.add_argument("--loop", action="store_true", help="Sweep until interrupted")

    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "list":
        return list_leds(root=args.root)
    elif args.command == "brightness":
        return brightness(args.name, args.level, root=args.root)
    elif args.command == "color":
        return set_color(hex_code=args.hex, hsv=args.hsv, hsl=args.hsl,
                         leds=args.leds, rescale=args.rescale,
                         save=args.save, root=args.root)
    elif args.command == "trigger":
        return trigger(args.name, args.kind, delay_on=args.delay_on,
                       delay_off=args.delay_off, invert=args.invert,
                       cpu=args.cpu, root=args.root)
    elif args.command == "demo":
        return demo(args.red, args.green, args.blue, delay=args.delay, root=args.root)
    elif args.command == "sweep":
        return sweep(saturation=args.saturation, lightness=args.lightness,
                     delay=args.delay, leds=args.leds, loop=args.loop,
                     root=args.root)

    return 0


def _resolve_rgb_leds(leds, save=False):
    """Pick RGB channel names from --leds or saved config."""
    from sysfs_led.conf import get_rgb_channels, save_rgb_channels

    if leds:
        if save:
            save_rgb_channels(*leds)
        return tuple(leds)
    channels = get_rgb_channels()
    if channels is None:
        raise ValueError("No RGB LED configured. Pass --leds RED GREEN BLUE (and --save)")
    return channels


def list_leds(root=None):
    """List LEDs with brightness/max and active trigger."""
    try:
        from sysfs_led.conf import get_led_root
        from sysfs_led.led import SysfsLed
        from sysfs_led.sysfs import list_leds as find_leds
        from sysfs_led.triggers import current_trigger

        root = root or get_led_root()
        names = find_leds(root)
        if not names:
            print(f"No LEDs found under {root}")
            return 1

        for name in names:
            led = SysfsLed(name, root)
            try:
                level = f"{led.brightness()}/{led.max_brightness()}"
                active = current_trigger(led) or "?"
            except (OSError, ValueError) as e:
                log.debug("Reading %s failed: %s", name, e)
                level, active = "?", "?"
            print(f"  {name:<32} {level:>9}  [{active}]")
        return 0
    except Exception as e:
        print(f"Error: {e}")
        return 1


def brightness(name, level=None, root=None):
    """Show or set brightness of one LED."""
    try:
        from sysfs_led.brightness import Brightness
        from sysfs_led.led import SysfsLed

        led = SysfsLed(name, root)
        max_brightness = led.max_brightness()

        if level is not None:
            led.set_brightness(Brightness.parse(level))

        current = led.brightness()
        percent = current.to_percent(max_brightness) if max_brightness else 0
        print(f"{led.name}: {current}/{max_brightness} ({percent}%)")
        return 0
    except Exception as e:
        print(f"Error: {e}")
        return 1


def parse_color(hex_code=None, hsv=None, hsl=None):
    """Build a Color from exactly one of hex/name, HSV or HSL."""
    from sysfs_led.colors import NAMED_COLORS, Color

    if hsv:
        return Color.from_hsv(*hsv)
    if hsl:
        return Color.from_hsl(*hsl)
    if hex_code:
        named = NAMED_COLORS.get(hex_code.lower())
        return named if named is not None else Color.from_hex(hex_code)
    raise ValueError("No color given")


def set_color(hex_code=None, hsv=None, hsl=None, leds=None,
              rescale=False, save=False, root=None):
    """Set the color of the RGB LED."""
    try:
        from sysfs_led.led import SysfsRgbLed

        color = parse_color(hex_code, hsv, hsl)
        red, green, blue = _resolve_rgb_leds(leds, save=save)
        rgb = SysfsRgbLed(red, green, blue, root=root, rescale=rescale)
        rgb.set_color(color)
        print(f"Color: {color} ({color.red}, {color.green}, {color.blue})")
        return 0
    except Exception as e:
        print(f"Error: {e}")
        return 1


def trigger(name, kind=None, delay_on=500, delay_off=500, invert=False, cpu=0, root=None):
    """Apply a trigger, or show available triggers when kind is None."""
    try:
        from sysfs_led import triggers
        from sysfs_led.led import SysfsLed

        led = SysfsLed(name, root)

        if kind is None:
            active = triggers.current_trigger(led)
            for t in triggers.available_triggers(led):
                marker = "*" if t == active else " "
                print(f"{marker} {t}")
            return 0

        if kind == "none":
            triggers.none(led)
        elif kind == "timer":
            triggers.timer(led, delay_on, delay_off)
        elif kind == "heartbeat":
            triggers.heartbeat(led, invert)
        elif kind == "cpu":
            triggers.cpu(led, cpu)
        print(f"{led.name}: trigger {kind}")
        return 0
    except Exception as e:
        print(f"Error: {e}")
        return 1


def demo(red, green, blue, delay=3.0, root=None):
    """Clear all three LEDs, then light each one at full brightness in turn."""
    try:
        from sysfs_led.brightness import FULL, OFF
        from sysfs_led.led import SysfsLed

        channels = [
            (SysfsLed(red, root), "Red"),
            (SysfsLed(green, root), "Green"),
            (SysfsLed(blue, root), "Blue"),
        ]

        print("Clear LEDs")
        for led, _ in channels:
            led.set_brightness(OFF)

        for led, label in channels:
            print(f"{label} LED on")
            led.set_brightness(FULL)
            time.sleep(delay)
            led.set_brightness(OFF)

        print("Demo complete!")
        return 0
    except KeyboardInterrupt:
        print("\nDemo interrupted.")
        return 0
    except Exception as e:
        print(f"Error: {e}")
        return 1


def sweep(saturation=128, lightness=32, delay=0.02, leds=None, loop=False, root=None):
    """Step hue 0-255 on the RGB LED at fixed saturation/lightness."""
    try:
        from sysfs_led.colors import Color
        from sysfs_led.led import SysfsRgbLed

        red, green, blue = _resolve_rgb_leds(leds)
        rgb = SysfsRgbLed(red, green, blue, root=root)

        while True:
            for hue in range(256):
                rgb.set_color(Color.from_hsl(hue, saturation, lightness))
                time.sleep(delay)
            if not loop:
                break

        print("Sweep complete!")
        return 0
    except KeyboardInterrupt:
        print("\nSweep interrupted.")
        return 0
    except Exception as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
