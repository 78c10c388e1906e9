#!/usr/bin/env python3
"""CLI utility for managing comm-finder settings"""

import argparse
import sys

from .config import get_settings_manager
from .core.exceptions import InvalidLetterError


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="commfinder-data", description="Manage comm-finder settings"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Command: info
    subparsers.add_parser("info", help="Show settings locations and values")

    # Command: path
    subparsers.add_parser("path", help="Show user data directory path")

    # Command: reset
    subparsers.add_parser("reset", help="Reset settings to defaults")

    # Command: lettering
    lettering_parser = subparsers.add_parser(
        "lettering", help="Show, set or clear the stored lettering scheme"
    )
    lettering_parser.add_argument("scheme", nargs="?", help="24 distinct uppercase letters")
    lettering_parser.add_argument(
        "--clear", action="store_true", help="Go back to canonical lettering"
    )

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    sm = get_settings_manager()

    if args.command == "info":
        info = sm.get_data_info()
        print(f"\n📦 Package data directory:\n   {info['package_data_dir']}")
        print(f"\n📁 User data directory:\n   {info['user_data_dir']}")
        overridden = " (user overrides present)" if info["user_settings"] else ""
        print(f"\n⚙️  Settings{overridden}:")
        for key, value in sorted(info["settings"].items()):
            print(f"   • {key}: {value!r}")

    elif args.command == "path":
        print(sm.user_data_dir)

    elif args.command == "reset":
        sm.reset_to_defaults()

    elif args.command == "lettering":
        if args.clear:
            sm.save_lettering(None)
            print("Using canonical lettering")
        elif args.scheme:
            try:
                scheme = sm.save_lettering(args.scheme)
            except InvalidLetterError as e:
                print(f"❌ {e}")
                return 1
            print(f"Saved lettering {scheme.letters}")
        else:
            scheme = sm.get_lettering()
            print(scheme.letters if scheme else "(canonical)")

    return 0


if __name__ == "__main__":
    sys.exit(main())
