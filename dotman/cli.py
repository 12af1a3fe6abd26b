"""Command-line entry point."""

from __future__ import annotations

import argparse

VERSION = "404"

LOGO = r"""     _       _                         
    | |     | |                        
  __| | ___ | |_ _ __ ___   __ _ _ __  
 / _` |/ _ \| __| '_ ` _ \ / _` | '_ \ 
| (_| | (_) | |_| | | | | | (_| | | | |
 \__,_|\___/ \__|_| |_| |_|\__,_|_| |_|"""

DESCRIPTION = LOGO + """
a comprehensive environment manager

- Manage and sync your dotfiles across different machines
- Track and install system packages and applications
- Backup and restore your system configurations
- Automate environment setup with simple commands"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dotman",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    commands = parser.add_subparsers(dest="command", metavar="command")
    commands.add_parser(
        "version",
        help="Print the version number of Dotman",
        description="All software has versions. This is Dotman's",
    )
    return parser


def main(argv=None) -> int:
    """Run dotman and return the exit status."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        return 0 if exc.code in (0, None) else 1
    if args.command == "version":
        print(VERSION)
    else:
        parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())