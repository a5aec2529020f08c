"""Command line argument parsing."""

import argparse

from portconsole import __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="portconsole",
        description="Portconsole - line-buffered console for serial devices",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "port",
        nargs="?",
        default=None,
        help="Serial port to open (default: loopback, echoes what is sent)",
    )
    parser.add_argument(
        "-b",
        "--baudrate",
        type=int,
        default=None,
        help="Serial baud rate (default: from config, 115200)",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Path to YAML config file (default: $PORTCONSOLE_CONFIG_PATH or portconsole.yaml)",
    )
    parser.add_argument(
        "--display-mode",
        choices=["plain", "hex"],
        default=None,
        help="Render incoming data as plain text or as a hex dump",
    )
    parser.add_argument(
        "--data-mode",
        choices=["utf8", "hex"],
        default=None,
        help="Send --send text as UTF-8 or parse it as hex bytes",
    )
    parser.add_argument(
        "--line-ending",
        choices=["none", "nl", "cr", "both"],
        default=None,
        help="Terminator appended to every sent command",
    )
    parser.add_argument(
        "--no-timestamp",
        action="store_true",
        help="Do not prefix lines with the time they arrived",
    )
    parser.add_argument(
        "--echo",
        action="store_true",
        help="Show sent commands in the console",
    )
    parser.add_argument(
        "-s",
        "--send",
        action="append",
        default=[],
        metavar="TEXT",
        help="Command to send after opening the port (repeatable)",
    )
    parser.add_argument(
        "-o",
        "--export",
        default=None,
        metavar="PATH",
        help="Export the scrollback to a text file on exit",
    )
    parser.add_argument(
        "-d",
        "--duration",
        type=float,
        default=None,
        help="Stop after this many seconds (default: run until Ctrl+C)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show detailed logs",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments namespace.
    """
    return build_parser().parse_args(argv)
