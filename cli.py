"""Command line options for oxishut."""
import argparse

from config import APP_NAME


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Power menu overlay: shut down, reboot or sleep.",
    )
    parser.add_argument(
        "--css",
        metavar="PATH",
        nargs="?",
        const="",
        default=None,
        help="use a specific path to load a css style sheet; without PATH no style sheet is loaded.",
    )
    parser.add_argument(
        "--no-watch",
        action="store_true",
        help="do not reload the style sheet when it changes.",
    )
    parser.add_argument("--debug", action="store_true", help="verbose logging.")
    return parser


def parse_args(argv=None) -> argparse.Namespace:
    return build_parser().parse_args(argv)
