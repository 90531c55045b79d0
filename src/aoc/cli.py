"""Command-line entry point for the Advent of Code client."""

from __future__ import annotations

import argparse
import logging
import pathlib
import sys
from datetime import datetime, timezone

from aoc import (
    __version__,
    command_calendar,
    command_download,
    command_leaderboard,
    command_read,
    command_submit,
    config,
    user_config,
)
from aoc.client import AocClient
from aoc.config import DEFAULT_INPUT_FILENAME, DEFAULT_PUZZLE_FILENAME
from aoc.errors import AocError, HttpRequestError, InvalidOutputWidth
from aoc.models import PuzzlePart
from aoc.session import load_session_cookie
from aoc.unlock import resolve_event_year, resolve_puzzle_date

DEFAULT_CONFIG_PATH = config.default_config_path()

log = logging.getLogger("aoc")

_COMMAND_ALIASES = {
    "r": "read",
    "d": "download",
    "s": "submit",
    "c": "calendar",
    "p": "private-leaderboard",
}
_COLOR_MODES = {"auto": None, "always": True, "never": False}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="aoc",
        description=(
            "Advent of Code command-line tool.\n"
            "\n"
            "Subcommands:\n"
            "  aoc read                 Read puzzle statement (the default command).\n"
            "  aoc download             Save puzzle description and input to files.\n"
            "  aoc submit PART ANSWER   Submit puzzle answer.\n"
            "  aoc calendar             Show calendar and stars collected.\n"
            "  aoc private-leaderboard ID\n"
            "                           Show the state of a private leaderboard.\n"
            "\n"
            "Session cookie: $ADVENT_OF_CODE_SESSION, ~/.adventofcode.session\n"
            "or <config dir>/adventofcode.session"
        ),
        epilog=(
            "Examples:\n"
            "  aoc\n"
            "    Read today's puzzle during the event.\n"
            "\n"
            "  aoc -y 2022 -d 7 download\n"
            "    Save input and puzzle.md for day 7 of 2022.\n"
            "\n"
            "  aoc submit 1 4242\n"
            "    Submit an answer for part one of today's puzzle.\n"
            "\n"
            "  aoc -y 2021 calendar\n"
            "    Show the 2021 calendar."
        ),
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-d", "--day",
        type=int,
        default=None,
        help="Puzzle day (default: today's puzzle, during the event only).",
    )
    parser.add_argument(
        "-y", "--year",
        type=int,
        default=None,
        help="Puzzle year (default: year of the current or last event).",
    )
    parser.add_argument(
        "-s", "--session-file", "--session",
        default=None,
        metavar="PATH",
        help="Path to session cookie file (default: ~/.adventofcode.session).",
    )
    parser.add_argument(
        "-w", "--width",
        type=int,
        default=None,
        help="Width at which to wrap output (default: terminal width).",
    )
    parser.add_argument(
        "-o", "--overwrite",
        action="store_true",
        help="Overwrite files if they already exist.",
    )
    only = parser.add_mutually_exclusive_group()
    only.add_argument(
        "-I", "--input-only",
        action="store_true",
        help="Download puzzle input only.",
    )
    only.add_argument(
        "-P", "--puzzle-only", "--description-only",
        action="store_true",
        help="Download puzzle description only.",
    )
    parser.add_argument(
        "-i", "--input-file",
        default=None,
        metavar="PATH",
        help=f"Path where to save puzzle input (default: {DEFAULT_INPUT_FILENAME}).",
    )
    parser.add_argument(
        "-p", "--puzzle-file",
        default=None,
        metavar="PATH",
        help=f"Path where to save puzzle description (default: {DEFAULT_PUZZLE_FILENAME}).",
    )
    parser.add_argument(
        "-m", "--show-html-markup",
        action="store_true",
        help="Keep emphasis, code and link markers when printing puzzle text.",
    )
    parser.add_argument(
        "--color",
        choices=sorted(_COLOR_MODES),
        default=None,
        help="Colorize calendar and leaderboard output (default: auto).",
    )
    parser.add_argument(
        "--config",
        default=None,
        metavar="PATH",
        help="Path to TOML config file (default: ~/.config/aoc/config.toml).",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Restrict log messages to errors only.",
    )
    verbosity.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )

    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("read", aliases=["r"], help="Read puzzle statement (the default command).")
    subparsers.add_parser("download", aliases=["d"], help="Save puzzle description and input to files.")
    submit_parser = subparsers.add_parser("submit", aliases=["s"], help="Submit puzzle answer.")
    submit_parser.add_argument("part", choices=["1", "2"], help="Puzzle part.")
    submit_parser.add_argument("answer", help="Puzzle answer.")
    subparsers.add_parser("calendar", aliases=["c"], help="Show calendar and stars collected.")
    leaderboard_parser = subparsers.add_parser(
        "private-leaderboard",
        aliases=["p"],
        help="Show the state of a private leaderboard.",
    )
    leaderboard_parser.add_argument("leaderboard_id", type=int, help="Private leaderboard ID.")
    return parser.parse_args(argv)


def _configure_logging(*, quiet: bool, debug: bool) -> None:
    if quiet:
        level = logging.ERROR
    elif debug:
        level = logging.DEBUG
    else:
        level = logging.INFO
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    log.handlers[:] = [handler]
    log.setLevel(level)
    log.propagate = False


def _dispatch(args: argparse.Namespace, settings: dict, now: datetime) -> int:
    command = _COMMAND_ALIASES.get(args.command, args.command or "read")
    width = config.get_output_width()
    color = config.color_enabled()

    if command in ("calendar", "private-leaderboard"):
        year = resolve_event_year(args.year, now)
        client = AocClient(load_session_cookie(args.session_file or settings.get("session_file")))
        if command == "calendar":
            return command_calendar.run(client, year, width=width, color=color)
        return command_leaderboard.run(client, year, args.leaderboard_id, now=now, color=color)

    date = resolve_puzzle_date(args.year, args.day, now)
    client = AocClient(load_session_cookie(args.session_file or settings.get("session_file")))
    if command == "download":
        return command_download.run(
            client,
            date,
            now=now,
            input_file=args.input_file or settings.get("input_file", DEFAULT_INPUT_FILENAME),
            puzzle_file=args.puzzle_file or settings.get("puzzle_file", DEFAULT_PUZZLE_FILENAME),
            overwrite=args.overwrite or settings.get("overwrite", False),
            input_only=args.input_only,
            puzzle_only=args.puzzle_only,
        )
    if command == "submit":
        part = PuzzlePart.parse(args.part)
        return command_submit.run(
            client, date, part, args.answer,
            now=now, width=width, show_markup=args.show_html_markup,
        )
    return command_read.run(client, date, now=now, width=width, show_markup=args.show_html_markup)


def main() -> int:
    args = parse_args()
    _configure_logging(quiet=args.quiet, debug=args.debug)

    config_path = pathlib.Path(args.config).expanduser() if args.config else DEFAULT_CONFIG_PATH
    settings = user_config.load_config(config_path)
    user_config.validate_config(settings)

    width = args.width if args.width is not None else settings.get("width")
    try:
        config.configure(width=width, color=_COLOR_MODES[args.color or settings.get("color", "auto")])
    except InvalidOutputWidth as err:
        log.error("%s", err)
        return 2

    now = datetime.now(timezone.utc)
    try:
        return _dispatch(args, settings, now)
    except HttpRequestError as err:
        log.error("%s", err)
        log.warning("Your session cookie may have expired, try logging in again")
        return 1
    except AocError as err:
        log.error("%s", err)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
