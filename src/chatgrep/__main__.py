"""Entry point for ``python -m chatgrep``.

Searches weechat chat logs by speaker and/or message pattern.  Uses
stdlib :mod:`argparse` for argument parsing.

Exit codes:
    0 -- Search completed (including zero matches).
    1 -- An error occurred (bad options, invalid pattern, malformed log
         line, missing or unreadable file, config error).
    2 -- Argument parsing error (handled by argparse).
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import colorama

from chatgrep.config import ConfigError, Settings, load_settings
from chatgrep.discovery import find_log_files
from chatgrep.exceptions import ChatGrepError
from chatgrep.log import resolve_level, setup_logging
from chatgrep.matcher import LineMatcher
from chatgrep.models.options import build_match_options
from chatgrep.pipeline import run_search


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="chatgrep",
        description="Search weechat chat logs by nickname and/or pattern.",
    )

    # --- Match options ------------------------------------------------
    parser.add_argument(
        "-n", "--nickname", default="", help="Only lines spoken by this nickname."
    )
    parser.add_argument(
        "-e", "--pattern", default="", help="Regular expression to search for."
    )
    parser.add_argument(
        "-F",
        "--fixed",
        action="store_true",
        default=False,
        help="Treat the pattern as a fixed string.",
    )
    parser.add_argument(
        "-j",
        "--strip-joins",
        action="store_true",
        default=False,
        help="Skip joins, parts, quits and similar notices.",
    )
    parser.add_argument(
        "-d",
        "--strip-time-stamps",
        action="store_true",
        default=False,
        help="Omit time stamps from printed lines.",
    )
    parser.add_argument(
        "-C",
        "--context",
        type=int,
        default=0,
        help="Lines of context to print around each match.",
    )
    parser.add_argument(
        "-t",
        "--count",
        action="store_true",
        default=False,
        help="Print the number of matches per file instead of lines.",
    )

    # --- File selection -----------------------------------------------
    parser.add_argument(
        "-c", "--channel", default=".*", help="Channel name pattern (default: any)."
    )
    parser.add_argument(
        "-N", "--network", default=".*", help="Network name pattern (default: any)."
    )
    parser.add_argument(
        "--log-dir",
        default=None,
        help="Directory holding log files (overrides CHATGREP_LOG_DIR).",
    )
    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="Log files to search instead of scanning the log directory.",
    )

    # --- Presentation -------------------------------------------------
    parser.add_argument(
        "--color",
        choices=("auto", "always", "never"),
        default="auto",
        help="Highlight matches (default: auto, when stdout is a terminal).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug-level logging.",
    )

    return parser


def _use_color(choice: str) -> bool:
    if choice == "always":
        return True
    if choice == "never":
        return False
    return sys.stdout.isatty()


def _resolve_files(args: argparse.Namespace, settings: Settings) -> list[Path]:
    """Return the explicit files, or discover them in the log directory.

    Raises:
        ConfigError: If the log directory cannot be determined.
        FileNotFoundError: If the log directory does not exist.
        InvalidPatternError: If ``--network``/``--channel`` is invalid.
    """
    if args.files:
        return [Path(f) for f in args.files]

    if args.log_dir is not None:
        log_dir = Path(args.log_dir).expanduser()
    else:
        log_dir = settings.require_log_dir()

    return find_log_files(log_dir, network=args.network, channel=args.channel)


def main(argv: list[str] | None = None) -> int:
    """Run the chatgrep CLI.

    Args:
        argv: Command-line arguments.  Defaults to ``sys.argv[1:]``
            when ``None`` (the normal case).

    Returns:
        Exit code: ``0`` on success, ``1`` on error.
    """
    parser = build_parser()
    args = parser.parse_args(argv if argv is not None else sys.argv[1:])

    try:
        settings = load_settings()
        setup_logging(resolve_level(args.verbose, settings.log_level))

        options = build_match_options(
            nickname=args.nickname,
            pattern=args.pattern,
            fixed=args.fixed,
            strip_joins=args.strip_joins,
            strip_timestamps=args.strip_time_stamps,
            context=args.context,
            count_only=args.count,
        )
        matcher = LineMatcher(options)
        files = _resolve_files(args, settings)
        color = _use_color(args.color)
        if color:
            colorama.just_fix_windows_console()
        run_search(matcher, files, out=sys.stdout, color=color)
    except (ChatGrepError, ConfigError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
