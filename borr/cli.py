# borr/cli.py
"""
borr/cli.py

Reference command-line interface for inspecting language files.

Usage:
    borr info lang/en_GB.borr
    borr get lang/en_GB.borr greetings hello
    borr section lang/en_GB.borr greetings --raw
    borr list lang/
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

from borr.catalog import available_languages
from borr.config import LogFormat
from borr.errors import BorrError
from borr.language import Language
from borr.logging_config import configure_logging


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="borr",
        description="Inspect borr language files.",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Log level (defaults to BORR_LOG_LEVEL).",
    )
    parser.add_argument(
        "--log-format",
        choices=[f.value for f in LogFormat],
        default=None,
        help="Log renderer (defaults to BORR_LOG_FORMAT).",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        dest="command",
        required=True,
    )

    info = subparsers.add_parser(
        "info",
        help="Show language id, description, version and sections.",
    )
    info.add_argument("file", metavar="PATH", help="Language file to parse.")

    get = subparsers.add_parser(
        "get",
        help="Print a single translation.",
    )
    get.add_argument("file", metavar="PATH", help="Language file to parse.")
    get.add_argument("section", help="Section name.")
    get.add_argument("field", help="Field name.")
    get.add_argument(
        "--raw",
        action="store_true",
        help="Do not expand ${...} variables.",
    )

    section = subparsers.add_parser(
        "section",
        help="Print every translation of a section.",
    )
    section.add_argument("file", metavar="PATH", help="Language file to parse.")
    section.add_argument("section", help="Section name.")
    section.add_argument(
        "--raw",
        action="store_true",
        help="Do not expand ${...} variables.",
    )
    section.add_argument(
        "--json",
        action="store_true",
        help="Print the section as a JSON object.",
    )

    list_cmd = subparsers.add_parser(
        "list",
        help="List language files in a directory.",
    )
    list_cmd.add_argument(
        "directory",
        nargs="?",
        default=None,
        help="Directory to scan (defaults to BORR_LANGUAGE_DIR).",
    )

    return parser


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _load_language(path: str) -> Language:
    try:
        return Language.from_file(path)
    except BorrError as exc:
        raise SystemExit(f"Failed to parse language file: {exc}") from exc


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------


def _cmd_info(args: argparse.Namespace) -> int:
    lang = _load_language(args.file)

    print(f"Selected language: {lang.lang_id}")
    print(f"Language description: {lang.lang_description}")
    print(f"Language version: {lang.version}")

    sections = lang.sections()
    print(f"Sections ({len(sections)}):")
    for name in sections:
        print(f"  - {name}")
    return 0


def _cmd_get(args: argparse.Namespace) -> int:
    lang = _load_language(args.file)

    value = lang.get_string(args.section, args.field, expand=not args.raw)
    if value is None:
        print(f"Translation {args.section}:{args.field} not found.", file=sys.stderr)
        return 1

    print(value)
    return 0


def _cmd_section(args: argparse.Namespace) -> int:
    lang = _load_language(args.file)

    raw = lang.get_section(args.section)
    if raw is None:
        print(f"Section {args.section!r} not found.", file=sys.stderr)
        return 1

    values = {
        field: (value if args.raw else lang.get_string(args.section, field) or "")
        for field, value in sorted(raw.items())
    }

    if args.json:
        print(json.dumps(values, indent=2, ensure_ascii=False))
    else:
        for field, value in values.items():
            print(f"Found translation ({field}): {value}")
    return 0


def _cmd_list(args: argparse.Namespace) -> int:
    for name in available_languages(args.directory):
        print(name)
    return 0


_COMMANDS = {
    "info": _cmd_info,
    "get": _cmd_get,
    "section": _cmd_section,
    "list": _cmd_list,
}


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: Optional[List[str]] = None) -> None:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    configure_logging(level=args.log_level, log_format=args.log_format)

    handler = _COMMANDS.get(args.command)
    if handler is None:
        parser.error(f"Unknown command: {args.command}")
        return

    raise SystemExit(handler(args))


if __name__ == "__main__":
    main()
