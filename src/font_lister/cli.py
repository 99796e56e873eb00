"""Command-line interface for font-lister."""

import argparse
import json
import logging
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from .exceptions import FontListerError
from .lister import FontLister
from .models import Scope
from .settings import load_directory_map

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="font-lister",
        description="List font files installed for the current user or for all users.",
    )
    parser.add_argument(
        "-n",
        "--name",
        dest="names",
        action="append",
        metavar="PATTERN",
        help="Glob pattern matched case-insensitively against file names (repeatable, default: *)",
    )
    parser.add_argument(
        "-s",
        "--scope",
        dest="scopes",
        action="append",
        metavar="SCOPE",
        help=f"Scope to search, in order (repeatable; one of {', '.join(s.value for s in Scope)}; default: CurrentUser)",
    )
    parser.add_argument(
        "--stdin",
        action="store_true",
        help="Read additional name patterns from standard input, one per line",
    )
    parser.add_argument("--config", type=Path, help="Settings file overriding the font directory table")
    parser.add_argument("--format", choices=("text", "json"), default="text", help="Output format (default: text)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each step to stderr")
    return parser


def _read_patterns(stream: TextIO) -> Iterator[str]:
    for line in stream:
        pattern = line.strip()
        if pattern:
            yield pattern


def main(argv: list[str] | None = None, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    args = build_parser().parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    names = list(args.names or [])
    if args.stdin:
        names.extend(_read_patterns(stdin))

    try:
        lister = FontLister(directories=load_directory_map(args.config))
        records = lister.list_fonts(names or None, args.scopes)
    except (FontListerError, ValueError) as e:
        print(f"font-lister: {e}", file=sys.stderr)
        return 2

    if args.format == "json":
        json.dump([record.to_dict() for record in records], stdout, indent=2)
        stdout.write("\n")
    else:
        for record in records:
            stdout.write(f"{record.name}\t{record.scope}\t{record.path}\n")

    logger.debug(f"Listed {len(records)} fonts")
    return 0
