#!/usr/bin/env python3
"""Re-render a plain-text killmail in the standard layout.

Reads the mail from a file (or stdin), applies the configured correction
passes and prints the result.

Examples:
  killmail-reformat mail.txt
  killmail-reformat --no-rewrite - < mail.txt
  KILLMAIL_FW_FACTIONS="Amarr Empire,Minmatar Republic" killmail-reformat mail.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from killmail.config import Settings
from killmail.parser import KillmailParseError, parse_killmail
from killmail.printer import render_killmail
from killmail.rewriters import apply_rewriters, resolve_passes
from killmail.selftest import run_parser_selftest

logger = logging.getLogger("killmail")


def _read_mail(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="killmail-reformat")
    p.add_argument("path", nargs="?", default="-", help="Killmail text file ('-' for stdin)")
    p.add_argument("--no-rewrite", action="store_true", help="Skip correction passes")
    p.add_argument(
        "--rewriters",
        default=None,
        help="Comma-separated correction passes (overrides KILLMAIL_REWRITERS)",
    )
    args = p.parse_args(argv)

    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    if settings.selftest_enabled:
        run_parser_selftest()

    names = settings.rewriters
    if args.rewriters is not None:
        names = tuple(n.strip() for n in args.rewriters.split(",") if n.strip())
    if args.no_rewrite:
        names = ()

    try:
        passes = resolve_passes(names, settings)
    except KeyError as e:
        print(f"Invalid --rewriters: {e}", file=sys.stderr)
        return 2

    try:
        text = _read_mail(args.path)
    except OSError as e:
        print(f"Cannot read {args.path}: {e}", file=sys.stderr)
        return 2

    try:
        report = parse_killmail(text)
    except KillmailParseError as e:
        logger.warning("Rejected killmail from %s: %s", args.path, e)
        print(f"Malformed killmail: {e}", file=sys.stderr)
        return 2

    report = apply_rewriters(report, passes)
    sys.stdout.write(render_killmail(report))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
