# src/regexp_table/app/lookup.py
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from regexp_table.config.logger import configure_logging
from regexp_table.pipeline.table import RegexpTable
from regexp_table.rules.errors import TableError

EXIT_OK = 0
EXIT_NO_MATCH = 1
EXIT_TABLE_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="regexp-table",
        description="Look up actions for input strings in a regexp table.",
    )
    parser.add_argument("table", type=Path, help="Path to the table file.")
    parser.add_argument("texts", nargs="*", help="Strings to look up.")
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only parse the table and report the number of rules.",
    )
    parser.add_argument(
        "--encoding",
        default=None,
        help="Encoding of the table file (default: REGEXP_TABLE_ENCODING or utf-8).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log parsing and matching details to stderr.",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging("DEBUG" if args.verbose else None)

    try:
        table = RegexpTable.from_path(args.table, encoding=args.encoding)
    except TableError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return EXIT_TABLE_ERROR
    except (OSError, UnicodeDecodeError) as exc:
        print(f"[ERROR] Cannot read {args.table}: {exc}", file=sys.stderr)
        return EXIT_TABLE_ERROR

    if args.check:
        print(f"{args.table}: {table.rule_count()} rules")
        return EXIT_OK

    status = EXIT_OK
    for text in args.texts:
        action = table.find(text)
        if action is None:
            status = EXIT_NO_MATCH
        print(f"{text}\t{action if action is not None else '-'}")
    return status


if __name__ == "__main__":
    sys.exit(main())
