"""Minimal stream-based editor shell: ``python -m sqlbridge [FILE]``.

Reads SQL from *FILE* (or stdin), sends it to the bridge as a format request and prints whatever formatted text comes
back. A request that cannot be formatted prints nothing; the reason is logged to stderr.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from sqlbridge.app import create_app
from sqlbridge.log import configure_logging
from sqlbridge.messages import FormatRequest

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import TextIO

    from sqlbridge.messages import FormatResult


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sqlbridge", description="Format SQL through the sqlbridge bridge.")
    parser.add_argument(
        "file",
        nargs="?",
        help="SQL file to format (default: stdin)",
    )
    parser.add_argument(
        "--each-line",
        action="store_true",
        help="send every non-blank input line as a separate format request",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="log level for diagnostics written to stderr (default: WARNING)",
    )
    return parser


def main(argv: Sequence[str] | None = None, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    out = stdout if stdout is not None else sys.stdout
    if args.file is not None:
        try:
            text = Path(args.file).read_text(encoding="utf-8")
        except OSError as e:
            parser.error(f"cannot read {args.file}: {e.strerror}")
    else:
        text = (stdin if stdin is not None else sys.stdin).read()
    configure_logging(args.log_level)

    def display(result: FormatResult) -> None:
        out.write(result.formatted + "\n")

    app = create_app()
    app.receive_formatted_sql.subscribe(display)

    sources = [line for line in text.splitlines() if line.strip()] if args.each_line else [text]
    for source in sources:
        app.format_sql.send(FormatRequest(source))
    return 0


if __name__ == "__main__":
    sys.exit(main())
