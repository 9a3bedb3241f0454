"""Command-line entry point: ``fileprobe <filepath> [output filepath] [word...]``.

* The first positional is the file to inspect; it must exist.
* The optional second positional is where the report is written. ``-`` keeps
  the report on standard output so search words can follow.
* Every remaining positional is a search word. Words that start with ``-``
  must follow a ``--`` separator, e.g. ``fileprobe notes.txt - -- -v``.

Every path through :func:`main` reports on standard output and returns ``0``;
unexpected failures are printed instead of propagated.
"""

from __future__ import annotations

import argparse
import codecs
import logging
import sys
import traceback
from pathlib import Path
from typing import Optional, Sequence

from .analysis.characters import DEFAULT_TOP_CHARACTERS
from .analyzer import FileAnalyzer
from .reporting.json import render_json_report
from .reporting.text import render_text_report

logger = logging.getLogger(__name__)

_STDOUT_MARKER = "-"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fileprobe",
        description="Guess a file's format and report character and word statistics.",
    )
    parser.add_argument(
        "path",
        type=Path,
        help="File to analyze.",
    )
    parser.add_argument(
        "output",
        nargs="?",
        default=None,
        help="Where to write the report (default: standard output; '-' also means stdout).",
    )
    parser.add_argument(
        "words",
        nargs="*",
        default=[],
        help="Words to count (case-insensitive, whole-word). Put words starting with '-' after '--'.",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=DEFAULT_TOP_CHARACTERS,
        help=f"Number of characters listed in the character analysis (default: {DEFAULT_TOP_CHARACTERS}).",
    )
    parser.add_argument(
        "--encoding",
        default=None,
        help="Text encoding used to decode the file (default: platform preferred encoding).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit the report as JSON instead of text.",
    )
    parser.add_argument(
        "--details",
        action="store_true",
        help="Include the detection plugin, confidence and reasons in the text report.",
    )
    parser.add_argument(
        "--traceback",
        action="store_true",
        help="Print the full traceback when an unexpected error occurs.",
    )
    parser.add_argument(
        "--log-level",
        choices=_LOG_LEVELS,
        default="WARNING",
        help="Logging verbosity on standard error (default: WARNING).",
    )
    return parser


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _validate_args(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    if args.top <= 0:
        parser.error("--top must be a positive integer")
    if args.encoding is not None:
        try:
            codecs.lookup(args.encoding)
        except LookupError:
            parser.error(f"unknown encoding: {args.encoding}")


def _resolve_output(raw: Optional[str]) -> Optional[Path]:
    if raw is None or raw == _STDOUT_MARKER:
        return None
    return Path(raw)


def _run(args: argparse.Namespace) -> None:
    path: Path = args.path
    if not path.is_file():
        sys.stdout.write(f"Error: File {path} not found.\n")
        return

    analyzer = FileAnalyzer(encoding=args.encoding, top_characters=args.top)
    report = analyzer.analyze_file(path, args.words)
    if args.json:
        rendered = render_json_report(report)
    else:
        rendered = render_text_report(report, details=args.details)

    output = _resolve_output(args.output)
    if output is None:
        sys.stdout.write(rendered)
        return

    output.write_text(rendered, encoding="utf-8")
    sys.stdout.write(f"Analysis saved to {output}\n")


def main(argv: Sequence[str] | None = None) -> int:
    if argv is None:
        argv = list(sys.argv[1:])
    else:
        argv = list(argv)

    parser = _build_parser()
    args = parser.parse_intermixed_args(argv)
    _validate_args(args, parser)
    _configure_logging(args.log_level)

    try:
        _run(args)
    except Exception as exc:  # noqa: BLE001 - top-level report boundary
        logger.debug("Analysis aborted", exc_info=True)
        sys.stdout.write(f"Error: {exc}\n")
        if args.traceback:
            traceback.print_exc(file=sys.stdout)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    sys.exit(main())


def console_main() -> None:
    """Entry point for ``fileprobe`` console script."""

    sys.exit(main())
