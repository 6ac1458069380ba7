"""Command-line entry point.

Reads the element records produced by a PHP source parser, validates every
doc-comment and writes the Markdown report:

    phpdoc-exporter elements.json -o docs/API.md --source-root src/
"""

from __future__ import annotations

import argparse
import logging
import sys
from enum import IntEnum
from pathlib import Path

from .config import PROGRAM_NAME, VERSION, ExportConfig
from .exceptions import InputFormatError
from .pipeline import export, should_fail
from .schemas import load_records, parse_records

log = logging.getLogger(__name__)


class ExitCode(IntEnum):
    """POSIX exit codes."""

    SUCCESS = 0
    GENERAL_ERROR = 1
    USAGE_ERROR = 2
    SIGINT = 130


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="Validate PHPDoc comments and export them as Markdown.",
    )
    parser.add_argument(
        "input",
        help="JSON element records from the source parser ('-' for stdin).",
    )
    parser.add_argument(
        "-o",
        "--output",
        required=True,
        help="Markdown file to write.",
    )
    parser.add_argument("-t", "--title", help="Report title.")
    parser.add_argument(
        "--source-root",
        metavar="PATH",
        action="append",
        default=[],
        help="Analyzed source path, used to derive the default title. Repeatable.",
    )
    parser.add_argument(
        "-j",
        "--workers",
        type=int,
        help="Worker threads for extraction.",
    )
    parser.add_argument(
        "-s",
        "--strict",
        action="store_true",
        help="Fail when any MUST violation is found.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output.")
    parser.add_argument(
        "-V", "--version", action="version", version=f"{PROGRAM_NAME} {VERSION}"
    )
    return parser


def _run(config: ExportConfig) -> ExitCode:
    if config.input_path == "-":
        records = parse_records(sys.stdin.read())
    else:
        records = load_records(Path(config.input_path))

    if not records:
        print("error: no files in element records", file=sys.stderr)
        return ExitCode.GENERAL_ERROR

    log.debug("Loaded %d file record(s)", len(records))

    result = export(records, config.project_title, workers=config.workers)
    counts = result.counts

    if result.warnings:
        print(
            f"\nWarning: {counts.must} MUST violation(s), "
            f"{counts.should} SHOULD improvement(s) detected",
            file=sys.stderr,
        )
        if should_fail(counts, config.strict):
            print(
                "error: strict mode enabled, failing on MUST violations",
                file=sys.stderr,
            )
            return ExitCode.GENERAL_ERROR

    try:
        Path(config.output_path).write_text(result.document, encoding="utf-8")
    except OSError as e:
        print(
            f"error: failed to write output file: {config.output_path}: {e}",
            file=sys.stderr,
        )
        return ExitCode.GENERAL_ERROR

    log.info("Wrote %d bytes to %s", len(result.document.encode()), config.output_path)
    return ExitCode.SUCCESS


def main(argv: list[str] | None = None) -> int:
    """Run the exporter. Returns exit code."""
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = ExportConfig.from_args(
            input_path=args.input,
            output_path=args.output,
            title=args.title,
            workers=args.workers,
            verbose=args.verbose,
            strict=args.strict,
            source_paths=args.source_root,
        )
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.USAGE_ERROR

    try:
        return _run(config)
    except InputFormatError as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.GENERAL_ERROR
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return ExitCode.SIGINT


if __name__ == "__main__":
    sys.exit(main())
