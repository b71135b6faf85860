#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/prosetree/cli.py
"""Command-line interface for converting between HTML and the plain-hash shape.

Examples
--------
Convert an HTML file to JSON:

    $ prosetree page.html -t json -o page.json

Render a stored document back to HTML:

    $ prosetree page.json --pretty

Read HTML from stdin and emit YAML:

    $ cat page.html | prosetree - -f html -t yaml

"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Union

from prosetree import __version__
from prosetree.api import parse_html, parse_plain, render_plain, to_html
from prosetree.ast import Document
from prosetree.exceptions import ProsetreeError
from prosetree.logging_utils import configure_logging

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_USAGE_ERROR = 2

FORMATS = ("html", "json", "yaml")

_EXTENSION_FORMATS = {
    ".html": "html",
    ".htm": "html",
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="prosetree",
        description="Convert rich-text documents between HTML and the plain-hash JSON/YAML shape.",
    )
    parser.add_argument("input", help="Input file, or '-' to read from stdin")
    parser.add_argument(
        "-f",
        "--from",
        dest="source_format",
        choices=FORMATS,
        help="Input format (inferred from the file extension when omitted)",
    )
    parser.add_argument(
        "-t",
        "--to",
        dest="target_format",
        choices=FORMATS,
        help="Output format (default: json for HTML input, html otherwise)",
    )
    parser.add_argument("-o", "--output", help="Output file (default: stdout)")
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation; negative values are rejected")
    parser.add_argument("--pretty", action="store_true", help="Put a newline after each HTML block element")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log messages to this file")
    parser.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging from command-line arguments; --trace implies DEBUG."""
    log_level = logging.DEBUG if parsed_args.trace else getattr(logging, parsed_args.log_level)
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def infer_format(input_name: str) -> Optional[str]:
    """Return the format implied by a file extension, or None."""
    return _EXTENSION_FORMATS.get(Path(input_name).suffix.lower())


def _read_document(source: Union[str, Path], source_format: str) -> Document:
    if source_format == "html":
        return parse_html(source)
    return parse_plain(source, format=source_format)


def _render_document(document: Document, target_format: str, parsed_args: argparse.Namespace) -> str:
    if target_format == "html":
        return to_html(document, pretty=parsed_args.pretty) or ""
    text = render_plain(document, format=target_format, indent=parsed_args.indent) or ""
    return text if text.endswith("\n") else text + "\n"


def main(args: list[str] | None = None) -> int:
    """Execute the CLI and return an exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    source_format = parsed_args.source_format
    if source_format is None:
        if parsed_args.input == "-":
            print("Error: --from is required when reading from stdin", file=sys.stderr)
            return EXIT_USAGE_ERROR
        source_format = infer_format(parsed_args.input)
        if source_format is None:
            print(f"Error: cannot infer the format of {parsed_args.input!r}; use --from", file=sys.stderr)
            return EXIT_USAGE_ERROR

    target_format = parsed_args.target_format or ("json" if source_format == "html" else "html")
    logger.debug("Converting %s from %s to %s", parsed_args.input, source_format, target_format)

    source: Union[str, Path] = sys.stdin.read() if parsed_args.input == "-" else Path(parsed_args.input)

    try:
        document = _read_document(source, source_format)
        output_text = _render_document(document, target_format, parsed_args)
    except ValueError as e:
        # Invalid option values (e.g. a negative indent) surface from options validation
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE_ERROR
    except ProsetreeError as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    if parsed_args.output:
        try:
            Path(parsed_args.output).write_text(output_text, encoding="utf-8")
        except OSError as e:
            print(f"Error: could not write {parsed_args.output}: {e}", file=sys.stderr)
            return EXIT_ERROR
        logger.info("Wrote %s", parsed_args.output)
    else:
        sys.stdout.write(output_text)

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
