#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
pdfcr command line

Usage:
    pdfcr src -o code.pdf
    pdfcr src setup.py -o code.pdf -t "is this a quine?"
    pdfcr cmd -o test.pdf --stop-on-bad-file

Options not given on the command line fall back to PDFCR_* environment
variables (or .env), then to the built-in defaults.
"""

import argparse
import sys
from typing import List, Optional

from pydantic import ValidationError

from config.logging_config import setup_logger
from config.settings import Settings
from .errors import PdfcrError
from .pipeline import RenderPipeline

EXIT_OK = 0
EXIT_FAILURE = 1

EPILOG = """examples:

  pdfcr src -o code.pdf                                  # classic example
  pdfcr src setup.py -o code.pdf -t "is this a quine?"   # a directory and a file, with a title
  pdfcr cmd -o test.pdf --stop-on-bad-file               # abort on binary files instead of skipping them
"""


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser"""
    parser = argparse.ArgumentParser(
        prog="pdfcr",
        description="Render source files into a paginated PDF with one bookmark per file.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("inputs", nargs="+", metavar="PATH",
                        help="files and directories to render (directories are walked recursively)")
    parser.add_argument("-o", "--output", required=True,
                        help="the output pdf file to render to")
    parser.add_argument("-t", "--title",
                        help="title of the document (default: TITLE)")
    parser.add_argument("-s", "--stop-on-bad-file", action="store_true", default=None,
                        help="stop without writing output when a file can't be read as text, "
                             "instead of skipping it")
    parser.add_argument("-n", "--no-line-numbers", dest="line_numbers", action="store_false", default=None,
                        help="do not include line numbers in the output")

    layout = parser.add_argument_group("layout")
    layout.add_argument("--wrap-width", type=int, help="characters per line before wrapping (default: 85)")
    layout.add_argument("--page-lines", dest="page_height_lines", type=int,
                        help="body lines per page (default: 48)")
    layout.add_argument("--tab-width", type=int, help="spaces per tab (default: 4)")
    layout.add_argument("--font-size", type=float, help="font size in points (default: 11)")
    layout.add_argument("--font-path", help="TrueType font to embed instead of Courier")

    parser.add_argument("--workers", type=int, help="threads used for layout (default: 1)")
    parser.add_argument("--progress", dest="show_progress", action="store_true", default=None,
                        help="show a progress bar")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


SETTING_ARGS = (
    "title",
    "stop_on_bad_file",
    "line_numbers",
    "wrap_width",
    "page_height_lines",
    "tab_width",
    "font_size",
    "font_path",
    "workers",
    "show_progress",
)


def settings_from_args(args: argparse.Namespace) -> Settings:
    """Settings with every option given on the command line applied"""
    overrides = {
        name: getattr(args, name)
        for name in SETTING_ARGS
        if getattr(args, name) is not None
    }
    return Settings(**overrides)


def main(argv: Optional[List[str]] = None) -> int:
    """Run pdfcr and return the process exit code"""
    args = build_parser().parse_args(argv)

    try:
        settings = settings_from_args(args)
    except ValidationError as e:
        setup_logger().error(f"Invalid settings: {e}")
        return EXIT_FAILURE

    logger = setup_logger(
        "pdfcr.cli",
        level="DEBUG" if args.verbose else settings.log_level,
        log_file=str(settings.log_file) if settings.log_file else None,
    )

    try:
        pipeline = RenderPipeline(settings)
        report = pipeline.run(args.inputs, args.output)
    except PdfcrError as e:
        logger.error(str(e))
        return EXIT_FAILURE

    if report.skipped:
        logger.info(f"Skipped {len(report.skipped)} file(s)")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
