#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wechatmd/cli/builder.py
"""Argument parser construction and exit codes for the wechatmd CLI."""

from __future__ import annotations

import argparse
import os
from importlib.metadata import version

from wechatmd.constants import DEFAULT_THEME_ID, ENV_LOG_LEVEL, ENV_THEME, HTML_PASSTHROUGH_MODES
from wechatmd.exceptions import FileError, ValidationError

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to a CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map

    Returns
    -------
    int
        ``3`` for validation errors (including theme errors), ``4`` for file
        errors and ``1`` for everything else

    """
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR
    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR
    return EXIT_ERROR


def _get_version() -> str:
    try:
        return version("wechatmd")
    except Exception:
        return "unknown"


def _default_log_level() -> str:
    value = os.environ.get(ENV_LOG_LEVEL, "").strip().upper()
    return value if value in LOG_LEVELS else "WARNING"


def _create_common_parser() -> argparse.ArgumentParser:
    """Return a parent parser holding the logging options every subcommand accepts."""
    common = argparse.ArgumentParser(add_help=False)
    group = common.add_argument_group("logging")
    group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output with detailed logging (equivalent to --log-level DEBUG)",
    )
    group.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=_default_log_level(),
        help=f"Set logging level (default: WARNING, or ${ENV_LOG_LEVEL})",
    )
    group.add_argument(
        "--log-file",
        type=str,
        metavar="PATH",
        help="Write log messages to the specified file in addition to the console",
    )
    group.add_argument(
        "--trace",
        action="store_true",
        help="Enable trace mode with timestamps and per-stage timing",
    )
    return common


def create_parser() -> argparse.ArgumentParser:
    """Build the ``wechatmd`` argument parser with its subcommands.

    Returns
    -------
    argparse.ArgumentParser
        Parser for ``render``, ``check``, ``export`` and ``themes``

    """
    common = _create_common_parser()

    parser = argparse.ArgumentParser(
        prog="wechatmd",
        description="Render Markdown into inline-styled HTML for the WeChat Official Account editor.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""Examples:
  wechatmd render article.md -o article.html
  wechatmd render article.md --theme warm-note --export
  cat article.md | wechatmd render - --theme ./brand-theme.json
  wechatmd check article.md --format json --strict
  wechatmd themes tech-spectrum
""",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_get_version()}")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    render = subparsers.add_parser("render", parents=[common], help="Render Markdown to WeChat HTML")
    render.add_argument("input", metavar="INPUT", help="Markdown file to render, or - for stdin")
    render.add_argument("-o", "--out", metavar="PATH", help="Write HTML to PATH instead of stdout")
    render.add_argument(
        "--theme",
        default=os.environ.get(ENV_THEME, DEFAULT_THEME_ID),
        metavar="ID|PATH",
        help=f"Built-in theme id or theme file (JSON, YAML, TOML). Default: {DEFAULT_THEME_ID} or ${ENV_THEME}",
    )
    render.add_argument(
        "--no-inline-styles",
        dest="inline_styles",
        action="store_false",
        help="Emit markup without theme inline styles",
    )
    render.add_argument(
        "--html-mode",
        choices=HTML_PASSTHROUGH_MODES,
        default="sanitize",
        help="How raw HTML in the source is handled (default: sanitize)",
    )
    render.add_argument(
        "--no-source-lines",
        dest="annotate_source_lines",
        action="store_false",
        help="Do not emit data-source-line attributes",
    )
    render.add_argument(
        "--export",
        action="store_true",
        help="Normalize the output for clipboard export (image grids become tables)",
    )

    check = subparsers.add_parser("check", parents=[common], help="Run pre-publication quality checks")
    check.add_argument("input", metavar="INPUT", help="Markdown file to check, or - for stdin")
    check.add_argument("--format", choices=["text", "json"], default="text", help="Report format (default: text)")
    check.add_argument("--rich", action="store_true", help="Use rich terminal output")
    check.add_argument("--strict", action="store_true", help="Exit with status 1 when any issue is found")

    export = subparsers.add_parser("export", parents=[common], help="Normalize rendered HTML for clipboard export")
    export.add_argument("input", metavar="INPUT", help="Rendered HTML file, or - for stdin")
    export.add_argument("-o", "--out", metavar="PATH", help="Write HTML to PATH instead of stdout")

    themes = subparsers.add_parser("themes", parents=[common], help="List built-in themes or show one as JSON")
    themes.add_argument("theme_id", nargs="?", metavar="ID", help="Theme to print as JSON")
    themes.add_argument("--rich", action="store_true", help="Use rich terminal output")

    return parser
