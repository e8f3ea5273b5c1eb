"""Command-line interface for the wechatmd renderer.

This module provides the ``wechatmd`` command. Subcommands render Markdown to
WeChat-ready HTML, run quality checks, normalize rendered HTML for clipboard
export and inspect the built-in themes.

Environment Variable Support
----------------------------
WECHATMD_THEME
    Default for ``render --theme``
WECHATMD_LOG_LEVEL
    Default for ``--log-level``

Examples
--------
Render a file with the default theme::

    $ wechatmd render article.md -o article.html

Render from stdin with a custom theme file and export normalization::

    $ cat article.md | wechatmd render - --theme brand.yaml --export

Fail a CI step when quality issues exist::

    $ wechatmd check article.md --strict

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import argparse
import logging
import sys

from wechatmd.cli.builder import (
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    create_parser,
    get_exit_code_for_exception,
)
from wechatmd.cli.commands import COMMAND_HANDLERS
from wechatmd.exceptions import ThemeValidationError, WechatMdError
from wechatmd.logging_utils import configure_logging

logger = logging.getLogger(__name__)

__all__ = [
    "EXIT_ERROR",
    "EXIT_FILE_ERROR",
    "EXIT_SUCCESS",
    "EXIT_VALIDATION_ERROR",
    "create_parser",
    "main",
]


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Configure logging from ``--trace``, ``--verbose`` and ``--log-level``.

    ``--trace`` takes precedence, then ``--verbose`` (only when the level was
    left at its WARNING default), then ``--log-level``.
    """
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _report_error(error: WechatMdError) -> None:
    if not isinstance(error, ThemeValidationError):
        print(f"Error: {error.message}", file=sys.stderr)
        return

    print(f"Error: {error.summary}", file=sys.stderr)
    for violation in error.violations:
        print(f"  {violation}", file=sys.stderr)


def main(args: list[str] | None = None) -> int:
    """Run the CLI and return its exit code.

    Parameters
    ----------
    args : list of str, optional
        Arguments without the program name; ``sys.argv[1:]`` when omitted

    Returns
    -------
    int
        0 on success, 1 on general errors, 3 on validation errors and 4 on
        file errors

    """
    parser = create_parser()
    try:
        parsed_args = parser.parse_args(args)
    except SystemExit as e:
        # --help and --version exit with 0; usage errors count as validation errors
        return EXIT_SUCCESS if not e.code else EXIT_VALIDATION_ERROR

    _setup_logging_level(parsed_args)
    handler = COMMAND_HANDLERS[parsed_args.command]

    try:
        return handler(parsed_args)
    except WechatMdError as e:
        logger.debug(f"Command {parsed_args.command} failed", exc_info=True)
        _report_error(e)
        return get_exit_code_for_exception(e)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=parsed_args.trace)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
