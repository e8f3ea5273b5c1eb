#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wechatmd/cli/commands.py
"""Subcommand handlers for the wechatmd CLI.

Each handler receives the parsed arguments and returns an exit code. Library
errors propagate to :func:`wechatmd.cli.main`, which maps them to exit codes.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.table import Table

from wechatmd.api import prepare_wechat_export_html, render_markdown_to_html, run_quality_checks
from wechatmd.cli.builder import EXIT_ERROR, EXIT_SUCCESS
from wechatmd.exceptions import FileError
from wechatmd.options.render import RenderOptions
from wechatmd.quality import QualityIssue
from wechatmd.theme.presets import get_builtin_theme, list_builtin_themes
from wechatmd.theme.schema import ThemeDefinition, load_theme_file

logger = logging.getLogger(__name__)

THEME_FILE_SUFFIXES = {".json", ".yaml", ".yml", ".toml"}


def read_input(source: str) -> str:
    """Read text from a file path, or from stdin when ``source`` is ``-``.

    Raises
    ------
    FileError
        If the file cannot be read

    """
    if source == "-":
        return sys.stdin.read()

    path = Path(source)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileError(f"Could not read input file: {path}", file_path=str(path), original_error=e) from e


def write_output(content: str, destination: Optional[str]) -> None:
    """Write ``content`` to ``destination``, or to stdout when it is None.

    Raises
    ------
    FileError
        If the file cannot be written

    """
    if destination is None:
        sys.stdout.write(content)
        if content and not content.endswith("\n"):
            sys.stdout.write("\n")
        return

    path = Path(destination)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise FileError(f"Could not write output file: {path}", file_path=str(path), original_error=e) from e
    logger.info(f"Wrote {len(content)} characters to {path}")


def resolve_theme_argument(value: str) -> ThemeDefinition:
    """Resolve ``--theme`` to a built-in preset or a theme file."""
    path = Path(value)
    if path.suffix.lower() in THEME_FILE_SUFFIXES or path.is_file():
        return load_theme_file(path)
    return get_builtin_theme(value)


def handle_render_command(parsed_args: argparse.Namespace) -> int:
    """Render a Markdown file to HTML."""
    markdown = read_input(parsed_args.input)
    theme = resolve_theme_argument(parsed_args.theme)
    options = RenderOptions(
        inline_styles=parsed_args.inline_styles,
        html_mode=parsed_args.html_mode,
        annotate_source_lines=parsed_args.annotate_source_lines,
    )

    html = render_markdown_to_html(markdown, theme=theme, inline_styles=parsed_args.inline_styles, options=options)
    if parsed_args.export:
        html = prepare_wechat_export_html(html)

    write_output(html, parsed_args.out)
    return EXIT_SUCCESS


def _format_location(issue: QualityIssue) -> str:
    if issue.location is None:
        return "-"
    return f"{issue.location.line}:{issue.location.column}"


def _render_rich_issues(console: Console, issues: list[QualityIssue], source: str) -> None:
    if not issues:
        console.print(f"[green]No issues found in {source}[/green]")
        return

    table = Table(title=f"Quality issues in {source} ({len(issues)})")
    table.add_column("Location", style="cyan", no_wrap=True)
    table.add_column("Type", style="magenta", no_wrap=True)
    table.add_column("Message", style="white")
    for issue in issues:
        table.add_row(_format_location(issue), issue.kind, issue.message)
    console.print(table)


def _render_plain_issues(issues: list[QualityIssue]) -> None:
    for issue in issues:
        print(f"{_format_location(issue)}\t{issue.kind}\t{issue.message}")


def handle_check_command(parsed_args: argparse.Namespace) -> int:
    """Report quality issues; with ``--strict`` any issue fails the command."""
    markdown = read_input(parsed_args.input)
    issues = run_quality_checks(markdown)

    if parsed_args.format == "json":
        print(json.dumps([issue.to_dict() for issue in issues], ensure_ascii=False, indent=2))
    elif parsed_args.rich:
        _render_rich_issues(Console(), issues, parsed_args.input)
    else:
        _render_plain_issues(issues)

    if issues and parsed_args.strict:
        return EXIT_ERROR
    return EXIT_SUCCESS


def handle_export_command(parsed_args: argparse.Namespace) -> int:
    """Normalize rendered HTML for clipboard export."""
    html = read_input(parsed_args.input)
    write_output(prepare_wechat_export_html(html), parsed_args.out)
    return EXIT_SUCCESS


def _render_rich_themes(console: Console, themes: list[ThemeDefinition]) -> None:
    table = Table(title=f"Built-in themes ({len(themes)})")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="yellow")
    table.add_column("Primary", style="blue", no_wrap=True)
    table.add_column("Description", style="white")
    for theme in themes:
        table.add_row(theme.id, theme.metadata.name, theme.tokens.color.primary, theme.metadata.description or "")
    console.print(table)
    console.print("\n[dim]Use 'wechatmd themes <id>' to print a theme as JSON[/dim]")


def handle_themes_command(parsed_args: argparse.Namespace) -> int:
    """List the built-in themes, or print one as JSON."""
    if parsed_args.theme_id:
        theme = get_builtin_theme(parsed_args.theme_id)
        print(json.dumps(theme.to_dict(), ensure_ascii=False, indent=2))
        return EXIT_SUCCESS

    themes = list_builtin_themes()
    if parsed_args.rich:
        _render_rich_themes(Console(), themes)
    else:
        for theme in themes:
            print(f"{theme.id}\t{theme.metadata.name}")
    return EXIT_SUCCESS


COMMAND_HANDLERS = {
    "render": handle_render_command,
    "check": handle_check_command,
    "export": handle_export_command,
    "themes": handle_themes_command,
}
