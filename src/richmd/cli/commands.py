"""CLI command implementations"""

import json
import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer

from richmd.config import Settings, load_config
from richmd.core.export import render_html, render_text, to_dict
from richmd.core.normalize import normalize, strip_html
from richmd.core.pipeline import discover_files, parse
from richmd.core.styles import RenderStyle, get_theme
from richmd.logging_config import configure_logging


logger = logging.getLogger(__name__)

PREVIEW_CHARS = 60


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    configure_logging(settings.log_level)
    return settings


def _sources(path: str) -> list[tuple[str, str]]:
    """Return (name, text) pairs for '-' (stdin), a single file, or every source file in a directory."""
    if path == "-":
        return [("-", sys.stdin.read())]
    p = Path(path)
    if not p.exists():
        _fail(f"Path not found: {path}")
    files = [p] if p.is_file() else discover_files(p)
    if not files:
        _fail(f"No source files found under {path}")
    try:
        return [(str(f), f.read_text(encoding="utf-8")) for f in files]
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Could not read {path}", e)


def _echo_each(results: list[tuple[str, str]]) -> None:
    """Print outputs, with a header per source when more than one was given."""
    for name, out in results:
        if len(results) > 1:
            typer.echo(f"==> {name} <==")
        typer.echo(out)


def render_cmd(
    path: Annotated[str, typer.Argument(help="File, directory, or '-' for stdin")],
    fmt: Annotated[Optional[str], typer.Option("--format", help="text, html or json")] = None,
    theme: Annotated[Optional[str], typer.Option("--theme", help="warm, light or dark (html only)")] = None,
    font_size: Annotated[Optional[int], typer.Option("--font-size", help="Base font size in px (html only)")] = None,
    ):
    """Parse HTML or pseudo-Markdown and render the resulting document."""
    settings = _settings(overrides={"output_format": fmt, "theme": theme, "font_size": font_size})
    style = RenderStyle(font_size=settings.font_size, theme=get_theme(settings.theme))

    docs = [(name, parse(text)) for name, text in _sources(path)]
    logger.debug("rendering %d document(s) as %s", len(docs), settings.output_format)

    if settings.output_format == "json":
        payload = [{"path": name, **to_dict(doc)} for name, doc in docs]
        typer.echo(json.dumps(payload[0] if len(payload) == 1 else payload, indent=2, ensure_ascii=False))
    elif settings.output_format == "html":
        _echo_each([(name, render_html(doc, style)) for name, doc in docs])
    else:
        _echo_each([(name, render_text(doc)) for name, doc in docs])


def normalize_cmd(
    path: Annotated[str, typer.Argument(help="File, directory, or '-' for stdin")],
    ):
    """Print the pseudo-Markdown produced from HTML input."""
    _settings()
    _echo_each([(name, normalize(text)) for name, text in _sources(path)])


def strip_cmd(
    path: Annotated[str, typer.Argument(help="File, directory, or '-' for stdin")],
    ):
    """Print plain editable text with every HTML tag removed."""
    _settings()
    _echo_each([(name, strip_html(text)) for name, text in _sources(path)])


def blocks_cmd(
    path: Annotated[str, typer.Argument(help="File, directory, or '-' for stdin")],
    ):
    """List the classified blocks, one line each."""
    _settings()
    for name, text in _sources(path):
        doc = parse(text)
        typer.echo(f"{name}: {len(doc.blocks)} block(s)")
        for i, block in enumerate(doc.blocks):
            detail = getattr(block, "text", "")
            if len(detail) > PREVIEW_CHARS:
                detail = detail[:PREVIEW_CHARS] + "..."
            typer.echo(f"  {i:>3} {block.kind:<10} {detail!r}" if detail else f"  {i:>3} {block.kind}")
