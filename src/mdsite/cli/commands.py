"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from mdsite.config import Settings, load_config
from mdsite.core.models import BuildResult
from mdsite.core.parse import discover_chapters, read_doc
from mdsite.core.pipeline import run_build
from mdsite.core.render.renderer import render_doc


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _echo_page(result: BuildResult) -> None:
    typer.echo(f"> {result.source.name}")


def build_cmd(
    root: Annotated[Path, typer.Argument(help="Directory holding the chapter directories and stylesheet")] = Path("."),
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Per-chapter output directory name")] = None,
    stylesheet: Annotated[Optional[str], typer.Option("--stylesheet", help="Shared stylesheet, relative to ROOT")] = None,
    prefix: Annotated[Optional[str], typer.Option("--chapter-prefix", help="Name prefix of chapter directories")] = None,
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    ):
    """Render every chapter's markdown files into standalone HTML pages."""
    settings = _settings(overrides={
        "output_dir": out, "stylesheet": stylesheet,
        "chapter_prefix": prefix, "parser_config": parser,
    })
    if not root.is_dir():
        _fail(f"Not a directory: {root}")
    if not discover_chapters(root, settings.chapter_prefix):
        typer.echo("No chapter directories found.")
        raise typer.Exit(1)

    try:
        results = run_build(
            root,
            chapter_prefix=settings.chapter_prefix,
            output_dir=settings.output_dir,
            assets_dir=settings.assets_dir,
            stylesheet=settings.stylesheet,
            parser_config=settings.parser_config,
            on_page=_echo_page,
        )
    except (OSError, RuntimeError) as e:
        _fail("Build failed", e)

    typer.echo(f"Built {len(results)} page(s).")


def render_cmd(
    path: Annotated[Path, typer.Argument(exists=True, dir_okay=False, readable=True, help="Markdown file to render")],
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    ):
    """Print the rendered HTML body of a single markdown file."""
    settings = _settings(overrides={"parser_config": parser})
    try:
        rendered = render_doc(read_doc(path), settings.parser_config)
    except (OSError, KeyError, UnicodeDecodeError) as e:
        _fail(f"Failed to render {path}", e)
    typer.echo(rendered.body, nl=False)
