"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError

from postmd.config import Settings, load_config
from postmd.core.convert import convert
from postmd.core.pipeline import run_convert


LOG_FORMAT = "[%(levelname)s] %(message)s"


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
    except (ValueError, ValidationError) as e:
        _fail(str(e))


def main_callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log at DEBUG level")] = False,
    ):
    """Configure logging once for every command."""
    if verbose:
        level = "DEBUG"
    else:
        # config errors surface from the commands that read directory settings
        try:
            level = load_config().log_level
        except (ValueError, ValidationError):
            level = Settings().log_level
    logging.basicConfig(level=level, format=LOG_FORMAT)


def convert_cmd(
    source: Annotated[Optional[str], typer.Argument(help="Directory of JSON posts (searched recursively)")] = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    ):
    """Convert every JSON post under SOURCE into a Markdown file with front matter."""
    settings = _settings(overrides={"source_dir": source, "output_dir": out})
    output_dir = Path(settings.output_dir)

    try:
        result = run_convert(Path(settings.source_dir), output_dir)
    except FileNotFoundError as e:
        _fail(str(e))
    except OSError as e:
        _fail("Conversion failed", e)

    for src, md_path in result.written:
        typer.echo(f"  {src} -> {md_path}")
    typer.echo(f"Converted {len(result.written)} post(s) to {output_dir}/ ({len(result.skipped)} skipped)")


def render_cmd(
    path: Annotated[Path, typer.Argument(help="HTML file to convert")],
    ):
    """Print the Markdown conversion of a single HTML file without writing anything."""
    try:
        html = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Cannot read {path}", e)
    typer.echo(convert(html), nl=False)
