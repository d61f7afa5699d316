"""Command-line interface for letter-section reconstruction."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from .config import load_config, normalize_extension
from .errors import SourceReadError
from .files import discover_pages
from .geometry import region_from_string
from .logging import configure_logging, get_logger
from .models import Region
from .pipeline import scan
from .report import summary_lines, to_json

logger = get_logger(__name__)

app = typer.Typer(add_completion=False, help="Dictionary letter-section reconstruction from hOCR pages")


@app.callback()
def main_callback() -> None:
    """Reconstruct the letter sections of a scanned dictionary."""


@app.command("scan")
def scan_command(
    input_dir: Path = typer.Argument(..., help="Folder with one hOCR file per page"),
    start_page: Optional[int] = typer.Option(
        None, "--start-page", help="First page to process (0-based, inclusive)"
    ),
    end_page: Optional[int] = typer.Option(
        None, "--end-page", help="Page to stop at (exclusive, default: all pages)"
    ),
    title_region: Optional[str] = typer.Option(
        None, "--title-region", help="Title band as minX,minY,maxX,maxY"
    ),
    index_region: Optional[str] = typer.Option(
        None, "--index-region", help="Index band as minX,minY,maxX,maxY"
    ),
    extension: Optional[str] = typer.Option(None, "--extension", help="Page file extension"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the JSON report here"),
    json_logs: bool = typer.Option(False, "--json-logs", help="Emit logs as JSON lines"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Log level (default: LOG_LEVEL or INFO)"),
) -> None:
    try:
        config = load_config().with_overrides(
            start_page=start_page,
            end_page=end_page,
            title_region=_parse_region_option(title_region, "--title-region"),
            index_region=_parse_region_option(index_region, "--index-region"),
            extension=normalize_extension(extension) if extension is not None else None,
            log_level=log_level.upper() if log_level else None,
            log_json=True if json_logs else None,
        )
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2) from exc

    configure_logging(config.log_level, config.log_json)

    if not input_dir.is_dir():
        typer.echo(f"Error: input folder not found: {input_dir}", err=True)
        raise typer.Exit(code=2)

    try:
        paths = discover_pages(input_dir, config.extension)
        result = scan(paths, config)
    except SourceReadError as exc:
        typer.echo(f"Error: {exc}", err=True)
        if output is not None and exc.partial is not None:
            output.write_text(to_json(exc.partial), encoding="utf-8")
            typer.echo(f"Partial report written to {output}", err=True)
        raise typer.Exit(code=2) from exc
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2) from exc

    for line in summary_lines(result):
        typer.echo(line)
    if output is not None:
        output.write_text(to_json(result), encoding="utf-8")
        typer.echo(f"Report written to {output}")


def _parse_region_option(value: Optional[str], flag: str) -> Optional[Region]:
    if value is None:
        return None
    try:
        return region_from_string(value)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint=flag) from exc


def main():
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
