"""Command line interface for strwindows."""

from __future__ import annotations

import logging
from itertools import islice
from pathlib import Path
from typing import Optional, Union

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from strwindows.config import AppConfig
from strwindows.utils.files import SourceDecodeError, read_utf8
from strwindows.web.app import app as web_app
from strwindows.windows import count_windows, iter_spans


console = Console()
app = typer.Typer(help="strwindows - overlapping scalar-value windows over text")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _load_source(text: Optional[str], file: Optional[Path]) -> Union[str, bytes]:
    if file is not None:
        if text is not None:
            raise typer.BadParameter("Pass either TEXT or --file, not both")
        if not file.is_file():
            raise typer.BadParameter(f"File not found: {file}")
        try:
            return read_utf8(file)
        except SourceDecodeError as exc:
            raise typer.BadParameter(str(exc)) from exc
    if text is None:
        raise typer.BadParameter("Provide TEXT or --file")
    return text


@app.command()
def show(
    text: Optional[str] = typer.Argument(None, help="Text to window."),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Read the text from a UTF-8 file"),
    size: int = typer.Option(AppConfig().window_size, "--size", "-n", help="Window width in scalar values"),
    limit: int = typer.Option(AppConfig().display_limit, help="Maximum number of windows to display"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Print every window of the text."""
    _setup_logging(verbose)
    if limit < 1:
        raise typer.BadParameter(f"--limit must be >= 1, got {limit}")
    source = _load_source(text, file)
    try:
        spans = iter_spans(source, size)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    shown = list(islice(spans, limit))
    if not shown:
        console.print(f"[yellow]No windows of size {size}.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("#")
    table.add_column("Start")
    table.add_column("End")
    table.add_column("Window")

    for span in shown:
        table.add_row(str(span.index), str(span.start), str(span.end), Text(span.text))

    console.print(table)
    remaining = count_windows(source, size) - len(shown)
    if remaining:
        console.print(f"[dim]... {remaining} more windows not shown[/dim]")


@app.command()
def count(
    text: Optional[str] = typer.Argument(None, help="Text to window."),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Read the text from a UTF-8 file"),
    size: int = typer.Option(AppConfig().window_size, "--size", "-n", help="Window width in scalar values"),
) -> None:
    """Print how many windows the text produces."""
    source = _load_source(text, file)
    try:
        total = count_windows(source, size)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    console.print(f"Windows: {total}")


@app.command()
def web(
    host: str = typer.Option("127.0.0.1", help="Host interface"),
    port: int = typer.Option(8000, help="Server port"),
) -> None:
    """Start the HTTP interface."""
    try:
        import uvicorn
    except ImportError as exc:  # pragma: no cover - defensive
        raise typer.BadParameter(
            "uvicorn is not installed. Install the web extras with \"python -m pip install '.[web]'\""
        ) from exc

    console.print(f"Starting web interface on http://{host}:{port}")
    uvicorn.run(
        web_app,
        host=host,
        port=port,
        reload=False,
        log_level="info",
    )


if __name__ == "__main__":  # pragma: no cover
    app()
