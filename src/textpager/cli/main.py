"""CLI entry point for textpager.

Invoked as::

    textpager [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m textpager.cli.main

Commands
--------
show        Page through the lines of a text file
renderers   List the available output renderers
version     Show version information
"""
from __future__ import annotations

import shlex
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from textpager.config import PagerConfig
    from textpager.text.nodes import Fragment

console = Console()
err_console = Console(stderr=True)


def _read_lines(path: str) -> list[tuple[int, str]]:
    """Return the non-blank lines of ``path`` with their line numbers, exiting on error."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] File not found: {path}")
        sys.exit(1)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {path}: {exc}")
        sys.exit(1)
    return [(number, line) for number, line in enumerate(text.splitlines(), start=1) if line.strip()]


def _load_config_or_exit(path: str | None) -> "PagerConfig":
    """Load the configuration file, or the defaults when no path is given."""
    from textpager.config import ConfigError, PagerConfig, load_config

    if path is None:
        return PagerConfig()
    try:
        return load_config(path)
    except ConfigError as exc:
        err_console.print(f"[red]Config error:[/red] {exc}")
        sys.exit(1)


def _render_line(item: tuple[int, str]) -> "Fragment":
    from textpager.text.nodes import Colour, concat, literal

    number, line = item
    return concat(literal(f"{number}. ", Colour.INFO), line)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="textpager")
def cli() -> None:
    """Paginate styled, interactive text output."""


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from textpager import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]textpager[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# renderers command
# ---------------------------------------------------------------------------


@cli.command(name="renderers")
def renderers_command() -> None:
    """List the built-in and installed output renderers."""
    from textpager.render import renderer_registry

    console.print("[bold]Available renderers:[/bold]")
    for name, summary in renderer_registry.summaries():
        console.print(f"  [cyan]{name}[/cyan]  {summary}", highlight=False)


# ---------------------------------------------------------------------------
# show command
# ---------------------------------------------------------------------------


@cli.command(name="show")
@click.argument("file", type=click.Path(exists=False))
@click.option("--page", "-p", type=int, default=1, show_default=True, help="Page to show")
@click.option("--per-page", type=int, default=None, help="Lines per page (default from config, else 10)")
@click.option("--header", "header_text", default=None, help="Heading shown above the page")
@click.option(
    "--format",
    "output_format",
    default="rich",
    show_default=True,
    help="Output renderer; see `textpager renderers`",
)
@click.option("--config", "config_path", default=None, help="Path to a YAML configuration file")
def show_command(
    file: str,
    page: int,
    per_page: int | None,
    header_text: str | None,
    output_format: str,
    config_path: str | None,
) -> None:
    """Page through the non-blank lines of a text file.

    FILE is the path to the file to page.

    Examples:

    \b
        textpager show notes.txt
        textpager show notes.txt --page 3 --per-page 5 --header Notes
        textpager show notes.txt --format json
    """
    from textpager.pager import InvalidPagerArgumentError, Pager
    from textpager.render import ConsoleSink, RendererNotFoundError, renderer_registry

    config = _load_config_or_exit(config_path)

    try:
        renderer = renderer_registry.create(output_format, config)
    except RendererNotFoundError as exc:
        err_console.print(f"[red]Error:[/red] {exc.args[0]}")
        sys.exit(1)

    lines = _read_lines(file)

    # Rebuild the invocation without the page so navigation buttons re-run it.
    argv = ["textpager", "show", file]
    if per_page is not None:
        argv += ["--per-page", str(per_page)]
    if header_text is not None:
        argv += ["--header", header_text]
    if output_format != "rich":
        argv += ["--format", output_format]
    if config_path is not None:
        argv += ["--config", config_path]
    argv.append("--page")

    try:
        pager = Pager(
            shlex.join(argv),
            header_text,
            lines,
            _render_line,
            page_size=per_page if per_page is not None else config.page_size,
        )
    except InvalidPagerArgumentError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)

    sink = ConsoleSink(console, renderer)
    if not pager.send_page(page, sink):
        sys.exit(1)


if __name__ == "__main__":
    cli()
