"""Typer CLI for regfind."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from . import __version__
from .logging_config import setup_logging
from .lookup import lookup
from .markup import Color, RenderConfig, render, resolve_color, strip_markup
from .parser import RegistryError, load_registry
from .settings import Settings, SettingsError, load_settings
from .table import build_table
from .terminal import ConsoleTerminal

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="regfind",
    help="regfind — look up registered classes and interfaces",
    add_completion=False,
    invoke_without_command=True,
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"regfind v{__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(None, "--version", "-V", callback=version_callback, is_eager=True),
) -> None:
    """regfind — look up registered classes and interfaces."""
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def _load_settings(config: Optional[str], verbose: bool) -> Settings:
    """Load settings and configure logging, or exit with an error."""
    try:
        settings = load_settings(config)
    except SettingsError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(1)

    setup_logging(logging.DEBUG if verbose else settings.log_level, settings.log_file)
    return settings


def _color_option(name: Optional[str], what: str) -> Optional[Color]:
    if not name:
        return None
    color = resolve_color(name)
    if color is None:
        console.print(
            f"[red]Error: unknown {what} color '{name}'.[/red] "
            f"Known colors: {', '.join(Color.__members__)}",
            highlight=False,
        )
        raise typer.Exit(1)
    return color


def _prompt_query() -> str:
    """Ask for the identifier interactively using InquirerPy."""
    from InquirerPy import inquirer

    return inquirer.text(message="Identifier, name or fragment:").execute() or ""


def _pause_before_exit(pause: bool) -> None:
    if pause:
        console.input("\n[dim]Press Enter to exit...[/dim]")


# Common options as defaults
_config_opt = typer.Option(None, "--config", help="Settings file (yaml)")
_verbose_opt = typer.Option(False, "-v", "--verbose", help="Debug logging to stderr")


@app.command()
def find(
    query: Optional[str] = typer.Argument(None, help="GUID, exact name or fragment (prompted if omitted)"),
    registry: Optional[str] = typer.Option(None, "-r", "--registry", help="Registry file (txt or yaml)"),
    color: Optional[str] = typer.Option(None, "--color", help="Highlight color name"),
    plain: bool = typer.Option(False, "--plain", help="Disable colored output"),
    pause: Optional[bool] = typer.Option(None, "--pause/--no-pause", help="Wait for Enter before exiting"),
    config: Optional[str] = _config_opt,
    verbose: bool = _verbose_opt,
) -> None:
    """Look up a registry identifier and print the matches."""
    settings = _load_settings(config, verbose)
    registry_path = registry or settings.registry
    if not registry_path:
        console.print("[red]Error: no registry file given (use -r or set 'registry' in settings).[/red]")
        raise typer.Exit(1)

    highlight_color = settings.highlight_color
    if color:
        highlight_color = _color_option(color, "highlight").name
    should_pause = settings.pause_on_exit if pause is None else pause

    try:
        reg = load_registry(registry_path)
    except RegistryError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(1)

    if query is None:
        query = _prompt_query()

    result = lookup(reg, query)
    if not result:
        console.print(f"[yellow]No entries match '{escape(query)}'.[/yellow]", highlight=False)
        _pause_before_exit(should_pause)
        raise typer.Exit(1)

    use_color = not plain and console.is_terminal
    table = build_table(
        result,
        query.strip(),
        color=highlight_color,
        config=settings.render_config(),
        plain=not use_color,
    )
    console.print(table)
    console.print(f"[dim]{len(result.entries)} match(es) by {result.tier.value}[/dim]")
    _pause_before_exit(should_pause)


@app.command()
def show(
    markup: str = typer.Argument(..., help="Text with #color# or #fg:bg# directives"),
    fg: Optional[str] = typer.Option(None, "--fg", help="Default foreground color"),
    bg: Optional[str] = typer.Option(None, "--bg", help="Default background color"),
    no_newline: bool = typer.Option(False, "-n", "--no-newline", help="Do not write the trailing line break"),
    plain: bool = typer.Option(False, "--plain", help="Print the text without directives or colors"),
) -> None:
    """Render a marked-up string, e.g. 'see #yellow#this# word'."""
    if plain:
        console.print(strip_markup(markup), end="" if no_newline else "\n", markup=False, highlight=False)
        return

    render_config = RenderConfig(
        default_foreground=_color_option(fg, "foreground"),
        default_background=_color_option(bg, "background"),
        suppress_trailing_newline=no_newline,
    )
    render(markup, ConsoleTerminal(console), render_config)


@app.command()
def colors() -> None:
    """List known color names, each drawn in its own color."""
    terminal = ConsoleTerminal(console)
    for name in Color.__members__:
        render(f"#{name}#{name}#", terminal)


def main() -> None:
    """Entry point."""
    app()
