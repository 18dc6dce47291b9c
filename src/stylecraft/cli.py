"""
Stylecraft command line.

Commands:
- build: Compile a stylesheet source file to CSS
- vars: Show the collected theme variables per partition
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from ._version import __version__
from .config import CompilerConfig, find_config, load_config
from .errors import StylecraftError
from .loader import apply_source, load_source
from .session import CompilerSession
from .specs import ThemeMode

app = typer.Typer(
    help="Compile theme and style descriptions into CSS.",
    no_args_is_help=True,
)

console = Console()


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"stylecraft {__version__}")
        raise typer.Exit()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _resolve_config(source: Path, config_path: Path | None) -> CompilerConfig:
    if config_path is not None and not config_path.exists():
        typer.echo(f"Config not found: {config_path}", err=True)
        raise typer.Exit(code=1)
    return load_config(config_path or find_config(source.resolve()))


def _compile_session(source: Path, config: CompilerConfig) -> CompilerSession:
    session = CompilerSession(config)
    apply_source(session, load_source(source))
    return session


@app.callback()
def main_callback(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """Stylecraft: themed CSS with variable hoisting and rule deduplication."""


@app.command("build")
def build(
    source: Annotated[Path, typer.Argument(help="Stylesheet source (.json, .yaml, .toml)")],
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Write CSS here instead of stdout")
    ] = None,
    config_path: Annotated[
        Path | None, typer.Option("--config", "-c", help="stylecraft.toml or pyproject.toml")
    ] = None,
    no_styles: Annotated[
        bool, typer.Option("--no-styles", help="Only emit the variable blocks")
    ] = False,
    no_dedupe: Annotated[
        bool, typer.Option("--no-dedupe", help="Keep rules with identical bodies separate")
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
) -> None:
    """Compile a stylesheet source file to CSS.

    Examples:
        stylecraft build theme.yaml                 # CSS to stdout
        stylecraft build theme.yaml -o dist/app.css
        stylecraft build theme.json --no-styles     # Variables only
    """
    _setup_logging(verbose)
    try:
        config = _resolve_config(source, config_path)
        if no_dedupe:
            config = config.model_copy(update={"dedupe": False})
        session = _compile_session(source, config)
    except StylecraftError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)

    css = session.css(include_styles=not no_styles)

    if output is None:
        typer.echo(css, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(css, encoding="utf-8")
    size_kb = len(css.encode("utf-8")) / 1024
    console.print(f"[green]Wrote[/green] {output} ({size_kb:.1f} KB)")


@app.command("vars")
def show_vars(
    source: Annotated[Path, typer.Argument(help="Stylesheet source (.json, .yaml, .toml)")],
    config_path: Annotated[
        Path | None, typer.Option("--config", "-c", help="stylecraft.toml or pyproject.toml")
    ] = None,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show theme variables per partition, including hoisted defaults."""
    try:
        session = _compile_session(source, _resolve_config(source, config_path))
    except StylecraftError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)

    hoisted = set(session.optimize())

    if output_json:
        data = {mode.value: session.store.partition(mode) for mode in ThemeMode}
        typer.echo(json.dumps(data, indent=2))
        return

    table = Table(title="Theme variables")
    table.add_column("Partition", style="dim")
    table.add_column("Variable")
    table.add_column("Value")
    table.add_column("Hoisted")

    count = 0
    for mode in ThemeMode:
        for name, value in session.store.partition(mode).items():
            table.add_row(mode.value, name, value, "yes" if name in hoisted else "")
            count += 1

    if not count:
        console.print("[dim]No variables found.[/dim]")
        return

    console.print(table)
    console.print(f"\n[dim]{count} variable(s) shown[/dim]")


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
