"""
basetoken CLI.

Commands:
- generate: Write all token files for a seed color
- init:     Scaffold basetoken.yaml with the defaults
- preview:  Show the light/dark semantic colors for a seed
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from basetoken import __version__
from basetoken.core.errors import BasetokenError
from basetoken.core.ir.config import ColorFormat

app = typer.Typer(
    help="Generate tiered CSS design tokens from a single seed color",
    no_args_is_help=True,
)

console = Console()


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"basetoken {__version__}")
        raise typer.Exit()


@app.callback()
def root(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Tiered CSS design tokens: Open Props + Material palettes + semantic API."""


@app.command(name="generate")
def generate_command(
    seed: str = typer.Option(..., "--seed", "-s", help="Seed color as hex, e.g. #FFDE3F"),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output directory (default: output.dir from config, relative to --project)",
    ),
    format: ColorFormat | None = typer.Option(
        None,
        "--format",
        "-f",
        help="Color format (default: format from config)",
    ),
    scheme: str = typer.Option(
        "tonal-spot",
        "--scheme",
        help="Material scheme variant (tonal-spot, expressive, vibrant, ...)",
    ),
    project_dir: Path = typer.Option(  # noqa: B008
        Path("."),
        "--project",
        "-p",
        help="Project directory holding basetoken.yaml",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every written file"),
) -> None:
    """
    Generate all token files for a seed color.

    Examples:
        basetoken generate -s "#FFDE3F"
        basetoken generate -s 769CDF -o src/tokens -f hex
        basetoken generate -s "#FFDE3F" --scheme expressive
    """
    from basetoken.core.config_loader import load_config
    from basetoken.core.generator import generate_tokens

    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    try:
        project_root = project_dir.resolve()
        config = load_config(project_root)
        if output is None:
            # A relative output.dir belongs to the project holding the config
            output = project_root / config.output.dir
        result = generate_tokens(seed, output, format, scheme, config=config)
    except BasetokenError as e:
        console.print(f"[red]Generation failed: {e}[/red]")
        raise typer.Exit(1)

    console.print(
        f"[green]Generated tokens for {result.seed} ({result.scheme}) "
        f"in {result.output_dir}[/green]"
    )
    for path in result.written:
        console.print(f"  wrote {path}")
    for path in result.preserved:
        console.print(f"  [yellow]kept[/yellow] {path} (app-owned)")


@app.command(name="init")
def init_command(
    project_dir: Path = typer.Option(  # noqa: B008
        Path("."),
        "--project",
        "-p",
        help="Project directory",
    ),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing basetoken.yaml"),
) -> None:
    """Scaffold basetoken.yaml with the default configuration."""
    from basetoken.core.config_loader import get_config_path, scaffold_config

    path = scaffold_config(project_dir.resolve(), overwrite=force)
    if path is None:
        console.print(
            f"[yellow]{get_config_path(project_dir)} already exists (use --force)[/yellow]"
        )
        raise typer.Exit(1)
    console.print(f"[green]Created {path}[/green]")


@app.command(name="preview")
def preview_command(
    seed: str = typer.Option(..., "--seed", "-s", help="Seed color as hex"),
    scheme: str = typer.Option("tonal-spot", "--scheme", help="Material scheme variant"),
    format: ColorFormat = typer.Option(ColorFormat.HEX, "--format", "-f", help="Color format"),
) -> None:
    """Show the light and dark semantic colors for a seed without writing files."""
    from basetoken.core.colors import format_color, get_hue
    from basetoken.core.material import generate_material_theme
    from basetoken.core.semantic import COLOR_ROLES

    try:
        theme = generate_material_theme(seed, scheme)
        hue = get_hue(theme.seed)
    except BasetokenError as e:
        console.print(f"[red]Preview failed: {e}[/red]")
        raise typer.Exit(1)

    table = Table(title=f"{theme.seed} ({scheme}), hue {hue:.0f}")
    table.add_column("Role")
    table.add_column("Light")
    table.add_column("Dark")
    for role in COLOR_ROLES:
        light = theme.light.get(role.scheme_key)
        dark = theme.dark.get(role.scheme_key)
        if not light or not dark:
            continue
        table.add_row(
            role.semantic_name,
            f"[on {light}]  [/] {format_color(light, format)}",
            f"[on {dark}]  [/] {format_color(dark, format)}",
        )
    console.print(table)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
