"""Presets commands for listing, showing and copying bundled grids."""

from pathlib import Path
from typing import Annotated

import typer

from cladding.application.factory import get_factory
from cladding.application.presets import PresetManager, PresetNotFoundError
from cladding.infrastructure.formatters import GridDiagramFormatter

presets_app = typer.Typer(
    name="presets",
    help="Browse and copy preset grids.",
)


def _exit_unknown(manager: PresetManager, name: str) -> None:
    available = ", ".join(n for n, _ in manager.list_presets())
    typer.echo(f"Error: Preset not found: {name}", err=True)
    typer.echo(f"Available presets: {available}", err=True)
    raise typer.Exit(code=1)


@presets_app.command(name="list")
def list_presets() -> None:
    """List all bundled presets.

    Example:
        cladding presets list
    """
    manager = PresetManager()
    presets = manager.list_presets()

    typer.echo("Available presets:")
    typer.echo()

    max_name_width = max(len(name) for name, _ in presets) if presets else 0
    for name, description in presets:
        typer.echo(f"  {name:<{max_name_width}}  - {description}")

    typer.echo()
    typer.echo("Use 'cladding presets init <name>' to copy a preset to a file.")


@presets_app.command(name="show")
def show_preset(
    name: Annotated[str, typer.Argument(help="Name of the preset to show")],
    raw: Annotated[
        bool,
        typer.Option("--json", help="Print the preset document instead of a diagram"),
    ] = False,
) -> None:
    """Show a preset as a grid diagram or as its JSON document.

    Examples:
        cladding presets show u-shape
        cladding presets show l-shape --json
    """
    manager = PresetManager()
    if not manager.preset_exists(name):
        _exit_unknown(manager, name)

    if raw:
        typer.echo(manager.get_preset(name))
        return

    grid = manager.get_grid(name)
    result = get_factory().create_engine().validate_and_compute(grid)
    typer.echo(GridDiagramFormatter().format(grid, result))


@presets_app.command(name="init")
def init_preset(
    name: Annotated[str, typer.Argument(help="Name of the preset to copy")],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path (default: <name>.json)"),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite existing file"),
    ] = False,
) -> None:
    """Copy a preset to a new grid document.

    Examples:
        cladding presets init straight
        cladding presets init u-shape --output garden.json
    """
    manager = PresetManager()

    if output is None:
        output = Path(f"{name}.json")

    if not manager.preset_exists(name):
        _exit_unknown(manager, name)

    if output.exists() and not force:
        typer.echo(f"Error: File already exists: {output}", err=True)
        typer.echo("Use --force to overwrite.", err=True)
        raise typer.Exit(code=1)

    try:
        manager.init_preset(name, output)
        typer.echo(f"Created: {output}")
    except PresetNotFoundError:
        _exit_unknown(manager, name)
    except OSError as e:
        typer.echo(f"Error: Could not write file: {e}", err=True)
        raise typer.Exit(code=1)
