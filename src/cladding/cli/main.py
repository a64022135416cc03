"""Typer CLI for cladding calculation."""

import logging
from dataclasses import replace
from pathlib import Path
from typing import Annotated

import typer

from cladding.application import PresetNotFoundError, ServiceFactory
from cladding.application.config import (
    ConfigError,
    GridDocument,
    document_to_settings,
    load_document,
)
from cladding.cli.commands import display_load_error, presets_app, validate_command
from cladding.domain import EngineSettings, PanelHeight
from cladding.infrastructure import (
    BomExporter,
    GridDiagramFormatter,
    JsonExporter,
    LoggingObserver,
    RequirementsFormatter,
)
from cladding.infrastructure.exporters import ExporterRegistry, ExportManager

OUTPUT_FORMATS = ("text", "json", "csv", "bom")

app = typer.Typer(
    name="cladding",
    help="Calculate cladding panels and connectors for irrigation cube runs.",
)

app.command(name="validate")(validate_command)
app.add_typer(presets_app, name="presets")


def _configure_logging(verbose: bool) -> ServiceFactory:
    """Return a factory, logging every calculation step when verbose."""
    if not verbose:
        return ServiceFactory()
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return ServiceFactory(observer=LoggingObserver())


def _load_input(grid_file: Path | None, preset: str | None, factory: ServiceFactory) -> GridDocument:
    """Load the grid document named on the command line.

    Exactly one of ``grid_file`` and ``preset`` must be given.
    """
    if (grid_file is None) == (preset is None):
        typer.echo("Error: Provide either a grid file or --preset", err=True)
        raise typer.Exit(code=1)

    if preset is not None:
        manager = factory.get_preset_manager()
        try:
            return manager.load_preset(preset)
        except PresetNotFoundError as e:
            available = ", ".join(name for name, _ in manager.list_presets())
            typer.echo(f"Error: {e}", err=True)
            typer.echo(f"Available presets: {available}", err=True)
            raise typer.Exit(code=1)

    try:
        return load_document(grid_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)


def _resolve_settings(
    document: GridDocument,
    clad_only: bool,
    repair_flow: bool,
    height: str | None,
) -> EngineSettings:
    """Merge command line flags over the document's options."""
    settings = document_to_settings(document)
    changes = {}
    if clad_only:
        changes["count_clad_only"] = True
    if repair_flow:
        changes["repair_flow"] = True
    if height is not None:
        try:
            changes["height"] = PanelHeight(height)
        except ValueError:
            choices = ", ".join(h.value for h in PanelHeight)
            typer.echo(f"Error: Unknown height '{height}'. Expected one of: {choices}", err=True)
            raise typer.Exit(code=1)
    return replace(settings, **changes) if changes else settings


GridFileArg = Annotated[
    Path | None,
    typer.Argument(help="Path to a JSON grid document"),
]
PresetOpt = Annotated[
    str | None,
    typer.Option("--preset", "-p", help="Use a bundled preset instead of a file"),
]
VerboseOpt = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Log every calculation step to stderr"),
]


@app.command()
def calculate(
    grid_file: GridFileArg = None,
    preset: PresetOpt = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json, csv, bom"),
    ] = "text",
    clad_only: Annotated[
        bool,
        typer.Option("--clad-only", help="Count only faces marked as clad"),
    ] = False,
    repair_flow: Annotated[
        bool,
        typer.Option("--repair-flow", help="Rewrite discontinuous flow instead of failing"),
    ] = False,
    height: Annotated[
        str | None,
        typer.Option("--height", help="Cube height: standard or extra_tall"),
    ] = None,
    costs: Annotated[
        bool,
        typer.Option("--costs", help="Include unit prices in csv and bom output"),
    ] = False,
    verbose: VerboseOpt = False,
) -> None:
    """Calculate panel bundles and connectors for a grid.

    Options on the command line override the document's own options.
    Exits with code 1 when the cube placement is invalid.

    Examples:
        cladding calculate my-run.json
        cladding calculate --preset u-shape --clad-only
        cladding calculate my-run.json --format csv --costs
    """
    if output_format not in OUTPUT_FORMATS:
        typer.echo(
            f"Error: Unknown format '{output_format}'. "
            f"Expected one of: {', '.join(OUTPUT_FORMATS)}",
            err=True,
        )
        raise typer.Exit(code=1)

    factory = _configure_logging(verbose)
    document = _load_input(grid_file, preset, factory)
    settings = _resolve_settings(document, clad_only, repair_flow, height)

    command = factory.create_calculate_command()
    output = command.execute_document(document, settings)

    if output.errors:
        for error in output.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    if output_format == "json":
        typer.echo(JsonExporter().export_string(output))
    elif output_format == "csv":
        typer.echo(BomExporter("csv", include_costs=costs).export_string(output), nl=False)
    elif output_format == "bom":
        typer.echo(BomExporter("text", include_costs=costs).export_string(output))
    else:
        typer.echo(RequirementsFormatter().format(output))

    if not output.is_valid:
        raise typer.Exit(code=1)


@app.command()
def diagram(
    grid_file: GridFileArg = None,
    preset: PresetOpt = None,
    repair_flow: Annotated[
        bool,
        typer.Option("--repair-flow", help="Rewrite discontinuous flow instead of failing"),
    ] = False,
    verbose: VerboseOpt = False,
) -> None:
    """Show an ASCII diagram of a grid with the assigned flow."""
    factory = _configure_logging(verbose)
    document = _load_input(grid_file, preset, factory)
    settings = _resolve_settings(document, False, repair_flow, None)

    output = factory.create_calculate_command().execute_document(document, settings)
    if output.grid is None:
        for error in output.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    typer.echo(GridDiagramFormatter().format(output.grid, output.result))

    if not output.is_valid:
        for message in output.error_messages:
            typer.echo(f"Error: {message}", err=True)
        raise typer.Exit(code=1)


@app.command()
def export(
    grid_file: GridFileArg = None,
    preset: PresetOpt = None,
    formats: Annotated[
        str,
        typer.Option("--formats", help="Comma-separated formats, or 'all'"),
    ] = "all",
    output_dir: Annotated[
        Path,
        typer.Option("--output-dir", "-o", help="Directory for exported files"),
    ] = Path("."),
    project_name: Annotated[
        str,
        typer.Option("--project-name", help="Project name for output file naming"),
    ] = "cladding",
    clad_only: Annotated[
        bool,
        typer.Option("--clad-only", help="Count only faces marked as clad"),
    ] = False,
) -> None:
    """Export a calculation to one or more files.

    Examples:
        cladding export my-run.json --formats json,bom --output-dir ./out
        cladding export --preset l-shape --project-name garden
    """
    available = ExporterRegistry.available_formats()
    if formats.lower() == "all":
        selected = available
    else:
        selected = [f.strip().lower() for f in formats.split(",") if f.strip()]

    invalid = [f for f in selected if f not in available]
    if invalid or not selected:
        typer.echo(f"Unknown formats: {', '.join(invalid) or formats}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)

    factory = ServiceFactory()
    document = _load_input(grid_file, preset, factory)
    settings = _resolve_settings(document, clad_only, False, None)
    output = factory.create_calculate_command().execute_document(document, settings)

    if not output.is_valid:
        for message in output.error_messages:
            typer.echo(f"Error: {message}", err=True)
        raise typer.Exit(code=1)

    manager = ExportManager(output_dir)
    try:
        files = manager.export_all(selected, output, project_name)
    except OSError as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("Exported files:")
    for fmt, path in files.items():
        typer.echo(f"  {fmt.upper()}: {path}")


if __name__ == "__main__":
    app()
