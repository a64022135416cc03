"""The ``cladding validate`` command.

Reports JSON syntax and schema errors, cube placements that cannot be
clad, and advisories about cladding and supplied flow, without printing
requirements.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from cladding.application.config import (
    ConfigError,
    ValidationResult,
    load_document,
    validate_document,
)


def validate_command(
    grid_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON grid document to validate"),
    ],
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the findings as JSON"),
    ] = False,
) -> None:
    """Validate a grid document.

    Exit codes:
        0 - Document is valid with no warnings
        1 - Document has errors (cannot be calculated)
        2 - Document is valid but has warnings

    Example:
        cladding validate my-run.json
    """
    if not as_json:
        typer.echo(f"Validating {grid_file}...")
        typer.echo()

    try:
        document = load_document(grid_file)
    except ConfigError as e:
        if as_json:
            typer.echo(json.dumps(_load_error_to_dict(e), indent=2))
        else:
            display_load_error(e)
        raise typer.Exit(code=1)

    result = validate_document(document)
    if as_json:
        typer.echo(json.dumps(_result_to_dict(result), indent=2))
    else:
        _display_validation_result(result)
    raise typer.Exit(code=result.exit_code)


def display_load_error(error: ConfigError) -> None:
    """Explain why a grid document could not be loaded, on stderr."""
    typer.echo("Errors:", err=True)
    match error.error_type:
        case "file_not_found":
            typer.echo(f"  File not found: {error.path}", err=True)
        case "json_parse":
            typer.echo("  Invalid JSON syntax", err=True)
            for detail in error.details:
                typer.echo(
                    f"    Line {detail['line']}, Column {detail['column']}: {detail['message']}",
                    err=True,
                )
        case "validation":
            for detail in error.details:
                typer.echo(f"  {detail['path'] or 'document'}: {detail['message']}", err=True)
                value = detail.get("value")
                if value is not None and not isinstance(value, (dict, list)):
                    typer.echo(f"    Value: {value!r}", err=True)
        case _:
            typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)


def _display_validation_result(result: ValidationResult) -> None:
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.path}: {error.message}", err=True)
            if error.positions:
                typer.echo(f"    Cubes: {error.cubes}", err=True)
        typer.echo()

    if result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  {warning.path}: {warning.message}")
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")
        typer.echo()

    if result.errors:
        typer.echo("Validation failed.", err=True)
    elif result.warnings:
        typer.echo("Document is valid with warnings.")
    else:
        typer.echo("Document is valid.")


def _load_error_to_dict(error: ConfigError) -> dict:
    return {
        "is_valid": False,
        "error_type": error.error_type,
        "errors": [
            {"path": d.get("path", ""), "message": d["message"]} for d in error.details
        ]
        or [{"path": "", "message": error.message}],
        "warnings": [],
    }


def _result_to_dict(result: ValidationResult) -> dict:
    return {
        "is_valid": result.is_valid,
        "errors": [
            {
                "path": e.path,
                "message": e.message,
                "cubes": [[p.row, p.col] for p in e.positions],
            }
            for e in result.errors
        ],
        "warnings": [
            {"path": w.path, "message": w.message, "suggestion": w.suggestion}
            for w in result.warnings
        ],
    }
