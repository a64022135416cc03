"""Loading grid documents from JSON files and dictionaries.

Every failure surfaces as ``ConfigError``. Its ``error_type`` tells callers
whether the file was missing, unreadable, not JSON or not a valid grid
document, so the CLI and the API can word their reports.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from cladding.application.config.schema import GridDocument

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """A grid document could not be loaded.

    Attributes:
        message: Summary suitable for printing
        error_type: file_not_found, permission_denied, file_read_error,
            json_parse or validation
        path: File the document came from, if any
        details: JSON line/column for parse errors; path, message, value
            and error_type per problem for validation errors
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic error location as a JSON path.

    Examples:
        >>> _format_json_path(("grid", "cubes", 0, "entry"))
        'grid.cubes[0].entry'
        >>> _format_json_path(("options",))
        'options'
    """
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        else:
            path += f".{segment}" if path else str(segment)
    return path


def _validate(data: Any, path: Path | None = None) -> GridDocument:
    try:
        return GridDocument.model_validate(data)
    except PydanticValidationError as e:
        details = [
            {
                "path": _format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
            for err in e.errors()
        ]
        lines = [f"Invalid grid document{f' {path}' if path else ''}:"]
        for detail in details:
            where = detail["path"] or "document"
            value = detail["value"]
            # Dict and list inputs are whole sub-documents, too long to echo.
            if value is None or isinstance(value, (dict, list)):
                lines.append(f"  - {where}: {detail['message']}")
            else:
                lines.append(f"  - {where}: {detail['message']} (got: {value!r})")
        raise ConfigError(
            message="\n".join(lines),
            error_type="validation",
            path=path,
            details=details,
        ) from e


def load_document(path: Path) -> GridDocument:
    """Read, parse and validate a grid document file.

    Raises:
        ConfigError: On any failure; see ``ConfigError.error_type``.
    """
    if not path.exists():
        raise ConfigError(
            f"Grid file not found: {path}", error_type="file_not_found", path=path
        )
    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            f"Permission denied reading grid file: {path}",
            error_type="permission_denied",
            path=path,
        ) from e
    except OSError as e:
        raise ConfigError(
            f"Error reading grid file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in grid file: {path} "
            f"(line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    document = _validate(data, path)
    logger.debug(f"Loaded {len(document.grid.cubes)} cube(s) from {path}")
    return document


def load_document_from_dict(data: dict[str, Any]) -> GridDocument:
    """Validate an already parsed grid document, e.g. an API request body.

    Raises:
        ConfigError: With ``error_type="validation"``.
    """
    return _validate(data)
