"""Protocol for checks run over a loaded grid document."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from cladding.application.config.schema import GridDocument
    from cladding.application.config.validators.base import ValidationResult


@runtime_checkable
class Validator(Protocol):
    """One check over a grid document, registered under ``name``.

    Blocking problems (the engine would reject the grid) are reported as
    errors; anything that calculates but probably not as intended is a
    warning. Paths in findings are JSON paths into the document, e.g.
    ``grid.cubes[2].clad``.
    """

    @property
    def name(self) -> str: ...

    def validate(self, document: GridDocument) -> ValidationResult: ...
