"""Result types shared by the grid document validators.

Validators report findings against a JSON path in the document. Findings
about cube placement also carry the cubes involved, so the CLI and the web
editor can point at them.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from cladding.domain.value_objects import GridPosition


@dataclass(frozen=True)
class ValidationError:
    """A finding that stops the document from being calculated.

    Attributes:
        path: JSON path of the offending part (e.g. "grid.cubes[0].exit")
        message: User-facing description
        positions: Cubes involved, in row-major order
    """

    path: str
    message: str
    positions: tuple[GridPosition, ...] = ()

    @property
    def cubes(self) -> str:
        return ", ".join(str(p) for p in self.positions)


@dataclass(frozen=True)
class ValidationWarning:
    """An advisory: the document calculates, but likely not as intended."""

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Errors and warnings collected from one or more validators."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @property
    def exit_code(self) -> int:
        """CLI exit status: 1 with errors, 2 with only warnings, else 0."""
        if self.errors:
            return 1
        return 2 if self.warnings else 0

    def add_error(
        self, path: str, message: str, positions: Iterable[GridPosition] = ()
    ) -> ValidationResult:
        self.errors.append(
            ValidationError(path=path, message=message, positions=tuple(sorted(positions)))
        )
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> ValidationResult:
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: ValidationResult) -> ValidationResult:
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self
