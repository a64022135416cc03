"""Validators subpackage - checks run over loaded grid documents.

- PlacementValidator: branching, loops and flow continuity (errors)
- CladdingValidator: cladding on covered faces, cubes with nothing clad
- FlowValidator: partially supplied flow

The ValidatorRegistry coordinates running them against a document.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import ValidationError, ValidationResult, ValidationWarning
from .cladding import CladdingValidator, FlowValidator
from .placement import PlacementValidator
from .registry import ValidatorRegistry

if TYPE_CHECKING:
    from cladding.application.config.schema import GridDocument


def register_default_validators() -> None:
    """Register the built-in validators if they are not registered yet."""
    for validator in (PlacementValidator(), CladdingValidator(), FlowValidator()):
        if not ValidatorRegistry.is_registered(validator.name):
            ValidatorRegistry.register(validator)


def validate_document(document: GridDocument) -> ValidationResult:
    """Run every enabled validator against a loaded document."""
    register_default_validators()
    return ValidatorRegistry.validate_all(document)


__all__ = [
    "CladdingValidator",
    "FlowValidator",
    "PlacementValidator",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "ValidatorRegistry",
    "register_default_validators",
    "validate_document",
]
