"""Registry of the checks run over grid documents.

Validators are held as instances keyed by name and run in registration
order, so placement errors are reported ahead of cladding advisories.
Individual checks can be switched off, e.g. by an editor that validates
cladding separately.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

from .base import ValidationResult

if TYPE_CHECKING:
    from cladding.application.config.schema import GridDocument
    from cladding.contracts.validators import Validator

logger = logging.getLogger(__name__)


class ValidatorRegistry:
    """Class-level registry of document validators.

    Example:
        ValidatorRegistry.register(CladdingValidator())
        ValidatorRegistry.disable("cladding")
        result = ValidatorRegistry.validate_all(document)
    """

    _validators: ClassVar[dict[str, Validator]] = {}
    _disabled: ClassVar[set[str]] = set()

    @classmethod
    def register(cls, validator: Validator) -> None:
        if validator.name in cls._validators:
            logger.warning(f"Replacing validator '{validator.name}'")
        cls._validators[validator.name] = validator
        logger.debug(f"Registered validator '{validator.name}'")

    @classmethod
    def _require(cls, name: str) -> Validator:
        try:
            return cls._validators[name]
        except KeyError:
            available = ", ".join(cls.available()) or "none"
            raise KeyError(
                f"Unknown validator '{name}'. Available validators: {available}"
            ) from None

    @classmethod
    def get(cls, name: str) -> Validator:
        """Look up a validator.

        Raises:
            KeyError: If ``name`` is not registered.
        """
        return cls._require(name)

    @classmethod
    def available(cls) -> list[str]:
        return sorted(cls._validators)

    @classmethod
    def is_registered(cls, name: str) -> bool:
        return name in cls._validators

    @classmethod
    def enable(cls, name: str) -> None:
        cls._require(name)
        cls._disabled.discard(name)

    @classmethod
    def disable(cls, name: str) -> None:
        """Skip ``name`` in validate_all().

        Raises:
            KeyError: If ``name`` is not registered.
        """
        cls._require(name)
        cls._disabled.add(name)
        logger.debug(f"Disabled validator '{name}'")

    @classmethod
    def is_enabled(cls, name: str) -> bool:
        return name in cls._validators and name not in cls._disabled

    @classmethod
    def validate_all(cls, document: GridDocument) -> ValidationResult:
        """Run every enabled validator and collect the findings.

        A validator that raises is reported as an error on the document
        instead of aborting the remaining checks.
        """
        result = ValidationResult()
        enabled = [v for name, v in cls._validators.items() if name not in cls._disabled]
        logger.debug(
            f"Validating {len(document.grid.cubes)} cube(s) with "
            f"{', '.join(v.name for v in enabled) or 'no validators'}"
        )
        for validator in enabled:
            try:
                result.merge(validator.validate(document))
            except Exception as e:
                logger.error(f"Validator '{validator.name}' raised: {e}")
                result.add_error(
                    path="document",
                    message=f"Check '{validator.name}' failed: {e}",
                )
        return result

    @classmethod
    def clear(cls) -> None:
        cls._validators.clear()
        cls._disabled.clear()
