"""Contracts module - protocols and shared DTOs for cross-layer communication.

By depending on protocols rather than concrete implementations, layers remain
loosely coupled and testable.

Example:
    ```python
    from cladding.contracts import CalculationObserver, NullObserver

    class ErrorCounter(NullObserver):
        def __init__(self) -> None:
            self.count = 0

        def on_validation_error(self, error) -> None:
            self.count += 1
    ```
"""

from .dtos import CalculationOutput as CalculationOutput
from .observers import (
    CalculationObserver as CalculationObserver,
    NullObserver as NullObserver,
)
from .validators import Validator as Validator

__all__ = [
    "CalculationObserver",
    "CalculationOutput",
    "NullObserver",
    "Validator",
]
