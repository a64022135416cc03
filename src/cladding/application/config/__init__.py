"""Grid document configuration: schema, loading, validation and adapters.

Example:
    ```python
    from pathlib import Path
    from cladding.application.config import load_document, document_to_grid

    document = load_document(Path("my-run.json"))
    grid = document_to_grid(document)
    ```
"""

from .adapter import (
    document_to_catalog,
    document_to_grid,
    document_to_settings,
    grid_to_document,
)
from .loader import ConfigError, load_document, load_document_from_dict
from .schema import (
    CURRENT_VERSION,
    SUPPORTED_VERSIONS,
    CatalogEntryConfig,
    CubeConfig,
    GridConfig,
    GridDocument,
    OptionsConfig,
)
from .validators import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    ValidatorRegistry,
    validate_document,
)

__all__ = [
    "CURRENT_VERSION",
    "SUPPORTED_VERSIONS",
    "CatalogEntryConfig",
    "ConfigError",
    "CubeConfig",
    "GridConfig",
    "GridDocument",
    "OptionsConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "ValidatorRegistry",
    "document_to_catalog",
    "document_to_grid",
    "document_to_settings",
    "grid_to_document",
    "load_document",
    "load_document_from_dict",
    "validate_document",
]
