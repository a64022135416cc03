"""FastAPI REST API for cladding calculation.

This module provides a REST API for calculating cladding requirements,
classifying single faces and joints, validating grid documents, and
browsing presets.

Usage:
    uvicorn cladding.web:app --reload
"""

from cladding.web.app import app, create_app

__all__ = ["app", "create_app"]
