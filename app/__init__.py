"""
App package - Application configuration and core utilities.
Contains settings and exceptions.
"""

from app.config import settings
from app.exceptions import (
    ServiceValidationError,
    CatalogConfigurationError,
    NotFoundError,
)

__all__ = [
    "settings",
    "ServiceValidationError",
    "CatalogConfigurationError",
    "NotFoundError",
]
