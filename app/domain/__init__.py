"""Domain layer: enums, exceptions, and the built-in sample stalls.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.enums import ALL_CATEGORIES, CatalogStatus, StallCategory
from app.domain.exceptions import (
    BadRequestException,
    ConfigurationError,
    ForbiddenException,
    MelaException,
    ResourceNotFoundException,
    UnauthorizedException,
    UpstreamError,
)

__all__ = [
    # Enums
    "ALL_CATEGORIES",
    "CatalogStatus",
    "StallCategory",
    # Exceptions
    "BadRequestException",
    "ConfigurationError",
    "ForbiddenException",
    "MelaException",
    "ResourceNotFoundException",
    "UnauthorizedException",
    "UpstreamError",
]
