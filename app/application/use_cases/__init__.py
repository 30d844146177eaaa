"""Use cases: upload authorization/storage and the club catalog."""

from app.application.use_cases.catalog import ClubCatalogService, ClubCatalogView
from app.application.use_cases.uploads import UploadService, extract_bearer_token

__all__ = [
    "ClubCatalogService",
    "ClubCatalogView",
    "UploadService",
    "extract_bearer_token",
]
