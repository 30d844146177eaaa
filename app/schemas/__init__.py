"""Pydantic request/response schemas for the API."""

from app.schemas.health import HealthResponse
from app.schemas.stall import (
    ClubStallsResponse,
    SampleItemResponse,
    SampleStallListResponse,
    SampleStallResponse,
)
from app.schemas.upload import UploadResponse

__all__ = [
    "ClubStallsResponse",
    "HealthResponse",
    "SampleItemResponse",
    "SampleStallListResponse",
    "SampleStallResponse",
    "UploadResponse",
]
