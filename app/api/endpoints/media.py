"""Media proxy: serve stored objects through the API origin."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response

from app.api.dependencies import get_storage_service
from app.application.interfaces import IStorageService
from app.domain.exceptions import BadRequestException, ConfigurationError

router = APIRouter()

MEDIA_CACHE_CONTROL = "public, max-age=3600"


@router.get(
    "",
    response_class=Response,
    responses={
        200: {"description": "Object bytes with the stored content type"},
        400: {"description": "Missing key"},
        404: {"description": "Object not found"},
        500: {"description": "Storage not configured or read failed"},
    },
)
async def get_media(
    storage: Annotated[IStorageService | None, Depends(get_storage_service)],
    key: Annotated[str | None, Query()] = None,
) -> Response:
    """Return the object stored under key."""
    if not key:
        raise BadRequestException("Missing key", field="key")
    if storage is None:
        raise ConfigurationError("R2_BUCKET_NAME")
    obj = await storage.get_object(key)
    return Response(
        content=obj.body,
        media_type=obj.content_type,
        headers={"Cache-Control": MEDIA_CACHE_CONTROL},
    )
