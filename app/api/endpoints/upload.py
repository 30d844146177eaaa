"""Upload proxy: authenticated, allowlisted callers store raw bytes in object storage."""

from typing import Annotated

from fastapi import APIRouter, Depends, Header, Query, Request

from app.api.dependencies import get_upload_service
from app.application.use_cases import UploadService
from app.core.limiter import limit_upload
from app.schemas.upload import UploadResponse

router = APIRouter()


@router.post(
    "",
    response_model=UploadResponse,
    responses={
        400: {"description": "Empty upload"},
        401: {"description": "Missing or invalid auth token"},
        403: {"description": "Email not found or not authorized"},
        500: {"description": "Configuration, allowlist or storage failure"},
    },
)
@limit_upload
async def upload(
    request: Request,
    upload_svc: Annotated[UploadService, Depends(get_upload_service)],
    folder: Annotated[str | None, Query()] = None,
    authorization: Annotated[str | None, Header()] = None,
    x_file_name: Annotated[str | None, Header()] = None,
    content_type: Annotated[str | None, Header()] = None,
) -> UploadResponse:
    """Store the request body as-is and return its key and public URL.

    The body is the file itself (not multipart). The file name comes from
    the x-file-name header and the destination folder from ?folder=.
    """
    body = await request.body()
    result = await upload_svc.upload(
        authorization=authorization,
        body=body,
        filename=x_file_name,
        folder=folder,
        content_type=content_type,
    )
    return UploadResponse.from_result(result)
