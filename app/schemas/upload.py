"""Upload API schemas."""

from pydantic import BaseModel, Field

from app.application.dtos.storage import UploadResult


class UploadResponse(BaseModel):
    """Response for POST /api/upload."""

    url: str = Field(..., description="Public URL of the stored object")
    key: str = Field(..., description="Storage key: folder/email/millis-filename")

    @classmethod
    def from_result(cls, result: UploadResult) -> "UploadResponse":
        return cls(url=result.url, key=result.key)
