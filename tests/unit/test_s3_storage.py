"""Unit tests for S3StorageService with a stubbed boto3 client."""

import io
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from app.core.config import Settings
from app.domain.exceptions import ConfigurationError
from app.infrastructure.exceptions import (
    StorageDownloadError,
    StorageNotFoundError,
    StorageUploadError,
)
from app.infrastructure.external.storage.factory import StorageFactory
from app.infrastructure.external.storage.s3_storage import S3StorageService


def _client_error(code: str, operation: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


async def test_put_object_sends_bucket_key_body_and_type() -> None:
    client = MagicMock()
    storage = S3StorageService(bucket="mela", client=client)
    await storage.put_object("stalls/a@b.com/1-x.png", b"data", "image/png")
    client.put_object.assert_called_once_with(
        Bucket="mela",
        Key="stalls/a@b.com/1-x.png",
        Body=b"data",
        ContentType="image/png",
    )


async def test_put_object_failure_is_upload_error() -> None:
    client = MagicMock()
    client.put_object.side_effect = _client_error("AccessDenied", "PutObject")
    storage = S3StorageService(bucket="mela", client=client)
    with pytest.raises(StorageUploadError) as exc_info:
        await storage.put_object("k", b"data", "image/png")
    assert "AccessDenied" in exc_info.value.reason


async def test_put_object_connection_failure_is_upload_error() -> None:
    client = MagicMock()
    client.put_object.side_effect = EndpointConnectionError(endpoint_url="https://r2.example")
    storage = S3StorageService(bucket="mela", client=client)
    with pytest.raises(StorageUploadError):
        await storage.put_object("k", b"data", "image/png")


async def test_get_object_returns_body_and_type() -> None:
    client = MagicMock()
    client.get_object.return_value = {"Body": io.BytesIO(b"png"), "ContentType": "image/png"}
    obj = await S3StorageService(bucket="mela", client=client).get_object("k")
    assert obj.body == b"png"
    assert obj.content_type == "image/png"
    client.get_object.assert_called_once_with(Bucket="mela", Key="k")


async def test_get_object_defaults_content_type() -> None:
    client = MagicMock()
    client.get_object.return_value = {"Body": io.BytesIO(b"?")}
    obj = await S3StorageService(bucket="mela", client=client).get_object("k")
    assert obj.content_type == "application/octet-stream"


@pytest.mark.parametrize("code", ["NoSuchKey", "404", "NotFound"])
async def test_missing_object_is_not_found(code: str) -> None:
    client = MagicMock()
    client.get_object.side_effect = _client_error(code, "GetObject")
    with pytest.raises(StorageNotFoundError):
        await S3StorageService(bucket="mela", client=client).get_object("k")


async def test_other_read_failure_is_download_error() -> None:
    client = MagicMock()
    client.get_object.side_effect = _client_error("SlowDown", "GetObject")
    with pytest.raises(StorageDownloadError):
        await S3StorageService(bucket="mela", client=client).get_object("k")


def _r2_settings(**overrides: object) -> Settings:
    values: dict[str, object] = {
        "r2_bucket_name": "stalls-bucket",
        "r2_endpoint": "https://acct.r2.cloudflarestorage.com",
        "r2_access_key_id": "key-id",
        "r2_secret_access_key": "secret",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def test_factory_builds_client_for_configured_endpoint() -> None:
    storage = StorageFactory.create_storage_service(_r2_settings())
    assert isinstance(storage, S3StorageService)
    assert storage.bucket == "stalls-bucket"
    assert storage.endpoint_url == "https://acct.r2.cloudflarestorage.com"


@pytest.mark.parametrize(
    ("field", "setting"),
    [
        ("r2_bucket_name", "R2_BUCKET_NAME"),
        ("r2_endpoint", "R2_ENDPOINT"),
        ("r2_access_key_id", "R2_ACCESS_KEY_ID"),
        ("r2_secret_access_key", "R2_SECRET_ACCESS_KEY"),
    ],
)
def test_factory_requires_every_storage_setting(field: str, setting: str) -> None:
    with pytest.raises(ConfigurationError, match=setting):
        StorageFactory.create_storage_service(_r2_settings(**{field: None}))
