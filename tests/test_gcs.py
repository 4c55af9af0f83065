from unittest.mock import MagicMock

import pytest
from google.api_core import exceptions as gcloud_exceptions

import speechify.services.gcs as gcs
from speechify.config import Settings
from speechify.errors import StorageError, StorageObjectNotFound
from speechify.services.gcs import StorageGateway, create_storage_client


def test_read_text_decodes_object() -> None:
    client = MagicMock()
    blob = client.bucket.return_value.blob.return_value
    blob.download_as_bytes.return_value = "Hola, ¿qué tal?".encode("utf-8")

    text = StorageGateway(client).read_text("bucket", "greeting.speechify_me")

    assert text == "Hola, ¿qué tal?"
    client.bucket.assert_called_once_with("bucket")
    client.bucket.return_value.blob.assert_called_once_with("greeting.speechify_me")


def test_read_text_missing_object() -> None:
    client = MagicMock()
    blob = client.bucket.return_value.blob.return_value
    blob.download_as_bytes.side_effect = gcloud_exceptions.NotFound("gone")

    with pytest.raises(StorageObjectNotFound, match="gs://bucket/missing.speechify_me"):
        StorageGateway(client).read_text("bucket", "missing.speechify_me")


def test_write_bytes_sets_content_type() -> None:
    client = MagicMock()
    blob = client.bucket.return_value.blob.return_value

    StorageGateway(client).write_bytes("bucket", "story.wav", b"RIFF", content_type="audio/wav")

    client.bucket.return_value.blob.assert_called_once_with("story.wav")
    blob.upload_from_string.assert_called_once_with(b"RIFF", content_type="audio/wav")


def test_create_storage_client_without_credentials_file(monkeypatch, tmp_path) -> None:
    fake_client = MagicMock()
    monkeypatch.setattr(gcs.storage, "Client", fake_client)
    settings = Settings(
        gcp_project_id="demo-project",
        google_application_credentials=tmp_path / "missing.json",
    )

    create_storage_client(settings)

    fake_client.assert_called_once_with(project="demo-project", credentials=None)


def test_create_storage_client_with_service_account(monkeypatch, tmp_path) -> None:
    credentials_file = tmp_path / "sa.json"
    credentials_file.write_text("{}")
    fake_client = MagicMock()
    sentinel_credentials = object()
    monkeypatch.setattr(gcs.storage, "Client", fake_client)
    monkeypatch.setattr(
        gcs.service_account.Credentials,
        "from_service_account_file",
        lambda path: sentinel_credentials,
    )
    settings = Settings(google_application_credentials=credentials_file)

    create_storage_client(settings)

    fake_client.assert_called_once_with(project=None, credentials=sentinel_credentials)


@pytest.mark.parametrize(
    "error",
    [gcloud_exceptions.Forbidden("denied"), gcloud_exceptions.ServiceUnavailable("down")],
)
def test_read_text_wraps_api_errors(error) -> None:
    client = MagicMock()
    client.bucket.return_value.blob.return_value.download_as_bytes.side_effect = error

    with pytest.raises(StorageError, match="gs://bucket/story.speechify_me"):
        StorageGateway(client).read_text("bucket", "story.speechify_me")


def test_write_bytes_wraps_api_errors() -> None:
    client = MagicMock()
    blob = client.bucket.return_value.blob.return_value
    blob.upload_from_string.side_effect = gcloud_exceptions.TooManyRequests("slow down")

    with pytest.raises(StorageError, match="gs://bucket/story.wav"):
        StorageGateway(client).write_bytes("bucket", "story.wav", b"RIFF", content_type="audio/wav")


def test_read_text_replaces_undecodable_bytes() -> None:
    client = MagicMock()
    client.bucket.return_value.blob.return_value.download_as_bytes.return_value = b"caf\xe9 ok"

    text = StorageGateway(client).read_text("bucket", "latin1.speechify_me")

    assert text == "caf\ufffd ok"
