"""Helpers for interacting with Google Cloud Storage."""

from __future__ import annotations

import logging
from pathlib import Path

from google.api_core import exceptions as gcloud_exceptions
from google.cloud import storage
from google.oauth2 import service_account

from ..config import Settings
from ..errors import StorageError, StorageObjectNotFound
from ..utils.filenames import build_gcs_path

logger = logging.getLogger(__name__)


def _load_credentials(settings: Settings) -> service_account.Credentials | None:
    credentials_path: Path | None = settings.google_application_credentials
    if credentials_path is None:
        return None

    try:
        resolved_path = Path(credentials_path).expanduser().resolve()
        if not resolved_path.exists():
            return None
        return service_account.Credentials.from_service_account_file(str(resolved_path))
    except (FileNotFoundError, OSError) as e:
        logger.debug("Could not load GCS credentials from %s: %s", credentials_path, e)
        return None


def create_storage_client(settings: Settings) -> storage.Client:
    """Build a Storage client, falling back to application default credentials."""

    credentials = _load_credentials(settings)
    if credentials is None:
        logger.info("Using application default credentials for Cloud Storage")
    return storage.Client(project=settings.gcp_project_id, credentials=credentials)


class StorageGateway:
    """Read source text and write synthesized audio in Cloud Storage buckets."""

    def __init__(self, client: storage.Client) -> None:
        self._client = client

    def read_text(self, bucket: str, name: str, *, encoding: str = "utf-8") -> str:
        """Download an object and decode it as text."""

        blob = self._client.bucket(bucket).blob(name)
        try:
            data = blob.download_as_bytes()
        except gcloud_exceptions.NotFound as exc:
            raise StorageObjectNotFound(build_gcs_path(bucket, name)) from exc
        except gcloud_exceptions.GoogleAPIError as exc:
            raise StorageError(
                f"Failed to read {build_gcs_path(bucket, name)}: {exc}"
            ) from exc
        logger.info("Read %d bytes from %s", len(data), build_gcs_path(bucket, name))
        # Undecodable bytes become U+FFFD rather than failing the whole object
        return data.decode(encoding, errors="replace")

    def write_bytes(
        self, bucket: str, name: str, data: bytes, *, content_type: str
    ) -> None:
        """Upload raw bytes, replacing any previous version of the object."""

        blob = self._client.bucket(bucket).blob(name)
        try:
            blob.upload_from_string(data, content_type=content_type)
        except gcloud_exceptions.GoogleAPIError as exc:
            raise StorageError(
                f"Failed to write {build_gcs_path(bucket, name)}: {exc}"
            ) from exc
        logger.info("Wrote %d bytes to %s", len(data), build_gcs_path(bucket, name))


__all__ = ["StorageGateway", "create_storage_client"]
