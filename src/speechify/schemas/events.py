"""Schemas for Cloud Storage change notifications."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..utils.filenames import build_gcs_path


class StorageObjectEvent(BaseModel):
    """Object metadata delivered when an object is finalized in a bucket."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    bucket: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    metageneration: Optional[str] = None
    content_type: Optional[str] = Field(default=None, alias="contentType")

    @property
    def gcs_path(self) -> str:
        return build_gcs_path(self.bucket, self.name)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "StorageObjectEvent":
        """Parse either bare object metadata or a structured CloudEvent.

        Eventarc binary-mode deliveries and background function events carry
        the object metadata as the whole body; structured-mode CloudEvents
        nest it under ``data``.
        """

        data = payload.get("data")
        if isinstance(data, dict) and "bucket" not in payload:
            return cls.model_validate(data)
        return cls.model_validate(payload)


__all__ = ["StorageObjectEvent"]
