"""Routes receiving Cloud Storage change notifications."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Request
from pydantic import ValidationError

from ..errors import SpeechifyError, StorageObjectNotFound
from ..schemas.events import StorageObjectEvent
from ..services.speechify_service import SpeechifyService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/events", tags=["events"])


def get_speechify_service(request: Request) -> SpeechifyService:
    service = getattr(request.app.state, "speechify_service", None)
    if service is None:
        raise HTTPException(status_code=500, detail="Speechify service unavailable")
    return service


@router.post("/storage")
def handle_storage_event(
    payload: dict[str, Any] = Body(...),
    service: SpeechifyService = Depends(get_speechify_service),
) -> dict[str, Any]:
    try:
        event = StorageObjectEvent.from_payload(payload)
    except ValidationError as exc:
        errors = exc.errors(
            include_url=False, include_context=False, include_input=False
        )
        raise HTTPException(status_code=422, detail=errors) from exc

    try:
        result = service.handle_event(event)
    except StorageObjectNotFound as exc:
        raise HTTPException(status_code=404, detail=f"Object not found: {exc}") from exc
    except SpeechifyError as exc:
        logger.error("Failed to speechify %s: %s", event.gcs_path, exc)
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    return asdict(result)
