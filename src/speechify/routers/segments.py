"""Routes previewing how text would be split for synthesis."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from ..config import get_settings
from ..segmenter import SegmentationLimits, segment_text

router = APIRouter(prefix="/api/segments", tags=["segments"])


class SegmentRequest(BaseModel):
    text: str
    hard_limit: Optional[int] = Field(default=None, ge=1)
    search_from: Optional[int] = Field(default=None, ge=0)
    markers: Optional[list[str]] = Field(default=None, min_length=1)


class SegmentResponse(BaseModel):
    chunks: list[str]
    dropped_chars: int
    truncated: bool


@router.post("", response_model=SegmentResponse)
def preview_segments(body: SegmentRequest) -> SegmentResponse:
    settings = get_settings()
    limits = SegmentationLimits(
        hard_limit=body.hard_limit or settings.character_limit,
        search_from=(
            settings.find_break_after if body.search_from is None else body.search_from
        ),
    )
    markers = body.markers if body.markers is not None else settings.break_markers
    try:
        result = segment_text(body.text, limits, markers)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return SegmentResponse(
        chunks=result.chunks,
        dropped_chars=result.dropped_chars,
        truncated=result.truncated,
    )
