"""
Text Segmenter for the batch speech synthesis pipeline.

Splits arbitrarily long text into chunks that fit under the synthesis API's
per-request character ceiling, preferring to break at natural boundaries.

Architecture:
    object text → TextSegmenter.segment() → chunks → SpeechSynthesizer

For every oversized remainder the segmenter looks for a break marker at or
after ``search_from``. Markers are tried in priority order (paragraph, line,
sentence, clause, word) and the first one whose occurrence *ends* strictly
before ``hard_limit`` wins, even if a lower priority marker occurs earlier.
The marker stays with the chunk that precedes the break.

Concatenating the chunks reproduces the input exactly. When no marker
qualifies, the remaining text is dropped and a warning names how many
characters were lost.

Usage:
    segmenter = TextSegmenter(SegmentationLimits(hard_limit=4999, search_from=4000))
    for chunk in segmenter.split(text):
        audio.append(synthesizer.synthesize(chunk, profile))
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from .config import Settings

logger = logging.getLogger(__name__)

DEFAULT_HARD_LIMIT = 4999
DEFAULT_SEARCH_FROM = 4000

# Most preferred first; order is a priority ranking, not a set.
DEFAULT_BREAK_MARKERS: tuple[str, ...] = ("\n\n", "\n", ". ", ".", ",", " ")


@dataclass(frozen=True)
class SegmentationLimits:
    """Character limits controlling where chunks may be cut."""

    hard_limit: int = DEFAULT_HARD_LIMIT
    search_from: int = DEFAULT_SEARCH_FROM

    def __post_init__(self) -> None:
        if self.hard_limit < 1:
            raise ValueError(f"hard_limit must be positive, got {self.hard_limit}")
        if self.search_from < 0:
            raise ValueError(
                f"search_from must not be negative, got {self.search_from}"
            )


@dataclass
class SegmentationResult:
    chunks: list[str] = field(default_factory=list)
    dropped_chars: int = 0

    @property
    def truncated(self) -> bool:
        return self.dropped_chars > 0


def _validate_markers(markers: Sequence[str]) -> tuple[str, ...]:
    if isinstance(markers, str):
        raise TypeError("markers must be a sequence of strings, not a string")
    resolved = tuple(markers)
    for marker in resolved:
        if not isinstance(marker, str) or not marker:
            raise ValueError(f"Break markers must be non-empty strings, got {marker!r}")
    return resolved


def _next_break(
    text: str,
    start: int,
    limits: SegmentationLimits,
    markers: Sequence[str],
) -> int:
    # Offsets are relative to ``start`` so the remainder is never copied.
    remaining = len(text) - start
    if remaining <= limits.hard_limit:
        return remaining

    for marker in markers:
        index = text.find(marker, start + limits.search_from)
        if index < 0:
            continue
        end = index - start + len(marker)
        if end < limits.hard_limit:
            return end
    return -1


def find_break_index(
    text: str,
    limits: SegmentationLimits,
    markers: Sequence[str] = DEFAULT_BREAK_MARKERS,
) -> int:
    """Return the end offset of the next chunk of ``text``, or -1 if none fits.

    Text that already fits returns ``len(text)``. Otherwise each marker is
    searched from ``limits.search_from`` in priority order and the first
    occurrence ending strictly below ``limits.hard_limit`` is accepted.
    """

    return _next_break(text, 0, limits, _validate_markers(markers))


def segment_text(
    text: str,
    limits: SegmentationLimits | None = None,
    markers: Sequence[str] | None = None,
) -> SegmentationResult:
    """Split ``text`` into synthesizable chunks.

    Never raises on unbreakable text: the chunks produced so far are returned
    and ``dropped_chars`` reports what was skipped.
    """

    limits = limits or SegmentationLimits()
    resolved_markers = _validate_markers(
        DEFAULT_BREAK_MARKERS if markers is None else markers
    )

    result = SegmentationResult()
    start = 0
    total = len(text)
    while start < total:
        break_index = _next_break(text, start, limits, resolved_markers)
        if break_index < 0:
            result.dropped_chars = total - start
            logger.warning(
                "Couldn't find a good break point for the text. "
                "Skipping remaining %d characters.",
                result.dropped_chars,
            )
            break
        logger.debug("Ideal break found at: %d", break_index)
        result.chunks.append(text[start : start + break_index])
        start += break_index

    return result


def split_text(
    text: str,
    hard_limit: int = DEFAULT_HARD_LIMIT,
    search_from: int = DEFAULT_SEARCH_FROM,
    markers: Sequence[str] = DEFAULT_BREAK_MARKERS,
) -> list[str]:
    """Return the ordered chunks of ``text`` for the given limits and markers."""

    return segment_text(text, SegmentationLimits(hard_limit, search_from), markers).chunks


class TextSegmenter:
    """
    Reusable segmenter bound to one set of limits and break markers.

    Holds no state between calls, so a single instance can be shared across
    requests and threads.

    Attributes:
        limits: Hard limit and search offset applied to every call
        markers: Break markers, most preferred first
    """

    def __init__(
        self,
        limits: SegmentationLimits | None = None,
        markers: Sequence[str] | None = None,
    ) -> None:
        self.limits = limits or SegmentationLimits()
        self.markers = _validate_markers(
            DEFAULT_BREAK_MARKERS if markers is None else markers
        )
        if self.limits.search_from >= self.limits.hard_limit:
            logger.warning(
                "search_from (%d) is not below hard_limit (%d); "
                "oversized text will always be truncated",
                self.limits.search_from,
                self.limits.hard_limit,
            )

    @classmethod
    def from_settings(cls, settings: "Settings") -> "TextSegmenter":
        return cls(settings.segmentation_limits, settings.break_markers)

    def segment(self, text: str) -> SegmentationResult:
        return segment_text(text, self.limits, self.markers)

    def split(self, text: str) -> list[str]:
        return self.segment(text).chunks


__all__ = [
    "DEFAULT_BREAK_MARKERS",
    "DEFAULT_HARD_LIMIT",
    "DEFAULT_SEARCH_FROM",
    "SegmentationLimits",
    "SegmentationResult",
    "TextSegmenter",
    "find_break_index",
    "segment_text",
    "split_text",
]
