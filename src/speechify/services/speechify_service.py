"""Convert uploaded text objects into spoken-word WAV objects."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal, Sequence

from ..config import Settings
from ..schemas.events import StorageObjectEvent
from ..schemas.voices import VoiceProfile
from ..segmenter import TextSegmenter
from ..utils.filenames import build_gcs_path, derive_output_name, has_input_suffix
from .audio import concatenate_wav
from .gcs import StorageGateway
from .synthesis import SpeechSynthesizer
from .voices import select_voice_profile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpeechifyResult:
    status: Literal["ignored", "skipped", "written"]
    source: str
    output_name: str | None = None
    chunk_count: int = 0
    dropped_chars: int = 0
    voice: str | None = None


class SpeechifyService:
    """Fetch text, segment it, synthesize every chunk and store the joined audio."""

    def __init__(
        self,
        storage: StorageGateway,
        synthesizer: SpeechSynthesizer,
        segmenter: TextSegmenter,
        *,
        input_suffix: str,
        output_suffix: str,
        output_content_type: str = "audio/wav",
        default_voice: VoiceProfile,
        alternate_voices: Sequence[VoiceProfile] = (),
    ) -> None:
        self._storage = storage
        self._synthesizer = synthesizer
        self._segmenter = segmenter
        self._input_suffix = input_suffix
        self._output_suffix = output_suffix
        self._output_content_type = output_content_type
        self._default_voice = default_voice
        self._alternate_voices = tuple(alternate_voices)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        storage: StorageGateway,
        synthesizer: SpeechSynthesizer,
    ) -> "SpeechifyService":
        return cls(
            storage,
            synthesizer,
            TextSegmenter.from_settings(settings),
            input_suffix=settings.input_suffix,
            output_suffix=settings.output_suffix,
            output_content_type=settings.output_content_type,
            default_voice=settings.default_voice,
            alternate_voices=settings.alternate_voices,
        )

    def handle_event(self, event: StorageObjectEvent) -> SpeechifyResult:
        """Process one storage notification to completion.

        Failures while reading, synthesizing or joining audio propagate before
        anything is written, so a partial output object never appears.
        """

        source = event.gcs_path
        logger.info("Processing file: %s", source)
        if not has_input_suffix(event.name, self._input_suffix):
            logger.info("Early exit for file '%s' with unexpected file type.", source)
            return SpeechifyResult(status="ignored", source=source)

        text = self._storage.read_text(event.bucket, event.name)
        profile = select_voice_profile(
            event.name, self._default_voice, self._alternate_voices
        )
        segmentation = self._segmenter.segment(text)
        logger.info(
            "Split %d characters into %d chunk(s) for %s",
            len(text),
            len(segmentation.chunks),
            source,
        )

        if not segmentation.chunks:
            logger.warning("No speakable text in %s; no audio written", source)
            return SpeechifyResult(
                status="skipped",
                source=source,
                dropped_chars=segmentation.dropped_chars,
                voice=profile.voice_name,
            )

        parts = self._synthesizer.synthesize_all(segmentation.chunks, profile)
        audio = concatenate_wav(parts)

        output_name = derive_output_name(
            event.name, self._input_suffix, self._output_suffix
        )
        logger.info("Saving result to %s in bucket %s", output_name, event.bucket)
        self._storage.write_bytes(
            event.bucket,
            output_name,
            audio,
            content_type=self._output_content_type,
        )
        logger.info("File %s saved", build_gcs_path(event.bucket, output_name))

        return SpeechifyResult(
            status="written",
            source=source,
            output_name=output_name,
            chunk_count=len(segmentation.chunks),
            dropped_chars=segmentation.dropped_chars,
            voice=profile.voice_name,
        )


__all__ = ["SpeechifyResult", "SpeechifyService"]
