"""Speech synthesis through Google Cloud Text-to-Speech."""

from __future__ import annotations

import logging
from typing import Literal, Sequence

from google.api_core import exceptions as gcloud_exceptions
from google.cloud import texttospeech

from ..errors import SynthesisError
from ..schemas.voices import VoiceProfile

logger = logging.getLogger(__name__)

# LINEAR16 responses carry a RIFF/WAV header, so parts can be joined with `wave`
AUDIO_ENCODING = texttospeech.AudioEncoding.LINEAR16


def create_synthesis_client() -> texttospeech.TextToSpeechClient:
    """Build a Text-to-Speech client using application default credentials."""

    return texttospeech.TextToSpeechClient()


class SpeechSynthesizer:
    """
    Synthesize text chunks into WAV audio, one request per chunk.

    Each call is independent and stateless; the client is injected so tests
    and alternative transports can provide their own.

    Attributes:
        input_type: Whether chunks are sent as plain ``text`` or as ``ssml``
    """

    def __init__(
        self,
        client: texttospeech.TextToSpeechClient,
        *,
        input_type: Literal["text", "ssml"] = "text",
    ) -> None:
        if input_type not in ("text", "ssml"):
            raise ValueError(f"Unsupported synthesis input type: {input_type!r}")
        self._client = client
        self.input_type = input_type

    def _build_input(self, text: str) -> texttospeech.SynthesisInput:
        if self.input_type == "ssml":
            return texttospeech.SynthesisInput(ssml=text)
        return texttospeech.SynthesisInput(text=text)

    @staticmethod
    def _build_voice(profile: VoiceProfile) -> texttospeech.VoiceSelectionParams:
        return texttospeech.VoiceSelectionParams(
            language_code=profile.language_code,
            name=profile.voice_name,
        )

    @staticmethod
    def _build_audio_config(profile: VoiceProfile) -> texttospeech.AudioConfig:
        return texttospeech.AudioConfig(
            audio_encoding=AUDIO_ENCODING,
            pitch=profile.pitch,
            speaking_rate=profile.speaking_rate,
        )

    def synthesize(self, text: str, profile: VoiceProfile) -> bytes:
        """Synthesize one chunk and return its WAV bytes."""

        try:
            response = self._client.synthesize_speech(
                input=self._build_input(text),
                voice=self._build_voice(profile),
                audio_config=self._build_audio_config(profile),
            )
        except gcloud_exceptions.GoogleAPIError as exc:
            raise SynthesisError(
                f"Speech synthesis failed for {len(text)} characters: {exc}"
            ) from exc

        audio = response.audio_content
        if not audio:
            raise SynthesisError("Speech synthesis returned no audio")
        return audio

    def synthesize_all(self, chunks: Sequence[str], profile: VoiceProfile) -> list[bytes]:
        """Synthesize chunks sequentially, preserving their order."""

        logger.info(
            "Speechifying %d chunk(s) with voice %s", len(chunks), profile.voice_name
        )
        parts: list[bytes] = []
        for call_count, chunk in enumerate(chunks, start=1):
            parts.append(self.synthesize(chunk, profile))
            logger.info("Speechifying call %d complete.", call_count)
        logger.info("Speechifying complete.")
        return parts


__all__ = ["AUDIO_ENCODING", "SpeechSynthesizer", "create_synthesis_client"]
