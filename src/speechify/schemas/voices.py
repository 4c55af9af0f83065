"""Voice profile schema for speech synthesis requests."""

from pydantic import BaseModel, ConfigDict, Field


class VoiceProfile(BaseModel):
    """Voice and prosody applied to every chunk of one document."""

    model_config = ConfigDict(frozen=True)

    language_code: str = Field(..., min_length=2)
    voice_name: str = Field(..., min_length=1)
    pitch: float = Field(default=0.0, ge=-20.0, le=20.0)
    speaking_rate: float = Field(default=1.0, ge=0.25, le=4.0)


EN_US_PROFILE = VoiceProfile(
    language_code="en-US",
    voice_name="en-US-Wavenet-D",
    pitch=-4.4,
    speaking_rate=1.2,
)

ES_US_PROFILE = VoiceProfile(
    language_code="es-US",
    voice_name="es-US-Wavenet-B",
    pitch=-5.0,
    speaking_rate=1.0,
)


__all__ = ["EN_US_PROFILE", "ES_US_PROFILE", "VoiceProfile"]
