"""Voice profile selection from object names."""

from __future__ import annotations

from typing import Sequence

from ..schemas.voices import VoiceProfile
from ..utils.filenames import contains_language_tag


def select_voice_profile(
    object_name: str,
    default: VoiceProfile,
    alternates: Sequence[VoiceProfile] = (),
) -> VoiceProfile:
    """Return the first alternate whose ``.<lang>.`` tag is in the name, else ``default``."""

    for profile in alternates:
        if contains_language_tag(object_name, profile.language_code):
            return profile
    return default


__all__ = ["select_voice_profile"]
