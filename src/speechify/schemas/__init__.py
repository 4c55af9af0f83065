"""Pydantic schemas shared by routers and services."""

from .events import StorageObjectEvent
from .voices import EN_US_PROFILE, ES_US_PROFILE, VoiceProfile

__all__ = ["EN_US_PROFILE", "ES_US_PROFILE", "StorageObjectEvent", "VoiceProfile"]
