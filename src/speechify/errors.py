"""Exceptions raised while converting stored text to speech."""


class SpeechifyError(RuntimeError):
    """Base error raised for speechify failures."""


class StorageObjectNotFound(SpeechifyError):
    """Raised when the triggering object no longer exists in its bucket."""


class StorageError(SpeechifyError):
    """Raised when Cloud Storage rejects or fails a read or write."""


class SynthesisError(SpeechifyError):
    """Raised when the speech backend rejects or fails a request."""


class AudioFormatMismatch(SpeechifyError):
    """Raised when synthesized parts cannot be joined into one WAV stream."""


__all__ = [
    "AudioFormatMismatch",
    "SpeechifyError",
    "StorageError",
    "StorageObjectNotFound",
    "SynthesisError",
]
