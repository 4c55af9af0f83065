import io
import pathlib
import sys
import wave

import pytest

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from speechify.config import get_settings  # noqa: E402

_SETTINGS_ENV = (
    "CHARACTER_LIMIT",
    "FIND_BREAK_AFTER",
    "BREAK_MARKERS",
    "INPUT_SUFFIX",
    "OUTPUT_SUFFIX",
    "OUTPUT_CONTENT_TYPE",
    "DEFAULT_VOICE",
    "ALTERNATE_VOICES",
    "SYNTHESIS_INPUT_TYPE",
    "GCP_PROJECT_ID",
    "GOOGLE_APPLICATION_CREDENTIALS",
    "LOG_FILE",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Give every test a fresh settings cache and a clean environment."""
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def make_wav(frames: bytes, *, sr: int = 24_000, channels: int = 1, width: int = 2) -> bytes:
    buf = io.BytesIO()
    with wave.open(buf, "wb") as wf:
        wf.setnchannels(channels)
        wf.setsampwidth(width)
        wf.setframerate(sr)
        wf.writeframes(frames)
    return buf.getvalue()


@pytest.fixture
def wav_factory():
    return make_wav
