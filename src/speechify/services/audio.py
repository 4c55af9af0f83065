"""WAV concatenation for synthesized speech parts."""

from __future__ import annotations

import io
import logging
import wave
from typing import Sequence

from ..errors import AudioFormatMismatch

logger = logging.getLogger(__name__)


def _read_wav(data: bytes, index: int) -> tuple[tuple[int, int, int], bytes]:
    try:
        with wave.open(io.BytesIO(data), "rb") as wf:
            params = (wf.getnchannels(), wf.getsampwidth(), wf.getframerate())
            frames = wf.readframes(wf.getnframes())
    except (wave.Error, EOFError) as exc:
        raise AudioFormatMismatch(f"Audio part {index} is not valid WAV: {exc}") from exc
    return params, frames


def concatenate_wav(parts: Sequence[bytes]) -> bytes:
    """Join WAV payloads in order into a single WAV file.

    All parts must share channel count, sample width and frame rate; the
    output header is taken from the first part.
    """

    if not parts:
        raise ValueError("At least one audio part is required")

    first_params, first_frames = _read_wav(parts[0], 0)
    frames = [first_frames]
    for index, part in enumerate(parts[1:], start=1):
        params, part_frames = _read_wav(part, index)
        if params != first_params:
            raise AudioFormatMismatch(
                f"Audio part {index} has format {params}, expected {first_params}"
            )
        frames.append(part_frames)

    channels, sample_width, frame_rate = first_params
    buf = io.BytesIO()
    with wave.open(buf, "wb") as wf:
        wf.setnchannels(channels)
        wf.setsampwidth(sample_width)
        wf.setframerate(frame_rate)
        wf.writeframes(b"".join(frames))

    total_frames = sum(len(f) for f in frames) // (channels * sample_width)
    logger.info("Concatenated %d audio part(s), %d frames total", len(parts), total_frames)
    return buf.getvalue()


__all__ = ["concatenate_wav"]
