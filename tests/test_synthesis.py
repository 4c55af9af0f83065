from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from google.api_core import exceptions as gcloud_exceptions
from google.cloud import texttospeech

from speechify.errors import SynthesisError
from speechify.schemas.voices import EN_US_PROFILE, ES_US_PROFILE
from speechify.services.synthesis import SpeechSynthesizer


def _client(audio: bytes = b"RIFFdata") -> MagicMock:
    client = MagicMock()
    client.synthesize_speech.return_value = SimpleNamespace(audio_content=audio)
    return client


def test_synthesize_builds_request_from_profile() -> None:
    client = _client()

    audio = SpeechSynthesizer(client).synthesize("Hello there.", EN_US_PROFILE)

    assert audio == b"RIFFdata"
    kwargs = client.synthesize_speech.call_args.kwargs
    assert kwargs["input"].text == "Hello there."
    assert kwargs["voice"].language_code == "en-US"
    assert kwargs["voice"].name == "en-US-Wavenet-D"
    assert kwargs["audio_config"].audio_encoding == texttospeech.AudioEncoding.LINEAR16
    assert kwargs["audio_config"].pitch == pytest.approx(-4.4)
    assert kwargs["audio_config"].speaking_rate == pytest.approx(1.2)


def test_synthesize_ssml_input() -> None:
    client = _client()

    SpeechSynthesizer(client, input_type="ssml").synthesize("<speak>Hola</speak>", ES_US_PROFILE)

    kwargs = client.synthesize_speech.call_args.kwargs
    assert kwargs["input"].ssml == "<speak>Hola</speak>"
    assert kwargs["voice"].name == "es-US-Wavenet-B"


def test_unknown_input_type_is_rejected() -> None:
    with pytest.raises(ValueError):
        SpeechSynthesizer(_client(), input_type="markdown")  # type: ignore[arg-type]


def test_api_errors_are_wrapped() -> None:
    client = MagicMock()
    client.synthesize_speech.side_effect = gcloud_exceptions.InternalServerError("boom")

    with pytest.raises(SynthesisError):
        SpeechSynthesizer(client).synthesize("text", EN_US_PROFILE)


def test_empty_audio_is_an_error() -> None:
    with pytest.raises(SynthesisError):
        SpeechSynthesizer(_client(b"")).synthesize("text", EN_US_PROFILE)


def test_synthesize_all_is_sequential_and_ordered() -> None:
    client = MagicMock()
    client.synthesize_speech.side_effect = [
        SimpleNamespace(audio_content=b"one"),
        SimpleNamespace(audio_content=b"two"),
        SimpleNamespace(audio_content=b"three"),
    ]

    parts = SpeechSynthesizer(client).synthesize_all(["a", "b", "c"], EN_US_PROFILE)

    assert parts == [b"one", b"two", b"three"]
    sent = [call.kwargs["input"].text for call in client.synthesize_speech.call_args_list]
    assert sent == ["a", "b", "c"]


def test_synthesize_all_stops_at_first_failure() -> None:
    client = MagicMock()
    client.synthesize_speech.side_effect = [
        SimpleNamespace(audio_content=b"one"),
        gcloud_exceptions.ServiceUnavailable("down"),
        SimpleNamespace(audio_content=b"three"),
    ]

    with pytest.raises(SynthesisError):
        SpeechSynthesizer(client).synthesize_all(["a", "b", "c"], EN_US_PROFILE)

    assert client.synthesize_speech.call_count == 2
