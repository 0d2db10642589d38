import logging
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from google.cloud import speech, texttospeech

from insurance_agent.bot.services import VoiceServices
from insurance_agent.config.settings import Settings
from insurance_agent.services import (
    CredentialIssuer,
    ResponseGenerator,
    SpeechSynthesizer,
    TranscriptionAdapter,
)

TEST_API_KEY = "test-livekit-key"
TEST_API_SECRET = "test-livekit-secret-with-enough-length-for-hs256"
REPLY_AUDIO = b"ID3\x04\x00fake-mp3-frames"


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset logging configuration before each test"""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    logging.basicConfig(level=logging.NOTSET)
    yield


def recognize_response(*transcripts):
    """Build a RecognizeResponse with one result per transcript."""
    return speech.RecognizeResponse(
        results=[
            speech.SpeechRecognitionResult(
                alternatives=[speech.SpeechRecognitionAlternative(transcript=t)]
            )
            for t in transcripts
        ]
    )


def completion(*contents):
    """Build a Groq-style chat completion with one choice per content."""
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=c)) for c in contents]
    )


@pytest.fixture
def speech_client():
    client = MagicMock()
    client.recognize = AsyncMock(return_value=recognize_response("I was in an accident"))
    return client


@pytest.fixture
def groq_client():
    client = MagicMock()
    client.chat.completions.create = AsyncMock(
        return_value=completion("Stay calm and call 911 if needed.")
    )
    return client


@pytest.fixture
def tts_client():
    client = MagicMock()
    client.synthesize_speech = AsyncMock(
        return_value=texttospeech.SynthesizeSpeechResponse(audio_content=REPLY_AUDIO)
    )
    return client


@pytest.fixture
def voice_services(speech_client, groq_client, tts_client):
    """Real adapters wired to mocked collaborator clients."""
    return VoiceServices(
        issuer=CredentialIssuer(TEST_API_KEY, TEST_API_SECRET),
        transcriber=TranscriptionAdapter(client=speech_client),
        generator=ResponseGenerator(client=groq_client),
        synthesizer=SpeechSynthesizer(client=tts_client),
    )


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def settings(upload_dir):
    return Settings(
        livekit_api_key=TEST_API_KEY,
        livekit_api_secret=TEST_API_SECRET,
        groq_api_key="gsk_test",
        upload_dir=str(upload_dir),
    )
