"""
End-to-end tests of the HTTP endpoints.

The real pipelines and adapters run against mocked Google, Groq and LiveKit
collaborator clients.
"""

import jwt
import pytest
from fastapi.testclient import TestClient
from google.api_core import exceptions as google_exceptions
from google.cloud import speech

from insurance_agent.config.constants import FALLBACK_UTTERANCE
from insurance_agent.config.settings import Settings
from insurance_agent.errors import ConfigurationError
from insurance_agent.main import app as module_app
from insurance_agent.main import create_app
from tests.conftest import REPLY_AUDIO, TEST_API_SECRET, completion

AUDIO_FILE = ("question.webm", b"\x1aE\xdf\xa3webm-opus-bytes", "audio/webm")


@pytest.fixture
def client(settings, voice_services):
    with TestClient(create_app(settings=settings, services=voice_services)) as test_client:
        yield test_client


def assert_audio_attachment(response, filename):
    assert response.status_code == 200
    assert response.headers["content-type"] == "audio/mpeg"
    assert response.headers["content-disposition"] == f'attachment; filename="{filename}"'
    assert response.content == REPLY_AUDIO


class TestSpeak:

    def test_speak_returns_audio(self, client, tts_client, groq_client):
        response = client.post("/speak", json={"text": "Thank you for calling"})

        assert_audio_attachment(response, "speech.mp3")
        assert tts_client.synthesize_speech.call_args.kwargs["input"].text == "Thank you for calling"
        groq_client.chat.completions.create.assert_not_called()

    @pytest.mark.parametrize("payload", [{}, {"text": ""}, {"text": None}])
    def test_speak_missing_text(self, client, tts_client, payload):
        response = client.post("/speak", json=payload)

        assert response.status_code == 400
        assert response.text == "Missing text"
        tts_client.synthesize_speech.assert_not_called()

    def test_speak_without_body(self, client, tts_client):
        response = client.post("/speak")

        assert response.status_code == 400
        assert response.text == "Missing text"
        tts_client.synthesize_speech.assert_not_called()

    @pytest.mark.parametrize("endpoint", ["/speak", "/speak-reply"])
    @pytest.mark.parametrize(
        "kwargs",
        [{"data": {"foo": "bar"}}, {"json": ["x"]}, {"json": "text"}, {"json": {"text": 42}}],
    )
    def test_non_object_body_is_missing_text(
        self, client, groq_client, tts_client, endpoint, kwargs
    ):
        response = client.post(endpoint, **kwargs)

        assert response.status_code == 400
        assert response.text == "Missing text"
        groq_client.chat.completions.create.assert_not_called()
        tts_client.synthesize_speech.assert_not_called()

    def test_speak_twice_gives_independent_responses(self, client, tts_client):
        first = client.post("/speak", json={"text": "Hello"})
        second = client.post("/speak", json={"text": "Hello"})

        assert_audio_attachment(first, "speech.mp3")
        assert_audio_attachment(second, "speech.mp3")
        assert tts_client.synthesize_speech.await_count == 2

    def test_speak_upstream_failure_is_500(self, client, tts_client):
        tts_client.synthesize_speech.side_effect = google_exceptions.ServiceUnavailable("down")

        response = client.post("/speak", json={"text": "Hello"})

        assert response.status_code == 500
        assert response.text == "Upstream service failure"


class TestSpeakReply:

    def test_speak_reply_scenario(self, client, groq_client, tts_client):
        groq_client.chat.completions.create.return_value = completion(
            "File a police report and contact your insurer."
        )

        response = client.post("/speak-reply", json={"text": "My car was hit from behind"})

        assert_audio_attachment(response, "reply.mp3")
        messages = groq_client.chat.completions.create.call_args.kwargs["messages"]
        assert messages[1] == {"role": "user", "content": "My car was hit from behind"}
        assert (
            tts_client.synthesize_speech.call_args.kwargs["input"].text
            == "File a police report and contact your insurer."
        )

    def test_speak_reply_missing_text(self, client, groq_client, tts_client):
        response = client.post("/speak-reply", json={})

        assert response.status_code == 400
        assert response.text == "Missing text"
        groq_client.chat.completions.create.assert_not_called()
        tts_client.synthesize_speech.assert_not_called()

    def test_speak_reply_without_choice_speaks_fallback(self, client, groq_client, tts_client):
        groq_client.chat.completions.create.return_value = completion()

        response = client.post("/speak-reply", json={"text": "Hello"})

        assert response.status_code == 200
        assert tts_client.synthesize_speech.call_args.kwargs["input"].text == "No response from Groq."

    def test_speak_reply_blank_choice_speaks_fallback(self, client, groq_client, tts_client):
        groq_client.chat.completions.create.return_value = completion("   \n")

        response = client.post("/speak-reply", json={"text": "Hello"})

        assert_audio_attachment(response, "reply.mp3")
        assert tts_client.synthesize_speech.call_args.kwargs["input"].text == "No response from Groq."


class TestCall:

    def test_call_scenario(self, client, speech_client, groq_client, tts_client, upload_dir):
        response = client.post("/call", files={"audio": AUDIO_FILE}, data={"callerId": "caller-42"})

        assert_audio_attachment(response, "reply.mp3")
        assert speech_client.recognize.call_args.kwargs["audio"].content == AUDIO_FILE[1]
        messages = groq_client.chat.completions.create.call_args.kwargs["messages"]
        assert messages[1]["content"] == "I was in an accident"
        assert (
            tts_client.synthesize_speech.call_args.kwargs["input"].text
            == "Stay calm and call 911 if needed."
        )
        assert list(upload_dir.iterdir()) == []

    def test_call_without_audio(self, client, speech_client, upload_dir):
        response = client.post("/call", data={"callerId": "caller-42"})

        assert response.status_code == 400
        assert response.text == "Missing audio file"
        speech_client.recognize.assert_not_called()
        assert not upload_dir.exists()

    def test_call_without_recognized_speech_uses_fallback(self, client, speech_client, groq_client):
        speech_client.recognize.return_value = speech.RecognizeResponse()

        response = client.post("/call", files={"audio": AUDIO_FILE})

        assert response.status_code == 200
        messages = groq_client.chat.completions.create.call_args.kwargs["messages"]
        assert messages[1] == {"role": "user", "content": FALLBACK_UTTERANCE}

    def test_call_blank_choice_speaks_fallback(self, client, groq_client, tts_client, upload_dir):
        groq_client.chat.completions.create.return_value = completion("   \n")

        response = client.post("/call", files={"audio": AUDIO_FILE})

        assert_audio_attachment(response, "reply.mp3")
        assert tts_client.synthesize_speech.call_args.kwargs["input"].text == "No response from Groq."
        assert list(upload_dir.iterdir()) == []

    @pytest.mark.parametrize("failing", ["speech", "synthesis"])
    def test_call_upstream_failure_removes_upload(
        self, client, speech_client, tts_client, upload_dir, failing
    ):
        if failing == "speech":
            speech_client.recognize.side_effect = google_exceptions.ServiceUnavailable("down")
        else:
            tts_client.synthesize_speech.side_effect = google_exceptions.InternalServerError("boom")

        response = client.post("/call", files={"audio": AUDIO_FILE})

        assert response.status_code == 500
        assert response.text == "Upstream service failure"
        assert list(upload_dir.iterdir()) == []

    def test_call_does_not_return_room_token_by_default(self, client):
        response = client.post("/call", files={"audio": AUDIO_FILE})

        assert response.status_code == 200
        assert "x-room-token" not in response.headers

    def test_call_returns_room_token_when_enabled(self, settings, voice_services):
        settings = settings.model_copy(update={"expose_room_token": True})

        with TestClient(create_app(settings=settings, services=voice_services)) as client:
            response = client.post(
                "/call", files={"audio": AUDIO_FILE}, data={"callerId": "caller-42"}
            )

        assert response.status_code == 200
        claims = jwt.decode(response.headers["x-room-token"], TEST_API_SECRET, algorithms=["HS256"])
        assert claims["sub"] == "caller-42"
        assert claims["video"]["room"] == "insurance-room"

    def test_call_default_caller_identity(self, settings, voice_services):
        settings = settings.model_copy(update={"expose_room_token": True})

        with TestClient(create_app(settings=settings, services=voice_services)) as client:
            response = client.post("/call", files={"audio": AUDIO_FILE})

        claims = jwt.decode(response.headers["x-room-token"], TEST_API_SECRET, algorithms=["HS256"])
        assert claims["sub"] == "caller"


class TestApplication:

    def test_startup_fails_without_required_secrets(self, voice_services):
        app = create_app(settings=Settings(), services=voice_services)

        with pytest.raises(ConfigurationError):
            with TestClient(app):
                pass

    def test_health_check(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["configured"] == {
            "LIVEKIT_API_KEY": True,
            "LIVEKIT_API_SECRET": True,
            "GROQ_API_KEY": True,
        }

    def test_root_endpoint(self, client):
        response = client.get("/")

        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "Insurance Voice Agent"
        assert body["version"] == "1.0.0"
        for path in ("/call", "/speak", "/speak-reply", "/health"):
            assert path in body["endpoints"]

    def test_module_app_routes(self):
        route_paths = [route.path for route in module_app.routes]
        for path in ("/call", "/speak", "/speak-reply", "/health", "/"):
            assert path in route_paths
