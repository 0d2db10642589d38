"""
Speech-to-text through Google Cloud Speech.

Caller audio is expected as Opus in WebM at 48 kHz, the format browsers
record with MediaRecorder. No format detection is done.
"""

import logging
from typing import Optional

from google.api_core import exceptions as google_exceptions
from google.cloud import speech

from insurance_agent.config.constants import (
    FALLBACK_UTTERANCE,
    LOGGER_NAME,
    RECOGNITION_ENCODING,
    RECOGNITION_LANGUAGE,
    RECOGNITION_SAMPLE_RATE_HZ,
)
from insurance_agent.errors import UpstreamServiceError

logger = logging.getLogger(LOGGER_NAME)


class TranscriptionAdapter:
    """
    Converts an audio payload to text with a single recognize request.
    """

    def __init__(self, client: Optional[speech.SpeechAsyncClient] = None):
        self.client = client or speech.SpeechAsyncClient()
        self.config = speech.RecognitionConfig(
            encoding=speech.RecognitionConfig.AudioEncoding[RECOGNITION_ENCODING],
            sample_rate_hertz=RECOGNITION_SAMPLE_RATE_HZ,
            language_code=RECOGNITION_LANGUAGE,
        )

    async def transcribe(self, audio: bytes) -> str:
        """
        Transcribe an audio payload.

        When nothing is recognized (silence, noise) the fallback utterance is
        returned instead of an error, so the conversation still continues.

        Args:
            audio: Raw encoded caller audio

        Returns:
            The first alternative of the first result, or the fallback utterance

        Raises:
            UpstreamServiceError: If the recognition call itself fails
        """
        # The client base64-encodes the content bytes for transport
        recognition_audio = speech.RecognitionAudio(content=audio)

        try:
            response = await self.client.recognize(config=self.config, audio=recognition_audio)
        except google_exceptions.GoogleAPIError as e:
            raise UpstreamServiceError("speech", f"Speech recognition failed: {e}") from e

        transcript = ""
        if response.results and response.results[0].alternatives:
            transcript = response.results[0].alternatives[0].transcript

        if not transcript:
            logger.warning("No speech recognized, using fallback utterance")
            return FALLBACK_UTTERANCE

        return transcript
