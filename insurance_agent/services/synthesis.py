"""
Text-to-speech through Google Cloud Text-to-Speech.
"""

import logging
from typing import Optional

from google.api_core import exceptions as google_exceptions
from google.cloud import texttospeech

from insurance_agent.config.constants import (
    LOGGER_NAME,
    MISSING_TEXT_MESSAGE,
    SYNTHESIS_ENCODING,
    SYNTHESIS_GENDER,
    SYNTHESIS_LANGUAGE,
)
from insurance_agent.errors import UpstreamServiceError, ValidationError

logger = logging.getLogger(LOGGER_NAME)


class SpeechSynthesizer:
    """
    Converts text to MP3 audio with one fixed voice.
    """

    def __init__(self, client: Optional[texttospeech.TextToSpeechAsyncClient] = None):
        self.client = client or texttospeech.TextToSpeechAsyncClient()
        self.voice = texttospeech.VoiceSelectionParams(
            language_code=SYNTHESIS_LANGUAGE,
            ssml_gender=texttospeech.SsmlVoiceGender[SYNTHESIS_GENDER],
        )
        self.audio_config = texttospeech.AudioConfig(
            audio_encoding=texttospeech.AudioEncoding[SYNTHESIS_ENCODING],
        )

    async def synthesize(self, text: str) -> bytes:
        """
        Synthesize text to audio.

        Args:
            text: Non-empty text to speak

        Returns:
            MP3-encoded audio bytes

        Raises:
            ValidationError: If text is empty
            UpstreamServiceError: If the synthesis call fails
        """
        if not text or not text.strip():
            raise ValidationError(MISSING_TEXT_MESSAGE)

        try:
            response = await self.client.synthesize_speech(
                input=texttospeech.SynthesisInput(text=text),
                voice=self.voice,
                audio_config=self.audio_config,
            )
        except google_exceptions.GoogleAPIError as e:
            raise UpstreamServiceError("synthesis", f"Speech synthesis failed: {e}") from e

        logger.debug(f"Synthesized {len(response.audio_content)} bytes of audio")
        return response.audio_content
