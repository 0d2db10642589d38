"""
Call-handling pipelines.

Every pipeline composes a subset of the collaborators strictly in sequence:
each external call's output is the next call's input, and nothing runs in
parallel or is retried. Upstream failures propagate to the caller unchanged.
"""

import asyncio
import logging
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from fastapi import UploadFile

from insurance_agent.bot.services import VoiceServices
from insurance_agent.bot.uploads import temporary_upload
from insurance_agent.config.constants import (
    CALL_REPLY_FILENAME,
    DEFAULT_CALLER_ID,
    DEFAULT_UPLOAD_DIR,
    LOGGER_NAME,
    MISSING_AUDIO_MESSAGE,
    MISSING_TEXT_MESSAGE,
    SPEAK_FILENAME,
    SPEAK_REPLY_FILENAME,
)
from insurance_agent.errors import ValidationError
from insurance_agent.models.schemas import SpokenReply

logger = logging.getLogger(LOGGER_NAME)


class CallStage(str, Enum):
    """Progress of a single /call request.

    CallPipeline moves through every state up to CLEANED_UP; the upload is
    removed before the reply is sent, so RESPONDED is the last state and is
    recorded by the HTTP handler once the response is built.
    """

    RECEIVED_UPLOAD = "ReceivedUpload"
    CREDENTIAL_ISSUED = "CredentialIssued"
    TRANSCRIBED = "Transcribed"
    GENERATED = "Generated"
    SYNTHESIZED = "Synthesized"
    CLEANED_UP = "CleanedUp"
    RESPONDED = "Responded"
    FAILED = "Failed"


def require_text(text: Optional[str]) -> str:
    """Return text if it is non-empty, otherwise raise ValidationError."""
    if not text or not text.strip():
        raise ValidationError(MISSING_TEXT_MESSAGE)
    return text


class CallPipeline:
    """
    Turns an uploaded audio clip into a spoken reply.

    The stages are:
    1. Validate that an audio file was uploaded
    2. Issue a room token for the caller
    3. Store the upload, read it back and transcribe it
    4. Generate a reply to the transcript
    5. Synthesize the reply

    The stored upload is removed on every exit path once it was written.
    """

    def __init__(self, services: VoiceServices, upload_dir: Union[str, Path] = DEFAULT_UPLOAD_DIR):
        self.services = services
        self.upload_dir = upload_dir
        self.stage = CallStage.RECEIVED_UPLOAD

    async def run(self, upload: Optional[UploadFile], caller_id: Optional[str] = None) -> SpokenReply:
        """
        Run the pipeline for one request.

        Args:
            upload: The caller's recorded audio, or None if none was sent
            caller_id: Opaque caller identity; empty means "caller"

        Returns:
            SpokenReply with the synthesized audio and the issued room token

        Raises:
            ValidationError: If no audio file was uploaded
            ConfigurationError: If the room token cannot be signed
            UpstreamServiceError: If any external call fails
        """
        self.stage = CallStage.RECEIVED_UPLOAD
        if upload is None:
            raise ValidationError(MISSING_AUDIO_MESSAGE)

        identity = caller_id or DEFAULT_CALLER_ID

        try:
            room_token = self.services.issuer.issue(identity)
            self._advance(identity, CallStage.CREDENTIAL_ISSUED)

            async with temporary_upload(upload, self.upload_dir) as path:
                audio = await asyncio.to_thread(path.read_bytes)

                transcript = await self.services.transcriber.transcribe(audio)
                logger.info(f"Transcribed text: {transcript}")
                self._advance(identity, CallStage.TRANSCRIBED)

                reply_text = await self.services.generator.generate(transcript)
                self._advance(identity, CallStage.GENERATED)

                reply_audio = await self.services.synthesizer.synthesize(reply_text)
                self._advance(identity, CallStage.SYNTHESIZED)

            self._advance(identity, CallStage.CLEANED_UP)
        except Exception:
            logger.error(
                f"Call for '{identity}' moved to {CallStage.FAILED.value} after stage {self.stage.value}"
            )
            self.stage = CallStage.FAILED
            raise

        return SpokenReply(
            audio=reply_audio,
            filename=CALL_REPLY_FILENAME,
            room_token=room_token,
            transcript=transcript,
            reply_text=reply_text,
        )

    def _advance(self, identity: str, stage: CallStage) -> None:
        logger.debug(f"Call for '{identity}' reached stage {stage.value}")
        self.stage = stage


class TextReplyPipeline:
    """
    Replies to caller-supplied text: generation followed by synthesis.
    """

    def __init__(self, services: VoiceServices):
        self.services = services

    async def run(self, text: Optional[str]) -> SpokenReply:
        utterance = require_text(text)
        reply_text = await self.services.generator.generate(utterance)
        audio = await self.services.synthesizer.synthesize(reply_text)
        return SpokenReply(
            audio=audio,
            filename=SPEAK_REPLY_FILENAME,
            transcript=utterance,
            reply_text=reply_text,
        )


class DirectSpeechPipeline:
    """Speaks caller-supplied text as-is."""

    def __init__(self, services: VoiceServices):
        self.services = services

    async def run(self, text: Optional[str]) -> SpokenReply:
        spoken = require_text(text)
        audio = await self.services.synthesizer.synthesize(spoken)
        return SpokenReply(audio=audio, filename=SPEAK_FILENAME, reply_text=spoken)
