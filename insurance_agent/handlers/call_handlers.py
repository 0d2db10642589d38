"""
Handles uploaded caller audio on POST /call.
"""

import logging
from typing import Optional

from fastapi import Response, UploadFile

from insurance_agent.bot.pipelines import CallPipeline, CallStage
from insurance_agent.bot.services import VoiceServices
from insurance_agent.config.constants import LOGGER_NAME, ROOM_TOKEN_HEADER
from insurance_agent.config.settings import Settings
from insurance_agent.handlers.responses import build_audio_response

logger = logging.getLogger(LOGGER_NAME)


async def handle_call(
    audio: Optional[UploadFile],
    caller_id: Optional[str],
    services: VoiceServices,
    settings: Settings,
) -> Response:
    """
    Run the call pipeline and return the spoken reply.

    The room token issued for the caller is only returned, in the
    X-Room-Token header, when EXPOSE_ROOM_TOKEN is enabled.

    Args:
        audio: Uploaded caller audio, None when the form had no file
        caller_id: Value of the optional callerId form field
        services: Shared collaborator handles
        settings: Process-wide settings

    Returns:
        audio/mpeg attachment named reply.mp3
    """
    pipeline = CallPipeline(services, upload_dir=settings.upload_dir)
    reply = await pipeline.run(audio, caller_id)

    extra_headers = {}
    if settings.expose_room_token and reply.room_token:
        extra_headers[ROOM_TOKEN_HEADER] = reply.room_token

    response = build_audio_response(reply, extra_headers)
    logger.info(
        f"Call moved to {CallStage.RESPONDED.value} with {len(reply.audio)} bytes of reply audio"
    )
    return response
