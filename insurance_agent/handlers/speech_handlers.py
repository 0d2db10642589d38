"""
Handles caller-supplied text on POST /speak and POST /speak-reply.
"""

import logging

from fastapi import Request, Response
from pydantic import ValidationError as PydanticValidationError

from insurance_agent.bot.pipelines import DirectSpeechPipeline, TextReplyPipeline
from insurance_agent.bot.services import VoiceServices
from insurance_agent.config.constants import LOGGER_NAME
from insurance_agent.handlers.responses import build_audio_response
from insurance_agent.models.schemas import SpeakRequest

logger = logging.getLogger(LOGGER_NAME)


async def parse_speak_request(request: Request) -> SpeakRequest:
    """
    Read a /speak or /speak-reply body leniently.

    A body that is not a JSON object, or whose text is not a string, is read
    as an empty request so the pipeline reports "Missing text".
    """
    try:
        payload = await request.json()
    except ValueError:
        logger.debug(f"Non-JSON body on {request.url.path}")
        return SpeakRequest()

    if not isinstance(payload, dict):
        return SpeakRequest()

    try:
        return SpeakRequest(**payload)
    except PydanticValidationError:
        return SpeakRequest()


async def handle_speak(body: SpeakRequest, services: VoiceServices) -> Response:
    """Speak the given text as-is, returned as speech.mp3."""
    reply = await DirectSpeechPipeline(services).run(body.text)
    return build_audio_response(reply)


async def handle_speak_reply(body: SpeakRequest, services: VoiceServices) -> Response:
    """Generate a reply to the given text and speak it, returned as reply.mp3."""
    reply = await TextReplyPipeline(services).run(body.text)
    logger.info(f"Generated reply: {reply.reply_text}")
    return build_audio_response(reply)
