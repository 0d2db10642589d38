"""
FastAPI server for the insurance voice agent.

This module builds the FastAPI application exposing the three spoken-reply
endpoints:
- POST /call: uploaded caller audio -> transcription -> reply -> speech
- POST /speak-reply: text -> reply -> speech
- POST /speak: text -> speech

Required secrets are validated and the collaborator clients are built once
during application startup; a missing secret stops the server from starting
instead of failing a request later.
"""

import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, File, Form, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from insurance_agent.bot.services import VoiceServices, build_services
from insurance_agent.config.logging_config import configure_logging
from insurance_agent.config.settings import Settings
from insurance_agent.errors import (
    ConfigurationError,
    UpstreamServiceError,
    ValidationError,
    VoiceAgentError,
)
from insurance_agent.handlers.call_handlers import handle_call
from insurance_agent.handlers.speech_handlers import (
    handle_speak,
    handle_speak_reply,
    parse_speak_request,
)
from insurance_agent.models.schemas import HealthResponse, SpeakRequest

# Configure logging
logger = configure_logging()

APP_TITLE = "Insurance Voice Agent"
APP_DESCRIPTION = "Spoken insurance-agent replies using Google Speech, Groq and LiveKit"
APP_VERSION = "1.0.0"


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_services(request: Request) -> VoiceServices:
    return request.app.state.services


async def voice_agent_error_handler(request: Request, exc: VoiceAgentError) -> PlainTextResponse:
    """Map pipeline errors to short plain-text responses."""
    if isinstance(exc, ValidationError):
        logger.warning(f"Rejected {request.url.path}: {exc.message}")
        body = exc.message
    elif isinstance(exc, UpstreamServiceError):
        logger.error(f"Upstream {exc.service} failure on {request.url.path}: {exc.message}")
        body = "Upstream service failure"
    elif isinstance(exc, ConfigurationError):
        logger.error(f"Configuration error on {request.url.path}: {exc.message}")
        body = "Server misconfigured"
    else:
        logger.error(f"Unexpected voice agent error on {request.url.path}: {exc.message}")
        body = "Internal server error"
    return PlainTextResponse(body, status_code=exc.status_code)


def create_app(
    settings: Optional[Settings] = None, services: Optional[VoiceServices] = None
) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        settings: Settings to use, read from the environment when omitted
        services: Prebuilt collaborator handles, built at startup when omitted

    Returns:
        The configured FastAPI application
    """
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.settings.validate_required()
        if app.state.services is None:
            app.state.services = build_services(app.state.settings)
        logger.info("Insurance voice agent ready")
        yield

    app = FastAPI(
        title=APP_TITLE,
        description=APP_DESCRIPTION,
        version=APP_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.services = services

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(VoiceAgentError, voice_agent_error_handler)

    @app.post("/call")
    async def call(
        audio: Optional[UploadFile] = File(None),
        caller_id: Optional[str] = Form(None, alias="callerId"),
        services: VoiceServices = Depends(get_services),
        settings: Settings = Depends(get_settings),
    ):
        """Answer an uploaded voice clip with a spoken reply (reply.mp3)."""
        return await handle_call(audio, caller_id, services, settings)

    @app.post("/speak")
    async def speak(
        body: SpeakRequest = Depends(parse_speak_request),
        services: VoiceServices = Depends(get_services),
    ):
        """Speak the given text (speech.mp3)."""
        return await handle_speak(body, services)

    @app.post("/speak-reply")
    async def speak_reply(
        body: SpeakRequest = Depends(parse_speak_request),
        services: VoiceServices = Depends(get_services),
    ):
        """Reply to the given text as the insurance agent and speak the reply (reply.mp3)."""
        return await handle_speak_reply(body, services)

    @app.get("/health", response_model=HealthResponse)
    async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
        """Report service status and which required secrets are configured."""
        missing = set(settings.missing_required())
        configured = {
            name: name not in missing
            for name in ("LIVEKIT_API_KEY", "LIVEKIT_API_SECRET", "GROQ_API_KEY")
        }
        return HealthResponse(status="healthy", configured=configured)

    @app.get("/")
    async def root():
        """Basic information about the API."""
        return {
            "name": APP_TITLE,
            "description": APP_DESCRIPTION,
            "version": APP_VERSION,
            "endpoints": {
                "/call": "Upload caller audio, receive a spoken reply",
                "/speak": "Synthesize the given text",
                "/speak-reply": "Reply to the given text and synthesize the reply",
                "/health": "Health check endpoint",
            },
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8080"))
    logger.info(f"Starting server on http://{host}:{port}")
    uvicorn.run(app, host=host, port=port)
