"""
Process-wide handles to the external collaborators.

Client construction (auth, channel setup) is expensive, so each client is
built once at startup and shared read-only by all in-flight requests.
"""

import logging
from dataclasses import dataclass

from google.auth import exceptions as google_auth_exceptions

from insurance_agent.config.constants import LOGGER_NAME
from insurance_agent.config.settings import Settings
from insurance_agent.errors import ConfigurationError
from insurance_agent.services import (
    CredentialIssuer,
    ResponseGenerator,
    SpeechSynthesizer,
    TranscriptionAdapter,
)

logger = logging.getLogger(LOGGER_NAME)


@dataclass(frozen=True)
class VoiceServices:
    """The four collaborators a pipeline may compose."""

    issuer: CredentialIssuer
    transcriber: TranscriptionAdapter
    generator: ResponseGenerator
    synthesizer: SpeechSynthesizer


def build_services(settings: Settings) -> VoiceServices:
    """
    Construct every collaborator from settings.

    Args:
        settings: Validated process-wide settings

    Returns:
        VoiceServices shared by all requests

    Raises:
        ConfigurationError: If signing keys or Google credentials are missing
    """
    issuer = CredentialIssuer(
        settings.livekit_api_key,
        settings.livekit_api_secret,
        ttl_seconds=settings.room_token_ttl_seconds,
    )

    try:
        transcriber = TranscriptionAdapter()
        synthesizer = SpeechSynthesizer()
    except google_auth_exceptions.DefaultCredentialsError as e:
        raise ConfigurationError(f"Google Cloud credentials are not configured: {e}") from e

    generator = ResponseGenerator(api_key=settings.groq_api_key, model=settings.groq_model)

    logger.info("Voice services initialized")
    return VoiceServices(
        issuer=issuer,
        transcriber=transcriber,
        generator=generator,
        synthesizer=synthesizer,
    )
