"""
Error kinds raised by the call-handling pipelines.

Each error carries the HTTP status it maps to at the request boundary.
Degraded results (no recognized speech, no generation choice) are not errors
and never raise.
"""

from typing import Optional


class VoiceAgentError(Exception):
    """Base class for all errors surfaced by the voice agent."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(VoiceAgentError):
    """A required input is missing: no audio file, or empty/absent text."""

    status_code = 400


class ConfigurationError(VoiceAgentError):
    """A required process-wide secret or key is not configured."""

    status_code = 500


class UpstreamServiceError(VoiceAgentError):
    """A recognition, generation or synthesis call failed."""

    status_code = 500

    def __init__(self, service: str, message: Optional[str] = None):
        super().__init__(message or f"{service} service call failed")
        self.service = service
