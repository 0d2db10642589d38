"""
Pydantic models for the HTTP surface of the insurance voice agent.
"""

from typing import Dict, Optional

from pydantic import BaseModel, Field

from insurance_agent.config.constants import AUDIO_MEDIA_TYPE


class SpeakRequest(BaseModel):
    """JSON body of /speak and /speak-reply.

    ``text`` is optional at the schema level so that a missing field reaches
    the pipeline and is reported as "Missing text" rather than a schema error.
    """

    text: Optional[str] = Field(None, description="Text to speak or to reply to")


class SpokenReply(BaseModel):
    """Audio produced by a pipeline, ready to be sent as an attachment."""

    audio: bytes = Field(..., description="Encoded audio body")
    filename: str = Field(..., description="Attachment filename")
    media_type: str = Field(AUDIO_MEDIA_TYPE, description="Content type of the audio")
    room_token: Optional[str] = Field(None, description="Room token issued for the caller")
    transcript: Optional[str] = Field(None, description="Recognized caller utterance")
    reply_text: Optional[str] = Field(None, description="Generated reply that was spoken")

    @property
    def content_disposition(self) -> str:
        return f'attachment; filename="{self.filename}"'


class HealthResponse(BaseModel):
    """Response of the /health endpoint."""

    status: str = "healthy"
    configured: Dict[str, bool] = Field(default_factory=dict)
