"""
Binary audio responses for spoken replies.
"""

from typing import Dict, Optional

from fastapi import Response

from insurance_agent.models.schemas import SpokenReply


def build_audio_response(
    reply: SpokenReply, extra_headers: Optional[Dict[str, str]] = None
) -> Response:
    """Return the reply audio as a downloadable attachment."""
    headers = {"Content-Disposition": reply.content_disposition}
    if extra_headers:
        headers.update(extra_headers)
    return Response(content=reply.audio, media_type=reply.media_type, headers=headers)
