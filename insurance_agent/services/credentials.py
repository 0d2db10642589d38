"""
Room-join credentials for the real-time media session.

Tokens are signed locally with the LiveKit key/secret pair; no network call
is made.
"""

import logging
from datetime import timedelta
from typing import Optional

from livekit import api

from insurance_agent.config.constants import (
    DEFAULT_ROOM_TOKEN_TTL_SECONDS,
    LOGGER_NAME,
    ROOM_NAME,
)
from insurance_agent.errors import ConfigurationError

logger = logging.getLogger(LOGGER_NAME)


class CredentialIssuer:
    """
    Issues signed LiveKit access tokens granting join on the insurance room.
    """

    def __init__(
        self,
        api_key: Optional[str],
        api_secret: Optional[str],
        ttl_seconds: int = DEFAULT_ROOM_TOKEN_TTL_SECONDS,
        room: str = ROOM_NAME,
    ):
        if not api_key or not api_secret:
            raise ConfigurationError("LIVEKIT_API_KEY and LIVEKIT_API_SECRET must be set")

        self.api_key = api_key
        self.api_secret = api_secret
        self.ttl = timedelta(seconds=ttl_seconds)
        self.room = room

    def issue(self, identity: str) -> str:
        """
        Build a room-join token for a caller.

        Args:
            identity: Opaque caller identity used as the token subject

        Returns:
            The signed token as a JWT string
        """
        token = (
            api.AccessToken(self.api_key, self.api_secret)
            .with_identity(identity)
            .with_ttl(self.ttl)
            .with_grants(api.VideoGrants(room_join=True, room=self.room))
            .to_jwt()
        )
        logger.debug(f"Issued room token for identity '{identity}' in room '{self.room}'")
        return token
