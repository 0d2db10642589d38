"""
Environment-driven settings for the insurance voice agent.

Values are read once at startup, after loading a ``.env`` file from the working
directory if one exists, and are treated as read-only afterwards. Google Cloud
credentials are picked up by the Google client libraries themselves
(``GOOGLE_APPLICATION_CREDENTIALS``) and are not modelled here.
"""

import os
from pathlib import Path
from typing import List, Optional

import dotenv
from pydantic import BaseModel, Field

from insurance_agent.config.constants import (
    DEFAULT_GENERATION_MODEL,
    DEFAULT_ROOM_TOKEN_TTL_SECONDS,
    DEFAULT_UPLOAD_DIR,
)
from insurance_agent.errors import ConfigurationError

TRUE_VALUES = {"1", "true", "yes", "on"}


def load_env_file(path: Path = Path(".") / ".env") -> bool:
    """Load environment variables from a .env file if it exists."""
    if path.exists():
        return dotenv.load_dotenv(path)
    return False


def _split_origins(value: str) -> List[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


class Settings(BaseModel):
    """Process-wide configuration consumed at startup."""

    livekit_api_key: Optional[str] = Field(None, description="Room token signing key")
    livekit_api_secret: Optional[str] = Field(None, description="Room token signing secret")
    groq_api_key: Optional[str] = Field(None, description="Groq API key")
    groq_model: str = Field(DEFAULT_GENERATION_MODEL, description="Groq model identifier")
    upload_dir: str = Field(DEFAULT_UPLOAD_DIR, description="Directory for uploaded caller audio")
    room_token_ttl_seconds: int = Field(
        DEFAULT_ROOM_TOKEN_TTL_SECONDS, gt=0, description="Lifetime of issued room tokens"
    )
    expose_room_token: bool = Field(
        False, description="Return the issued room token to /call callers in a header"
    )
    cors_allow_origins: List[str] = Field(default_factory=lambda: ["*"])

    model_config = {"frozen": True}

    @classmethod
    def from_env(cls, load_dotenv: bool = True) -> "Settings":
        """Build settings from environment variables."""
        if load_dotenv:
            load_env_file()

        ttl_value = os.getenv("ROOM_TOKEN_TTL_SECONDS", str(DEFAULT_ROOM_TOKEN_TTL_SECONDS))
        try:
            room_token_ttl_seconds = int(ttl_value)
        except ValueError as e:
            raise ConfigurationError("ROOM_TOKEN_TTL_SECONDS must be an integer") from e

        return cls(
            livekit_api_key=os.getenv("LIVEKIT_API_KEY") or None,
            livekit_api_secret=os.getenv("LIVEKIT_API_SECRET") or None,
            groq_api_key=os.getenv("GROQ_API_KEY") or None,
            groq_model=os.getenv("GROQ_MODEL", DEFAULT_GENERATION_MODEL),
            upload_dir=os.getenv("UPLOAD_DIR", DEFAULT_UPLOAD_DIR),
            room_token_ttl_seconds=room_token_ttl_seconds,
            expose_room_token=os.getenv("EXPOSE_ROOM_TOKEN", "false").lower() in TRUE_VALUES,
            cors_allow_origins=_split_origins(os.getenv("CORS_ALLOW_ORIGINS", "*")),
        )

    def missing_required(self) -> List[str]:
        """Return the environment variable names of required secrets that are not set."""
        required = {
            "LIVEKIT_API_KEY": self.livekit_api_key,
            "LIVEKIT_API_SECRET": self.livekit_api_secret,
            "GROQ_API_KEY": self.groq_api_key,
        }
        return [name for name, value in required.items() if not value]

    def validate_required(self) -> None:
        """
        Fail fast when a required secret is missing.

        Raises:
            ConfigurationError: If any required secret is not configured
        """
        missing = self.missing_required()
        if missing:
            raise ConfigurationError(f"{', '.join(missing)} must be set")
