"""
Reply generation through Groq chat completions.
"""

import logging
from typing import Optional

from groq import APIError, AsyncGroq

from insurance_agent.config.constants import (
    DEFAULT_GENERATION_MODEL,
    FALLBACK_REPLY,
    LOGGER_NAME,
    PERSONA_PROMPT,
)
from insurance_agent.errors import UpstreamServiceError

logger = logging.getLogger(LOGGER_NAME)


class ResponseGenerator:
    """
    Answers a caller utterance in the insurance-agent persona.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = DEFAULT_GENERATION_MODEL,
        client: Optional[AsyncGroq] = None,
    ):
        self.model = model
        self.client = client or AsyncGroq(api_key=api_key)
        logger.info(f"ResponseGenerator initialized with model: {model}")

    def build_messages(self, utterance: str):
        return [
            {"role": "system", "content": PERSONA_PROMPT},
            {"role": "user", "content": utterance},
        ]

    async def generate(self, utterance: str) -> str:
        """
        Generate a reply for an utterance.

        Args:
            utterance: Caller text, transcribed or typed

        Returns:
            Content of the first choice, or the fallback reply if there is none

        Raises:
            UpstreamServiceError: If the Groq call fails
        """
        try:
            response = await self.client.chat.completions.create(
                messages=self.build_messages(utterance),
                model=self.model,
            )
        except APIError as e:
            raise UpstreamServiceError("generation", f"Groq completion failed: {e}") from e

        content = None
        if response.choices:
            content = response.choices[0].message.content

        if not content or not content.strip():
            logger.warning("Groq returned no usable choice, using fallback reply")
            return FALLBACK_REPLY

        return content
