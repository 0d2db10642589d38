"""
Models module for request and response data in the insurance voice agent.

Key components:
- schemas: Pydantic models for the JSON request bodies, the spoken reply
  produced by every pipeline and the health endpoint response.

Usage examples:
```python
from insurance_agent.models import SpeakRequest, SpokenReply

request = SpeakRequest(text="My car was hit from behind")
reply = SpokenReply(audio=b"...", filename="reply.mp3")
```
"""

from insurance_agent.models.schemas import HealthResponse, SpeakRequest, SpokenReply

__all__ = ["HealthResponse", "SpeakRequest", "SpokenReply"]
