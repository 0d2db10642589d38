"""
Bot module holding the call-handling pipelines of the insurance voice agent.

Key components:
- VoiceServices / build_services: Process-wide, read-only handles to the four
  collaborators, built once at startup and shared by every request.
- temporary_upload: Scoped ownership of the uploaded caller audio on disk,
  removed again on every exit path.
- CallPipeline: Upload -> transcription -> reply -> speech, with a room token
  issued for the caller.
- TextReplyPipeline: Text -> reply -> speech.
- DirectSpeechPipeline: Text -> speech.

Usage examples:
```python
from insurance_agent.bot import CallPipeline, build_services
from insurance_agent.config.settings import Settings

settings = Settings.from_env()
services = build_services(settings)

pipeline = CallPipeline(services, upload_dir=settings.upload_dir)
reply = await pipeline.run(upload_file, caller_id="caller-42")
```
"""

from insurance_agent.bot.pipelines import (
    CallPipeline,
    CallStage,
    DirectSpeechPipeline,
    TextReplyPipeline,
)
from insurance_agent.bot.services import VoiceServices, build_services
from insurance_agent.bot.uploads import temporary_upload

__all__ = [
    "CallPipeline",
    "CallStage",
    "DirectSpeechPipeline",
    "TextReplyPipeline",
    "VoiceServices",
    "build_services",
    "temporary_upload",
]
