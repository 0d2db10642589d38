"""
Services module for external API integrations in the insurance voice agent.

Each component wraps one collaborator behind a small interface and translates
the collaborator's failures into UpstreamServiceError:
- credentials: CredentialIssuer signs LiveKit room-join tokens locally.
- transcription: TranscriptionAdapter calls Google Cloud Speech-to-Text.
- generation: ResponseGenerator calls Groq chat completions.
- synthesis: SpeechSynthesizer calls Google Cloud Text-to-Speech.

Usage examples:
```python
from insurance_agent.services import ResponseGenerator, SpeechSynthesizer

generator = ResponseGenerator(api_key="gsk_...")
synthesizer = SpeechSynthesizer()

reply = await generator.generate("My car was hit from behind")
audio = await synthesizer.synthesize(reply)
```
"""

from insurance_agent.services.credentials import CredentialIssuer
from insurance_agent.services.generation import ResponseGenerator
from insurance_agent.services.synthesis import SpeechSynthesizer
from insurance_agent.services.transcription import TranscriptionAdapter

__all__ = [
    "CredentialIssuer",
    "ResponseGenerator",
    "SpeechSynthesizer",
    "TranscriptionAdapter",
]
