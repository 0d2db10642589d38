"""
Insurance Voice Agent - spoken replies for insurance callers

This application turns a caller's recorded question into a spoken answer from an
insurance-agent persona. It chains three cloud collaborators in sequence:
Google Cloud Speech-to-Text for transcription, Groq for the reply text and
Google Cloud Text-to-Speech for the audio, and issues a LiveKit room-join
token for the caller alongside.

Architecture Overview:
- FastAPI server exposing the /call, /speak and /speak-reply endpoints
- Thin adapters around each external collaborator
- Sequential pipelines composing those adapters, one per endpoint
- Process-wide, read-only service handles built once at startup

Key Components:
- bot: The call-handling pipelines, temporary upload handling and service container
- config: Application-wide constants, settings and logging setup
- handlers: HTTP boundary turning pipeline results into audio responses
- models: Pydantic request/response models
- services: Adapters for LiveKit, Google Speech, Groq and Google Text-to-Speech
- errors: Error kinds surfaced by the pipelines

Getting Started:
1. Set up environment variables (or a .env file):
   - LIVEKIT_API_KEY / LIVEKIT_API_SECRET: Room token signing pair
   - GROQ_API_KEY: Groq API key
   - GOOGLE_APPLICATION_CREDENTIALS: Google service account file
   - LOG_LEVEL: Logging level (default INFO)

2. Start the server:
   ```bash
   python run.py --port 8080
   ```
"""
