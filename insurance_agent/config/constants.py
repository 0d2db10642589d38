"""
Constants and configuration values used throughout the application.

These values are fixed for the lifetime of the process. Anything that varies
between deployments lives in settings instead.
"""

# Logger name used throughout the application
LOGGER_NAME = "insurance_agent"

# Room credential
ROOM_NAME = "insurance-room"
DEFAULT_CALLER_ID = "caller"
DEFAULT_ROOM_TOKEN_TTL_SECONDS = 6 * 60 * 60
ROOM_TOKEN_HEADER = "X-Room-Token"

# Text generation
PERSONA_PROMPT = "You are an insurance agent U.S. based."
DEFAULT_GENERATION_MODEL = "allam-2-7b"
FALLBACK_REPLY = "No response from Groq."

# Speech recognition profile (Opus in WebM as recorded by browsers)
FALLBACK_UTTERANCE = "I had an accident, what should I do?"
RECOGNITION_ENCODING = "WEBM_OPUS"
RECOGNITION_SAMPLE_RATE_HZ = 48000
RECOGNITION_LANGUAGE = "en-US"

# Speech synthesis profile
SYNTHESIS_LANGUAGE = "en-US"
SYNTHESIS_GENDER = "NEUTRAL"
SYNTHESIS_ENCODING = "MP3"

# Response media
AUDIO_MEDIA_TYPE = "audio/mpeg"
CALL_REPLY_FILENAME = "reply.mp3"
SPEAK_FILENAME = "speech.mp3"
SPEAK_REPLY_FILENAME = "reply.mp3"

# Temporary storage for uploaded caller audio
DEFAULT_UPLOAD_DIR = "uploads"

# Validation messages returned to the caller
MISSING_TEXT_MESSAGE = "Missing text"
MISSING_AUDIO_MESSAGE = "Missing audio file"
