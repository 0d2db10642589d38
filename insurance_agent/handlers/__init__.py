"""
Handlers module for the HTTP endpoints of the insurance voice agent.

Each handler runs one pipeline and turns its SpokenReply into a binary audio
response with a download filename.

Key components:
- call_handlers: POST /call, uploaded caller audio in, spoken reply out.
- speech_handlers: POST /speak and POST /speak-reply, JSON text in, audio out.
- responses: Building the audio/mpeg attachment response.

Usage examples:
```python
from insurance_agent.handlers.speech_handlers import handle_speak

@app.post("/speak")
async def speak(body: SpeakRequest, request: Request):
    return await handle_speak(body, request.app.state.services)
```
"""
