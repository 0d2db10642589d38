"""
Configuration module for the insurance voice agent.

Key components:
- constants: Fixed values shared across the application: the persona prompt,
  the room name, the recognition and synthesis profiles and the fallback texts.
- logging_config: Console and rotating file logging for the application logger.
- settings: Environment-driven settings, including the startup check for
  required secrets.

Usage examples:
```python
from insurance_agent.config.constants import LOGGER_NAME, PERSONA_PROMPT
from insurance_agent.config.logging_config import configure_logging
from insurance_agent.config.settings import Settings

logger = configure_logging()
settings = Settings.from_env()
settings.validate_required()
```
"""
