"""
Run script for starting the Insurance Voice Agent server.

The required secrets are checked before uvicorn starts, so a misconfigured
deployment fails immediately with a readable message.

Usage:
    python run.py [--port PORT] [--host HOST] [--log-level LEVEL]
"""

import argparse
import os
import sys
from pathlib import Path

import uvicorn

sys.path.append(str(Path(__file__).parent))

from insurance_agent.config.logging_config import configure_logging
from insurance_agent.config.settings import Settings
from insurance_agent.errors import ConfigurationError

# Configure logging
logger = configure_logging()


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Start the Insurance Voice Agent server"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.getenv("PORT", "8080")),
        help="Port to run the server on (default: 8080 or PORT env var)",
    )
    parser.add_argument(
        "--host",
        default=os.getenv("HOST", "0.0.0.0"),
        help="Host to bind the server to (default: 0.0.0.0 or HOST env var)",
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv("LOG_LEVEL", "INFO"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: INFO or LOG_LEVEL env var)",
    )
    return parser.parse_args()


def main():
    """Main entry point for starting the server."""
    args = parse_args()
    configure_logging(args.log_level)

    settings = Settings.from_env()
    try:
        settings.validate_required()
    except ConfigurationError as e:
        logger.error(f"Refusing to start: {e.message}")
        print(f"Error: {e.message}")
        print("Set them in the environment or in a .env file in the working directory")
        sys.exit(1)

    logger.info(f"Starting server on http://{args.host}:{args.port}")
    logger.info(f"Log level: {args.log_level}")
    logger.info(f"Room token returned to callers: {settings.expose_room_token}")

    uvicorn.run(
        "insurance_agent.main:app",
        host=args.host,
        port=args.port,
        log_level=args.log_level.lower(),
        reload=os.getenv("ENV", "production").lower() == "development",
    )


if __name__ == "__main__":
    main()
