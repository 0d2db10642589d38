"""
Command-line client for exercising the Insurance Voice Agent endpoints.

Usage:
    python client.py call question.webm --caller-id caller-42
    python client.py speak "Thank you for calling"
    python client.py speak-reply "My car was hit from behind"
"""

import argparse
import logging
import sys
from pathlib import Path

import requests

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("insurance_client")

REQUEST_TIMEOUT = 120  # seconds, covers three chained upstream calls


def send_call(base_url: str, audio_path: Path, caller_id: str) -> requests.Response:
    """Upload a recorded clip to /call."""
    with audio_path.open("rb") as f:
        files = {"audio": (audio_path.name, f, "audio/webm")}
        return requests.post(
            f"{base_url}/call",
            files=files,
            data={"callerId": caller_id},
            timeout=REQUEST_TIMEOUT,
        )


def send_text(base_url: str, endpoint: str, text: str) -> requests.Response:
    """Send text to /speak or /speak-reply."""
    return requests.post(f"{base_url}{endpoint}", json={"text": text}, timeout=REQUEST_TIMEOUT)


def save_audio(response: requests.Response, output: Path) -> bool:
    """Write the audio body to disk, returning False on an error response."""
    if response.status_code != 200:
        logger.error(f"Request failed with {response.status_code}: {response.text}")
        return False

    output.write_bytes(response.content)
    logger.info(f"Saved {len(response.content)} bytes of audio to {output}")

    room_token = response.headers.get("X-Room-Token")
    if room_token:
        logger.info(f"Room token: {room_token}")
    return True


def parse_args():
    parser = argparse.ArgumentParser(description="Insurance Voice Agent client")
    parser.add_argument("--url", default="http://localhost:8080", help="Server base URL")
    parser.add_argument("--output", type=Path, default=Path("reply.mp3"), help="Where to save the audio")
    subparsers = parser.add_subparsers(dest="command", required=True)

    call_parser = subparsers.add_parser("call", help="Upload a recorded question")
    call_parser.add_argument("audio", type=Path, help="WebM/Opus recording")
    call_parser.add_argument("--caller-id", default="caller", help="Caller identity")

    speak_parser = subparsers.add_parser("speak", help="Synthesize text")
    speak_parser.add_argument("text")

    reply_parser = subparsers.add_parser("speak-reply", help="Get a spoken reply to text")
    reply_parser.add_argument("text")

    return parser.parse_args()


def main():
    args = parse_args()
    base_url = args.url.rstrip("/")

    try:
        if args.command == "call":
            response = send_call(base_url, args.audio, args.caller_id)
        elif args.command == "speak":
            response = send_text(base_url, "/speak", args.text)
        else:
            response = send_text(base_url, "/speak-reply", args.text)
    except requests.RequestException as e:
        logger.error(f"Could not reach {base_url}: {e}")
        sys.exit(1)

    if not save_audio(response, args.output):
        sys.exit(1)


if __name__ == "__main__":
    main()
