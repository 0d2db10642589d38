"""
Scoped ownership of uploaded caller audio on disk.

Each request writes its upload under a unique name, so concurrent requests
never share a file and no locking is needed.
"""

import asyncio
import logging
import uuid
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Union

from fastapi import UploadFile

from insurance_agent.config.constants import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)


def remove_upload(path: Path) -> None:
    """Delete an uploaded file, logging instead of raising on failure."""
    try:
        path.unlink()
        logger.debug(f"Removed temporary upload {path}")
    except FileNotFoundError:
        logger.debug(f"Temporary upload {path} was never written")
    except OSError as e:
        logger.warning(f"Could not remove temporary upload {path}: {e}")


@asynccontextmanager
async def temporary_upload(
    upload: UploadFile, directory: Union[str, Path]
) -> AsyncIterator[Path]:
    """
    Write an upload to temporary storage for the duration of a block.

    Removal is attempted exactly once when the block exits, whether it
    returns or raises.

    Args:
        upload: The uploaded file from the multipart form
        directory: Directory for temporary uploads, created if missing

    Yields:
        Path of the written file
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / uuid.uuid4().hex

    try:
        data = await upload.read()
        await asyncio.to_thread(path.write_bytes, data)
        logger.debug(f"Stored upload '{upload.filename}' at {path}")
        yield path
    finally:
        remove_upload(path)
