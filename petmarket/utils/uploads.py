# petmarket/utils/uploads.py

import os
import random
import time
from fastapi import UploadFile

from ..core.config import settings
from ..logging import logger


def build_upload_filename(fieldname: str) -> str:
    """`<field>-<epoch ms>-<random>`"""
    unique_suffix = f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}"
    return f"{fieldname}-{unique_suffix}"


async def save_upload(upload: UploadFile, fieldname: str = "pimage") -> str:
    """Write an uploaded file under the upload directory and return its path."""
    os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
    _, ext = os.path.splitext(upload.filename or "")
    path = os.path.join(settings.UPLOAD_DIR, build_upload_filename(fieldname) + ext)

    contents = await upload.read()
    with open(path, "wb") as f:
        f.write(contents)

    logger.info(f"Stored upload '{upload.filename}' at {path} ({len(contents)} bytes)")
    return path


def remove_upload(path: str) -> None:
    """Delete a stored upload whose listing was never saved."""
    try:
        os.remove(path)
        logger.info(f"Removed orphaned upload {path}")
    except FileNotFoundError:
        pass
