"""Upload filter: runs before the file handler touches the bytes.

Checks the part's declared media type against the allow-list, falls back
to the filename extension when the media type is missing or unknown, and
reads the content into memory. Flask's ``MAX_CONTENT_LENGTH`` cuts off
requests well past the cap before the body is parsed; the file itself is
held to ``max_upload_bytes`` here. ``InMemoryRequest`` keeps file parts
in a ``BytesIO`` so nothing is spooled to disk.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from io import BytesIO
from typing import IO, Optional

from flask import Request
from werkzeug.datastructures import FileStorage

from upcase.config import Config, max_upload_bytes
from upcase.errors import PayloadTooLargeError, UnsupportedMediaError


class InMemoryRequest(Request):
    """Request class that buffers uploaded files in memory only."""

    def _get_file_stream(
        self,
        total_content_length: Optional[int],
        content_type: Optional[str],
        filename: Optional[str] = None,
        content_length: Optional[int] = None,
    ) -> IO[bytes]:
        return BytesIO()


@dataclass
class UploadedFile:
    original_name: str
    mime_type: str
    content: bytes


def _extension(filename: str) -> str:
    return os.path.splitext(filename)[1].lower()


def is_allowed(filename: str, mime_type: Optional[str], cfg: Config = Config) -> bool:
    mime = (mime_type or "").split(";", 1)[0].strip().lower()
    if mime and mime in cfg.ALLOWED_MIME_TYPES:
        return True
    return _extension(filename) in cfg.ALLOWED_EXTS


def accept_upload(storage: FileStorage, cfg: Config = Config) -> UploadedFile:
    """Validate an uploaded part and return its in-memory contents.

    Raises ``UnsupportedMediaError`` when neither the media type nor the
    extension is on the allow-list, and ``PayloadTooLargeError`` when the
    file is larger than the configured cap.
    """
    filename = storage.filename or ""
    mime = storage.mimetype or ""
    if not is_allowed(filename, mime, cfg):
        logging.warning(f"Rejected upload {filename!r} with media type {mime!r}")
        allowed = ", ".join(sorted(cfg.ALLOWED_EXTS))
        raise UnsupportedMediaError(f"Only text files are accepted ({allowed}).")
    limit = max_upload_bytes(cfg)
    content = storage.read(limit + 1)
    if len(content) > limit:
        logging.warning(f"Rejected upload {filename!r}: larger than {cfg.MAX_UPLOAD_MB} MB")
        raise PayloadTooLargeError(f"Maximum upload size is {cfg.MAX_UPLOAD_MB} MB.")
    return UploadedFile(original_name=filename, mime_type=mime, content=content)
