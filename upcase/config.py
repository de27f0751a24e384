"""Configuration for environment variables and runtime knobs.

Provides a simple config object with the listening address, upload
limits and allow-lists. Keeps the rest of the codebase decoupled from
direct env access.
"""

from __future__ import annotations

import os


class Config:
    # Server
    HOST = os.getenv("HOST", "127.0.0.1")
    PORT = int(os.getenv("PORT", "3000"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Upload limits and whitelist
    MAX_UPLOAD_MB = int(os.getenv("MAX_UPLOAD_MB", "10"))
    ALLOWED_MIME_TYPES = {
        "text/plain",
        "text/html",
        "text/css",
        "text/javascript",
        "application/json",
        "text/csv",
        "text/xml",
    }
    # Room for multipart boundaries and part headers on top of the file itself
    REQUEST_OVERHEAD_BYTES = 64 * 1024
    ALLOWED_EXTS = {".txt", ".html", ".css", ".js", ".json", ".csv", ".xml", ".md"}

    # Uploaded bytes are decoded with this charset only
    TEXT_ENCODING = "utf-8"


def max_upload_bytes(cfg: Config = Config) -> int:
    return cfg.MAX_UPLOAD_MB * 1024 * 1024


def max_request_bytes(cfg: Config = Config) -> int:
    return max_upload_bytes(cfg) + cfg.REQUEST_OVERHEAD_BYTES
