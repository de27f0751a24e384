"""Meta routes: GET / (usage directory) and GET /health."""

from __future__ import annotations

from flask import Blueprint

from upcase.utils.responses import AVAILABLE_ENDPOINTS, ok


meta_bp = Blueprint("meta", __name__)


@meta_bp.get("/")
def index():
    endpoints = {k: v for k, v in AVAILABLE_ENDPOINTS.items() if k != "GET /"}
    return ok(
        message="Text to uppercase API",
        endpoints=endpoints,
        usage="POST JSON {\"text\": ...} to /api/uppercase or a multipart 'file' to /api/uppercase-file",
    )


@meta_bp.get("/health")
def health():
    return ok(message="ok")
