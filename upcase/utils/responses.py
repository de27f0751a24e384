"""Uniform JSON envelope for every response.

Success bodies carry ``success: true`` plus route-specific fields;
failures carry ``success: false``, a short ``error`` tag and an
optional ``message``.
"""

from __future__ import annotations

from typing import Any, Dict

from flask import jsonify


AVAILABLE_ENDPOINTS: Dict[str, str] = {
    "POST /api/uppercase": "Convert JSON text to uppercase",
    "POST /api/uppercase-file": "Upload a text file and convert it to uppercase",
    "GET /health": "Health check",
    "GET /": "API usage",
}


def ok(**fields: Any):
    return jsonify({"success": True, **fields})


def fail(error: str, status: int = 400, **fields: Any):
    return jsonify({"success": False, "error": error, **fields}), status
