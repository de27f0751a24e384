"""Error types and the Flask handlers that turn them into JSON envelopes.

Every failure, expected or not, leaves the app as
``{"success": false, "error": ..., "message": ...}`` with a matching
status code. Nothing is allowed to reach the WSGI layer as an HTML page.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from flask import Flask, current_app, request
from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound, RequestEntityTooLarge

from upcase.utils.responses import AVAILABLE_ENDPOINTS, fail


class UpcaseError(Exception):
    """Base class for errors surfaced to API callers."""

    status: int = 500
    error: str = "internal error"

    def __init__(self, message: Optional[str] = None, *, error: Optional[str] = None, **extra: Any) -> None:
        super().__init__(message or error or self.error)
        self.message = message
        if error is not None:
            self.error = error
        self.extra = extra

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"success": False, "error": self.error}
        if self.message:
            body["message"] = self.message
        body.update(self.extra)
        return body


class ValidationError(UpcaseError):
    status = 400
    error = "invalid request"


class UnsupportedMediaError(UpcaseError):
    status = 400
    error = "unsupported file type"


class PayloadTooLargeError(UpcaseError):
    status = 413
    error = "file too large"


class RouteNotFoundError(UpcaseError):
    status = 404
    error = "not found"


class InternalError(UpcaseError):
    status = 500
    error = "internal error"


def _handle_upcase_error(exc: UpcaseError):
    return exc.to_dict(), exc.status


def _handle_not_found(exc: HTTPException):
    # Wrong method on a known path is reported the same way as an unknown path
    err = RouteNotFoundError(request.path, availableEndpoints=AVAILABLE_ENDPOINTS)
    return err.to_dict(), err.status


def _handle_too_large(exc: RequestEntityTooLarge):
    logging.warning(f"Rejected oversized request to {request.path}")
    err = PayloadTooLargeError(f"Maximum upload size is {current_app.config['MAX_UPLOAD_MB']} MB.")
    return err.to_dict(), err.status


def _handle_http_error(exc: HTTPException):
    return fail(exc.name.lower(), exc.code or 500, message=exc.description)


def _handle_unexpected(exc: Exception):
    logging.exception(f"Unhandled error on {request.method} {request.path}")
    return InternalError(str(exc)).to_dict(), InternalError.status


def register_error_handlers(app: Flask) -> None:
    app.register_error_handler(UpcaseError, _handle_upcase_error)
    app.register_error_handler(NotFound, _handle_not_found)
    app.register_error_handler(MethodNotAllowed, _handle_not_found)
    app.register_error_handler(RequestEntityTooLarge, _handle_too_large)
    app.register_error_handler(HTTPException, _handle_http_error)
    app.register_error_handler(Exception, _handle_unexpected)
