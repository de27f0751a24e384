"""Uppercase routes: POST /api/uppercase and POST /api/uppercase-file

The text route accepts ``{"text": ...}`` as JSON (or a form field of the
same name) and returns ``{success, result}``. The file route accepts a
single multipart part named ``file``, runs it through the upload filter,
decodes it as UTF-8 and returns the converted text with its file name
and character counts. Lengths count Unicode code points, so characters
outside the Basic Multilingual Plane count once (``"a\U0001F600"`` has
length 2, where a JavaScript client measuring UTF-16 units would see 3).
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from flask import Blueprint, current_app, request

from upcase.errors import InternalError, UpcaseError, ValidationError
from upcase.services.transform import to_text, uppercase
from upcase.services.upload_filter import accept_upload
from upcase.utils.responses import ok


uppercase_bp = Blueprint("uppercase", __name__, url_prefix="/api")


def _is_blank(text: str) -> bool:
    # A byte order mark alone counts as empty, like whitespace
    return all(c.isspace() or c == "\ufeff" for c in text)


def _payload() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


@uppercase_bp.route("/uppercase", methods=["POST"])
def uppercase_text():
    payload = _payload()
    text = payload.get("text")
    if text is None:
        raise ValidationError("Request body must include a 'text' field.", error="missing text")

    try:
        result = uppercase(to_text(text))
    except Exception as e:
        logging.exception("Failed to convert text")
        raise InternalError(str(e)) from e
    return ok(result=result)


@uppercase_bp.route("/uppercase-file", methods=["POST"])
def uppercase_file():
    files = request.files.getlist("file")
    files = [f for f in files if f and f.filename]
    if not files:
        raise ValidationError("Upload a file in the 'file' field.", error="no file")
    if len(files) > 1:
        raise ValidationError("Upload exactly one file in the 'file' field.", error="too many files")

    try:
        upload = accept_upload(files[0], current_app.config["UPCASE_CONFIG"])
        encoding = current_app.config["TEXT_ENCODING"]
        try:
            content = upload.content.decode(encoding)
        except UnicodeDecodeError as e:
            raise ValidationError(
                f"File must be {encoding.upper()} encoded text: {e}", error="unsupported charset"
            ) from e

        if _is_blank(content):
            raise ValidationError(error="empty content")

        result = uppercase(content)
    except UpcaseError:
        raise
    except Exception as e:
        logging.exception("Failed to convert uploaded file")
        raise InternalError(str(e)) from e

    logging.info(f"Converted {upload.original_name!r} ({len(content)} chars)")
    return ok(
        result=result,
        fileName=upload.original_name,
        originalLength=len(content),
        convertedLength=len(result),
    )
