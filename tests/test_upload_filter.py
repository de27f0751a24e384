from io import BytesIO

import pytest
from werkzeug.datastructures import FileStorage

from upcase.errors import UnsupportedMediaError
from upcase.services.upload_filter import accept_upload, is_allowed


@pytest.mark.parametrize(
    "filename, mime",
    [
        ("notes.txt", "text/plain"),
        ("data.bin", "application/json"),
        ("page", "text/html; charset=utf-8"),
        ("README.md", "application/octet-stream"),
        ("SCRIPT.JS", ""),
        ("report.csv", None),
    ],
)
def test_is_allowed_accepts_text_types(filename, mime):
    assert is_allowed(filename, mime)


@pytest.mark.parametrize(
    "filename, mime",
    [
        ("setup.exe", "application/octet-stream"),
        ("image.png", "image/png"),
        ("noext", ""),
    ],
)
def test_is_allowed_rejects_other_types(filename, mime):
    assert not is_allowed(filename, mime)


def test_accept_upload_reads_content_into_memory():
    storage = FileStorage(stream=BytesIO(b"hello"), filename="a.txt", content_type="text/plain")
    upload = accept_upload(storage)
    assert upload.original_name == "a.txt"
    assert upload.mime_type == "text/plain"
    assert upload.content == b"hello"


def test_accept_upload_raises_for_disallowed_file():
    storage = FileStorage(stream=BytesIO(b"MZ"), filename="setup.exe", content_type="application/x-msdownload")
    with pytest.raises(UnsupportedMediaError) as exc_info:
        accept_upload(storage)
    assert exc_info.value.status == 400
    assert exc_info.value.to_dict()["success"] is False
