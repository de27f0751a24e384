import pytest

from upcase import create_app
from upcase.config import Config


class SmallUploadConfig(Config):
    MAX_UPLOAD_MB = 1


@pytest.fixture()
def app():
    app = create_app()
    app.config["TESTING"] = True
    return app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def small_client():
    app = create_app(SmallUploadConfig)
    app.config["TESTING"] = True
    return app.test_client()
