"""Flask app factory and blueprint registration.

Defines `create_app()` to initialize the Flask app, load configuration,
enable CORS, register route blueprints and the JSON error handlers.
"""

from __future__ import annotations

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

# Load .env before Config reads the environment
load_dotenv()

from upcase.config import Config, max_request_bytes  # noqa: E402
from upcase.errors import register_error_handlers  # noqa: E402
from upcase.routes.meta import meta_bp  # noqa: E402
from upcase.routes.uppercase import uppercase_bp  # noqa: E402
from upcase.services.upload_filter import InMemoryRequest  # noqa: E402


def create_app(config: type = Config) -> Flask:
    app = Flask(__name__)
    app.request_class = InMemoryRequest
    app.config.from_object(config)
    app.config["UPCASE_CONFIG"] = config
    # Flask rejects larger bodies with 413 before parsing them; the file
    # itself is capped in accept_upload
    app.config["MAX_CONTENT_LENGTH"] = max_request_bytes(config)
    app.json.ensure_ascii = False
    app.json.sort_keys = False

    # Allow all origins, including preflight for file upload
    CORS(
        app,
        resources={r"/*": {"origins": "*"}},
        supports_credentials=False,
        allow_headers=["Content-Type", "Authorization"],
        methods=["GET", "POST", "OPTIONS"],
    )

    app.register_blueprint(meta_bp)
    app.register_blueprint(uppercase_bp)
    register_error_handlers(app)

    return app
