"""Development entrypoint for running the Flask API locally.

Usage:
- FLASK_APP=upcase.main:app flask run --reload
- python -m upcase.main
"""

from __future__ import annotations

import logging

from upcase import create_app
from upcase.config import Config

logging.basicConfig(
    level=getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S",
)

app = create_app()


def run() -> None:
    base = f"http://{Config.HOST}:{Config.PORT}"
    logging.info(f"Server listening on {base}")
    logging.info(f"Health check: {base}/health")
    logging.info(f"Text endpoint: {base}/api/uppercase")
    logging.info(f"File endpoint: {base}/api/uppercase-file")
    app.run(host=Config.HOST, port=Config.PORT)


if __name__ == "__main__":
    run()
