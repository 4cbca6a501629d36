# versegate/server.py
"""
Flask application factory for the versegate JSON API.

Run directly for a local server:
    python -m versegate.server
"""

import logging
import os

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

from .routes.references_api import references_bp

load_dotenv()


def create_app(config: dict = None) -> Flask:
    app = Flask(__name__)
    app.config["VERSEGATE_HOME"] = os.getenv("VERSEGATE_HOME")
    if config:
        app.config.update(config)

    CORS(app)

    app.register_blueprint(references_bp)
    return app


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )
    create_app().run(host="127.0.0.1", port=int(os.getenv("VERSEGATE_PORT", "5056")))
