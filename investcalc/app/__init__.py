"""Application factory and app-wide configuration."""

import logging

from flask import Flask
from flask_cors import CORS

from investcalc.app.api.routes import api_bp
from investcalc.config import settings


def create_app() -> Flask:
    """Build the Flask app instance."""
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = Flask(__name__)
    app.config["APP_NAME"] = settings.APP_NAME
    app.config["DEBUG"] = settings.DEBUG

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.CORS_ORIGINS}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    logging.getLogger(__name__).info(
        "%s ready (env=%s)", settings.APP_NAME, settings.APP_ENV
    )
    return app
