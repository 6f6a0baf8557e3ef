"""Application factory and app-wide configuration."""

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from futuro_financeiro.app.api.routes import api_bp
from futuro_financeiro.config import Settings
from futuro_financeiro.domain.history import RecentHistory
from futuro_financeiro.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)

    app = Flask(__name__)
    app.config["SETTINGS"] = settings
    app.extensions["history"] = RecentHistory(limit=settings.history_limit, path=settings.history_path)

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.cors_origins}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    logger.info("API ready, history stored at %s", settings.history_path)
    return app
