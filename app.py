"""
app.py — Flask Application Factory for the analysis intake service.
"""
import os
import logging
from flask import Flask
from flask_cors import CORS
from pythonjsonlogger.json import JsonFormatter

from config import config_map
from extensions import limiter
from intake import AnalysisIntake

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logging.basicConfig(level=level, handlers=[handler], force=True)


def create_app(env: str = None) -> Flask:
    """Application factory."""
    env = env or os.environ.get("FLASK_ENV", "development")
    cfg = config_map.get(env, config_map["default"])

    app = Flask(__name__)
    app.config.from_object(cfg)
    configure_logging(app.config["LOG_LEVEL"])

    # ── Extensions ────────────────────────────────────────────────────────────
    CORS(app, origins="same-origin")
    limiter.init_app(app)

    # ── Intake pipeline ───────────────────────────────────────────────────────
    app.extensions["analysis_intake"] = AnalysisIntake(app.config["LEGACY_CLI_VERSIONS"])

    # ── Blueprints ────────────────────────────────────────────────────────────
    from blueprints.api import api_bp
    app.register_blueprint(api_bp, url_prefix="/api/v1")

    logger.info("Analysis intake app created [env=%s]", env)
    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=5000, debug=True)
