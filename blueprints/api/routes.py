"""
blueprints/api/routes.py — REST API endpoints for the analysis intake service.

Routes:
    GET   /api/v1/health
    POST  /api/v1/analysis
"""
import logging

from flask import current_app, jsonify, request

from blueprints.api import api_bp
from extensions import limiter
from intake.errors import IntakeError

logger = logging.getLogger(__name__)


# ── Routes ──────────────────────────────────────────────────────────────────────

@api_bp.route("/health", methods=["GET"])
def health():
    return jsonify({"status": "ok", "version": current_app.config.get("VERSION", "1.0.0")}), 200


@api_bp.route("/analysis", methods=["POST"])
@limiter.limit(lambda: current_app.config.get("RATE_LIMIT", "60 per minute"))
def submit_analysis():
    """POST /api/v1/analysis — accept a finished analysis from the CLI."""
    intake = current_app.extensions["analysis_intake"]
    version = request.headers.get(current_app.config["CLI_VERSION_HEADER"], "")

    try:
        data = intake.decode_and_validate(request.get_data(cache=False), version)
    except IntakeError as e:
        return jsonify(e.to_dict()), 400

    summary = data.to_summary()
    logger.info("Accepted analysis %s (%d vulnerabilities)",
                summary["analysis_id"], summary["vulnerabilities"])
    return jsonify(summary), 201
