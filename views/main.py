from flask import Blueprint, jsonify
from datetime import datetime, timezone

# Create a blueprint for main routes
bp = Blueprint("main", __name__)


@bp.route("/health")
def health():
    """Liveness check."""
    return jsonify(
        {"status": "OK", "timestamp": datetime.now(timezone.utc).isoformat()}
    )
