"""Health check endpoint"""

from datetime import datetime, timezone

from flask import Blueprint, jsonify

from terainfo_server import __version__

health_bp = Blueprint('health', __name__)


@health_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint"""
    return jsonify({
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": __version__,
    })
