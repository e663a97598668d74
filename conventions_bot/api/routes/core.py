"""Core API routes for the conventions bot"""

from flask import Blueprint, jsonify
from typing import Dict, Any

from conventions_bot import __version__

# Create core blueprint
core_bp = Blueprint('core', __name__)

@core_bp.route('/health', methods=['GET'])
def health_check() -> Dict[str, Any]:
    """Basic health check endpoint"""
    return jsonify({
        "status": "healthy",
        "version": __version__
    })
