"""Conventions bot API module

Provides HTTP endpoints for:
- Webhook event reception
- Health checks
"""

from flask import Blueprint

# Create API blueprint
api = Blueprint('api', __name__)

# Import and register blueprints
from .routes.webhooks import webhooks_bp
from .routes.core import core_bp

api.register_blueprint(webhooks_bp)
api.register_blueprint(core_bp)
