"""Webhook routes for the conventions bot"""

import logging
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request

from conventions_bot.extensions import EXTENSION_KEY
from conventions_bot.webhooks.exceptions import WebhookError
from conventions_bot.webhooks.handlers import IssueCommentHandler

logger = logging.getLogger('conventions_bot.webhooks')

webhooks_bp = Blueprint("webhooks", __name__)


@webhooks_bp.route("/", methods=["POST"])
def webhook() -> Dict[str, Any]:
    """Receive an issue_comment delivery from GitHub"""
    # Raw bytes, so the signature is checked against exactly what GitHub sent
    request_data = request.get_data(cache=False)
    handler = IssueCommentHandler(current_app.extensions[EXTENSION_KEY])

    try:
        result = handler.handle(request.headers, request_data)

    except WebhookError as e:
        logger.warning(
            "Webhook rejected",
            extra={
                "error": str(e),
                "status_code": e.status_code,
                "delivery_id": request.headers.get("X-GitHub-Delivery", "unknown"),
            },
        )
        return "", e.status_code

    except Exception as e:
        logger.error(
            "Webhook processing failed",
            extra={
                "error": str(e),
                "error_type": type(e).__name__,
                "delivery_id": request.headers.get("X-GitHub-Delivery", "unknown"),
            },
            exc_info=True,
        )
        return "", 500

    logger.info(
        "Webhook processed",
        extra={
            "delivery_id": request.headers.get("X-GitHub-Delivery", "unknown"),
            **result.to_dict(),
        },
    )
    return jsonify(result.to_dict())
