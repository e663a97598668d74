"""Webhook-specific exceptions"""

class WebhookError(Exception):
    """Base class for webhook errors"""
    status_code = 500

class InvalidSignatureError(WebhookError):
    """Invalid webhook signature"""
    status_code = 401

class MalformedPayloadError(WebhookError):
    """Request body could not be decoded into an event"""
    status_code = 400

class UnsupportedEventError(WebhookError):
    """Event type or action the bot does not act on"""
    status_code = 202
