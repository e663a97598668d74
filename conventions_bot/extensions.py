"""Flask extensions and shared instances"""

from flask import Flask
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

# app.extensions key holding the BotDependencies
EXTENSION_KEY = "conventions_bot"


def init_limiter(app: Flask, rate_limit: str) -> Limiter:
    """Attach a per-address inbound rate limiter to the app"""
    return Limiter(
        app=app,
        key_func=get_remote_address,
        storage_uri="memory://",
        default_limits=[rate_limit],
        strategy="fixed-window",
    )
