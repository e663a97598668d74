"""Configuration management for the conventions bot"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from cryptography.exceptions import UnsupportedAlgorithm

from conventions_bot.core.commands import DEFAULT_CONVENTIONS_URL
from conventions_bot.core.exceptions import ConfigurationError
from conventions_bot.utils.crypto import load_private_key

DEFAULT_PRIVATE_KEY_PATH = "GitHub_private_key.pem"
DEFAULT_AUTHORIZED_LOGIN = "Zamiell"
DEFAULT_PORT = 8080
MAX_PORT = 65535
DEFAULT_RATE_LIMIT = "1 per second"

@dataclass(frozen=True)
class Config:
    """Process-wide settings, loaded once at startup"""
    github_app_id: int
    github_installation_id: int
    github_private_key: str
    github_webhook_secret: str
    authorized_login: str = DEFAULT_AUTHORIZED_LOGIN
    port: int = DEFAULT_PORT
    rate_limit: str = DEFAULT_RATE_LIMIT
    enable_stale_commands: bool = True
    conventions_url: str = DEFAULT_CONVENTIONS_URL
    log_level: str = "INFO"


def _required(env: Mapping[str, str], name: str) -> str:
    value = (env.get(name) or "").strip()
    if not value:
        raise ConfigurationError(name, "is blank; set one in your .env file")
    return value


def _positive_int(env: Mapping[str, str], name: str, default: Optional[int] = None,
                  maximum: Optional[int] = None) -> int:
    if default is not None and not (env.get(name) or "").strip():
        return default
    raw = _required(env, name)
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(name, f"{raw!r} is not a number")
    if value <= 0:
        raise ConfigurationError(name, f"{raw!r} must be positive")
    if maximum is not None and value > maximum:
        raise ConfigurationError(name, f"{raw!r} must be at most {maximum}")
    return value


def _flag(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = (env.get(name) or "").strip().lower()
    if not raw:
        return default
    if raw in ("1", "true", "yes", "on"):
        return True
    if raw in ("0", "false", "no", "off"):
        return False
    raise ConfigurationError(name, f"{raw!r} is not a boolean")


def read_private_key(path: str) -> str:
    """Read and validate the GitHub App private key"""
    try:
        with open(path, encoding="utf-8") as f:
            pem = f.read()
    except OSError as e:
        raise ConfigurationError(
            "GITHUB_PRIVATE_KEY_PATH", f"failed to read {path!r}: {e}"
        )
    try:
        load_private_key(pem)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise ConfigurationError(
            "GITHUB_PRIVATE_KEY_PATH", f"{path!r} is not a PEM private key: {e}"
        )
    return pem


def load_config(env: Optional[Mapping[str, str]] = None) -> Config:
    """Build a Config from the environment, failing on the first bad value"""
    env = os.environ if env is None else env

    app_id = _positive_int(env, "GITHUB_APP_ID")
    installation_id = _positive_int(env, "GITHUB_INSTALLATION_ID")
    secret = _required(env, "GITHUB_WEBHOOK_SECRET")
    key_path = (env.get("GITHUB_PRIVATE_KEY_PATH") or "").strip() or DEFAULT_PRIVATE_KEY_PATH

    return Config(
        github_app_id=app_id,
        github_installation_id=installation_id,
        github_private_key=read_private_key(key_path),
        github_webhook_secret=secret,
        authorized_login=(env.get("AUTHORIZED_LOGIN") or "").strip() or DEFAULT_AUTHORIZED_LOGIN,
        port=_positive_int(env, "PORT", DEFAULT_PORT, MAX_PORT),
        rate_limit=(env.get("RATE_LIMIT") or "").strip() or DEFAULT_RATE_LIMIT,
        enable_stale_commands=_flag(env, "ENABLE_STALE_COMMANDS", True),
        conventions_url=(env.get("CONVENTIONS_URL") or "").strip() or DEFAULT_CONVENTIONS_URL,
        log_level=((env.get("LOG_LEVEL") or "").strip() or "INFO").upper(),
    )
