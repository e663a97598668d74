import logging
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from flask import Flask

from conventions_bot.config import Config, load_config
from conventions_bot.core.exceptions import ConfigurationError
from conventions_bot.extensions import EXTENSION_KEY, init_limiter
from conventions_bot.utils.logs import configure_logging
from conventions_bot.webhooks.handlers import BotDependencies

logger = logging.getLogger('conventions_bot')


def create_app(config: Config, github=None, **overrides) -> Flask:
    """Application factory function

    ``github`` is the issue client; when omitted one is built from the
    app credentials in ``config``.
    """
    app = Flask(__name__)

    app.config.update(overrides)

    if github is None:
        from conventions_bot.services.github import GitHubClient
        github = GitHubClient.from_config(config)

    # One dependency set for the whole process
    app.extensions[EXTENSION_KEY] = BotDependencies(config=config, github=github)

    # Initialize rate limiter
    app.limiter = init_limiter(app, config.rate_limit)

    # Register blueprints
    from conventions_bot.api import api
    app.register_blueprint(api)

    app.logger.info(
        "Application configured",
        extra={
            'authorized_login': config.authorized_login,
            'rate_limit': config.rate_limit,
            'stale_commands': config.enable_stale_commands,
        }
    )
    return app


def main(env_file: Optional[str] = None) -> None:
    """Load configuration and serve until interrupted"""
    # .env is looked up from the working directory, like the private key
    load_dotenv(env_file or find_dotenv(usecwd=True))
    configure_logging()

    logger.info("+-------------------------------------+")
    logger.info("| Starting conventions issues bot.    |")
    logger.info("+-------------------------------------+")

    try:
        config = load_config()
    except ConfigurationError as e:
        logger.critical("Invalid configuration: %s", e)
        raise SystemExit(1)

    configure_logging(config.log_level)
    app = create_app(config)
    app.run(host="0.0.0.0", port=config.port)


if __name__ == "__main__":
    main()
