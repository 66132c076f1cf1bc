import logging

from flask import Flask

from users_api.config.settings import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging() -> None:
    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)


def configure_app(app: Flask) -> None:
    app.config["ENV"] = settings.environment
    app.config["DEBUG"] = settings.debug
    app.json.sort_keys = False

    configure_logging()
