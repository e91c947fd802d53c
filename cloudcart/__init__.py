import logging
import sys

from flask import Flask
from sqlalchemy.engine import Engine

from .config import Settings, load_settings
from .db import ENGINE_EXTENSION_KEY, create_db_engine
from .routes.api import bp as api_bp

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level: str) -> None:
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO
    logging.basicConfig(
        level=numeric,
        format=LOG_FORMAT,
        stream=sys.stdout,
    )


def create_app(settings: Settings | None = None, engine: Engine | None = None) -> Flask:
    """
    Application factory.

    The engine is created by the caller and owned by it (it disposes of it at
    shutdown). If none is passed one is built from the settings.
    """
    if settings is None:
        settings = load_settings()
    if engine is None:
        engine = create_db_engine(settings.database)

    app = Flask(__name__)
    app.config["CLOUDCART_SETTINGS"] = settings
    app.extensions[ENGINE_EXTENSION_KEY] = engine

    app.register_blueprint(api_bp)

    return app
