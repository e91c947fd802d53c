# cloudcart/__main__.py
import logging

from dotenv import load_dotenv

from . import configure_logging, create_app
from .config import load_settings
from .db import create_db_engine

logger = logging.getLogger("cloudcart")


def main() -> None:
    load_dotenv()
    settings = load_settings()
    configure_logging(settings.log_level)

    engine = create_db_engine(settings.database)
    app = create_app(settings, engine)

    logger.info(f"App listening on port {settings.port}")
    try:
        app.run(host="0.0.0.0", port=settings.port, threaded=True)
    finally:
        engine.dispose()


if __name__ == "__main__":
    main()
