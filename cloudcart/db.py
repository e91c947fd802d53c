# cloudcart/db.py
from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine
from flask import current_app

from .config import DatabaseConfig

ENGINE_EXTENSION_KEY = "db_engine"


def build_database_url(db: DatabaseConfig) -> URL:
    return URL.create(
        "postgresql+psycopg2",
        username=db.user,
        password=db.password,
        host=db.host,
        port=db.port,
        database=db.name,
    )


def create_db_engine(db: DatabaseConfig) -> Engine:
    """
    Create the shared, pooled engine for the given connection descriptor.

    Pool size and connection lifecycle are SQLAlchemy's defaults. No
    connection is opened until the first query.
    """
    connect_args = {}
    if not db.ssl:
        connect_args["sslmode"] = "disable"

    return create_engine(
        build_database_url(db),
        connect_args=connect_args,
        echo=False,
    )


def get_engine() -> Engine:
    """Engine injected into the running app by create_app()."""
    engine = current_app.extensions.get(ENGINE_EXTENSION_KEY)
    if engine is None:
        raise RuntimeError("No database engine configured for this app.")
    return engine
