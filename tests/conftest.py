import pytest
from sqlalchemy import create_engine, event

from cloudcart import create_app
from cloudcart.config import Settings

FIXED_NOW = "2026-10-19 12:00:00.123456+00:00"


def _sqlite_engine(path, with_now=True):
    engine = create_engine(f"sqlite:///{path}", connect_args={"check_same_thread": False})

    if with_now:
        @event.listens_for(engine, "connect")
        def _register_now(dbapi_conn, connection_record):
            dbapi_conn.create_function("NOW", 0, lambda: FIXED_NOW)

    return engine


@pytest.fixture
def db_engine(tmp_path):
    engine = _sqlite_engine(tmp_path / "cloudcart.db")
    yield engine
    engine.dispose()


@pytest.fixture
def broken_engine(tmp_path):
    # plain SQLite has no NOW(), so the query fails at execution time
    engine = _sqlite_engine(tmp_path / "broken.db", with_now=False)
    yield engine
    engine.dispose()


@pytest.fixture
def app(db_engine):
    return create_app(Settings(), db_engine)


@pytest.fixture
def client(app):
    return app.test_client()
