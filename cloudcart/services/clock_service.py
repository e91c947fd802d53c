# cloudcart/services/clock_service.py
from datetime import datetime

from sqlalchemy import text
from sqlalchemy.engine import Engine


def get_db_time(engine: Engine):
    """Ask the database for its current time. One query, no retry."""
    with engine.connect() as conn:
        return conn.execute(text("SELECT NOW() AS now")).scalar_one()


def format_db_time(now) -> str:
    if isinstance(now, datetime):
        return now.isoformat()
    return str(now)
