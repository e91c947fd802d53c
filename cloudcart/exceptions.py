# cloudcart/exceptions.py
from sqlalchemy.exc import DBAPIError


def db_error_message(exc: BaseException) -> str:
    """Message text of a database failure, without SQLAlchemy's decorations."""
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig).strip()
    return str(exc)
