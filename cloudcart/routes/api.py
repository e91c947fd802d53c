from flask import Blueprint, jsonify
import logging

from ..db import get_engine
from ..exceptions import db_error_message
from ..services.clock_service import get_db_time, format_db_time

bp = Blueprint("api", __name__)
logger = logging.getLogger(__name__)

TEXT_PLAIN = {"Content-Type": "text/plain; charset=utf-8"}


@bp.get("/")
def index():
    try:
        now = get_db_time(get_engine())
    except Exception as e:
        message = db_error_message(e)
        logger.error(f"DB time query failed: {message}")
        return f"DB connection failed: {message}", 500, TEXT_PLAIN

    return f"CloudCart is live! DB time: {format_db_time(now)}", 200, TEXT_PLAIN


@bp.get("/health")
def health():
    return jsonify({"status": "ok"})
