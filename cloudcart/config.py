# cloudcart/config.py
"""
Configuration loader.

Every setting the service reads from the environment is listed here together
with its default:

    PORT         listen port                  3000
    LOG_LEVEL    debug | info | warning | ... "info"
    DB_HOST      database host                None (passed through)
    DB_USER      database user                None (passed through)
    DB_PASSWORD  database password            None (passed through)
    DB_NAME      database name                "cloudcart"
    DB_PORT      database port                5432

Missing connection values are not validated; a missing host shows up as a
query failure on the first request, not at startup.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000
DEFAULT_LOG_LEVEL = "info"
DEFAULT_DB_NAME = "cloudcart"
DEFAULT_DB_PORT = 5432


@dataclass(frozen=True)
class DatabaseConfig:
    host: Optional[str] = None
    user: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)
    name: str = DEFAULT_DB_NAME
    port: int = DEFAULT_DB_PORT
    ssl: bool = False


@dataclass(frozen=True)
class Settings:
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    database: DatabaseConfig = field(default_factory=DatabaseConfig)


def _int_env(environ: Mapping[str, str], key: str, default: int) -> int:
    raw = environ.get(key)
    if not raw:
        return default
    try:
        return int(raw, 10)
    except ValueError:
        logger.warning(f"Ignoring non-integer {key}={raw!r}, using {default}")
        return default


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from the environment (os.environ unless given)."""
    if environ is None:
        environ = os.environ

    database = DatabaseConfig(
        host=environ.get("DB_HOST"),
        user=environ.get("DB_USER"),
        password=environ.get("DB_PASSWORD"),
        name=environ.get("DB_NAME") or DEFAULT_DB_NAME,
        port=_int_env(environ, "DB_PORT", DEFAULT_DB_PORT),
        ssl=False,
    )
    return Settings(
        port=_int_env(environ, "PORT", DEFAULT_PORT),
        log_level=(environ.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).lower(),
        database=database,
    )
