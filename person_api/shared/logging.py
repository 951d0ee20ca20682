"""
Logging setup for the person registry.

One stdout handler on the root logger; library loggers are tuned
individually. Person payloads never reach the logs: request bodies are
not logged and SQL parameters are hidden by the engine.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Library loggers held at WARNING unless something below raises them
LIBRARY_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "sqlalchemy.pool")
SQL_LOGGER = "sqlalchemy.engine"


def resolve_level(level: str) -> int:
    """Map a level name to its numeric value, INFO when unknown."""
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: str = "INFO", log_sql: bool = False) -> None:
    """Configure application logging.

    Args:
        level: Root log level name (DEBUG, INFO, WARNING, ERROR).
        log_sql: Emit every SQL statement issued by the person store.
    """
    logging.basicConfig(
        level=resolve_level(level),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    for name in LIBRARY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    if log_sql:
        logging.getLogger(SQL_LOGGER).setLevel(logging.INFO)
