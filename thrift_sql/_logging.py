"""
Logging configuration for thrift-sql.

The package logs through the ``thrift_sql`` logger, which carries a
NullHandler so nothing is printed unless an application opts in.

Example:
    import logging
    from thrift_sql import configure_logging

    configure_logging(level=logging.DEBUG)
"""

from __future__ import annotations

import logging

logger = logging.getLogger("thrift_sql")
logger.addHandler(logging.NullHandler())

DEFAULT_FORMAT = "[%(levelname)s] thrift-sql: %(message)s"


def configure_logging(
    level: int = logging.INFO,
    format: str | None = None,
    handler: logging.Handler | None = None,
) -> None:
    """Attach a handler to the package logger.

    Args:
        level: Logging level (default: INFO).
        format: Log format string (default: ``DEFAULT_FORMAT``).
        handler: Custom handler (default: StreamHandler to stderr).
    """
    logger.setLevel(level)

    if handler is None:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(format or DEFAULT_FORMAT))

    # Replace handlers from an earlier call; keep the NullHandler.
    for existing in list(logger.handlers):
        if not isinstance(existing, logging.NullHandler):
            logger.removeHandler(existing)
    logger.addHandler(handler)
