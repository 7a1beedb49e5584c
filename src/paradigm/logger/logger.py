"""Project-wide logging for Paradigm.

The ``paradigm`` logger writes to stdout at the level named by
``settings.LOG_LEVEL``. Containers only emit debug records, so the default
``INFO`` level keeps them quiet.
"""

import logging
import sys

from paradigm.config.config import LogLevel, settings

__all__ = ["logger", "setup_logger"]

LEVELS: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _resolve_level(level: str) -> int:
    try:
        return LEVELS[level.upper()]
    except KeyError:
        raise ValueError(
            f"Unknown log level {level!r}; expected one of {', '.join(LEVELS)}"
        ) from None


def setup_logger(
    name: str = "paradigm",
    level: LogLevel | str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Handlers are attached only the first time a name is configured; later
    calls return the existing logger unchanged.

    Args:
        name: Logger name (``paradigm`` or one of its children)
        level: Log level name, case-insensitive. Defaults to
            ``settings.LOG_LEVEL``.
        format_string: Custom format string

    Returns:
        Configured logger instance

    Raises:
        ValueError: If ``level`` is not a known level name.
    """
    numeric_level = _resolve_level(level or settings.LOG_LEVEL)
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        )
        logger.addHandler(handler)
        logger.setLevel(numeric_level)
        logger.propagate = False

    return logger


logger = setup_logger()
