"""Process-wide logging setup for runtime entry points."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def config_configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the running process.

    Args:
        level: Standard logging level name.

    Raises:
        ValueError: Raised when the level name is unknown.
    """

    resolved_level = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved_level, int):
        raise ValueError(f"unsupported log level: {level}")
    logging.basicConfig(format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT, level=resolved_level)
