import logging
import sys

from fielddefs.config import get_settings

DEFAULT_LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(level_name: str) -> int:
    level_name = level_name.upper()
    log_level = logging.getLevelName(level_name)
    if isinstance(log_level, int):
        return log_level
    print(  # noqa: T201
        f"Warning: Invalid log level '{level_name}'. Defaulting to {logging.getLevelName(DEFAULT_LOG_LEVEL)}.",
        file=sys.stderr,
    )
    return DEFAULT_LOG_LEVEL


def setup_logging(level: int | str | None = None) -> None:
    """
    Sets up logging for the fielddefs package.

    Args:
        level: The logging level to set. Can be an integer (e.g., logging.INFO),
               a string (e.g., "INFO"), or None. If None, the level comes from
               the settings (``FIELDDEFS_LOG_LEVEL`` or ``[tool.fielddefs]``).

    """
    if level is None:
        log_level = _resolve_level(get_settings().log_level)
    elif isinstance(level, str):
        log_level = _resolve_level(level)
    else:
        log_level = level

    app_logger = logging.getLogger("fielddefs")
    app_logger.setLevel(log_level)

    # Replace existing handlers so the new one writes to the current sys.stderr.
    for handler_to_remove in list(app_logger.handlers):
        app_logger.removeHandler(handler_to_remove)
        handler_to_remove.close()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    app_logger.addHandler(handler)
