"""Structured key=value logging for the Rollout Dashboard."""

import logging
import sys
from typing import Any

# Record attributes surfaced as top-level fields when passed via ``extra``
_CONTEXT_ATTRS = ("entity_id",)


def _render(value: Any) -> str:
    text = str(value)
    return f'"{text}"' if " " in text else text


class StructuredFormatter(logging.Formatter):
    """Render records as ``key=value`` pairs, quoting values that contain spaces."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "module": record.module,
            "function": record.funcName,
            "message": record.getMessage(),
        }

        for attr in _CONTEXT_ATTRS:
            if hasattr(record, attr):
                log_data[attr] = getattr(record, attr)

        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        line = " ".join(f"{k}={_render(v)}" for k, v in log_data.items())
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def _level_for_env() -> int:
    try:
        from rollout.core.config import get_settings

        settings = get_settings()
    except Exception:
        # Settings unavailable (e.g. bad environment); stay quiet-ish
        return logging.INFO

    if settings.LOG_LEVEL:
        level = logging.getLevelName(settings.LOG_LEVEL.upper())
        if isinstance(level, int):
            return level
    return logging.DEBUG if settings.ROLLOUT_ENV == "dev" else logging.INFO


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger writing structured lines to stdout
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)
        logger.setLevel(_level_for_env())

    return logger


def log_with_context(logger: logging.Logger, level: int, msg: str, **kwargs: Any) -> None:
    """
    Log with additional structured fields.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        msg: Log message
        **kwargs: Context fields (entity_id, upstream, status, ...)
    """
    extra: dict[str, Any] = {}
    for attr in _CONTEXT_ATTRS:
        if attr in kwargs:
            extra[attr] = kwargs.pop(attr)
    extra["extra_data"] = kwargs

    logger.log(level, msg, extra=extra, stacklevel=2)
