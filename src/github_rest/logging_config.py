"""Log output for the github_rest logger namespace.

Client modules log event names ("github_request", "token_rotated", ...)
with their details passed as ``extra``. StructuredFormatter renders those
extras as a JSON "context" object; TextFormatter is for local debugging.

The package never configures logging on import; applications call
configure_logging() once at startup. Defaults come from ClientSettings
(GITHUB_REST_LOG_LEVEL, GITHUB_REST_LOG_FORMAT).
"""

import json
import logging
from datetime import datetime, timezone

from .config import get_settings

LOGGER_NAMESPACE = "github_rest"

# Extras whose values must never be written out
SENSITIVE_KEYS = {"token", "authorization", "otp", "password", "secret"}

# Attributes every LogRecord has; anything else on a record came from extra=
_RECORD_ATTRS = set(logging.LogRecord("", 0, "", 0, "", (), None).__dict__) | {
    "message",
    "asctime",
}


class StructuredFormatter(logging.Formatter):
    """One JSON object per line.

    Keys: timestamp (UTC, 'Z' suffix), level, logger, message, and context
    when the call passed extras. Sensitive extras are replaced by
    "[REDACTED]".
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc)
            .isoformat(timespec="milliseconds")
            .replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        context = {
            key: "[REDACTED]" if key.lower() in SENSITIVE_KEYS else value
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRS
        }
        if context:
            log_data["context"] = context

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class TextFormatter(logging.Formatter):
    """``time [LEVEL] logger: event key=value ...`` for terminals."""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        pairs = " ".join(
            f"{key}={'[REDACTED]' if key.lower() in SENSITIVE_KEYS else value}"
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRS
        )
        return f"{line} {pairs}" if pairs else line


def configure_logging(level: str | None = None, log_format: str | None = None) -> logging.Logger:
    """Attach a stderr handler to the github_rest logger.

    Calling it again replaces the formatter and level instead of adding a
    second handler.

    Args:
        level: Log level name; defaults to ClientSettings.log_level
        log_format: "json" or "text"; defaults to ClientSettings.log_format

    Returns:
        The github_rest namespace logger.
    """
    settings = get_settings()
    level = (level or settings.log_level).upper()
    log_format = (log_format or settings.log_format).lower()

    formatter: logging.Formatter = TextFormatter() if log_format == "text" else StructuredFormatter()

    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(getattr(logging, level, logging.INFO))

    if not logger.handlers:
        logger.addHandler(logging.StreamHandler())
    for handler in logger.handlers:
        handler.setFormatter(formatter)

    logger.propagate = False
    return logger
