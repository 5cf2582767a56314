"""Structured JSON logging configuration.

Configures Python logging to emit JSON-formatted log entries with required
fields: timestamp, level, logger, message. Request-specific fields are added
contextually (method, url, status_code for requests; result_code for
envelope errors; attempt for reauthentication cycles).

SECURITY: Never logs passwords, session cookies or CSRF tokens.
"""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone

# Patterns that should be redacted from log output
_SENSITIVE_PATTERNS = re.compile(
    r"(password|passwd|csrf.token|token|cookie|unifises|authorization)"
    r"[\s]*[=:]\s*\S+",
    re.IGNORECASE,
)

_CONTEXT_FIELDS = ("method", "url", "status_code", "result_code", "attempt")


class JsonFormatter(logging.Formatter):
    """Formats log records as JSON with structured fields.

    Each entry contains at minimum: timestamp, level, logger, message.
    Additional fields can be attached via the ``extra`` dict on log calls.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": self._sanitize(record.getMessage()),
        }

        for name in _CONTEXT_FIELDS:
            if hasattr(record, name):
                entry[name] = getattr(record, name)

        # Exception info
        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self._sanitize(
                self.formatException(record.exc_info)
            )

        return json.dumps(entry, default=str)

    @staticmethod
    def _sanitize(text: str) -> str:
        """Remove sensitive values from log text."""
        return _SENSITIVE_PATTERNS.sub("[REDACTED]", text)


def configure_logging(level: str = "INFO", logger_name: str = "unifi_rest") -> logging.Logger:
    """Attach a JSON handler to the package logger and set its level.

    Only the ``unifi_rest`` logger tree is touched, so an application's root
    logging stays as it configured it. Calling this again replaces the JSON
    handler installed earlier instead of stacking another one.

    Parameters
    ----------
    level:
        Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL); unknown
        names fall back to INFO.
    logger_name:
        Logger to configure.
    """
    target = logging.getLogger(logger_name)
    target.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in list(target.handlers):
        if isinstance(handler.formatter, JsonFormatter):
            target.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    target.addHandler(handler)
    # Records are emitted here; don't print them twice via the root handlers.
    target.propagate = False
    return target
