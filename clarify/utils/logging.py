"""Structured logging configuration for Clarify.

Provides JSON-formatted logging with contextual fields (decision_id,
owner_id, option_count) for production observability.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

CONTEXT_FIELDS = ("decision_id", "owner_id", "option_count", "criteria_count", "model")


class StructuredFormatter(logging.Formatter):
    """JSON log formatter with Clarify request context."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Add contextual fields if present
        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                entry[field] = str(value)

        if record.exc_info and record.exc_info[1]:
            entry["error"] = str(record.exc_info[1])
            entry["error_type"] = type(record.exc_info[1]).__name__

        return json.dumps(entry)


def configure_logging(
    level: str = "INFO",
    json_output: bool = True,
) -> None:
    """Configure logging for the ``clarify`` logger hierarchy.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
        json_output: If True, use structured JSON format. If False, use plain text.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    app_logger = logging.getLogger("clarify")
    app_logger.setLevel(log_level)

    # Avoid duplicate handlers on repeated calls
    if not app_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(log_level)

        if json_output:
            handler.setFormatter(StructuredFormatter())
        else:
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
            )

        app_logger.addHandler(handler)

    app_logger.propagate = False
