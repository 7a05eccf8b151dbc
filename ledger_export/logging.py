"""Logging setup for ledger-export.

Exporters attach their per-account figures to log records under the
``export`` attribute (``logger.debug(..., extra={"export": {...}})``).
The JSON formatter writes those figures as top-level fields so a run can
be audited account by account.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

LOG_FORMATS = ("standard", "json")

EXPORT_CONTEXT_ATTR = "export"


def export_context(account_uid: str, exported: int, total: int, **fields: Any) -> dict[str, Any]:
    """Build the ``extra`` mapping for an export log record.

    Parameters
    ----------
    account_uid : str
        UID of the exported account.
    exported : int
        Number of transactions written.
    total : int
        Number of transactions held by the account.
    **fields : Any
        Additional fields, e.g. the export format.

    Returns
    -------
    dict[str, Any]
        Mapping to pass as ``extra`` to a logging call.
    """
    context = {"account_uid": account_uid, "exported": exported, "total": total}
    context.update(fields)
    return {EXPORT_CONTEXT_ATTR: context}


def setup_logging(level: str = "INFO", format_type: str = "standard") -> None:
    """Configure console logging.

    Parameters
    ----------
    level : str
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Unknown names
        fall back to INFO.
    format_type : str
        One of ``LOG_FORMATS``.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logging.getLogger("ledger_export").setLevel(log_level)
    # Faker logs locale lookups at DEBUG
    logging.getLogger("faker").setLevel(logging.WARNING)


class JsonFormatter(logging.Formatter):
    """Render records as one JSON object per line, export figures included."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        context = getattr(record, EXPORT_CONTEXT_ATTR, None)
        if context:
            log_data.update(context)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)
