"""Logging for knife4j-docs.

Adapter and middleware log calls attach request context through ``extra=``
(``path``, ``prefix``, ``group``, ``status``, ...). ``JSONFormatter`` emits
those fields as top-level keys, ``ColoredFormatter`` appends them as
``key=value`` pairs, and ``get_logger(name, **context)`` binds fields that
stay constant for a component, such as the mount prefix of a middleware.
"""

from __future__ import annotations
import logging
import sys
import json
from typing import Any, Dict, Optional
from datetime import datetime, timezone
from pathlib import Path

# Attributes every LogRecord carries; anything else came in through ``extra=``
_RECORD_ATTRS = set(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}


def context_fields(record: logging.LogRecord) -> Dict[str, Any]:
    """Fields attached to the record through ``extra=``."""
    return {k: v for k, v in vars(record).items() if k not in _RECORD_ATTRS}


class JSONFormatter(logging.Formatter):
    """One JSON object per line, request context as top-level keys."""

    def __init__(self, service_name: str = "knife4j-docs"):
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service_name,
        }

        for key, value in context_fields(record).items():
            log_entry.setdefault(key, value)

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str, ensure_ascii=False)


class ColoredFormatter(logging.Formatter):
    """Console formatter: ``time | level | logger | message | key=value ...``."""

    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def __init__(self, use_colors: bool = True):
        super().__init__()
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S')
        message = f"{timestamp} | {record.levelname:8} | {record.name} | {record.getMessage()}"

        context = context_fields(record)
        if context:
            message += " | " + " ".join(f"{k}={v}" for k, v in context.items())

        if self.use_colors and record.levelname in self.COLORS:
            message = f"{self.COLORS[record.levelname]}{message}{self.RESET}"

        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)

        return message


class ContextLogger(logging.LoggerAdapter):
    """Logger that merges bound context into every call's ``extra``."""

    def process(self, msg, kwargs):
        kwargs["extra"] = {**self.extra, **(kwargs.get("extra") or {})}
        return msg, kwargs


def get_logger(name: str, **context) -> logging.Logger | ContextLogger:
    """Module logger, wrapped in a ``ContextLogger`` when context is given."""
    logger = logging.getLogger(name)
    if context:
        return ContextLogger(logger, context)
    return logger


def setup_logging(
    level: str = "INFO",
    service_name: str = "knife4j-docs",
    log_file: Optional[str] = None,
    use_json: bool = False,
    use_colors: bool = True
) -> None:
    """Install console (and optional file) handlers on the root logger.

    Args:
        level: Log level name
        service_name: ``service`` field of JSON log lines
        log_file: Optional file that always receives JSON lines
        use_json: JSON console output instead of colored text
        use_colors: ANSI colors for the text console output
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(numeric_level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(JSONFormatter(service_name) if use_json else ColoredFormatter(use_colors))
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(JSONFormatter(service_name))
        root_logger.addHandler(file_handler)

    # Framework access logs duplicate what the middlewares already report
    for noisy in ("uvicorn.access", "werkzeug", "httpx"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def setup_logging_from_settings(settings, log_file: Optional[str] = None) -> None:
    """Configure logging from ``config.AdapterSettings``."""
    setup_logging(
        level=settings.log_level,
        service_name=f"knife4j-docs:{settings.name}",
        log_file=log_file,
        use_json=settings.log_json,
        use_colors=sys.stdout.isatty()
    )
