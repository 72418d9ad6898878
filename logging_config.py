"""
Structured logging configuration for the recipe catalog.

setup_logging() builds the application logger once at startup; the returned
logger is handed to each component instead of being installed globally.
"""
import json
import logging
import time
from datetime import datetime, timezone

from sqlalchemy import event

LOGGER_NAME = "recipe_catalog"

# Attributes present on every LogRecord; anything else came in through extra=
_RESERVED = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


def _extra_fields(record):
    return {k: v for k, v in vars(record).items() if k not in _RESERVED}


class JSONFormatter(logging.Formatter):
    """Structured JSON log lines for machine parsing."""
    def format(self, record):
        entry = {
            "ts": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname.lower(),
            "logger": record.name,
            "msg": record.getMessage(),
            "caller": f"{record.module}:{record.lineno}",
        }
        entry.update(_extra_fields(record))
        if record.exc_info and record.exc_info[0]:
            entry["error"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class ConsoleFormatter(logging.Formatter):
    """Readable console format with color."""
    COLORS = {
        "DEBUG": "\033[36m", "INFO": "\033[32m",
        "WARNING": "\033[33m", "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record):
        color = self.COLORS.get(record.levelname, "")
        ts = datetime.now().strftime("%H:%M:%S")
        extras = " ".join(f"{k}={v}" for k, v in _extra_fields(record).items())
        line = f"{color}{ts} [{record.levelname[0]}] {record.name}: {record.getMessage()}{self.RESET}"
        if extras:
            line = f"{line} {extras}"
        if record.exc_info and record.exc_info[0]:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def setup_logging(level="INFO", fmt="json", stream=None):
    """
    Configure and return the application logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ...)
        fmt: 'json' for one JSON object per line, 'console' for human output
        stream: Optional stream for the handler (default: stderr)

    Returns:
        The configured logging.Logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    logger.handlers.clear()
    logger.propagate = False
    logger.disabled = False

    handler = logging.StreamHandler(stream)
    handler.setFormatter(JSONFormatter() if fmt == "json" else ConsoleFormatter())
    logger.addHandler(handler)

    return logger


def install_query_logging(engine, logger, slow_threshold=1.0):
    """
    Log executed SQL on an engine.

    Every statement is logged at DEBUG; statements taking longer than
    slow_threshold seconds are logged at WARNING.
    """
    sql_logger = logger.getChild("sql")

    @event.listens_for(engine, "before_cursor_execute")
    def _start_timer(conn, cursor, statement, parameters, context, executemany):
        conn.info.setdefault("query_start", []).append(time.perf_counter())

    @event.listens_for(engine, "after_cursor_execute")
    def _log_query(conn, cursor, statement, parameters, context, executemany):
        elapsed = time.perf_counter() - conn.info["query_start"].pop()
        duration_ms = round(elapsed * 1000, 2)
        if slow_threshold and elapsed >= slow_threshold:
            sql_logger.warning("Slow SQL query",
                               extra={"sql": statement, "duration_ms": duration_ms})
        else:
            sql_logger.debug("SQL query",
                             extra={"sql": statement, "duration_ms": duration_ms})

    return sql_logger
