"""Centralized logging configuration using Loguru.

stdout is reserved for progress and dry-run output, so every handler here
writes to stderr or to a file.

Usage:
    from srcfixer.utils.logging import logger
    logger.info("Message")
    logger.debug("Debug message")  # Only shows if SRCFIX_LOG_LEVEL=DEBUG

Environment Variables:
    SRCFIX_LOG_LEVEL: TRACE|DEBUG|INFO|WARNING|ERROR (default: INFO)
    SRCFIX_LOG_JSON: 0|1 (default: 0, human-readable)
    SRCFIX_LOG_FILE: path to an NDJSON log file (optional)
"""

import json
import os
import sys

from loguru import logger

# Remove default handler
logger.remove()

_log_level = os.environ.get("SRCFIX_LOG_LEVEL", "INFO").upper()
_json_mode = os.environ.get("SRCFIX_LOG_JSON", "0") == "1"
_log_file = os.environ.get("SRCFIX_LOG_FILE")


def _format_json_record(record) -> str:
    """Serialize a loguru record as a single JSON line."""
    entry = {
        "level": record["level"].name,
        "time": int(record["time"].timestamp() * 1000),
        "msg": record["message"],
        "pid": record["process"].id,
    }

    for key, value in record["extra"].items():
        entry[key] = value

    if record["exception"]:
        entry["err"] = {
            "type": record["exception"].type.__name__ if record["exception"].type else "Error",
            "message": str(record["exception"].value) if record["exception"].value else "",
        }

    return json.dumps(entry, default=str)


def json_stderr_sink(message):
    """Write records as NDJSON to stderr."""
    # Never call logger.* inside a sink - causes infinite recursion
    sys.stderr.write(_format_json_record(message.record) + "\n")
    sys.stderr.flush()


_human_format = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}:{function}:{line}</cyan> - "
    "<level>{message}</level>"
)

logger.level("DEBUG", color="<blue>")
logger.level("INFO", color="<white>")
logger.level("WARNING", color="<yellow>")
logger.level("ERROR", color="<red>")

if _json_mode:
    logger.add(json_stderr_sink, level=_log_level, colorize=False)
else:
    logger.add(
        sys.stderr,
        level=_log_level,
        format=_human_format,
        colorize=None,  # Auto-detect: colors if TTY, plain if piped
    )

if _log_file:

    def _file_sink(message):
        """Append NDJSON records to the configured log file."""
        with open(_log_file, "a", encoding="utf-8") as f:
            f.write(_format_json_record(message.record) + "\n")

    logger.add(_file_sink, level="DEBUG")


__all__ = ["logger", "json_stderr_sink"]
