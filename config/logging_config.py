"""Loguru-based structured logging configuration.

Bridge logs go to a JSON-lines file; errors are mirrored to error.log next
to it. Stdlib logging (e.g. from the Discord/Telegram client libraries) is
intercepted and funneled to loguru. Context vars set through
``logger.contextualize(bridge=..., chat_id=..., message_id=...)`` are
promoted to top-level JSON keys.
"""

import json
import logging
import os

from loguru import logger

_configured = False

# Context keys we promote to top-level JSON for traceability
_CONTEXT_KEYS = ("bridge", "chat_id", "message_id")


def _serialize_with_context(record) -> str:
    """Format record as JSON with context vars at top level.
    Returns a format template; we inject _json into record for output.
    """
    extra = record.get("extra", {})
    out = {
        "time": str(record["time"]),
        "level": record["level"].name,
        "message": record["message"],
        "module": record["name"],
        "function": record["function"],
        "line": record["line"],
    }
    for key in _CONTEXT_KEYS:
        if extra.get(key) is not None:
            out[key] = extra[key]
    record["extra"]["_json"] = json.dumps(out, default=str, ensure_ascii=False)
    return "{extra[_json]}\n"


class InterceptHandler(logging.Handler):
    """Redirect stdlib logging to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def configure_logging(log_file: str, *, level: str = "DEBUG", force: bool = False) -> None:
    """Configure loguru with JSON output to log_file and intercept stdlib logging.

    Idempotent: skips if already configured.
    Use force=True to reconfigure (e.g. in tests with a different log path).
    """
    global _configured
    if _configured and not force:
        return
    _configured = True

    logger.remove()

    logger.add(
        log_file,
        level=level,
        format=_serialize_with_context,
        encoding="utf-8",
        mode="a",
    )

    error_log_file = os.path.join(os.path.dirname(log_file), "error.log")
    logger.add(
        error_log_file,
        level="ERROR",
        format=_serialize_with_context,
        encoding="utf-8",
        mode="a",
    )

    logging.root.handlers = [InterceptHandler()]
    logging.root.setLevel(logging.DEBUG)
