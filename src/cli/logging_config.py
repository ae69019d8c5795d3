"""Structured logging configuration using structlog."""

import logging
import sys
from pathlib import Path
from typing import Optional

import structlog

# Event keys whose values are free-text user notes
_PRIVATE_KEYS = {"notes", "note"}


def _mask_private_text(_, __, event_dict: dict) -> dict:
    """Structlog processor replacing free-text notes with their length."""
    for key in _PRIVATE_KEYS & event_dict.keys():
        value = event_dict[key]
        if isinstance(value, str):
            event_dict[key] = f"<{len(value)} chars>"
    return event_dict


def _formatter(renderer) -> structlog.stdlib.ProcessorFormatter:
    return structlog.stdlib.ProcessorFormatter(
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )


def setup_logging(
    json_mode: bool = False,
    level: str = "INFO",
    log_file: Optional[Path] = None,
) -> None:
    """Route structlog events through stdlib logging.

    Args:
        json_mode: One JSON object per line (web service). False renders
            human-readable lines for the CLI.
        level: Root log level name; unknown names fall back to INFO.
        log_file: Also append JSON lines here, whatever ``json_mode`` is.
    """
    callsite = structlog.processors.CallsiteParameterAdder(
        [
            structlog.processors.CallsiteParameter.MODULE,
            structlog.processors.CallsiteParameter.FUNC_NAME,
            structlog.processors.CallsiteParameter.LINENO,
        ]
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            callsite,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            _mask_private_text,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    json_renderer = structlog.processors.JSONRenderer()
    stream = logging.StreamHandler(sys.stderr)
    stream.setFormatter(_formatter(json_renderer if json_mode else structlog.dev.ConsoleRenderer()))

    root = logging.getLogger()
    for old in root.handlers:
        old.close()
    root.handlers.clear()
    root.addHandler(stream)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(_formatter(json_renderer))
        root.addHandler(file_handler)
