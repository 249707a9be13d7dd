"""Logging setup: structlog rendering for both structlog and stdlib loggers.

Console output is colored key-value lines; LOG_FORMAT=json switches to one
JSON object per line. Request-scoped values (request id, method, path) are
bound with ``bind_request_context`` and merged into every event logged while
handling that request.
"""

import logging
import sys
import uuid

import structlog
from structlog.typing import Processor

from queueboard.config import settings

# Loggers that are chatty at INFO and only interesting when something breaks
QUIET_LOGGERS = {
    "googleapiclient": logging.WARNING,
    "googleapiclient.discovery_cache": logging.ERROR,
    "google.auth": logging.WARNING,
    "urllib3": logging.WARNING,
    "httpx": logging.INFO,
    "asyncio": logging.INFO,
}


def build_renderer(log_format: str) -> Processor:
    """Final processor for the configured output format."""
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=sys.stdout.isatty(),
        exception_formatter=structlog.dev.plain_traceback,
    )


def configure_logging(log_format: str | None = None) -> None:
    """Route structlog and stdlib logging through one ProcessorFormatter on stdout."""
    log_format = log_format or settings.log_format
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso" if log_format == "json" else "%Y-%m-%d %H:%M:%S", utc=False),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if log_format == "json":
        # Tracebacks as structured data rather than a preformatted string
        shared_processors.append(structlog.processors.dict_tracebacks)

    structlog.configure(
        processors=[*shared_processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                build_renderer(log_format),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

    for name, level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(level)


def bind_request_context(method: str, path: str, request_id: str | None = None) -> str:
    """Reset the per-request log context and return the request id in use."""
    request_id = request_id or uuid.uuid4().hex[:12]
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id, method=method, path=path)
    return request_id


_configured = False


def setup_logging() -> None:
    """Setup logging once. Safe to call multiple times."""
    global _configured
    if not _configured:
        configure_logging()
        _configured = True
