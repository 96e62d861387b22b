"""Pipeline event logging with structlog.

The credibility pipeline and fact verifier emit snake_case events
(``analysis_completed``, ``claim_verification_failed``) rather than prose
messages. Every pipeline operation runs under its own request id so the
events of one ``analyze`` or ``batch`` call can be grouped downstream:

    request_id, log = bind_request(pipeline_logger, "batch")
    log.info("batch_completed", successful=3, failed=0)

Output mirrors the loguru sinks: colorized console lines on a terminal
with ``log_format=console``, JSON lines on stderr otherwise.
"""

import sys
import uuid
from typing import Any, Optional

import structlog
from structlog.contextvars import merge_contextvars
from structlog.processors import JSONRenderer

from truthguard.config.settings import settings

IS_TTY = sys.stderr.isatty()


def configure_structured_logging() -> None:
    """Install the structlog processor chain for pipeline events."""
    processors = [
        merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if IS_TTY and settings.log_format.lower() == "console":
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )
    else:
        processors.append(JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(settings.log_level.upper()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_structured_logger(name: str, **context: Any) -> structlog.BoundLogger:
    """
    Event logger for one analyzer or pipeline.

    ``name`` is bound as ``component``; extra keyword context such as
    ``analyzer_id`` rides along on every event.
    """
    return structlog.get_logger(name).bind(component=name, **context)


def get_correlation_id() -> str:
    """Fresh request id for one pipeline operation."""
    return str(uuid.uuid4())


def bind_request(
    logger: structlog.BoundLogger,
    operation: str,
    request_id: Optional[str] = None,
) -> tuple[str, structlog.BoundLogger]:
    """
    Bind a request id and operation name to a pipeline logger.

    Args:
        logger: Component logger from get_structured_logger
        operation: Pipeline operation, e.g. "analyze" or "source_check"
        request_id: Existing id to reuse; a new one is generated if omitted

    Returns:
        The request id and the bound logger
    """
    request_id = request_id or get_correlation_id()
    return request_id, logger.bind(request_id=request_id, operation=operation)


configure_structured_logging()


__all__ = [
    "bind_request",
    "get_structured_logger",
    "get_correlation_id",
    "configure_structured_logging",
]
