"""Loguru sinks for analyzer and CLI diagnostics.

Each analyzer logs through a logger bound to its component name
("content_analyzer", "source_checker", ...) plus its ``analyzer_id``.
On a terminal with ``log_format=console`` lines are colorized and tagged
with the component. Anywhere else records are serialized as JSON onto
stderr, which keeps ``truthguard ... --json`` output on stdout parseable.
"""

import sys
from loguru import logger

from truthguard.config.settings import settings

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> "
    "<level>{level: <7}</level> "
    "<cyan>[{extra[component]}]</cyan> {message}"
)


def configure_logging() -> None:
    """Replace loguru's default handler with the truthguard sink."""
    logger.remove()

    if sys.stderr.isatty() and settings.log_format.lower() == "console":
        logger.add(
            sys.stderr,
            format=CONSOLE_FORMAT,
            level=settings.log_level,
            colorize=True,
        )
    else:
        logger.add(
            sys.stderr,
            level=settings.log_level,
            serialize=True,
            diagnose=False,  # no local variables in serialized tracebacks
        )

    logger.configure(extra={"component": "truthguard"})


def get_logger(component: str, **context):
    """
    Logger bound to an analyzer or command.

    Example:
        >>> log = get_logger("source_checker", analyzer_id="3f2a...")
        >>> log.debug("Unknown domain {}", "example.org")
    """
    return logger.bind(component=component, **context)


configure_logging()

__all__ = ["logger", "get_logger", "configure_logging", "CONSOLE_FORMAT"]
