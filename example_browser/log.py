"""Structured logging setup for the ``browser`` command.

Configuration is read from the environment unless passed explicitly:

- ``BROWSER_LOG_LEVEL``: ``DEBUG`` | ``INFO`` | ``WARNING`` | ``ERROR``
  (default ``WARNING``)
- ``BROWSER_LOG_FORMAT``: ``console`` | ``json`` (default ``console``)

Command output meant for the user (``wrote ...``, label listings) is printed,
not logged; logs go to stderr.
"""

from __future__ import annotations

import logging
import os
import sys
import typing as typ

import structlog

if typ.TYPE_CHECKING:
    from structlog.types import Processor

LogLevel = typ.Literal["DEBUG", "INFO", "WARNING", "ERROR"]
LogFormat = typ.Literal["console", "json"]

_configured = False


def configure_logging(
    level: LogLevel | None = None,
    fmt: LogFormat | None = None,
    *,
    force: bool = False,
) -> None:
    """Configure structlog and the stdlib root logger.

    Subsequent calls are no-ops unless ``force`` is True.

    Parameters
    ----------
    level : str, optional
        Log level; overrides ``BROWSER_LOG_LEVEL``.
    fmt : str, optional
        ``"console"`` or ``"json"``; overrides ``BROWSER_LOG_FORMAT``.
    force : bool, optional
        Reconfigure even if logging was already configured.
    """
    global _configured  # noqa: PLW0603

    if _configured and not force:
        return

    log_level = (level or os.environ.get("BROWSER_LOG_LEVEL", "WARNING")).upper()
    log_format = (fmt or os.environ.get("BROWSER_LOG_FORMAT", "console")).lower()
    numeric_level = getattr(logging, log_level, None)
    if not isinstance(numeric_level, int):
        msg = f"Unknown log level '{log_level}'."
        raise ValueError(msg)

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
    ]
    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=numeric_level,
        force=True,
    )
    logging.getLogger("example_browser").setLevel(numeric_level)
    _configured = True


__all__ = ["configure_logging"]
