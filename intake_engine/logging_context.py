"""Session ID logging context for tracing one intake conversation.

Provides a session_id-aware logger that attaches a correlation ID to
every log record, so the normalize/resolve/estimate/decide calls of a
single conversation can be followed across components.

Usage:
    from intake_engine.logging_context import get_session_logger, set_session_id

    set_session_id("INTAKE-abc123")
    logger = get_session_logger(__name__)
    logger.info("Deciding next action")  # record.session_id == "INTAKE-abc123"
"""

import logging
from contextvars import ContextVar
from typing import Optional

_session_id: ContextVar[str] = ContextVar("session_id", default="NO_SESSION_ID")


def set_session_id(session_id: str) -> None:
    """Set the correlation ID for the current context."""
    _session_id.set(session_id)


def get_session_id() -> str:
    """Retrieve the current correlation ID."""
    return _session_id.get()


class SessionIdFilter(logging.Filter):
    """Injects session_id into every log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.session_id = _session_id.get()  # type: ignore[attr-defined]
        return True


def get_session_logger(name: str) -> logging.Logger:
    """Return a logger with the SessionIdFilter attached.

    The filter adds ``session_id`` to each record so formatters can
    include ``%(session_id)s`` in their format string.
    """
    logger = logging.getLogger(name)
    if not any(isinstance(f, SessionIdFilter) for f in logger.filters):
        logger.addFilter(SessionIdFilter())
    return logger


def install_session_id_filter(logger: Optional[logging.Logger] = None) -> None:
    """Attach a SessionIdFilter to every handler of ``logger`` (root by default).

    Handler-level filtering covers records from third-party loggers too,
    so a ``%(session_id)s`` format never fails on them.
    """
    target = logger if logger is not None else logging.getLogger()
    for handler in target.handlers:
        if not any(isinstance(f, SessionIdFilter) for f in handler.filters):
            handler.addFilter(SessionIdFilter())
