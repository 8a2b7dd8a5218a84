import logging
import sys
import contextvars
from typing import Optional

# Correlation id of the request currently being built or decoded
_REQUEST_ID: contextvars.ContextVar[str] = contextvars.ContextVar("request_id", default="-")


class _RequestIdFilter(logging.Filter):
    """Logging filter that injects the request_id from contextvars into the record."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        record.request_id = _REQUEST_ID.get()
        return True


def _build_formatter() -> logging.Formatter:
    return logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | req=%(request_id)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def configure_root_logger(level: Optional[str] = None) -> None:
    """
    Configure the root handler and the providerhub logger.

    Root stays at WARNING so httpx/httpcore chatter is suppressed; only the
    providerhub namespace follows the requested level (INFO when first
    configured without one).

    Safe to call multiple times; it will not duplicate handlers.
    """
    root = logging.getLogger()
    providerhub_logger = logging.getLogger("providerhub")

    for h in root.handlers:
        if isinstance(h, logging.StreamHandler) and any(isinstance(f, _RequestIdFilter) for f in h.filters):
            # Already configured; only move the level when asked to
            if level is not None:
                providerhub_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
            return

    # stderr keeps stdout free for command output
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_build_formatter())
    handler.addFilter(_RequestIdFilter())
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    providerhub_logger.setLevel(getattr(logging, (level or "INFO").upper(), logging.INFO))


def get_logger(name: str = "providerhub") -> logging.Logger:
    """Get a module logger that writes through the shared stderr handler."""
    configure_root_logger()
    return logging.getLogger(name)


def push_request_id(request_id: Optional[str]) -> Optional[contextvars.Token]:
    """Set the current request id in context and return a token for later reset."""
    if not request_id:
        return None
    return _REQUEST_ID.set(request_id)


def reset_request_id(token: Optional[contextvars.Token]) -> None:
    """Reset the request id context using the provided token (if any)."""
    if token is None:
        return
    _REQUEST_ID.reset(token)