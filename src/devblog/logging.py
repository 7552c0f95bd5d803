"""Logging utilities.

Every record carries the id and path of the HTTP request being served (`-` outside a request), so
log lines from the content pipeline can be tied back to the page that triggered them.
"""

from __future__ import annotations

import contextlib
import contextvars
import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from rich.logging import RichHandler


@dataclass(frozen=True)
class RequestContext:
    request_id: str = "-"
    path: str = "-"


_NO_REQUEST = RequestContext()
_request_var: contextvars.ContextVar[RequestContext] = contextvars.ContextVar(
    "devblog_request", default=_NO_REQUEST
)

_HANDLER_NAME = "devblog"
_FORMAT = "%(asctime)s %(levelname)s [%(request_id)s %(request_path)s] %(name)s: %(message)s"

# Third-party loggers that are chatty at DEBUG/INFO and add nothing to a page render
_NOISY_LOGGERS = ("MARKDOWN", "uvicorn.access")


class _RequestFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        ctx = _request_var.get()
        record.request_id = ctx.request_id  # type: ignore[attr-defined]
        record.request_path = ctx.path  # type: ignore[attr-defined]
        return True


@contextlib.contextmanager
def request_context(*, request_id: str, path: str | None = None) -> Iterator[RequestContext]:
    """Bind the current request for the duration of the block.

    Args:
        request_id: Request identifier.
        path: Request path; inherits the enclosing one when omitted.
    """

    ctx = RequestContext(request_id=request_id, path=path or _request_var.get().path)
    token = _request_var.set(ctx)
    try:
        yield ctx
    finally:
        _request_var.reset(token)


def current_request() -> RequestContext:
    """Return the request bound to the current context."""

    return _request_var.get()


def configure_logging(level: str = "INFO") -> None:
    """Install the site's rich handler on the root logger.

    Calling it again only updates the level.

    Args:
        level: Logging level name.
    """

    root = logging.getLogger()
    root.setLevel(level)
    if not any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        handler = RichHandler(rich_tracebacks=True, show_time=False, show_path=False)
        handler.set_name(_HANDLER_NAME)
        handler.addFilter(_RequestFilter())
        handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a module logger."""

    return logging.getLogger(name)


def log_exception(logger: logging.Logger, msg: str, **context: Any) -> None:
    """Log the active exception with optional key/value context."""

    if context:
        details = " ".join(f"{k}={v!r}" for k, v in sorted(context.items()))
        logger.exception("%s (%s)", msg, details)
    else:
        logger.exception("%s", msg)
