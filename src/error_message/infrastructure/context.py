"""Request identifier carried through the current execution context."""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

from loguru import logger

from error_message.domain.models import RequestContext

request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)


@contextmanager
def bind_request_id(request_id: str) -> Iterator[RequestContext]:
    """Bind *request_id* to the context and to loguru records for the block."""
    token = request_id_var.set(request_id)
    try:
        with logger.contextualize(request_id=request_id):
            yield RequestContext(request_id=request_id)
    finally:
        request_id_var.reset(token)


def current_request_context() -> RequestContext:
    return RequestContext(request_id=request_id_var.get())
