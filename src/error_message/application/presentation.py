"""Log, JSON and HTTP renderings of :class:`ErrorMessage` values."""

from __future__ import annotations

import json
from pprint import pformat
from typing import Any

from error_message.application.normalizer import (
    NormalizedValue,
    ensure_json_serializable,
)
from error_message.domain.codes import ErrorCode, status_of
from error_message.domain.models import ErrorMessage, RequestContext

EMPTY_COLLECTION_TYPES = (list, tuple, dict, set, frozenset)


def has_details(details: Any) -> bool:
    if details is None:
        return False
    return not (isinstance(details, EMPTY_COLLECTION_TYPES) and not details)


def to_string(error: ErrorMessage, *, width: int = 80) -> str:
    """Format *error* for a line-oriented log sink.

    Details are pretty-printed from the raw value, not the normalized tree.
    """
    head = f"{error.code.value} - {error.message}"
    if not has_details(error.details):
        return head
    return f"{head}\nDetails: \n{pformat(error.details, width=width)}"


def to_jsonable_map(
    error: ErrorMessage, context: RequestContext | None = None
) -> dict[str, NormalizedValue]:
    """Return a mapping of *error* that a JSON encoder can consume.

    ``request_id`` is present only when *context* carries one.
    """
    payload: dict[str, NormalizedValue] = {
        "code": error.code.value,
        "message": error.message,
    }
    if context is not None and context.request_id:
        payload["request_id"] = context.request_id
    payload["details"] = ensure_json_serializable(error.details)
    return payload


def to_json(
    error: ErrorMessage,
    context: RequestContext | None = None,
    *,
    indent: int | None = None,
) -> str:
    """Encode :func:`to_jsonable_map` output.

    Raises ``TypeError`` when a details leaf was passed through unnormalized
    and the encoder cannot handle it.
    """
    return json.dumps(to_jsonable_map(error, context), indent=indent)


def http_code(error: ErrorMessage | ErrorCode | str) -> int:
    if isinstance(error, ErrorMessage):
        return status_of(error.code)
    return status_of(error)
