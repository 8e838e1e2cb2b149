"""Consistent error values across domain logic, services, APIs and logs."""

from __future__ import annotations

from error_message.application.normalizer import (
    NormalizedValue,
    ensure_json_serializable,
    normalize,
)
from error_message.application.presentation import (
    http_code,
    to_json,
    to_jsonable_map,
    to_string,
)
from error_message.domain.codes import ErrorCode, code_of, status_of
from error_message.domain.exceptions import (
    DomainError,
    UnknownCodeError,
    UnknownStatusError,
)
from error_message.domain.models import ErrorMessage, RequestContext
from error_message.errors import AppError
from error_message.factories import *  # noqa: F403
from error_message.factories import __all__ as _factory_names
from error_message.infrastructure.context import (
    bind_request_id,
    current_request_context,
)

__all__ = [
    "AppError",
    "DomainError",
    "ErrorCode",
    "ErrorMessage",
    "NormalizedValue",
    "RequestContext",
    "UnknownCodeError",
    "UnknownStatusError",
    "bind_request_id",
    "code_of",
    "current_request_context",
    "ensure_json_serializable",
    "http_code",
    "normalize",
    "status_of",
    "to_json",
    "to_jsonable_map",
    "to_string",
    *_factory_names,
]
