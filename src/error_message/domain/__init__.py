from __future__ import annotations

from .codes import CODE_BY_STATUS, STATUS_BY_CODE, ErrorCode, code_of, status_of
from .exceptions import DomainError, UnknownCodeError, UnknownStatusError
from .models import ErrorMessage, RequestContext

__all__ = [
    "CODE_BY_STATUS",
    "STATUS_BY_CODE",
    "DomainError",
    "ErrorCode",
    "ErrorMessage",
    "RequestContext",
    "UnknownCodeError",
    "UnknownStatusError",
    "code_of",
    "status_of",
]
