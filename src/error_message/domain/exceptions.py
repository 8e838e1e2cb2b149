from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from error_message.errors import AppError


@dataclass(eq=False)
class DomainError(AppError):
    """Base exception for domain layer."""


@dataclass(eq=False, kw_only=True)
class UnknownCodeError(DomainError):
    """Raised when a symbolic name is not a registered error code."""

    name: str
    message: str = field(init=False)
    code: str = field(init=False, default="DOMAIN_UNKNOWN_CODE")
    context: dict[str, Any] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "message", f"Unknown error code: {self.name!r}")
        object.__setattr__(self, "context", {"code": self.name})


@dataclass(eq=False, kw_only=True)
class UnknownStatusError(DomainError):
    """Raised when an HTTP status has no registered error code."""

    status: Any
    message: str = field(init=False)
    code: str = field(init=False, default="DOMAIN_UNKNOWN_STATUS")
    context: dict[str, Any] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "message", f"No error code registered for status {self.status!r}"
        )
        object.__setattr__(self, "context", {"status": self.status})
