from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict

from error_message.domain.codes import ErrorCode, to_error_code
from error_message.errors import ImmutableFields

if TYPE_CHECKING:
    from error_message.application.normalizer import NormalizedValue


class ConfiguredBaseModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class RequestContext(ConfiguredBaseModel):
    """Request metadata attached to JSON renderings of an error."""

    request_id: str | None = None


@dataclass
class ErrorMessage(ImmutableFields, Exception):
    """Immutable error value shared by domain, service and API layers.

    Attributes:
        code: Classification callers branch on.
        message: Human-readable description.
        details: Arbitrary payload; ``None`` means no details were given.
    """

    code: ErrorCode
    message: str
    details: Any = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "code", to_error_code(self.code))

    def __hash__(self) -> int:
        # details may be unhashable
        return hash((self.code, self.message))

    def __str__(self) -> str:
        return self.to_string()

    def to_string(self, *, width: int = 80) -> str:
        from error_message.application.presentation import to_string

        return to_string(self, width=width)

    def to_jsonable_map(
        self, context: RequestContext | None = None
    ) -> dict[str, NormalizedValue]:
        from error_message.application.presentation import to_jsonable_map

        return to_jsonable_map(self, context)

    def http_code(self) -> int:
        return self.code.status
