from __future__ import annotations

from dataclasses import FrozenInstanceError, dataclass
from typing import Any, Mapping


class ImmutableFields:
    """Reject reassignment of dataclass fields once they are set.

    Exception bookkeeping (``__traceback__``, ``__context__``, ``__cause__``,
    ``__notes__``) stays writable, so instances can be raised through
    ``with`` blocks.
    """

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self.__dataclass_fields__ and name in self.__dict__:  # type: ignore[attr-defined]
            raise FrozenInstanceError(f"cannot assign to field {name!r}")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if name in self.__dataclass_fields__:  # type: ignore[attr-defined]
            raise FrozenInstanceError(f"cannot delete field {name!r}")
        super().__delattr__(name)


@dataclass
class AppError(ImmutableFields, Exception):
    """Failure raised by the package itself.

    Distinct from :class:`~error_message.domain.models.ErrorMessage`, which is
    a value the package builds for callers.

    Attributes:
        message: Human-readable description.
        code: Stable identifier for alerting, e.g. ``DOMAIN_UNKNOWN_CODE``.
        context: The offending input, keyed by argument name.
    """

    message: str
    code: str | None = None
    context: Mapping[str, Any] | None = None

    def __str__(self) -> str:
        return self.message

    def __hash__(self) -> int:
        return hash((type(self), self.message, self.code))
