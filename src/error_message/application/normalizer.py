"""Conversion of arbitrary details payloads into JSON-safe trees.

:func:`ensure_json_serializable` walks a value and rebuilds it from
``None``, booleans, numbers, strings, lists and string-keyed dicts only.
Sets become lists in sorted order, or ordered by ``repr`` when their
elements do not compare.
Categories are tried in a fixed order and the first match wins, because
several of them overlap structurally (a ``NamedTuple`` is a tuple, a
``datetime`` is a ``date``).

Values matching no category are returned unchanged. Such a value may not be
JSON-safe; encoding it fails later in the JSON encoder, not here. Input must
be acyclic.
"""

from __future__ import annotations

import dataclasses
import functools
import inspect
from collections.abc import Callable, Mapping
from datetime import date, datetime, time
from enum import Enum
from typing import Any, TypeAlias

from pydantic import BaseModel

from error_message.infrastructure.handles import is_handle, render_handle

NormalizedValue: TypeAlias = (
    None
    | bool
    | int
    | float
    | str
    | list["NormalizedValue"]
    | dict[str, "NormalizedValue"]
)

LAMBDA_NAME = "<lambda>"


def ensure_json_serializable(value: Any) -> NormalizedValue:
    if is_handle(value):
        return render_handle(value)

    if isinstance(value, list):
        return [ensure_json_serializable(item) for item in value]

    if isinstance(value, date) and not isinstance(value, datetime):
        return value.isoformat()

    if isinstance(value, time):
        return value.isoformat()

    if isinstance(value, datetime):
        # the offset is only emitted for aware values
        return value.isoformat()

    if is_record(value):
        return {
            "struct": type(value).__name__,
            "data": ensure_json_serializable(record_fields(value)),
        }

    if isinstance(value, Mapping):
        return {
            _key_to_str(key): ensure_json_serializable(item)
            for key, item in value.items()
        }

    if isinstance(value, tuple):
        return ensure_json_serializable(list(value))

    if isinstance(value, (set, frozenset)):
        return ensure_json_serializable(_ordered(value))

    if is_routine(value):
        return describe_callable(value)

    if isinstance(value, Enum):
        return ensure_json_serializable(value.value)

    return value


normalize = ensure_json_serializable


def is_record(value: Any) -> bool:
    """Return ``True`` for dataclass, pydantic model and ``NamedTuple`` instances."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return True
    if isinstance(value, BaseModel):
        return True
    return isinstance(value, tuple) and hasattr(type(value), "_fields")


def record_fields(value: Any) -> dict[str, Any]:
    """Shallow field map of a record; nested values are left untouched."""
    if isinstance(value, BaseModel):
        return {name: getattr(value, name) for name in type(value).model_fields}
    if isinstance(value, tuple):
        return dict(value._asdict())
    return {
        field.name: getattr(value, field.name) for field in dataclasses.fields(value)
    }


def is_routine(value: Any) -> bool:
    return inspect.isroutine(value) or isinstance(value, functools.partial)


def describe_callable(func: Callable[..., Any]) -> dict[str, NormalizedValue]:
    target = func.func if isinstance(func, functools.partial) else func
    return {
        "module": _callable_module(target),
        "function": _callable_name(target),
        "arity": _arity(func),
    }


def _callable_module(func: Any) -> str | None:
    module = getattr(func, "__module__", None)
    if module:
        return module
    # method descriptors and builtin bound methods carry no module of their own
    owner = getattr(func, "__objclass__", None)
    if owner is None:
        bound = getattr(func, "__self__", None)
        owner = bound if isinstance(bound, type) else type(bound)
    return getattr(owner, "__module__", None)


def _callable_name(func: Any) -> str:
    name = getattr(func, "__name__", None) or repr(func)
    if name != LAMBDA_NAME:
        return name
    qualname: str = getattr(func, "__qualname__", LAMBDA_NAME)
    scope = [
        part for part in qualname.split(".") if part not in (LAMBDA_NAME, "<locals>")
    ]
    code = getattr(func, "__code__", None)
    line = code.co_firstlineno if code is not None else 0
    return ".".join([*scope, f"<lambda:{line}>"])


def _arity(func: Callable[..., Any]) -> int | None:
    try:
        return len(inspect.signature(func).parameters)
    except (TypeError, ValueError):
        return None


def _ordered(items: set[Any] | frozenset[Any]) -> list[Any]:
    # sets have no order of their own; sort for a stable rendering
    try:
        return sorted(items)
    except TypeError:
        return sorted(items, key=repr)


def _key_to_str(key: Any) -> str:
    """Stringify a mapping key the way ``json.dumps`` does.

    Keys that stringify alike collide (``1`` and ``"1"``); the later item wins.
    """
    if isinstance(key, Enum):
        key = key.value
    if isinstance(key, str):
        return key
    if key is None:
        return "null"
    if isinstance(key, bool):
        return "true" if key else "false"
    return str(key)
