"""Constructors for :class:`ErrorMessage`, one per :class:`ErrorCode`.

Each takes a message and optional details::

    not_found("User not found")
    not_found("User not found", {"user_id": 123})
"""

from __future__ import annotations

from typing import Any

from error_message.domain.codes import ErrorCode, to_error_code
from error_message.domain.models import ErrorMessage


def build(code: ErrorCode | str, message: str, details: Any = None) -> ErrorMessage:
    """Build an error for *code* given as a member or a symbolic name."""
    return ErrorMessage(to_error_code(code), message, details)


def multiple_choices(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.MULTIPLE_CHOICES, message, details)


def moved_permanently(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.MOVED_PERMANENTLY, message, details)


def found(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.FOUND, message, details)


def see_other(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.SEE_OTHER, message, details)


def not_modified(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.NOT_MODIFIED, message, details)


def use_proxy(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.USE_PROXY, message, details)


def switch_proxy(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.SWITCH_PROXY, message, details)


def temporary_redirect(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.TEMPORARY_REDIRECT, message, details)


def permanent_redirect(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.PERMANENT_REDIRECT, message, details)


def bad_request(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.BAD_REQUEST, message, details)


def unauthorized(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.UNAUTHORIZED, message, details)


def payment_required(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.PAYMENT_REQUIRED, message, details)


def forbidden(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.FORBIDDEN, message, details)


def not_found(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.NOT_FOUND, message, details)


def method_not_allowed(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.METHOD_NOT_ALLOWED, message, details)


def not_acceptable(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.NOT_ACCEPTABLE, message, details)


def proxy_authentication_required(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.PROXY_AUTHENTICATION_REQUIRED, message, details)


def request_timeout(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.REQUEST_TIMEOUT, message, details)


def conflict(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.CONFLICT, message, details)


def gone(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.GONE, message, details)


def length_required(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.LENGTH_REQUIRED, message, details)


def precondition_failed(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.PRECONDITION_FAILED, message, details)


def request_entity_too_large(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.REQUEST_ENTITY_TOO_LARGE, message, details)


def request_uri_too_long(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.REQUEST_URI_TOO_LONG, message, details)


def unsupported_media_type(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.UNSUPPORTED_MEDIA_TYPE, message, details)


def requested_range_not_satisfiable(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.REQUESTED_RANGE_NOT_SATISFIABLE, message, details)


def expectation_failed(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.EXPECTATION_FAILED, message, details)


def im_a_teapot(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.IM_A_TEAPOT, message, details)


def misdirected_request(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.MISDIRECTED_REQUEST, message, details)


def unprocessable_entity(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.UNPROCESSABLE_ENTITY, message, details)


def locked(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.LOCKED, message, details)


def failed_dependency(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.FAILED_DEPENDENCY, message, details)


def too_early(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.TOO_EARLY, message, details)


def upgrade_required(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.UPGRADE_REQUIRED, message, details)


def precondition_required(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.PRECONDITION_REQUIRED, message, details)


def too_many_requests(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.TOO_MANY_REQUESTS, message, details)


def request_header_fields_too_large(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.REQUEST_HEADER_FIELDS_TOO_LARGE, message, details)


def unavailable_for_legal_reasons(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.UNAVAILABLE_FOR_LEGAL_REASONS, message, details)


def internal_server_error(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.INTERNAL_SERVER_ERROR, message, details)


def not_implemented(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.NOT_IMPLEMENTED, message, details)


def bad_gateway(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.BAD_GATEWAY, message, details)


def service_unavailable(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.SERVICE_UNAVAILABLE, message, details)


def gateway_timeout(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.GATEWAY_TIMEOUT, message, details)


def http_version_not_supported(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.HTTP_VERSION_NOT_SUPPORTED, message, details)


def variant_also_negotiates(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.VARIANT_ALSO_NEGOTIATES, message, details)


def insufficient_storage(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.INSUFFICIENT_STORAGE, message, details)


def loop_detected(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.LOOP_DETECTED, message, details)


def not_extended(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.NOT_EXTENDED, message, details)


def network_authentication_required(message: str, details: Any = None) -> ErrorMessage:
    return ErrorMessage(ErrorCode.NETWORK_AUTHENTICATION_REQUIRED, message, details)


__all__ = [
    "build",
    "multiple_choices",
    "moved_permanently",
    "found",
    "see_other",
    "not_modified",
    "use_proxy",
    "switch_proxy",
    "temporary_redirect",
    "permanent_redirect",
    "bad_request",
    "unauthorized",
    "payment_required",
    "forbidden",
    "not_found",
    "method_not_allowed",
    "not_acceptable",
    "proxy_authentication_required",
    "request_timeout",
    "conflict",
    "gone",
    "length_required",
    "precondition_failed",
    "request_entity_too_large",
    "request_uri_too_long",
    "unsupported_media_type",
    "requested_range_not_satisfiable",
    "expectation_failed",
    "im_a_teapot",
    "misdirected_request",
    "unprocessable_entity",
    "locked",
    "failed_dependency",
    "too_early",
    "upgrade_required",
    "precondition_required",
    "too_many_requests",
    "request_header_fields_too_large",
    "unavailable_for_legal_reasons",
    "internal_server_error",
    "not_implemented",
    "bad_gateway",
    "service_unavailable",
    "gateway_timeout",
    "http_version_not_supported",
    "variant_also_negotiates",
    "insufficient_storage",
    "loop_detected",
    "not_extended",
    "network_authentication_required",
]
