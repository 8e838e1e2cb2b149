"""Closed set of error codes and their HTTP status registry."""

from __future__ import annotations

from enum import Enum

from loguru import logger

from error_message.domain.exceptions import UnknownCodeError, UnknownStatusError


class ErrorCode(str, Enum):
    """Symbolic error classification named after HTTP reason phrases."""

    MULTIPLE_CHOICES = "multiple_choices"
    MOVED_PERMANENTLY = "moved_permanently"
    FOUND = "found"
    SEE_OTHER = "see_other"
    NOT_MODIFIED = "not_modified"
    USE_PROXY = "use_proxy"
    SWITCH_PROXY = "switch_proxy"
    TEMPORARY_REDIRECT = "temporary_redirect"
    PERMANENT_REDIRECT = "permanent_redirect"

    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    PAYMENT_REQUIRED = "payment_required"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    METHOD_NOT_ALLOWED = "method_not_allowed"
    NOT_ACCEPTABLE = "not_acceptable"
    PROXY_AUTHENTICATION_REQUIRED = "proxy_authentication_required"
    REQUEST_TIMEOUT = "request_timeout"
    CONFLICT = "conflict"
    GONE = "gone"
    LENGTH_REQUIRED = "length_required"
    PRECONDITION_FAILED = "precondition_failed"
    REQUEST_ENTITY_TOO_LARGE = "request_entity_too_large"
    REQUEST_URI_TOO_LONG = "request_uri_too_long"
    UNSUPPORTED_MEDIA_TYPE = "unsupported_media_type"
    REQUESTED_RANGE_NOT_SATISFIABLE = "requested_range_not_satisfiable"
    EXPECTATION_FAILED = "expectation_failed"
    IM_A_TEAPOT = "im_a_teapot"
    MISDIRECTED_REQUEST = "misdirected_request"
    UNPROCESSABLE_ENTITY = "unprocessable_entity"
    LOCKED = "locked"
    FAILED_DEPENDENCY = "failed_dependency"
    TOO_EARLY = "too_early"
    UPGRADE_REQUIRED = "upgrade_required"
    PRECONDITION_REQUIRED = "precondition_required"
    TOO_MANY_REQUESTS = "too_many_requests"
    REQUEST_HEADER_FIELDS_TOO_LARGE = "request_header_fields_too_large"
    UNAVAILABLE_FOR_LEGAL_REASONS = "unavailable_for_legal_reasons"

    INTERNAL_SERVER_ERROR = "internal_server_error"
    NOT_IMPLEMENTED = "not_implemented"
    BAD_GATEWAY = "bad_gateway"
    SERVICE_UNAVAILABLE = "service_unavailable"
    GATEWAY_TIMEOUT = "gateway_timeout"
    HTTP_VERSION_NOT_SUPPORTED = "http_version_not_supported"
    VARIANT_ALSO_NEGOTIATES = "variant_also_negotiates"
    INSUFFICIENT_STORAGE = "insufficient_storage"
    LOOP_DETECTED = "loop_detected"
    NOT_EXTENDED = "not_extended"
    NETWORK_AUTHENTICATION_REQUIRED = "network_authentication_required"

    @property
    def status(self) -> int:
        return STATUS_BY_CODE[self]

    def is_redirection(self) -> bool:
        return 300 <= self.status < 400

    def is_client_error(self) -> bool:
        return 400 <= self.status < 500

    def is_server_error(self) -> bool:
        return 500 <= self.status < 600


STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.MULTIPLE_CHOICES: 300,
    ErrorCode.MOVED_PERMANENTLY: 301,
    ErrorCode.FOUND: 302,
    ErrorCode.SEE_OTHER: 303,
    ErrorCode.NOT_MODIFIED: 304,
    ErrorCode.USE_PROXY: 305,
    ErrorCode.SWITCH_PROXY: 306,
    ErrorCode.TEMPORARY_REDIRECT: 307,
    ErrorCode.PERMANENT_REDIRECT: 308,
    ErrorCode.BAD_REQUEST: 400,
    ErrorCode.UNAUTHORIZED: 401,
    ErrorCode.PAYMENT_REQUIRED: 402,
    ErrorCode.FORBIDDEN: 403,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.METHOD_NOT_ALLOWED: 405,
    ErrorCode.NOT_ACCEPTABLE: 406,
    ErrorCode.PROXY_AUTHENTICATION_REQUIRED: 407,
    ErrorCode.REQUEST_TIMEOUT: 408,
    ErrorCode.CONFLICT: 409,
    ErrorCode.GONE: 410,
    ErrorCode.LENGTH_REQUIRED: 411,
    ErrorCode.PRECONDITION_FAILED: 412,
    ErrorCode.REQUEST_ENTITY_TOO_LARGE: 413,
    ErrorCode.REQUEST_URI_TOO_LONG: 414,
    ErrorCode.UNSUPPORTED_MEDIA_TYPE: 415,
    ErrorCode.REQUESTED_RANGE_NOT_SATISFIABLE: 416,
    ErrorCode.EXPECTATION_FAILED: 417,
    ErrorCode.IM_A_TEAPOT: 418,
    ErrorCode.MISDIRECTED_REQUEST: 421,
    ErrorCode.UNPROCESSABLE_ENTITY: 422,
    ErrorCode.LOCKED: 423,
    ErrorCode.FAILED_DEPENDENCY: 424,
    ErrorCode.TOO_EARLY: 425,
    ErrorCode.UPGRADE_REQUIRED: 426,
    ErrorCode.PRECONDITION_REQUIRED: 428,
    ErrorCode.TOO_MANY_REQUESTS: 429,
    ErrorCode.REQUEST_HEADER_FIELDS_TOO_LARGE: 431,
    ErrorCode.UNAVAILABLE_FOR_LEGAL_REASONS: 451,
    ErrorCode.INTERNAL_SERVER_ERROR: 500,
    ErrorCode.NOT_IMPLEMENTED: 501,
    ErrorCode.BAD_GATEWAY: 502,
    ErrorCode.SERVICE_UNAVAILABLE: 503,
    ErrorCode.GATEWAY_TIMEOUT: 504,
    ErrorCode.HTTP_VERSION_NOT_SUPPORTED: 505,
    ErrorCode.VARIANT_ALSO_NEGOTIATES: 506,
    ErrorCode.INSUFFICIENT_STORAGE: 507,
    ErrorCode.LOOP_DETECTED: 508,
    ErrorCode.NOT_EXTENDED: 510,
    ErrorCode.NETWORK_AUTHENTICATION_REQUIRED: 511,
}

CODE_BY_STATUS: dict[int, ErrorCode] = {
    status: code for code, status in STATUS_BY_CODE.items()
}


def to_error_code(code: ErrorCode | str) -> ErrorCode:
    """Return the :class:`ErrorCode` member for *code* or its symbolic name."""
    if isinstance(code, ErrorCode):
        return code
    try:
        return ErrorCode(code)
    except ValueError:
        logger.trace("Lookup of unknown error code {!r}", code)
        raise UnknownCodeError(name=str(code)) from None


def status_of(code: ErrorCode | str) -> int:
    """Return the HTTP status registered for *code*."""
    return STATUS_BY_CODE[to_error_code(code)]


def code_of(status: int) -> ErrorCode:
    """Return the error code registered for the HTTP *status*."""
    code = CODE_BY_STATUS.get(status) if isinstance(status, int) else None
    if code is None:
        logger.trace("Lookup of unregistered status {!r}", status)
        raise UnknownStatusError(status=status)
    return code


if set(STATUS_BY_CODE) != set(ErrorCode):
    missing = set(ErrorCode) - set(STATUS_BY_CODE)
    raise RuntimeError(
        "Status registry must cover all error codes: "
        f"missing={sorted(code.value for code in missing)}"
    )

if len(CODE_BY_STATUS) != len(STATUS_BY_CODE):
    raise RuntimeError("Status registry maps several error codes to one status")

if any(not 300 <= status < 600 for status in STATUS_BY_CODE.values()):
    raise RuntimeError("Status registry holds statuses outside the 3xx-5xx ranges")
