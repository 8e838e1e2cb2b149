import pytest

from error_message.domain.codes import (
    CODE_BY_STATUS,
    STATUS_BY_CODE,
    ErrorCode,
    code_of,
    status_of,
    to_error_code,
)
from error_message.domain.exceptions import UnknownCodeError, UnknownStatusError


def test_registry_is_a_bijection() -> None:
    assert set(STATUS_BY_CODE) == set(ErrorCode)
    assert len(set(STATUS_BY_CODE.values())) == len(ErrorCode)
    assert len(CODE_BY_STATUS) == len(ErrorCode)


@pytest.mark.parametrize("code", list(ErrorCode))
def test_code_status_round_trip(code: ErrorCode) -> None:
    assert code_of(status_of(code)) is code


def test_statuses_stay_in_error_ranges() -> None:
    assert all(300 <= status < 600 for status in STATUS_BY_CODE.values())
    assert 200 not in CODE_BY_STATUS
    assert 100 not in CODE_BY_STATUS


@pytest.mark.parametrize(
    "code, expected",
    [
        (ErrorCode.NOT_FOUND, 404),
        (ErrorCode.INTERNAL_SERVER_ERROR, 500),
        (ErrorCode.IM_A_TEAPOT, 418),
        (ErrorCode.UNAVAILABLE_FOR_LEGAL_REASONS, 451),
        (ErrorCode.NETWORK_AUTHENTICATION_REQUIRED, 511),
        (ErrorCode.PERMANENT_REDIRECT, 308),
    ],
)
def test_status_of_known_codes(code: ErrorCode, expected: int) -> None:
    assert status_of(code) == expected
    assert code.status == expected


def test_status_of_accepts_symbolic_names() -> None:
    assert status_of("not_found") == 404
    assert status_of("too_many_requests") == 429


@pytest.mark.parametrize("name", ["bogus", "NOT_FOUND", "", 404])
def test_status_of_unknown_code(name: object) -> None:
    with pytest.raises(UnknownCodeError) as exc:
        status_of(name)  # type: ignore[arg-type]
    assert exc.value.context == {"code": str(name)}


def test_code_of_known_statuses() -> None:
    assert code_of(404) is ErrorCode.NOT_FOUND
    assert code_of(503) is ErrorCode.SERVICE_UNAVAILABLE


@pytest.mark.parametrize("status", [200, 101, 427, 509, 600, "404", None])
def test_code_of_unknown_status(status: object) -> None:
    with pytest.raises(UnknownStatusError) as exc:
        code_of(status)  # type: ignore[arg-type]
    assert exc.value.status == status


def test_to_error_code_returns_members() -> None:
    assert to_error_code(ErrorCode.GONE) is ErrorCode.GONE
    assert to_error_code("gone") is ErrorCode.GONE


def test_range_helpers() -> None:
    assert ErrorCode.SEE_OTHER.is_redirection()
    assert ErrorCode.CONFLICT.is_client_error()
    assert not ErrorCode.CONFLICT.is_server_error()
    assert ErrorCode.BAD_GATEWAY.is_server_error()
    assert sum(code.is_redirection() for code in ErrorCode) == 9
    assert sum(code.is_server_error() for code in ErrorCode) == 11


def test_unknown_code_lookup_is_traced(log_records: list[dict]) -> None:
    with pytest.raises(UnknownCodeError):
        status_of("bogus")
    assert any("bogus" in record["message"] for record in log_records)
