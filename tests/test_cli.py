import json
import sys
from pathlib import Path
from typing import Iterator

import pytest
from loguru import logger
from typer.testing import CliRunner

from error_message import cli

runner = CliRunner()


@pytest.fixture(autouse=True)
def _env(clean_env: Path) -> Iterator[None]:
    yield
    logger.remove()
    logger.add(sys.stderr)


def test_status() -> None:
    result = runner.invoke(cli.app, ["status", "not_found"])
    assert result.exit_code == 0
    assert result.output == "404\n"


def test_status_unknown_code() -> None:
    result = runner.invoke(cli.app, ["status", "bogus"])
    assert result.exit_code == 1
    assert "Unknown error code: 'bogus'" in result.output


def test_code() -> None:
    result = runner.invoke(cli.app, ["code", "503"])
    assert result.exit_code == 0
    assert result.output == "service_unavailable\n"


def test_code_unknown_status() -> None:
    result = runner.invoke(cli.app, ["code", "200"])
    assert result.exit_code == 1
    assert "No error code registered for status 200" in result.output


def test_codes_lists_everything() -> None:
    result = runner.invoke(cli.app, ["codes"])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert len(lines) == 49
    assert "not_found 404" in lines


def test_codes_filters_by_range() -> None:
    result = runner.invoke(cli.app, ["codes", "--range", "5xx"])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert len(lines) == 11
    assert all(line.split()[1].startswith("5") for line in lines)


def test_codes_rejects_unknown_range() -> None:
    result = runner.invoke(cli.app, ["codes", "--range", "2xx"])
    assert result.exit_code == 2


def test_render_log_string() -> None:
    result = runner.invoke(cli.app, ["render", "not_found", "User not found"])
    assert result.exit_code == 0
    assert result.output == "not_found - User not found\n"


def test_render_json_with_request_id() -> None:
    result = runner.invoke(
        cli.app,
        [
            "render",
            "not_found",
            "User not found",
            "--details",
            '{"user_id": 123}',
            "--request-id",
            "req-1",
            "--json",
        ],
    )
    assert result.exit_code == 0
    assert json.loads(result.output) == {
        "code": "not_found",
        "message": "User not found",
        "request_id": "req-1",
        "details": {"user_id": 123},
    }


def test_render_json_without_request_id() -> None:
    result = runner.invoke(cli.app, ["render", "gone", "Deleted", "--json"])
    assert result.exit_code == 0
    assert json.loads(result.output) == {
        "code": "gone",
        "message": "Deleted",
        "details": None,
    }


def test_render_uses_configured_indent(clean_env: Path) -> None:
    (clean_env / ".env").write_text("ERROR_MESSAGE_JSON_INDENT=2\n")
    result = runner.invoke(cli.app, ["render", "gone", "Deleted", "--json"])
    assert result.exit_code == 0
    assert result.output.startswith("{\n  ")


def test_render_invalid_details() -> None:
    result = runner.invoke(cli.app, ["render", "not_found", "x", "--details", "{bad"])
    assert result.exit_code == 2
    assert "Invalid details JSON" in result.output


def test_render_unknown_code() -> None:
    result = runner.invoke(cli.app, ["render", "bogus", "x"])
    assert result.exit_code == 1
