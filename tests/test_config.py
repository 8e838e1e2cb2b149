from pathlib import Path

import pytest
from pydantic import ValidationError

from error_message.config import Settings


def test_settings_defaults(clean_env: Path) -> None:
    settings = Settings()
    assert settings.log_level == "WARNING"
    assert settings.pretty_width == 80
    assert settings.json_indent is None


def test_settings_reads_env_file(clean_env: Path) -> None:
    (clean_env / ".env").write_text(
        "\n".join(
            [
                "ERROR_MESSAGE_LOG_LEVEL=debug",
                "ERROR_MESSAGE_PRETTY_WIDTH=120",
                "UNRELATED=1",
            ]
        )
    )
    settings = Settings()
    assert settings.log_level == "DEBUG"
    assert settings.pretty_width == 120


def test_settings_env_overrides(clean_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ERROR_MESSAGE_JSON_INDENT", "2")
    monkeypatch.setenv("ERROR_MESSAGE_LOG_LEVEL", "info")
    settings = Settings()
    assert settings.json_indent == 2
    assert settings.log_level == "INFO"


def test_settings_empty_json_indent(clean_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ERROR_MESSAGE_JSON_INDENT", "")
    assert Settings().json_indent is None


def test_settings_rejects_narrow_width(clean_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ERROR_MESSAGE_PRETTY_WIDTH", "5")
    with pytest.raises(ValidationError):
        Settings()
