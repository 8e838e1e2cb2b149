from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = Field(default="WARNING")
    pretty_width: int = Field(default=80, ge=20)
    json_indent: int | None = Field(default=None)

    @field_validator("json_indent", mode="before")
    @classmethod
    def _parse_json_indent(cls, v: int | str | None) -> int | str | None:
        if v == "":
            return None
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v

    model_config = SettingsConfigDict(
        env_prefix="ERROR_MESSAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
