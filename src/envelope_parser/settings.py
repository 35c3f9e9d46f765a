from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

NumberMode = Literal["decimal", "float", "string"]

_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"})


class ParserSettings(BaseSettings):
    model_config = SettingsConfigDict(case_sensitive=False)

    # How DynamoDB "N" attributes are decoded; "float" loses precision past 15-17 digits.
    number_mode: NumberMode = Field(default="decimal", alias="PARSER_NUMBER_MODE")
    log_events: bool = Field(default=False, alias="PARSER_LOG_EVENTS")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(sorted(_LOG_LEVELS))}")
        return normalized
