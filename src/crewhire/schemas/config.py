"""Pydantic configuration schema for CLI YAML input."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..core.hiring import MAX_AVAILABLE_CHARACTERS


class HiringConfig(BaseModel):
    max_available: int = Field(default=MAX_AVAILABLE_CHARACTERS, ge=0)
    seed: int | None = None
    name_pool: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class LoggingConfig(BaseModel):
    level: str = "INFO"
    json_output: bool = True

    model_config = ConfigDict(extra="forbid")


class AppConfig(BaseModel):
    hiring: HiringConfig = Field(default_factory=HiringConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        hiring = self.hiring.model_dump(exclude_defaults=True)
        if hiring:
            settings["hiring"] = hiring
        return settings


def load_config(raw: Any) -> AppConfig:
    if raw is None:
        return AppConfig()
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
