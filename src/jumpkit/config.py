"""Configuration loading for JumpKit."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from jumpkit.yaml_utils import load_yaml


class SupabaseConfig(BaseModel):
    url: str
    api_key: str
    table: str = "user_jumps"
    timeout: float = 10.0


class StoreConfig(BaseModel):
    type: Literal["memory", "jsonl", "supabase"] = "memory"
    path: Optional[str] = None
    supabase: Optional[SupabaseConfig] = None

    @model_validator(mode="after")
    def validate_backend(self) -> "StoreConfig":
        if self.type == "jsonl" and not self.path:
            raise ValueError("store.path is required for the jsonl store")
        if self.type == "supabase" and self.supabase is None:
            raise ValueError("store.supabase is required for the supabase store")
        return self


class FormatterConfig(BaseModel):
    min_bullet_run: int = Field(default=5, ge=2)
    keep_bullets: int = Field(default=3, ge=1)

    @model_validator(mode="after")
    def validate_run(self) -> "FormatterConfig":
        if self.keep_bullets >= self.min_bullet_run:
            raise ValueError("formatter.keep_bullets must be smaller than formatter.min_bullet_run")
        return self


class NamingConfig(BaseModel):
    rules_path: Optional[str] = None
    max_length: int = Field(default=50, ge=10)


class LoggingConfig(BaseModel):
    level: str = "INFO"

    @field_validator("level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level


class JumpkitConfig(BaseModel):
    version: int = 1
    store: StoreConfig = StoreConfig()
    formatter: FormatterConfig = FormatterConfig()
    naming: NamingConfig = NamingConfig()
    logging: LoggingConfig = LoggingConfig()

    @field_validator("version")
    @classmethod
    def validate_version(cls, value: int) -> int:
        if value != 1:
            raise ValueError("Only version 1 config is supported")
        return value


def load_config(path: str) -> JumpkitConfig:
    payload = load_yaml(path)
    return JumpkitConfig(**payload)
