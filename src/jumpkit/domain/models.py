"""Domain models for Jump naming."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class JumpFormInputs(BaseModel):
    """Free-text answers from the Jump studio form."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    goals: str = ""
    challenges: str = ""
    industry: str = ""
    experience_level: str = ""
    current_role: str = ""
    ai_knowledge: str = ""
    time_commitment: str = ""
    budget: str = ""
    urgency: str = ""


class JumpNameResult(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    number: int = Field(ge=1)
    full_title: str

    @model_validator(mode="after")
    def validate_full_title(self) -> "JumpNameResult":
        expected = format_full_title(self.number, self.name)
        if self.full_title != expected:
            raise ValueError(f"full_title must be {expected!r}")
        return self

    @classmethod
    def compose(cls, name: str, number: int) -> "JumpNameResult":
        return cls(name=name, number=number, full_title=format_full_title(number, name))


class JumpRecord(BaseModel):
    id: str
    user_id: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    title: Optional[str] = None

    @field_validator("created_at")
    @classmethod
    def attach_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


def format_full_title(number: int, name: str) -> str:
    return f"Jump #{number}: {name}"
