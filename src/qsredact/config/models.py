from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_REDACTED_VALUE = "REDACTED"


class RedactionConfig(BaseModel):
    keys: tuple[str, ...] | None = None
    redacted_value: str | None = Field(default=DEFAULT_REDACTED_VALUE, alias="redactedValue")

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    @field_validator("redacted_value", mode="after")
    @classmethod
    def _default_when_unset(cls, value: str | None) -> str:
        return value or DEFAULT_REDACTED_VALUE


# The processor options carry exactly the redaction settings.
RedactQueryStringOptions = RedactionConfig
