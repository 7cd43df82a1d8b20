from __future__ import annotations

from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class RequestTelemetry(BaseModel):
    kind: Literal["request"] = "request"
    name: str | None = None
    url: str | None = None
    response_code: str | None = None
    duration_ms: float | None = None
    success: bool | None = None
    properties: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")


class DependencyTelemetry(BaseModel):
    kind: Literal["dependency"] = "dependency"
    name: str | None = None
    type: str | None = None
    target: str | None = None
    data: str | None = None
    duration_ms: float | None = None
    success: bool | None = None
    properties: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")


class EventTelemetry(BaseModel):
    kind: Literal["event"] = "event"
    name: str | None = None
    properties: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")


class ExceptionTelemetry(BaseModel):
    kind: Literal["exception"] = "exception"
    message: str | None = None
    exception_type: str | None = None
    properties: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")


TelemetryItem = Union[
    RequestTelemetry,
    DependencyTelemetry,
    EventTelemetry,
    ExceptionTelemetry,
]

_ITEM_KINDS: dict[str, type[BaseModel]] = {
    "request": RequestTelemetry,
    "dependency": DependencyTelemetry,
    "event": EventTelemetry,
    "exception": ExceptionTelemetry,
}


def parse_item(data: Any) -> TelemetryItem:
    if not isinstance(data, dict):
        raise ValueError("Telemetry item must be a JSON object")
    kind = data.get("kind")
    if not isinstance(kind, str):
        raise ValueError("Telemetry item missing kind field")
    model = _ITEM_KINDS.get(kind)
    if model is None:
        raise ValueError(f"Unknown telemetry kind: {kind}")
    return model.model_validate(data)
