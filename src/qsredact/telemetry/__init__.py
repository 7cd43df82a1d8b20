from .jsonl import JsonlParseError, iter_items, write_item_line
from .models import (
    DependencyTelemetry,
    EventTelemetry,
    ExceptionTelemetry,
    RequestTelemetry,
    TelemetryItem,
    parse_item,
)
from .processor import (
    CollectingProcessor,
    JsonlWriterProcessor,
    RedactQueryStringProcessor,
    TelemetryProcessor,
)

__all__ = [
    "CollectingProcessor",
    "DependencyTelemetry",
    "EventTelemetry",
    "ExceptionTelemetry",
    "JsonlParseError",
    "JsonlWriterProcessor",
    "RedactQueryStringProcessor",
    "RequestTelemetry",
    "TelemetryItem",
    "TelemetryProcessor",
    "iter_items",
    "parse_item",
    "write_item_line",
]
