from __future__ import annotations

import logging
from typing import Protocol, TextIO

from qsredact.config.models import RedactionConfig
from qsredact.redaction.query import redact_url

from .jsonl import write_item_line
from .models import RequestTelemetry, TelemetryItem

logger = logging.getLogger(__name__)


class TelemetryProcessor(Protocol):
    def process(self, item: TelemetryItem) -> None:
        ...


class RedactQueryStringProcessor:
    """Redact query-string values on request URLs, then hand the item on."""

    def __init__(
        self,
        next_processor: TelemetryProcessor,
        options: RedactionConfig | None = None,
    ) -> None:
        if next_processor is None:
            raise ValueError("next_processor is required")
        self.next_processor = next_processor
        self.options = options if options is not None else RedactionConfig()

    def redact_item(self, item: TelemetryItem) -> None:
        if not isinstance(item, RequestTelemetry):
            return
        if item.url is None:
            return
        redacted = redact_url(item.url, self.options)
        if redacted != item.url:
            logger.debug("Redacted query string on request %r", item.name)
        item.url = redacted

    def process(self, item: TelemetryItem) -> None:
        self.redact_item(item)
        self.next_processor.process(item)


class CollectingProcessor:
    def __init__(self) -> None:
        self.items: list[TelemetryItem] = []

    def process(self, item: TelemetryItem) -> None:
        self.items.append(item)


class JsonlWriterProcessor:
    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self.count = 0

    def process(self, item: TelemetryItem) -> None:
        write_item_line(self.stream, item)
        self.count += 1
