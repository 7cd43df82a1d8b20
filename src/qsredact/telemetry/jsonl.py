from __future__ import annotations

from dataclasses import dataclass
import json
from typing import Generator, TextIO

from .models import TelemetryItem, parse_item


@dataclass(frozen=True)
class JsonlParseError(Exception):
    message: str
    line: str
    line_number: int

    def __str__(self) -> str:
        return f"{self.message} (line {self.line_number}): {self.line}"


def iter_items(stream: TextIO) -> Generator[TelemetryItem, None, None]:
    for line_number, line in enumerate(stream, start=1):
        stripped = line.strip()
        if not stripped:
            continue
        try:
            raw = json.loads(stripped)
        except json.JSONDecodeError as exc:
            raise JsonlParseError(
                message="Invalid JSON in telemetry stream",
                line=stripped[:200],
                line_number=line_number,
            ) from exc
        try:
            item = parse_item(raw)
        except ValueError as exc:
            raise JsonlParseError(
                message=str(exc).splitlines()[0],
                line=stripped[:200],
                line_number=line_number,
            ) from exc
        yield item


def write_item_line(stream: TextIO, item: TelemetryItem | dict[str, object]) -> None:
    if hasattr(item, "model_dump"):
        data = item.model_dump(exclude_none=True)
    else:
        data = item
    stream.write(json.dumps(data, separators=(",", ":"), ensure_ascii=False))
    stream.write("\n")
