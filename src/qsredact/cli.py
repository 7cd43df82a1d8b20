from __future__ import annotations

import logging
from pathlib import Path
import sys
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from qsredact.config.loader import load_options
from qsredact.config.models import RedactionConfig
from qsredact.redaction.query import redact_url
from qsredact.telemetry.jsonl import JsonlParseError, iter_items
from qsredact.telemetry.processor import JsonlWriterProcessor, RedactQueryStringProcessor

app = typer.Typer(add_completion=False, no_args_is_help=True)
console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)

logger = logging.getLogger(__name__)


def _resolve_options(
    config: str | None,
    keys: list[str] | None,
    value: str | None,
) -> RedactionConfig:
    base = load_options(Path(config)) if config else RedactionConfig()
    data = base.model_dump()
    if keys:
        data["keys"] = tuple(keys)
    if value is not None:
        data["redacted_value"] = value
    return RedactionConfig.model_validate(data)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """Redact query-string values from URLs and telemetry streams."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@app.command()
def url(
    target: str = typer.Argument(..., help="URL to redact"),
    key: Optional[List[str]] = typer.Option(
        None,
        "--key",
        "-k",
        help="Query parameter name to redact (repeatable, case-insensitive)",
    ),
    value: Optional[str] = typer.Option(None, "--value", help="Replacement value"),
    config: Optional[str] = typer.Option(None, "--config", help="YAML options file"),
) -> None:
    """Print a URL with the configured query-string values redacted."""
    try:
        options = _resolve_options(config, key, value)
    except Exception as exc:
        err_console.print(f"[red]Failed to load options:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    console.print(redact_url(target, options), markup=False, highlight=False)


@app.command()
def process(
    input_path: str = typer.Argument(..., help="JSONL file of telemetry items"),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write redacted items here instead of stdout",
    ),
    key: Optional[List[str]] = typer.Option(
        None,
        "--key",
        "-k",
        help="Query parameter name to redact (repeatable, case-insensitive)",
    ),
    value: Optional[str] = typer.Option(None, "--value", help="Replacement value"),
    config: Optional[str] = typer.Option(None, "--config", help="YAML options file"),
) -> None:
    """Run telemetry items through the query-string redaction processor."""
    try:
        options = _resolve_options(config, key, value)
    except Exception as exc:
        err_console.print(f"[red]Failed to load options:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    source = Path(input_path)
    if not source.is_file():
        err_console.print(f"[red]Input file not found:[/red] {source}")
        raise typer.Exit(code=1)

    output_path = Path(output) if output else None
    if output_path is not None:
        output_path.parent.mkdir(parents=True, exist_ok=True)

    with source.open("r", encoding="utf-8") as stream:
        handle = output_path.open("w", encoding="utf-8") if output_path else sys.stdout
        try:
            sink = JsonlWriterProcessor(handle)
            chain = RedactQueryStringProcessor(sink, options)
            for item in iter_items(stream):
                chain.process(item)
        except (JsonlParseError, ValueError) as exc:
            err_console.print(f"[red]Failed to process telemetry:[/red] {escape(str(exc))}")
            raise typer.Exit(code=1)
        finally:
            if output_path is not None:
                handle.close()

    logger.debug("Processed %d telemetry items from %s", sink.count, source)
    if output_path is not None:
        console.print(f"Wrote {sink.count} items to: {output_path}")
