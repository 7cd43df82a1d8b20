from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .models import RedactionConfig

OPTIONS_SECTION = "redact_query_string"


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}") from exc
    except OSError as exc:
        raise FileNotFoundError(f"Unable to read {path}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a YAML mapping in {path}")
    return data


def load_options(path: Path) -> RedactionConfig:
    """Load redaction options from a YAML file.

    The settings may sit at the top level of the document or under a
    ``redact_query_string`` section, so the file can be shared with other
    pipeline settings.
    """
    if not path.is_file():
        raise FileNotFoundError(f"Options file not found: {path}")
    data = _load_yaml(path)
    section = data.get(OPTIONS_SECTION, data)
    if section is None:
        section = {}
    if not isinstance(section, dict):
        raise ValueError(f"Expected {OPTIONS_SECTION!r} to be a mapping in {path}")
    try:
        return RedactionConfig.model_validate(section)
    except ValidationError as exc:
        raise ValueError(f"Invalid redaction options in {path}: {exc}") from exc
