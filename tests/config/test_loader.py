from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from qsredact.config.loader import load_options
from qsredact.config.models import DEFAULT_REDACTED_VALUE, RedactionConfig


def _write_yaml(path: Path, data: object) -> None:
    path.write_text(yaml.safe_dump(data), encoding="utf-8")


def test_load_options_from_top_level(tmp_path: Path) -> None:
    options_path = tmp_path / "options.yaml"
    _write_yaml(options_path, {"keys": ["s", "secret"], "redacted_value": "HIDDEN"})

    options = load_options(options_path)

    assert options.keys == ("s", "secret")
    assert options.redacted_value == "HIDDEN"


def test_load_options_from_section_with_alias(tmp_path: Path) -> None:
    options_path = tmp_path / "pipeline.yaml"
    _write_yaml(
        options_path,
        {"redact_query_string": {"keys": ["token"], "redactedValue": "***"}},
    )

    options = load_options(options_path)

    assert options.keys == ("token",)
    assert options.redacted_value == "***"


def test_load_options_defaults_for_empty_file(tmp_path: Path) -> None:
    options_path = tmp_path / "empty.yaml"
    options_path.write_text("", encoding="utf-8")

    options = load_options(options_path)

    assert options.keys is None
    assert options.redacted_value == DEFAULT_REDACTED_VALUE


def test_load_options_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_options(tmp_path / "missing.yaml")


def test_load_options_rejects_unknown_fields(tmp_path: Path) -> None:
    options_path = tmp_path / "options.yaml"
    _write_yaml(options_path, {"keys": ["s"], "mask": "x"})

    with pytest.raises(ValueError):
        load_options(options_path)


def test_load_options_rejects_non_mapping(tmp_path: Path) -> None:
    options_path = tmp_path / "options.yaml"
    _write_yaml(options_path, ["s", "secret"])

    with pytest.raises(ValueError):
        load_options(options_path)


def test_load_options_rejects_invalid_yaml(tmp_path: Path) -> None:
    options_path = tmp_path / "options.yaml"
    options_path.write_text("keys: [s, secret\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_options(options_path)


def test_redaction_config_is_immutable() -> None:
    options = RedactionConfig(keys=["s"])

    with pytest.raises(ValueError):
        options.redacted_value = "other"  # type: ignore[misc]


def test_unset_redacted_value_uses_default() -> None:
    assert RedactionConfig(redacted_value=None).redacted_value == DEFAULT_REDACTED_VALUE
    assert RedactionConfig.model_validate({"redactedValue": ""}).redacted_value == DEFAULT_REDACTED_VALUE
