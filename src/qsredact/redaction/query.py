from __future__ import annotations

from typing import Iterable
from urllib.parse import SplitResult, quote_plus, unquote_plus, urlsplit, urlunsplit

from qsredact.config.models import DEFAULT_REDACTED_VALUE, RedactionConfig


def _split(url: str) -> SplitResult | None:
    try:
        return urlsplit(url)
    except ValueError:
        # e.g. an unbalanced IPv6 bracket; such URLs pass through untouched
        return None


def is_relative(url: str) -> bool:
    """Return True when ``url`` has no scheme or no network location."""
    parts = _split(url)
    return parts is None or not (parts.scheme and parts.netloc)


def _key_positions(keys: Iterable[str]) -> dict[str, int]:
    positions: dict[str, int] = {}
    for key in keys:
        folded = key.lower()
        if folded and folded not in positions:
            positions[folded] = len(positions)
    return positions


def _param_name(segment: str) -> str:
    name, _, _ = segment.partition("=")
    return name


def redact_url(url: str, config: RedactionConfig | None = None) -> str:
    """Replace the values of configured query parameters in an absolute URL.

    Matching is case-insensitive. Redacted parameters are moved to the front of
    the query string, grouped per key in the order the keys are configured, and
    all copies of one key share the spelling of its first occurrence in the
    URL. Every other parameter follows in its original order, byte for byte.

    The URL is returned unchanged when no keys are configured, when it is
    relative, or when none of its parameters match.
    """
    if config is None:
        config = RedactionConfig()
    if not config.keys:
        return url

    parts = _split(url)
    if parts is None or not (parts.scheme and parts.netloc) or not parts.query:
        return url

    positions = _key_positions(config.keys)
    matched: list[list[str]] = [[] for _ in positions]
    spellings: dict[int, str] = {}
    unmatched: list[str] = []
    for segment in parts.query.split("&"):
        name = _param_name(segment)
        index = positions.get(unquote_plus(name).lower())
        if index is None:
            unmatched.append(segment)
            continue
        matched[index].append(spellings.setdefault(index, name))

    if not spellings:
        return url

    value = quote_plus(config.redacted_value or DEFAULT_REDACTED_VALUE)
    segments = [f"{name}={value}" for group in matched for name in group]
    segments.extend(unmatched)
    return urlunsplit(
        (parts.scheme, parts.netloc, parts.path, "&".join(segments), parts.fragment)
    )
