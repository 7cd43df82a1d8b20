from .query import is_relative, redact_url

__all__ = ["is_relative", "redact_url"]
