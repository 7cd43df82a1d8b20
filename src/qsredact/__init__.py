from .config.models import DEFAULT_REDACTED_VALUE, RedactionConfig
from .redaction.query import is_relative, redact_url

__version__ = "0.1.0"

__all__ = ["DEFAULT_REDACTED_VALUE", "RedactionConfig", "is_relative", "redact_url"]
