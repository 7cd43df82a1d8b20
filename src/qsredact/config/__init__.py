from .loader import load_options
from .models import DEFAULT_REDACTED_VALUE, RedactionConfig, RedactQueryStringOptions

__all__ = [
    "DEFAULT_REDACTED_VALUE",
    "RedactQueryStringOptions",
    "RedactionConfig",
    "load_options",
]
