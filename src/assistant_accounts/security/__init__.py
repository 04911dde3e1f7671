"""Security package - Input sanitization, password hashing and authentication."""

from assistant_accounts.security.sanitizer import (
    InvalidTypeError,
    PayloadTooDeepError,
    SanitizationError,
    Sanitizer,
    sanitize_object,
    sanitize_string,
    strip_mongo_operators,
)
from assistant_accounts.security.untrusted import UntrustedInput

__all__ = [
    "InvalidTypeError",
    "PayloadTooDeepError",
    "SanitizationError",
    "Sanitizer",
    "UntrustedInput",
    "sanitize_object",
    "sanitize_string",
    "strip_mongo_operators",
]
