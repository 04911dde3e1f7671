"""
Assistant Accounts

Admin service for managing assistant user accounts in MongoDB, with
input sanitization against NoSQL operator injection.
"""

from assistant_accounts.security.sanitizer import (
    InvalidTypeError,
    PayloadTooDeepError,
    Sanitizer,
    sanitize_object,
    sanitize_string,
    strip_mongo_operators,
)

__version__ = "0.1.0"
__all__ = [
    "InvalidTypeError",
    "PayloadTooDeepError",
    "Sanitizer",
    "sanitize_object",
    "sanitize_string",
    "strip_mongo_operators",
]
