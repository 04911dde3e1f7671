"""
Security Sanitizer

Neutralizes MongoDB operator injection in untrusted request data.

An attacker who sends {"$ne": null} where a string was expected can turn
an equality filter into one that matches every document. The sanitizer:
- Strips the operator prefix character from strings
- Rejects objects/arrays supplied where a scalar field was expected
- Drops operator keys and operator-shaped sub-documents from payloads
"""

import re
from typing import Any, Optional

OPERATOR_PREFIX = "$"

DEFAULT_MAX_DEPTH = 32

# Keeps recursive cleaning well inside the interpreter recursion limit
MAX_DEPTH_LIMIT = 256


class SanitizationError(ValueError):
    """Base class for rejected client input."""


class InvalidTypeError(SanitizationError):
    """A scalar field was supplied as an object, array, or other non-scalar."""

    def __init__(self, field_name: str, actual: Any, expected: str = "string"):
        self.field_name = field_name
        self.expected = expected
        self.actual = type(actual).__name__
        super().__init__(f"Invalid {field_name}: expected {expected}, got {self.actual}")


class PayloadTooDeepError(SanitizationError):
    """Payload nesting exceeds the configured depth bound."""

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        super().__init__(f"Payload nesting exceeds maximum depth of {max_depth}")


class Sanitizer:
    """
    Cleans untrusted values before they are embedded in a query or update.

    Holds no mutable state; a single instance can be shared across
    concurrent requests.
    """

    DOT_RUN_PATTERN = re.compile(r"\.{2,}")

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH):
        if not 1 <= max_depth <= MAX_DEPTH_LIMIT:
            raise ValueError(f"max_depth must be between 1 and {MAX_DEPTH_LIMIT}, got {max_depth}")
        self.max_depth = max_depth

    def strip(self, value: Any) -> Any:
        """
        Remove every operator prefix character and collapse dot runs.

        Args:
            value: String to clean. Non-strings are returned unchanged.

        Returns:
            The cleaned string
        """
        if not isinstance(value, str):
            return value
        # Strip first so "a.$.b" cannot leave a ".." behind
        value = value.replace(OPERATOR_PREFIX, "")
        return self.DOT_RUN_PATTERN.sub(".", value)

    def sanitize_string(self, value: Any, field_name: str = "field") -> Any:
        """
        Sanitize a field that must be a scalar.

        None and numbers pass through. Anything else that is not a string
        is rejected rather than coerced.

        Raises:
            InvalidTypeError: If value is an object, array, bool, etc.
        """
        if value is None:
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return value
        if not isinstance(value, str):
            raise InvalidTypeError(field_name, value)
        return self.strip(value)

    def sanitize_object(self, value: Any) -> Any:
        """
        Recursively clean a payload.

        - Operator keys are dropped along with their values
        - Values that are operator-shaped documents are dropped with their key
        - Remaining keys are stripped like strings
        - String elements of lists are stripped; other scalars are kept as-is

        The input is never mutated.

        Raises:
            PayloadTooDeepError: If nesting exceeds max_depth
        """
        return self._sanitize(value, depth=0)

    def is_operator_key(self, key: Any) -> bool:
        return str(key).startswith(OPERATOR_PREFIX)

    def is_operator_document(self, value: Any) -> bool:
        """True if value is a mapping with at least one operator key."""
        return isinstance(value, dict) and any(self.is_operator_key(k) for k in value)

    def _sanitize(self, value: Any, depth: int) -> Any:
        if isinstance(value, (list, tuple)):
            self._check_depth(depth)
            return [self._sanitize_element(item, depth + 1) for item in value]

        if isinstance(value, dict):
            self._check_depth(depth)
            clean = {}
            for key, item in value.items():
                key = str(key)
                if self.is_operator_key(key):
                    continue
                if self.is_operator_document(item):
                    continue
                clean[self.strip(key)] = self._sanitize(item, depth + 1)
            return clean

        return value

    def _sanitize_element(self, item: Any, depth: int) -> Any:
        if isinstance(item, str):
            return self.strip(item)
        return self._sanitize(item, depth)

    def _check_depth(self, depth: int) -> None:
        if depth >= self.max_depth:
            raise PayloadTooDeepError(self.max_depth)


_default = Sanitizer()


def strip_mongo_operators(value: Any) -> Any:
    """Module-level shortcut for Sanitizer.strip()."""
    return _default.strip(value)


def sanitize_string(value: Any, field_name: str = "field") -> Any:
    return _default.sanitize_string(value, field_name)


def sanitize_object(value: Any, max_depth: Optional[int] = None) -> Any:
    """Module-level shortcut for Sanitizer.sanitize_object()."""
    if max_depth is not None:
        return Sanitizer(max_depth=max_depth).sanitize_object(value)
    return _default.sanitize_object(value)
