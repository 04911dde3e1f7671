"""
Untrusted Input

Wrapper for request data that only hands out sanitized values.
"""

from typing import Any, Optional

from assistant_accounts.security.sanitizer import InvalidTypeError, Sanitizer


class UntrustedInput:
    """
    Raw client payload that can only be read through the sanitizer.

    Route handlers wrap the parsed body or path parameters in this class
    and read fields via field(), secret(), or document().
    """

    __slots__ = ("_raw", "_sanitizer")

    def __init__(self, raw: Any, sanitizer: Optional[Sanitizer] = None):
        self._raw = raw
        self._sanitizer = sanitizer or Sanitizer()

    def __repr__(self) -> str:
        return f"UntrustedInput(<{type(self._raw).__name__}>)"

    def _get(self, name: str) -> Any:
        if isinstance(self._raw, dict):
            return self._raw.get(name)
        return None

    def has(self, name: str) -> bool:
        return isinstance(self._raw, dict) and self._raw.get(name) is not None

    def field(self, name: str) -> Any:
        """Return one scalar field, type-checked and stripped."""
        return self._sanitizer.sanitize_string(self._get(name), name)

    def secret(self, name: str) -> Optional[str]:
        """
        Return a field that is never embedded in a query (e.g. a password).

        The type is enforced but content is left intact, since the value
        is hashed before storage.
        """
        value = self._get(name)
        if value is not None and not isinstance(value, str):
            raise InvalidTypeError(name, value)
        return value

    def value(self, field_name: str = "value") -> Any:
        """Treat the whole wrapped value as a single scalar field."""
        return self._sanitizer.sanitize_string(self._raw, field_name)

    def document(self) -> Any:
        """Return the whole payload, structurally sanitized."""
        return self._sanitizer.sanitize_object(self._raw)
