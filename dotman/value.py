"""Typed configuration values backed by a settings mapping."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any, Protocol, TypeVar

T = TypeVar("T", str, int, bool, float)


class ValueError_(ValueError):
    """Raised when a configuration value is missing or invalid."""


class Value(Protocol[T]):
    """A named configuration value."""

    key: str
    required: bool

    @property
    def value(self) -> T: ...

    def set(self, value: T) -> None: ...

    def is_valid(self) -> bool: ...


def is_set(value: Any) -> bool:
    """Whether a value counts as present: only the empty string does not."""
    if isinstance(value, str):
        return value != ""
    return True


def validate_value(value: Value[Any]) -> None:
    """Raise :class:`ValueError_` if a required value is not set."""
    if value.required and not is_set(value.value):
        raise ValueError_("value is required")


def _as_string(raw: Any) -> str:
    if raw is None:
        return ""
    if isinstance(raw, bool):
        return "true" if raw else "false"
    return str(raw)


class StringValue:
    """A string setting with a fallback, read from and written to a store."""

    def __init__(
        self,
        key: str,
        fallback: str,
        required: bool,
        store: MutableMapping[str, Any],
    ) -> None:
        self.key = key
        self.fallback = fallback
        self.required = required
        self.store = store

    @property
    def value(self) -> str:
        """The stored value, or the fallback when it is empty."""
        current = _as_string(self.store.get(self.key))
        return current if current != "" else self.fallback

    def set(self, value: str) -> None:
        """Store a trimmed value; an empty one is refused when required."""
        value = value.strip()
        if value == "" and self.required:
            raise ValueError_("value is required")
        self.store[self.key] = value

    def is_valid(self) -> bool:
        """Whether the value passes validation."""
        try:
            validate_value(self)
        except ValueError_:
            return False
        return True

    def __str__(self) -> str:
        return self.value