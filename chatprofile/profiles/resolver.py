"""
Default/override resolution for optional profile fields.

``None`` is the only "use default" marker: a field holding a value equal to
its default is still an explicit override.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


def is_default(value: Optional[T]) -> bool:
    return value is None


def effective(value: Optional[T], default: T) -> T:
    """Return the value the system actually uses for a field."""
    return default if is_default(value) else value


def toggle_to_default() -> None:
    """Clear an explicit override."""
    return None


def toggle_to_custom(seed: T) -> T:
    """Start an explicit override from ``seed``."""
    return seed


@dataclass(frozen=True)
class FieldBinding(Generic[T]):
    """Transient pairing of a field value with its default, built per render."""

    value: Optional[T]
    default: Optional[T]
    default_label: str

    @property
    def is_default(self) -> bool:
        return is_default(self.value)

    @property
    def has_default(self) -> bool:
        return self.default is not None

    @property
    def effective(self) -> Optional[T]:
        return effective(self.value, self.default)
