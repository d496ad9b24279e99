"""
Errors raised by the profile editing core.
"""

from __future__ import annotations

from typing import Optional


class ProfileError(Exception):
    """Base class for profile editing errors."""


class ProfileValidationError(ProfileError):
    """A draft failed validation at submit time."""

    def __init__(self, message: str, *, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class MalformedImageError(ProfileError):
    """An icon payload was rejected before reaching the draft."""

    def __init__(self, message: str, *, image_type: Optional[str] = None) -> None:
        super().__init__(message)
        self.image_type = image_type
