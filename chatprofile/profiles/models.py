"""
Chat profile settings record.

A ``SettingsRecord`` is the data contract edited by the profile form. Optional
scalar fields use ``None`` to mean "inherit the system default".
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, fields
from typing import Any, Literal, Optional

from chatprofile.config.models.constants import DEFAULT_AUTHOR, DEFAULT_INSTRUCTIONS

from .errors import ProfileValidationError

Author = Literal["user", "system"]
ImageType = Literal["raster", "vector"]

AUTHORS: frozenset[str] = frozenset({"user", "system"})
IMAGE_TYPES: frozenset[str] = frozenset({"raster", "vector"})


@dataclass(frozen=True)
class ImageSource:
    """Icon payload: base64 text for raster images, SVG markup for vector images."""

    data: Optional[str] = None
    """Payload, or None when no custom image is set."""

    type: ImageType = "raster"
    """How renderers interpret ``data``."""

    @property
    def is_empty(self) -> bool:
        return self.data is None


EMPTY_IMAGE = ImageSource(data=None, type="raster")


@dataclass
class SettingsRecord:
    """
    Editable chat profile.
    """

    id: Any = None
    """Opaque identifier, stable per profile. None for synthesized records."""

    author: Author = DEFAULT_AUTHOR
    """Origin of the profile."""

    icon: Optional[ImageSource] = None
    """Profile icon, or None for the placeholder icon."""

    name: str = ""
    """Display name. Required when the form is editable."""

    description: Optional[str] = ""
    """Free-form description."""

    instructions: Optional[str] = DEFAULT_INSTRUCTIONS
    """System instructions. None falls back to DEFAULT_INSTRUCTIONS."""

    model: Optional[str] = None
    """Model name. None uses the configured default model."""

    seed: Optional[int] = None
    """Sampling seed. None leaves sampling unseeded."""

    temperature: Optional[float] = None
    """Sampling temperature. None uses the default temperature."""

    top_p: Optional[float] = None
    """Nucleus sampling threshold. None uses the default top_p."""

    def validate(self, *, read_only: bool = False) -> None:
        """Validate the record for submission."""
        if self.author not in AUTHORS:
            raise ProfileValidationError(
                f"author must be one of {sorted(AUTHORS)}, got '{self.author}'",
                field="author",
            )
        if self.icon is not None and self.icon.type not in IMAGE_TYPES:
            raise ProfileValidationError(
                f"icon type must be one of {sorted(IMAGE_TYPES)}, got '{self.icon.type}'",
                field="icon",
            )
        if read_only:
            return
        if not (self.name or "").strip():
            raise ProfileValidationError("Name is required.", field="name")


RECORD_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(SettingsRecord))
EDITABLE_FIELDS: frozenset[str] = frozenset(RECORD_FIELDS) - {"id", "author"}


def build_placeholder_record() -> SettingsRecord:
    """Build the all-defaults record shown when no profile is supplied."""
    return SettingsRecord(
        id=None,
        author=DEFAULT_AUTHOR,
        icon=None,
        name="",
        description="",
        instructions=DEFAULT_INSTRUCTIONS,
        model=None,
        seed=None,
        temperature=None,
        top_p=None,
    )


def clone_record(record: SettingsRecord) -> SettingsRecord:
    """Return an independent copy of a record."""
    return deepcopy(record)


def same_subject(left: Optional[SettingsRecord], right: Optional[SettingsRecord]) -> bool:
    """
    Return True when two records represent the same profile.

    Records with ids compare by id; otherwise object identity decides.
    """
    if left is None or right is None:
        return left is right
    if left.id is not None and right.id is not None:
        return left.id == right.id
    return left is right
