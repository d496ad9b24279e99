"""
Icon field adapter.

Specializes the editable field for ``ImageSource`` values: read-only mode shows
the image or a placeholder, editable mode supports replace and remove. Vector
payloads are checked structurally before they reach the draft.
"""

from __future__ import annotations

import base64
import binascii
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from chatprofile.config.models import IconConfig
from chatprofile.logging import get_logger

from .errors import MalformedImageError
from .models import EMPTY_IMAGE, IMAGE_TYPES, ImageSource, ImageType

logger = get_logger(__name__)

PLACEHOLDER_GLYPH = "◯"
VECTOR_SUFFIXES = {".svg"}
RASTER_SUFFIXES = {".png", ".jpg", ".jpeg", ".gif", ".webp"}

_DECLARATION_RE = re.compile(r"<!\s*(DOCTYPE|ENTITY)", re.IGNORECASE)
_RASTER_SIGNATURES: tuple[tuple[bytes, str], ...] = (
    (b"\x89PNG\r\n\x1a\n", "png"),
    (b"\xff\xd8\xff", "jpeg"),
    (b"GIF87a", "gif"),
    (b"GIF89a", "gif"),
    (b"RIFF", "webp"),
)


@dataclass(frozen=True)
class ImageView:
    """Rendering of the icon field."""

    placeholder: bool
    type: ImageType
    data: Optional[str] = None
    summary: str = ""


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1] if "}" in tag else tag


def validate_vector(markup: str, *, max_bytes: int) -> None:
    """
    Check that ``markup`` is a well-formed standalone SVG document.

    Raises:
        MalformedImageError: If the markup is oversized, malformed, not an
            ``<svg>`` root, declares a DOCTYPE/entities, or embeds scripts.
    """
    if not isinstance(markup, str) or not markup.strip():
        raise MalformedImageError("Vector icon is empty.", image_type="vector")
    size = len(markup.encode("utf-8"))
    if size > max_bytes:
        raise MalformedImageError(
            f"Vector icon is {size} bytes; the limit is {max_bytes}.",
            image_type="vector",
        )
    if _DECLARATION_RE.search(markup):
        raise MalformedImageError("Vector icon must not declare a DOCTYPE or entities.", image_type="vector")
    try:
        root = ET.fromstring(markup)
    except ET.ParseError as exc:
        raise MalformedImageError(f"Vector icon is not well-formed markup: {exc}", image_type="vector") from exc
    if _local_name(root.tag) != "svg":
        raise MalformedImageError(
            f"Vector icon root element must be <svg>, got <{_local_name(root.tag)}>.",
            image_type="vector",
        )
    for element in root.iter():
        if _local_name(element.tag).lower() == "script":
            raise MalformedImageError("Vector icon must not contain scripts.", image_type="vector")


def validate_raster(data: str) -> str:
    """Check that ``data`` is base64 for a known raster format. Returns the format name."""
    if not isinstance(data, str) or not data.strip():
        raise MalformedImageError("Raster icon is empty.", image_type="raster")
    payload = data
    if data.startswith("data:"):
        _, separator, payload = data.partition(",")
        if not separator:
            raise MalformedImageError("Raster data URL has no payload.", image_type="raster")
    try:
        raw = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise MalformedImageError("Raster icon is not valid base64 data.", image_type="raster") from exc
    for signature, name in _RASTER_SIGNATURES:
        if raw.startswith(signature):
            if name == "webp" and raw[8:12] != b"WEBP":
                continue
            return name
    raise MalformedImageError("Raster icon is not a PNG, JPEG, GIF, or WebP image.", image_type="raster")


class ImageSourceAdapter:
    """Editable field controller for the profile icon."""

    def __init__(
        self,
        image: Optional[ImageSource],
        *,
        on_image_change: Optional[Callable[[ImageSource], None]] = None,
        read_only: bool = False,
        config: Optional[IconConfig] = None,
    ) -> None:
        self._image = image or EMPTY_IMAGE
        self._on_image_change = on_image_change
        self.read_only = read_only
        self._config = config or IconConfig()

    @property
    def image(self) -> ImageSource:
        return self._image

    def render(self) -> ImageView:
        """Render from the current value; nothing is cached between calls."""
        image = self._image
        if image.data is None:
            return ImageView(placeholder=True, type=image.type, summary=f"{PLACEHOLDER_GLYPH} default icon")
        size = len(image.data.encode("utf-8"))
        return ImageView(
            placeholder=False,
            type=image.type,
            data=image.data,
            summary=f"{image.type} image ({size} bytes)",
        )

    def replace(self, data: str, image_type: ImageType) -> bool:
        """Validate and propagate a new icon payload."""
        if self.read_only:
            return False
        if image_type not in IMAGE_TYPES:
            raise MalformedImageError(f"Unsupported icon type '{image_type}'.", image_type=str(image_type))
        if image_type == "vector":
            validate_vector(data, max_bytes=self._config.max_vector_bytes)
        else:
            validate_raster(data)
        return self._emit(ImageSource(data=data, type=image_type))

    def remove(self) -> bool:
        """Clear the custom icon so the placeholder is shown."""
        if self.read_only or self._image.data is None:
            return False
        image_type: ImageType = "raster" if self._config.reset_type_on_remove else self._image.type
        return self._emit(ImageSource(data=None, type=image_type))

    def load_file(self, path: Path | str) -> bool:
        """Replace the icon with the contents of an image file."""
        if self.read_only:
            return False
        path = Path(path).expanduser()
        suffix = path.suffix.lower()
        if suffix in VECTOR_SUFFIXES:
            try:
                markup = path.read_text(encoding="utf-8")
            except UnicodeDecodeError as exc:
                raise MalformedImageError(f"Vector icon is not UTF-8 text: {exc}", image_type="vector") from exc
            return self.replace(markup, "vector")
        if suffix in RASTER_SUFFIXES:
            encoded = base64.b64encode(path.read_bytes()).decode("ascii")
            return self.replace(encoded, "raster")
        raise MalformedImageError(
            f"Unsupported icon file type '{suffix or path.name}'. "
            f"Use one of: {', '.join(sorted(VECTOR_SUFFIXES | RASTER_SUFFIXES))}"
        )

    def _emit(self, image: ImageSource) -> bool:
        if self._on_image_change is None:
            return False
        self._on_image_change(image)
        self._image = image
        logger.debug("Icon changed to %s (empty=%s)", image.type, image.is_empty)
        return True
