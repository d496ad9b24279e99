"""
Value parsers used by field editors.

Editors enforce each field's domain; the record type does not. Parsers take
the raw text an editor produced and return a typed value or raise
``ValueError``.
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional

from chatprofile.config.models.constants import MODEL_NONE_LABEL, SAMPLING_STEP

ValueParser = Callable[[str], object]


def parse_text(text: str) -> str:
    return "" if text is None else str(text)


def parse_optional_text(text: str) -> Optional[str]:
    """Return None for blank input so the field falls back to its default."""
    value = "" if text is None else str(text)
    return value if value.strip() else None


def parse_seed(text: str) -> Optional[int]:
    """Parse a non-negative integer seed. Blank input clears the seed."""
    raw = (text or "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"Seed must be an integer, got '{raw}'") from None
    if value < 0:
        raise ValueError(f"Seed must be non-negative, got {value}")
    return value


def bounded_float(
    minimum: float,
    maximum: float,
    *,
    step: float = SAMPLING_STEP,
    label: str = "Value",
) -> Callable[[str], Optional[float]]:
    """Build a slider-style parser that accepts numbers in ``[minimum, maximum]``."""
    decimals = max(0, len(f"{step:.10f}".rstrip("0").split(".")[1]))

    def _parse(text: str) -> Optional[float]:
        raw = (text or "").strip()
        if not raw:
            return None
        try:
            value = float(raw)
        except ValueError:
            raise ValueError(f"{label} must be a number, got '{raw}'") from None
        if value != value or value < minimum or value > maximum:
            raise ValueError(f"{label} must be between {minimum} and {maximum}, got {raw}")
        return round(round(value / step) * step, decimals)

    return _parse


def model_choice(
    choices: Iterable[str],
    *,
    allow_none: bool = True,
    none_label: str = MODEL_NONE_LABEL,
) -> Callable[[str], Optional[str]]:
    """Build a picker parser restricted to ``choices``."""
    allowed = [str(choice) for choice in choices]

    def _parse(text: str) -> Optional[str]:
        raw = (text or "").strip()
        if allow_none and (not raw or raw.lower() == none_label.lower()):
            return None
        if raw not in allowed:
            raise ValueError(f"Unknown model '{raw}'. Choose one of: {', '.join(allowed)}")
        return raw

    return _parse
