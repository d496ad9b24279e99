"""
Route helpers for the profile editor host.
"""

from __future__ import annotations

from urllib.parse import parse_qs, urlsplit


def read_only_from_query(query: str) -> bool:
    """
    Return True only when the ``readOnly`` parameter is the literal ``"true"``.

    Accepts a bare query string (``readOnly=true``), one with a leading ``?``,
    or a full route such as ``/chatsettings?readOnly=true``.
    """
    text = (query or "").strip()
    if "?" in text or "/" in text:
        text = urlsplit(text).query
    values = parse_qs(text, keep_blank_values=True).get("readOnly")
    return bool(values) and values[0] == "true"
