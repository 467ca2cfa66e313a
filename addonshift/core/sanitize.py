"""Text sanitizers applied to values before they enter cart item data."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import PurePosixPath
import re
from typing import Any

from slugify import slugify

_TAG_RE = re.compile(r"<[^>]*>?")
_SCRIPT_STYLE_RE = re.compile(r"<(script|style)[^>]*?>.*?</\1>", re.IGNORECASE | re.DOTALL)
_WHITESPACE_RE = re.compile(r"[\r\n\t ]+")
_OCTET_RE = re.compile(r"%[a-fA-F0-9]{2}")
_TITLE_DISALLOWED_RE = r"[^-a-z0-9_]+"
_FILE_NAME_DISALLOWED_RE = r"[^-A-Za-z0-9_]+"


def sanitize_text(value: Any) -> str:
    if value is None:
        return ""
    text = str(value)
    if "<" in text:
        text = _SCRIPT_STYLE_RE.sub("", text)
        text = _TAG_RE.sub("", text)
    text = _WHITESPACE_RE.sub(" ", text).strip()

    # Removing one octet can expose another ("%%4141" -> "%41").
    while _OCTET_RE.search(text):
        text = _OCTET_RE.sub("", text)
    return _WHITESPACE_RE.sub(" ", text).strip()


def clean_value(value: Any) -> Any:
    """Sanitize scalars, recursing into lists and mappings."""
    if isinstance(value, Mapping):
        return {key: clean_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [clean_value(item) for item in value]
    if value is None or isinstance(value, bool):
        return value
    return sanitize_text(value)


def sanitize_title(value: Any) -> str:
    """Slug form the storefront uses when posting a label as a request value."""
    return slugify(str(value or ""), regex_pattern=_TITLE_DISALLOWED_RE)


def sanitize_file_name(name: str) -> str:
    base = PurePosixPath(str(name or "").replace("\\", "/")).name
    path = PurePosixPath(base)
    suffix = slugify(path.suffix.lstrip("."), lowercase=False, regex_pattern=_FILE_NAME_DISALLOWED_RE)
    stem = slugify(path.stem if suffix else base, lowercase=False, regex_pattern=_FILE_NAME_DISALLOWED_RE)
    stem = stem or "unnamed-file"
    if suffix:
        return f"{stem}.{suffix}"
    return stem


__all__ = ["clean_value", "sanitize_file_name", "sanitize_text", "sanitize_title"]
