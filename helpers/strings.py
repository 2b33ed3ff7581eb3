"""
String helpers used by the web layer: trimming, HTML stripping and
length constraints.
"""

import re
from typing import Optional

from config import config

_HTML_TAG_RE = re.compile(r"<[^>]*>")
_XML_INVALID_RE = re.compile("[\x00-\x08\x0B\x0C\x0E-\x1F\x26]")


def to_trim(value: Optional[str]) -> str:
    """Return the value without surrounding whitespace; None becomes ''."""
    if value is None:
        return ""
    return value.strip()


def is_null_or_empty(value: Optional[str]) -> bool:
    return not value


def is_null_or_whitespace(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def empty_to_null(value: Optional[str]) -> Optional[str]:
    """Return None for None, empty or whitespace-only text, else the value."""
    return None if is_null_or_whitespace(value) else value


def strip_html(content: Optional[str]) -> str:
    """
    Remove HTML tags and the spacing left behind by them.

    Line breaks (CRLF), ``&nbsp;`` entities, full-width spaces and ordinary
    spaces are all removed, so the result is suitable for previews and
    search snippets rather than for display.
    """
    if not content:
        return ""

    content = _HTML_TAG_RE.sub("", content)
    for token in ("\r\n", "&nbsp;", "　", " "):
        content = content.replace(token, "")
    return content.strip()


def remove_xml_invalid_chars(text: str) -> str:
    """Drop control characters (and '&') that cannot be written to XML."""
    return _XML_INVALID_RE.sub("", text)


def replace_last(value: str, new_string: str) -> str:
    """Replace the last character of value with new_string."""
    if not value:
        raise ValueError("Cannot replace the last character of an empty string")
    return value[:-1] + new_string


def constrain_length(
    original: Optional[str],
    maximum_length: int,
    replacement: Optional[str] = None,
    include_replacement: bool = True,
) -> Optional[str]:
    """
    Cut text that exceeds a maximum length and mark the cut.

    Args:
        original: Text to constrain
        maximum_length: Maximum length; values <= 0 disable the check
        replacement: Marker appended after the cut (config.TRUNCATION_SUFFIX
            when omitted)
        include_replacement: Whether the marker counts toward the maximum

    Returns:
        The original text when it already fits, otherwise the cut text
        followed by the marker
    """
    if replacement is None:
        replacement = config.TRUNCATION_SUFFIX

    if not original or maximum_length <= 0:
        return original

    # Marker alone would not fit the limit
    if include_replacement and len(replacement) > maximum_length:
        return original

    if len(original) <= maximum_length:
        return original

    if not include_replacement:
        return original[:maximum_length - 1] + replacement

    keep = max(maximum_length - len(replacement) - 1, 0)
    return original[:keep] + replacement
