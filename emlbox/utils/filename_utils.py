"""Filesystem-safe names derived from header values."""

import re
from typing import Iterable, Optional

from .header_utils import get_header_value

# Characters rejected by at least one common filesystem
ILLEGAL_CHARS = re.compile(r'[/?<>\\:*|"]')
CONTROL_CHARS = re.compile(r"[\x00-\x1f\x80-\x9f]")
RESERVED_NAMES = re.compile(r"^\.+$")
WINDOWS_RESERVED_NAMES = re.compile(r"^(con|prn|aux|nul|com[0-9]|lpt[0-9])(\..*)?$", re.IGNORECASE)
WINDOWS_TRAILING = re.compile(r"[. ]+$")

DEFAULT_MAX_BYTES = 200


def sanitize_filename(value: str, max_bytes: int = DEFAULT_MAX_BYTES) -> str:
    """
    Turn an arbitrary string into a safe file name component.

    Illegal and control characters are removed, reserved names and
    trailing dots or spaces are dropped, and the result is cut to
    ``max_bytes`` UTF-8 bytes without splitting a character.

    Args:
        value: Raw string, e.g. a Subject header value
        max_bytes: Upper bound on the encoded length of the result

    Returns:
        Sanitized name; empty if nothing safe is left

    Examples:
        >>> sanitize_filename('Re: "Q3" plan/budget?')
        'Re Q3 planbudget'
        >>> sanitize_filename("..")
        ''
    """
    name = ILLEGAL_CHARS.sub("", value)
    name = CONTROL_CHARS.sub("", name)
    name = RESERVED_NAMES.sub("", name)
    name = WINDOWS_RESERVED_NAMES.sub("", name)
    name = WINDOWS_TRAILING.sub("", name)

    encoded = name.encode("utf-8")
    if len(encoded) > max_bytes:
        name = encoded[:max_bytes].decode("utf-8", errors="ignore")
        name = WINDOWS_TRAILING.sub("", name)

    return name


def extract_subject(lines: Iterable[str], max_bytes: int = DEFAULT_MAX_BYTES) -> Optional[str]:
    """
    Derive a file name slug from the Subject header.

    Returns:
        Sanitized subject, or None if the header is missing, empty, or
        has no safe characters
    """
    subject = get_header_value(lines, "subject")
    if not subject:
        return None
    return sanitize_filename(subject, max_bytes) or None
