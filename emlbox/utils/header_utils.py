"""Raw header line lookup."""

from typing import Iterable, Iterator, Optional


def iter_header_lines(lines: Iterable[str]) -> Iterator[str]:
    """
    Yield the lines of the header block.

    The header block ends at the first blank line; continuation lines are
    yielded as-is, without unfolding.
    """
    for line in lines:
        if not line.rstrip("\r\n"):
            return
        yield line


def get_header_value(lines: Iterable[str], name: str) -> Optional[str]:
    """
    Find the first header called ``name`` and return its trimmed value.

    Args:
        lines: Raw message lines, headers first
        name: Header name, matched case-insensitively

    Returns:
        Header value with surrounding whitespace removed, or None if absent

    Examples:
        >>> get_header_value(["Subject: Hello\\n", "\\n", "body\\n"], "subject")
        'Hello'
        >>> get_header_value(["\\n", "Subject: in body\\n"], "Subject") is None
        True
    """
    prefix = f"{name.lower()}:"
    for line in iter_header_lines(lines):
        if line[: len(prefix)].lower() == prefix:
            return line[len(prefix) :].strip()
    return None
