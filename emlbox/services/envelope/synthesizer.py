"""Derive mbox envelope lines from message headers."""

import re
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Iterable, Optional

from emlbox.config.converter_config import DEFAULT_FALLBACK_DATE, DEFAULT_FALLBACK_SENDER
from emlbox.models.mail_message import EnvelopeLine
from emlbox.utils.header_utils import get_header_value

# asctime-style, without timezone
ENVELOPE_DATE_FORMAT = "%a %b %d %H:%M:%S %Y"

RFC2822_WEEKDAY_PATTERN = re.compile(r"^\s*([A-Za-z]{3})\s*,")

# fromisoformat alone also takes basic-format and minute-precision values
RFC3339_PATTERN = re.compile(
    r"^(?P<datetime>\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}:\d{2})(?:\.\d+)?(?P<offset>[Zz]|[+-]\d{2}:\d{2})$"
)


def parse_rfc2822_date(value: str) -> Optional[datetime]:
    """
    Parse an RFC 2822 date-time, returning None if it is not one.

    A zone is required and a leading day name must agree with the date.

    Examples:
        >>> parse_rfc2822_date("Tue, 5 Mar 2024 14:07:09 +0000").isoformat()
        '2024-03-05T14:07:09+00:00'
        >>> parse_rfc2822_date("Mon, 5 Mar 2024 14:07:09 +0000") is None
        True
    """
    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError, OverflowError):
        return None

    if parsed.tzinfo is None:
        # parsedate_to_datetime also returns a naive datetime for -0000
        if not value.rstrip().endswith("-0000"):
            return None
        parsed = parsed.replace(tzinfo=timezone.utc)

    weekday = RFC2822_WEEKDAY_PATTERN.match(value)
    if weekday and weekday.group(1).title() != parsed.strftime("%a"):
        return None
    return parsed


def parse_rfc3339_date(value: str) -> Optional[datetime]:
    """
    Parse an RFC 3339 date-time, returning None if it is not one.

    Fractional seconds are accepted and dropped; a UTC offset is required.

    Examples:
        >>> parse_rfc3339_date("2024-03-05T14:07:09+02:00").isoformat()
        '2024-03-05T14:07:09+02:00'
        >>> parse_rfc3339_date("2024-03-05") is None
        True
    """
    match = RFC3339_PATTERN.match(value)
    if not match:
        return None

    offset = match.group("offset")
    if offset in ("Z", "z"):
        offset = "+00:00"
    try:
        return datetime.fromisoformat(match.group("datetime") + offset)
    except ValueError:
        return None


class EnvelopeSynthesizer:
    """
    Build the ``From <sender> <date>`` line for a message from its headers.

    Pure: the result depends only on the header lines passed in.
    """

    def __init__(
        self,
        fallback_sender: str = DEFAULT_FALLBACK_SENDER,
        fallback_date: str = DEFAULT_FALLBACK_DATE,
    ):
        """
        Initialize synthesizer.

        Args:
            fallback_sender: Address used when no usable From header exists
            fallback_date: Date string used when no parsable Date header exists
        """
        self.fallback_sender = fallback_sender
        self.fallback_date = fallback_date

    def extract_sender(self, lines: Iterable[str]) -> str:
        """
        Extract the envelope sender from the From header.

        ``Jane <jane@x.com>`` yields ``jane@x.com``; a bare address is used
        as-is. Missing or empty values fall back to the placeholder.
        """
        value = get_header_value(lines, "from")
        if value is None:
            return self.fallback_sender

        start = value.find("<")
        if start != -1:
            end = value.find(">", start + 1)
            if end == -1:
                return self.fallback_sender
            value = value[start + 1 : end].strip()

        return value or self.fallback_sender

    def extract_date(self, lines: Iterable[str]) -> str:
        """
        Reformat the Date header into the envelope date form.

        RFC 2822 is tried first, then RFC 3339. The wall-clock time in the
        header's own offset is kept.
        """
        value = get_header_value(lines, "date")
        if not value:
            return self.fallback_date

        parsed = parse_rfc2822_date(value) or parse_rfc3339_date(value)
        if parsed is None:
            return self.fallback_date
        return parsed.strftime(ENVELOPE_DATE_FORMAT)

    def synthesize(self, lines: Iterable[str]) -> EnvelopeLine:
        """
        Build the envelope line for a message.

        Args:
            lines: Raw message lines (only the header block is inspected)

        Returns:
            EnvelopeLine; render with ``str()`` and terminate it yourself
        """
        lines = list(lines)
        return EnvelopeLine(sender=self.extract_sender(lines), date=self.extract_date(lines))
