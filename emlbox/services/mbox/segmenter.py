"""Split an mbox line stream into messages."""

import logging
from typing import Iterable, Iterator, Optional, Union

from emlbox.models.mail_message import MailMessage

logger = logging.getLogger(__name__)

BOUNDARY_PREFIX = "From "


class MboxReadError(Exception):
    """Raised once when the underlying line stream fails mid-archive."""

    pass


def is_boundary(line: str) -> bool:
    """Return True if ``line`` is an mbox envelope line."""
    return line.startswith(BOUNDARY_PREFIX)


class MboxSegmenter:
    """
    Forward-only iterator over the messages of an mbox line stream.

    Every message is the run of lines between one ``From `` envelope line
    and the next (or end of stream); the envelope line itself is dropped.
    Lines before the first envelope line are discarded. Body lines that
    happen to start with ``From `` are treated as boundaries: ``>From``
    quoting is neither written nor undone.

    A read error from the stream is raised once as MboxReadError, the
    partially collected message is discarded, and iteration ends.

    Example:
        >>> lines = ["From a@b Mon Jan 01 00:00:00 2024\\n", "Subject: x\\n"]
        >>> [m.lines for m in MboxSegmenter(lines)]
        [['Subject: x\\n']]
    """

    def __init__(self, lines: Iterable[Union[str, bytes]]):
        """
        Initialize segmenter.

        Args:
            lines: Line source. Byte lines, e.g. from a file opened with
                ``"rb"``, are decoded as UTF-8 one line at a time, so an
                undecodable line fails only the message it belongs to
        """
        self._lines = iter(lines)
        self._lookahead: Optional[str] = None
        self._finished = False

    def __iter__(self) -> Iterator[MailMessage]:
        return self

    def __next__(self) -> MailMessage:
        if self._finished:
            raise StopIteration

        # Consume everything up to and including the next envelope line
        while True:
            line = self._take()
            if line is None or is_boundary(line):
                break

        collected: list[str] = []
        while True:
            line = self._peek()
            if line is None:
                break
            if is_boundary(line):
                return MailMessage(collected)
            collected.append(self._take())

        self._finished = True
        if collected:
            return MailMessage(collected)
        raise StopIteration

    def _peek(self) -> Optional[str]:
        """Return the next line without consuming it, or None at end of stream."""
        if self._lookahead is None:
            self._lookahead = self._read()
        return self._lookahead

    def _take(self) -> Optional[str]:
        """Consume and return the next line, or None at end of stream."""
        line = self._peek()
        self._lookahead = None
        return line

    def _read(self) -> Optional[str]:
        try:
            line = next(self._lines)
            if isinstance(line, bytes):
                line = line.decode("utf-8")
            return line
        except StopIteration:
            return None
        except (OSError, UnicodeDecodeError) as e:
            self._finished = True
            logger.debug("Line stream failed, stopping segmentation: %s", e)
            raise MboxReadError(f"failed to read line from mbox: {e}") from e
