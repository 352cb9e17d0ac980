"""Append messages to an mbox archive."""

from typing import TextIO

from emlbox.models.mail_message import EnvelopeLine


def trailing_padding(content: str) -> str:
    """
    Newlines to append so ``content`` ends in exactly one blank line.

    Examples:
        >>> trailing_padding("body\\n\\n")
        ''
        >>> trailing_padding("body\\n")
        '\\n'
        >>> trailing_padding("body")
        '\\n\\n'
    """
    if content.endswith("\n\n"):
        return ""
    if content.endswith("\n"):
        return "\n"
    return "\n\n"


class MboxWriter:
    """Writes envelope-prefixed, blank-line-separated messages to an open text stream."""

    def __init__(self, stream: TextIO):
        """
        Initialize writer.

        Args:
            stream: Text stream opened for writing with ``newline=""`` so
                message line terminators are written untranslated
        """
        self.stream = stream

    def append(self, envelope: EnvelopeLine, content: str) -> None:
        """
        Write one message: envelope line, raw content, trailing padding.

        Raises:
            OSError: If the stream cannot be written
        """
        self.stream.write(f"{envelope}\n")
        self.stream.write(content)
        self.stream.write(trailing_padding(content))
        self.stream.flush()
