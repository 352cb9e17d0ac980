"""Mail message and envelope line data models."""

from dataclasses import dataclass, field


@dataclass
class MailMessage:
    """
    A single message as an ordered run of raw text lines.

    Attributes:
        lines: Raw lines in source order, each keeping its own terminator
            (the final line may have none)
    """

    lines: list[str] = field(default_factory=list)

    @classmethod
    def from_content(cls, content: str) -> "MailMessage":
        """
        Split raw file content into lines, keeping line terminators.

        Only ``\\n`` ends a line, so ``\\r\\n`` terminators stay attached to
        their line and a lone ``\\r`` is ordinary content.
        """
        parts = content.split("\n")
        lines = [part + "\n" for part in parts[:-1]]
        if parts[-1]:
            lines.append(parts[-1])
        return cls(lines)

    @property
    def content(self) -> str:
        """Raw message text exactly as read."""
        return "".join(self.lines)


@dataclass(frozen=True)
class EnvelopeLine:
    """
    The ``From <sender> <date>`` separator that introduces a message in mbox.

    Attributes:
        sender: Envelope sender address
        date: asctime-style date string
    """

    sender: str
    date: str

    def __str__(self) -> str:
        return f"From {self.sender} {self.date}"
