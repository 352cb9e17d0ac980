"""Data models for mail conversion"""

from .mail_message import EnvelopeLine, MailMessage
from .conversion_summary import ConversionSummary, FailureType, UnitFailure

__all__ = [
    "EnvelopeLine",
    "MailMessage",
    "ConversionSummary",
    "FailureType",
    "UnitFailure",
]
