"""Envelope line synthesis."""

from .synthesizer import EnvelopeSynthesizer, parse_rfc2822_date, parse_rfc3339_date

__all__ = ["EnvelopeSynthesizer", "parse_rfc2822_date", "parse_rfc3339_date"]
