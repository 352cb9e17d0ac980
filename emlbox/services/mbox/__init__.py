"""mbox archive reading and writing."""

from .segmenter import MboxReadError, MboxSegmenter, is_boundary
from .writer import MboxWriter, trailing_padding

__all__ = [
    "MboxReadError",
    "MboxSegmenter",
    "is_boundary",
    "MboxWriter",
    "trailing_padding",
]
