"""Business logic services"""

from .conversion import (
    ConversionError,
    EmlToMboxConverter,
    InputNotFoundError,
    MboxToEmlConverter,
    NoEmlFilesError,
    OutputExistsError,
)
from .envelope import EnvelopeSynthesizer
from .mbox import MboxReadError, MboxSegmenter, MboxWriter

__all__ = [
    "ConversionError",
    "EmlToMboxConverter",
    "InputNotFoundError",
    "MboxToEmlConverter",
    "NoEmlFilesError",
    "OutputExistsError",
    "EnvelopeSynthesizer",
    "MboxReadError",
    "MboxSegmenter",
    "MboxWriter",
]
