"""Conversion pipelines."""

from .base import (
    ConversionError,
    Converter,
    InputNotFoundError,
    NoEmlFilesError,
    OutputExistsError,
)
from .eml_to_mbox import EmlToMboxConverter
from .mbox_to_eml import MboxToEmlConverter

__all__ = [
    "ConversionError",
    "Converter",
    "InputNotFoundError",
    "NoEmlFilesError",
    "OutputExistsError",
    "EmlToMboxConverter",
    "MboxToEmlConverter",
]
