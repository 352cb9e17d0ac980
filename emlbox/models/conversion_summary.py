"""Conversion outcome data models."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class FailureType(Enum):
    """Kind of per-unit failure."""

    UNREADABLE_EML = "unreadable_eml"
    MBOX_WRITE_ERROR = "mbox_write_error"
    MBOX_READ_ERROR = "mbox_read_error"
    EML_SAVE_ERROR = "eml_save_error"


@dataclass
class UnitFailure:
    """
    A single unit (eml file or mbox message) that could not be converted.

    Attributes:
        failure_type: What went wrong
        unit: Source path or message index identifying the unit
        error_details: Human-readable error description
    """

    failure_type: FailureType
    unit: str
    error_details: str


@dataclass
class ConversionSummary:
    """
    Aggregate counters for one conversion run.

    Attributes:
        output_path: Archive file or directory written by the run
        converted: Units written successfully
        errors: Units that failed
        failures: Details for every failed unit, in processing order
    """

    output_path: Path
    converted: int = 0
    errors: int = 0
    failures: list[UnitFailure] = field(default_factory=list)

    def record_success(self) -> None:
        self.converted += 1

    def record_failure(self, failure: UnitFailure) -> None:
        self.errors += 1
        self.failures.append(failure)
