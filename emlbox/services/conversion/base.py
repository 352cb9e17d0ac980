"""Shared interface and errors for conversion pipelines."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from tqdm import tqdm

from emlbox.models.conversion_summary import ConversionSummary, FailureType, UnitFailure
from emlbox.storage.audit_log import AuditLog

logger = logging.getLogger(__name__)

FAILURE_ACTIONS = {
    FailureType.UNREADABLE_EML: "Error reading",
    FailureType.MBOX_WRITE_ERROR: "Error writing",
    FailureType.MBOX_READ_ERROR: "Error reading",
    FailureType.EML_SAVE_ERROR: "Error saving",
}


class ConversionError(Exception):
    """Base exception for setup failures that abort a run before any unit is processed."""

    pass


class InputNotFoundError(ConversionError):
    """Raised when the input file or directory does not exist."""

    pass


class OutputExistsError(ConversionError):
    """Raised when the output path exists and overwriting was not requested."""

    pass


class NoEmlFilesError(ConversionError):
    """Raised when the input directory holds no .eml files."""

    pass


class Converter(ABC):
    """
    Base class for one-shot conversion runs.

    Subclasses validate their paths, then process units strictly in order,
    isolating per-unit failures: each failure is logged, recorded on the
    summary and, when an audit log is configured, written there too.
    """

    command: str = ""

    def __init__(
        self,
        input_path: Path,
        output_path: Path,
        overwrite: bool = False,
        show_progress: bool = True,
        audit_log: Optional[AuditLog] = None,
    ):
        """
        Initialize converter.

        Args:
            input_path: Source directory or archive
            output_path: Destination archive or directory
            overwrite: Replace an existing output path
            show_progress: Display a tqdm progress bar on stderr
            audit_log: Optional audit log receiving failures and the summary
        """
        self.input_path = input_path
        self.output_path = output_path
        self.overwrite = overwrite
        self.show_progress = show_progress
        self.audit_log = audit_log

    @abstractmethod
    def run(self) -> ConversionSummary:
        """
        Convert every unit of the input.

        Returns:
            ConversionSummary with final counters

        Raises:
            ConversionError: On setup failures, before any unit is processed
        """
        pass

    def _progress(self, **kwargs) -> tqdm:
        """Create a progress bar that is a no-op when progress is disabled."""
        return tqdm(disable=not self.show_progress, leave=False, **kwargs)

    def _record_failure(
        self,
        summary: ConversionSummary,
        failure_type: FailureType,
        unit: str,
        error: Exception,
    ) -> None:
        """Log, count and audit one failed unit."""
        failure = UnitFailure(failure_type=failure_type, unit=unit, error_details=str(error))
        logger.error("%s %s: %s", FAILURE_ACTIONS[failure_type], unit, error)
        summary.record_failure(failure)
        if self.audit_log is not None:
            self.audit_log.log_unit_failure(self.input_path, failure)

    def _finish(self, summary: ConversionSummary) -> ConversionSummary:
        """Log and audit the final counters."""
        logger.debug(
            "%s finished: converted=%d errors=%d", self.command, summary.converted, summary.errors
        )
        if self.audit_log is not None:
            self.audit_log.log_run_summary(self.command, self.input_path, summary)
        return summary
