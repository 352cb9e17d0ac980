"""Extract the messages of an mbox archive into individual .eml files."""

import logging
from pathlib import Path
from typing import Optional

from emlbox.models.conversion_summary import ConversionSummary, FailureType
from emlbox.models.mail_message import MailMessage
from emlbox.services.mbox.segmenter import MboxReadError, MboxSegmenter
from emlbox.storage.audit_log import AuditLog
from emlbox.utils.filename_utils import DEFAULT_MAX_BYTES, extract_subject
from .base import ConversionError, Converter, InputNotFoundError, OutputExistsError

logger = logging.getLogger(__name__)


def eml_filename(index: int, subject: Optional[str], index_width: int = 4) -> str:
    """
    Build the output file name for the message at ``index``.

    Examples:
        >>> eml_filename(7, "Weekly report")
        '0007_Weekly report.eml'
        >>> eml_filename(12, None)
        '0012.eml'
    """
    if subject:
        return f"{index:0{index_width}d}_{subject}.eml"
    return f"{index:0{index_width}d}.eml"


def save_eml_file(filepath: Path, message: MailMessage) -> None:
    """
    Write message lines verbatim, replacing any existing file.

    Raises:
        OSError: If the file cannot be created or written
    """
    with open(filepath, "w", encoding="utf-8", newline="") as f:
        f.writelines(message.lines)


class MboxToEmlConverter(Converter):
    """Convert one .mbox file to a directory of .eml files."""

    command = "mbox-to-eml"

    def __init__(
        self,
        input_path: Path,
        output_path: Path,
        overwrite: bool = False,
        show_progress: bool = True,
        audit_log: Optional[AuditLog] = None,
        index_width: int = 4,
        max_subject_bytes: int = DEFAULT_MAX_BYTES,
    ):
        """
        Initialize converter.

        Args:
            input_path: mbox file to read
            output_path: Directory receiving the eml files
            overwrite: Write into an existing directory, replacing clashing files
            show_progress: Display a progress counter
            audit_log: Optional audit log
            index_width: Zero-padded width of the numeric file name prefix
            max_subject_bytes: Longest subject slug kept in a file name
        """
        super().__init__(input_path, output_path, overwrite, show_progress, audit_log)
        self.index_width = index_width
        self.max_subject_bytes = max_subject_bytes

    def run(self) -> ConversionSummary:
        """
        Write one eml file per archived message.

        Every produced unit, including failed ones, consumes an index, so
        file names never collide and failures leave gaps in the numbering.

        Returns:
            ConversionSummary with converted and errors counts

        Raises:
            InputNotFoundError: If the mbox file does not exist
            OutputExistsError: If the output directory exists and overwrite is off
            ConversionError: If the directory cannot be created or the archive opened
        """
        if not self.input_path.exists():
            raise InputNotFoundError(f"Mbox file at {self.input_path} does not exist")
        if self.output_path.exists() and not self.overwrite:
            raise OutputExistsError(
                f"Directory already exists at {self.output_path}. "
                "Use the --overwrite flag to replace overlapping files inside of it."
            )

        try:
            self.output_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConversionError(
                f"Failed to create output directory at {self.output_path}: {e}"
            ) from e

        try:
            # Binary, so each line is decoded on its own by the segmenter
            source = open(self.input_path, "rb")
        except OSError as e:
            raise ConversionError(f"Failed to open mbox file at {self.input_path}: {e}") from e

        summary = ConversionSummary(output_path=self.output_path)
        with source, self._progress(unit="emails") as progress:
            segmenter = MboxSegmenter(source)
            index = 0
            while True:
                try:
                    message = next(segmenter)
                except StopIteration:
                    break
                except MboxReadError as e:
                    self._record_failure(summary, FailureType.MBOX_READ_ERROR, f"email {index}", e)
                else:
                    self._save_one(index, message, summary)
                index += 1
                progress.update(1)

        return self._finish(summary)

    def _save_one(self, index: int, message: MailMessage, summary: ConversionSummary) -> None:
        subject = extract_subject(message.lines, self.max_subject_bytes)
        filepath = self.output_path / eml_filename(index, subject, self.index_width)
        try:
            save_eml_file(filepath, message)
        except (OSError, UnicodeError) as e:
            self._record_failure(summary, FailureType.EML_SAVE_ERROR, f"email {index}", e)
            return
        summary.record_success()
