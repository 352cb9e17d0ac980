"""Pack a directory of .eml files into a single mbox archive."""

import logging
from pathlib import Path
from typing import Optional

from emlbox.models.conversion_summary import ConversionSummary, FailureType
from emlbox.models.mail_message import MailMessage
from emlbox.services.envelope.synthesizer import EnvelopeSynthesizer
from emlbox.services.mbox.writer import MboxWriter
from emlbox.storage.audit_log import AuditLog
from emlbox.utils.path_utils import find_eml_files
from .base import ConversionError, Converter, InputNotFoundError, NoEmlFilesError, OutputExistsError

logger = logging.getLogger(__name__)


def read_eml_file(eml_file: Path) -> MailMessage:
    """
    Read an eml file verbatim.

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    with open(eml_file, "r", encoding="utf-8", newline="") as f:
        return MailMessage.from_content(f.read())


class EmlToMboxConverter(Converter):
    """Convert a directory tree of .eml files to one .mbox file."""

    command = "eml-to-mbox"

    def __init__(
        self,
        input_path: Path,
        output_path: Path,
        overwrite: bool = False,
        show_progress: bool = True,
        audit_log: Optional[AuditLog] = None,
        synthesizer: Optional[EnvelopeSynthesizer] = None,
    ):
        """
        Initialize converter.

        Args:
            input_path: Directory searched recursively for .eml files
            output_path: mbox file to create
            overwrite: Replace an existing output file
            show_progress: Display a progress bar
            audit_log: Optional audit log
            synthesizer: Envelope synthesizer (default placeholders if omitted)
        """
        super().__init__(input_path, output_path, overwrite, show_progress, audit_log)
        self.synthesizer = synthesizer or EnvelopeSynthesizer()

    def run(self) -> ConversionSummary:
        """
        Append every eml file, in sorted path order, to the output archive.

        Returns:
            ConversionSummary with converted and errors counts

        Raises:
            OutputExistsError: If the output file exists and overwrite is off
            InputNotFoundError: If the input directory does not exist
            NoEmlFilesError: If no .eml files were found
            ConversionError: If the tree cannot be listed or the output created
        """
        if self.output_path.exists() and not self.overwrite:
            raise OutputExistsError(
                f"File already exists at {self.output_path}. "
                "Use the --overwrite flag to replace it."
            )
        if not self.input_path.is_dir():
            raise InputNotFoundError(f"Input directory {self.input_path} does not exist")

        try:
            eml_files = find_eml_files(self.input_path)
        except OSError as e:
            raise ConversionError(f"Failed to read directory {self.input_path}: {e}") from e
        if not eml_files:
            raise NoEmlFilesError(f"Did not find any .eml files inside of {self.input_path}")

        logger.debug("Found %d eml files under %s", len(eml_files), self.input_path)
        summary = ConversionSummary(output_path=self.output_path)

        try:
            output = open(self.output_path, "w", encoding="utf-8", newline="")
        except OSError as e:
            raise ConversionError(f"Failed to create mbox file at {self.output_path}: {e}") from e

        with output, self._progress(total=len(eml_files), unit="files") as progress:
            writer = MboxWriter(output)
            for eml_file in eml_files:
                self._convert_one(eml_file, writer, summary)
                progress.update(1)

        return self._finish(summary)

    def _convert_one(self, eml_file: Path, writer: MboxWriter, summary: ConversionSummary) -> None:
        try:
            message = read_eml_file(eml_file)
        except (OSError, UnicodeError) as e:
            self._record_failure(summary, FailureType.UNREADABLE_EML, str(eml_file), e)
            return

        envelope = self.synthesizer.synthesize(message.lines)
        try:
            writer.append(envelope, message.content)
        except (OSError, UnicodeError) as e:
            self._record_failure(summary, FailureType.MBOX_WRITE_ERROR, str(eml_file), e)
            return

        summary.record_success()
