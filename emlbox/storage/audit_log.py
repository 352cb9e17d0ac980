"""Audit logging for conversion runs."""

import json
import logging
from datetime import datetime
from pathlib import Path

from emlbox.models.conversion_summary import ConversionSummary, UnitFailure

logger = logging.getLogger(__name__)


class AuditLog:
    """JSON-lines record of failed units and run summaries."""

    def __init__(self, log_path: Path):
        """
        Initialize audit logger.

        Args:
            log_path: Path to audit log file; parent directories are created
                with the first event
        """
        self.log_path = log_path

    def log_unit_failure(self, source: Path, failure: UnitFailure) -> None:
        """
        Log a unit that could not be converted.

        Args:
            source: Input directory or archive being converted
            failure: The failed unit
        """
        event = {
            "timestamp": datetime.now().isoformat(),
            "event_type": "unit_failure",
            "failure_type": failure.failure_type.value,
            "source": str(source),
            "unit": failure.unit,
            "error_details": failure.error_details,
        }

        self._write_event(event)

    def log_run_summary(self, command: str, source: Path, summary: ConversionSummary) -> None:
        """
        Log the totals of a finished run.

        Args:
            command: CLI verb, e.g. "eml-to-mbox"
            source: Input directory or archive
            summary: Final counters
        """
        event = {
            "timestamp": datetime.now().isoformat(),
            "event_type": "run_summary",
            "command": command,
            "source": str(source),
            "output_path": str(summary.output_path),
            "converted": summary.converted,
            "errors": summary.errors,
        }

        self._write_event(event)

    def read_events(self) -> list[dict]:
        """
        Read all events back, skipping lines that are not valid JSON.

        Returns:
            Events in the order they were written
        """
        events = []

        if self.log_path.exists():
            with open(self.log_path, "r", encoding="utf-8") as f:
                for line in f:
                    line = line.strip()
                    if line:
                        try:
                            events.append(json.loads(line))
                        except json.JSONDecodeError:
                            logger.debug("Skipping malformed audit line in %s", self.log_path)
                            continue

        return events

    def _write_event(self, event: dict) -> None:
        """
        Write event to log file.

        Args:
            event: Event dictionary
        """
        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.log_path, "a", encoding="utf-8") as f:
            f.write(json.dumps(event, ensure_ascii=False) + "\n")
