"""Main CLI entry point for emlbox."""

import argparse
import sys
from pathlib import Path
from typing import Optional

from emlbox import __version__
from emlbox.config.config_loader import ConfigError, ConfigLoader
from emlbox.config.converter_config import AppConfig
from emlbox.models.conversion_summary import ConversionSummary
from emlbox.services.conversion.base import ConversionError
from emlbox.services.conversion.eml_to_mbox import EmlToMboxConverter
from emlbox.services.conversion.mbox_to_eml import MboxToEmlConverter
from emlbox.services.envelope.synthesizer import EnvelopeSynthesizer
from emlbox.storage.audit_log import AuditLog
from emlbox.utils.logging_utils import setup_logging
from emlbox.utils.path_utils import ensure_file_path


def file_path_argument(value: str) -> Path:
    """argparse type for arguments that must name a file."""
    try:
        return ensure_file_path(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def open_audit_log(args, config: AppConfig) -> Optional[AuditLog]:
    """Return the audit log selected by --audit-log or the config, if any."""
    log_path = args.audit_log or config.storage.get_audit_log_path()
    return AuditLog(log_path) if log_path else None


def cmd_eml_to_mbox(args, config: AppConfig) -> ConversionSummary:
    """Convert a directory of eml files into one mbox file."""
    converter = EmlToMboxConverter(
        input_path=args.input_directory,
        output_path=args.output_file,
        overwrite=args.overwrite,
        show_progress=config.progress.enabled and not args.no_progress,
        audit_log=open_audit_log(args, config),
        synthesizer=EnvelopeSynthesizer(
            fallback_sender=config.envelope.fallback_sender,
            fallback_date=config.envelope.fallback_date,
        ),
    )
    summary = converter.run()

    print(
        f"Conversion of {summary.converted} eml files completed with {summary.errors} errors. "
        f"Output saved to {summary.output_path}"
    )
    return summary


def cmd_mbox_to_eml(args, config: AppConfig) -> ConversionSummary:
    """Convert one mbox file into a directory of eml files."""
    converter = MboxToEmlConverter(
        input_path=args.input_file,
        output_path=args.output_directory,
        overwrite=args.overwrite,
        show_progress=config.progress.enabled and not args.no_progress,
        audit_log=open_audit_log(args, config),
        index_width=config.naming.index_width,
        max_subject_bytes=config.naming.max_subject_bytes,
    )
    summary = converter.run()

    print(
        f"Conversion of {summary.converted} emails completed with {summary.errors} errors. "
        f"Output saved to {summary.output_path}"
    )
    return summary


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Replace existing output instead of refusing to run",
    )
    parser.add_argument("--config", type=Path, help="Custom config file path")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar")
    parser.add_argument("--audit-log", type=Path, help="Append failures and totals to this JSON-lines file")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per direction."""
    parser = argparse.ArgumentParser(
        prog="emlbox",
        description="emlbox - A simple and quick bidirectional converter between mbox and eml formats",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # eml-to-mbox command
    eml_parser = subparsers.add_parser(
        "eml-to-mbox", help="Convert a directory of .eml files to a single .mbox file"
    )
    eml_parser.add_argument("input_directory", type=Path, help="Directory searched recursively for .eml files")
    eml_parser.add_argument("output_file", type=file_path_argument, help="mbox file to create")
    add_common_arguments(eml_parser)
    eml_parser.set_defaults(handler=cmd_eml_to_mbox)

    # mbox-to-eml command
    mbox_parser = subparsers.add_parser(
        "mbox-to-eml", help="Convert a single .mbox file to a directory of .eml files"
    )
    mbox_parser.add_argument("input_file", type=file_path_argument, help="mbox file to read")
    mbox_parser.add_argument("output_directory", type=Path, help="Directory receiving the .eml files")
    add_common_arguments(mbox_parser)
    mbox_parser.set_defaults(handler=cmd_mbox_to_eml)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    setup_logging(args.verbose)

    try:
        config = ConfigLoader(args.config).load_app_config()
        args.handler(args, config)
    except (ConfigError, ConversionError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
