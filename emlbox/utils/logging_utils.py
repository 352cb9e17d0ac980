"""Logging setup that cooperates with tqdm progress bars."""

import logging
import sys

from tqdm import tqdm


class TqdmLoggingHandler(logging.Handler):
    """Emit log records through ``tqdm.write`` so an active bar is redrawn below them."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            tqdm.write(self.format(record), file=sys.stderr)
        except Exception:
            self.handleError(record)


def setup_logging(verbose: bool = False) -> None:
    """Configure the ``emlbox`` and ``cli`` loggers for command-line use."""
    formatter = logging.Formatter("%(levelname)s: %(message)s")

    for name in ("emlbox", "cli"):
        logger = logging.getLogger(name)
        for existing in [h for h in logger.handlers if isinstance(h, TqdmLoggingHandler)]:
            logger.removeHandler(existing)
        handler = TqdmLoggingHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG if verbose else logging.INFO)
