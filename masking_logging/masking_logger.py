"""Masking Logger - Logging of masked XML elements.

Writes one log block per masked document. The log file can be switched
between documents during batch processing.
"""

import logging
from pathlib import Path


class MaskingLogger:
    """
    File logger implementing core.protocols.LoggerProtocol.

    Instances created with the same name share one logging.Logger, so
    closing any of them detaches the shared file handler.

    Usage:
        logger = MaskingLogger()
        logger.setup_file_handler(Path("output/orders_log.txt"))
        masker = ElementMasker(["password"], logger=logger)
        masker.mask_with_result(text, log_results=True)
    """

    def __init__(self, name: str = "xml_masking"):
        self._logger = logging.getLogger(name)
        self._logger.setLevel(logging.INFO)
        # Avoid "No handlers found" until a log file is set up
        if not self._logger.handlers:
            self._logger.addHandler(logging.NullHandler())

    def setup_file_handler(self, log_file_path: Path) -> None:
        """Send log output to log_file_path, replacing any previous log file."""
        self._detach_handlers(keep_null=True)

        file_handler = logging.FileHandler(log_file_path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        self._logger.addHandler(file_handler)

    def log(self, message: str) -> None:
        self._logger.info(message)

    def close(self) -> None:
        self._detach_handlers(keep_null=False)

    def _detach_handlers(self, keep_null: bool) -> None:
        for handler in self._logger.handlers[:]:
            if keep_null and isinstance(handler, logging.NullHandler):
                continue
            handler.close()
            self._logger.removeHandler(handler)
