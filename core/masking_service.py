"""Masking Service - Application layer service for XML element masking.

This module provides MaskingService which orchestrates:
- Reading documents
- Element content masking
- Logging of results
- Writing masked output

Layer: Application
Depends on: Domain layer (ElementMasker), Infrastructure layer (Protocols)
"""

import sys
from pathlib import Path
from typing import Any

from config import get_input_extensions, get_mask_elements, load_config
from core.element_masker import ElementMasker
from core.masking_result import MaskingResult
from core.protocols import LoggerProtocol, TextReaderProtocol


class MaskingService:
    """Application service for file-based element masking.

    Orchestrates the complete masking workflow:
    1. Read document
    2. Mask configured elements
    3. Log results
    4. Save output

    Usage:
        from file_io.readers import TextReader
        from masking_logging import MaskingLogger

        logger = MaskingLogger()
        service = MaskingService(
            reader=TextReader(),
            masker=ElementMasker(["password"], logger=logger),
            logger=logger
        )
        result = service.process_file(
            input_path=Path("request.xml"),
            output_path=Path("output/request.masked.xml"),
            log_path=Path("output/request_log.txt")
        )
    """

    def __init__(
        self,
        reader: TextReaderProtocol,
        masker: ElementMasker,
        logger: LoggerProtocol
    ):
        self.reader = reader
        self.masker = masker
        self.logger = logger

    def process_file(
        self,
        input_path: Path,
        output_path: Path | None = None,
        log_path: Path | None = None,
        verbose: bool = False
    ) -> MaskingResult | None:
        """Process a single file: read, mask, log, and save.

        Args:
            input_path: Path to input document
            output_path: Path to save masked text (None = print to stdout)
            log_path: Path for masking log file (None = no file logging)
            verbose: If True, print masked elements to stderr

        Returns:
            MaskingResult if successful, None if reading or writing failed
        """
        try:
            if log_path:
                self.logger.setup_file_handler(log_path)

            print(f"Reading {input_path.name}...", file=sys.stderr)
            text = self.reader.read(str(input_path))

            names = ", ".join(self.masker.element_names)
            print(f"Masking elements ({names})...", file=sys.stderr)
            result = self.masker.mask_with_result(text, log_results=True)

            if verbose:
                self._print_elements(input_path, result)

            if output_path:
                with open(output_path, "w", encoding="utf-8", newline="") as f:
                    f.write(result.masked_text)
                print(f"Masked text saved to {output_path}", file=sys.stderr)
            else:
                sys.stdout.write(result.masked_text)

            return result

        except (OSError, ValueError) as e:
            # UnicodeDecodeError is a ValueError
            print(f"Error processing {input_path.name}: {e}", file=sys.stderr)
            return None

    def process_text(self, text: str) -> MaskingResult:
        """Mask text directly without file I/O."""
        return self.masker.mask_with_result(text, log_results=True)

    @staticmethod
    def _print_elements(input_path: Path, result: MaskingResult) -> None:
        print(f"\n[{input_path.name}] Masked Elements:", file=sys.stderr)
        for i, element in enumerate(result.elements, 1):
            suffix = "" if element.closed else " (unterminated)"
            print(
                f"{i}. <{element.name}> at {element.start}-{element.end}{suffix}",
                file=sys.stderr
            )
        print(f"Total: {result.stats.total_elements} elements masked", file=sys.stderr)
        if result.truncated:
            print("Warning: output truncated at unterminated element", file=sys.stderr)


class MaskingServiceFactory:
    """Factory for creating MaskingService with default dependencies."""

    @staticmethod
    def create(
        config: dict[str, Any] | None = None,
        element_names: list[str] | None = None
    ) -> MaskingService:
        """Create a MaskingService with default production dependencies.

        Args:
            config: Configuration dict (default: load from config.yaml)
            element_names: Names to mask; overrides masking.elements from config

        Returns:
            Configured MaskingService

        Raises:
            ValueError: If no element names are given or configured
        """
        from file_io.readers import TextReader
        from masking_logging import MaskingLogger

        config = config if config is not None else load_config()
        names = element_names or get_mask_elements(config)
        if not names:
            raise ValueError(
                "No element names to mask. Pass them explicitly or set masking.elements in config.yaml"
            )

        logger = MaskingLogger()
        return MaskingService(
            reader=TextReader(get_input_extensions(config)),
            masker=ElementMasker(names, logger=logger),
            logger=logger
        )
