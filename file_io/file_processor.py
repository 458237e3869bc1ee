"""File processing utilities for XML element masking.

Handles processing of individual files using the MaskingService layer.

Layer: Adapter (between CLI and Application layer)
"""

import sys
from pathlib import Path
from typing import Any

from core.masking_result import MaskingResult
from core.masking_service import MaskingServiceFactory


def process_file(
    input_path: Path,
    output_path: Path | None,
    log_path: Path | None,
    element_names: list[str] | None = None,
    verbose: bool = False,
    config: dict[str, Any] | None = None
) -> MaskingResult | None:
    """
    Process a single file: read, mask, log, and save.

    Args:
        input_path: Path to input document
        output_path: Path to save masked text (None = write to stdout)
        log_path: Path for masking log file (None = no file logging)
        element_names: Names to mask (default: masking.elements from config)
        verbose: If True, print masked elements
        config: Configuration dict (default: load from config.yaml)

    Returns:
        MaskingResult if successful, None otherwise
    """
    try:
        service = MaskingServiceFactory.create(config=config, element_names=element_names)
    except ValueError as e:
        print(f"Error processing {input_path.name}: {e}", file=sys.stderr)
        return None

    return service.process_file(
        input_path=input_path,
        output_path=output_path,
        log_path=log_path,
        verbose=verbose
    )
