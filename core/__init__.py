"""Core XML element masking functionality.

This package contains the main masking logic:
- element_masker: ElementMasker class, the literal scan and depth tracking
- masking_result: Structured result classes
- masking_service: File-based masking workflow
- protocols: Protocol definitions for dependency abstraction
"""

from .element_masker import (
    MASKED_CONTENT_REPLACEMENT,
    TRUNCATION_MARKER,
    ElementMasker,
    MaskRule,
    mask_xml_elements,
)
from .masking_result import MaskedElement, MaskingResult, MaskingStats
from .protocols import LoggerProtocol, NullLogger, TextReaderProtocol

__all__ = [
    # Domain
    "ElementMasker",
    "MaskRule",
    "MASKED_CONTENT_REPLACEMENT",
    "TRUNCATION_MARKER",
    "mask_xml_elements",
    "MaskingResult",
    "MaskedElement",
    "MaskingStats",
    # Protocols
    "LoggerProtocol",
    "TextReaderProtocol",
    "NullLogger",
]
