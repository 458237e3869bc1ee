"""Masking Result - Structured result for masking operations.

Provides immutable data classes for masking operation results.
All offsets refer to the original input, never to the masked output.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class MaskedElement:
    """A single element whose content was masked.

    Attributes:
        name: Element name that matched
        start: Offset of the start tag in the input
        end: Offset just after the consumed region in the input (after the
            close tag, or the input length when the element never closed)
        closed: False if the input ended before the element was closed
    """
    name: str
    start: int
    end: int
    closed: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "start": self.start,
            "end": self.end,
            "closed": self.closed,
        }


@dataclass(frozen=True)
class MaskingStats:
    """Statistics about the masking operation.

    Attributes:
        total_elements: Total number of masked elements
        elements_by_name: Read-only count of masked elements by name
    """
    total_elements: int
    elements_by_name: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self):
        if not isinstance(self.elements_by_name, MappingProxyType):
            object.__setattr__(self, "elements_by_name", MappingProxyType(dict(self.elements_by_name)))


@dataclass(frozen=True)
class MaskingResult:
    """Result of a masking operation.

    Attributes:
        masked_text: Text with element content replaced
        elements: Masked elements in input order
        truncated: True if the output was cut at an unterminated element
        stats: MaskingStats with counts
    """
    masked_text: str
    elements: tuple[MaskedElement, ...] = field(default_factory=tuple)
    truncated: bool = False
    stats: MaskingStats = field(default_factory=lambda: MaskingStats(total_elements=0))

    @classmethod
    def from_elements(
        cls,
        masked_text: str,
        elements: list[MaskedElement],
        truncated: bool = False
    ) -> "MaskingResult":
        """Create MaskingResult from the elements found by a scan.

        Args:
            masked_text: Text after masking
            elements: Masked elements in input order
            truncated: Whether the output was truncated

        Returns:
            MaskingResult instance
        """
        elements_by_name: dict[str, int] = {}
        for element in elements:
            elements_by_name[element.name] = elements_by_name.get(element.name, 0) + 1

        return cls(
            masked_text=masked_text,
            elements=tuple(elements),
            truncated=truncated,
            stats=MaskingStats(
                total_elements=len(elements),
                elements_by_name=elements_by_name,
            ),
        )

    def to_elements_info(self) -> list[dict[str, Any]] | None:
        """Convert elements to list of dicts.

        Returns:
            List of element dicts if elements exist, None otherwise
        """
        if not self.elements:
            return None
        return [e.to_dict() for e in self.elements]
