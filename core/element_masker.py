"""Element Masker - Hide the content of named XML elements.

This module provides:
- ElementMasker class: Masks the inner content of configured elements
- MaskRule: Literal start/close tags for a single element name
- mask_xml_elements function: One-shot convenience wrapper

The input is never parsed into a tree. Only lightweight literal matching
is done, which means:
- Syntactically incorrect or invalid XML is accepted without failing
- Content is masked even if an element is never closed (truncated input)
- Nesting of the same element name is respected, so masking applies to
  the proper hierarchical scope of an element
- Elements with attributes, or self-closing elements, are never masked
- CDATA sections get no special handling

Layer: Domain
Dependencies: Protocols from core.protocols
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType

from core.masking_result import MaskedElement, MaskingResult
from core.protocols import LoggerProtocol, NullLogger


MASKED_CONTENT_REPLACEMENT = "***"
TRUNCATION_MARKER = "[...TRUNCATED XML]"


@dataclass(frozen=True)
class MaskRule:
    """Literal tags for one maskable element name.

    Attributes:
        name: Element name, matched literally (may be empty)
        start_tag: Bare start tag, e.g. "<hush>"
        close_tag: Close tag, e.g. "</hush>"
    """
    name: str
    start_tag: str
    close_tag: str

    @classmethod
    def for_name(cls, name: str) -> "MaskRule":
        return cls(name=name, start_tag=f"<{name}>", close_tag=f"</{name}>")

    def find_start_or_close(self, content: str, pos: int, cached: list[int]) -> tuple[int, bool]:
        """Find the leftmost start or close tag of this element at or after pos.

        Args:
            content: Text being scanned
            pos: Offset to search from
            cached: Two-slot scratch list [next_start, next_close] owned by
                the caller. Offsets found earlier are reused while they are
                still at or after pos.

        Returns:
            Tuple of (offset, is_close). Offset is -1 when neither tag occurs.
        """
        if 0 <= cached[0] < pos:
            cached[0] = content.find(self.start_tag, pos)
        if 0 <= cached[1] < pos:
            cached[1] = content.find(self.close_tag, pos)

        start, close = cached
        if start < 0 and close < 0:
            return -1, False
        if close < 0 or 0 <= start < close:
            return start, False
        return close, True


class ElementMasker:
    """Masks the content of named elements in XML-like text.

    Every occurrence of a configured element has its entire inner content,
    nested markup included, replaced by MASKED_CONTENT_REPLACEMENT. When an
    element is never closed, the rest of the input is dropped and
    TRUNCATION_MARKER is appended instead.

    Instances are immutable after construction and can be shared between
    threads.

    Usage:
        masker = ElementMasker(["password", "secret"])
        masker.mask("<a><password>hunter2</password></a>")
        # -> "<a><password>***</password></a>"
    """

    def __init__(
        self,
        element_names: Iterable[str],
        logger: LoggerProtocol | None = None
    ):
        """Initialize masker with the element names to mask.

        Args:
            element_names: Names of elements to mask. Matched literally,
                duplicates are ignored.
            logger: Logger implementation (default: NullLogger)

        Raises:
            ValueError: If element_names is None or empty, or contains None
            TypeError: If element_names is a single string or holds non-strings
        """
        if isinstance(element_names, str):
            raise TypeError(
                "element_names must be a collection of names, not a single string"
            )
        names = list(element_names) if element_names is not None else []
        if not names:
            raise ValueError(
                "element_names must be non-null and contain at least one element"
            )
        for name in names:
            if name is None:
                raise ValueError("null names are not allowed")
            if not isinstance(name, str):
                raise TypeError(f"element names must be strings, got {type(name).__name__}")

        self._rules = tuple(MaskRule.for_name(name) for name in dict.fromkeys(names))
        self._rules_by_name = MappingProxyType({rule.name: rule for rule in self._rules})
        self.logger = logger or NullLogger()

    @property
    def element_names(self) -> tuple[str, ...]:
        """Configured element names, deduplicated, in configuration order."""
        return tuple(rule.name for rule in self._rules)

    @property
    def rules(self) -> tuple[MaskRule, ...]:
        return self._rules

    def __call__(self, content: str | None) -> str | None:
        return self.mask(content)

    def mask(self, content: str | None) -> str | None:
        """Mask configured elements in content.

        Args:
            content: XML-like text, or None

        Returns:
            Masked text, or None if content is None
        """
        if content is None:
            return None
        masked_text, _, _ = self._scan(content)
        return masked_text

    def mask_with_result(
        self,
        content: str | None,
        log_results: bool = False
    ) -> MaskingResult | None:
        """Mask configured elements and report what was masked.

        Args:
            content: XML-like text, or None
            log_results: If True, log masked elements to the injected logger

        Returns:
            MaskingResult, or None if content is None
        """
        if content is None:
            return None
        masked_text, elements, truncated = self._scan(content)
        result = MaskingResult.from_elements(masked_text, elements, truncated)
        if log_results and result.elements:
            self._log_result(result)
        return result

    def _scan(self, content: str) -> tuple[str, list[MaskedElement], bool]:
        parts: list[str] = []
        elements: list[MaskedElement] = []
        # Next known start tag offset per rule; None until first searched.
        next_starts: list[int | None] = [None] * len(self._rules)
        position = 0
        length = len(content)

        while position < length:
            match = self._find_next_start(content, position, next_starts)
            if match is None:
                break
            rule, start = match
            start_end = start + len(rule.start_tag)
            parts.append(content[position:start_end])
            parts.append(MASKED_CONTENT_REPLACEMENT)

            close_end = self._find_closing_element_end(rule.name, start, content)
            if close_end is None:
                parts.append(TRUNCATION_MARKER)
                elements.append(MaskedElement(rule.name, start, length, closed=False))
                return "".join(parts), elements, True

            parts.append(rule.close_tag)
            elements.append(MaskedElement(rule.name, start, close_end, closed=True))
            position = close_end

        if position < length:
            parts.append(content[position:])
        return "".join(parts), elements, False

    def _find_next_start(
        self,
        content: str,
        position: int,
        next_starts: list[int | None]
    ) -> tuple[MaskRule, int] | None:
        """Leftmost start tag of any rule at or after position.

        Ties at the same offset go to the rule configured first.
        """
        best: tuple[MaskRule, int] | None = None
        for index, rule in enumerate(self._rules):
            found = next_starts[index]
            if found is None or 0 <= found < position:
                found = content.find(rule.start_tag, position)
                next_starts[index] = found
            if found >= 0 and (best is None or found < best[1]):
                best = (rule, found)
        return best

    def _find_closing_element_end(self, element_name: str, start: int, content: str) -> int | None:
        """Find the end of the close tag matching the start tag at start.

        Only start and close tags of element_name count towards the
        nesting depth. All other markup is ignored.

        Returns:
            Offset just after the matching close tag, or None if the input
            ends before the element is closed.

        Raises:
            RuntimeError: If no rule exists for element_name, or start is
                not the offset of its start tag
        """
        rule = self._rules_by_name.get(element_name)
        if rule is None:
            raise RuntimeError(
                f"No mask rule for element '<{element_name}>'"
            )
        if not content.startswith(rule.start_tag, start):
            raise RuntimeError(
                f"Expected position {start} to be at start of element '<{element_name}>'"
            )

        position = start + len(rule.start_tag)
        cached = [
            content.find(rule.start_tag, position),
            content.find(rule.close_tag, position),
        ]

        depth = 1
        while depth > 0:
            found, is_close = rule.find_start_or_close(content, position, cached)
            if found < 0:
                return None
            if is_close:
                depth -= 1
                position = found + len(rule.close_tag)
            else:
                depth += 1
                position = found + len(rule.start_tag)
        return position

    def _log_result(self, result: MaskingResult) -> None:
        """Log masked elements. Masked content itself is never logged."""
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        self.logger.log(f"\n{'='*60}")
        self.logger.log(f"Masking Log - {timestamp}")
        self.logger.log(f"{'='*60}")
        for element in result.elements:
            state = "masked" if element.closed else "masked, unterminated"
            self.logger.log(
                f"[{element.name}] {state} (pos: {element.start}-{element.end})"
            )
        if result.truncated:
            self.logger.log(f"Output truncated with {TRUNCATION_MARKER}")
        self.logger.log(f"Total: {result.stats.total_elements} elements masked")


def mask_xml_elements(content: str | None, element_names: Iterable[str]) -> str | None:
    """Mask the given elements in content with a throwaway ElementMasker.

    Args:
        content: XML-like text, or None
        element_names: Names of elements to mask

    Returns:
        Masked text, or None if content is None
    """
    return ElementMasker(element_names).mask(content)
