"""Unit tests for MaskingResult data classes."""

import dataclasses

import pytest

from core.masking_result import MaskedElement, MaskingResult, MaskingStats


class TestMaskingResult:
    """Test MaskingResult data class."""

    def test_from_elements(self):
        elements = [
            MaskedElement("password", 5, 30),
            MaskedElement("secret", 40, 60),
            MaskedElement("password", 70, 90, closed=False),
        ]

        result = MaskingResult.from_elements("<masked/>", elements, truncated=True)

        assert result.masked_text == "<masked/>"
        assert result.elements == tuple(elements)
        assert result.truncated is True
        assert result.stats.total_elements == 3
        assert result.stats.elements_by_name == {"password": 2, "secret": 1}

    def test_to_elements_info(self):
        result = MaskingResult(
            masked_text="<a>***</a>",
            elements=(MaskedElement("a", 0, 10),)
        )

        info = result.to_elements_info()

        assert info == [{"name": "a", "start": 0, "end": 10, "closed": True}]

    def test_empty_result(self):
        result = MaskingResult(masked_text="no elements here")

        assert result.masked_text == "no elements here"
        assert len(result.elements) == 0
        assert result.truncated is False
        assert result.stats == MaskingStats(total_elements=0)
        assert result.to_elements_info() is None

    def test_immutable(self):
        result = MaskingResult(masked_text="x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.masked_text = "y"

    def test_element_defaults_to_closed(self):
        assert MaskedElement("a", 0, 7).closed is True

    def test_counts_are_read_only(self):
        result = MaskingResult.from_elements("x", [MaskedElement("a", 0, 7)])

        with pytest.raises(TypeError):
            result.stats.elements_by_name["a"] = 99

        assert result.stats.elements_by_name == {"a": 1}

    def test_stats_copy_caller_dict(self):
        counts = {"a": 1}
        stats = MaskingStats(total_elements=1, elements_by_name=counts)
        counts["a"] = 5

        assert stats.elements_by_name == {"a": 1}
