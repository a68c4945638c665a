"""Tests for domain/model/selection.py."""

import pytest

from imagefilter.domain.exceptions import InvalidConfigError
from imagefilter.domain.model.filter_spec import FilterSpec
from imagefilter.domain.model.selection import DEFAULT_PAGE_SIZE, SelectionResult, SelectorConfig
from tests.factories import make_images


class TestSelectorConfig:
    """Tests for SelectorConfig."""

    def test_defaults(self) -> None:
        config = SelectorConfig()
        assert config.max_matches is None
        assert config.page_size == DEFAULT_PAGE_SIZE

    def test_custom(self) -> None:
        config = SelectorConfig(max_matches=5, page_size=10)
        assert config.max_matches == 5
        assert config.page_size == 10

    @pytest.mark.parametrize("value", [0, -1])
    def test_bad_max_matches_raises(self, value: int) -> None:
        with pytest.raises(InvalidConfigError, match="max_matches must be >= 1"):
            SelectorConfig(max_matches=value)

    def test_bad_page_size_raises(self) -> None:
        with pytest.raises(InvalidConfigError) as exc_info:
            SelectorConfig(page_size=0)
        assert exc_info.value.field == "page_size"
        assert exc_info.value.value == 0


class TestSelectionResult:
    """Tests for SelectionResult."""

    def test_counts(self) -> None:
        images = make_images("a", "b")
        result = SelectionResult(spec=FilterSpec.instance(), matched=images, examined=5, pages=1)
        assert result.match_count == 2
        assert result.rejected_count == 3
        assert result.truncated is False

    def test_examined_below_matched_raises(self) -> None:
        with pytest.raises(ValueError, match="examined"):
            SelectionResult(spec=FilterSpec.instance(), matched=make_images("a", "b"), examined=1, pages=1)

    def test_negative_pages_raises(self) -> None:
        with pytest.raises(ValueError, match="pages must be >= 0"):
            SelectionResult(spec=FilterSpec.instance(), matched=(), examined=0, pages=-1)
