"""Tests for infrastructure/filters/spec.py."""

import pytest

from imagefilter.domain.exceptions import InvalidPatternError
from imagefilter.domain.model.filter_spec import FilterSpec
from imagefilter.infrastructure.filters import from_spec
from tests.factories import RecordingTagMatcher, make_image, make_images


class TestFromSpec:
    def test_same_result_as_matches(self) -> None:
        spec = FilterSpec.instance(match_any=True, regex="^prod-.*").with_tags({"env": "prod"})
        images = (
            make_image("prod-web"),
            make_image("dev-web", tags={"env": "prod"}),
            make_image("dev-db", tags={"env": "dev"}),
        )
        flt = from_spec(spec)
        assert [flt(i) for i in images] == [spec.matches(i) for i in images] == [True, True, False]

    def test_uses_tag_matcher(self) -> None:
        matcher = RecordingTagMatcher(answer=False)
        flt = from_spec(FilterSpec.instance().with_tags({"env": "prod"}), matcher)
        assert flt(make_image(tags={"env": "prod"})) is False
        assert len(matcher.calls) == 1

    def test_filters_collection(self) -> None:
        flt = from_spec(FilterSpec.instance(regex="web-.*"))
        kept = [i.name for i in make_images("web-1", "db-1", "web-2", description=None) if flt(i)]
        assert kept == ["web-1", "web-2"]

    def test_invalid_regex_raises_when_called(self) -> None:
        flt = from_spec(FilterSpec.instance(regex="[a-"))
        with pytest.raises(InvalidPatternError):
            flt(make_image())
