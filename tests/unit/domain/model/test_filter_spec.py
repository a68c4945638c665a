"""Tests for domain/model/filter_spec.py."""

from dataclasses import FrozenInstanceError

import pytest

from imagefilter.domain.exceptions import MissingArgumentError
from imagefilter.domain.model.enums import ImageClass, MatchMode
from imagefilter.domain.model.filter_spec import FilterSpec, FilterSpecBuilder


class TestInstance:
    """Tests for FilterSpec.instance factory."""

    def test_no_arguments(self) -> None:
        spec = FilterSpec.instance()
        assert spec.image_class is None
        assert spec.account_number is None
        assert spec.match_mode is MatchMode.ALL
        assert spec.regex is None
        assert spec.tags is None

    def test_match_any(self) -> None:
        assert FilterSpec.instance(match_any=True).match_mode is MatchMode.ANY

    def test_image_class(self) -> None:
        spec = FilterSpec.instance(ImageClass.KERNEL)
        assert spec.image_class is ImageClass.KERNEL
        assert spec.match_mode is MatchMode.ALL

    def test_image_class_and_mode(self) -> None:
        spec = FilterSpec.instance(ImageClass.RAMDISK, True)
        assert spec.image_class is ImageClass.RAMDISK
        assert spec.match_any is True

    def test_regex_only(self) -> None:
        spec = FilterSpec.instance(regex="^prod-.*")
        assert spec.image_class is None
        assert spec.regex == "^prod-.*"
        assert spec.match_mode is MatchMode.ALL

    def test_mode_and_regex(self) -> None:
        spec = FilterSpec.instance(match_any=True, regex="web")
        assert spec.match_any is True
        assert spec.regex == "web"

    def test_full_seed(self) -> None:
        spec = FilterSpec.instance(ImageClass.MACHINE, True, "web")
        assert spec.image_class is ImageClass.MACHINE
        assert spec.match_mode is MatchMode.ANY
        assert spec.regex == "web"

    def test_empty_regex_raises(self) -> None:
        with pytest.raises(MissingArgumentError, match="regex"):
            FilterSpec.instance(regex="")


class TestFluentSetters:
    """Tests for copy-on-write fluent setters."""

    def test_with_account_number(self) -> None:
        spec = FilterSpec.instance().with_account_number("123")
        assert spec.account_number == "123"

    def test_with_image_class(self) -> None:
        spec = FilterSpec.instance().with_image_class(ImageClass.KERNEL)
        assert spec.image_class is ImageClass.KERNEL

    def test_with_tags(self) -> None:
        spec = FilterSpec.instance().with_tags({"env": "prod"})
        assert dict(spec.tags or {}) == {"env": "prod"}

    def test_matching_regex(self) -> None:
        assert FilterSpec.instance().matching_regex("a.*").regex == "a.*"

    def test_matching_any_then_all(self) -> None:
        spec = FilterSpec.instance().matching_any()
        assert spec.match_mode is MatchMode.ANY
        assert spec.matching_all().match_mode is MatchMode.ALL

    def test_setters_do_not_mutate_receiver(self) -> None:
        base = FilterSpec.instance()
        derived = base.with_account_number("123").matching_any()
        assert base.account_number is None
        assert base.match_mode is MatchMode.ALL
        assert derived.account_number == "123"

    def test_chaining_keeps_all_fields(self) -> None:
        spec = (
            FilterSpec.instance(ImageClass.MACHINE)
            .with_account_number("123")
            .with_tags({"env": "prod"})
            .matching_regex("web-.*")
            .matching_any()
        )
        assert spec.image_class is ImageClass.MACHINE
        assert spec.account_number == "123"
        assert spec.regex == "web-.*"
        assert spec.match_any is True
        assert spec.has_soft_criteria is True

    @pytest.mark.parametrize(
        ("setter", "value", "argument"),
        [
            ("with_account_number", None, "account_number"),
            ("with_account_number", "", "account_number"),
            ("with_image_class", None, "image_class"),
            ("with_tags", None, "tags"),
            ("with_tags", {}, "tags"),
            ("matching_regex", None, "regex"),
            ("matching_regex", "", "regex"),
        ],
    )
    def test_absent_argument_raises(self, setter: str, value: object, argument: str) -> None:
        spec = FilterSpec.instance()
        with pytest.raises(MissingArgumentError) as exc_info:
            getattr(spec, setter)(value)
        assert exc_info.value.argument == argument


class TestFilterSpecInvariants:
    """Tests for FAIL-FIRST validation and immutability."""

    def test_is_frozen(self) -> None:
        spec = FilterSpec.instance()
        with pytest.raises(FrozenInstanceError):
            spec.regex = "x"  # type: ignore[misc]

    def test_tags_are_copied(self) -> None:
        tags = {"env": "prod"}
        spec = FilterSpec.instance().with_tags(tags)
        tags["env"] = "dev"
        assert spec.tags is not None
        assert spec.tags["env"] == "prod"

    def test_tags_read_only(self) -> None:
        spec = FilterSpec.instance().with_tags({"env": "prod"})
        with pytest.raises(TypeError):
            spec.tags["env"] = "dev"  # type: ignore[index]

    def test_wrong_image_class_type_raises(self) -> None:
        with pytest.raises(TypeError, match="image_class must be ImageClass"):
            FilterSpec(image_class="MACHINE")  # type: ignore[arg-type]

    def test_wrong_mode_type_raises(self) -> None:
        with pytest.raises(TypeError, match="match_mode must be MatchMode"):
            FilterSpec(match_mode="ANY")  # type: ignore[arg-type]

    def test_empty_account_raises(self) -> None:
        with pytest.raises(MissingArgumentError):
            FilterSpec(account_number="")

    def test_equality(self) -> None:
        assert FilterSpec.instance(ImageClass.MACHINE) == FilterSpec(image_class=ImageClass.MACHINE)

    def test_no_soft_criteria(self) -> None:
        assert FilterSpec.instance(ImageClass.MACHINE).has_soft_criteria is False


class TestFilterSpecStr:
    """Tests for diagnostic rendering."""

    def test_default(self) -> None:
        assert str(FilterSpec.instance()) == "[Match ALL: accountNumber=None,imageClass=None,regex=None]"

    def test_all_fields(self) -> None:
        spec = FilterSpec.instance(ImageClass.MACHINE, True, "^prod-.*").with_account_number("acct1")
        assert str(spec) == "[Match ANY: accountNumber=acct1,imageClass=MACHINE,regex=^prod-.*]"

    def test_tags_sorted(self) -> None:
        spec = FilterSpec.instance().with_tags({"team": "web", "env": "prod"})
        assert str(spec).endswith(",tags={'env': 'prod', 'team': 'web'}]")

    def test_deterministic(self) -> None:
        spec = FilterSpec.instance(ImageClass.KERNEL).with_tags({"b": "2", "a": "1"})
        assert str(spec) == str(spec)


class TestFilterSpecBuilder:
    """Tests for FilterSpecBuilder."""

    def test_empty_build(self) -> None:
        assert FilterSpecBuilder().build() == FilterSpec.instance()

    def test_seeded(self) -> None:
        spec = FilterSpecBuilder(ImageClass.KERNEL, True, "k-.*").build()
        assert spec == FilterSpec.instance(ImageClass.KERNEL, True, "k-.*")

    def test_chaining_returns_builder(self) -> None:
        builder = FilterSpec.builder()
        assert builder.with_account_number("1") is builder
        assert builder.with_image_class(ImageClass.MACHINE) is builder
        assert builder.with_tags({"a": "b"}) is builder
        assert builder.matching_regex("x") is builder
        assert builder.matching_any() is builder
        assert builder.matching_all() is builder

    def test_full_build(self) -> None:
        spec = (
            FilterSpecBuilder()
            .with_image_class(ImageClass.MACHINE)
            .with_account_number("acct1")
            .with_tags({"env": "prod"})
            .matching_regex("^prod-.*")
            .matching_any()
            .build()
        )
        assert spec.image_class is ImageClass.MACHINE
        assert spec.account_number == "acct1"
        assert spec.match_mode is MatchMode.ANY
        assert spec.regex == "^prod-.*"
        assert dict(spec.tags or {}) == {"env": "prod"}

    def test_built_spec_independent_of_builder(self) -> None:
        builder = FilterSpecBuilder().with_account_number("1")
        spec = builder.build()
        builder.with_account_number("2").matching_any()
        assert spec.account_number == "1"
        assert spec.match_mode is MatchMode.ALL

    def test_builder_setter_rejects_none(self) -> None:
        with pytest.raises(MissingArgumentError, match="account_number"):
            FilterSpecBuilder().with_account_number(None)  # type: ignore[arg-type]

    def test_builder_rejects_empty_seed_regex(self) -> None:
        with pytest.raises(MissingArgumentError, match="regex"):
            FilterSpecBuilder(regex="")

    def test_to_builder_round_trip(self) -> None:
        spec = FilterSpec.instance(ImageClass.MACHINE, True, "x").with_account_number("1").with_tags({"a": "b"})
        assert spec.to_builder().build() == spec

    def test_to_builder_extends_copy(self) -> None:
        spec = FilterSpec.instance(ImageClass.MACHINE)
        extended = spec.to_builder().with_account_number("9").build()
        assert extended.account_number == "9"
        assert spec.account_number is None
