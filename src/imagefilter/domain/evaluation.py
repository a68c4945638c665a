"""Staged evaluation of a FilterSpec against one image.

Criteria run as an ordered tuple of stages. Each stage is HARD or SOFT
and produces a Verdict; the first non-PASS_CONTINUE verdict decides.

Decision table (hit = stage predicate result):

    kind  mode  hit    verdict
    HARD  any   True   PASS_CONTINUE
    HARD  any   False  FAIL_NOW
    SOFT  ALL   True   PASS_CONTINUE
    SOFT  ALL   False  FAIL_NOW
    SOFT  ANY   True   SUCCEED_NOW
    SOFT  ANY   False  PASS_CONTINUE

No stage decided: ALL -> match, ANY -> no match. So an ANY spec
without soft criteria matches nothing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from imagefilter.domain.model.enums import CriterionKind, MatchMode, Verdict
from imagefilter.domain.predicates.image_predicates import (
    has_image_class,
    is_owned_by,
    matches_regex,
    satisfies_tags,
)
from imagefilter.domain.predicates.tag_predicates import match_tags

if TYPE_CHECKING:
    from collections.abc import Iterator

    from imagefilter.domain.model.filter_spec import FilterSpec
    from imagefilter.domain.ports.image import ImageRecord
    from imagefilter.domain.ports.tag_matcher import TagMatcher
    from imagefilter.domain.predicates.base import ImagePredicate

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Stage:
    """One criterion in evaluation order.

    Attributes:
        name: Criterion name (class, account, regex, tags)
        kind: HARD or SOFT
        predicate: Criterion test
    """

    name: str
    kind: CriterionKind
    predicate: ImagePredicate

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("stage name must not be empty")
        if not callable(self.predicate):
            raise TypeError(f"predicate must be callable, got {type(self.predicate).__name__}")


@dataclass(frozen=True, slots=True)
class StageOutcome:
    """Result of one executed stage."""

    name: str
    kind: CriterionKind
    hit: bool
    verdict: Verdict


@dataclass(frozen=True, slots=True)
class Evaluation:
    """Trace of a full evaluation.

    Attributes:
        matched: Final result, always equal to FilterSpec.matches()
        mode: Match mode used
        outcomes: Executed stages in order (stages after a decision are absent)
    """

    matched: bool
    mode: MatchMode
    outcomes: tuple[StageOutcome, ...] = ()

    @property
    def decided_by(self) -> str | None:
        """Name of the stage that short-circuited, None if terminal fallback decided."""
        if self.outcomes and self.outcomes[-1].verdict is not Verdict.PASS_CONTINUE:
            return self.outcomes[-1].name
        return None


def build_stages(spec: FilterSpec, tag_matcher: TagMatcher | None = None) -> tuple[Stage, ...]:
    """Build ordered stages for configured criteria.

    Order: class, account (HARD), then regex, tags (SOFT).
    Unconfigured criteria produce no stage.

    Args:
        spec: Filter specification
        tag_matcher: Tag matching rule. None = match_tags.

    Returns:
        Stages in evaluation order
    """
    stages: list[Stage] = []
    if spec.image_class is not None:
        stages.append(Stage("class", CriterionKind.HARD, has_image_class(spec.image_class)))
    if spec.account_number is not None:
        stages.append(Stage("account", CriterionKind.HARD, is_owned_by(spec.account_number)))
    if spec.regex is not None:
        stages.append(Stage("regex", CriterionKind.SOFT, matches_regex(spec.regex)))
    if spec.tags:
        matcher = tag_matcher if tag_matcher is not None else match_tags
        stages.append(Stage("tags", CriterionKind.SOFT, satisfies_tags(spec.tags, matcher)))
    return tuple(stages)


def decide(kind: CriterionKind, mode: MatchMode, hit: bool) -> Verdict:
    """Map one criterion result to a verdict (see module decision table)."""
    if kind is CriterionKind.HARD or mode is MatchMode.ALL:
        return Verdict.PASS_CONTINUE if hit else Verdict.FAIL_NOW
    return Verdict.SUCCEED_NOW if hit else Verdict.PASS_CONTINUE


def apply_stage(stage: Stage, mode: MatchMode, image: ImageRecord) -> Verdict:
    """Run one stage against image.

    Args:
        stage: Stage to run
        mode: Match mode
        image: Candidate

    Returns:
        Verdict for this stage
    """
    return _outcome(stage, mode, image).verdict


def terminal_result(mode: MatchMode) -> bool:
    """Result when no stage decided: True for ALL, False for ANY."""
    return mode is MatchMode.ALL


def _outcome(stage: Stage, mode: MatchMode, image: ImageRecord) -> StageOutcome:
    hit = stage.predicate(image)
    verdict = decide(stage.kind, mode, hit)
    return StageOutcome(name=stage.name, kind=stage.kind, hit=hit, verdict=verdict)


def _run(stages: tuple[Stage, ...], mode: MatchMode, image: ImageRecord) -> Iterator[StageOutcome]:
    """Yield outcomes up to and including the deciding stage."""
    for stage in stages:
        outcome = _outcome(stage, mode, image)
        yield outcome
        if outcome.verdict is not Verdict.PASS_CONTINUE:
            logger.debug("stage %s decided %s", stage.name, outcome.verdict.name)
            return


def _result(outcomes: tuple[StageOutcome, ...], mode: MatchMode) -> bool:
    if outcomes:
        last = outcomes[-1].verdict
        if last is Verdict.FAIL_NOW:
            return False
        if last is Verdict.SUCCEED_NOW:
            return True
    return terminal_result(mode)


def evaluate(stages: tuple[Stage, ...], mode: MatchMode, image: ImageRecord) -> bool:
    """Evaluate stages against image.

    Args:
        stages: Stages from build_stages()
        mode: Match mode
        image: Candidate (not mutated)

    Returns:
        True if image matches

    Raises:
        InvalidPatternError: If a regex stage pattern does not compile
    """
    return _result(tuple(_run(stages, mode, image)), mode)


def explain(
    spec: FilterSpec,
    image: ImageRecord,
    tag_matcher: TagMatcher | None = None,
) -> Evaluation:
    """Evaluate spec against image and record every executed stage.

    Args:
        spec: Filter specification
        image: Candidate
        tag_matcher: Tag matching rule. None = match_tags.

    Returns:
        Evaluation trace
    """
    outcomes = tuple(_run(build_stages(spec, tag_matcher), spec.match_mode, image))
    return Evaluation(
        matched=_result(outcomes, spec.match_mode),
        mode=spec.match_mode,
        outcomes=outcomes,
    )
