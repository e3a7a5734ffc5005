"""Decision analysis engine.

Turns the pros/cons recorded for each (option, criterion) pair into a
weighted score per option, plus a risk bucket and a confidence percentage,
and picks the recommended option.

The engine is a pure function over an in-memory snapshot. It performs no I/O
and holds no state, so it can be called concurrently for any decision.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Hashable, Sequence

from clarify.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

MAX_WEIGHT = 5

# Net impact in [-IMPACT_RANGE, +IMPACT_RANGE] maps linearly onto [0, 1].
# Anything beyond saturates at the bounds.
IMPACT_RANGE = 10

LOW_RISK_THRESHOLD = 0.25
MEDIUM_RISK_THRESHOLD = 0.5

RISK_LOW = "Low"
RISK_MEDIUM = "Medium"
RISK_HIGH = "High"
RISK_UNKNOWN = "Unknown"


@dataclass(frozen=True)
class ImpactItem:
    """A single pro or con with its impact score (1-5)."""

    text: str
    impact_score: int


@dataclass(frozen=True)
class OptionInput:
    id: Hashable
    name: str


@dataclass(frozen=True)
class CriterionInput:
    id: Hashable
    name: str
    weight: int


@dataclass(frozen=True)
class EvaluationInput:
    option_id: Hashable
    criteria_id: Hashable
    pros: tuple[ImpactItem, ...] = ()
    cons: tuple[ImpactItem, ...] = ()


@dataclass(frozen=True)
class CriterionDetail:
    """Per-criterion breakdown kept for explainability."""

    criteria_id: Hashable
    criteria_name: str
    weight: int
    weight_norm: float
    net_impact: int
    norm_impact: float
    score: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "criteriaId": self.criteria_id,
            "criteriaName": self.criteria_name,
            "weight": self.weight,
            "weightNorm": self.weight_norm,
            "netImpact": self.net_impact,
            "normImpact": self.norm_impact,
            "score": self.score,
        }


@dataclass(frozen=True)
class OptionResult:
    option_id: Hashable
    name: str
    score: int
    risk: str
    confidence: int
    details: tuple[CriterionDetail, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "optionId": self.option_id,
            "name": self.name,
            "score": self.score,
            "risk": self.risk,
            "confidence": self.confidence,
            "details": [d.to_dict() for d in self.details],
        }


@dataclass(frozen=True)
class AnalysisReport:
    results: tuple[OptionResult, ...]
    recommended: OptionResult | None

    def to_dict(self) -> dict[str, Any]:
        return {
            "results": [r.to_dict() for r in self.results],
            "recommended": self.recommended.to_dict() if self.recommended else None,
        }


@dataclass
class _OptionTally:
    """Running totals for one option while criteria are walked."""

    option: OptionInput
    total_score: float = 0.0
    total_pros_impact: int = 0
    total_cons_impact: int = 0
    filled_criteria: set = field(default_factory=set)
    details: list[CriterionDetail] = field(default_factory=list)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def normalize_impact(net_impact: float) -> float:
    """Map a net impact onto [0, 1], clamping values outside +/-IMPACT_RANGE."""
    norm = (net_impact + IMPACT_RANGE) / (2 * IMPACT_RANGE)
    return min(max(norm, 0.0), 1.0)


def classify_risk(pros_impact: int, cons_impact: int) -> str:
    """Bucket an option by the share of its total impact that comes from cons.

    Boundaries belong to the higher bucket: a ratio of exactly 0.25 is
    Medium and exactly 0.5 is High.
    """
    total_impact = pros_impact + cons_impact
    if total_impact == 0:
        return RISK_UNKNOWN

    risk_ratio = cons_impact / total_impact
    if risk_ratio < LOW_RISK_THRESHOLD:
        return RISK_LOW
    if risk_ratio < MEDIUM_RISK_THRESHOLD:
        return RISK_MEDIUM
    return RISK_HIGH


def compute_confidence(filled_criteria: int, total_criteria: int) -> int:
    """Percentage of criteria that have an evaluation for an option."""
    if total_criteria <= 0:
        return 0
    return _round_half_up(100 * filled_criteria / total_criteria)


def _sum_impact(items: Sequence[ImpactItem]) -> int:
    return sum(item.impact_score for item in items or ())


def analyze(
    options: Sequence[OptionInput],
    criteria: Sequence[CriterionInput],
    evaluations: Sequence[EvaluationInput],
) -> AnalysisReport:
    """Score every option and pick the recommended one.

    Args:
        options: Candidate options, in the order used for tie-breaking.
        criteria: Weighted criteria (weight 1-5).
        evaluations: Pros/cons per (option, criterion) pair. Evaluations
            that point at an unknown option or criterion are skipped.

    Returns:
        An AnalysisReport with one result per option, in input order, and
        the first option holding the highest score as ``recommended``.

    Raises:
        ValidationError: If there are no options or no criteria.
    """
    if not options or not criteria:
        raise ValidationError(
            "Need at least one option and one criterion to analyze"
        )

    tallies: dict[Hashable, _OptionTally] = {}
    for option in options:
        tallies.setdefault(option.id, _OptionTally(option=option))

    skipped = 0
    for criterion in criteria:
        weight_norm = criterion.weight / MAX_WEIGHT

        for evaluation in evaluations:
            if evaluation.criteria_id != criterion.id:
                continue

            tally = tallies.get(evaluation.option_id)
            if tally is None or criterion.id in tally.filled_criteria:
                skipped += 1
                continue

            pros_impact = _sum_impact(evaluation.pros)
            cons_impact = _sum_impact(evaluation.cons)
            net_impact = pros_impact - cons_impact
            norm_impact = normalize_impact(net_impact)
            score = weight_norm * norm_impact * 100

            tally.total_score += score
            tally.total_pros_impact += pros_impact
            tally.total_cons_impact += cons_impact
            tally.filled_criteria.add(criterion.id)
            tally.details.append(
                CriterionDetail(
                    criteria_id=criterion.id,
                    criteria_name=criterion.name,
                    weight=criterion.weight,
                    weight_norm=weight_norm,
                    net_impact=net_impact,
                    norm_impact=norm_impact,
                    score=score,
                )
            )

    if skipped:
        logger.debug("Skipped %d dangling or duplicate evaluations", skipped)

    total_criteria = len(criteria)
    results: list[OptionResult] = []
    recommended: OptionResult | None = None

    for tally in tallies.values():
        result = OptionResult(
            option_id=tally.option.id,
            name=tally.option.name,
            score=_round_half_up(tally.total_score),
            risk=classify_risk(tally.total_pros_impact, tally.total_cons_impact),
            confidence=compute_confidence(len(tally.filled_criteria), total_criteria),
            details=tuple(tally.details),
        )
        results.append(result)

        # Strict comparison keeps the first option on ties
        if recommended is None or result.score > recommended.score:
            recommended = result

    return AnalysisReport(results=tuple(results), recommended=recommended)
