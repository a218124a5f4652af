"""
scoring/coherence_calculator.py — ATCF (Adaptive Temporal Coherence Function)

Computes an agent's temporal coherence from four components:

    ATCF = α × HC + β × PI + γ × PC + δ × MCC

Where:
    HC  = historical continuity   — time-decayed identity-kernel similarity
    PI  = present integration     — 0.6 × component compatibility + 0.4 × internal coherence
    PC  = prospective coherence   — 0.6 × projection alignment + 0.4 × adaptive capacity
    MCC = meta-adaptive capacity  — 0.5 × modification ability + 0.5 × coherence maintenance

Every component and the total are clamped to [0, 1].
"""

import math
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from itertools import combinations
from typing import Dict, Optional, Sequence

import structlog

from coordination_framework.models.agent import (
    AgentProfile,
    BROAData,
    FutureProjections,
    IdentitySnapshot,
    PresentState,
    SelfModification,
)
from coordination_framework.models.enumerations import InterpretationLevel
from coordination_framework.models.weights import WeightSet
from coordination_framework.scoring.cultural_adapter import (
    CulturalWeightAdapter,
    culture_name,
)
from coordination_framework.scoring.tables import TIMELINE_FALLBACK, TIMELINE_PLAUSIBILITY
from coordination_framework.scoring.utils import (
    clamp,
    jaccard_similarity,
    mean,
    pearson_correlation,
    population_variance,
    tag_prefix,
    weighted_mean,
)

logger = structlog.get_logger(__name__)

SECONDS_PER_DAY = 86400.0

# Neutral defaults for missing data
MISSING_DATA_SCORE = 0.5
DEFAULT_VALUE_ALIGNMENT = 0.75
DEFAULT_MODIFICATION_ABILITY = 0.3
DEFAULT_COHERENCE_MAINTENANCE = 0.5

OPTIMAL_BELIEF_VARIANCE = 0.1
RULE_SATURATION_COUNT = 5
GOAL_TYPE_SATURATION = 5
EXPECTED_ONTOLOGY_CATEGORIES = ("agency_conception", "time_orientation", "relationship_model")


@dataclass(frozen=True)
class Interpretation:
    level: InterpretationLevel
    description: str
    recommendation: str


@dataclass(frozen=True)
class CulturalAdaptation:
    original_weights: WeightSet
    adapted_weights: WeightSet
    cultural_context: Optional[str]


@dataclass(frozen=True)
class CoherenceComponents:
    """The four ATCF components, each in [0, 1]."""
    historical_continuity: float
    present_integration: float
    prospective_coherence: float
    meta_adaptive_capacity: float

    def as_dict(self) -> Dict[str, float]:
        return {
            "HC": self.historical_continuity,
            "PI": self.present_integration,
            "PC": self.prospective_coherence,
            "MCC": self.meta_adaptive_capacity,
        }

    def weighted_total(self, weights: WeightSet) -> float:
        """Σ weight × component, clamped to [0, 1]."""
        return clamp(
            weights.historical * self.historical_continuity
            + weights.present * self.present_integration
            + weights.prospective * self.prospective_coherence
            + weights.meta_adaptive * self.meta_adaptive_capacity
        )


@dataclass(frozen=True)
class ScoreResult:
    """Output of CoherenceScorer.score()."""
    total_score: float                  # [0, 1]
    components: CoherenceComponents
    weights: WeightSet
    assessed_at: datetime
    interpretation: Interpretation
    cultural_adaptation: Optional[CulturalAdaptation] = None


_INTERPRETATION_BANDS = (
    (0.8, Interpretation(
        InterpretationLevel.EXCELLENT,
        "Excellent temporal coherence",
        "Maintain current practices and consider mentoring others",
    )),
    (0.7, Interpretation(
        InterpretationLevel.GOOD,
        "Good temporal coherence",
        "Continue current development with minor optimizations",
    )),
    (0.5, Interpretation(
        InterpretationLevel.MODERATE,
        "Moderate temporal coherence",
        "Focus on strengthening weak components through targeted interventions",
    )),
    (0.3, Interpretation(
        InterpretationLevel.LOW,
        "Low temporal coherence",
        "Comprehensive intervention recommended - consider temporal coherence therapy",
    )),
)

_VERY_LOW = Interpretation(
    InterpretationLevel.VERY_LOW,
    "Very low temporal coherence",
    "Immediate intervention required - consult with trained practitioner",
)


def interpret_coherence_score(score: float) -> Interpretation:
    """Map an ATCF score onto its five-band interpretation."""
    for threshold, interpretation in _INTERPRETATION_BANDS:
        if score >= threshold:
            return interpretation
    return _VERY_LOW


class CoherenceScorer:
    """
    Calculate the ATCF score of an agent.

    The scorer holds only configuration (base weights, decay constant and
    the cultural adapter); scoring never mutates it.
    """

    def __init__(
        self,
        weights: Optional[WeightSet] = None,
        decay_days: Optional[float] = None,
        adapter: Optional[CulturalWeightAdapter] = None,
    ):
        if weights is None or decay_days is None:
            from coordination_framework.config import get_settings
            settings = get_settings()
            if weights is None:
                weights = settings.weight_set
            if decay_days is None:
                decay_days = settings.TEMPORAL_DECAY_DAYS
        if decay_days <= 0:
            raise ValueError(f"decay_days must be > 0, got {decay_days}")

        self.weights = weights
        self.decay_days = decay_days
        self.adapter = adapter or CulturalWeightAdapter()

    # ------------------------------------------------------------------
    # Historical continuity (HC)
    # ------------------------------------------------------------------

    def historical_continuity(
        self,
        history: Sequence[IdentitySnapshot],
        current_kernel: Sequence[str],
        now: datetime,
    ) -> float:
        """
        Time-decayed mean Jaccard similarity between the current kernel and
        each historical snapshot.

        Formula:
            HC = Σ e^(−Δdays/τ) × J(current, snapshot) / Σ e^(−Δdays/τ)

        Snapshots dated after ``now`` count with Δdays = 0.
        Returns 0.0 for an empty history.
        """
        if not history:
            return 0.0

        similarities = []
        decay_weights = []
        now = _as_utc(now)
        for snapshot in history:
            age_days = max(0.0, (now - _as_utc(snapshot.timestamp)).total_seconds() / SECONDS_PER_DAY)
            decay_weights.append(math.exp(-age_days / self.decay_days))
            similarities.append(jaccard_similarity(current_kernel, snapshot.identity_kernel))

        return weighted_mean(similarities, decay_weights)

    # ------------------------------------------------------------------
    # Present integration (PI)
    # ------------------------------------------------------------------

    def present_integration(self, present_state: PresentState, broa: BROAData) -> float:
        """PI = 0.6 × component compatibility + 0.4 × internal coherence."""
        compatibility = self.component_compatibility(present_state)
        internal = self.internal_coherence(broa)
        return 0.6 * compatibility + 0.4 * internal

    @staticmethod
    def component_compatibility(present_state: PresentState) -> float:
        """Mean |Pearson r| over every pair of present-state components."""
        vectors = [list(component.values()) for component in present_state.components()]
        correlations = [
            abs(pearson_correlation(first, second))
            for first, second in combinations(vectors, 2)
        ]
        return mean(correlations, default=MISSING_DATA_SCORE)

    def internal_coherence(self, broa: BROAData) -> float:
        """Unweighted mean of belief, rule, ontology and value-alignment checks."""
        value_alignment = DEFAULT_VALUE_ALIGNMENT
        if broa.authenticity is not None and broa.authenticity.value_alignment is not None:
            value_alignment = broa.authenticity.value_alignment

        return mean([
            self.belief_consistency(broa.beliefs),
            self.rule_coherence(broa.rules),
            self.ontology_alignment(broa.ontology),
            value_alignment,
        ])

    @staticmethod
    def belief_consistency(beliefs: Optional[Dict[str, float]]) -> float:
        """
        How close belief variance is to the optimum (0.1).

        Formula: clamp(1 − |Var(beliefs) − 0.1|)
        Missing or empty beliefs → 0.5.
        """
        if not beliefs:
            return MISSING_DATA_SCORE
        variance = population_variance(list(beliefs.values()))
        return clamp(1 - abs(variance - OPTIMAL_BELIEF_VARIANCE))

    @staticmethod
    def rule_coherence(rules: Optional[Dict[str, str]]) -> float:
        """min(1, rule count / 5); missing rules → 0.5."""
        if rules is None:
            return MISSING_DATA_SCORE
        return min(1.0, len(rules) / RULE_SATURATION_COUNT)

    @staticmethod
    def ontology_alignment(ontology: Optional[Dict[str, str]]) -> float:
        """Share of the expected ontology categories that are filled in."""
        if ontology is None:
            return MISSING_DATA_SCORE
        present = [cat for cat in EXPECTED_ONTOLOGY_CATEGORIES if ontology.get(cat)]
        return len(present) / len(EXPECTED_ONTOLOGY_CATEGORIES)

    # ------------------------------------------------------------------
    # Prospective coherence (PC)
    # ------------------------------------------------------------------

    def prospective_coherence(
        self,
        projections: FutureProjections,
        identity_kernel: Sequence[str],
    ) -> float:
        """PC = 0.6 × projection alignment + 0.4 × adaptive capacity."""
        alignment = self.projection_alignment(projections, identity_kernel)
        capacity = self.adaptive_capacity(projections)
        return 0.6 * alignment + 0.4 * capacity

    @staticmethod
    def projection_alignment(
        projections: FutureProjections,
        identity_kernel: Sequence[str],
    ) -> float:
        """
        Blend of goal/kernel term overlap and the stated alignment.

        A goal overlaps when it contains a kernel term or is contained in
        one (case-insensitive). Missing goals or kernel → 0.5. A missing
        stated alignment falls back to the overlap ratio.
        """
        goals = projections.goals
        if not goals or not identity_kernel:
            return MISSING_DATA_SCORE

        kernel_terms = [term.lower() for term in identity_kernel]
        overlapping = [
            goal for goal in goals
            if any(term in goal.lower() or goal.lower() in term for term in kernel_terms)
        ]
        overlap_ratio = len(overlapping) / len(goals)

        stated = projections.alignment_with_identity
        explicit = overlap_ratio if stated is None else stated
        return (overlap_ratio + explicit) / 2

    @staticmethod
    def adaptive_capacity(projections: FutureProjections) -> float:
        """Mean of goal-type diversity and timeline plausibility."""
        goals = projections.goals or ()
        goal_types = {tag_prefix(goal) for goal in goals}
        diversity = min(1.0, len(goal_types) / GOAL_TYPE_SATURATION)
        return (diversity + timeline_plausibility(projections.timeline)) / 2

    # ------------------------------------------------------------------
    # Meta-adaptive capacity (MCC)
    # ------------------------------------------------------------------

    @staticmethod
    def meta_adaptive_capacity(self_modification: SelfModification) -> float:
        """MCC = 0.5 × modification ability + 0.5 × coherence maintenance."""
        history = self_modification.modification_history
        if not history:
            ability = DEFAULT_MODIFICATION_ABILITY
        else:
            distinct_types = len({tag_prefix(mod) for mod in history})
            ability = min(1.0, len(history) * 0.2 + distinct_types * 0.1)

        maintenance = self_modification.coherence_maintenance_capacity
        if maintenance is None:
            maintenance = DEFAULT_COHERENCE_MAINTENANCE

        return 0.5 * ability + 0.5 * maintenance

    # ------------------------------------------------------------------
    # Composite
    # ------------------------------------------------------------------

    def score(
        self,
        agent: AgentProfile,
        now: Optional[datetime] = None,
        weights: Optional[WeightSet] = None,
    ) -> ScoreResult:
        """
        Calculate the ATCF score.

        Args:
            agent: Agent to score.
            now: Reference time for history decay. Defaults to the current
                 UTC time; pass it explicitly for reproducible results.
            weights: Weights to use instead of the scorer's base weights.

        Returns:
            ScoreResult with total, components, weights and interpretation.
        """
        now = now or datetime.now(timezone.utc)
        if weights is None:
            weights = self.weights

        components = CoherenceComponents(
            historical_continuity=clamp(self.historical_continuity(
                agent.identity_history, agent.identity_kernel, now
            )),
            present_integration=clamp(self.present_integration(
                agent.present_state, agent.broa
            )),
            prospective_coherence=clamp(self.prospective_coherence(
                agent.future_projections, agent.identity_kernel
            )),
            meta_adaptive_capacity=clamp(self.meta_adaptive_capacity(
                agent.self_modification
            )),
        )

        total = components.weighted_total(weights)
        interpretation = interpret_coherence_score(total)

        logger.info(
            "coherence_scored",
            agent_id=agent.agent_id,
            components=components.as_dict(),
            weights=weights.as_dict(),
            total_score=total,
            level=interpretation.level.value,
        )

        return ScoreResult(
            total_score=total,
            components=components,
            weights=weights,
            assessed_at=now,
            interpretation=interpretation,
        )

    def score_culturally_adapted(
        self,
        agent: AgentProfile,
        now: Optional[datetime] = None,
    ) -> ScoreResult:
        """
        Score with weights adapted to ``agent.cultural_background``.

        The adapted weights are passed explicitly to ``score``; the scorer's
        base weights are never swapped out.
        """
        adapted = self.adapter.adapt(self.weights, agent.cultural_background)
        result = self.score(agent, now=now, weights=adapted)
        return replace(
            result,
            cultural_adaptation=CulturalAdaptation(
                original_weights=self.weights,
                adapted_weights=adapted,
                cultural_context=culture_name(agent.cultural_background),
            ),
        )


def timeline_plausibility(timeline: Optional[str]) -> float:
    """Static plausibility of a timeline bucket; unknown buckets → 0.5."""
    if timeline is None:
        return TIMELINE_FALLBACK
    plausibility = TIMELINE_PLAUSIBILITY.get(timeline)
    if plausibility is None:
        logger.debug("unknown_timeline", timeline=timeline)
        return TIMELINE_FALLBACK
    return plausibility


def _as_utc(moment: datetime) -> datetime:
    """Naive datetimes are taken to be UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment
