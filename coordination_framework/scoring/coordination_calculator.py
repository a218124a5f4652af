"""
scoring/coordination_calculator.py

Assesses the coordination potential of two agents.

Formula:
    Potential = 0.30 × min(ATCF_A, ATCF_B)
              + 0.25 × PRF compatibility
              + 0.25 × capability overlap
              + 0.20 × cultural coordination

Where:
    - ATCF values are culturally adapted (CoherenceScorer.score_culturally_adapted)
    - Capability overlap = 0.4 × Jaccard + 0.6 × min(1, 2 × complementarity)
    - Cultural coordination = 0.8 for identical cultures, else matrix lookup
    - Result clamped to [0, 1]
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, List, Optional, Sequence, Tuple

import structlog

from coordination_framework.models.agent import AgentProfile
from coordination_framework.models.enumerations import (
    Confidence,
    InterpretationLevel,
    InterventionType,
    Priority,
)
from coordination_framework.scoring.coherence_calculator import CoherenceScorer, ScoreResult
from coordination_framework.scoring.cultural_adapter import CultureTag, resolve_culture
from coordination_framework.scoring.prf_compatibility import prf_compatibility
from coordination_framework.scoring.tables import (
    COMPATIBILITY_FALLBACK,
    CULTURAL_COORDINATION,
    SAME_CULTURE_COORDINATION,
    lookup_compatibility,
)
from coordination_framework.scoring.utils import clamp

logger = structlog.get_logger(__name__)

EMPTY_CAPABILITY_SCORE = 0.3

W_COHERENCE = 0.30
W_PRF = 0.25
W_CAPABILITY = 0.25
W_CULTURAL = 0.20


@dataclass(frozen=True)
class CoordinationRecommendation:
    level: InterpretationLevel
    description: str
    action: str
    confidence: Confidence


@dataclass(frozen=True)
class InterventionStrategy:
    type: InterventionType
    priority: Priority
    strategy: str
    timeline: str
    expected_improvement: float


@dataclass(frozen=True)
class CoordinationResult:
    """Output of CoordinationScorer.assess()."""
    coordination_potential: float   # [0, 1]
    coherence_a: ScoreResult
    coherence_b: ScoreResult
    prf_compatibility: float        # [0, 1]
    capability_overlap: float       # [0, 1]
    cultural_coordination: float    # [0, 1]
    recommendation: CoordinationRecommendation
    intervention_strategies: Tuple[InterventionStrategy, ...]
    meets_threshold: bool
    context: Any = None


_RECOMMENDATION_BANDS = (
    (0.8, CoordinationRecommendation(
        InterpretationLevel.EXCELLENT,
        "Excellent coordination potential",
        "Proceed with standard coordination protocols",
        Confidence.HIGH,
    )),
    (0.7, CoordinationRecommendation(
        InterpretationLevel.GOOD,
        "Good coordination potential",
        "Focus on capability-based coordination protocols",
        Confidence.HIGH,
    )),
    (0.5, CoordinationRecommendation(
        InterpretationLevel.MODERATE,
        "Moderate coordination potential",
        "Implement cultural adaptation strategies and ATCF enhancement",
        Confidence.MEDIUM,
    )),
    (0.3, CoordinationRecommendation(
        InterpretationLevel.LOW,
        "Low coordination potential",
        "Intensive capability development and cultural bridge-building recommended",
        Confidence.MEDIUM,
    )),
)

_VERY_LOW = CoordinationRecommendation(
    InterpretationLevel.VERY_LOW,
    "Very low coordination potential",
    "Consider alternative partnerships or extensive preparatory work",
    Confidence.LOW,
)

_PRF_STRATEGY = InterventionStrategy(
    InterventionType.PRF_ALIGNMENT,
    Priority.HIGH,
    "Implement belief-bridging exercises and rule harmonization protocols",
    "2-4 weeks",
    0.2,
)
_CAPABILITY_STRATEGY = InterventionStrategy(
    InterventionType.CAPABILITY_DEVELOPMENT,
    Priority.MEDIUM,
    "Focus on complementary capability training and cross-skilling",
    "4-8 weeks",
    0.25,
)
_CULTURAL_STRATEGY = InterventionStrategy(
    InterventionType.CULTURAL_BRIDGING,
    Priority.HIGH,
    "Implement cultural competency training and adaptation protocols",
    "3-6 weeks",
    0.3,
)
_COMPREHENSIVE_STRATEGY = InterventionStrategy(
    InterventionType.COMPREHENSIVE_COORDINATION,
    Priority.CRITICAL,
    "Multi-modal coordination enhancement program including ATCF therapy",
    "8-12 weeks",
    0.4,
)


def recommend_coordination(potential: float) -> CoordinationRecommendation:
    """Map a coordination potential onto its five-band recommendation."""
    for threshold, recommendation in _RECOMMENDATION_BANDS:
        if potential >= threshold:
            return recommendation
    return _VERY_LOW


def capability_overlap(
    capabilities_a: Sequence[str],
    capabilities_b: Sequence[str],
) -> float:
    """
    Blend of shared capability and complementary capability.

    Formula:
        overlap         = |A ∩ B| / |A ∪ B|
        complementarity = |A ∪ B − A ∩ B| / |A ∪ B|
        score           = 0.4 × overlap + 0.6 × min(1, 2 × complementarity)

    Either set empty → 0.3.

    Examples:
        >>> round(capability_overlap(["a", "b"], ["a", "c"]), 4)
        0.7333
    """
    set_a, set_b = set(capabilities_a), set(capabilities_b)
    if not set_a or not set_b:
        return EMPTY_CAPABILITY_SCORE

    union = set_a | set_b
    intersection = set_a & set_b
    overlap = len(intersection) / len(union)
    complementarity = (len(union) - len(intersection)) / len(union)
    return clamp(0.4 * overlap + 0.6 * min(1.0, complementarity * 2))


def cultural_coordination(culture_a: CultureTag, culture_b: CultureTag) -> float:
    """
    Coordination ease between two cultural backgrounds.

    Identical cultures → 0.8; missing or unknown cultures → 0.5; otherwise the
    ordered-pair matrix value.
    """
    if not culture_a or not culture_b:
        return COMPATIBILITY_FALLBACK

    resolved_a, resolved_b = resolve_culture(culture_a), resolve_culture(culture_b)
    if resolved_a is None or resolved_b is None:
        return SAME_CULTURE_COORDINATION if culture_a == culture_b else COMPATIBILITY_FALLBACK
    if resolved_a == resolved_b:
        return SAME_CULTURE_COORDINATION
    return lookup_compatibility(CULTURAL_COORDINATION, resolved_a, resolved_b)


def identify_intervention_strategies(
    potential: float,
    prf: float,
    capability: float,
    cultural: float,
) -> List[InterventionStrategy]:
    """
    Independently triggered interventions, most urgent first.

    Triggers:
        PRF < 0.6                → prf_alignment (high)
        capability overlap < 0.5 → capability_development (medium)
        cultural < 0.6           → cultural_bridging (high)
        potential < 0.5          → comprehensive_coordination (critical)

    Sorting is stable, so equal priorities keep trigger order.
    """
    strategies = []
    if prf < 0.6:
        strategies.append(_PRF_STRATEGY)
    if capability < 0.5:
        strategies.append(_CAPABILITY_STRATEGY)
    if cultural < 0.6:
        strategies.append(_CULTURAL_STRATEGY)
    if potential < 0.5:
        strategies.append(_COMPREHENSIVE_STRATEGY)

    return sorted(strategies, key=lambda s: s.priority.rank, reverse=True)


class CoordinationScorer:
    """Assess cross-agent coordination potential."""

    def __init__(
        self,
        coherence_scorer: Optional[CoherenceScorer] = None,
        threshold: Optional[float] = None,
    ):
        if threshold is None:
            from coordination_framework.config import get_settings
            threshold = get_settings().COORDINATION_THRESHOLD
        self.coherence_scorer = coherence_scorer or CoherenceScorer()
        self.threshold = threshold

    def assess(
        self,
        agent_a: AgentProfile,
        agent_b: AgentProfile,
        context: Any = None,
        now: Optional[datetime] = None,
    ) -> CoordinationResult:
        """
        Assess two agents.

        Args:
            agent_a: First agent.
            agent_b: Second agent.
            context: Opaque task context, returned untouched on the result.
            now: Reference time for both coherence runs (defaults to UTC now).

        Returns:
            CoordinationResult with potential, breakdown, recommendation and
            sorted intervention strategies.
        """
        now = now or datetime.now(timezone.utc)

        coherence_a = self.coherence_scorer.score_culturally_adapted(agent_a, now=now)
        coherence_b = self.coherence_scorer.score_culturally_adapted(agent_b, now=now)

        prf = prf_compatibility(agent_a.broa, agent_b.broa)
        capability = capability_overlap(agent_a.capabilities, agent_b.capabilities)
        cultural = cultural_coordination(
            agent_a.cultural_background, agent_b.cultural_background
        )

        potential = clamp(
            W_COHERENCE * min(coherence_a.total_score, coherence_b.total_score)
            + W_PRF * prf
            + W_CAPABILITY * capability
            + W_CULTURAL * cultural
        )

        recommendation = recommend_coordination(potential)
        strategies = identify_intervention_strategies(potential, prf, capability, cultural)

        logger.info(
            "coordination_assessed",
            agent_a=agent_a.agent_id,
            agent_b=agent_b.agent_id,
            coherence_a=coherence_a.total_score,
            coherence_b=coherence_b.total_score,
            prf_compatibility=prf,
            capability_overlap=capability,
            cultural_coordination=cultural,
            coordination_potential=potential,
            level=recommendation.level.value,
            interventions=[s.type.value for s in strategies],
        )

        return CoordinationResult(
            coordination_potential=potential,
            coherence_a=coherence_a,
            coherence_b=coherence_b,
            prf_compatibility=prf,
            capability_overlap=capability,
            cultural_coordination=cultural,
            recommendation=recommendation,
            intervention_strategies=tuple(strategies),
            meets_threshold=potential >= self.threshold,
            context=context,
        )
