"""
scoring/demo_calculator.py

Slider-mode calculators behind the interactive demos. They skip the
agent-profile pipeline and work directly from component values:

    component_score:    ATCF = α × HC + β × PI + γ × PC + δ × MCC
    quick_coordination: 0.6 × min(ATCF_A, ATCF_B) + 0.4 × (0.9 same culture | 0.7)
"""

import logging
from dataclasses import dataclass
from typing import Optional

from coordination_framework.models.enumerations import InterpretationLevel
from coordination_framework.models.weights import WeightSet
from coordination_framework.scoring.coherence_calculator import (
    CoherenceComponents,
    Interpretation,
    interpret_coherence_score,
)
from coordination_framework.scoring.cultural_adapter import CultureTag, culture_name, resolve_culture
from coordination_framework.scoring.utils import clamp

logger = logging.getLogger(__name__)

SAME_CULTURE_BONUS = 0.9
CROSS_CULTURE_BONUS = 0.7


@dataclass(frozen=True)
class ComponentScoreResult:
    total_score: float
    components: CoherenceComponents
    weights: WeightSet
    interpretation: Interpretation


@dataclass(frozen=True)
class QuickCoordinationResult:
    coordination_potential: float
    cultural_compatibility: float
    level: InterpretationLevel
    interpretation: str
    recommendation: str


def component_score(
    hc: float,
    pi: float,
    pc: float,
    mcc: float,
    weights: Optional[WeightSet] = None,
) -> ComponentScoreResult:
    """
    ATCF from four slider values.

    Examples:
        >>> round(component_score(0.7, 0.6, 0.5, 0.8).total_score, 3)
        0.65
    """
    if weights is None:
        weights = WeightSet()
    components = CoherenceComponents(
        historical_continuity=clamp(hc),
        present_integration=clamp(pi),
        prospective_coherence=clamp(pc),
        meta_adaptive_capacity=clamp(mcc),
    )
    total = components.weighted_total(weights)
    return ComponentScoreResult(
        total_score=total,
        components=components,
        weights=weights,
        interpretation=interpret_coherence_score(total),
    )


def _same_culture(culture_a: CultureTag, culture_b: CultureTag) -> bool:
    """Known tags compare case-insensitively; unknown tags compare as given."""
    resolved_a, resolved_b = resolve_culture(culture_a), resolve_culture(culture_b)
    if resolved_a is None or resolved_b is None:
        return culture_name(culture_a) == culture_name(culture_b)
    return resolved_a == resolved_b


def quick_coordination(
    coherence_a: float,
    coherence_b: float,
    culture_a: CultureTag,
    culture_b: CultureTag,
) -> QuickCoordinationResult:
    """Coordination estimate from two ATCF values and two culture tags."""
    cultural = SAME_CULTURE_BONUS if _same_culture(culture_a, culture_b) else CROSS_CULTURE_BONUS
    potential = clamp(0.6 * min(clamp(coherence_a), clamp(coherence_b)) + 0.4 * cultural)

    if potential >= 0.8:
        level = InterpretationLevel.EXCELLENT
        interpretation = "Excellent coordination potential"
        recommendation = "Proceed with standard coordination protocols"
    elif potential >= 0.7:
        level = InterpretationLevel.GOOD
        interpretation = "Good coordination potential"
        recommendation = "Focus on capability-based coordination protocols"
    elif potential >= 0.5:
        level = InterpretationLevel.MODERATE
        interpretation = "Moderate coordination potential"
        recommendation = "Implement cultural adaptation strategies"
    else:
        level = InterpretationLevel.LOW
        interpretation = "Low coordination potential"
        recommendation = "Intensive capability development recommended"

    logger.debug(
        f"Quick coordination: ATCF=({coherence_a:.2f}, {coherence_b:.2f}), "
        f"cultural={cultural:.1f}, potential={potential:.3f}"
    )

    return QuickCoordinationResult(
        coordination_potential=potential,
        cultural_compatibility=cultural,
        level=level,
        interpretation=interpretation,
        recommendation=recommendation,
    )
