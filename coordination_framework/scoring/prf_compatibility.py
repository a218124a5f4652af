"""
scoring/prf_compatibility.py

Belief / rule / ontology / authenticity ("PRF") compatibility between two
agents' BROA records.

    PRF = mean(belief, rule, ontology, authenticity)

Numeric attributes compare as 1 − |a − b|; categorical attributes go through
the static matrices in ``scoring.tables`` (unlisted pairs → 0.5).
"""

from typing import Dict, Optional

from coordination_framework.models.agent import Authenticity, BROAData
from coordination_framework.scoring.tables import (
    AGENCY_CONCEPTION_COMPATIBILITY,
    CONFLICT_STYLE_COMPATIBILITY,
    DECISION_STYLE_COMPATIBILITY,
    GOAL_STYLE_COMPATIBILITY,
    RELATIONSHIP_MODEL_COMPATIBILITY,
    TIME_ORIENTATION_COMPATIBILITY,
    lookup_compatibility,
)
from coordination_framework.scoring.utils import clamp, jaccard_similarity, mean

MISSING_DATA_SCORE = 0.5
NO_SHARED_BELIEFS_SCORE = 0.3


def _numeric_compatibility(a: Optional[float], b: Optional[float]) -> float:
    if a is None or b is None:
        return MISSING_DATA_SCORE
    return clamp(1 - abs(a - b))


def belief_compatibility(
    beliefs_a: Optional[Dict[str, float]],
    beliefs_b: Optional[Dict[str, float]],
) -> float:
    """Mean 1 − |diff| over shared belief keys; none shared → 0.3."""
    if beliefs_a is None or beliefs_b is None:
        return MISSING_DATA_SCORE

    shared = [key for key in beliefs_a if key in beliefs_b]
    if not shared:
        return NO_SHARED_BELIEFS_SCORE

    return mean([_numeric_compatibility(beliefs_a[key], beliefs_b[key]) for key in shared])


def rule_compatibility(
    rules_a: Optional[Dict[str, str]],
    rules_b: Optional[Dict[str, str]],
) -> float:
    """Mean of decision-making, conflict-resolution and goal-setting compatibility."""
    if rules_a is None or rules_b is None:
        return MISSING_DATA_SCORE

    return mean([
        lookup_compatibility(
            DECISION_STYLE_COMPATIBILITY,
            rules_a.get("decision_making"), rules_b.get("decision_making"),
        ),
        lookup_compatibility(
            CONFLICT_STYLE_COMPATIBILITY,
            rules_a.get("conflict_resolution"), rules_b.get("conflict_resolution"),
        ),
        lookup_compatibility(
            GOAL_STYLE_COMPATIBILITY,
            rules_a.get("goal_setting"), rules_b.get("goal_setting"),
        ),
    ])


def ontology_compatibility(
    ontology_a: Optional[Dict[str, str]],
    ontology_b: Optional[Dict[str, str]],
) -> float:
    """Mean of agency, time-orientation and relationship-model compatibility."""
    if ontology_a is None or ontology_b is None:
        return MISSING_DATA_SCORE

    return mean([
        lookup_compatibility(
            AGENCY_CONCEPTION_COMPATIBILITY,
            ontology_a.get("agency_conception"), ontology_b.get("agency_conception"),
        ),
        lookup_compatibility(
            TIME_ORIENTATION_COMPATIBILITY,
            ontology_a.get("time_orientation"), ontology_b.get("time_orientation"),
        ),
        lookup_compatibility(
            RELATIONSHIP_MODEL_COMPATIBILITY,
            ontology_a.get("relationship_model"), ontology_b.get("relationship_model"),
        ),
    ])


def authenticity_compatibility(
    auth_a: Optional[Authenticity],
    auth_b: Optional[Authenticity],
) -> float:
    """Mean of kernel Jaccard overlap, value-alignment and self-consistency closeness."""
    if auth_a is None or auth_b is None:
        return MISSING_DATA_SCORE

    return mean([
        jaccard_similarity(auth_a.identity_kernel, auth_b.identity_kernel),
        _numeric_compatibility(auth_a.value_alignment, auth_b.value_alignment),
        _numeric_compatibility(auth_a.self_consistency, auth_b.self_consistency),
    ])


def prf_compatibility(broa_a: BROAData, broa_b: BROAData) -> float:
    """
    Overall PRF compatibility in [0, 1].

    Examples:
        >>> prf_compatibility(BROAData(), BROAData())
        0.5
    """
    return clamp(mean([
        belief_compatibility(broa_a.beliefs, broa_b.beliefs),
        rule_compatibility(broa_a.rules, broa_b.rules),
        ontology_compatibility(broa_a.ontology, broa_b.ontology),
        authenticity_compatibility(broa_a.authenticity, broa_b.authenticity),
    ]))
