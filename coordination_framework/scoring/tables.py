"""
scoring/tables.py — static lookup tables

Read-only data shared by the calculators. Every table is wrapped in
``MappingProxyType`` at import so no caller can modify it.

Categorical compatibility matrices are deliberately partial: only the rows
listed below exist, and any pair not found falls back to
``COMPATIBILITY_FALLBACK``. They are not symmetrised.
"""

from types import MappingProxyType
from typing import Mapping

from coordination_framework.models.enumerations import CulturalBackground

COMPATIBILITY_FALLBACK = 0.5


def _frozen(table: dict) -> Mapping:
    return MappingProxyType(
        {key: MappingProxyType(dict(row)) if isinstance(row, dict) else row
         for key, row in table.items()}
    )


# ---------------------------------------------------------------------------
# ATCF weight modifiers per culture (α, β, γ, δ multipliers)
# ---------------------------------------------------------------------------

CULTURAL_WEIGHT_MODIFIERS = _frozen({
    # Future-oriented self-authorship: prospective coherence counts more
    CulturalBackground.INDIVIDUALISTIC: {
        "historical": 0.9, "present": 1.0, "prospective": 1.2, "meta_adaptive": 1.1,
    },
    # Relational present: integration with the group counts more
    CulturalBackground.COLLECTIVISTIC: {
        "historical": 1.1, "present": 1.2, "prospective": 0.9, "meta_adaptive": 0.9,
    },
    # Continuity with inherited identity dominates
    CulturalBackground.TRADITIONAL: {
        "historical": 1.3, "present": 1.0, "prospective": 0.8, "meta_adaptive": 0.8,
    },
    # Cyclical continuity: past and present both weigh heavily
    CulturalBackground.INDIGENOUS: {
        "historical": 1.3, "present": 1.1, "prospective": 0.9, "meta_adaptive": 0.8,
    },
})


# ---------------------------------------------------------------------------
# Prospective coherence: timeline plausibility
# ---------------------------------------------------------------------------

TIMELINE_PLAUSIBILITY = MappingProxyType({
    "1_year": 0.7,
    "3_years": 0.8,
    "5_years": 0.9,
    "10_years": 0.8,
    "20_years": 0.6,
})
TIMELINE_FALLBACK = 0.5


# ---------------------------------------------------------------------------
# Rule compatibility (BROA rules)
# ---------------------------------------------------------------------------

DECISION_STYLE_COMPATIBILITY = _frozen({
    "individual_focused": {
        "individual_focused": 0.9,
        "consensus_based": 0.4,
        "hierarchical": 0.3,
        "collaborative": 0.6,
    },
    "consensus_based": {
        "individual_focused": 0.4,
        "consensus_based": 0.9,
        "hierarchical": 0.5,
        "collaborative": 0.8,
    },
})

CONFLICT_STYLE_COMPATIBILITY = _frozen({
    "direct_communication": {
        "direct_communication": 0.9,
        "harmony_preservation": 0.3,
        "authority_based": 0.4,
        "mediated_discussion": 0.7,
    },
    "harmony_preservation": {
        "direct_communication": 0.3,
        "harmony_preservation": 0.9,
        "authority_based": 0.6,
        "mediated_discussion": 0.8,
    },
})

GOAL_STYLE_COMPATIBILITY = _frozen({
    "personal_achievement": {
        "personal_achievement": 0.8,
        "collective_benefit": 0.4,
        "hierarchical_alignment": 0.3,
        "collaborative_outcome": 0.6,
    },
    "collective_benefit": {
        "personal_achievement": 0.4,
        "collective_benefit": 0.9,
        "hierarchical_alignment": 0.7,
        "collaborative_outcome": 0.8,
    },
})


# ---------------------------------------------------------------------------
# Ontology compatibility (BROA ontology)
# ---------------------------------------------------------------------------

AGENCY_CONCEPTION_COMPATIBILITY = _frozen({
    "independent": {
        "independent": 0.9,
        "interdependent": 0.4,
        "hierarchical": 0.3,
        "collective": 0.5,
    },
    "interdependent": {
        "independent": 0.4,
        "interdependent": 0.9,
        "hierarchical": 0.6,
        "collective": 0.8,
    },
})

TIME_ORIENTATION_COMPATIBILITY = _frozen({
    "future_focused": {
        "future_focused": 0.9,
        "present_focused": 0.6,
        "past_honoring": 0.4,
        "cyclical_continuity": 0.5,
    },
    "cyclical_continuity": {
        "future_focused": 0.5,
        "present_focused": 0.8,
        "past_honoring": 0.8,
        "cyclical_continuity": 0.9,
    },
})

RELATIONSHIP_MODEL_COMPATIBILITY = _frozen({
    "voluntary_association": {
        "voluntary_association": 0.9,
        "embedded_obligation": 0.3,
        "hierarchical_structure": 0.2,
        "reciprocal_exchange": 0.7,
    },
    "embedded_obligation": {
        "voluntary_association": 0.3,
        "embedded_obligation": 0.9,
        "hierarchical_structure": 0.7,
        "reciprocal_exchange": 0.6,
    },
})


# ---------------------------------------------------------------------------
# Cultural coordination (ordered pairs; identical cultures handled separately)
# ---------------------------------------------------------------------------

SAME_CULTURE_COORDINATION = 0.8

CULTURAL_COORDINATION = _frozen({
    CulturalBackground.INDIVIDUALISTIC: {
        CulturalBackground.COLLECTIVISTIC: 0.6,
        CulturalBackground.INDIGENOUS: 0.5,
        CulturalBackground.TRADITIONAL: 0.4,
    },
    CulturalBackground.COLLECTIVISTIC: {
        CulturalBackground.INDIVIDUALISTIC: 0.6,
        CulturalBackground.INDIGENOUS: 0.7,
        CulturalBackground.TRADITIONAL: 0.8,
    },
    CulturalBackground.INDIGENOUS: {
        CulturalBackground.INDIVIDUALISTIC: 0.5,
        CulturalBackground.COLLECTIVISTIC: 0.7,
        CulturalBackground.TRADITIONAL: 0.6,
    },
    CulturalBackground.TRADITIONAL: {
        CulturalBackground.INDIVIDUALISTIC: 0.4,
        CulturalBackground.COLLECTIVISTIC: 0.8,
        CulturalBackground.INDIGENOUS: 0.6,
    },
})


def lookup_compatibility(matrix: Mapping, first, second) -> float:
    """``matrix[first][second]``, or ``COMPATIBILITY_FALLBACK`` if unlisted."""
    row = matrix.get(first)
    if row is None:
        return COMPATIBILITY_FALLBACK
    return row.get(second, COMPATIBILITY_FALLBACK)
