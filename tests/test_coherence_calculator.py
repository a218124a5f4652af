# tests/test_coherence_calculator.py

"""
ATCF (CoherenceScorer) tests.

Expected component values for the sample agents are worked out by hand
from the sample data at the fixed reference time in conftest.
"""

from datetime import datetime, timedelta

import pytest

from coordination_framework.models.agent import (
    BROAData,
    FutureProjections,
    IdentitySnapshot,
    PresentState,
    SelfModification,
)
from coordination_framework.models.enumerations import InterpretationLevel
from coordination_framework.models.weights import WeightSet
from coordination_framework.scoring.coherence_calculator import (
    CoherenceComponents,
    CoherenceScorer,
    interpret_coherence_score,
    timeline_plausibility,
)


# =============================================================================
# HISTORICAL CONTINUITY
# =============================================================================

class TestHistoricalContinuity:

    def test_empty_history_is_zero(self, scorer, now):
        assert scorer.historical_continuity([], ["a"], now) == 0.0

    def test_unchanged_kernel_is_one(self, scorer, stable_agent, now):
        hc = scorer.historical_continuity(
            stable_agent.identity_history, stable_agent.identity_kernel, now
        )
        assert hc == pytest.approx(1.0)

    def test_recent_snapshots_dominate(self, scorer, now):
        history = [
            IdentitySnapshot(timestamp=now - timedelta(days=300), identity_kernel=["x"]),
            IdentitySnapshot(timestamp=now - timedelta(days=1), identity_kernel=["a"]),
        ]
        assert scorer.historical_continuity(history, ["a"], now) > 0.99

    def test_future_snapshot_counts_as_now(self, scorer, now):
        history = [
            IdentitySnapshot(timestamp=now + timedelta(days=10), identity_kernel=["a"]),
            IdentitySnapshot(timestamp=now, identity_kernel=["b"]),
        ]
        assert scorer.historical_continuity(history, ["a"], now) == pytest.approx(0.5)

    def test_naive_now_treated_as_utc(self, scorer, agent1, now):
        naive = datetime(2026, 1, 1)
        assert scorer.historical_continuity(
            agent1.identity_history, agent1.identity_kernel, naive
        ) == pytest.approx(scorer.historical_continuity(
            agent1.identity_history, agent1.identity_kernel, now
        ))

    def test_agent1_value(self, scorer, agent1, now):
        hc = scorer.historical_continuity(agent1.identity_history, agent1.identity_kernel, now)
        assert hc == pytest.approx(0.962, abs=1e-3)


# =============================================================================
# PRESENT INTEGRATION
# =============================================================================

class TestPresentIntegration:

    def test_perfectly_correlated_components(self):
        state = PresentState(
            global_feeling_tone={"a": 0.1, "b": 0.5, "c": 0.9},
            emotional_motivation={"a": 0.2, "b": 0.4, "c": 0.6},
            rational_deliberation={"a": 0.9, "b": 0.5, "c": 0.1},
            action_readiness={"a": 0.0, "b": 0.5, "c": 1.0},
        )
        assert CoherenceScorer.component_compatibility(state) == pytest.approx(1.0)

    def test_empty_components_score_zero(self):
        assert CoherenceScorer.component_compatibility(PresentState()) == 0.0

    def test_belief_consistency(self):
        assert CoherenceScorer.belief_consistency(None) == 0.5
        assert CoherenceScorer.belief_consistency({}) == 0.5
        # variance 0 → 1 − 0.1
        assert CoherenceScorer.belief_consistency({"a": 0.5, "b": 0.5}) == pytest.approx(0.9)

    def test_rule_coherence(self):
        assert CoherenceScorer.rule_coherence(None) == 0.5
        assert CoherenceScorer.rule_coherence({}) == 0.0
        rules = {f"rule_{i}": "x" for i in range(7)}
        assert CoherenceScorer.rule_coherence(rules) == 1.0

    def test_ontology_alignment(self):
        assert CoherenceScorer.ontology_alignment(None) == 0.5
        assert CoherenceScorer.ontology_alignment({"agency_conception": "independent"}) == pytest.approx(1 / 3)

    def test_missing_broa_uses_defaults(self, scorer):
        # (0.5 + 0.5 + 0.5 + 0.75) / 4
        assert scorer.internal_coherence(BROAData()) == pytest.approx(0.5625)

    def test_agent1_value(self, scorer, agent1):
        pi = scorer.present_integration(agent1.present_state, agent1.broa)
        assert pi == pytest.approx(0.6890, abs=1e-3)


# =============================================================================
# PROSPECTIVE COHERENCE
# =============================================================================

class TestProspectiveCoherence:

    def test_timeline_plausibility(self):
        assert timeline_plausibility("5_years") == 0.9
        assert timeline_plausibility("7_years") == 0.5
        assert timeline_plausibility(None) == 0.5

    def test_missing_goals(self, scorer):
        projections = FutureProjections()
        assert scorer.projection_alignment(projections, ["a"]) == 0.5
        assert scorer.adaptive_capacity(projections) == pytest.approx(0.25)

    def test_missing_stated_alignment_falls_back_to_overlap(self):
        projections = FutureProjections(goals=["autonomy_growth", "travel"])
        assert CoherenceScorer.projection_alignment(projections, ["autonomy"]) == pytest.approx(0.5)

    def test_stated_zero_is_honoured(self):
        projections = FutureProjections(goals=["autonomy_growth"], alignment_with_identity=0.0)
        assert CoherenceScorer.projection_alignment(projections, ["autonomy"]) == pytest.approx(0.5)

    def test_agent1_value(self, scorer, agent1):
        pc = scorer.prospective_coherence(agent1.future_projections, agent1.identity_kernel)
        # alignment (0.5 + 0.8) / 2, capacity (0.8 + 0.9) / 2
        assert pc == pytest.approx(0.6 * 0.65 + 0.4 * 0.85)


# =============================================================================
# META-ADAPTIVE CAPACITY
# =============================================================================

class TestMetaAdaptiveCapacity:

    def test_defaults(self):
        # 0.5 × 0.3 + 0.5 × 0.5
        assert CoherenceScorer.meta_adaptive_capacity(SelfModification()) == pytest.approx(0.4)

    def test_ability_saturates(self):
        record = SelfModification(
            modification_history=[f"type{i}_change" for i in range(6)],
            coherence_maintenance_capacity=1.0,
        )
        assert CoherenceScorer.meta_adaptive_capacity(record) == pytest.approx(1.0)

    def test_agent1_value(self, agent1):
        # ability min(1, 3 × 0.2 + 3 × 0.1) = 0.9
        assert CoherenceScorer.meta_adaptive_capacity(agent1.self_modification) == pytest.approx(
            0.5 * 0.9 + 0.5 * 0.75
        )


# =============================================================================
# COMPOSITE SCORE
# =============================================================================

class TestCoherenceScore:

    def test_minimal_agent(self, scorer, minimal_agent, now):
        result = scorer.score(minimal_agent, now=now)
        # HC 0, PI 0.4 × 0.5625, PC 0.4, MCC 0.4
        assert result.components.historical_continuity == 0.0
        assert result.components.present_integration == pytest.approx(0.225)
        assert result.total_score == pytest.approx((0.225 + 0.4 + 0.4) / 4)
        assert result.interpretation.level == InterpretationLevel.VERY_LOW
        assert result.cultural_adaptation is None
        assert result.assessed_at == now

    def test_agent1_equal_weights(self, scorer, agent1, now):
        result = scorer.score(agent1, now=now)
        assert result.total_score == pytest.approx(0.8015, abs=1e-3)
        assert result.weights == WeightSet()

    def test_explicit_weights(self, scorer, agent1, now):
        history_only = WeightSet(historical=1.0, present=0.0, prospective=0.0, meta_adaptive=0.0)
        result = scorer.score(agent1, now=now, weights=history_only)
        assert result.total_score == pytest.approx(result.components.historical_continuity)

    def test_all_components_bounded(self, scorer, agent1, agent2, minimal_agent, now):
        for agent in (agent1, agent2, minimal_agent):
            result = scorer.score(agent, now=now)
            assert 0.0 <= result.total_score <= 1.0
            assert all(0.0 <= v <= 1.0 for v in result.components.as_dict().values())

    def test_deterministic(self, scorer, agent2, now):
        assert scorer.score(agent2, now=now) == scorer.score(agent2, now=now)

    def test_invalid_decay_rejected(self):
        with pytest.raises(ValueError):
            CoherenceScorer(weights=WeightSet(), decay_days=0)


class TestCulturallyAdaptedScore:

    def test_adaptation_attached(self, scorer, agent1, now):
        result = scorer.score_culturally_adapted(agent1, now=now)
        adaptation = result.cultural_adaptation
        assert adaptation is not None
        assert adaptation.cultural_context == "individualistic"
        assert adaptation.original_weights == WeightSet()
        assert adaptation.adapted_weights == result.weights
        assert result.weights.prospective > result.weights.historical

    def test_agent1_adapted_value(self, scorer, agent1, now):
        result = scorer.score_culturally_adapted(agent1, now=now)
        assert result.total_score == pytest.approx(0.7948, abs=1e-3)
        assert result.interpretation.level == InterpretationLevel.GOOD

    def test_base_weights_not_mutated(self, scorer, agent2, now):
        before = scorer.weights
        scorer.score_culturally_adapted(agent2, now=now)
        assert scorer.weights is before
        assert scorer.weights == WeightSet()

    def test_unknown_culture_keeps_base_weights(self, scorer, minimal_agent, now):
        result = scorer.score_culturally_adapted(minimal_agent, now=now)
        assert result.weights == scorer.weights
        assert result.cultural_adaptation.cultural_context is None
        assert result.total_score == scorer.score(minimal_agent, now=now).total_score


# =============================================================================
# INTERPRETATION
# =============================================================================

@pytest.mark.parametrize("score, level", [
    (0.95, InterpretationLevel.EXCELLENT),
    (0.8, InterpretationLevel.EXCELLENT),
    (0.75, InterpretationLevel.GOOD),
    (0.5, InterpretationLevel.MODERATE),
    (0.3, InterpretationLevel.LOW),
    (0.29, InterpretationLevel.VERY_LOW),
    (0.0, InterpretationLevel.VERY_LOW),
])
def test_interpretation_bands(score, level):
    assert interpret_coherence_score(score).level == level


def test_weighted_total_clamped():
    components = CoherenceComponents(1.0, 1.0, 1.0, 1.0)
    assert components.weighted_total(WeightSet()) == pytest.approx(1.0)
    assert components.weighted_total(WeightSet()) <= 1.0
