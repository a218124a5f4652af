# tests/test_demo_calculator.py
import pytest

from coordination_framework.models.enumerations import CulturalBackground, InterpretationLevel
from coordination_framework.models.weights import WeightSet
from coordination_framework.scoring.demo_calculator import component_score, quick_coordination


class TestComponentScore:

    def test_equal_weights(self):
        result = component_score(0.7, 0.6, 0.5, 0.8)
        assert result.total_score == pytest.approx(0.65)
        assert result.interpretation.level == InterpretationLevel.MODERATE
        assert result.weights == WeightSet()

    def test_custom_weights(self):
        weights = WeightSet(historical=0.5, present=0.5, prospective=0.0, meta_adaptive=0.0)
        result = component_score(0.9, 0.8, 0.0, 0.0, weights=weights)
        assert result.total_score == pytest.approx(0.85)
        assert result.interpretation.level == InterpretationLevel.EXCELLENT

    def test_inputs_clamped(self):
        result = component_score(1.5, -0.2, 0.5, 0.5)
        assert result.components.historical_continuity == 1.0
        assert result.components.present_integration == 0.0
        assert result.total_score == pytest.approx(0.5)


class TestQuickCoordination:

    def test_same_culture(self):
        result = quick_coordination(0.9, 0.8, "traditional", CulturalBackground.TRADITIONAL)
        # 0.6 × 0.8 + 0.4 × 0.9
        assert result.cultural_compatibility == 0.9
        assert result.coordination_potential == pytest.approx(0.84)
        assert result.level == InterpretationLevel.EXCELLENT

    def test_cross_culture(self):
        result = quick_coordination(0.75, 0.65, "individualistic", "collectivistic")
        # 0.6 × 0.65 + 0.4 × 0.7
        assert result.cultural_compatibility == 0.7
        assert result.coordination_potential == pytest.approx(0.67)
        assert result.level == InterpretationLevel.MODERATE

    def test_same_culture_ignores_case(self):
        result = quick_coordination(0.8, 0.8, "Traditional", "traditional")
        assert result.cultural_compatibility == 0.9

    def test_unknown_cultures_compared_as_given(self):
        assert quick_coordination(0.8, 0.8, "martian", "martian").cultural_compatibility == 0.9
        assert quick_coordination(0.8, 0.8, "Martian", "martian").cultural_compatibility == 0.7
        assert quick_coordination(0.8, 0.8, "martian", "traditional").cultural_compatibility == 0.7

    def test_low_potential(self):
        result = quick_coordination(0.1, 0.9, "indigenous", "traditional")
        assert result.coordination_potential == pytest.approx(0.34)
        assert result.level == InterpretationLevel.LOW
        assert result.recommendation == "Intensive capability development recommended"
