# tests/test_sample_agents.py

"""
Sample agent catalogue and assess_agents CLI tests
"""

import json
from datetime import timedelta

import pytest

from coordination_framework.core.exceptions import UnknownSampleAgentError
from coordination_framework.data.sample_agents import get_sample_agent, list_sample_agents
from coordination_framework.models.enumerations import CulturalBackground
from coordination_framework.scripts.assess_agents import main


# =============================================================================
# CATALOGUE
# =============================================================================

class TestSampleAgents:

    def test_catalogue_keys(self):
        assert list_sample_agents() == ["agent1", "agent2"]

    def test_agent1(self, agent1):
        assert agent1.name == "Jordan"
        assert agent1.cultural_background is CulturalBackground.INDIVIDUALISTIC
        assert "autonomy" in agent1.identity_kernel
        assert len(agent1.identity_history) == 3

    def test_agent2(self, agent2):
        assert agent2.name == "Amani"
        assert agent2.cultural_background is CulturalBackground.COLLECTIVISTIC
        assert agent2.future_projections.timeline == "10_years"

    def test_history_relative_to_reference_time(self, now):
        agent = get_sample_agent("agent1", now=now)
        assert agent.identity_history[-1].timestamp == now - timedelta(days=7)

    def test_unknown_agent(self):
        with pytest.raises(UnknownSampleAgentError) as exc_info:
            get_sample_agent("agent9")
        assert exc_info.value.agent_key == "agent9"


# =============================================================================
# CLI
# =============================================================================

NOW_ARG = ["--now", "2026-01-01T00:00:00+00:00"]


class TestAssessAgentsCLI:

    def test_list(self, capsys):
        assert main(["list"]) == 0
        assert json.loads(capsys.readouterr().out) == ["agent1", "agent2"]

    def test_coherence(self, capsys):
        assert main(["coherence", "agent1", *NOW_ARG]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["total_score"] == pytest.approx(0.7948, abs=1e-3)
        assert payload["interpretation"]["level"] == "good"
        assert payload["cultural_adaptation"]["cultural_context"] == "individualistic"

    def test_coherence_without_cultural_adaptation(self, capsys):
        assert main(["coherence", "agent1", "--no-cultural", *NOW_ARG]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["cultural_adaptation"] is None
        assert payload["weights"]["historical"] == pytest.approx(0.25)

    def test_coordination(self, capsys):
        assert main(["coordination", "agent1", "agent2", "--task", "joint_research", *NOW_ARG]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["context"] == {"task": "joint_research"}
        assert payload["recommendation"]["level"] == "moderate"
        assert payload["intervention_strategies"][0]["type"] == "prf_alignment"

    def test_unknown_agent_exit_code(self, capsys):
        assert main(["coherence", "agent9", *NOW_ARG]) == 2
        assert "agent9" in capsys.readouterr().err
