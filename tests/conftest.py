# tests/conftest.py

"""
Pytest Fixtures - Shared agents, scorers and reference time

SAMPLE AGENT REFERENCE:
- agent1: Jordan, individualistic
- agent2: Amani, collectivistic
"""

from datetime import datetime, timedelta, timezone

import pytest

from coordination_framework.data.sample_agents import get_sample_agent
from coordination_framework.models.agent import AgentProfile
from coordination_framework.models.weights import WeightSet
from coordination_framework.scoring.coherence_calculator import CoherenceScorer
from coordination_framework.scoring.coordination_calculator import CoordinationScorer


# =============================================================================
# REFERENCE TIME
# =============================================================================

@pytest.fixture
def now():
    """Fixed reference time so decay-weighted scores are reproducible."""
    return datetime(2026, 1, 1, tzinfo=timezone.utc)


# =============================================================================
# SCORER FIXTURES
# =============================================================================

@pytest.fixture
def scorer():
    """CoherenceScorer with equal weights and a 30-day decay constant."""
    return CoherenceScorer(weights=WeightSet(), decay_days=30)


@pytest.fixture
def coordination_scorer(scorer):
    return CoordinationScorer(coherence_scorer=scorer, threshold=0.7)


# =============================================================================
# AGENT FIXTURES
# =============================================================================

@pytest.fixture
def agent1(now):
    """Individualistic sample agent."""
    return get_sample_agent("agent1", now=now)


@pytest.fixture
def agent2(now):
    """Collectivistic sample agent."""
    return get_sample_agent("agent2", now=now)


@pytest.fixture
def minimal_agent():
    """Agent with only the required fields; every sub-record is missing."""
    return AgentProfile(agent_id="minimal", name="Minimal")


@pytest.fixture
def stable_agent(now):
    """Agent whose kernel never changed across its history."""
    kernel = ["honesty", "curiosity"]
    return AgentProfile(
        agent_id="stable",
        name="Stable",
        cultural_background="traditional",
        identity_kernel=kernel,
        identity_history=[
            {"timestamp": now - timedelta(days=d), "identity_kernel": kernel}
            for d in (90, 30, 1)
        ],
    )
