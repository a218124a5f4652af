"""
Sample agents for the demos.

    agent1 — individualistic background
    agent2 — collectivistic background

Snapshot timestamps are built relative to the reference time passed in, so
historical continuity is the same whenever the catalogue is loaded.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, List, Optional

from coordination_framework.core.exceptions import UnknownSampleAgentError
from coordination_framework.models.agent import AgentProfile


def _agent1(now: datetime) -> Dict[str, Any]:
    return {
        "agent_id": "agent1",
        "name": "Jordan",
        "cultural_background": "individualistic",
        "identity_kernel": ["autonomy", "creativity", "achievement", "curiosity"],
        "identity_history": [
            {
                "timestamp": now - timedelta(days=180),
                "identity_kernel": ["autonomy", "achievement", "competition"],
            },
            {
                "timestamp": now - timedelta(days=60),
                "identity_kernel": ["autonomy", "creativity", "achievement"],
            },
            {
                "timestamp": now - timedelta(days=7),
                "identity_kernel": ["autonomy", "creativity", "achievement", "curiosity"],
            },
        ],
        "present_state": {
            "global_feeling_tone": {"valence": 0.7, "arousal": 0.6, "stability": 0.8},
            "emotional_motivation": {"drive": 0.8, "interest": 0.75, "satisfaction": 0.7},
            "rational_deliberation": {"clarity": 0.8, "planning": 0.7, "reflection": 0.75},
            "action_readiness": {"energy": 0.75, "confidence": 0.8, "focus": 0.7},
        },
        "broa": {
            "beliefs": {
                "self_determination": 0.9,
                "collective_responsibility": 0.4,
                "tradition_importance": 0.3,
                "innovation_value": 0.85,
            },
            "rules": {
                "decision_making": "individual_focused",
                "conflict_resolution": "direct_communication",
                "goal_setting": "personal_achievement",
            },
            "ontology": {
                "agency_conception": "independent",
                "time_orientation": "future_focused",
                "relationship_model": "voluntary_association",
            },
            "authenticity": {
                "identity_kernel": ["autonomy", "creativity", "achievement"],
                "value_alignment": 0.82,
                "self_consistency": 0.78,
            },
        },
        "future_projections": {
            "goals": [
                "career_advancement",
                "creativity_projects",
                "skill_mastery",
                "autonomy_expansion",
            ],
            "timeline": "5_years",
            "alignment_with_identity": 0.8,
        },
        "self_modification": {
            "modification_history": ["skill_acquisition", "habit_change", "perspective_shift"],
            "coherence_maintenance_capacity": 0.75,
        },
        "capabilities": ["data_analysis", "creative_design", "project_management", "public_speaking"],
    }


def _agent2(now: datetime) -> Dict[str, Any]:
    return {
        "agent_id": "agent2",
        "name": "Amani",
        "cultural_background": "collectivistic",
        "identity_kernel": ["harmony", "community", "responsibility", "loyalty"],
        "identity_history": [
            {
                "timestamp": now - timedelta(days=365),
                "identity_kernel": ["harmony", "family", "responsibility", "loyalty"],
            },
            {
                "timestamp": now - timedelta(days=120),
                "identity_kernel": ["harmony", "community", "responsibility", "loyalty"],
            },
            {
                "timestamp": now - timedelta(days=14),
                "identity_kernel": ["harmony", "community", "responsibility", "loyalty"],
            },
        ],
        "present_state": {
            "global_feeling_tone": {"valence": 0.65, "arousal": 0.5, "stability": 0.85},
            "emotional_motivation": {"drive": 0.6, "interest": 0.55, "satisfaction": 0.8},
            "rational_deliberation": {"clarity": 0.7, "planning": 0.65, "reflection": 0.85},
            "action_readiness": {"energy": 0.6, "confidence": 0.55, "focus": 0.8},
        },
        "broa": {
            "beliefs": {
                "self_determination": 0.5,
                "collective_responsibility": 0.9,
                "tradition_importance": 0.7,
                "innovation_value": 0.6,
            },
            "rules": {
                "decision_making": "consensus_based",
                "conflict_resolution": "harmony_preservation",
                "goal_setting": "collective_benefit",
            },
            "ontology": {
                "agency_conception": "interdependent",
                "time_orientation": "cyclical_continuity",
                "relationship_model": "embedded_obligation",
            },
            "authenticity": {
                "identity_kernel": ["harmony", "community", "responsibility"],
                "value_alignment": 0.88,
                "self_consistency": 0.85,
            },
        },
        "future_projections": {
            "goals": [
                "community_wellbeing",
                "family_support",
                "harmony_maintenance",
                "knowledge_sharing",
            ],
            "timeline": "10_years",
            "alignment_with_identity": 0.85,
        },
        "self_modification": {
            "modification_history": ["role_adaptation", "skill_acquisition"],
            "coherence_maintenance_capacity": 0.8,
        },
        "capabilities": ["mediation", "community_organizing", "project_management", "teaching"],
    }


SAMPLE_AGENT_BUILDERS: Dict[str, Callable[[datetime], Dict[str, Any]]] = {
    "agent1": _agent1,
    "agent2": _agent2,
}


def list_sample_agents() -> List[str]:
    """Keys of the available sample agents."""
    return list(SAMPLE_AGENT_BUILDERS)


def get_sample_agent(agent_key: str, now: Optional[datetime] = None) -> AgentProfile:
    """
    Build a sample agent.

    Args:
        agent_key: "agent1" or "agent2".
        now: Reference time for the identity history (defaults to UTC now).

    Raises:
        UnknownSampleAgentError: if the key is not in the catalogue.
    """
    builder = SAMPLE_AGENT_BUILDERS.get(agent_key)
    if builder is None:
        raise UnknownSampleAgentError(agent_key)
    return AgentProfile.model_validate(builder(now or datetime.now(timezone.utc)))
