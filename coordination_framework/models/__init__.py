from coordination_framework.models.agent import (
    AgentProfile,
    Authenticity,
    BROAData,
    FutureProjections,
    IdentitySnapshot,
    PresentState,
    SelfModification,
)
from coordination_framework.models.enumerations import (
    Confidence,
    CulturalBackground,
    InterpretationLevel,
    InterventionType,
    Priority,
)
from coordination_framework.models.weights import WeightSet

__all__ = [
    # Agent
    "AgentProfile",
    "Authenticity",
    "BROAData",
    "FutureProjections",
    "IdentitySnapshot",
    "PresentState",
    "SelfModification",
    # Enumerations
    "Confidence",
    "CulturalBackground",
    "InterpretationLevel",
    "InterventionType",
    "Priority",
    # Weights
    "WeightSet",
]
