"""
Agent profile models.

An AgentProfile bundles everything the ATCF and coordination calculators read:
identity history, the present-state (UEV) components, the BROA record
(beliefs, rules, ontology, authenticity), future projections and the
self-modification record.

Optional sub-records are ``None`` when the data is missing; the calculators
map missing data onto neutral defaults instead of failing.
"""

from datetime import datetime
from types import MappingProxyType
from typing import Annotated, List, Mapping, Optional, Tuple

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer

from coordination_framework.models.enumerations import CulturalBackground


def _read_only(value: Mapping) -> Mapping:
    return MappingProxyType(dict(value))


def _as_dict(value: Mapping) -> dict:
    return dict(value)


# Mapping fields are stored as read-only proxies and dump back to plain dicts
ScoreMap = Annotated[Mapping[str, float], AfterValidator(_read_only), PlainSerializer(_as_dict)]
TagMap = Annotated[Mapping[str, str], AfterValidator(_read_only), PlainSerializer(_as_dict)]


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class IdentitySnapshot(_FrozenModel):
    """Identity kernel recorded at a point in time."""

    timestamp: datetime = Field(..., description="When the snapshot was taken")
    identity_kernel: Tuple[str, ...] = Field(
        default=(),
        description="Core self-identifying trait tags at that time"
    )


class PresentState(_FrozenModel):
    """
    Unified experiential view (UEV): four numeric sub-component maps.

    Values are compared positionally (insertion order) when computing
    cross-component correlation.
    """

    global_feeling_tone: ScoreMap = Field(default_factory=dict, validate_default=True)
    emotional_motivation: ScoreMap = Field(default_factory=dict, validate_default=True)
    rational_deliberation: ScoreMap = Field(default_factory=dict, validate_default=True)
    action_readiness: ScoreMap = Field(default_factory=dict, validate_default=True)

    def components(self) -> List[Mapping[str, float]]:
        return [
            self.global_feeling_tone,
            self.emotional_motivation,
            self.rational_deliberation,
            self.action_readiness,
        ]


class Authenticity(_FrozenModel):
    identity_kernel: Tuple[str, ...] = Field(default=())
    value_alignment: Optional[float] = Field(default=None, ge=0, le=1)
    self_consistency: Optional[float] = Field(default=None, ge=0, le=1)


class BROAData(_FrozenModel):
    """
    Beliefs, Rules, Ontology, Authenticity.

    rules keys:    decision_making, conflict_resolution, goal_setting, ...
    ontology keys: agency_conception, time_orientation, relationship_model
    """

    beliefs: Optional[ScoreMap] = None
    rules: Optional[TagMap] = None
    ontology: Optional[TagMap] = None
    authenticity: Optional[Authenticity] = None


class FutureProjections(_FrozenModel):
    goals: Optional[Tuple[str, ...]] = None
    timeline: Optional[str] = Field(
        default=None,
        description="Timeline bucket, e.g. '5_years'"
    )
    alignment_with_identity: Optional[float] = Field(default=None, ge=0, le=1)


class SelfModification(_FrozenModel):
    modification_history: Optional[Tuple[str, ...]] = None
    coherence_maintenance_capacity: Optional[float] = Field(default=None, ge=0, le=1)


class AgentProfile(_FrozenModel):
    """Everything known about one agent."""

    agent_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    cultural_background: Optional[CulturalBackground] = None

    identity_kernel: Tuple[str, ...] = Field(
        default=(),
        description="Current identity kernel"
    )
    identity_history: Tuple[IdentitySnapshot, ...] = Field(default=())

    present_state: PresentState = Field(default_factory=PresentState)
    broa: BROAData = Field(default_factory=BROAData)
    future_projections: FutureProjections = Field(default_factory=FutureProjections)
    self_modification: SelfModification = Field(default_factory=SelfModification)

    capabilities: Tuple[str, ...] = Field(default=())
