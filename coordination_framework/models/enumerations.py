from enum import Enum


class CulturalBackground(str, Enum):
    INDIVIDUALISTIC = "individualistic"
    COLLECTIVISTIC = "collectivistic"
    TRADITIONAL = "traditional"
    INDIGENOUS = "indigenous"


class InterpretationLevel(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    MODERATE = "moderate"
    LOW = "low"
    VERY_LOW = "very_low"


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Priority(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Sort rank: critical > high > medium > low."""
        return _PRIORITY_RANK[self]


class InterventionType(str, Enum):
    PRF_ALIGNMENT = "prf_alignment"                        # Beliefs / rules / ontology / authenticity
    CAPABILITY_DEVELOPMENT = "capability_development"
    CULTURAL_BRIDGING = "cultural_bridging"
    COMPREHENSIVE_COORDINATION = "comprehensive_coordination"


_PRIORITY_RANK = {
    Priority.CRITICAL: 4,
    Priority.HIGH: 3,
    Priority.MEDIUM: 2,
    Priority.LOW: 1,
}
