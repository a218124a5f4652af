"""
Custom Exceptions - Coordination Framework
coordination_framework/core/exceptions.py

Weight validation itself surfaces as pydantic ``ValidationError`` from
``WeightSet``; these cover the remaining failure modes.
"""


class ScoringException(Exception):
    """Base exception for scoring operations."""

    pass


class WeightAdaptationError(ScoringException):
    """Cultural reweighting produced weights that cannot be renormalised."""

    def __init__(self, cultural_context: str, total: float):
        self.cultural_context = cultural_context
        self.total = total
        super().__init__(
            f"Adapted weights for culture '{cultural_context}' sum to {total}; "
            f"cannot renormalise"
        )


class UnknownSampleAgentError(ScoringException):
    """Requested sample agent is not in the catalogue."""

    def __init__(self, agent_key: str):
        self.agent_key = agent_key
        super().__init__(f"Sample agent '{agent_key}' not found")
