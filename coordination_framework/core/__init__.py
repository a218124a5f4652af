"""
Core Package - Coordination Framework
coordination_framework/core/__init__.py

Core infrastructure: logging setup, exceptions.
"""

from coordination_framework.core.exceptions import (
    ScoringException,
    UnknownSampleAgentError,
    WeightAdaptationError,
)
from coordination_framework.core.logging_config import configure_logging

__all__ = [
    # Logging
    "configure_logging",
    # Exceptions
    "ScoringException",
    "UnknownSampleAgentError",
    "WeightAdaptationError",
]
