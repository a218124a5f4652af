"""
Capability-Based Coordination Framework — scoring library.

Subpackages:
    models/   - AgentProfile, WeightSet, enumerations
    scoring/  - ATCF, cultural weighting and coordination calculators
    data/     - Sample agents used by the demos
    core/     - Logging setup and exceptions
    scripts/  - Command-line runners
"""

__version__ = "1.0.0"
