"""
scoring/cultural_adapter.py

Adapts ATCF weights to an agent's cultural background.

Formula:
    w'_i = w_i × m_i(culture) / Σ_j (w_j × m_j(culture))

Unknown (or missing) cultures return the input weights unchanged.
"""

from typing import Mapping, Optional, Union

import structlog

from coordination_framework.core.exceptions import WeightAdaptationError
from coordination_framework.models.enumerations import CulturalBackground
from coordination_framework.models.weights import WEIGHT_FIELDS, WeightSet
from coordination_framework.scoring.tables import CULTURAL_WEIGHT_MODIFIERS

logger = structlog.get_logger(__name__)

CultureTag = Union[CulturalBackground, str, None]


def resolve_culture(culture: CultureTag) -> Optional[CulturalBackground]:
    """Map a culture tag onto the enum; ``None`` if unknown or missing."""
    if culture is None or isinstance(culture, CulturalBackground):
        return culture
    try:
        return CulturalBackground(str(culture).lower())
    except ValueError:
        return None


def culture_name(culture: CultureTag) -> Optional[str]:
    if isinstance(culture, CulturalBackground):
        return culture.value
    return culture


class CulturalWeightAdapter:
    """Rescale ATCF weights by a static per-culture modifier table."""

    def __init__(self, modifiers: Optional[Mapping] = None):
        self.modifiers = CULTURAL_WEIGHT_MODIFIERS if modifiers is None else modifiers
        for culture, row in self.modifiers.items():
            missing = [name for name in WEIGHT_FIELDS if name not in row]
            if missing:
                raise ValueError(f"Modifiers for '{culture}' missing {missing}")
            if any(row[name] <= 0 for name in WEIGHT_FIELDS):
                raise ValueError(f"Modifiers for '{culture}' must all be > 0")

    def modifiers_for(self, culture: CultureTag) -> Optional[Mapping[str, float]]:
        resolved = resolve_culture(culture)
        if resolved is None:
            return None
        return self.modifiers.get(resolved)

    def adapt(self, weights: WeightSet, culture: CultureTag) -> WeightSet:
        """
        Adapt weights for a culture.

        Args:
            weights: Base ATCF weights.
            culture: Cultural background tag.

        Returns:
            A new, renormalised WeightSet (or ``weights`` itself when the
            culture has no modifier row).

        Raises:
            WeightAdaptationError: if the multiplied weights sum to zero.

        Examples:
            >>> adapter = CulturalWeightAdapter()
            >>> adapted = adapter.adapt(WeightSet(), "traditional")
            >>> round(adapted.historical, 4)
            0.3333
        """
        modifiers = self.modifiers_for(culture)
        if modifiers is None:
            logger.debug("weights_not_adapted", cultural_context=culture_name(culture))
            return weights

        raw = {name: getattr(weights, name) * modifiers[name] for name in WEIGHT_FIELDS}
        total = sum(raw.values())
        if total <= 0:
            raise WeightAdaptationError(culture_name(culture), total)

        adapted = WeightSet(**{name: value / total for name, value in raw.items()})

        logger.info(
            "weights_adapted",
            cultural_context=culture_name(culture),
            original_weights=weights.as_dict(),
            adapted_weights=adapted.as_dict(),
        )
        return adapted
