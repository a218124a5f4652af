import math
from typing import Any, Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

WEIGHT_SUM_TOLERANCE = 0.001

WEIGHT_FIELDS = ("historical", "present", "prospective", "meta_adaptive")


class WeightSet(BaseModel):
    """
    ATCF component weights (α, β, γ, δ).

    The four coefficients must be non-negative and sum to 1.0 within
    ``WEIGHT_SUM_TOLERANCE``; anything else fails at construction.
    Sums inside the tolerance are rescaled so the stored coefficients
    sum to exactly 1.0 (up to float rounding).
    """

    model_config = ConfigDict(frozen=True)

    historical: float = Field(
        default=0.25,
        ge=0,
        le=1,
        description="α — weight of historical continuity (HC)"
    )

    present: float = Field(
        default=0.25,
        ge=0,
        le=1,
        description="β — weight of present integration (PI)"
    )

    prospective: float = Field(
        default=0.25,
        ge=0,
        le=1,
        description="γ — weight of prospective coherence (PC)"
    )

    meta_adaptive: float = Field(
        default=0.25,
        ge=0,
        le=1,
        description="δ — weight of meta-adaptive (meta-constructor) capacity (MCC)"
    )

    @model_validator(mode="before")
    @classmethod
    def validate_weight_sum(cls, data: Any) -> Any:
        """Ensure weights sum to 1.0, then rescale onto the exact sum."""
        if not isinstance(data, dict):
            # from_attributes input: read the weights off the object
            present = [name for name in WEIGHT_FIELDS if hasattr(data, name)]
            if not present:
                return data
            data = {name: getattr(data, name) for name in present}

        values = {
            name: data.get(name, cls.model_fields[name].default)
            for name in WEIGHT_FIELDS
        }
        try:
            numeric = {name: float(value) for name, value in values.items()}
        except (TypeError, ValueError):
            # Field validation reports the offending value
            return data

        total = sum(numeric.values())
        if not math.isfinite(total) or abs(total - 1.0) > WEIGHT_SUM_TOLERANCE:
            raise ValueError(f"ATCF weights must sum to 1.0, got {total}")

        return {**data, **{name: value / total for name, value in numeric.items()}}

    @model_validator(mode="after")
    def check_weight_sum(self):
        """Reject any constructed instance whose weights do not sum to 1.0."""
        if abs(self.total - 1.0) > WEIGHT_SUM_TOLERANCE:
            raise ValueError(f"ATCF weights must sum to 1.0, got {self.total}")
        return self

    @property
    def total(self) -> float:
        return self.historical + self.present + self.prospective + self.meta_adaptive

    def as_tuple(self) -> Tuple[float, float, float, float]:
        """Weights in component order (HC, PI, PC, MCC)."""
        return (self.historical, self.present, self.prospective, self.meta_adaptive)

    def as_dict(self) -> Dict[str, float]:
        return {name: getattr(self, name) for name in WEIGHT_FIELDS}
