"""Framework configuration with validation."""
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from coordination_framework.models.weights import WEIGHT_SUM_TOLERANCE, WeightSet


class Settings(BaseSettings):
    """Framework settings, overridable from the environment or a .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Capability-Based Coordination Framework"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # ATCF base weights (α, β, γ, δ)
    W_HISTORICAL: float = Field(default=0.25, ge=0.0, le=1.0)
    W_PRESENT: float = Field(default=0.25, ge=0.0, le=1.0)
    W_PROSPECTIVE: float = Field(default=0.25, ge=0.0, le=1.0)
    W_META_ADAPTIVE: float = Field(default=0.25, ge=0.0, le=1.0)

    # Historical continuity decay constant, in days
    TEMPORAL_DECAY_DAYS: float = Field(default=30.0, gt=0)

    # Coordination potential at or above which a pairing is considered viable
    COORDINATION_THRESHOLD: float = Field(default=0.7, ge=0.0, le=1.0)

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    @field_validator("LOG_FORMAT", mode="before")
    @classmethod
    def normalize_log_format(cls, v):
        return v.lower() if isinstance(v, str) else v

    @model_validator(mode="after")
    def validate_atcf_weights(self):
        """Validate ATCF weights sum to 1.0."""
        total = self.W_HISTORICAL + self.W_PRESENT + self.W_PROSPECTIVE + self.W_META_ADAPTIVE
        if abs(total - 1.0) > WEIGHT_SUM_TOLERANCE:
            raise ValueError(f"ATCF weights must sum to 1.0, got {total}")
        return self

    @property
    def weight_set(self) -> WeightSet:
        """Get the configured ATCF weights as a WeightSet."""
        return WeightSet(
            historical=self.W_HISTORICAL,
            present=self.W_PRESENT,
            prospective=self.W_PROSPECTIVE,
            meta_adaptive=self.W_META_ADAPTIVE,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
