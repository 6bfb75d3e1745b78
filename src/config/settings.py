# src/config/settings.py — v1
"""Typed configuration loaded from .env via pydantic-settings.

Single source of truth for deployment-specific settings: where the
directory comes from, how the assistant paces its replies, the default
search constraints and logging.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fixerhub.core.models import ConstraintSet


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Directory source ===
    directory_backend: Literal["seed", "json"] = "seed"
    directory_path: Path | None = None

    # === Assistant ===
    assistant_reply_delay_s: float = 1.0

    # === Default search constraints (None = unbounded) ===
    search_max_distance: float | None = None
    search_min_rating: float = 0.0
    search_max_price: float | None = None
    search_verified_only: bool = False

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    log_format: Literal["json", "text"] = "json"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 30

    # --- Validators ---

    @field_validator("assistant_reply_delay_s")
    @classmethod
    def validate_reply_delay(cls, v: float) -> float:
        if v < 0:
            raise ValueError("assistant_reply_delay_s must be >= 0")
        return v

    @field_validator("search_min_rating")
    @classmethod
    def validate_min_rating(cls, v: float) -> float:
        if not 0.0 <= v <= 5.0:
            raise ValueError("search_min_rating must be between 0 and 5")
        return v

    @field_validator("search_max_distance", "search_max_price")
    @classmethod
    def validate_upper_bounds(cls, v: float | None) -> float | None:
        if v is not None and v < 0:
            raise ValueError("search upper bounds must be >= 0")
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate cross-field consistency rules."""
        errors: list[str] = []

        if self.directory_backend == "json" and self.directory_path is None:
            errors.append("DIRECTORY_BACKEND=json requires DIRECTORY_PATH")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self

    # --- Helpers ---

    def default_constraints(self) -> ConstraintSet:
        """Constraint set applied when the caller does not supply one."""
        return ConstraintSet(
            max_distance=(
                math.inf if self.search_max_distance is None
                else self.search_max_distance
            ),
            min_rating=self.search_min_rating,
            max_price=(
                math.inf if self.search_max_price is None
                else self.search_max_price
            ),
            verified_only=self.search_verified_only,
        )


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Args:
        **overrides: Field-level overrides (for testing or CLI flags).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
