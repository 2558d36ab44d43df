"""
BudgetPilot configuration management.

Supports loading from YAML files, environment variables, and keyword overrides.
"""

from __future__ import annotations

import os
from logging import getLevelName
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator


class DisplayConfig(BaseModel):
    """How money values are shown."""

    currency: str = Field(default="USD")
    currency_symbol: str = Field(default="$")
    locale: str = Field(default="en_US")
    decimals: int = Field(default=2, ge=0, le=6)


class ProjectionConfig(BaseModel):
    """Defaults for account projections."""

    horizon_months: int = Field(default=12, ge=0, description="Months to project forward")


class SplitConfig(BaseModel):
    """Recommended budget split of monthly take-home (50/30/20 rule)."""

    needs: float = Field(default=0.5, ge=0.0, le=1.0)
    wants: float = Field(default=0.3, ge=0.0, le=1.0)
    savings: float = Field(default=0.2, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def _check_total(self) -> SplitConfig:
        total = self.needs + self.wants + self.savings
        if abs(total - 1.0) > 1e-9:
            raise ValueError(f"needs + wants + savings must equal 1.0, got {total:.4f}")
        return self


class LoggingConfig(BaseModel):
    level: str = Field(default="WARNING")
    format: str = Field(default="%(asctime)s %(levelname)s %(name)s: %(message)s")

    @field_validator("level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        v = v.upper()
        if not isinstance(getLevelName(v), int):
            raise ValueError(f"unknown log level: {v}")
        return v


class BudgetPilotConfig(BaseModel):
    """Root configuration for BudgetPilot."""

    display: DisplayConfig = Field(default_factory=DisplayConfig)
    projection: ProjectionConfig = Field(default_factory=ProjectionConfig)
    recommended_split: SplitConfig = Field(default_factory=SplitConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: str | None = None, **overrides: Any) -> BudgetPilotConfig:
        """Load configuration from file, env vars, and overrides.

        Priority: overrides > env vars > config file > defaults.
        """
        data: dict[str, Any] = {}

        # 1. Load from YAML file if provided
        if config_path:
            path = Path(config_path)
            if path.exists():
                with open(path) as f:
                    data = yaml.safe_load(f) or {}

        # 2. Override from environment variables
        env_currency = os.environ.get("BUDGETPILOT_CURRENCY")
        env_horizon = os.environ.get("BUDGETPILOT_HORIZON_MONTHS")
        env_log_level = os.environ.get("BUDGETPILOT_LOG_LEVEL")

        if env_currency:
            display = data.get("display", {})
            display["currency"] = env_currency
            data["display"] = display

        if env_horizon:
            projection = data.get("projection", {})
            projection["horizon_months"] = env_horizon
            data["projection"] = projection

        if env_log_level:
            log = data.get("logging", {})
            log["level"] = env_log_level.upper()
            data["logging"] = log

        # 3. Apply keyword overrides
        data.update(overrides)

        return cls.model_validate(data)
