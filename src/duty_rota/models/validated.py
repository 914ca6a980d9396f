"""
Pydantic Validated Models
=========================
Validation layer for values arriving from outside the core (forms,
files, request payloads).

Usage:
    from duty_rota.models.validated import ValidatedMonth

    month = ValidatedMonth(year=2025, month=10).to_dataclass()

The dataclass models remain the types the core operates on.
"""
from pydantic import BaseModel, ConfigDict, Field

from .constraints import RuleConfig
from .slot import MonthYear


class ValidatedRuleConfig(BaseModel):
    """Pydantic-validated rule configuration."""
    model_config = ConfigDict(validate_assignment=True)

    max_per_day: int = Field(default=2, ge=1, le=5, description="Max slots per person per day")
    forbid_cross_period: bool = Field(default=True)

    def to_dataclass(self) -> RuleConfig:
        return RuleConfig(
            max_per_day=self.max_per_day,
            forbid_cross_period=self.forbid_cross_period,
        )

    @classmethod
    def from_dataclass(cls, config: RuleConfig) -> "ValidatedRuleConfig":
        return cls(
            max_per_day=config.max_per_day,
            forbid_cross_period=config.forbid_cross_period,
        )


class ValidatedMonth(BaseModel):
    """A (year, month) pair checked before it reaches the calendar engine."""

    year: int = Field(ge=1, le=9999)
    month: int = Field(ge=1, le=12)

    def to_dataclass(self) -> MonthYear:
        return MonthYear(self.year, self.month)
