"""Rule configuration for conflict detection and auto-assignment."""
from dataclasses import dataclass
from typing import Any, Dict


def _parse_bool(value: Any, default: bool) -> bool:
    """Read a flag that may arrive as bool, number or text."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    text = str(value).strip().lower()
    if text in ("1", "true", "yes", "si", "sí", "on"):
        return True
    if text in ("0", "false", "no", "off", ""):
        return False
    raise ValueError(f"Not a boolean: {value!r}")


@dataclass(frozen=True)
class RuleConfig:
    """Per-day assignment rules applied to each person."""

    max_per_day: int = 2  # Max slots one person may hold on a single date
    forbid_cross_period: bool = True  # No morning and night service the same date

    def to_dict(self) -> Dict:
        """Serialize to dictionary."""
        return {
            "max_per_day": self.max_per_day,
            "forbid_cross_period": self.forbid_cross_period,
        }

    @classmethod
    def from_dict(cls, d: Dict) -> "RuleConfig":
        """Create from dictionary; unknown keys are ignored."""
        return cls(
            max_per_day=int(d.get("max_per_day", 2)),
            forbid_cross_period=_parse_bool(d.get("forbid_cross_period"), True),
        )


DEFAULT_RULES = RuleConfig()
