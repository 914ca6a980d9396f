# duty_rota/solver - Conflict detection, auto-assignment and statistics
from .planner import DayTally, PlanResult, auto_assign, plan_month
from .stats import MonthStats, calculate_month_stats, stats_to_dict_list
from .validation import (
    ConflictReason,
    ValidationResult,
    Violation,
    find_conflicts,
    slot_conflicts,
    validate_month,
)

__all__ = [
    "find_conflicts",
    "slot_conflicts",
    "validate_month",
    "ConflictReason",
    "ValidationResult",
    "Violation",
    "auto_assign",
    "plan_month",
    "PlanResult",
    "DayTally",
    "calculate_month_stats",
    "stats_to_dict_list",
    "MonthStats",
]
