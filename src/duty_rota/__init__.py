"""
Duty Rota
=========
Monthly duty roster engine: slot generation from the weekly cadence,
conflict detection, and fair-rotation auto-assignment.
"""
from duty_rota.engine.calendar_rules import generate_month, generate_slots
from duty_rota.models import (
    DEFAULT_ROSTER,
    DUTY_TIMES,
    DutySlot,
    DutyTime,
    DutyTimeId,
    MonthYear,
    Period,
    Person,
    RuleConfig,
)
from duty_rota.solver.planner import auto_assign, plan_month
from duty_rota.solver.stats import calculate_month_stats
from duty_rota.solver.validation import ConflictReason, find_conflicts, slot_conflicts, validate_month
from duty_rota.store import AssignmentStore, assign, clear, clear_all, set_attire

__version__ = "0.1.0"

__all__ = [
    "generate_slots", "generate_month",
    "find_conflicts", "slot_conflicts", "validate_month", "ConflictReason",
    "auto_assign", "plan_month", "calculate_month_stats",
    "assign", "clear", "set_attire", "clear_all", "AssignmentStore",
    "DutySlot", "DutyTime", "DutyTimeId", "Period", "Person", "MonthYear",
    "RuleConfig", "DUTY_TIMES", "DEFAULT_ROSTER",
]
