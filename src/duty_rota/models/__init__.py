# duty_rota/models - Data models for the duty roster
from .constraints import DEFAULT_RULES, RuleConfig
from .duty_time import (
    DUTY_TIMES,
    UNIFORM_OPTIONS,
    DutyTime,
    DutyTimeId,
    Period,
    catalog_index,
    get_duty_time,
    period_of,
)
from .person import DEFAULT_ROSTER, Person, RosterError, validate_roster
from .slot import (
    MONTH_NAMES,
    WEEKDAY_NAMES,
    DutySlot,
    MonthYear,
    group_by_day,
    sort_slots,
)

__all__ = [
    "Period", "DutyTimeId", "DutyTime", "DUTY_TIMES", "UNIFORM_OPTIONS",
    "get_duty_time", "catalog_index", "period_of",
    "Person", "RosterError", "DEFAULT_ROSTER", "validate_roster",
    "DutySlot", "MonthYear", "group_by_day", "sort_slots",
    "MONTH_NAMES", "WEEKDAY_NAMES",
    "RuleConfig", "DEFAULT_RULES",
]
