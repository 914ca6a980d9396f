"""
Calendar Rule Engine
====================
Expands a (year, month) into the duty slots that exist that month.

Weekly cadence:
- Sunday: 07:00, 09:30, 11:00 (morning) and 18:00 (night)
- Wednesday: 18:30 (night)
- Other weekdays: no services
"""
import calendar
from datetime import date
from typing import Dict, List, Tuple

from duty_rota.models.duty_time import DutyTimeId, get_duty_time
from duty_rota.models.slot import DutySlot, MonthYear
from duty_rota.utils.logging_setup import get_logger, log_function_call

logger = get_logger("duty_rota.engine.calendar_rules")

# Keyed by date.weekday() (Monday = 0)
DUTY_CADENCE: Dict[int, Tuple[DutyTimeId, ...]] = {
    calendar.SUNDAY: (DutyTimeId.T0700, DutyTimeId.T0930, DutyTimeId.T1100, DutyTimeId.T1800),
    calendar.WEDNESDAY: (DutyTimeId.T1830,),
}


def duty_times_for(d: date) -> Tuple[DutyTimeId, ...]:
    """Duty time ids scheduled on a given date (empty for off days)."""
    return DUTY_CADENCE.get(d.weekday(), ())


@log_function_call
def generate_slots(year: int, month: int) -> List[DutySlot]:
    """
    Generate the empty duty slots for a month.

    Args:
        year: Calendar year
        month: Calendar month, 1..12. Out-of-range values are not
            supported; the error raised by ``calendar`` propagates.

    Returns:
        Unassigned slots ordered by date then catalog order, each with
        its duty time's default attire
    """
    _, days = calendar.monthrange(year, month)
    slots: List[DutySlot] = []

    for day in range(1, days + 1):
        d = date(year, month, day)
        for time_id in duty_times_for(d):
            slots.append(DutySlot(
                date=d,
                time_id=time_id,
                attire=get_duty_time(time_id).default_attire,
            ))

    logger.debug(f"Generated {len(slots)} slots for {year}-{month:02d}")
    return slots


def generate_month(month_year: MonthYear) -> List[DutySlot]:
    """Generate slots for a ``MonthYear``."""
    return generate_slots(month_year.year, month_year.month)
