"""Duty slots, day groups and month navigation."""
import calendar
from dataclasses import dataclass, replace
from datetime import date
from typing import Dict, Iterable, List, Optional

from .duty_time import DutyTime, DutyTimeId, Period, catalog_index, get_duty_time


MONTH_NAMES = [
    "Enero", "Febrero", "Marzo", "Abril", "Mayo", "Junio",
    "Julio", "Agosto", "Septiembre", "Octubre", "Noviembre", "Diciembre",
]

# Indexed by date.weekday() (Monday = 0)
WEEKDAY_NAMES = ["Lunes", "Martes", "Miércoles", "Jueves", "Viernes", "Sábado", "Domingo"]


@dataclass(frozen=True)
class DutySlot:
    """One concrete duty occurrence. Identity is (date, time_id)."""
    date: date
    time_id: DutyTimeId
    attire: str
    person_id: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.time_id, DutyTimeId):
            object.__setattr__(self, "time_id", DutyTimeId(self.time_id))

    @property
    def slot_id(self) -> str:
        """Unique id within a month: ISO date + duty time id."""
        return f"{self.date.isoformat()}-{self.time_id.value}"

    @property
    def duty_time(self) -> DutyTime:
        return get_duty_time(self.time_id)

    @property
    def period(self) -> Period:
        return self.duty_time.period

    @property
    def is_assigned(self) -> bool:
        return self.person_id is not None

    def with_person(self, person_id: Optional[str]) -> "DutySlot":
        """Copy with the assignment replaced (None clears it)."""
        return replace(self, person_id=person_id)

    def with_attire(self, attire: str) -> "DutySlot":
        """Copy with the attire text replaced."""
        return replace(self, attire=attire)

    def __repr__(self):
        who = self.person_id or "-"
        return f"DutySlot({self.slot_id}: {who})"


def slot_sort_key(slot: DutySlot):
    return (slot.date, catalog_index(slot.time_id))


def sort_slots(slots: Iterable[DutySlot]) -> List[DutySlot]:
    """Order slots by date, then by duty time catalog order."""
    return sorted(slots, key=slot_sort_key)


def group_by_day(slots: Iterable[DutySlot]) -> Dict[date, List[DutySlot]]:
    """
    Build the day-group view: dates ascending, each day's slots in catalog order.
    """
    groups: Dict[date, List[DutySlot]] = {}
    for slot in sort_slots(slots):
        groups.setdefault(slot.date, []).append(slot)
    return groups


@dataclass(frozen=True)
class MonthYear:
    """A civil calendar month; ``month`` runs 1..12."""
    year: int
    month: int

    def shift(self, delta: int) -> "MonthYear":
        """The month ``delta`` months away, rolling the year as needed."""
        index = self.year * 12 + (self.month - 1) + delta
        return MonthYear(index // 12, index % 12 + 1)

    @property
    def label(self) -> str:
        """Display label, e.g. ``Octubre 2025``."""
        return f"{MONTH_NAMES[self.month - 1]} {self.year}"

    @property
    def days(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    @classmethod
    def of(cls, d: date) -> "MonthYear":
        return cls(d.year, d.month)


def weekday_name(d: date) -> str:
    return WEEKDAY_NAMES[d.weekday()]
