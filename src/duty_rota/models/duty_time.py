"""Duty time catalog and period definitions."""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple


class Period(str, Enum):
    """Coarse time-of-day classification used by the cross-period rule."""
    MORNING = "morning"
    NIGHT = "night"


class DutyTimeId(str, Enum):
    """Time-of-day codes for the services a squire can cover."""
    T0700 = "07:00"
    T0930 = "09:30"
    T1100 = "11:00"
    T1800 = "18:00"
    T1830 = "18:30"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class DutyTime:
    """One catalog entry: a service time with its period and default attire."""
    id: DutyTimeId
    label: str
    period: Period
    default_attire: str


# Catalog order is significant: slots are displayed and planned in this order.
DUTY_TIMES: Tuple[DutyTime, ...] = (
    DutyTime(DutyTimeId.T0700, "7:00 AM", Period.MORNING,
             "Traje azul, camisa blanca, zapatos negros."),
    DutyTime(DutyTimeId.T0930, "9:30 AM", Period.MORNING,
             "Camisa blanca, chaqueta azul, pantalón negro, zapatos negros."),
    DutyTime(DutyTimeId.T1100, "11:00 AM", Period.MORNING,
             "Chaqueta azul, camisa blanca, pantalón gris, zapatos negros."),
    DutyTime(DutyTimeId.T1800, "6:00 PM", Period.NIGHT,
             "Traje azul, camisa blanca, correa negra, zapatos negros."),
    DutyTime(DutyTimeId.T1830, "6:30 PM", Period.NIGHT,
             "Camisa blanca, chaqueta azul, pantalón negro, zapatos negros."),
)

_BY_ID: Dict[DutyTimeId, DutyTime] = {t.id: t for t in DUTY_TIMES}
_INDEX: Dict[DutyTimeId, int] = {t.id: i for i, t in enumerate(DUTY_TIMES)}

# Attire presets offered by the attire picker
UNIFORM_OPTIONS: List[str] = [
    "Traje azul, camisa blanca, zapatos negros.",
    "Camisa blanca, chaqueta azul, pantalón negro, zapatos negros.",
    "Chaqueta azul, camisa blanca, pantalón gris, zapatos negros.",
    "Traje azul, camisa blanca, correa negra, zapatos negros.",
    "Camisa blanca, pantalón azul, zapatos negros.",
]


def get_duty_time(time_id) -> DutyTime:
    """Look up a catalog entry by id (enum member or its string value)."""
    return _BY_ID[DutyTimeId(time_id)]


def catalog_index(time_id) -> int:
    """Position of a duty time in the catalog."""
    return _INDEX[DutyTimeId(time_id)]


def period_of(time_id) -> Period:
    """Period classification of a duty time."""
    return get_duty_time(time_id).period
