"""
Month Statistics
================
Coverage and per-person load for a month's assignment state.
"""
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from duty_rota.models.person import Person
from duty_rota.models.slot import DutySlot
from duty_rota.utils.logging_setup import get_logger

logger = get_logger("duty_rota.solver.stats")


@dataclass
class MonthStats:
    """Coverage summary for one month."""
    total: int
    assigned: int
    pending: int
    coverage: float  # Percent of slots assigned, 0..100
    person_counts: Dict[str, int] = field(default_factory=dict)
    busiest: Optional[str] = None
    busiest_count: int = 0


def calculate_month_stats(slots: Sequence[DutySlot], roster: Sequence[Person]) -> MonthStats:
    """
    Compute coverage and per-person counts.

    ``person_counts`` lists every roster member in roster order, zero
    filled. ``busiest`` is the first roster member with the highest
    count, or None for an empty roster.
    """
    total = len(slots)
    counts = Counter(s.person_id for s in slots if s.is_assigned)
    assigned = sum(counts.values())

    person_counts = {p.id: counts.get(p.id, 0) for p in roster}

    busiest = None
    busiest_count = 0
    for pid, n in person_counts.items():
        if busiest is None or n > busiest_count:
            busiest, busiest_count = pid, n

    stats = MonthStats(
        total=total,
        assigned=assigned,
        pending=total - assigned,
        coverage=(assigned / total) * 100 if total else 0.0,
        person_counts=person_counts,
        busiest=busiest,
        busiest_count=busiest_count,
    )
    logger.debug(f"Month stats: {assigned}/{total} assigned ({stats.coverage:.0f}%)")
    return stats


def stats_to_dict_list(stats: MonthStats, roster: Sequence[Person]) -> List[Dict]:
    """Per-person rows for tables and exports."""
    return [
        {
            "id": p.id,
            "Nombre": p.name,
            "Turnos": stats.person_counts.get(p.id, 0),
        }
        for p in roster
    ]
