"""Tabular view of a month's slots."""
from typing import Optional, Sequence

import pandas as pd

from duty_rota.models.constraints import RuleConfig
from duty_rota.models.person import Person
from duty_rota.models.slot import DutySlot, sort_slots, weekday_name
from duty_rota.solver.validation import slot_conflicts

SLOT_COLUMNS = [
    "slot_id", "date", "weekday", "time_id", "label", "period",
    "person_id", "person_name", "attire", "conflicts",
]


def slots_to_dataframe(
    slots: Sequence[DutySlot],
    roster: Sequence[Person],
    config: Optional[RuleConfig] = None,
) -> pd.DataFrame:
    """
    One row per slot in display order, with assignee name and conflicts.

    ``conflicts`` holds the conflict codes joined with ``|`` (empty when
    clean or unassigned).
    """
    if not slots:
        return pd.DataFrame(columns=SLOT_COLUMNS)

    names = {p.id: p.name for p in roster}
    badges = slot_conflicts(slots, config)

    rows = []
    for s in sort_slots(slots):
        time = s.duty_time
        rows.append({
            "slot_id": s.slot_id,
            "date": s.date,
            "weekday": weekday_name(s.date),
            "time_id": time.id.value,
            "label": time.label,
            "period": time.period.value,
            "person_id": s.person_id or "",
            "person_name": names.get(s.person_id, "") if s.person_id else "",
            "attire": s.attire,
            "conflicts": "|".join(r.value for r in badges.get(s.slot_id, [])),
        })
    return pd.DataFrame(rows, columns=SLOT_COLUMNS)


def load_matrix(slots: Sequence[DutySlot], roster: Sequence[Person]) -> pd.DataFrame:
    """Person × date matrix of assigned duty time ids (``/``-joined)."""
    df = slots_to_dataframe(slots, roster)
    df = df[df["person_id"] != ""]
    if df.empty:
        return pd.DataFrame()

    return df.pivot_table(
        index="person_name",
        columns="date",
        values="time_id",
        aggfunc=lambda x: "/".join(sorted(str(v) for v in x)),
        fill_value="",
    )
