"""
Assignment Store
================
State transitions over a month's slot collection.

Each function takes the current slots and returns a new list in which
at most one slot has been replaced; every other element is the same
object as before, so callers can detect changes by identity. No rule
checking happens here: invalid states are allowed and reported by
``duty_rota.solver.validation``.
"""
from typing import Callable, Dict, List, Optional, Sequence

from duty_rota.engine.calendar_rules import generate_month
from duty_rota.models.constraints import DEFAULT_RULES, RuleConfig
from duty_rota.models.person import DEFAULT_ROSTER, Person, validate_roster
from duty_rota.models.slot import DutySlot, MonthYear
from duty_rota.solver.planner import auto_assign
from duty_rota.solver.stats import MonthStats, calculate_month_stats
from duty_rota.solver.validation import ConflictReason, slot_conflicts
from duty_rota.utils.logging_setup import get_logger

logger = get_logger("duty_rota.store")


def find_slot(slots: Sequence[DutySlot], slot_id: str) -> Optional[DutySlot]:
    """The slot with the given id, or None."""
    for s in slots:
        if s.slot_id == slot_id:
            return s
    return None


def _replace_one(
    slots: Sequence[DutySlot],
    slot_id: str,
    update: Callable[[DutySlot], DutySlot],
) -> List[DutySlot]:
    result = list(slots)
    for i, s in enumerate(result):
        if s.slot_id == slot_id:
            result[i] = update(s)
            return result
    logger.debug(f"Unknown slot {slot_id!r}, collection unchanged")
    return result


def assign(slots: Sequence[DutySlot], slot_id: str, person_id: str) -> List[DutySlot]:
    """Assign a person to one slot."""
    return _replace_one(slots, slot_id, lambda s: s.with_person(person_id))


def clear(slots: Sequence[DutySlot], slot_id: str) -> List[DutySlot]:
    """Remove the assignment from one slot."""
    return _replace_one(slots, slot_id, lambda s: s.with_person(None))


def set_attire(slots: Sequence[DutySlot], slot_id: str, text: str) -> List[DutySlot]:
    """Replace the attire text of one slot."""
    return _replace_one(slots, slot_id, lambda s: s.with_attire(text))


def clear_all(slots: Sequence[DutySlot]) -> List[DutySlot]:
    """Remove every assignment; unassigned slots are kept as the same objects."""
    return [s.with_person(None) if s.is_assigned else s for s in slots]


class AssignmentStore:
    """
    Mutable holder for a planning session.

    Wraps the pure transitions above for collaborators that prefer a
    stateful object. Calls must be serialized by the caller.
    """

    def __init__(
        self,
        month: MonthYear,
        roster: Sequence[Person] = DEFAULT_ROSTER,
        config: RuleConfig = DEFAULT_RULES,
    ):
        self.roster = validate_roster(roster)
        self.config = config
        self.month = month
        self.slots: List[DutySlot] = generate_month(month)

    def __repr__(self):
        return f"AssignmentStore({self.month.label}, {len(self.slots)} slots)"

    def change_month(self, month: MonthYear) -> List[DutySlot]:
        """Switch months; the previous slots are discarded."""
        logger.info(f"Month changed {self.month.label} -> {month.label}")
        self.month = month
        self.slots = generate_month(month)
        return self.slots

    def shift_month(self, delta: int) -> List[DutySlot]:
        """Move ``delta`` months forward (negative for backward)."""
        return self.change_month(self.month.shift(delta))

    def set_roster(self, roster: Sequence[Person]) -> List[DutySlot]:
        """
        Replace the roster, clearing assignments of anyone no longer in it.
        """
        self.roster = validate_roster(roster)
        ids = {p.id for p in self.roster}
        self.slots = [
            s.with_person(None) if s.is_assigned and s.person_id not in ids else s
            for s in self.slots
        ]
        return self.slots

    def assign(self, slot_id: str, person_id: str) -> List[DutySlot]:
        self.slots = assign(self.slots, slot_id, person_id)
        return self.slots

    def clear(self, slot_id: str) -> List[DutySlot]:
        self.slots = clear(self.slots, slot_id)
        return self.slots

    def set_attire(self, slot_id: str, text: str) -> List[DutySlot]:
        self.slots = set_attire(self.slots, slot_id, text)
        return self.slots

    def clear_all(self) -> List[DutySlot]:
        self.slots = clear_all(self.slots)
        return self.slots

    def auto_assign(self) -> List[DutySlot]:
        self.slots = auto_assign(self.slots, self.roster, self.config)
        return self.slots

    def conflicts(self) -> Dict[str, List[ConflictReason]]:
        """Conflict badges for the current state."""
        return slot_conflicts(self.slots, self.config)

    def stats(self) -> MonthStats:
        return calculate_month_stats(self.slots, self.roster)

    def person(self, person_id: str) -> Optional[Person]:
        for p in self.roster:
            if p.id == person_id:
                return p
        return None
