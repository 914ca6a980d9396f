"""
Conflict Detection
==================
Checks a person's same-day assignments against the per-day rules:

- MAX_TWO_PER_DAY: more than ``max_per_day`` slots on one date
- NO_CROSS_PERIOD: a morning and a night slot on the same date

Conflicts are advisory. Any assignment state may be stored; this module
only reports what is wrong with it.
"""
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Dict, Iterable, List, Optional

from duty_rota.models.constraints import DEFAULT_RULES, RuleConfig
from duty_rota.models.duty_time import Period
from duty_rota.models.slot import DutySlot, sort_slots
from duty_rota.utils.logging_setup import get_logger, log_constraint

logger = get_logger("duty_rota.solver.validation")


class ConflictReason(str, Enum):
    """Rule broken by a person's assignments on one date."""
    MAX_TWO_PER_DAY = "MAX_TWO_PER_DAY"
    NO_CROSS_PERIOD = "NO_CROSS_PERIOD"

    @property
    def message(self) -> str:
        """Label shown next to a conflicting assignment."""
        return {
            ConflictReason.MAX_TWO_PER_DAY: "Máximo 2 turnos por día para el mismo escudero.",
            ConflictReason.NO_CROSS_PERIOD: "No puede estar en turnos de mañana y noche el mismo día.",
        }[self]


def find_conflicts(
    slots: Iterable[DutySlot],
    target: DutySlot,
    person_id: Optional[str],
    config: Optional[RuleConfig] = None,
) -> List[ConflictReason]:
    """
    Conflicts that assigning ``person_id`` to ``target`` would produce.

    Also used in read mode, with ``person_id`` set to the target's own
    assignee, to check an existing assignment.

    Args:
        slots: The current slot collection for the month
        target: Slot being (hypothetically) assigned
        person_id: Candidate person; None (no assignee) is always clean
        config: Rule configuration (defaults to the fixed policy)

    Returns:
        Conflict reasons, count rule first; empty when clean
    """
    if person_id is None:
        return []

    config = config or DEFAULT_RULES
    target_id = target.slot_id

    same_day = [
        s for s in slots
        if s.date == target.date and s.person_id == person_id and s.slot_id != target_id
    ]

    conflicts: List[ConflictReason] = []

    if len(same_day) + 1 > config.max_per_day:
        conflicts.append(ConflictReason.MAX_TWO_PER_DAY)

    periods = {s.period for s in same_day}
    periods.add(target.period)
    if config.forbid_cross_period and Period.MORNING in periods and Period.NIGHT in periods:
        conflicts.append(ConflictReason.NO_CROSS_PERIOD)

    return conflicts


def slot_conflicts(
    slots: Iterable[DutySlot],
    config: Optional[RuleConfig] = None,
) -> Dict[str, List[ConflictReason]]:
    """
    Conflict badge for every assigned slot.

    Returns:
        {slot_id: reasons} for each assigned slot (empty list when clean)
    """
    slots = list(slots)
    return {
        s.slot_id: find_conflicts(slots, s, s.person_id, config)
        for s in slots
        if s.is_assigned
    }


@dataclass
class Violation:
    """One conflicting assignment."""
    slot_id: str
    date: date
    time_id: str
    person_id: str
    reason: ConflictReason

    @property
    def message(self) -> str:
        return self.reason.message


@dataclass
class ValidationResult:
    """Conflict report for a month's assignment state."""
    total_slots: int = 0
    unassigned: int = 0
    conflicts: Dict[str, List[ConflictReason]] = field(default_factory=dict)
    violations: List[Violation] = field(default_factory=list)

    @property
    def has_conflicts(self) -> bool:
        return bool(self.violations)

    @property
    def conflicted_slots(self) -> List[str]:
        """Ids of slots carrying at least one conflict."""
        return [slot_id for slot_id, reasons in self.conflicts.items() if reasons]

    def by_reason(self, reason: ConflictReason) -> List[Violation]:
        return [v for v in self.violations if v.reason == reason]

    def as_dict(self) -> Dict[str, int]:
        return {
            "total_slots": self.total_slots,
            "unassigned": self.unassigned,
            "conflicted_slots": len(self.conflicted_slots),
            ConflictReason.MAX_TWO_PER_DAY.value: len(self.by_reason(ConflictReason.MAX_TWO_PER_DAY)),
            ConflictReason.NO_CROSS_PERIOD.value: len(self.by_reason(ConflictReason.NO_CROSS_PERIOD)),
        }


def validate_month(
    slots: Iterable[DutySlot],
    config: Optional[RuleConfig] = None,
) -> ValidationResult:
    """
    Check every assigned slot of a month and collect the violations.

    Args:
        slots: Current slot collection
        config: Rule configuration

    Returns:
        ValidationResult; violations are listed in display order
    """
    ordered = sort_slots(slots)
    conflicts = slot_conflicts(ordered, config)
    result = ValidationResult(
        total_slots=len(ordered),
        unassigned=sum(1 for s in ordered if not s.is_assigned),
        conflicts=conflicts,
    )

    for s in ordered:
        for reason in conflicts.get(s.slot_id, []):
            result.violations.append(Violation(
                slot_id=s.slot_id,
                date=s.date,
                time_id=s.time_id.value,
                person_id=s.person_id,
                reason=reason,
            ))
            log_constraint(logger, reason.value, False, f"{s.slot_id} {s.person_id}")

    logger.debug(
        f"Validated {result.total_slots} slots: "
        f"{len(result.violations)} violations, {result.unassigned} unassigned"
    )
    return result
