"""
Auto-Assignment Planner
=======================
Greedy fair rotation over the roster.

Algorithm:
    - Clear every assignment
    - Walk dates ascending, each day's slots in catalog order
    - A single cursor rotates over the roster for the whole month
    - For each slot, scan at most one full wrap from the cursor and take
      the first person whose per-day tally stays within the rules
    - On acceptance the cursor moves one past the accepted person; when
      nobody fits the slot stays empty and the cursor does not move

This is a single-pass heuristic, not an optimal solver. The scan order
is fixed so that the same slots and roster always give the same plan.
"""
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from duty_rota.models.constraints import DEFAULT_RULES, RuleConfig
from duty_rota.models.duty_time import Period
from duty_rota.models.person import Person
from duty_rota.models.slot import DutySlot, group_by_day
from duty_rota.utils.logging_setup import get_logger, log_function_call
from duty_rota.utils.structured_logging import get_structured_logger

logger = get_logger("duty_rota.solver.planner")
slog = get_structured_logger("duty_rota.solver.planner")


@dataclass(frozen=True)
class DayTally:
    """One person's assignments on the day being planned."""
    count: int = 0
    has_morning: bool = False
    has_night: bool = False

    def add(self, period: Period) -> "DayTally":
        return DayTally(
            count=self.count + 1,
            has_morning=self.has_morning or period == Period.MORNING,
            has_night=self.has_night or period == Period.NIGHT,
        )

    def allows(self, config: RuleConfig) -> bool:
        """True if this tally respects the per-day rules."""
        if self.count > config.max_per_day:
            return False
        if config.forbid_cross_period and self.has_morning and self.has_night:
            return False
        return True


@log_function_call
def auto_assign(
    slots: Sequence[DutySlot],
    roster: Sequence[Person],
    config: Optional[RuleConfig] = None,
) -> List[DutySlot]:
    """
    Recompute every assignment from scratch with the rotating cursor.

    Args:
        slots: Month slot collection (not modified)
        roster: Ordered roster; order drives the rotation
        config: Rule configuration

    Returns:
        New list in the input order. With an empty roster the slots are
        returned as they are.
    """
    if not roster:
        logger.info("Empty roster, nothing to assign")
        return list(slots)

    config = config or DEFAULT_RULES
    people = list(roster)
    n = len(people)

    result = [s.with_person(None) for s in slots]
    position = {s.slot_id: i for i, s in enumerate(result)}

    cursor = 0
    for day_slots in group_by_day(result).values():
        tallies: Dict[str, DayTally] = {}

        for slot in day_slots:
            for i in range(n):
                candidate = people[(cursor + i) % n]
                tally = tallies.get(candidate.id, DayTally()).add(slot.period)
                if not tally.allows(config):
                    continue

                tallies[candidate.id] = tally
                result[position[slot.slot_id]] = slot.with_person(candidate.id)
                cursor = (cursor + i + 1) % n
                logger.debug(f"{slot.slot_id} -> {candidate.id}")
                break
            else:
                logger.debug(f"{slot.slot_id} left unassigned, no candidate fits")

    return result


@dataclass
class PlanResult:
    """Outcome of an auto-assignment run."""
    slots: List[DutySlot]
    assigned: int = 0
    unassigned: int = 0
    load: Dict[str, int] = field(default_factory=dict)  # {person_id: slots}

    @property
    def fully_covered(self) -> bool:
        return self.unassigned == 0


def plan_month(
    slots: Sequence[DutySlot],
    roster: Sequence[Person],
    config: Optional[RuleConfig] = None,
) -> PlanResult:
    """
    Run ``auto_assign`` and summarize the coverage it achieved.
    """
    planned = auto_assign(slots, roster, config)
    counts = Counter(s.person_id for s in planned if s.is_assigned)
    load = {p.id: counts.get(p.id, 0) for p in roster}

    result = PlanResult(
        slots=planned,
        assigned=sum(counts.values()),
        unassigned=sum(1 for s in planned if not s.is_assigned),
        load=load,
    )

    slog.info(
        "auto_assign_finished",
        slots=len(planned),
        roster=len(roster),
        assigned=result.assigned,
        unassigned=result.unassigned,
    )
    if result.unassigned:
        logger.warning(f"{result.unassigned} slots could not be filled")
    return result
