"""Tests for slot generation."""
import calendar
from datetime import date

import pytest

from duty_rota.engine.calendar_rules import duty_times_for, generate_month, generate_slots
from duty_rota.models.duty_time import DutyTimeId, Period, catalog_index, get_duty_time
from duty_rota.models.slot import MonthYear


class TestGenerateSlots:
    """Tests for generate_slots."""

    def test_october_2025_count(self, october_slots):
        """October 2025 has 4 Sundays and 5 Wednesdays."""
        sundays = [d for d in range(1, 32) if date(2025, 10, d).weekday() == calendar.SUNDAY]
        wednesdays = [d for d in range(1, 32) if date(2025, 10, d).weekday() == calendar.WEDNESDAY]
        assert len(sundays) == 4
        assert len(wednesdays) == 5
        assert len(october_slots) == len(sundays) * 4 + len(wednesdays) == 21

    def test_slot_ids_format(self, october_slots):
        ids = [s.slot_id for s in october_slots]
        assert ids[0] == "2025-10-01-18:30"
        assert "2025-10-05-07:00" in ids
        assert "2025-10-26-18:00" in ids
        assert len(set(ids)) == len(ids)

    def test_sunday_slots(self, sunday_slots):
        assert [s.time_id for s in sunday_slots] == [
            DutyTimeId.T0700, DutyTimeId.T0930, DutyTimeId.T1100, DutyTimeId.T1800,
        ]
        assert [s.period for s in sunday_slots] == [
            Period.MORNING, Period.MORNING, Period.MORNING, Period.NIGHT,
        ]

    def test_wednesday_slot(self, october_slots):
        wed = [s for s in october_slots if s.date == date(2025, 10, 8)]
        assert len(wed) == 1
        assert wed[0].time_id == DutyTimeId.T1830
        assert wed[0].period == Period.NIGHT

    def test_no_slots_on_other_days(self, october_slots):
        weekdays = {s.date.weekday() for s in october_slots}
        assert weekdays == {calendar.SUNDAY, calendar.WEDNESDAY}

    def test_slots_start_unassigned_with_default_attire(self, october_slots):
        for s in october_slots:
            assert s.person_id is None
            assert s.attire == get_duty_time(s.time_id).default_attire

    def test_ordered_by_date_then_catalog(self, october_slots):
        keys = [(s.date, catalog_index(s.time_id)) for s in october_slots]
        assert keys == sorted(keys)

    def test_idempotent(self):
        assert generate_slots(2025, 10) == generate_slots(2025, 10)

    def test_february_leap_year(self):
        """February 2024 has 4 Sundays and 4 Wednesdays."""
        assert len(generate_slots(2024, 2)) == 4 * 4 + 4

    def test_generate_month(self):
        assert generate_month(MonthYear(2025, 10)) == generate_slots(2025, 10)

    def test_invalid_month_raises(self):
        """Out-of-range months are not clamped."""
        with pytest.raises(ValueError):
            generate_slots(2025, 13)


class TestDutyTimesFor:
    """Tests for the weekly cadence lookup."""

    def test_sunday(self):
        assert len(duty_times_for(date(2025, 10, 5))) == 4

    def test_wednesday(self):
        assert duty_times_for(date(2025, 10, 1)) == (DutyTimeId.T1830,)

    def test_saturday(self):
        assert duty_times_for(date(2025, 10, 4)) == ()
