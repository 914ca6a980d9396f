"""Tests for month statistics."""
from duty_rota.models.person import DEFAULT_ROSTER
from duty_rota.solver.planner import auto_assign
from duty_rota.solver.stats import calculate_month_stats, stats_to_dict_list
from duty_rota.store import assign


class TestMonthStats:
    """Tests for calculate_month_stats."""

    def test_empty_assignment(self, october_slots, sample_roster):
        stats = calculate_month_stats(october_slots, sample_roster)
        assert stats.total == 21
        assert stats.assigned == 0
        assert stats.pending == 21
        assert stats.coverage == 0.0
        assert stats.person_counts == {"a": 0, "b": 0, "c": 0}
        # Ties go to the first roster member
        assert stats.busiest == "a"
        assert stats.busiest_count == 0

    def test_counts_and_busiest(self, october_slots, sample_roster):
        slots = assign(october_slots, "2025-10-05-07:00", "b")
        slots = assign(slots, "2025-10-01-18:30", "b")
        slots = assign(slots, "2025-10-05-09:30", "c")
        stats = calculate_month_stats(slots, sample_roster)
        assert stats.assigned == 3
        assert stats.person_counts == {"a": 0, "b": 2, "c": 1}
        assert stats.busiest == "b"
        assert stats.busiest_count == 2

    def test_full_coverage(self, october_slots):
        slots = auto_assign(october_slots, DEFAULT_ROSTER)
        stats = calculate_month_stats(slots, DEFAULT_ROSTER)
        assert stats.coverage == 100.0
        assert stats.pending == 0

    def test_empty_month_and_roster(self):
        stats = calculate_month_stats([], [])
        assert stats.coverage == 0.0
        assert stats.busiest is None

    def test_dict_list(self, october_slots, sample_roster):
        slots = assign(october_slots, "2025-10-05-07:00", "a")
        stats = calculate_month_stats(slots, sample_roster)
        rows = stats_to_dict_list(stats, sample_roster)
        assert rows[0] == {"id": "a", "Nombre": "Alice", "Turnos": 1}
        assert len(rows) == 3
