"""Tests for I/O functionality."""
import pandas as pd
import pytest

from duty_rota.io.roster_loader import load_roster, roster_to_dataframe, save_roster
from duty_rota.io.tables import SLOT_COLUMNS, load_matrix, slots_to_dataframe
from duty_rota.models.person import Person, RosterError
from duty_rota.store import assign


class TestRosterLoader:
    """Tests for roster CSV loading."""

    def test_load_from_dataframe(self):
        df = pd.DataFrame({
            "id": ["s1", "s2"],
            "name": ["Ana", "Luis"],
            "color": ["bg-blue-500/80", ""],
        })
        roster = load_roster(df)
        assert roster == [Person("s1", "Ana", "bg-blue-500/80"), Person("s2", "Luis", "")]

    def test_color_optional(self):
        roster = load_roster(pd.DataFrame({"id": ["s1"], "name": ["Ana"]}))
        assert roster[0].color == ""

    @pytest.mark.parametrize("column", ["id", "name"])
    def test_missing_column_raises(self, column):
        data = {"id": ["s1"], "name": ["Ana"]}
        del data[column]
        with pytest.raises(ValueError, match=column):
            load_roster(pd.DataFrame(data))

    def test_blank_names_skipped(self):
        roster = load_roster(pd.DataFrame({"id": ["s1", "s2"], "name": ["Ana", ""]}))
        assert [p.id for p in roster] == ["s1"]

    def test_duplicate_ids_raise(self):
        with pytest.raises(RosterError):
            load_roster(pd.DataFrame({"id": ["s1", "s1"], "name": ["Ana", "Luis"]}))

    def test_save_and_load_file(self, sample_roster, tmp_path):
        path = tmp_path / "roster.csv"
        save_roster(sample_roster, path)
        assert path.exists()
        assert load_roster(path) == sample_roster

    def test_save_empty_roster(self, tmp_path):
        path = tmp_path / "empty.csv"
        save_roster([], path)
        df = pd.read_csv(path)
        assert len(df) == 0
        assert list(df.columns) == ["id", "name", "color"]

    def test_roster_to_dataframe(self, sample_roster):
        df = roster_to_dataframe(sample_roster)
        assert len(df) == 3
        assert list(df["name"]) == ["Alice", "Bruno", "Carmen"]

    def test_numeric_ids_stay_strings(self, tmp_path):
        path = tmp_path / "roster.csv"
        path.write_text("id,name\n1,Ana\n2,Luis\n", encoding="utf-8")
        assert [p.id for p in load_roster(path)] == ["1", "2"]


class TestSlotTables:
    """Tests for the tabular month view."""

    def test_columns_and_rows(self, october_slots, sample_roster):
        df = slots_to_dataframe(october_slots, sample_roster)
        assert list(df.columns) == SLOT_COLUMNS
        assert len(df) == 21
        assert df.iloc[0]["slot_id"] == "2025-10-01-18:30"
        assert df.iloc[0]["weekday"] == "Miércoles"

    def test_names_and_conflicts(self, october_slots, sample_roster):
        slots = assign(october_slots, "2025-10-05-07:00", "a")
        slots = assign(slots, "2025-10-05-18:00", "a")
        df = slots_to_dataframe(slots, sample_roster).set_index("slot_id")
        assert df.loc["2025-10-05-07:00", "person_name"] == "Alice"
        assert df.loc["2025-10-05-07:00", "conflicts"] == "NO_CROSS_PERIOD"
        assert df.loc["2025-10-05-09:30", "person_name"] == ""
        assert df.loc["2025-10-05-09:30", "conflicts"] == ""

    def test_empty(self, sample_roster):
        df = slots_to_dataframe([], sample_roster)
        assert df.empty
        assert list(df.columns) == SLOT_COLUMNS

    def test_load_matrix(self, october_slots, sample_roster):
        slots = assign(october_slots, "2025-10-05-07:00", "a")
        slots = assign(slots, "2025-10-05-09:30", "a")
        matrix = load_matrix(slots, sample_roster)
        assert list(matrix.index) == ["Alice"]
        assert matrix.iloc[0, 0] == "07:00/09:30"

    def test_load_matrix_empty(self, october_slots, sample_roster):
        assert load_matrix(october_slots, sample_roster).empty
