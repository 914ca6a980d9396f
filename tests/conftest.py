"""Pytest configuration and fixtures."""
import sys
from datetime import date
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from duty_rota.engine.calendar_rules import generate_slots
from duty_rota.models.person import Person


@pytest.fixture
def sample_roster():
    """A small roster for testing."""
    return [
        Person(id="a", name="Alice", color="bg-blue-500/80"),
        Person(id="b", name="Bruno", color="bg-emerald-500/80"),
        Person(id="c", name="Carmen", color="bg-violet-500/80"),
    ]


@pytest.fixture
def october_slots():
    """Empty slots for October 2025 (starts on a Wednesday)."""
    return generate_slots(2025, 10)


@pytest.fixture
def sunday_slots(october_slots):
    """The four slots of Sunday 2025-10-05."""
    return [s for s in october_slots if s.date == date(2025, 10, 5)]
