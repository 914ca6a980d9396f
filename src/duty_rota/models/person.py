"""Person model for roster members (squires)."""
from dataclasses import dataclass
from typing import Iterable, Tuple


class RosterError(ValueError):
    """Raised when a roster is malformed (blank or duplicate ids)."""


@dataclass(frozen=True)
class Person:
    """An assignable roster member."""

    id: str
    name: str
    color: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "color": self.color,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Person":
        """Create from dictionary."""
        return cls(
            id=str(d.get("id", "")).strip(),
            name=str(d.get("name", "")).strip(),
            color=str(d.get("color", "") or "").strip(),
        )


def validate_roster(roster: Iterable[Person]) -> Tuple[Person, ...]:
    """
    Check that every person has a non-blank, unique id.

    Returns:
        The roster as an immutable tuple, order preserved

    Raises:
        RosterError: on a blank or duplicate id
    """
    people = tuple(roster)
    seen = set()
    for p in people:
        if not p.id:
            raise RosterError(f"Person {p.name!r} has no id")
        if p.id in seen:
            raise RosterError(f"Duplicate person id {p.id!r}")
        seen.add(p.id)
    return people


DEFAULT_ROSTER: Tuple[Person, ...] = (
    Person("s1", "Diac. Anthony Marte", "bg-blue-500/80"),
    Person("s2", "Alexis Ramirez", "bg-emerald-500/80"),
    Person("s3", "Antonio Alcantara", "bg-violet-500/80"),
    Person("s4", "Cesar", "bg-amber-500/80"),
    Person("s5", "Frank Arias", "bg-rose-500/80"),
    Person("s6", "Diac. Franklie Madera", "bg-cyan-500/80"),
    Person("s7", "Franyeli Solano", "bg-indigo-500/80"),
    Person("s8", "Jose Vidal", "bg-orange-500/80"),
    Person("s9", "Julio Galvan", "bg-teal-500/80"),
    Person("s10", "Diac. Franklin Batista", "bg-fuchsia-500/80"),
    Person("s11", "Diac. Luis Enrique", "bg-lime-500/80"),
    Person("s12", "Jewry", "bg-pink-500/80"),
    Person("s13", "Jeffry Santiago", "bg-sky-500/80"),
)
