"""CSV loading and saving for the roster."""
from pathlib import Path
from typing import List, Sequence, Union

import pandas as pd

from duty_rota.models.person import Person, validate_roster
from duty_rota.utils.logging_setup import get_logger

logger = get_logger("duty_rota.io.roster_loader")

ROSTER_COLUMNS = ["id", "name", "color"]


def load_roster(source: Union[str, Path, pd.DataFrame]) -> List[Person]:
    """
    Load the roster from a CSV file or DataFrame.

    Args:
        source: Path to CSV file or pandas DataFrame with ``id`` and
            ``name`` columns and an optional ``color`` column

    Returns:
        People in file order; rows with a blank name are skipped

    Raises:
        ValueError: if a required column is missing
        RosterError: on blank or duplicate ids
    """
    if isinstance(source, pd.DataFrame):
        df = source.copy()
    else:
        df = pd.read_csv(source, dtype=str)

    df = df.fillna("")

    for col in ("id", "name"):
        if col not in df.columns:
            raise ValueError(f"CSV must have a '{col}' column")

    people = []
    for _, row in df.iterrows():
        name = str(row["name"]).strip()
        if not name:
            continue
        people.append(Person(
            id=str(row["id"]).strip(),
            name=name,
            color=str(row.get("color", "")).strip(),
        ))

    roster = list(validate_roster(people))
    logger.info(f"Loaded roster with {len(roster)} people")
    return roster


def save_roster(roster: Sequence[Person], path: Union[str, Path]) -> None:
    """
    Save the roster to a CSV file.

    Args:
        roster: People in roster order
        path: Output path
    """
    df = roster_to_dataframe(roster)
    if df.empty:
        df = pd.DataFrame(columns=ROSTER_COLUMNS)
    df.to_csv(path, index=False)


def roster_to_dataframe(roster: Sequence[Person]) -> pd.DataFrame:
    """Convert the roster to a DataFrame for display."""
    if not roster:
        return pd.DataFrame()
    return pd.DataFrame([p.to_dict() for p in roster])
