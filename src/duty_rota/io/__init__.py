# duty_rota/io - Input/output handling
from .roster_loader import load_roster, roster_to_dataframe, save_roster
from .tables import load_matrix, slots_to_dataframe

__all__ = ["load_roster", "save_roster", "roster_to_dataframe", "slots_to_dataframe", "load_matrix"]
