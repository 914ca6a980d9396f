# duty_rota/engine - Slot generation from the weekly cadence
from .calendar_rules import DUTY_CADENCE, duty_times_for, generate_month, generate_slots

__all__ = ["generate_slots", "generate_month", "duty_times_for", "DUTY_CADENCE"]
