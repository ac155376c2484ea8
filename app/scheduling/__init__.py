"""Schedule engine — calendar math and schedule generation."""

from app.scheduling.calendar import monday_offset, week_start
from app.scheduling.generator import generate_schedule

__all__ = ["generate_schedule", "monday_offset", "week_start"]
