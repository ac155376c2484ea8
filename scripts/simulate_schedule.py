"""Print the calendar a program would get, without touching the database.

Usage:
    python scripts/simulate_schedule.py 2026-10-21 1,4,6
"""

import datetime
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.scheduling.calendar import DEFAULT_TRAINING_DAYS, WEEKDAY_NAMES
from app.scheduling.generator import generate_schedule
from app.schemas.schedule import WorkoutInput

# A small 2-week strength block: 3 days, then 4 days
PROGRAM = [
    WorkoutInput(id="w1d1", week_number=1, day_number=1, name="Squat"),
    WorkoutInput(id="w1d2", week_number=1, day_number=2, name="Bench"),
    WorkoutInput(id="w1d3", week_number=1, day_number=3, name="Deadlift"),
    WorkoutInput(id="w2d1", week_number=2, day_number=1, name="Squat (heavy)"),
    WorkoutInput(id="w2d2", week_number=2, day_number=2, name="Bench (heavy)"),
    WorkoutInput(id="w2d3", week_number=2, day_number=3, name="Deadlift (heavy)"),
    WorkoutInput(id="w2d4", week_number=2, day_number=4, name="Accessories"),
]


def main() -> None:
    start = datetime.date.fromisoformat(sys.argv[1]) if len(sys.argv) > 1 else datetime.date.today()
    days = [int(d) for d in sys.argv[2].split(",")] if len(sys.argv) > 2 else DEFAULT_TRAINING_DAYS

    schedule = generate_schedule(PROGRAM, start, days)

    print(f"Start: {start.isoformat()} ({WEEKDAY_NAMES[start.isoweekday() % 7]})")
    print("-" * 60)
    for s in schedule:
        weekday = WEEKDAY_NAMES[s.date.isoweekday() % 7]
        print(f"  {s.date.isoformat()}  {weekday:<9}  W{s.week_number}D{s.day_number}  {s.title}")


if __name__ == "__main__":
    main()
