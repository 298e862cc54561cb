"""Plain-text crime report and date-picker helpers for the detail screen."""
from __future__ import annotations

from datetime import datetime, timezone

from crime_intent.db import schemas

REPORT_TEMPLATE = "{title}! The crime was discovered on {date}. {solved}, and {suspect}"
REPORT_DATE_FORMAT = "%a, %b, %d"

SOLVED_TEXT = "The case is solved"
UNSOLVED_TEXT = "The case is not solved"
NO_SUSPECT_TEXT = "there is no suspect."
SUSPECT_TEXT = "the suspect is {suspect}."


def build_crime_report(crime: schemas.Crime) -> str:
    """Compose the share text for ``crime``."""
    solved = SOLVED_TEXT if crime.is_solved else UNSOLVED_TEXT
    if crime.suspect.strip():
        suspect = SUSPECT_TEXT.format(suspect=crime.suspect)
    else:
        suspect = NO_SUSPECT_TEXT
    return REPORT_TEMPLATE.format(
        title=crime.title,
        date=crime.date.strftime(REPORT_DATE_FORMAT),
        solved=solved,
        suspect=suspect,
    )


def apply_picked_date(crime: schemas.Crime, year: int, month: int, day: int) -> schemas.Crime:
    """Set the crime date to midnight UTC of the picked day (month is 1-12)."""
    crime.date = datetime(year, month, day, tzinfo=timezone.utc)
    return crime
