from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional, Tuple

from .text import clean_integer

# Sunday-first, indexed by (isoweekday % 7)
WEEKDAYS_RU = ("вс", "пн", "вт", "ср", "чт", "пт", "сб")
MAX_SCAN_DAYS = 3


def today_local() -> date:
    return date.today()


def format_day_label(day: date) -> str:
    return f"{day.strftime('%d.%m')} ({WEEKDAYS_RU[day.isoweekday() % 7]})"


def resolve_date(day_text: str, day_offset: int, today: Optional[date] = None) -> Tuple[str, str]:
    """Guess the full date for a bare day-of-month.

    Starts at ``today + day_offset`` and walks forward at most
    ``MAX_SCAN_DAYS`` days looking for a matching day-of-month; when nothing
    matches the last candidate is used. Returns ``(display, iso)``; an
    unparseable ``day_text`` is returned unchanged as both values.
    """
    try:
        day = int(clean_integer(day_text))
    except ValueError:
        return day_text, day_text

    candidate = (today or today_local()) + timedelta(days=day_offset)
    for _ in range(MAX_SCAN_DAYS):
        if candidate.day == day:
            break
        candidate += timedelta(days=1)

    return format_day_label(candidate), candidate.isoformat()


def is_after(iso: str, today: Optional[date] = None) -> bool:
    if not iso:
        return False
    try:
        day = datetime.strptime(iso, "%Y-%m-%d").date()
    except ValueError:
        return False
    return day > (today or today_local())
