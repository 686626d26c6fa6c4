"""Season month parsing and folding a month into week rows.

Month names are matched against a fixed English table instead of a
locale-aware date parser, so "april", "Apr" and "APRIL" all resolve the same
way on every machine.
"""

import calendar
from datetime import date

from src.gamecal.errors import InvalidMonthError, OffSeasonMonthError
from src.gamecal.logging import get_logger
from src.gamecal.models import FoldedDay, SeasonMonth, WeekRow

log = get_logger(__name__)

# Zero-based month index, as used throughout the layout code
MONTH_INDEX: dict[str, int] = {
    "january": 0,
    "february": 1,
    "march": 2,
    "april": 3,
    "may": 4,
    "june": 5,
    "july": 6,
    "august": 7,
    "september": 8,
    "october": 9,
    "november": 10,
    "december": 11,
}

_ABBREVIATIONS: dict[str, int] = {name[:3]: index for name, index in MONTH_INDEX.items()}
_ABBREVIATIONS["sept"] = 8

MONTH_NAMES: tuple[str, ...] = tuple(name.capitalize() for name in MONTH_INDEX)

# Regular season: March (2) through September (8), inclusive
SEASON_FIRST_INDEX = 2
SEASON_LAST_INDEX = 8

SEASON_MONTHS: tuple[str, ...] = MONTH_NAMES[SEASON_FIRST_INDEX : SEASON_LAST_INDEX + 1]

DAYS_PER_WEEK = 7
LAST_WEEKDAY_SLOT = DAYS_PER_WEEK - 1  # Saturday


def month_index(name: str) -> int:
    """Zero-based index of a month name or common abbreviation.

    Raises:
        InvalidMonthError: If the name is not a calendar month.
    """
    key = name.strip().rstrip(".").lower() if isinstance(name, str) else ""
    index = MONTH_INDEX.get(key, _ABBREVIATIONS.get(key))
    if index is None:
        raise InvalidMonthError(f"{name!r} is not a valid calendar month")
    return index


def parse_season_month(name: str, year: int = 2025) -> SeasonMonth:
    """Validate a month name for rendering.

    Args:
        name: Month name, e.g. "April" or "apr".
        year: Reference season year for day counts.

    Raises:
        InvalidMonthError: If the name is not a calendar month.
        OffSeasonMonthError: If the month is outside March-September.
    """
    index = month_index(name)
    if not SEASON_FIRST_INDEX <= index <= SEASON_LAST_INDEX:
        raise OffSeasonMonthError(
            f"{MONTH_NAMES[index]} is not a regular season month, "
            f"must be between {SEASON_MONTHS[0]} and {SEASON_MONTHS[-1]}, inclusive"
        )

    _, day_count = calendar.monthrange(year, index + 1)
    return SeasonMonth(
        name=MONTH_NAMES[index], index=index, year=year, day_count=day_count
    )


def weekday_slot(day: date) -> int:
    """Column for a date: Sunday is 0, Saturday is 6."""
    return (day.weekday() + 1) % DAYS_PER_WEEK


def fold_month(month: SeasonMonth) -> list[WeekRow]:
    """Fold a month's days into Sunday-first week rows.

    A row is closed after its Saturday slot is filled or after the month's
    last day, whichever comes first, so the final row may be partial.
    Every day lands in exactly one slot.
    """
    weeks: list[WeekRow] = []
    slots: list[FoldedDay | None] = [None] * DAYS_PER_WEEK

    for day_number in range(1, month.day_count + 1):
        day = date(month.year, month.number, day_number)
        slot = weekday_slot(day)
        slots[slot] = FoldedDay(day_number=day_number, date_key=day.isoformat())

        if slot == LAST_WEEKDAY_SLOT or day_number == month.day_count:
            weeks.append(WeekRow(slots=tuple(slots)))
            slots = [None] * DAYS_PER_WEEK

    log.debug("month_folded", month=month.label, weeks=len(weeks))
    return weeks
