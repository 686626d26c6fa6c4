"""Turn folded days into styled calendar cells.

Home games get the team accent background with white text. Away games keep the
plain white cell but still show the opponent and first pitch, so a reader can
tell "away" apart from "no game".
"""

import re

from src.gamecal.layout import cell_geometry
from src.gamecal.models import (
    CellGeometry,
    DayCell,
    FoldedDay,
    PageLayout,
    Palette,
    WeekRow,
)
from src.gamecal.schedule import ScheduleIndex

# Any alphabetic character, ASCII or not
_LETTERS = re.compile(r"[^\W\d_]")


def first_pitch_label(raw: str) -> str:
    """Bare start time from a schedule label: "7:10 PM" -> "7:10"."""
    return _LETTERS.sub("", raw).strip()


def classify_day(
    day: FoldedDay,
    schedule: ScheduleIndex,
    geometry: CellGeometry,
    palette: Palette,
) -> DayCell:
    game = schedule.lookup(day.date_key)
    at_home = game is not None and game.is_home_game

    return DayCell(
        day_number=day.day_number,
        date_key=day.date_key,
        game=game,
        geometry=geometry,
        background_color=palette.accent if at_home else palette.background,
        text_color=palette.home_text if at_home else palette.ink,
        team_label=game.team_code if game else None,
        first_pitch_label=first_pitch_label(game.first_pitch_time) if game else None,
    )


def classify_weeks(
    weeks: list[WeekRow],
    schedule: ScheduleIndex,
    layout: PageLayout,
    palette: Palette,
) -> list[WeekRow]:
    """Classify every folded day, placing it by row and weekday column."""
    classified = []
    for week_index, week in enumerate(weeks):
        slots = tuple(
            classify_day(
                day, schedule, cell_geometry(week_index, weekday, layout), palette
            )
            if day is not None
            else None
            for weekday, day in enumerate(week.slots)
        )
        classified.append(WeekRow(slots=slots))
    return classified
