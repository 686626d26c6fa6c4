"""Large-print regular-season calendar renderer.

Folds a season month into week rows, marks home and away games from the team
schedule, and paints an 11x8.5in 300dpi PNG with Pillow.
"""

from src.gamecal.calendar_image import CalendarImage, RenderedCalendar, render_calendar
from src.gamecal.errors import (
    CalendarError,
    InvalidMonthError,
    OffSeasonMonthError,
    ScheduleError,
)
from src.gamecal.models import ScheduleEntry
from src.gamecal.schedule import ScheduleIndex, load_schedule

__all__ = [
    "CalendarImage",
    "RenderedCalendar",
    "render_calendar",
    "CalendarError",
    "InvalidMonthError",
    "OffSeasonMonthError",
    "ScheduleError",
    "ScheduleEntry",
    "ScheduleIndex",
    "load_schedule",
]
