"""CalendarImage - render one regular-season month as a printable PNG.

A render either validates the month and runs the whole pipeline
(fold -> classify -> build drawing ops -> paint -> encode), or fails with a
MonthError before anything is drawn:

    Uninitialized -> Validated -> Rendered
    Uninitialized -> Failed (InvalidMonthError | OffSeasonMonthError)

Example:
    >>> cal = CalendarImage(load_schedule("data/dbacks.json"))
    >>> april = cal.render("April")
    >>> html = april.as_image_element()
"""

import base64
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from src.gamecal.classify import classify_weeks
from src.gamecal.config import CalendarConfig, get_config
from src.gamecal.errors import MonthError
from src.gamecal.layout import compute_layout
from src.gamecal.logging import get_logger
from src.gamecal.models import DrawOp, ScheduleEntry, SeasonMonth, WeekRow
from src.gamecal.months import fold_month, parse_season_month
from src.gamecal.render import render_operations
from src.gamecal.schedule import ScheduleIndex
from src.gamecal.surface import PillowSurface, replay

log = get_logger(__name__)


@dataclass(frozen=True)
class RenderedCalendar:
    """Finished calendar page for one month."""

    month: SeasonMonth
    png: bytes
    weeks: tuple[WeekRow, ...]
    operations: tuple[DrawOp, ...]

    def as_data_url(self) -> str:
        encoded = base64.b64encode(self.png).decode("ascii")
        return f"data:image/png;base64,{encoded}"

    def as_image_element(self) -> str:
        return f'<img src="{self.as_data_url()}">'

    def save(self, path: str | Path) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(self.png)
        log.info("calendar_saved", path=str(path), month=self.month.label)
        return path


class CalendarImage:
    """Renders regular-season months against one schedule.

    The schedule index is read-only, so a single CalendarImage can render any
    number of months, including from several threads.
    """

    def __init__(
        self,
        schedule: ScheduleIndex | Iterable[ScheduleEntry],
        config: CalendarConfig | None = None,
    ) -> None:
        self.schedule = (
            schedule if isinstance(schedule, ScheduleIndex) else ScheduleIndex(schedule)
        )
        self.config = config or get_config()
        self.layout = compute_layout(self.config.page_constants())
        self.palette = self.config.palette()

    def validate(self, month_name: str) -> SeasonMonth:
        """Parse a month name for this season.

        Raises:
            InvalidMonthError: If the name is not a calendar month.
            OffSeasonMonthError: If the month is outside March-September.
        """
        try:
            return parse_season_month(month_name, year=self.config.reference_year)
        except MonthError as e:
            log.warning(
                "month_rejected",
                month=month_name,
                reason=type(e).__name__,
                error=str(e),
            )
            raise

    def render(self, month_name: str) -> RenderedCalendar:
        month = self.validate(month_name)

        weeks = classify_weeks(
            fold_month(month), self.schedule, self.layout, self.palette
        )
        ops = render_operations(
            weeks,
            self.layout,
            month.label,
            self.palette,
            disclaimer=self.config.disclaimer,
            branding=self.config.branding,
        )

        surface = PillowSurface(
            self.layout.page_width, self.layout.page_height, self.config
        )
        replay(ops, surface)
        png = surface.to_png()

        games = sum(1 for week in weeks for cell in week.days() if cell.game)
        log.info(
            "calendar_rendered",
            month=month.label,
            weeks=len(weeks),
            games=games,
            operations=len(ops),
            png_bytes=len(png),
        )
        return RenderedCalendar(
            month=month, png=png, weeks=tuple(weeks), operations=tuple(ops)
        )


def render_calendar(
    month_name: str,
    schedule: ScheduleIndex | Iterable[ScheduleEntry],
    config: CalendarConfig | None = None,
) -> RenderedCalendar:
    """One-shot render of a single month."""
    return CalendarImage(schedule, config).render(month_name)
