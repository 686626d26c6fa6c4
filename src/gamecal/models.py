"""Pydantic models for schedule data, month layout and drawing operations.

All data structures use Pydantic v2 and are frozen: a render builds them once
and never mutates them afterwards.
"""

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class ScheduleEntry(BaseModel):
    """A single regular-season game from the team schedule data set.

    Field aliases match the published JSON records, e.g.
    {"date": "2025-04-01", "homegame": true, "teamcode": "CHC", "firstpitch": "6:40 PM"}.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    date_key: str = Field(alias="date", pattern=r"^\d{4}-\d{2}-\d{2}$")
    is_home_game: bool = Field(alias="homegame")
    team_code: str = Field(alias="teamcode")  # opponent, e.g. "LAD"
    first_pitch_time: str = Field(alias="firstpitch")  # raw label, e.g. "7:10 PM"


class SeasonMonth(BaseModel):
    """A validated regular-season month."""

    model_config = ConfigDict(frozen=True)

    name: str  # canonical English name, e.g. "April"
    index: int = Field(ge=2, le=8)  # zero-based, March=2 .. September=8
    year: int
    day_count: int = Field(ge=28, le=31)

    @property
    def number(self) -> int:
        return self.index + 1

    @property
    def label(self) -> str:
        return f"{self.name} {self.year}"


class FoldedDay(BaseModel):
    """One day placed into a week row, before classification."""

    model_config = ConfigDict(frozen=True)

    day_number: int = Field(ge=1, le=31)
    date_key: str


class CellGeometry(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height


class DayCell(BaseModel):
    """A fully resolved calendar cell: where it goes and how it looks."""

    model_config = ConfigDict(frozen=True)

    day_number: int
    date_key: str
    game: ScheduleEntry | None = None
    geometry: CellGeometry
    background_color: str
    text_color: str
    team_label: str | None = None
    first_pitch_label: str | None = None


class WeekRow(BaseModel):
    """Seven weekday slots, Sunday (0) through Saturday (6). Empty slots are None."""

    model_config = ConfigDict(frozen=True)

    slots: tuple[
        Union[DayCell, FoldedDay, None],
        Union[DayCell, FoldedDay, None],
        Union[DayCell, FoldedDay, None],
        Union[DayCell, FoldedDay, None],
        Union[DayCell, FoldedDay, None],
        Union[DayCell, FoldedDay, None],
        Union[DayCell, FoldedDay, None],
    ]

    def days(self) -> list:
        """Filled slots in weekday order."""
        return [slot for slot in self.slots if slot is not None]


class PageConstants(BaseModel):
    """Fixed print constants shared by every render."""

    model_config = ConfigDict(frozen=True)

    dpi: int = 300
    page_width_in: float = 11.0
    page_height_in: float = 8.5
    cell_width: int = 300
    cell_height: int = 300
    legend_width: int = 200
    legend_height: int = 80
    line_width: int = 8


class PageLayout(BaseModel):
    """Pixel geometry for one render, derived from PageConstants."""

    model_config = ConfigDict(frozen=True)

    page_width: int
    page_height: int
    cell_width: int
    cell_height: int
    origin_x: int
    origin_y: int
    line_width: int
    legend: CellGeometry  # HOME box; AWAY sits directly below it
    header_rule_y: int
    header_baseline: int
    title_baseline: int
    disclaimer_x: int
    disclaimer_baseline: int
    branding_baseline: int


class Palette(BaseModel):
    model_config = ConfigDict(frozen=True)

    accent: str = "#A71930"
    background: str = "white"
    ink: str = "black"
    muted: str = "gray"
    home_text: str = "white"


class FontSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    family: Literal["mono", "sans"] = "mono"
    size: int
    bold: bool = False


class FillRect(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["fill_rect"] = "fill_rect"
    rect: CellGeometry
    color: str


class StrokeRect(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["stroke_rect"] = "stroke_rect"
    rect: CellGeometry
    color: str
    width: int


class FillText(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    text: str
    x: int
    y: int  # baseline
    font: FontSpec
    color: str
    align: Literal["left", "right"] = "left"


class StrokeLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["line"] = "line"
    x1: int
    y1: int
    x2: int
    y2: int
    color: str
    width: int


DrawOp = Union[FillRect, StrokeRect, FillText, StrokeLine]
