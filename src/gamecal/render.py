"""Build the ordered drawing operations for a calendar page.

Nothing here touches pixels: the output is a list of DrawOp records that a
DrawingSurface replays. Order matters:

1. white page primer
2. per cell: background fill, border stroke, date number, team code, first pitch
3. marginalia: title, legend, weekday header rule and glyphs, disclaimer, branding

Backgrounds precede borders and borders precede text within each cell, and all
cells are painted before the marginalia.
"""

from src.gamecal.layout import grid_width
from src.gamecal.models import (
    CellGeometry,
    DayCell,
    DrawOp,
    FillRect,
    FillText,
    FontSpec,
    PageLayout,
    Palette,
    StrokeLine,
    StrokeRect,
    WeekRow,
)

DATE_FONT = FontSpec(family="mono", size=100)
TEAM_FONT = FontSpec(family="mono", size=150, bold=True)
FIRST_PITCH_FONT = FontSpec(family="mono", size=40, bold=True)
TITLE_FONT = FontSpec(family="mono", size=200, bold=True)
LEGEND_HOME_FONT = FontSpec(family="sans", size=40, bold=True)
CAPTION_FONT = FontSpec(family="mono", size=40, bold=True)

CELL_PADDING = 20
DATE_BASELINE = 100
FIRST_PITCH_BASELINE = 60
LEGEND_TEXT_BASELINE = 60

WEEKDAY_INITIALS = "SMTWRFS"


def cell_operations(cell: DayCell, layout: PageLayout, palette: Palette) -> list[DrawOp]:
    box = cell.geometry
    ops: list[DrawOp] = [
        FillRect(rect=box, color=cell.background_color),
        StrokeRect(rect=box, color=palette.ink, width=layout.line_width),
        FillText(
            text=str(cell.day_number),
            x=box.x + CELL_PADDING,
            y=box.y + DATE_BASELINE,
            font=DATE_FONT,
            color=cell.text_color,
        ),
    ]

    # First pitch is only shown alongside a team code
    if cell.team_label:
        ops.append(
            FillText(
                text=cell.team_label,
                x=box.x + CELL_PADDING,
                y=box.bottom - CELL_PADDING,
                font=TEAM_FONT,
                color=cell.text_color,
            )
        )
        ops.append(
            FillText(
                text=cell.first_pitch_label or "",
                x=box.right - CELL_PADDING,
                y=box.y + FIRST_PITCH_BASELINE,
                font=FIRST_PITCH_FONT,
                color=cell.text_color,
                align="right",
            )
        )
    return ops


def legend_operations(layout: PageLayout, palette: Palette) -> list[DrawOp]:
    home = layout.legend
    away = CellGeometry(
        x=home.x, y=home.bottom, width=home.width, height=home.height
    )
    ops: list[DrawOp] = []
    for box, fill, ink, label, font in (
        (home, palette.accent, palette.home_text, "HOME", LEGEND_HOME_FONT),
        (away, palette.background, palette.ink, "AWAY", CAPTION_FONT),
    ):
        ops.append(FillRect(rect=box, color=fill))
        ops.append(StrokeRect(rect=box, color=palette.ink, width=layout.line_width))
        ops.append(
            FillText(
                text=label,
                x=box.x + CELL_PADDING,
                y=box.y + LEGEND_TEXT_BASELINE,
                font=font,
                color=ink,
            )
        )
    return ops


def header_operations(layout: PageLayout, palette: Palette) -> list[DrawOp]:
    ops: list[DrawOp] = [
        StrokeLine(
            x1=layout.origin_x,
            y1=layout.header_rule_y,
            x2=layout.origin_x + grid_width(layout),
            y2=layout.header_rule_y,
            color=palette.muted,
            width=layout.line_width,
        )
    ]
    for weekday, initial in enumerate(WEEKDAY_INITIALS):
        ops.append(
            FillText(
                text=initial,
                x=layout.origin_x + layout.cell_width * weekday,
                y=layout.header_baseline,
                font=CAPTION_FONT,
                color=palette.muted,
            )
        )
    return ops


def render_operations(
    weeks: list[WeekRow],
    layout: PageLayout,
    month_label: str,
    palette: Palette,
    disclaimer: str = "* SUBJECT TO CHANGE",
    branding: str = "MADE BY MOTET PAPER",
) -> list[DrawOp]:
    """Full drawing sequence for one month.

    Args:
        weeks: Classified week rows (slots hold DayCell or None).
        layout: Page geometry.
        month_label: Title text, e.g. "April 2025".
        palette: Team and ink colors.
        disclaimer: Footnote under the grid.
        branding: Caption in the bottom-right margin.
    """
    page = CellGeometry(x=0, y=0, width=layout.page_width, height=layout.page_height)
    ops: list[DrawOp] = [FillRect(rect=page, color=palette.background)]

    for week in weeks:
        for cell in week.days():
            ops.extend(cell_operations(cell, layout, palette))

    ops.append(
        FillText(
            text=month_label,
            x=layout.origin_x,
            y=layout.title_baseline,
            font=TITLE_FONT,
            color=palette.ink,
        )
    )
    ops.extend(legend_operations(layout, palette))
    ops.extend(header_operations(layout, palette))
    ops.append(
        FillText(
            text=disclaimer,
            x=layout.disclaimer_x,
            y=layout.disclaimer_baseline,
            font=CAPTION_FONT,
            color=palette.ink,
        )
    )
    ops.append(
        FillText(
            text=branding,
            x=layout.disclaimer_x,
            y=layout.branding_baseline,
            font=CAPTION_FONT,
            color=palette.muted,
        )
    )
    return ops
