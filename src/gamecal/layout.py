"""Page geometry for the printed calendar.

Everything is derived from PageConstants alone. With the defaults the page is
3300x2550 pixels (11x8.5in at 300dpi), the grid starts two cells in from the
left and one cell down from the top, and the marginalia hang off the bottom
edge:

    +--------------------------------------------------+
    |          S    M    T    W    R    F    S         |
    |        +----+----+----+----+----+----+----+      |
    |        |    |    |    |    |    |    |    |      |
    |        ...                                       |
    |                                  * SUBJECT  HOME |
    |        April 2025                  BRANDING AWAY |
    +--------------------------------------------------+
"""

from src.gamecal.models import CellGeometry, PageConstants, PageLayout

HEADER_RULE_OFFSET = 50
HEADER_BASELINE_OFFSET = 100


def compute_layout(constants: PageConstants) -> PageLayout:
    page_width = round(constants.page_width_in * constants.dpi)
    page_height = round(constants.page_height_in * constants.dpi)
    cell_w, cell_h = constants.cell_width, constants.cell_height
    origin_x, origin_y = cell_w * 2, cell_h

    legend = CellGeometry(
        x=page_width - origin_x - cell_w,
        y=page_height - origin_y - cell_h,
        width=constants.legend_width,
        height=constants.legend_height,
    )

    return PageLayout(
        page_width=page_width,
        page_height=page_height,
        cell_width=cell_w,
        cell_height=cell_h,
        origin_x=origin_x,
        origin_y=origin_y,
        line_width=constants.line_width,
        legend=legend,
        header_rule_y=origin_y - HEADER_RULE_OFFSET,
        header_baseline=origin_y - HEADER_BASELINE_OFFSET,
        title_baseline=page_height - origin_y // 2,
        disclaimer_x=page_width - cell_w * 3,
        disclaimer_baseline=page_height - origin_y,
        branding_baseline=page_height - origin_y // 2,
    )


def cell_geometry(week_index: int, weekday_index: int, layout: PageLayout) -> CellGeometry:
    """Pixel box for the cell in row `week_index`, column `weekday_index`."""
    return CellGeometry(
        x=layout.origin_x + weekday_index * layout.cell_width,
        y=layout.origin_y + week_index * layout.cell_height,
        width=layout.cell_width,
        height=layout.cell_height,
    )


def grid_width(layout: PageLayout) -> int:
    return layout.cell_width * 7
