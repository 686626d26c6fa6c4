from src.gamecal.layout import cell_geometry, compute_layout, grid_width
from src.gamecal.models import PageConstants


def test_default_page_is_letter_landscape_at_300dpi(layout):
    assert (layout.page_width, layout.page_height) == (3300, 2550)
    assert (layout.cell_width, layout.cell_height) == (300, 300)


def test_grid_origin_is_two_cells_in_and_one_down(layout):
    assert (layout.origin_x, layout.origin_y) == (600, 300)
    assert grid_width(layout) == 2100


def test_cell_geometry(layout):
    first = cell_geometry(0, 0, layout)
    assert (first.x, first.y, first.width, first.height) == (600, 300, 300, 300)

    last = cell_geometry(5, 6, layout)
    assert (last.x, last.y) == (600 + 6 * 300, 300 + 5 * 300)
    assert last.right == 2700
    assert last.bottom == 2100
    # A sixth row still fits above the title baseline
    assert last.bottom < layout.title_baseline


def test_legend_and_marginalia(layout):
    legend = layout.legend
    assert (legend.x, legend.y, legend.width, legend.height) == (2400, 1950, 200, 80)
    assert layout.header_rule_y == 250
    assert layout.header_baseline == 200
    assert layout.title_baseline == 2400
    assert layout.disclaimer_x == 2400
    assert layout.disclaimer_baseline == 2250
    assert layout.branding_baseline == 2400


def test_layout_is_deterministic():
    constants = PageConstants()
    assert compute_layout(constants) == compute_layout(constants)


def test_layout_follows_constants():
    layout = compute_layout(PageConstants(dpi=100, cell_width=100, cell_height=80))
    assert (layout.page_width, layout.page_height) == (1100, 850)
    assert (layout.origin_x, layout.origin_y) == (200, 80)
    assert cell_geometry(1, 1, layout).x == 300
