import base64
import io

import pytest
from PIL import Image

from src.gamecal.calendar_image import CalendarImage, RenderedCalendar, render_calendar
from src.gamecal.errors import InvalidMonthError, OffSeasonMonthError
from src.gamecal.months import SEASON_MONTHS

SEDONA_RED_RGB = (167, 25, 48)
WHITE = (255, 255, 255)


@pytest.fixture
def calendar(schedule_index, config):
    return CalendarImage(schedule_index, config)


@pytest.fixture
def april(calendar):
    return calendar.render("April")


def test_april_renders(april):
    assert isinstance(april, RenderedCalendar)
    assert april.month.name == "April"
    assert april.month.day_count == 30
    assert len(april.weeks) in {5, 6}
    assert sum(len(week.days()) for week in april.weeks) == 30
    assert april.png.startswith(b"\x89PNG")


def test_april_image_pixels(april):
    image = Image.open(io.BytesIO(april.png)).convert("RGB")
    assert image.size == (3300, 2550)

    # Top-right corner of each cell sits below the first-pitch text
    assert image.getpixel((1200 + 270, 300 + 130)) == SEDONA_RED_RGB  # Apr 1, home
    assert image.getpixel((1500 + 270, 300 + 130)) == WHITE  # Apr 2, no game
    assert image.getpixel((2100 + 270, 300 + 130)) == WHITE  # Apr 4, away
    assert image.getpixel((1200 + 270, 900 + 130)) == SEDONA_RED_RGB  # Apr 15, home
    # Legend HOME box, right of its label
    assert image.getpixel((2400 + 190, 1950 + 12)) == SEDONA_RED_RGB
    # Margin outside the grid
    assert image.getpixel((10, 10)) == WHITE
    # Sunday and Monday of the first row are empty
    assert image.getpixel((600 + 150, 300 + 150)) == WHITE


def test_data_url_and_image_element(april):
    url = april.as_data_url()
    assert url.startswith("data:image/png;base64,")
    assert base64.b64decode(url.split(",", 1)[1]) == april.png
    assert april.as_image_element() == f'<img src="{url}">'


def test_save(april, tmp_path):
    path = april.save(tmp_path / "out" / "april.png")
    assert path.read_bytes() == april.png


def test_renders_are_deterministic(calendar):
    first = calendar.render("August")
    second = calendar.render("aug")
    assert first.operations == second.operations
    assert first.weeks == second.weeks
    assert len(first.weeks) == 6


@pytest.mark.parametrize("name", SEASON_MONTHS)
def test_every_season_month_renders(calendar, name):
    rendered = calendar.render(name)
    assert rendered.month.name == name
    assert sum(len(week.days()) for week in rendered.weeks) == rendered.month.day_count


def test_off_season_month_fails(calendar):
    with pytest.raises(OffSeasonMonthError):
        calendar.render("October")


def test_invalid_month_fails(calendar):
    with pytest.raises(InvalidMonthError):
        calendar.render("Fooember")


def test_failed_validation_draws_nothing(calendar, monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError("surface created for an invalid month")

    monkeypatch.setattr("src.gamecal.calendar_image.PillowSurface", fail)
    with pytest.raises(OffSeasonMonthError):
        calendar.render("December")


def test_accepts_plain_entry_list(schedule_entries, config):
    rendered = render_calendar("September", schedule_entries, config)
    sept_28 = next(
        cell for week in rendered.weeks for cell in week.days() if cell.day_number == 28
    )
    assert sept_28.team_label == "SD"
    assert sept_28.first_pitch_label == "12:10"
    assert sept_28.background_color == "#A71930"


def test_reference_year_from_config(schedule_index, config):
    rendered = CalendarImage(
        schedule_index, config.model_copy(update={"reference_year": 2024})
    ).render("June")
    assert rendered.month.label == "June 2024"
    assert len(rendered.weeks) == 6
    assert all(cell.game is None for week in rendered.weeks for cell in week.days())
