import io

import pytest
from PIL import Image

from src.gamecal.models import (
    CellGeometry,
    FillRect,
    FillText,
    FontSpec,
    StrokeLine,
    StrokeRect,
)
from src.gamecal.surface import PillowSurface, replay

SEDONA_RED_RGB = (167, 25, 48)


class RecordingSurface:
    def __init__(self):
        self.calls = []

    def fill_rect(self, rect, color):
        self.calls.append(("fill_rect", rect.x, color))

    def stroke_rect(self, rect, color, width):
        self.calls.append(("stroke_rect", rect.x, color, width))

    def fill_text(self, text, x, y, font, color, align="left"):
        self.calls.append(("fill_text", text, x, y, align))

    def line(self, x1, y1, x2, y2, color, width):
        self.calls.append(("line", x1, x2, width))


BOX = CellGeometry(x=10, y=10, width=50, height=40)


def test_replay_dispatches_in_order():
    surface = RecordingSurface()
    replay(
        [
            FillRect(rect=BOX, color="white"),
            StrokeRect(rect=BOX, color="black", width=8),
            FillText(text="7", x=30, y=20, font=FontSpec(size=40), color="black", align="right"),
            StrokeLine(x1=0, y1=5, x2=90, y2=5, color="gray", width=8),
        ],
        surface,
    )
    assert surface.calls == [
        ("fill_rect", 10, "white"),
        ("stroke_rect", 10, "black", 8),
        ("fill_text", "7", 30, 20, "right"),
        ("line", 0, 90, 8),
    ]


def test_replay_rejects_unknown_ops():
    with pytest.raises(TypeError):
        replay([object()], RecordingSurface())


def test_pillow_fill_and_stroke(config):
    surface = PillowSurface(100, 80, config)
    surface.fill_rect(BOX, "#A71930")
    surface.stroke_rect(BOX, "black", 8)

    assert surface.image.getpixel((35, 30)) == SEDONA_RED_RGB
    # Stroke straddles the box edge
    assert surface.image.getpixel((10, 30)) == (0, 0, 0)
    assert surface.image.getpixel((7, 30)) == (0, 0, 0)
    assert surface.image.getpixel((2, 30)) == (255, 255, 255)


def test_pillow_line(config):
    surface = PillowSurface(100, 20, config)
    surface.line(0, 10, 99, 10, "gray", 8)
    assert surface.image.getpixel((50, 10)) == (128, 128, 128)
    assert surface.image.getpixel((50, 0)) == (255, 255, 255)


def test_pillow_text_alignment(config):
    font = FontSpec(size=40, bold=True)

    left = PillowSurface(200, 80, config)
    left.fill_text("7:10", 100, 60, font, "black")
    right = PillowSurface(200, 80, config)
    right.fill_text("7:10", 100, 60, font, "black", align="right")

    left_box = left.image.convert("L").point(lambda p: 255 - p).getbbox()
    right_box = right.image.convert("L").point(lambda p: 255 - p).getbbox()
    assert left_box[0] >= 95
    assert right_box[2] <= 105
    assert right_box[2] < left_box[2]


def test_missing_fonts_fall_back_to_default(config):
    config = config.model_copy(
        update={"mono_font_paths": ["/nonexistent/font.ttf"], "mono_bold_font_paths": []}
    )
    surface = PillowSurface(200, 80, config)
    surface.fill_text("12", 10, 60, FontSpec(size=40), "black")
    assert surface.image.convert("L").point(lambda p: 255 - p).getbbox() is not None


def test_to_png(config):
    surface = PillowSurface(30, 20, config)
    png = surface.to_png()
    assert png.startswith(b"\x89PNG")
    assert Image.open(io.BytesIO(png)).size == (30, 20)
