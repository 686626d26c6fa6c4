"""Drawing surfaces that replay DrawOp sequences.

DrawingSurface is the minimal painter the renderer needs. PillowSurface
implements it on a PIL RGB image and encodes the result as PNG.
"""

import io
from typing import Iterable, Literal, Protocol

from PIL import Image, ImageDraw, ImageFont

from src.gamecal.config import CalendarConfig
from src.gamecal.logging import get_logger
from src.gamecal.models import (
    CellGeometry,
    DrawOp,
    FillRect,
    FillText,
    FontSpec,
    StrokeLine,
    StrokeRect,
)

log = get_logger(__name__)


class DrawingSurface(Protocol):
    def fill_rect(self, rect: CellGeometry, color: str) -> None: ...

    def stroke_rect(self, rect: CellGeometry, color: str, width: int) -> None: ...

    def fill_text(
        self,
        text: str,
        x: int,
        y: int,
        font: FontSpec,
        color: str,
        align: Literal["left", "right"] = "left",
    ) -> None: ...

    def line(self, x1: int, y1: int, x2: int, y2: int, color: str, width: int) -> None: ...


def replay(ops: Iterable[DrawOp], surface: DrawingSurface) -> None:
    """Apply drawing operations to a surface in order."""
    for op in ops:
        if isinstance(op, FillRect):
            surface.fill_rect(op.rect, op.color)
        elif isinstance(op, StrokeRect):
            surface.stroke_rect(op.rect, op.color, op.width)
        elif isinstance(op, FillText):
            surface.fill_text(op.text, op.x, op.y, op.font, op.color, op.align)
        elif isinstance(op, StrokeLine):
            surface.line(op.x1, op.y1, op.x2, op.y2, op.color, op.width)
        else:
            raise TypeError(f"Unsupported drawing operation: {op!r}")


class PillowSurface:
    """RGB page backed by a PIL image.

    Text coordinates are baselines, as with an HTML canvas: left-aligned text
    starts at x, right-aligned text ends at x. Rectangle strokes are centered
    on the rectangle edge.
    """

    def __init__(self, width: int, height: int, config: CalendarConfig) -> None:
        self.image = Image.new("RGB", (width, height), "white")
        self.draw = ImageDraw.Draw(self.image)
        self.config = config
        self._fonts: dict[FontSpec, ImageFont.FreeTypeFont | ImageFont.ImageFont] = {}

    def _font(self, spec: FontSpec) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
        if spec in self._fonts:
            return self._fonts[spec]

        font = None
        for path in self.config.font_paths(spec.family, spec.bold):
            try:
                font = ImageFont.truetype(path, spec.size)
                break
            except OSError:
                continue

        if font is None:
            log.warning(
                "font_fallback", family=spec.family, bold=spec.bold, size=spec.size
            )
            font = ImageFont.load_default(size=spec.size)

        self._fonts[spec] = font
        return font

    def fill_rect(self, rect: CellGeometry, color: str) -> None:
        self.draw.rectangle(
            [rect.x, rect.y, rect.right - 1, rect.bottom - 1], fill=color
        )

    def stroke_rect(self, rect: CellGeometry, color: str, width: int) -> None:
        half = width // 2
        self.draw.rectangle(
            [rect.x - half, rect.y - half, rect.right - 1 + half, rect.bottom - 1 + half],
            outline=color,
            width=width,
        )

    def fill_text(
        self,
        text: str,
        x: int,
        y: int,
        font: FontSpec,
        color: str,
        align: Literal["left", "right"] = "left",
    ) -> None:
        face = self._font(font)
        if isinstance(face, ImageFont.FreeTypeFont):
            anchor = "rs" if align == "right" else "ls"
            self.draw.text((x, y), text, font=face, fill=color, anchor=anchor)
            return

        # Bitmap fonts have no anchors; place the bounding box by hand
        left, _, right, bottom = self.draw.textbbox((0, 0), text, font=face)
        if align == "right":
            x -= right - left
        self.draw.text((x, y - bottom), text, font=face, fill=color)

    def line(self, x1: int, y1: int, x2: int, y2: int, color: str, width: int) -> None:
        self.draw.line([(x1, y1), (x2, y2)], fill=color, width=width)

    def to_png(self) -> bytes:
        buf = io.BytesIO()
        self.image.save(buf, format="PNG")
        return buf.getvalue()
