"""Calendar configuration loaded from environment variables.

Page geometry, team colors and font locations all live here so that a render
is a pure function of the schedule, the month and this configuration.
"""

from pydantic import Field
from pydantic_settings import BaseSettings

from src.gamecal.models import PageConstants, Palette


class CalendarConfig(BaseSettings):
    """Calendar configuration loaded from environment variables.

    Every field can be overridden with a GAMECAL_-prefixed variable,
    e.g. GAMECAL_ACCENT_COLOR=#30CED8. For local development, create a .env
    file in the project root.
    """

    # Season
    reference_year: int = Field(
        default=2025,
        description="Season year used for weekday and day-count lookups",
    )
    schedule_source: str = Field(
        default="data/dbacks.json",
        description="Schedule JSON: local path or http(s) URL",
    )
    http_timeout_seconds: float = Field(
        default=15.0,
        description="Timeout for fetching a remote schedule",
    )

    # Team branding
    accent_color: str = Field(
        default="#A71930",
        description="Home-game cell and legend color (Sedona Red)",
    )
    disclaimer: str = Field(
        default="* SUBJECT TO CHANGE",
        description="Footnote printed under the legend",
    )
    branding: str = Field(
        default="MADE BY MOTET PAPER",
        description="Small caption in the bottom-right margin",
    )

    # Print page (11x8.5in landscape at 300dpi)
    dpi: int = Field(default=300, description="Raster units per inch")
    page_width_in: float = Field(default=11.0, description="Page width in inches")
    page_height_in: float = Field(default=8.5, description="Page height in inches")
    cell_width: int = Field(default=300, description="Day cell width in pixels")
    cell_height: int = Field(default=300, description="Day cell height in pixels")
    legend_width: int = Field(default=200, description="Legend box width in pixels")
    legend_height: int = Field(default=80, description="Legend box height in pixels")
    line_width: int = Field(default=8, description="Grid and rule stroke width")

    # Fonts (first existing path wins, Pillow's default font otherwise)
    mono_font_paths: list[str] = Field(
        default=[
            "/usr/share/fonts/truetype/noto/NotoSansMono-Regular.ttf",
            "/usr/share/fonts/noto/NotoSansMono-Regular.ttf",
            "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
            "/Library/Fonts/NotoSansMono-Regular.ttf",
            "C:/Windows/Fonts/consola.ttf",
        ],
        description="Candidate files for the regular monospace face",
    )
    mono_bold_font_paths: list[str] = Field(
        default=[
            "/usr/share/fonts/truetype/noto/NotoSansMono-Bold.ttf",
            "/usr/share/fonts/noto/NotoSansMono-Bold.ttf",
            "/usr/share/fonts/truetype/dejavu/DejaVuSansMono-Bold.ttf",
            "/Library/Fonts/NotoSansMono-Bold.ttf",
            "C:/Windows/Fonts/consolab.ttf",
        ],
        description="Candidate files for the bold monospace face",
    )
    sans_bold_font_paths: list[str] = Field(
        default=[
            "/usr/share/fonts/truetype/msttcorefonts/Arial_Bold.ttf",
            "/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf",
            "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
            "/Library/Fonts/Arial Bold.ttf",
            "C:/Windows/Fonts/arialbd.ttf",
        ],
        description="Candidate files for the bold sans face (legend HOME label)",
    )

    # Logging
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format (for production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    model_config = {
        "env_prefix": "GAMECAL_",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def page_constants(self) -> PageConstants:
        return PageConstants(
            dpi=self.dpi,
            page_width_in=self.page_width_in,
            page_height_in=self.page_height_in,
            cell_width=self.cell_width,
            cell_height=self.cell_height,
            legend_width=self.legend_width,
            legend_height=self.legend_height,
            line_width=self.line_width,
        )

    def palette(self) -> Palette:
        return Palette(accent=self.accent_color)

    def font_paths(self, family: str, bold: bool) -> list[str]:
        """Candidate font files for a FontSpec family/weight."""
        if family == "sans":
            return self.sans_bold_font_paths
        return self.mono_bold_font_paths if bold else self.mono_font_paths


# Singleton pattern
_config: CalendarConfig | None = None


def get_config() -> CalendarConfig:
    """Get the calendar configuration singleton.

    Returns:
        CalendarConfig: Calendar configuration instance
    """
    global _config
    if _config is None:
        _config = CalendarConfig()
    return _config
