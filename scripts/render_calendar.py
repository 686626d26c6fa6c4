"""Render a large-print regular-season calendar page for one month.

Standalone CLI script. Loads the season schedule (local JSON or URL), renders
the month at 11x8.5in / 300dpi and writes a PNG, an HTML <img> snippet, or a
data URL on stdout.

Run with: python scripts/render_calendar.py April
Output:   python scripts/render_calendar.py April --output out/april.png
HTML:     python scripts/render_calendar.py May --html out/may.html
Remote:   python scripts/render_calendar.py June --schedule https://example.org/dbacks.json
Stdout:   python scripts/render_calendar.py July --data-url > july.txt

Valid months: March, April, May, June, July, August, September
(full names or three-letter abbreviations, any case).

Exit codes:
  0 = success
  1 = error (message on stderr)
"""

import argparse
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Add project root to path for src imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from src.gamecal.calendar_image import CalendarImage  # noqa: E402
from src.gamecal.config import get_config  # noqa: E402
from src.gamecal.errors import CalendarError  # noqa: E402
from src.gamecal.logging import get_logger, setup_logging  # noqa: E402
from src.gamecal.months import SEASON_MONTHS  # noqa: E402
from src.gamecal.schedule import load_schedule  # noqa: E402

log = get_logger("render_calendar")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments using argparse."""
    parser = argparse.ArgumentParser(
        description="Render a printable regular-season calendar month as PNG.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "month",
        help=f"Season month ({', '.join(SEASON_MONTHS)}).",
    )
    parser.add_argument(
        "--schedule",
        type=str,
        default=None,
        help="Schedule JSON path or URL (default: GAMECAL_SCHEDULE_SOURCE).",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="PNG output path. Default: calendar-{month}.png unless --html/--data-url.",
    )
    parser.add_argument(
        "--html",
        type=str,
        default=None,
        help="Write an HTML file containing a single <img> with the embedded PNG.",
    )
    parser.add_argument(
        "--data-url",
        action="store_true",
        help="Print the PNG as a data: URL on stdout.",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit JSON log lines on stderr.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    config = get_config()
    setup_logging(json_output=args.json_logs or config.log_json, log_level=config.log_level)

    source = args.schedule or config.schedule_source
    try:
        schedule = load_schedule(source, timeout=config.http_timeout_seconds)
        rendered = CalendarImage(schedule, config).render(args.month)
    except CalendarError as e:
        log.error("render_failed", month=args.month, error=str(e), type=type(e).__name__)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except FileNotFoundError as e:
        print(f"Error: schedule not found: {e.filename}", file=sys.stderr)
        return 1

    output = args.output
    if output is None and not (args.html or args.data_url):
        output = f"calendar-{rendered.month.name.lower()}.png"

    if output:
        rendered.save(output)
    if args.html:
        html_path = Path(args.html)
        html_path.parent.mkdir(parents=True, exist_ok=True)
        html_path.write_text(rendered.as_image_element() + "\n", encoding="utf-8")
        log.info("html_written", path=str(html_path))
    if args.data_url:
        print(rendered.as_data_url())

    return 0


if __name__ == "__main__":
    sys.exit(main())
