"""Season schedule: loading from JSON and lookup by date.

The schedule data set is a JSON array of game records, one per date:

    [{"date": "2025-03-27", "homegame": false, "teamcode": "CHC", "firstpitch": "1:20 PM"}, ...]

It can come from a local file or from a published URL. Remote fetches retry on
transient failures (timeouts, 5xx); a malformed payload fails immediately.
"""

import json
from pathlib import Path
from typing import Iterable, Iterator

import requests
from pydantic import ValidationError
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)

from src.gamecal.errors import ScheduleFetchError, ScheduleFormatError
from src.gamecal.logging import get_logger
from src.gamecal.models import ScheduleEntry

log = get_logger(__name__)


class ScheduleIndex:
    """Season games keyed by YYYY-MM-DD date.

    At most one game per date is expected. If the data set repeats a date,
    the first record wins and the rest are logged and ignored.
    """

    def __init__(self, entries: Iterable[ScheduleEntry]) -> None:
        self._by_date: dict[str, ScheduleEntry] = {}
        duplicates = 0
        for entry in entries:
            if entry.date_key in self._by_date:
                duplicates += 1
                log.warning(
                    "duplicate_schedule_date",
                    date=entry.date_key,
                    kept=self._by_date[entry.date_key].team_code,
                    ignored=entry.team_code,
                )
                continue
            self._by_date[entry.date_key] = entry

        log.debug("schedule_indexed", games=len(self._by_date), duplicates=duplicates)

    def lookup(self, date_key: str) -> ScheduleEntry | None:
        return self._by_date.get(date_key)

    def __contains__(self, date_key: object) -> bool:
        return date_key in self._by_date

    def __len__(self) -> int:
        return len(self._by_date)

    def __iter__(self) -> Iterator[ScheduleEntry]:
        return iter(self._by_date.values())


def parse_schedule(payload: object) -> list[ScheduleEntry]:
    """Validate a decoded JSON payload into schedule entries.

    Raises:
        ScheduleFormatError: If the payload is not a list or a record is invalid.
    """
    if not isinstance(payload, list):
        raise ScheduleFormatError(
            f"Schedule must be a JSON array, got {type(payload).__name__}"
        )

    entries = []
    for i, record in enumerate(payload):
        try:
            entries.append(ScheduleEntry.model_validate(record))
        except ValidationError as e:
            raise ScheduleFormatError(f"Invalid schedule record #{i}: {e}") from e
    return entries


def load_schedule_file(path: str | Path) -> list[ScheduleEntry]:
    """Read a schedule JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ScheduleFormatError: If the file is unreadable, not UTF-8 JSON or not a schedule.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise
    except UnicodeDecodeError as e:
        raise ScheduleFormatError(f"{path} is not UTF-8 text: {e}") from e
    except OSError as e:
        raise ScheduleFormatError(f"Cannot read {path}: {e}") from e

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise ScheduleFormatError(f"{path} is not valid JSON: {e}") from e

    entries = parse_schedule(payload)
    log.info("schedule_loaded", source=str(path), games=len(entries))
    return entries


def _log_retry(retry_state: RetryCallState) -> None:
    log.warning(
        "schedule_fetch_retrying",
        attempt=retry_state.attempt_number,
        error=str(retry_state.outcome.exception()) if retry_state.outcome else None,
    )


@retry(
    stop=stop_after_attempt(3),
    wait=wait_fixed(2),
    retry=retry_if_exception_type(ScheduleFetchError),
    before_sleep=_log_retry,
    reraise=True,
)
def fetch_schedule(url: str, timeout: float = 15.0) -> list[ScheduleEntry]:
    """Download a schedule JSON document.

    Retries on ScheduleFetchError but fails fast on ScheduleFormatError.

    Args:
        url: http(s) URL of the schedule JSON array.
        timeout: Per-request timeout in seconds.

    Raises:
        ScheduleFetchError: Network failure or 5xx after all retries.
        ScheduleFormatError: 4xx response or unusable payload.
    """
    try:
        resp = requests.get(url, timeout=timeout)
    except (requests.ConnectionError, requests.Timeout) as e:
        log.warning("schedule_fetch_failed", url=url, error=str(e))
        raise ScheduleFetchError(f"Could not reach {url}: {e}") from e

    if resp.status_code >= 500:
        log.warning("schedule_fetch_failed", url=url, status=resp.status_code)
        raise ScheduleFetchError(f"{url} returned {resp.status_code}")
    if resp.status_code >= 400:
        raise ScheduleFormatError(f"{url} returned {resp.status_code}")

    try:
        payload = resp.json()
    except ValueError as e:
        raise ScheduleFormatError(f"{url} did not return JSON: {e}") from e

    entries = parse_schedule(payload)
    log.info("schedule_loaded", source=url, games=len(entries))
    return entries


def load_schedule(source: str | Path, timeout: float = 15.0) -> ScheduleIndex:
    """Load and index a schedule from a file path or http(s) URL."""
    source_str = str(source)
    if source_str.startswith(("http://", "https://")):
        entries = fetch_schedule(source_str, timeout=timeout)
    else:
        entries = load_schedule_file(source)
    return ScheduleIndex(entries)
