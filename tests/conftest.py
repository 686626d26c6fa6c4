import logging

import pytest
import structlog

from src.gamecal.config import CalendarConfig
from src.gamecal.layout import compute_layout
from src.gamecal.models import ScheduleEntry
from src.gamecal.schedule import ScheduleIndex

SCHEDULE_RECORDS = [
    {"date": "2025-03-27", "homegame": False, "teamcode": "CHC", "firstpitch": "1:20 PM"},
    {"date": "2025-04-01", "homegame": True, "teamcode": "NYY", "firstpitch": "6:40 PM"},
    {"date": "2025-04-04", "homegame": False, "teamcode": "WSH", "firstpitch": "4:05 PM"},
    {"date": "2025-04-15", "homegame": True, "teamcode": "MIA", "firstpitch": "6:40 PM"},
    {"date": "2025-09-28", "homegame": True, "teamcode": "SD", "firstpitch": "12:10 PM"},
]


@pytest.fixture
def schedule_records():
    return [dict(record) for record in SCHEDULE_RECORDS]


@pytest.fixture
def schedule_entries(schedule_records):
    return [ScheduleEntry.model_validate(record) for record in schedule_records]


@pytest.fixture
def schedule_index(schedule_entries):
    return ScheduleIndex(schedule_entries)


@pytest.fixture
def config():
    # Ignore any developer .env so tests see the defaults
    return CalendarConfig(_env_file=None)


@pytest.fixture
def layout(config):
    return compute_layout(config.page_constants())


@pytest.fixture
def palette(config):
    return config.palette()


@pytest.fixture(autouse=True)
def reset_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    root.handlers = handlers
    root.setLevel(level)
