"""Error hierarchy for calendar rendering and schedule loading.

Month errors are raised before any drawing happens, so a failed render never
leaves a partial image behind. Schedule errors split into transient failures
(worth retrying) and permanent ones, which lets tenacity decide what to retry.

Example usage with tenacity:
    @retry(retry=retry_if_exception_type(ScheduleFetchError), stop=stop_after_attempt(3))
    def fetch_schedule(url: str):
        ...
"""


class CalendarError(Exception):
    """Base exception for all calendar errors."""

    pass


class MonthError(CalendarError):
    """The requested month cannot be rendered.

    Raised during validation, before layout or painting starts.
    """

    pass


class InvalidMonthError(MonthError):
    """The supplied string does not name a calendar month.

    Examples: "Fooember", "", "13".
    """

    pass


class OffSeasonMonthError(MonthError):
    """The month is real but falls outside the regular season (March-September)."""

    pass


class ScheduleError(CalendarError):
    """Base exception for schedule data source failures."""

    pass


class ScheduleFetchError(ScheduleError):
    """Temporary failure that may succeed on retry.

    Examples: connection reset, read timeout, 503 Service Unavailable.
    """

    pass


class ScheduleFormatError(ScheduleError):
    """Failure that won't succeed on retry.

    Examples: 404 on the data URL, payload that is not a JSON array,
    record missing its date.
    """

    pass
