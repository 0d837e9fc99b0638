"""Date formatting helpers."""

from __future__ import annotations

from datetime import date, datetime


def format_date(
    value: date | datetime | None = None,
    *,
    has_time: bool = True,
    date_separator: str = "/",
    time_separator: str = ":",
) -> str:
    """Format ``value`` as ``YYYY/MM/DD hh:mm:ss`` with configurable separators.

    Plain ``date`` objects are formatted with a midnight time part.
    """
    if value is None:
        value = datetime.now()
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)

    text = date_separator.join(
        f"{part:02d}" for part in (value.year, value.month, value.day)
    )
    if has_time:
        clock = time_separator.join(
            f"{part:02d}" for part in (value.hour, value.minute, value.second)
        )
        text = f"{text} {clock}"
    return text


__all__ = ["format_date"]
