"""Date formatting for note filenames."""

from __future__ import annotations

from datetime import date

# Fixed-width and zero-padded so filenames sort chronologically.
NOTE_DATE_FORMAT = "%Y-%m-%d"


def today_stamp(today: date | None = None) -> str:
    """Return the local calendar date as ``YYYY-MM-DD``.

    Example: "2025-01-31"
    """

    return (today or date.today()).strftime(NOTE_DATE_FORMAT)
