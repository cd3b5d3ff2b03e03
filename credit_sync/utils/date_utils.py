"""Date manipulation utilities"""

import calendar
from datetime import date


def subtract_months(from_date: date, months: int) -> date:
    """
    Move a date back by whole calendar months.

    The day is clamped to the last day of the target month, so
    2024-05-31 minus 3 months is 2024-02-29.
    """
    month_index = from_date.year * 12 + (from_date.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(from_date.day, last_day))
