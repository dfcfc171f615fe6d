"""Financial year helpers (1st April to 31st March).

Premium memberships and the revenue dashboard are reported per financial
year rather than per calendar year.
"""

import math
from datetime import datetime, timedelta
from typing import Optional

FY_START_MONTH = 4


def get_financial_year_start(date: Optional[datetime] = None) -> datetime:
    date = date or datetime.utcnow()
    fy_year = date.year - 1 if date.month < FY_START_MONTH else date.year
    return datetime(fy_year, FY_START_MONTH, 1)


def get_financial_year_end(date: Optional[datetime] = None) -> datetime:
    start = get_financial_year_start(date)
    return datetime(start.year + 1, 3, 31, 23, 59, 59, 999000)


def get_financial_year_label(date: Optional[datetime] = None) -> str:
    """Return the label used on reports, e.g. ``"2025-26"``."""
    start = get_financial_year_start(date)
    end = get_financial_year_end(date)
    return f"{start.year}-{str(end.year)[-2:]}"


def is_in_current_financial_year(date: datetime, today: Optional[datetime] = None) -> bool:
    return get_financial_year_start(today) <= date <= get_financial_year_end(today)


def get_days_remaining_in_financial_year(today: Optional[datetime] = None) -> int:
    today = today or datetime.utcnow()
    remaining = get_financial_year_end(today) - today
    return math.ceil(remaining / timedelta(days=1))
