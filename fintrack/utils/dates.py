import calendar
from datetime import date
from typing import Optional


def months_ago(months: int, today: Optional[date] = None) -> date:
    """Same day `months` calendar months before `today`, clamped to the month's last day."""
    d = today or date.today()
    month_index = d.year * 12 + (d.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(d.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def to_iso_date(d: date) -> str:
    return d.isoformat()


def month_key(iso_date: str) -> str:
    """Return the YYYY-MM month of an ISO-8601 date or timestamp string."""
    return iso_date[:7]
