from datetime import datetime
from typing import Optional

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def format_date(date: datetime) -> str:
    """
    "January 15, 2024"
    """
    return f"{MONTH_NAMES[date.month - 1]} {date.day}, {date.year}"


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'} ago"


def _now_for(date: datetime, now: Optional[datetime]) -> datetime:
    # naive / aware 를 date에 맞춰서 비교
    return now if now is not None else datetime.now(date.tzinfo)


def format_relative_time(date: datetime, now: Optional[datetime] = None) -> str:
    seconds = int((_now_for(date, now) - date).total_seconds())
    minutes = seconds // 60
    hours = minutes // 60
    days = hours // 24
    weeks = days // 7
    months = days // 30

    if seconds < 60:
        return "just now"
    if minutes < 60:
        return _plural(minutes, "minute")
    if hours < 24:
        return _plural(hours, "hour")
    if days < 7:
        return _plural(days, "day")
    if weeks < 4:
        return _plural(weeks, "week")
    return _plural(months, "month")


def is_within_days(date: datetime, days: int, now: Optional[datetime] = None) -> bool:
    """
    True when ``date`` is in the past and at most ``days`` days ago
    """
    diff = (_now_for(date, now) - date).total_seconds()
    return diff >= 0 and diff / 86400 <= days
