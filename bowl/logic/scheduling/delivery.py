"""Delivery scheduling helpers.

Weekday index used everywhere in the app: 0 = Monday, 1 = Tuesday, ..., 6 = Sunday.
The "calendar day" is the Sunday-first numbering (0 = Sunday ... 6 = Saturday) used by
strftime('%w') and the browser frontend. Keep both conventions apart: only the two
conversion functions below translate between them.

All functions depending on the current day or time accept an explicit `today` / `now`
and otherwise read the local clock (naive local time, never UTC).
"""
from __future__ import annotations
import logging
import re
from datetime import date, datetime, time, timedelta
from typing import Iterable, List, Optional, Union

from bowl.utilities.constants import (
    DATE_FORMAT, DELIVERY_SEARCH_DAYS, MONTH_NAMES_DE, WEEKDAY_NAMES_DE
)

logger = logging.getLogger(__name__)

__all__ = [
    "weekday_index_to_calendar_day", "calendar_day_to_weekday_index", "date_to_ymd", "parse_ymd",
    "get_next_date_for_weekday", "get_next_monday", "get_next_delivery_day", "is_deliverable_date",
    "is_order_closed_for_delivery", "get_cutoff_for_delivery", "format_date",
    "parse_paused_dates", "toggle_paused_date", "delivery_dates_between",
]

CAL_SUNDAY = 0
CAL_MONDAY = 1

_PAUSED_SPLIT = re.compile(r"[\n,]+")

DateLike = Union[date, datetime]


def weekday_index_to_calendar_day(index: int) -> int:
    """Our index (0=Mon ... 6=Sun) -> calendar day (0=Sun ... 6=Sat).

    Values outside 0..6 silently map to Monday; callers passing a bad value are not told.
    """
    if not isinstance(index, int) or index < 0 or index > 6:
        return CAL_MONDAY
    return CAL_SUNDAY if index == 6 else index + 1


def calendar_day_to_weekday_index(day: int) -> int:
    """Calendar day (0=Sun ... 6=Sat) -> our index (0=Mon ... 6=Sun)."""
    return 6 if day == CAL_SUNDAY else day - 1


def _calendar_day(d: DateLike) -> int:
    return d.isoweekday() % 7


def _local(d: DateLike) -> DateLike:
    if isinstance(d, datetime) and d.tzinfo is not None:
        return d.astimezone()
    return d


def date_to_ymd(d: DateLike) -> str:
    """Local calendar date as YYYY-MM-DD (no UTC shift)."""
    d = _local(d)
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def parse_ymd(value: str) -> date:
    """YYYY-MM-DD -> date. Raises ValueError on malformed input."""
    return datetime.strptime(value.strip(), DATE_FORMAT).date()


def _resolve_today(today: Optional[DateLike]) -> date:
    if today is None:
        return date.today()
    if isinstance(today, datetime):
        return _local(today).date()
    return today


def get_next_date_for_weekday(weekday_index: int, today: Optional[DateLike] = None) -> datetime:
    """Next date (today inclusive) with this weekday, at 12:00 local time. Ignores paused dates."""
    start = _resolve_today(today)
    target = weekday_index_to_calendar_day(weekday_index)
    days = (target - _calendar_day(start) + 7) % 7
    return datetime.combine(start + timedelta(days=days), time(12, 0))


def get_next_delivery_day(weekday_index: int, paused_dates: Iterable[str] = (),
                          today: Optional[DateLike] = None) -> str:
    """Next delivery day (YYYY-MM-DD), today inclusive, skipping paused dates.

    Scans at most DELIVERY_SEARCH_DAYS days ahead; falls back to today when nothing matches.
    """
    paused = set(paused_dates or ())
    target = weekday_index_to_calendar_day(weekday_index)
    start = _resolve_today(today)
    for i in range(DELIVERY_SEARCH_DAYS + 1):
        candidate = start + timedelta(days=i)
        ymd = date_to_ymd(candidate)
        if _calendar_day(candidate) == target and ymd not in paused:
            return ymd
    logger.warning("No delivery day within %s days for weekday %s; falling back to today",
                   DELIVERY_SEARCH_DAYS, weekday_index)
    return date_to_ymd(start)


def get_next_monday(today: Optional[DateLike] = None) -> str:
    """Next Monday (YYYY-MM-DD); today if today is a Monday."""
    return get_next_delivery_day(0, today=today)


def is_deliverable_date(d: DateLike, delivery_weekday: int, paused_set: Iterable[str],
                        today: Optional[DateLike] = None) -> bool:
    """True if `d` is today or later, falls on the delivery weekday and is not paused."""
    ymd = date_to_ymd(d)
    if ymd < date_to_ymd(_resolve_today(today)):
        return False
    if _calendar_day(_local(d)) != weekday_index_to_calendar_day(delivery_weekday):
        return False
    return ymd not in set(paused_set or ())


def get_cutoff_for_delivery(delivery_date: str, cutoff_weekday: int, cutoff_hour: int,
                            cutoff_minute: int) -> datetime:
    """Order cutoff: the last `cutoff_weekday` on or before the delivery date, at hour:minute.

    When the cutoff weekday equals the delivery weekday the cutoff is on the delivery day itself.
    """
    delivery = parse_ymd(delivery_date)
    days_back = (_calendar_day(delivery) - weekday_index_to_calendar_day(cutoff_weekday) + 7) % 7
    return datetime.combine(delivery - timedelta(days=days_back), time(cutoff_hour, cutoff_minute))


def is_order_closed_for_delivery(delivery_date: str, cutoff_weekday: int, cutoff_hour: int,
                                 cutoff_minute: int, now: Optional[datetime] = None) -> bool:
    """True once the current time is at or past the cutoff for `delivery_date`."""
    current = _local(now).replace(tzinfo=None) if now is not None else datetime.now()
    return current >= get_cutoff_for_delivery(delivery_date, cutoff_weekday, cutoff_hour, cutoff_minute)


def format_date(ymd: str) -> str:
    """Long German date, e.g. 'Montag, 2. März 2026'."""
    d = parse_ymd(ymd)
    weekday = WEEKDAY_NAMES_DE[calendar_day_to_weekday_index(_calendar_day(d))]
    return f"{weekday}, {d.day}. {MONTH_NAMES_DE[d.month - 1]} {d.year}"


def parse_paused_dates(raw: Union[str, Iterable[str], None]) -> List[str]:
    """Split the stored paused-date text (comma or newline separated) into YYYY-MM-DD strings."""
    if not raw:
        return []
    parts = _PAUSED_SPLIT.split(raw) if isinstance(raw, str) else list(raw)
    return [p.strip() for p in parts if p and p.strip()]


def toggle_paused_date(raw: Union[str, Iterable[str], None], ymd: str) -> str:
    """Add `ymd` to the paused dates or remove it if already present. Returns sorted, newline joined."""
    paused = set(parse_paused_dates(raw))
    if ymd in paused:
        paused.discard(ymd)
    else:
        paused.add(ymd)
    return "\n".join(sorted(paused))


def delivery_dates_between(start: date, end: date, weekday_index: int,
                           paused_dates: Iterable[str] = ()) -> List[date]:
    """All non-paused dates in [start, end] falling on the delivery weekday (calendar view)."""
    paused = set(paused_dates or ())
    target = weekday_index_to_calendar_day(weekday_index)
    first = start + timedelta(days=(target - _calendar_day(start) + 7) % 7)
    out: List[date] = []
    current = first
    while current <= end:
        if date_to_ymd(current) not in paused:
            out.append(current)
        current += timedelta(days=7)
    return out
