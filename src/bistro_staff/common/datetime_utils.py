from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta
from typing import Optional, Tuple

from ..core.exceptions import ValidationError

WEEKDAY_NAMES = tuple(calendar.day_name)


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(str(value).strip()[:10], "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Invalid date (YYYY-MM-DD): {value!r}")


def parse_hhmm(value: str) -> time:
    try:
        return datetime.strptime(str(value).strip()[:5], "%H:%M").time()
    except ValueError:
        raise ValidationError(f"Invalid time (HH:MM): {value!r}")


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO timestamp; a trailing ``Z`` is accepted and dropped (naive local time)."""
    if not value:
        return None
    v = str(value).strip()
    if v.endswith("Z"):
        v = v[:-1]
    try:
        return datetime.fromisoformat(v).replace(tzinfo=None)
    except ValueError:
        raise ValidationError(f"Invalid timestamp: {value!r}")


def format_hhmm(t: time) -> str:
    return t.strftime("%H:%M")


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat(timespec="seconds") if value else None


def weekday_name(d: date) -> str:
    return WEEKDAY_NAMES[d.weekday()]


def shift_window(work_date: date, start: time, end: time) -> Tuple[datetime, datetime]:
    """Scheduled start/end datetimes; an end at or before the start rolls to the next day."""
    start_dt = datetime.combine(work_date, start)
    end_dt = datetime.combine(work_date, end)
    if end_dt <= start_dt:
        end_dt += timedelta(days=1)
    return start_dt, end_dt


def month_bounds(value: str) -> Tuple[date, date]:
    """First and last day of the month named by ``YYYY-MM`` or any ISO date inside it."""
    v = str(value or "").strip()
    if len(v) == 7:
        v = f"{v}-01"
    d = parse_iso_date(v)
    last = calendar.monthrange(d.year, d.month)[1]
    return d.replace(day=1), d.replace(day=last)


def ranges_overlap(a_start: date, a_end: date, b_start: date, b_end: date) -> bool:
    return a_start <= b_end and b_start <= a_end


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now().replace(microsecond=0)


def period_bounds(period: str, today: date) -> Tuple[Optional[date], Optional[date]]:
    """Inclusive date window for a report period; ``all`` is unbounded."""
    if period == "week":
        return today - timedelta(days=6), today
    if period == "month":
        last = calendar.monthrange(today.year, today.month)[1]
        return today.replace(day=1), today.replace(day=last)
    if period == "year":
        return date(today.year, 1, 1), date(today.year, 12, 31)
    if period == "all":
        return None, None
    raise ValidationError(f"Unknown period: {period!r}")


def whole_minutes_between(earlier: datetime, later: datetime) -> int:
    """Floor of the minutes from ``earlier`` to ``later``; 0 when not later."""
    if later <= earlier:
        return 0
    return int((later - earlier).total_seconds() // 60)
