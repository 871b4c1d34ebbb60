# app/utils/formatting.py
"""
Display helpers for visit times, shared by both gate clients.
Stored timestamps are naive UTC; they are shown in DISPLAY_TIMEZONE.
"""

from datetime import datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo

from app.config import settings

PLACEHOLDER = "-"


def to_local(ts: datetime, tz_name: str = None) -> datetime:
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(ZoneInfo(tz_name or settings.DISPLAY_TIMEZONE))


def format_time(ts: Optional[datetime], tz_name: str = None) -> str:
    """Short local date/time, e.g. '18 Oct, 14:05'."""
    if ts is None:
        return PLACEHOLDER
    return to_local(ts, tz_name).strftime("%d %b, %H:%M")


def format_duration(time_in: Optional[datetime], time_out: Optional[datetime]) -> str:
    """'{h}h {m}m' between check-in and check-out, floored to the minute."""
    if time_in is None or time_out is None:
        return PLACEHOLDER
    minutes = max(0, int((time_out - time_in).total_seconds() // 60))
    return f"{minutes // 60}h {minutes % 60}m"
