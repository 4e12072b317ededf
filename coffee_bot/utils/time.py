from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo


def format_ready_time(dt: datetime, tz: str = "UTC") -> str:
    """12-hour clock, e.g. "1:30 PM"."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=ZoneInfo("UTC"))
    local = dt.astimezone(ZoneInfo(tz))
    return f"{local:%I:%M %p}".lstrip("0")
