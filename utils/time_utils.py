"""Time formatting helpers for API payloads."""
from datetime import datetime, timezone
from typing import Optional


def iso_timestamp(now: Optional[datetime] = None) -> str:
    """Render an instant as ISO-8601 UTC with milliseconds and a Z suffix."""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    else:
        now = now.astimezone(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def local_time_string(now: Optional[datetime] = None) -> str:
    """Render local wall-clock time as e.g. '3:04:05 PM'."""
    if now is None:
        now = datetime.now()
    # %I is zero padded; the hour is shown without the leading zero
    hour = now.strftime("%I").lstrip("0")
    meridiem = "AM" if now.hour < 12 else "PM"
    return f"{hour}:{now:%M:%S} {meridiem}"
