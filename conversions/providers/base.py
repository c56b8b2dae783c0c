import time
import uuid
from datetime import datetime, timezone

from django.conf import settings

from conversions.records import UserRecord


def as_record(user_data) -> UserRecord:
    if isinstance(user_data, UserRecord):
        return user_data
    return UserRecord.from_payload(user_data)


def event_time_seconds(evt: dict) -> int:
    ts = evt.get("event_time")
    if ts is None:
        return int(time.time())
    if isinstance(ts, str):
        try:
            ts = float(ts)
        except ValueError:
            return int(_parse_iso(ts).timestamp())
    ts = int(ts)
    # Accept milliseconds as well as seconds
    return ts // 1000 if ts >= 10**12 else ts


def event_id(evt: dict) -> str:
    return str(evt.get("event_id") or uuid.uuid4())


def format_timestamp(ts: int | float | str | None) -> str:
    """ISO-8601 UTC with millisecond precision, e.g. ``2024-01-08T13:52:50.212Z``."""
    if ts is None:
        ts = time.time()
    elif isinstance(ts, str):
        try:
            ts = float(ts)
        except ValueError:
            return _iso_utc(_parse_iso(ts))
    ts = float(ts)
    if ts >= 10**12:
        ts = ts / 1000
    return _iso_utc(datetime.fromtimestamp(ts, tz=timezone.utc))


def _parse_iso(value: str) -> datetime:
    dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    # offset-less timestamps are taken as UTC
    return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)


def _iso_utc(dt: datetime) -> str:
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def resolve_test_event_code(mode_setting: str, code_setting: str) -> str | None:
    test_mode = bool(getattr(settings, mode_setting, False))
    test_code = getattr(settings, code_setting, "") or ""
    if test_mode and isinstance(test_code, str) and test_code.strip():
        return test_code.strip()
    return None
