"""
Device advertising identifier casing.

Destinations disagree on how mobile advertising IDs must be cased before they
are matched: Meta forwards ``madid`` exactly as supplied, while Reddit expects
iOS IDFAs upper-cased and Android AAIDs lower-cased before hashing. The rule is
therefore an explicit per-destination policy read from settings.
"""

from enum import Enum

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured


class DeviceIdCasing(str, Enum):
    PRESERVE = "preserve"
    BY_OS = "by_os"


IDFA = "idfa"
AAID = "aaid"

_OS_ID_TYPES = {
    "ios": IDFA,
    "ipados": IDFA,
    "tvos": IDFA,
    "android": AAID,
}


def classify_device_id(device_os: str | None) -> str | None:
    """Return ``"idfa"`` / ``"aaid"`` for the device OS, or ``None`` if unknown."""
    if not isinstance(device_os, str):
        return None
    return _OS_ID_TYPES.get(device_os.strip().lower())


def normalize_device_id(value, device_os: str | None, policy: DeviceIdCasing):
    if not isinstance(value, str) or not value:
        return value
    if policy is DeviceIdCasing.PRESERVE:
        return value
    value = value.strip()
    id_type = classify_device_id(device_os)
    if id_type == IDFA:
        return value.upper()
    if id_type == AAID:
        return value.lower()
    return value


def resolve_casing(setting_name: str, default: DeviceIdCasing) -> DeviceIdCasing:
    raw = getattr(settings, setting_name, None)
    if raw in (None, ""):
        return default
    try:
        return DeviceIdCasing(str(raw).strip().lower())
    except ValueError as e:
        choices = ", ".join(c.value for c in DeviceIdCasing)
        raise ImproperlyConfigured(f"{setting_name}={raw!r} is not one of: {choices}") from e
