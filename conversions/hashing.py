import hashlib
import logging
import re

from .normalize import normalize_user_data
from .records import HashedUserRecord, UserRecord
from .telemetry import trace_user_data


logger = logging.getLogger(__name__)

_SHA256_HEX_RE = re.compile(r"^[0-9a-f]{64}$", re.IGNORECASE)

# output key -> record attribute; values are SHA-256 digests
HASHED_KEYS = {
    "em": "email",
    "ph": "phone",
    "ge": "gender",
    "db": "date_of_birth",
    "ln": "last_name",
    "fn": "first_name",
    "ct": "city",
    "st": "state",
    "zp": "zip",
    "country": "country",
    "external_id": "external_id",
}

# output key -> record attribute; values copied through untouched
PASSTHROUGH_KEYS = {
    "client_ip_address": "client_ip_address",
    "client_user_agent": "client_user_agent",
    "fbc": "click_id",
    "fbp": "browser_id",
    "subscription_id": "subscription_id",
    "lead_id": "lead_id",
    "anon_id": "anon_id",
    "madid": "mad_id",
    "fb_login_id": "fb_login_id",
    "partner_id": "partner_id",
    "partner_name": "partner_name",
}


def sha256_hex(value: str) -> str:
    return hashlib.sha256(value.encode("utf-8")).hexdigest()


def hash_value(value):
    """
    Hash a normalized identifier.

    Returns ``None`` for absent or empty values so callers can drop the key.
    Lists are hashed element by element, keeping their order. Values that are
    already a SHA-256 hex digest are returned lowercased rather than re-hashed,
    and non-string values are passed through unhashed.
    """
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        if not value:
            return None
        return [_digest(item) for item in value]
    if isinstance(value, str) and not value:
        return None
    return _digest(value)


def _digest(value):
    if not isinstance(value, str):
        return value
    if _SHA256_HEX_RE.match(value):
        return value.lower()
    return sha256_hex(value)


def hash_user_data(record, destination: str = "default") -> HashedUserRecord:
    """
    Normalize ``record`` and return the destination-ready identifier map.

    ``record`` may be a :class:`UserRecord` or a raw destination mapping. Keys
    with no value are omitted entirely, never sent as empty strings.
    """
    if not isinstance(record, UserRecord):
        record = UserRecord.from_payload(record)

    normalized = normalize_user_data(record)
    hashed: HashedUserRecord = {}

    with trace_user_data(destination, len(normalized.as_dict())):
        for key, attr in HASHED_KEYS.items():
            digest = hash_value(getattr(normalized, attr))
            if digest is not None:
                hashed[key] = digest
        for key, attr in PASSTHROUGH_KEYS.items():
            value = getattr(normalized, attr)
            if value is not None and value != "":
                hashed[key] = value

    logger.debug(
        "Hashed user data for %s",
        destination,
        extra={"destination": destination, "identifier_keys": sorted(hashed)},
    )
    return hashed
