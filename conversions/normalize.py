"""
Canonicalization of user identifiers before they are hashed.

Conversion APIs match on exact digests, so every identifier is brought into the
one canonical form the destination documents (lowercase, no whitespace, digits
only for phones, two-letter codes for state and country).
"""

from __future__ import annotations

import re
from dataclasses import replace

from constants.country_codes import COUNTRY_CODES
from constants.region_codes import US_STATE_CODES

from .records import UserRecord


_WHITESPACE_RE = re.compile(r"\s")
_NON_DIGIT_RE = re.compile(r"\D")
# Unanchored: free text containing a run of 64 hex characters anywhere is
# treated as pre-hashed too.
_HASHED_RE = re.compile(r"[0-9a-f]{64}", re.IGNORECASE)

GENDER_CODES = {
    "male": "m",
    "female": "f",
}

_PLAIN_FIELDS = ("first_name", "last_name", "city", "zip")


def is_hashed(value) -> bool:
    return isinstance(value, str) and bool(_HASHED_RE.search(value))


def strip_and_lower(value):
    """Remove every whitespace character and lowercase; non-strings pass through."""
    if not isinstance(value, str):
        return value
    return _WHITESPACE_RE.sub("", value).lower()


def digits_only(value):
    if not isinstance(value, str):
        return value
    return _NON_DIGIT_RE.sub("", value)


def _lookup(value, table):
    value = strip_and_lower(value)
    if isinstance(value, str):
        return table.get(value, value)
    return value


def normalize_phone(phone):
    if not phone or is_hashed(phone):
        return phone
    return digits_only(phone)


def normalize_gender(gender):
    if not gender:
        return gender
    gender = strip_and_lower(gender)
    if isinstance(gender, str):
        return GENDER_CODES.get(gender, gender)
    return gender


def normalize_external_id(external_id) -> list | None:
    if not external_id:
        return external_id
    if isinstance(external_id, str):
        external_id = [external_id]
    return [strip_and_lower(value) for value in external_id]


def normalize_user_data(record: UserRecord) -> UserRecord:
    """
    Return a copy of ``record`` with every identifier in canonical form.

    Absent and empty values are left alone. Running the result through this
    function again yields an equal record.
    """
    changes = {}

    if record.email:
        changes["email"] = strip_and_lower(record.email)
    if record.phone:
        changes["phone"] = normalize_phone(record.phone)
    if record.gender:
        changes["gender"] = normalize_gender(record.gender)
    for name in _PLAIN_FIELDS:
        value = getattr(record, name)
        if value:
            changes[name] = strip_and_lower(value)
    if record.state:
        changes["state"] = _lookup(record.state, US_STATE_CODES)
    if record.country:
        changes["country"] = _lookup(record.country, COUNTRY_CODES)
    if record.external_id:
        changes["external_id"] = normalize_external_id(record.external_id)

    return replace(record, **changes)
