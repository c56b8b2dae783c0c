from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any


HashedUserRecord = dict[str, Any]

# attribute -> keys a destination mapping may resolve it under
_PAYLOAD_KEYS: dict[str, tuple[str, ...]] = {
    "external_id": ("externalId", "external_id"),
    "email": ("email",),
    "phone": ("phone",),
    "first_name": ("firstName", "first_name"),
    "last_name": ("lastName", "last_name"),
    "gender": ("gender",),
    "date_of_birth": ("dateOfBirth", "date_of_birth"),
    "city": ("city",),
    "state": ("state",),
    "zip": ("zip",),
    "country": ("country",),
    "client_ip_address": ("client_ip_address", "clientIpAddress"),
    "client_user_agent": ("client_user_agent", "clientUserAgent"),
    "click_id": ("fbc", "click_id", "clickId"),
    "browser_id": ("fbp", "browser_id", "browserId"),
    "subscription_id": ("subscriptionID", "subscription_id"),
    "lead_id": ("leadID", "lead_id"),
    "anon_id": ("anonId", "anon_id"),
    "mad_id": ("madId", "mad_id"),
    "device_os": ("deviceType", "device_os"),
    "fb_login_id": ("fbLoginID", "fb_login_id"),
    "partner_id": ("partner_id", "partnerId"),
    "partner_name": ("partner_name", "partnerName"),
    "uuid": ("uuid",),
}


@dataclass(frozen=True)
class UserRecord:
    """Identity attributes for a single outbound conversion event."""

    external_id: str | list[str] | tuple[str, ...] | None = None
    email: str | None = None
    phone: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    gender: str | None = None
    date_of_birth: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    country: str | None = None

    # Correlation / pass-through identifiers, never hashed by the core engine.
    client_ip_address: str | None = None
    client_user_agent: str | None = None
    click_id: str | None = None
    browser_id: str | None = None
    subscription_id: str | None = None
    lead_id: int | str | None = None
    anon_id: str | None = None
    mad_id: str | None = None
    device_os: str | None = None
    fb_login_id: int | str | None = None
    partner_id: str | None = None
    partner_name: str | None = None
    uuid: str | None = None

    @classmethod
    def from_payload(cls, payload: dict | None) -> "UserRecord":
        """
        Build a record from an already-resolved destination mapping.

        Unknown keys are ignored. When several aliases are present for the same
        attribute, the first one listed in ``_PAYLOAD_KEYS`` wins.
        """
        payload = payload or {}
        values = {}
        for attr, keys in _PAYLOAD_KEYS.items():
            for key in keys:
                if payload.get(key) is not None:
                    values[attr] = payload[key]
                    break
        return cls(**values)

    def as_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}
