import logging
from dataclasses import replace

from conversions.device_ids import DeviceIdCasing, normalize_device_id, resolve_casing
from conversions.hashing import hash_user_data
from conversions.telemetry import trace_event

from .base import as_record, event_id, event_time_seconds, resolve_test_event_code


logger = logging.getLogger(__name__)


class MetaCAPI:
    name = "meta"

    def __init__(self, pixel_id: str):
        self.pixel_id = pixel_id
        self.url = f"https://graph.facebook.com/v20.0/{pixel_id}/events"

    def build_user_data(self, user_data) -> dict:
        record = as_record(user_data)
        if record.mad_id:
            policy = resolve_casing("FACEBOOK_DEVICE_ID_CASING", DeviceIdCasing.PRESERVE)
            record = replace(record, mad_id=normalize_device_id(record.mad_id, record.device_os, policy))
        return hash_user_data(record, destination=self.name)

    def build_event(self, evt: dict) -> dict | None:
        if not evt.get("consent", True):
            return None

        with trace_event(self.name, evt):
            name = evt["event_name"]
            user_data = self.build_user_data(evt.get("user_data"))
            event_payload = {
                "event_name": name,
                "event_time": event_time_seconds(evt),
                "event_id": event_id(evt),
                "action_source": evt.get("action_source") or "website",
                "user_data": user_data,
                "custom_data": evt.get("properties") or {},
            }
            if evt.get("event_source_url"):
                event_payload["event_source_url"] = evt["event_source_url"]

            body = {"data": [event_payload]}
            code = resolve_test_event_code("FACEBOOK_CAPI_TEST_MODE", "FACEBOOK_TEST_EVENT_CODE")
            if code:
                body["test_event_code"] = code

        if user_data.get("fbc"):
            fbc_source = "cookie"
        else:
            fbc_source = "missing"
        logger.info(
            "Meta CAPI payload identifiers",
            extra={
                "event_name": name,
                "event_id": event_payload["event_id"],
                "identifier_keys": sorted(user_data),
                "fbc_source": fbc_source,
            },
        )
        return body
