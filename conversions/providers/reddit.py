import logging

from django.conf import settings

from conversions.device_ids import DeviceIdCasing, classify_device_id, normalize_device_id, resolve_casing
from conversions.hashing import hash_value, sha256_hex
from conversions.normalize import normalize_user_data
from conversions.telemetry import trace_event

from .base import as_record, event_id, format_timestamp


logger = logging.getLogger(__name__)

TRACKING_TYPES = {
    "Page Viewed": "PageVisit",
    "Product Viewed": "ViewContent",
    "Products Searched": "Search",
    "Product Added": "AddToCart",
    "Product Added to Wishlist": "AddToWishlist",
    "Order Completed": "Purchase",
    "Lead Generated": "Lead",
    "Signed Up": "SignUp",
}


class RedditCAPI:
    name = "reddit"

    def __init__(self, ad_account_id: str):
        self.ad_account_id = ad_account_id
        self.url = f"https://ads-api.reddit.com/api/v2.0/conversions/events/{ad_account_id}"

    def _map_event_name(self, name: str | None, event_type: str | None = None) -> str | None:
        if event_type == "page":
            return "PageVisit"
        return TRACKING_TYPES.get(name)

    def build_user(self, user_data) -> dict:
        """
        Reddit match keys. Email, external id, IP and the device advertising id
        are hashed; user agent and the pixel ``uuid`` are sent as-is.
        """
        record = normalize_user_data(as_record(user_data))
        user = {}

        if record.email:
            user["email"] = hash_value(record.email)
        if record.external_id:
            # Reddit accepts a single external id
            user["external_id"] = hash_value(record.external_id[0])
        if record.client_ip_address:
            user["ip_address"] = hash_value(record.client_ip_address.strip())
        if record.client_user_agent:
            user["user_agent"] = record.client_user_agent
        if record.uuid:
            user["uuid"] = record.uuid

        id_type = classify_device_id(record.device_os)
        if record.mad_id and id_type:
            policy = resolve_casing("REDDIT_DEVICE_ID_CASING", DeviceIdCasing.BY_OS)
            user[id_type] = hash_value(normalize_device_id(record.mad_id, record.device_os, policy))

        return {key: value for key, value in user.items() if value}

    @staticmethod
    def _clean_products(products) -> list:
        cleaned = []
        for product in products or []:
            if not isinstance(product, dict):
                continue
            item = {
                "id": product.get("product_id") or product.get("id"),
                "category": product.get("category"),
                "name": product.get("name"),
            }
            item = {k: v for k, v in item.items() if v not in (None, "")}
            if item:
                cleaned.append(item)
        return cleaned

    def _build_metadata(self, evt: dict) -> dict:
        props = evt.get("properties") or {}
        value = props.get("total")
        if value is None:
            value = props.get("revenue", props.get("price"))
        conversion_id = props.get("conversion_id") or evt.get("event_id")
        meta = {
            # hashed unconditionally, even when it already looks like a digest
            "conversion_id": sha256_hex(str(conversion_id)) if conversion_id else None,
            "currency": props.get("currency"),
            "item_count": props.get("quantity"),
            "value_decimal": value,
            "products": self._clean_products(props.get("products")),
        }
        return {k: v for k, v in meta.items() if v not in (None, "", [])}

    def build_event(self, evt: dict) -> dict | None:
        if not evt.get("consent", True):
            return None

        with trace_event(self.name, evt):
            internal_name = evt.get("event_name")
            tracking_type = self._map_event_name(internal_name, evt.get("event_type"))
            if tracking_type is None:
                # Reddit requires a name for custom conversions
                event_type = {"tracking_type": "Custom", "custom_event_name": internal_name}
            else:
                event_type = {"tracking_type": tracking_type}

            event_obj = {
                "event_at": format_timestamp(evt.get("event_time")),
                "event_type": event_type,
                "event_metadata": self._build_metadata({**evt, "event_id": event_id(evt)}),
                "user": self.build_user(evt.get("user_data")),
            }
            if evt.get("click_id"):
                event_obj["click_id"] = evt["click_id"]

            body = {
                "events": [event_obj],
                "test_mode": bool(getattr(settings, "REDDIT_CAPI_TEST_MODE", False)),
            }
            partner = getattr(settings, "REDDIT_PARTNER", "") or ""
            if partner:
                body["partner"] = partner

        logger.info(
            "Reddit CAPI payload identifiers",
            extra={
                "event_name": internal_name,
                "tracking_type": event_type["tracking_type"],
                "identifier_keys": sorted(event_obj["user"]),
                "has_click_id": "click_id" in event_obj,
            },
        )
        return body
