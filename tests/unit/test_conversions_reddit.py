from django.test import SimpleTestCase, override_settings, tag

from conversions.hashing import sha256_hex
from conversions.providers.reddit import RedditCAPI

EMAIL_HASH = "f660ab912ec121d1b1e928a0bb4bc61b15f5ad44d5efdc4e1c92a25e99b8e44a"
EXTERNAL_ID_HASH = "3482ae91c8ec52c06e19d618d400b3985814bf705e00947a302ec849a6575c4c"
IP_HASH = "5feaf188de296cd3b17f7c66fd3a2aec9b694815f2b1180631f7b52f57029777"
IDFA_HASH = "d476ca08c0b93013e1dd2ca4d59b225c927355ce5bf6e0cfd222590a89c7dedb"
AAID_HASH = "d4181bb455a74b3bc8b37c75ac9b2c702eb6b9930bd040b861403b31ca85634d"
CONVERSION_ID = "ea3d01f99e303d2338cfb4e71f182441eb57c9a3cb129c40bcae9f5d641a7375"
CONVERSION_ID_HASH = "492ebaa71872336ef94c7093b77d2232fdba7e469f716586a816d861367b183f"

PRODUCTS = [
    {"product_id": "product_id_1", "category": "category_1", "name": "name_1"},
    {"product_id": "product_id_2", "category": "category_2", "name": "name_2"},
]


def _evt(event_name, advertising_id=None, device_type=None):
    user_data = {
        "email": "test@test.com",
        "externalId": "user_id_1",
        "clientIpAddress": "111.111.111.111",
        "clientUserAgent": "test-user-agent",
        "uuid": "uuid_1",
    }
    if advertising_id:
        user_data["madId"] = advertising_id
    if device_type:
        user_data["deviceType"] = device_type
    return {
        "event_name": event_name,
        "event_time": "2024-01-08T13:52:50.212Z",
        "event_id": "test-message-id",
        "click_id": "click_id_1",
        "properties": {
            "conversion_id": CONVERSION_ID,
            "currency": "USD",
            "quantity": 10,
            "total": 100,
            "products": PRODUCTS,
        },
        "user_data": user_data,
    }


@tag("batch_conversions")
class RedditPayloadTests(SimpleTestCase):
    def setUp(self):
        self.provider = RedditCAPI(ad_account_id="ad_account_id_1")

    @override_settings(REDDIT_PARTNER="SEGMENT")
    def test_custom_event(self):
        body = self.provider.build_event(_evt("Some Custom Event Name", "advertising_id_1"))

        self.assertEqual(body["partner"], "SEGMENT")
        self.assertFalse(body["test_mode"])
        event = body["events"][0]
        self.assertEqual(event["click_id"], "click_id_1")
        self.assertEqual(event["event_at"], "2024-01-08T13:52:50.212Z")
        self.assertEqual(
            event["event_type"],
            {"tracking_type": "Custom", "custom_event_name": "Some Custom Event Name"},
        )
        self.assertEqual(
            event["event_metadata"],
            {
                "conversion_id": CONVERSION_ID_HASH,
                "currency": "USD",
                "item_count": 10,
                "value_decimal": 100,
                "products": [
                    {"id": "product_id_1", "category": "category_1", "name": "name_1"},
                    {"id": "product_id_2", "category": "category_2", "name": "name_2"},
                ],
            },
        )
        # no device type means no idfa/aaid match key
        self.assertEqual(
            event["user"],
            {
                "email": EMAIL_HASH,
                "external_id": EXTERNAL_ID_HASH,
                "ip_address": IP_HASH,
                "user_agent": "test-user-agent",
                "uuid": "uuid_1",
            },
        )

    def test_purchase_hashes_uppercased_idfa(self):
        for advertising_id in (
            "7A3CBEA0-BDF5-11E4-8DFC-AA07A5B093DB",
            "7a3cbea0-bdf5-11e4-8dfc-aa07a5b093db",
        ):
            body = self.provider.build_event(_evt("Order Completed", advertising_id, "ios"))
            event = body["events"][0]
            self.assertEqual(event["event_type"], {"tracking_type": "Purchase"})
            self.assertEqual(event["user"]["idfa"], IDFA_HASH)
            self.assertNotIn("aaid", event["user"])

    def test_lead_hashes_lowercased_aaid(self):
        for advertising_id in (
            "38400000-8cf0-11bd-b23e-10b96e40000d",
            "38400000-8CF0-11BD-B23E-10B96E40000D",
        ):
            body = self.provider.build_event(_evt("Lead Generated", advertising_id, "android"))
            event = body["events"][0]
            self.assertEqual(event["event_type"], {"tracking_type": "Lead"})
            self.assertEqual(event["user"]["aaid"], AAID_HASH)

    @override_settings(REDDIT_DEVICE_ID_CASING="preserve")
    def test_preserve_policy_hashes_device_id_as_supplied(self):
        body = self.provider.build_event(
            _evt("Lead Generated", "38400000-8CF0-11BD-B23E-10B96E40000D", "android")
        )
        self.assertNotEqual(body["events"][0]["user"]["aaid"], AAID_HASH)

    def test_page_events_map_to_page_visit(self):
        evt = _evt("Home")
        evt["event_type"] = "page"
        body = self.provider.build_event(evt)
        self.assertEqual(body["events"][0]["event_type"], {"tracking_type": "PageVisit"})

    @override_settings(REDDIT_CAPI_TEST_MODE=True)
    def test_numeric_event_time_and_test_mode(self):
        evt = _evt("Signed Up")
        evt["event_time"] = 1_704_721_970
        evt.pop("click_id")
        evt["properties"] = {}

        body = self.provider.build_event(evt)

        self.assertTrue(body["test_mode"])
        self.assertNotIn("partner", body)
        event = body["events"][0]
        self.assertEqual(event["event_at"], "2024-01-08T13:52:50.000Z")
        self.assertEqual(event["event_type"], {"tracking_type": "SignUp"})
        self.assertNotIn("click_id", event)
        self.assertEqual(event["event_metadata"], {"conversion_id": sha256_hex("test-message-id")})

    def test_absent_identifiers_are_omitted(self):
        self.assertEqual(self.provider.build_user({"email": "", "externalId": []}), {})

    def test_declined_consent_builds_nothing(self):
        evt = _evt("Order Completed")
        evt["consent"] = False
        self.assertIsNone(self.provider.build_event(evt))

    def test_conversion_id_is_hashed_even_when_digest_shaped(self):
        metadata = self.provider.build_event(_evt("Order Completed"))["events"][0]["event_metadata"]
        self.assertEqual(metadata["conversion_id"], CONVERSION_ID_HASH)

    def test_offset_iso_event_time_is_emitted_as_utc(self):
        evt = _evt("Order Completed")
        evt["event_time"] = "2024-01-08T14:52:50+01:00"
        body = self.provider.build_event(evt)
        self.assertEqual(body["events"][0]["event_at"], "2024-01-08T13:52:50.000Z")
