from django.test import SimpleTestCase, tag

from conversions.records import UserRecord


@tag("batch_conversions")
class UserRecordFromPayloadTests(SimpleTestCase):
    def test_reads_destination_field_names(self):
        record = UserRecord.from_payload(
            {
                "externalId": ["u1"],
                "firstName": "Ada",
                "lastName": "Lovelace",
                "dateOfBirth": "18151210",
                "client_ip_address": "198.51.100.1",
                "fbc": "fbc-1",
                "fbp": "fbp-1",
                "subscriptionID": "sub-1",
                "leadID": 42,
                "madId": "mad-1",
                "deviceType": "ios",
                "unrelated": "ignored",
            }
        )
        self.assertEqual(record.external_id, ["u1"])
        self.assertEqual(record.first_name, "Ada")
        self.assertEqual(record.last_name, "Lovelace")
        self.assertEqual(record.date_of_birth, "18151210")
        self.assertEqual(record.client_ip_address, "198.51.100.1")
        self.assertEqual(record.click_id, "fbc-1")
        self.assertEqual(record.browser_id, "fbp-1")
        self.assertEqual(record.subscription_id, "sub-1")
        self.assertEqual(record.lead_id, 42)
        self.assertEqual(record.mad_id, "mad-1")
        self.assertEqual(record.device_os, "ios")

    def test_empty_payload_gives_empty_record(self):
        self.assertEqual(UserRecord.from_payload(None), UserRecord())
        self.assertEqual(UserRecord.from_payload({}).as_dict(), {})

    def test_as_dict_drops_unset_fields(self):
        self.assertEqual(UserRecord(email="a@b.com").as_dict(), {"email": "a@b.com"})
