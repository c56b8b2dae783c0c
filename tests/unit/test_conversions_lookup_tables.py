from django.test import SimpleTestCase, tag

from constants.country_codes import COUNTRY_CODES
from constants.region_codes import US_STATE_CODES


@tag("batch_conversions")
class LookupTableTests(SimpleTestCase):
    def test_tables_are_read_only(self):
        with self.assertRaises(TypeError):
            US_STATE_CODES["atlantis"] = "at"
        with self.assertRaises(TypeError):
            COUNTRY_CODES["atlantis"] = "at"

    def test_keys_contain_no_whitespace_or_uppercase(self):
        for table in (US_STATE_CODES, COUNTRY_CODES):
            for key in table:
                self.assertEqual(key, "".join(key.split()).lower(), key)

    def test_canonical_codes_map_to_themselves(self):
        for table in (US_STATE_CODES, COUNTRY_CODES):
            for code in set(table.values()):
                self.assertEqual(len(code), 2)
                self.assertEqual(table[code], code)

    def test_common_variants(self):
        self.assertEqual(US_STATE_CODES["districtofcolumbia"], "dc")
        self.assertEqual(US_STATE_CODES["penna"], "pa")
        self.assertEqual(COUNTRY_CODES["gbr"], "gb")
        self.assertEqual(COUNTRY_CODES["uk"], "gb")
        self.assertEqual(COUNTRY_CODES["unitedstatesofamerica"], "us")
