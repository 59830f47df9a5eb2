import os
import sys
import unittest
from unittest import mock

# Add current directory to path so we can import modules
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from config import ScannerSettings, env_flag, env_int


class TestScannerSettings(unittest.TestCase):
    def test_defaults(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual(ScannerSettings.from_env(), ScannerSettings())

    def test_reads_environment(self):
        env = {
            "CARD_NAME_SCAN_LINES": "8",
            "CARD_COMPANY_SCAN_LINES": "6",
            "CARD_ADDRESS_MIN_LENGTH": "20",
            "CARD_ADDRESS_JOIN_LINES": "2",
            "CARD_ADDRESS_JOIN_WINDOW": " 4 ",
        }
        with mock.patch.dict(os.environ, env, clear=True):
            settings = ScannerSettings.from_env()
        self.assertEqual(settings.name_scan_lines, 8)
        self.assertEqual(settings.company_scan_lines, 6)
        self.assertEqual(settings.address_min_length, 20)
        self.assertEqual(settings.address_join_lines, 2)
        self.assertEqual(settings.address_join_window, 4)

    def test_invalid_value_falls_back_with_warning(self):
        with mock.patch.dict(os.environ, {"CARD_NAME_SCAN_LINES": "ten"}, clear=True):
            with self.assertLogs("config", level="WARNING") as logs:
                settings = ScannerSettings.from_env()
        self.assertEqual(settings.name_scan_lines, 10)
        self.assertIn("CARD_NAME_SCAN_LINES", logs.output[0])

    def test_value_below_minimum_falls_back(self):
        with mock.patch.dict(os.environ, {"CARD_ADDRESS_JOIN_LINES": "1"}, clear=True):
            with self.assertLogs("config", level="WARNING"):
                self.assertEqual(env_int("CARD_ADDRESS_JOIN_LINES", 3, minimum=2), 3)

    def test_zero_allowed_where_minimum_is_zero(self):
        with mock.patch.dict(os.environ, {"CARD_ADDRESS_MIN_LENGTH": "0"}, clear=True):
            self.assertEqual(ScannerSettings.from_env().address_min_length, 0)

    def test_blank_value_uses_default(self):
        with mock.patch.dict(os.environ, {"PORT": "  "}, clear=True):
            self.assertEqual(env_int("PORT", 8000), 8000)

    def test_skip_free_mail_flag(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertFalse(ScannerSettings.from_env().skip_free_mail)
        with mock.patch.dict(os.environ, {"CARD_SKIP_FREE_MAIL": "Yes"}, clear=True):
            self.assertTrue(ScannerSettings.from_env().skip_free_mail)
        with mock.patch.dict(os.environ, {"CARD_SKIP_FREE_MAIL": "off"}, clear=True):
            self.assertFalse(env_flag("CARD_SKIP_FREE_MAIL", True))

    def test_unknown_flag_value_falls_back_with_warning(self):
        with mock.patch.dict(os.environ, {"CARD_SKIP_FREE_MAIL": "maybe"}, clear=True):
            with self.assertLogs("config", level="WARNING"):
                self.assertFalse(ScannerSettings.from_env().skip_free_mail)


if __name__ == "__main__":
    unittest.main()
