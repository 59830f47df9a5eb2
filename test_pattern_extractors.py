import os
import sys
import unittest

# Add current directory to path so we can import modules
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from pattern_extractors import (
    clean_phone,
    extract_emails,
    extract_phones,
    extract_website,
    pick_phone,
)
from text_normalizer import CardLine, normalize, normalize_text, split_lines


class TestTextNormalizer(unittest.TestCase):
    def test_collapses_whitespace_and_straightens_quotes(self):
        raw = "  JOHN   DOE \n\n  CEO’s office \r\n"
        self.assertEqual(normalize_text(raw), "JOHN DOE CEO's office")

    def test_lines_keep_original_index(self):
        raw = "  JOHN   DOE \n\n  CEO’s office \r\n"
        self.assertEqual(
            split_lines(raw),
            [CardLine(0, "JOHN   DOE"), CardLine(2, "CEO’s office")],
        )

    def test_line_starts_point_into_normalized_text(self):
        card = normalize("  JOHN   DOE \n\n  CEO’s office \r\n")
        self.assertEqual(card.line_starts, [0, 9])
        self.assertEqual(card.text[card.line_starts[1]:], "CEO's office")

    def test_empty_input(self):
        for raw in ("", None, " \n\t \n"):
            card = normalize(raw)
            self.assertEqual(card.text, "")
            self.assertEqual(card.lines, [])
            self.assertEqual(card.line_starts, [])


class TestEmailExtraction(unittest.TestCase):
    def test_lower_cases_and_keeps_order(self):
        text = "Mail John.Doe@Acme.com or sales+cards@acme.co.uk"
        self.assertEqual(extract_emails(text), ["john.doe@acme.com", "sales+cards@acme.co.uk"])

    def test_requires_dotted_domain(self):
        self.assertEqual(extract_emails("root@localhost"), [])

    def test_trailing_period_is_not_part_of_domain(self):
        self.assertEqual(extract_emails("Write to jane@example.com."), ["jane@example.com"])


class TestPhoneExtraction(unittest.TestCase):
    def test_international_number_with_area_code(self):
        card = normalize("john.doe@acme.com\n+1 (555) 123-4567\nwww.acme.com")
        self.assertEqual(extract_phones(card), ["+1 (555) 123-4567"])

    def test_duplicates_removed_by_exact_text(self):
        card = normalize("555-123-4567\nTel 555-123-4567\n555.123.4567")
        self.assertEqual(extract_phones(card), ["555-123-4567", "555.123.4567"])

    def test_match_stops_at_line_break_after_full_number(self):
        card = normalize("+91 98765 43210\n42 MG Road, Bengaluru 560001")
        self.assertEqual(extract_phones(card), ["+91 98765 43210"])

    def test_number_wrapped_over_two_lines_still_matches(self):
        card = normalize("Tel +44 20\n7123 4567")
        self.assertEqual(extract_phones(card), ["+44 20 7123 4567"])

    def test_unbroken_digit_run(self):
        card = normalize("Mobile: 9876543210")
        self.assertEqual(extract_phones(card), ["9876543210"])

    def test_clean_phone(self):
        self.assertEqual(clean_phone("+1 (555) 123-4567"), "+15551234567")
        self.assertEqual(clean_phone("(456) 987-6543"), "4569876543")
        self.assertEqual(clean_phone("12-34"), "")
        self.assertEqual(clean_phone("1234 5678 9012 3456"), "")
        self.assertEqual(clean_phone(""), "")

    def test_pick_phone_skips_rejected_candidates(self):
        card = normalize("12-34\n+44 20 7123 4567")
        self.assertEqual(pick_phone(card, ["12-34", "+44 20 7123 4567"]), "+442071234567")

    def test_pick_phone_falls_back_to_line_scan(self):
        card = normalize("JOHN DOE\nCall 022 2456 7890")
        self.assertEqual(pick_phone(card, []), "02224567890")
        self.assertEqual(pick_phone(card, ["12-34"]), "02224567890")

    def test_pick_phone_nothing_found(self):
        card = normalize("JOHN DOE\njohn@acme.com")
        self.assertEqual(pick_phone(card, []), "")


class TestWebsiteExtraction(unittest.TestCase):
    def test_www_prefixed(self):
        self.assertEqual(extract_website("JOHN DOE www.Acme.com +1 555"), "www.acme.com")

    def test_protocol_and_path(self):
        self.assertEqual(
            extract_website("Visit https://www.Acme.com/about today"),
            "https://www.acme.com/about",
        )

    def test_bare_domain_with_known_tld(self):
        self.assertEqual(extract_website("INNOVATE LTD innovate.co.uk"), "innovate.co.uk")

    def test_email_domain_is_not_a_website(self):
        self.assertEqual(extract_website("john.doe@acme.com"), "")

    def test_initials_and_degrees_are_not_websites(self):
        self.assertEqual(extract_website("DR. ROBERT JOHNSON B.Tech"), "")

    def test_first_match_wins(self):
        self.assertEqual(extract_website("www.first.com www.second.com"), "www.first.com")


if __name__ == "__main__":
    unittest.main()
