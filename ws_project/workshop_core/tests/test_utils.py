from decimal import Decimal

from django.core.exceptions import ValidationError
from django.test import SimpleTestCase

from ..utils import amount_in_words, format_to_indian_currency, sanitize_payload, to_decimal


class AmountInWordsTests(SimpleTestCase):
    def test_lakh_and_thousand(self):
        self.assertEqual(amount_in_words(150000), "One Lakh Fifty Thousand")

    def test_crore(self):
        self.assertEqual(
            amount_in_words(12345678),
            "One Crore Twenty Three Lakh Forty Five Thousand Six Hundred Seventy Eight",
        )

    def test_paisa(self):
        self.assertEqual(amount_in_words("12.50"), "Twelve and Fifty Paisa")

    def test_zero_and_garbage(self):
        self.assertEqual(amount_in_words(0), "Zero")
        self.assertEqual(amount_in_words("abc"), "Zero")

    def test_deterministic_for_equal_values(self):
        self.assertEqual(amount_in_words(Decimal("7000.00")), amount_in_words(7000))


class IndianCurrencyTests(SimpleTestCase):
    def test_grouping(self):
        self.assertEqual(format_to_indian_currency(1234567.5), "12,34,567.50")
        self.assertEqual(format_to_indian_currency(1000), "1,000")
        self.assertEqual(format_to_indian_currency(100), "100")

    def test_negative(self):
        self.assertEqual(format_to_indian_currency(-1234567), "-12,34,567")


class PayloadTests(SimpleTestCase):
    def test_blank_and_none_dropped_strings_trimmed(self):
        clean = sanitize_payload({"a": "  x ", "b": "", "c": None, "d": 0})
        self.assertEqual(clean, {"a": "x", "d": 0})

    def test_allowed_fields(self):
        clean = sanitize_payload({"a": 1, "evil": 2}, allowed_fields={"a"})
        self.assertEqual(clean, {"a": 1})

    def test_to_decimal(self):
        self.assertEqual(to_decimal("100"), Decimal("100"))
        self.assertIsNone(to_decimal("1x"))
        self.assertIsNone(to_decimal("NaN"))
        self.assertEqual(to_decimal("", Decimal("0")), Decimal("0"))

    def test_non_mapping_payload_rejected(self):
        with self.assertRaises(ValidationError):
            sanitize_payload([1, 2])
        with self.assertRaises(ValidationError):
            sanitize_payload("company")
        self.assertEqual(sanitize_payload(None), {})
