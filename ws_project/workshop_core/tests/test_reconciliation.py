from decimal import Decimal

from django.test import SimpleTestCase, TestCase

from ..models import MoneyReceipt
from ..models.money_receipt import ADVANCE_AGAINST_BILL, FINAL_PAYMENT_AGAINST_BILL
from ..services.reconciliation import amount_words, compute_settlement, find_invoice
from .helpers import make_invoice


class ComputeSettlementTests(SimpleTestCase):
    def test_advance_mode_adds_to_previous_advance(self):
        s = compute_settlement(
            net_total=Decimal("10000"),
            invoice_advance=Decimal("3000"),
            invoice_due=Decimal("7000"),
            against_bill_no_method=ADVANCE_AGAINST_BILL,
            receipt_advance=Decimal("2000"),
        )
        self.assertEqual(s.current_payment, Decimal("2000"))
        self.assertEqual(s.advance, Decimal("5000"))
        self.assertEqual(s.due, Decimal("5000"))
        self.assertEqual(s.payment_status, "advance")

    def test_final_mode_settles_everything(self):
        s = compute_settlement(
            net_total=Decimal("10000"),
            invoice_advance=Decimal("3000"),
            invoice_due=Decimal("7000"),
            against_bill_no_method=FINAL_PAYMENT_AGAINST_BILL,
        )
        self.assertEqual(s.current_payment, Decimal("10000"))
        self.assertEqual(s.advance, Decimal("10000"))
        self.assertEqual(s.due, Decimal("0.00"))
        self.assertEqual(s.payment_status, "final")

    def test_other_mode_uses_total_amount(self):
        s = compute_settlement(
            net_total=Decimal("10000"),
            invoice_advance=Decimal("3000"),
            invoice_due=Decimal("7000"),
            against_bill_no_method="",
            receipt_total_amount=Decimal("4000"),
        )
        # replaces, does not add
        self.assertEqual(s.advance, Decimal("4000"))
        self.assertEqual(s.due, Decimal("6000"))
        self.assertEqual(s.payment_status, "advance")

    def test_due_never_negative(self):
        s = compute_settlement(
            net_total=Decimal("1000"),
            invoice_advance=Decimal("0"),
            invoice_due=Decimal("1000"),
            against_bill_no_method=ADVANCE_AGAINST_BILL,
            receipt_advance=Decimal("1500"),
        )
        self.assertEqual(s.advance, Decimal("1500"))
        self.assertEqual(s.due, Decimal("0.00"))


class AmountWordsTests(SimpleTestCase):
    def test_defaults_for_missing_amounts(self):
        words = amount_words(Decimal("500"))
        self.assertEqual(words["total_amount_in_words"], "Five Hundred")
        self.assertEqual(words["advance_in_words"], "Zero")
        self.assertEqual(words["remaining_in_words"], "")


class FindInvoiceTests(TestCase):
    def test_matches_either_key_oldest_first(self):
        first = make_invoice(job_no="JOB-7", invoice_no="INV-7")
        make_invoice(job_no="JOB-7")
        self.assertEqual(find_invoice(job_no="JOB-7"), first)
        self.assertEqual(find_invoice(invoice_no="INV-7", job_no="nope"), first)

    def test_blank_keys_never_match(self):
        make_invoice(job_no=None)
        self.assertIsNone(find_invoice())
        self.assertIsNone(find_invoice(invoice_no="", job_no=""))

    def test_payment_status_helper(self):
        self.assertEqual(MoneyReceipt.payment_status_for(FINAL_PAYMENT_AGAINST_BILL), "final")
        self.assertEqual(MoneyReceipt.payment_status_for("anything"), "advance")
