from dataclasses import dataclass
from decimal import Decimal

from django.db.models import Q

from ..models import Invoice, MoneyReceipt
from ..models.money_receipt import ADVANCE_AGAINST_BILL
from ..utils import amount_in_words, to_decimal

ZERO = Decimal("0.00")


@dataclass(frozen=True)
class Settlement:
    payment_status: str
    current_payment: Decimal
    advance: Decimal  # invoice advance after this payment
    due: Decimal      # invoice due after this payment


@dataclass(frozen=True)
class ReconciliationResult:
    invoice: Invoice
    receipt: MoneyReceipt
    settlement: Settlement


# ----------------------------
# Amount helpers
# ----------------------------
def amount_words(total_amount, advance=None, remaining=None):
    """Words for the three amount fields of a receipt."""
    return {
        "total_amount_in_words": amount_in_words(total_amount),
        "advance_in_words": amount_in_words(advance) if advance is not None else "Zero",
        "remaining_in_words": amount_in_words(remaining) if remaining is not None else "",
    }


def compute_settlement(
    *,
    net_total,
    invoice_advance,
    invoice_due,
    against_bill_no_method,
    receipt_advance=None,
    receipt_total_amount=None,
) -> Settlement:
    """
    New invoice advance/due after one receipt.

    - "Advance against bill no": the receipt's advance is added on top
      of what the invoice already has.
    - "Final payment against bill no": the receipt settles everything,
      advance becomes due + advance.
    - anything else: the receipt's total amount becomes the advance.
    """
    net_total = to_decimal(net_total, ZERO)
    prev_advance = to_decimal(invoice_advance, ZERO)
    prev_due = to_decimal(invoice_due, ZERO)

    payment_status = MoneyReceipt.payment_status_for(against_bill_no_method)
    is_advance_mode = against_bill_no_method == ADVANCE_AGAINST_BILL

    if is_advance_mode:
        current_payment = to_decimal(receipt_advance, ZERO)
    elif payment_status == "final":
        current_payment = prev_due + prev_advance
    else:
        current_payment = to_decimal(receipt_total_amount, ZERO)

    if is_advance_mode:
        updated_advance = prev_advance + current_payment
    else:
        updated_advance = current_payment

    updated_due = Invoice.compute_due(net_total, updated_advance)

    return Settlement(
        payment_status=payment_status,
        current_payment=current_payment,
        advance=updated_advance,
        due=updated_due,
    )


# ----------------------------
# Invoice reconciliation
# ----------------------------
def find_invoice(invoice_no=None, job_no=None, *, lock=True):
    """
    First invoice matching invoice_no OR job_no (oldest wins).
    Blank keys never match. Locks the row when called inside
    a unit of work so concurrent receipts serialize on it.
    """
    conditions = Q()
    if invoice_no:
        conditions |= Q(invoice_no=invoice_no)
    if job_no:
        conditions |= Q(job_no=job_no)
    if not conditions:
        return None

    qs = Invoice.objects.filter(conditions).order_by("created_at", "id")
    if lock:
        qs = qs.select_for_update()
    return qs.first()


def reconcile(receipt: MoneyReceipt, *, invoice_no=None, job_no=None):
    """
    Recompute the linked invoice's advance/due for a new receipt and link
    them together. Returns None when no invoice matches: the receipt is
    then saved without invoice linkage.

    Must run inside the receipt's unit of work; the caller saves
    the receipt afterwards (which adds it to invoice.money_receipts).
    """
    invoice = find_invoice(invoice_no, job_no)
    if invoice is None:
        return None

    settlement = compute_settlement(
        net_total=invoice.net_total,
        invoice_advance=invoice.advance,
        invoice_due=invoice.due,
        against_bill_no_method=receipt.against_bill_no_method,
        receipt_advance=receipt.advance,
        receipt_total_amount=receipt.total_amount,
    )

    invoice.advance = settlement.advance
    invoice.due = settlement.due
    invoice.save(update_fields=["advance", "due", "updated_at"])

    # receipt inherits the invoice's canonical job number
    receipt.invoice = invoice
    receipt.job_no = invoice.job_no
    receipt.payment_status = settlement.payment_status

    return ReconciliationResult(invoice=invoice, receipt=receipt, settlement=settlement)
