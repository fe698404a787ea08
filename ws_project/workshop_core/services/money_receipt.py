import logging

from django.conf import settings

from ..exceptions import NotFound
from ..models import MoneyReceipt
from ..tasks import archive_money_receipt_pdf
from ..utils import sanitize_payload, to_decimal
from . import recycle_bin
from .audit_helper import log_action
from .common import get_or_not_found
from .numbering import generate_money_receipt_id, save_with_code
from .party import attach, detach, link_vehicle
from .reconciliation import amount_words, reconcile
from .search import search_money_receipts
from .unit_of_work import UnitOfWork, unit_of_work

logger = logging.getLogger(__name__)

# Columns a create/update payload may set directly
RECEIPT_FIELDS = frozenset({
    "thanks_from",
    "date",
    "job_no",
    "payment_method",
    "account_number",
    "check_number",
    "bank_name",
    "against_bill_no_method",
    "total_amount",
    "advance",
    "remaining",
    "chassis_no",
    "full_reg_number",
    "user_type",
    "party_code",
})
AMOUNT_FIELDS = ("total_amount", "advance", "remaining")
# Older client field names: "Id" is the party code, "invoice" the invoice number
PAYLOAD_ALIASES = {"Id": "party_code", "invoice": "invoice_no"}


def _apply_aliases(payload):
    if not isinstance(payload, dict):
        return payload
    payload = dict(payload)
    for alias, field in PAYLOAD_ALIASES.items():
        if alias in payload:
            value = payload.pop(alias)
            if payload.get(field) in (None, ""):
                payload[field] = value
    return payload


def _clean_receipt_payload(payload, extra_fields=()):
    data = sanitize_payload(_apply_aliases(payload), RECEIPT_FIELDS | set(extra_fields))
    for field in AMOUNT_FIELDS:
        if field in data:
            # keep unparsable values as-is so model validation reports them
            data[field] = to_decimal(data[field], data[field])
    return data


# ----------------------------
# Create
# ----------------------------
@unit_of_work
def create_money_receipt(payload, *, user=None):
    """
    Record a payment event.
    Order: persist draft -> attach owner/vehicle -> reconcile invoice
    -> persist final receipt. Any failure rolls all of it back.
    """
    data = _clean_receipt_payload(payload, extra_fields=("invoice_no",))
    invoice_no = data.pop("invoice_no", None)

    receipt = MoneyReceipt(
        payment_status=MoneyReceipt.payment_status_for(
            data.get("against_bill_no_method")
        ),
        **amount_words(
            data.get("total_amount"), data.get("advance"), data.get("remaining")
        ),
        **data,
    )
    save_with_code(receipt, "money_receipt_id", generate_money_receipt_id)  # draft

    attach(receipt.user_type, receipt.party_code, receipt)
    link_vehicle(receipt, receipt.chassis_no, data.get("full_reg_number"))

    result = reconcile(receipt, invoice_no=invoice_no, job_no=receipt.job_no)

    receipt.save()  # final

    changes = {"total_amount": str(receipt.total_amount)}
    if result is not None:
        changes.update({
            "invoice_id": str(result.invoice.pk),
            "invoice_advance": str(result.settlement.advance),
            "invoice_due": str(result.settlement.due),
        })
        log_action(
            action="reconcile",
            instance=result.invoice,
            user=user,
            changes={
                "money_receipt_id": receipt.money_receipt_id,
                "current_payment": str(result.settlement.current_payment),
                "advance": str(result.settlement.advance),
                "due": str(result.settlement.due),
            },
        )
    log_action(action="create", instance=receipt, user=user, changes=changes)

    if getattr(settings, "WORKSHOP_ARCHIVE_RECEIPT_PDF", False):
        receipt_pk = receipt.pk
        # only once the receipt is committed
        UnitOfWork().on_commit(lambda: archive_money_receipt_pdf.delay(receipt_pk))
    return receipt


# ----------------------------
# Read
# ----------------------------
def get_money_receipt(pk):
    return get_or_not_found(
        MoneyReceipt,
        pk,
        "No money receipt found",
        queryset=MoneyReceipt.objects.select_related(
            "vehicle", "invoice", "customer", "company", "show_room"
        ),
    )


def list_money_receipts(
    owner_id=None, limit=None, page=None, search_term=None, is_recycled=None
):
    return search_money_receipts(
        owner_id=owner_id,
        limit=limit,
        page=page,
        search_term=search_term,
        is_recycled=is_recycled,
    )


def list_due_money_receipts(
    owner_id=None, limit=None, page=None, search_term=None, is_recycled=None
):
    """Same as list_money_receipts, restricted to remaining > 0."""
    return search_money_receipts(
        owner_id=owner_id,
        limit=limit,
        page=page,
        search_term=search_term,
        is_recycled=is_recycled,
        dues_only=True,
    )


# ----------------------------
# Update
# ----------------------------
@unit_of_work
def update_money_receipt(pk, payload, *, user=None):
    """
    Correct amounts or re-link owner/vehicle.
    The linked invoice is NOT reconciled again.
    """
    data = _clean_receipt_payload(payload)
    receipt = get_or_not_found(
        MoneyReceipt, pk, "Money receipt not found.", lock=True
    )
    before = {field: getattr(receipt, field) for field in AMOUNT_FIELDS}

    for field, value in data.items():
        setattr(receipt, field, value)

    receipt.payment_status = MoneyReceipt.payment_status_for(
        receipt.against_bill_no_method
    )
    for field, value in amount_words(
        receipt.total_amount, receipt.advance, receipt.remaining
    ).items():
        setattr(receipt, field, value)

    # Re-resolve the owner only when the payload names one
    if "user_type" in data or "party_code" in data:
        attach(receipt.user_type, receipt.party_code, receipt)
    if data.get("chassis_no"):
        link_vehicle(receipt, receipt.chassis_no, data.get("full_reg_number"))

    receipt.save()

    changed = {
        field: str(getattr(receipt, field))
        for field in AMOUNT_FIELDS
        if getattr(receipt, field) != before[field]
    }
    if changed and receipt.invoice_id:
        logger.warning(
            "Money receipt %s amounts changed (%s); invoice %s was not reconciled",
            receipt.money_receipt_id, ", ".join(sorted(changed)), receipt.invoice_id,
        )
    log_action(action="update", instance=receipt, user=user, changes=changed or None)
    return receipt


# ----------------------------
# Delete
# ----------------------------
@unit_of_work
def permanently_delete_money_receipt(pk, *, user=None):
    """
    Detach from the owner and remove the row. The invoice and the party
    stay as they are apart from losing this receipt.
    """
    receipt = get_or_not_found(
        MoneyReceipt, pk, "Money receipt not available.", lock=True
    )
    detach(receipt.user_type, receipt.party_code, receipt, save=False)

    receipt_pk = receipt.pk
    deleted, _ = MoneyReceipt.objects.filter(pk=receipt_pk).delete()
    if not deleted:
        raise NotFound("No money receipt available")

    log_action(
        action="delete",
        object_type="MoneyReceipt",
        object_id=receipt_pk,
        user=user,
        changes={"money_receipt_id": receipt.money_receipt_id},
    )
    return None


# "delete" and "permanently delete" are the same operation;
# the recycle bin is the non-destructive path
delete_money_receipt = permanently_delete_money_receipt


# ----------------------------
# Recycle bin
# ----------------------------
def move_money_receipt_to_recycle_bin(pk, *, user=None):
    return recycle_bin.move_to_recycle_bin(
        MoneyReceipt, pk, not_found_message="Money receipt not available.", user=user
    )


def restore_money_receipt_from_recycle_bin(pk, *, user=None):
    return recycle_bin.restore_from_recycle_bin(
        MoneyReceipt, pk, not_found_message="Money receipt not available.", user=user
    )


def move_all_money_receipts_to_recycle_bin(*, user=None):
    return recycle_bin.move_all_to_recycle_bin(MoneyReceipt, user=user)


def restore_all_money_receipts_from_recycle_bin(*, user=None):
    return recycle_bin.restore_all_from_recycle_bin(MoneyReceipt, user=user)
