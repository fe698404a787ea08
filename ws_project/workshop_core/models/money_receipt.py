from django.core.exceptions import ValidationError
from django.db import models

from .invoice import Invoice
from .mixins import PartyOwnedMixin, RecyclableModel
from .party import Company, Customer, ShowRoom
from .vehicle import Vehicle

# Payment-mode selector sent by the receipt form
ADVANCE_AGAINST_BILL = "Advance against bill no"
FINAL_PAYMENT_AGAINST_BILL = "Final payment against bill no"

AGAINST_BILL_NO_METHOD_CHOICES = [
    (ADVANCE_AGAINST_BILL, ADVANCE_AGAINST_BILL),
    (FINAL_PAYMENT_AGAINST_BILL, FINAL_PAYMENT_AGAINST_BILL),
]

PAYMENT_STATUS_CHOICES = [
    ("advance", "Advance"),
    ("final", "Final"),
]


# ---------- Money receipt ----------
# One row per payment event, the central ledger entry
class MoneyReceipt(RecyclableModel, PartyOwnedMixin):
    # Sequential display number ("0001", "0002", ...)
    money_receipt_id = models.CharField(max_length=16, unique=True)

    thanks_from = models.CharField(max_length=200, blank=True, default="")
    date = models.CharField(max_length=32, blank=True, default="")
    job_no = models.CharField(max_length=32, null=True, blank=True)

    # How the money arrived
    payment_method = models.CharField(max_length=40, blank=True, default="")
    account_number = models.CharField(max_length=64, blank=True, default="")
    check_number = models.CharField(max_length=64, blank=True, default="")
    bank_name = models.CharField(max_length=120, blank=True, default="")

    # Which bill this money settles and how. Free text: only the two
    # AGAINST_BILL_NO_METHOD_CHOICES values change reconciliation
    against_bill_no_method = models.CharField(max_length=64, blank=True, default="")
    # derived from against_bill_no_method on every save (see signals)
    payment_status = models.CharField(
        max_length=10, choices=PAYMENT_STATUS_CHOICES, default="advance"
    )

    total_amount = models.DecimalField(max_digits=14, decimal_places=2)
    advance = models.DecimalField(
        max_digits=14, decimal_places=2, null=True, blank=True
    )
    remaining = models.DecimalField(
        max_digits=14, decimal_places=2, null=True, blank=True
    )
    total_amount_in_words = models.CharField(max_length=255, blank=True, default="")
    advance_in_words = models.CharField(max_length=255, blank=True, default="")
    remaining_in_words = models.CharField(max_length=255, blank=True, default="")

    # Vehicle is matched by chassis number; registration is denormalized
    chassis_no = models.CharField(max_length=64, blank=True, default="")
    full_reg_number = models.CharField(max_length=64, blank=True, default="")
    vehicle = models.ForeignKey(
        Vehicle, null=True, blank=True,
        on_delete=models.SET_NULL, related_name="money_receipts",
    )

    # Deleting a receipt never touches its invoice; deleting an invoice
    # leaves the receipt unlinked
    invoice = models.ForeignKey(
        Invoice, null=True, blank=True,
        on_delete=models.SET_NULL, related_name="money_receipts",
    )

    # Exactly one is populated when linked, matching user_type.
    # The reverse relations are the parties' receipt lists.
    customer = models.ForeignKey(
        Customer, null=True, blank=True,
        on_delete=models.SET_NULL, related_name="money_receipts",
    )
    company = models.ForeignKey(
        Company, null=True, blank=True,
        on_delete=models.SET_NULL, related_name="money_receipts",
    )
    show_room = models.ForeignKey(
        ShowRoom, null=True, blank=True,
        on_delete=models.SET_NULL, related_name="money_receipts",
    )

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["job_no"], name="receipt_job_no_idx"),
            models.Index(fields=["is_recycled", "created_at"], name="receipt_recycled_created_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(remaining__isnull=True) | models.Q(remaining__gte=0),
                name="money_receipt_remaining_non_negative",
            ),
            models.CheckConstraint(
                condition=PartyOwnedMixin.single_owner_condition(),
                name="money_receipt_single_owner",
            ),
        ]

    def __str__(self):
        return f"MR {self.money_receipt_id} - {self.total_amount}"

    @staticmethod
    def payment_status_for(against_bill_no_method):
        if against_bill_no_method == FINAL_PAYMENT_AGAINST_BILL:
            return "final"
        return "advance"

    def clean(self):
        if self.remaining is not None and self.remaining < 0:
            raise ValidationError("Remaining amount cannot be negative.")
        if self.total_amount is not None and self.total_amount < 0:
            raise ValidationError("Total amount cannot be negative.")
        self.clean_owner()
        return super().clean()

    def save(self, *args, **kwargs):
        self.full_clean()  # run validations before saving
        return super().save(*args, **kwargs)
