from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models

from .mixins import PartyOwnedMixin, RecyclableModel
from .party import Company, Customer, ShowRoom
from .vehicle import Vehicle


class Invoice(RecyclableModel, PartyOwnedMixin):  # Work-order invoice

    # human-readable identifiers; receipts find their invoice by either one
    invoice_no = models.CharField(max_length=32, null=True, blank=True)
    # Job number correlates receipts, invoices and job cards
    job_no = models.CharField(max_length=32, null=True, blank=True)
    date = models.CharField(max_length=32, blank=True, default="")

    # Sum payable after discount/vat
    net_total = models.DecimalField(
        max_digits=14, decimal_places=2, default=Decimal("0.00")
    )
    # Paid so far
    advance = models.DecimalField(
        max_digits=14, decimal_places=2, default=Decimal("0.00")
    )
    # max(net_total - advance, 0)
    due = models.DecimalField(
        max_digits=14, decimal_places=2, default=Decimal("0.00")
    )
    discount = models.DecimalField(
        max_digits=14, decimal_places=2, default=Decimal("0.00")
    )

    customer = models.ForeignKey(
        Customer, null=True, blank=True,
        on_delete=models.SET_NULL, related_name="invoices",
    )
    company = models.ForeignKey(
        Company, null=True, blank=True,
        on_delete=models.SET_NULL, related_name="invoices",
    )
    show_room = models.ForeignKey(
        ShowRoom, null=True, blank=True,
        on_delete=models.SET_NULL, related_name="invoices",
    )
    vehicle = models.ForeignKey(
        Vehicle, null=True, blank=True,
        on_delete=models.SET_NULL, related_name="invoices",
    )

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["invoice_no"], name="invoice_invoice_no_idx"),
            models.Index(fields=["job_no"], name="invoice_job_no_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(due__gte=0),
                name="invoice_due_non_negative",
            ),
            models.CheckConstraint(
                condition=PartyOwnedMixin.single_owner_condition(),
                name="invoice_single_owner",
            ),
        ]

    def __str__(self):
        return f"Inv {self.invoice_no or self.job_no or self.pk}"

    @staticmethod
    def compute_due(net_total, advance):
        """Outstanding balance, never negative."""
        return max((net_total or Decimal("0")) - (advance or Decimal("0")), Decimal("0.00"))

    def clean(self):
        self.clean_owner()
        if self.advance is not None and self.advance < 0:
            raise ValidationError("Invoice advance cannot be negative.")
        # due is derived, never entered
        self.due = self.compute_due(self.net_total, self.advance)
        return super().clean()
