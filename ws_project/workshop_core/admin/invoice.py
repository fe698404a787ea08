from django.contrib import admin

from ..models import Invoice, MoneyReceipt

from .inlines import MoneyReceiptInline
from .mixins import RecycleBinAdminMixin


# Register `Invoice` model
@admin.register(Invoice)
class InvoiceAdmin(RecycleBinAdminMixin, admin.ModelAdmin):
    list_display = ("invoice_no", "job_no", "date", "net_total", "advance", "due", "user_type", "party_code")
    search_fields = ("invoice_no", "job_no", "party_code")
    # kept in step by the ledger reconciler
    readonly_fields = ("due",)
    raw_id_fields = ("customer", "company", "show_room", "vehicle")
    inlines = [MoneyReceiptInline]


# Register `MoneyReceipt` model
@admin.register(MoneyReceipt)
class MoneyReceiptAdmin(RecycleBinAdminMixin, admin.ModelAdmin):
    list_display = (
        "money_receipt_id",
        "date",
        "job_no",
        "thanks_from",
        "payment_status",
        "total_amount",
        "remaining",
    )
    list_filter = ("payment_status", "payment_method")
    search_fields = ("money_receipt_id", "job_no", "thanks_from", "chassis_no", "full_reg_number")
    readonly_fields = (
        "money_receipt_id",
        "payment_status",
        "total_amount_in_words",
        "advance_in_words",
        "remaining_in_words",
        "invoice",
    )
    raw_id_fields = ("customer", "company", "show_room", "vehicle")

    # Fetch related rows in one SQL join
    def get_queryset(self, request):
        return super().get_queryset(request).select_related(
            "invoice", "vehicle", "customer", "company", "show_room"
        )

    # Receipts are created by the ledger service, which reconciles the invoice
    def has_add_permission(self, request):
        return False
