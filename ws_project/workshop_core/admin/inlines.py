from django.contrib import admin

from ..models import MoneyReceipt, Vehicle

# ---------- Inline admin classes ----------


class VehicleInline(admin.TabularInline):
    """Vehicles registered under a party"""

    model = Vehicle
    fk_name = "company"
    extra = 0
    fields = ("chassis_no", "full_reg_num", "vehicle_name", "vehicle_brand", "vehicle_model")
    show_change_link = True


class MoneyReceiptInline(admin.TabularInline):
    """Receipts reconciled against an invoice, oldest first"""

    model = MoneyReceipt
    fk_name = "invoice"
    extra = 0
    fields = ("money_receipt_id", "date", "against_bill_no_method", "total_amount", "advance", "remaining")
    # receipts are recorded through the ledger service, never edited inline
    readonly_fields = fields
    show_change_link = True
    ordering = ("created_at",)

    def has_add_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
