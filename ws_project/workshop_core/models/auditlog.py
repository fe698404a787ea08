from django.conf import settings  # To access global project settings
from django.db import models


# ---------- Audit / Event log ----------
class AuditLog(
    models.Model
):  # Traceability for receipts, invoices, companies and salaries
    # Which user performed the action
    # (Nullable in case the action was automated, e.g. seed command)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        null=True, blank=True, on_delete=models.SET_NULL
    )
    # Common choices: create, update, delete, recycle, restore, reconcile
    action = models.CharField(max_length=50)
    # (e.g., "MoneyReceipt", "Invoice", "Company")
    object_type = models.CharField(max_length=100)
    object_id = models.CharField(max_length=100)
    # What changed, in JSON format
    changes = models.JSONField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [
            models.Index(fields=["object_type", "object_id"], name="auditlog_object_idx"),
            models.Index(fields=["created_at"], name="auditlog_created_at_idx"),
        ]

    def __str__(self):
        time = self.created_at
        action = self.action
        objType = self.object_type
        objId = self.object_id
        return f"[{time:%Y-%m-%d %H:%M}] {action} {objType}({objId})"
