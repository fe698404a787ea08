from django.contrib import admin, messages

from ..exceptions import WorkshopError
from ..services import recycle_bin

# ---------- Admin actions ----------


""" Move each selected row to the recycle bin through the service,
    so every row gets its own audit entry """


@admin.action(description="Move selected to recycle bin")
def move_selected_to_recycle_bin(modeladmin, request, queryset):
    moved = 0
    for obj in queryset.filter(is_recycled=False):
        try:
            recycle_bin.move_to_recycle_bin(
                modeladmin.model, obj.pk, user=request.user
            )
            moved += 1
        except WorkshopError as e:
            modeladmin.message_user(
                request, f"{obj}: {e.message}", level=messages.ERROR)
    modeladmin.message_user(
        request, f"Moved {moved} row(s) to the recycle bin.", level=messages.SUCCESS)


""" Restore selected rows; rows not in the bin are skipped """


@admin.action(description="Restore selected from recycle bin")
def restore_selected_from_recycle_bin(modeladmin, request, queryset):
    restored = 0
    for obj in queryset.filter(is_recycled=True):
        try:
            recycle_bin.restore_from_recycle_bin(
                modeladmin.model, obj.pk, user=request.user
            )
            restored += 1
        except WorkshopError as e:
            modeladmin.message_user(
                request, f"{obj}: {e.message}", level=messages.ERROR)
    modeladmin.message_user(
        request, f"Restored {restored} row(s).", level=messages.SUCCESS)
