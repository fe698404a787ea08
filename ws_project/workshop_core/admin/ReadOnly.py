from django.contrib import admin
from django.core.exceptions import PermissionDenied

"""Base admin for append-only rows (audit trail)."""
class ReadOnlyAdmin(admin.ModelAdmin):
    list_per_page = 50

    # make every model field readonly
    def get_readonly_fields(self, request, obj=None):
        return [f.name for f in self.model._meta.fields]

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False

    # The change form stays viewable; fields are readonly
    def has_change_permission(self, request, obj=None):
        return True

    def save_model(self, request, obj, form, change):
        raise PermissionDenied("Rows cannot be changed via the admin.")

    # No bulk actions (delete_selected included)
    def get_actions(self, request):
        return {}

    # Newest first when the model has a creation timestamp
    def get_ordering(self, request):
        if "created_at" in {f.name for f in self.model._meta.fields}:
            return ("-created_at",)
        return super().get_ordering(request)

    def get_list_filter(self, request):
        if self.list_filter:
            return self.list_filter
        possible = {f.name for f in self.model._meta.fields}
        return tuple(
            name for name in ("action", "object_type", "user_type") if name in possible
        )
