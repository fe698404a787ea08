import uuid

from django.core.exceptions import ValidationError
from django.db import models

from ..managers import RecycleBinManager

# Party kinds a receipt/vehicle/invoice can be tagged with.
USER_TYPE_CHOICES = [
    ("customer", "Customer"),
    ("company", "Company"),
    ("showRoom", "Show Room"),
]

# user_type tag -> name of the owner FK that must be populated for it
OWNER_FIELD_BY_USER_TYPE = {
    "customer": "customer",
    "company": "company",
    "showRoom": "show_room",
}


# ---------- Common base ----------
class TimeStampedModel(models.Model):
    # UUID keys keep customers, companies, showrooms and vehicles
    # in one identifier space (listings filter by "any owner id")
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


# ---------- Recycle bin ----------
class RecyclableModel(TimeStampedModel):
    # Active <-> Recycled, permanent delete removes the row
    is_recycled = models.BooleanField(default=False)
    recycled_at = models.DateTimeField(null=True, blank=True)

    objects = RecycleBinManager()

    class Meta:
        abstract = True


# ---------- Polymorphic owner ----------
class PartyOwnedMixin(models.Model):
    """
    Owner tag shared by MoneyReceipt, Vehicle and Invoice.
    Concrete models declare the three FKs (customer, company, show_room)
    so each one gets its own related_name.
    """
    user_type = models.CharField(
        max_length=20, choices=USER_TYPE_CHOICES, null=True, blank=True
    )
    # Business code of the owner (customer_code / company_code / showroom_code)
    party_code = models.CharField(max_length=64, null=True, blank=True)

    class Meta:
        abstract = True

    @staticmethod
    def single_owner_condition():
        """At most one owner FK may be set."""
        return (
            models.Q(customer__isnull=True, company__isnull=True)
            | models.Q(customer__isnull=True, show_room__isnull=True)
            | models.Q(company__isnull=True, show_room__isnull=True)
        )

    @property
    def owner(self):
        # the one populated owner record, or None
        for field in OWNER_FIELD_BY_USER_TYPE.values():
            party = getattr(self, field)
            if party is not None:
                return party
        return None

    def clear_owner(self):
        for field in OWNER_FIELD_BY_USER_TYPE.values():
            setattr(self, field, None)

    def clean_owner(self):
        populated = [
            field for field in OWNER_FIELD_BY_USER_TYPE.values()
            if getattr(self, f"{field}_id") is not None
        ]
        if len(populated) > 1:
            raise ValidationError("Only one owner can be linked.")
        if populated and OWNER_FIELD_BY_USER_TYPE.get(self.user_type) != populated[0]:
            raise ValidationError(
                f"Linked owner '{populated[0]}' does not match user_type '{self.user_type}'."
            )
