from django.db import models

from .mixins import PartyOwnedMixin, TimeStampedModel
from .party import Company, Customer, ShowRoom


# ---------- Vehicle ----------
# Belongs to at most one party, identified by its chassis number
class Vehicle(TimeStampedModel, PartyOwnedMixin):
    chassis_no = models.CharField(max_length=64, unique=True)
    car_registration_no = models.CharField(max_length=32, blank=True, default="")
    # registration prefix + number, e.g. "Dhaka Metro-GA 11-2233"
    full_reg_num = models.CharField(max_length=64, blank=True, default="")
    vehicle_name = models.CharField(max_length=120, blank=True, default="")
    vehicle_brand = models.CharField(max_length=120, blank=True, default="")
    # model year; searched by exact number
    vehicle_model = models.IntegerField(null=True, blank=True)
    mileage = models.IntegerField(null=True, blank=True)

    # The service layer removes a company's vehicles explicitly
    # (by party_code), so owner FKs only go NULL here
    customer = models.ForeignKey(
        Customer, null=True, blank=True,
        on_delete=models.SET_NULL, related_name="vehicles",
    )
    company = models.ForeignKey(
        Company, null=True, blank=True,
        on_delete=models.SET_NULL, related_name="vehicles",
    )
    show_room = models.ForeignKey(
        ShowRoom, null=True, blank=True,
        on_delete=models.SET_NULL, related_name="vehicles",
    )

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["party_code"], name="vehicle_party_code_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=PartyOwnedMixin.single_owner_condition(),
                name="vehicle_single_owner",
            ),
        ]

    def __str__(self):
        return f"{self.vehicle_name or 'Vehicle'} [{self.chassis_no}]"

    def clean(self):
        self.clean_owner()
        return super().clean()
