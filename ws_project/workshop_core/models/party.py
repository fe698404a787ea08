from django.db import models

from .mixins import USER_TYPE_CHOICES, RecyclableModel


# ---------- Customer ----------
# Individual walk-in client of the workshop
class Customer(RecyclableModel):
    # Business-assigned code (e.g. "CU-0001"), what receipts refer to
    customer_code = models.CharField(max_length=32, unique=True)
    user_type = models.CharField(
        max_length=20, choices=USER_TYPE_CHOICES, default="customer"
    )

    customer_name = models.CharField(max_length=200)
    customer_contact = models.CharField(max_length=32, blank=True, default="")
    # country code + contact, stored for search
    full_customer_num = models.CharField(max_length=40, blank=True, default="")
    customer_email = models.EmailField(null=True, blank=True)
    customer_address = models.TextField(blank=True, default="")

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.customer_name} ({self.customer_code})"


# ---------- Company ----------
# Corporate account whose fleet is serviced
class Company(RecyclableModel):
    company_code = models.CharField(max_length=32, unique=True)
    user_type = models.CharField(
        max_length=20, choices=USER_TYPE_CHOICES, default="company"
    )

    company_name = models.CharField(max_length=200)
    company_contact = models.CharField(max_length=32, blank=True, default="")
    full_company_num = models.CharField(max_length=40, blank=True, default="")
    company_email = models.EmailField(null=True, blank=True)
    company_address = models.TextField(blank=True, default="")
    vehicle_username = models.CharField(max_length=200, blank=True, default="")

    class Meta:
        verbose_name_plural = "companies"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.company_name} ({self.company_code})"


# ---------- Show room ----------
# Dealer that sends vehicles in for service
class ShowRoom(RecyclableModel):
    showroom_code = models.CharField(max_length=32, unique=True)
    user_type = models.CharField(
        max_length=20, choices=USER_TYPE_CHOICES, default="showRoom"
    )

    showroom_name = models.CharField(max_length=200)
    showroom_contact = models.CharField(max_length=32, blank=True, default="")
    full_showroom_num = models.CharField(max_length=40, blank=True, default="")
    showroom_email = models.EmailField(null=True, blank=True)
    showroom_address = models.TextField(blank=True, default="")

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.showroom_name} ({self.showroom_code})"
