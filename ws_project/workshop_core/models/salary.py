from decimal import Decimal

from django.db import models

from .mixins import TimeStampedModel


# ---------- Employee ----------
class Employee(TimeStampedModel):
    employee_code = models.CharField(max_length=32, unique=True)
    full_name = models.CharField(max_length=200)
    designation = models.CharField(max_length=120, blank=True, default="")
    phone = models.CharField(max_length=32, blank=True, default="")

    class Meta:
        ordering = ["full_name"]

    def __str__(self):
        return f"{self.full_name} ({self.employee_code})"


# ---------- Salary ----------
# One row per employee per month
class Salary(TimeStampedModel):
    employee = models.ForeignKey(
        Employee, on_delete=models.CASCADE, related_name="salaries"
    )
    # Month name, e.g. "January"
    month_of_salary = models.CharField(max_length=20)

    salary_amount = models.DecimalField(
        max_digits=14, decimal_places=2, default=Decimal("0.00")
    )
    overtime_amount = models.DecimalField(
        max_digits=14, decimal_places=2, default=Decimal("0.00")
    )
    total_payment = models.DecimalField(
        max_digits=14, decimal_places=2, default=Decimal("0.00")
    )
    paid = models.DecimalField(
        max_digits=14, decimal_places=2, default=Decimal("0.00")
    )
    due = models.DecimalField(
        max_digits=14, decimal_places=2, default=Decimal("0.00")
    )

    class Meta:
        ordering = ["-created_at"]
        constraints = [
            # Never pay the same employee twice for one month
            models.UniqueConstraint(
                fields=["employee", "month_of_salary"],
                name="uq_salary_employee_month",
            ),
        ]

    def __str__(self):
        return f"{self.employee} - {self.month_of_salary}"
