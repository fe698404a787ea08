import uuid
from decimal import Decimal

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


def single_owner():
    return (
        models.Q(customer__isnull=True, company__isnull=True)
        | models.Q(customer__isnull=True, show_room__isnull=True)
        | models.Q(company__isnull=True, show_room__isnull=True)
    )


USER_TYPE_CHOICES = [
    ("customer", "Customer"),
    ("company", "Company"),
    ("showRoom", "Show Room"),
]


def base_fields():
    return [
        ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
        ("created_at", models.DateTimeField(auto_now_add=True)),
        ("updated_at", models.DateTimeField(auto_now=True)),
    ]


def recycle_fields():
    return [
        ("is_recycled", models.BooleanField(default=False)),
        ("recycled_at", models.DateTimeField(blank=True, null=True)),
    ]


def owner_tag_fields():
    return [
        ("user_type", models.CharField(blank=True, choices=USER_TYPE_CHOICES, max_length=20, null=True)),
        ("party_code", models.CharField(blank=True, max_length=64, null=True)),
    ]


def amount(**kwargs):
    return models.DecimalField(decimal_places=2, max_digits=14, **kwargs)


def owner_fk(model, related_name):
    return models.ForeignKey(
        blank=True,
        null=True,
        on_delete=django.db.models.deletion.SET_NULL,
        related_name=related_name,
        to=f"workshop_core.{model}",
    )


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Customer",
            fields=base_fields() + recycle_fields() + [
                ("customer_code", models.CharField(max_length=32, unique=True)),
                ("user_type", models.CharField(choices=USER_TYPE_CHOICES, default="customer", max_length=20)),
                ("customer_name", models.CharField(max_length=200)),
                ("customer_contact", models.CharField(blank=True, default="", max_length=32)),
                ("full_customer_num", models.CharField(blank=True, default="", max_length=40)),
                ("customer_email", models.EmailField(blank=True, max_length=254, null=True)),
                ("customer_address", models.TextField(blank=True, default="")),
            ],
            options={"ordering": ["-created_at"]},
        ),
        migrations.CreateModel(
            name="Company",
            fields=base_fields() + recycle_fields() + [
                ("company_code", models.CharField(max_length=32, unique=True)),
                ("user_type", models.CharField(choices=USER_TYPE_CHOICES, default="company", max_length=20)),
                ("company_name", models.CharField(max_length=200)),
                ("company_contact", models.CharField(blank=True, default="", max_length=32)),
                ("full_company_num", models.CharField(blank=True, default="", max_length=40)),
                ("company_email", models.EmailField(blank=True, max_length=254, null=True)),
                ("company_address", models.TextField(blank=True, default="")),
                ("vehicle_username", models.CharField(blank=True, default="", max_length=200)),
            ],
            options={"verbose_name_plural": "companies", "ordering": ["-created_at"]},
        ),
        migrations.CreateModel(
            name="ShowRoom",
            fields=base_fields() + recycle_fields() + [
                ("showroom_code", models.CharField(max_length=32, unique=True)),
                ("user_type", models.CharField(choices=USER_TYPE_CHOICES, default="showRoom", max_length=20)),
                ("showroom_name", models.CharField(max_length=200)),
                ("showroom_contact", models.CharField(blank=True, default="", max_length=32)),
                ("full_showroom_num", models.CharField(blank=True, default="", max_length=40)),
                ("showroom_email", models.EmailField(blank=True, max_length=254, null=True)),
                ("showroom_address", models.TextField(blank=True, default="")),
            ],
            options={"ordering": ["-created_at"]},
        ),
        migrations.CreateModel(
            name="Employee",
            fields=base_fields() + [
                ("employee_code", models.CharField(max_length=32, unique=True)),
                ("full_name", models.CharField(max_length=200)),
                ("designation", models.CharField(blank=True, default="", max_length=120)),
                ("phone", models.CharField(blank=True, default="", max_length=32)),
            ],
            options={"ordering": ["full_name"]},
        ),
        migrations.CreateModel(
            name="Vehicle",
            fields=base_fields() + owner_tag_fields() + [
                ("chassis_no", models.CharField(max_length=64, unique=True)),
                ("car_registration_no", models.CharField(blank=True, default="", max_length=32)),
                ("full_reg_num", models.CharField(blank=True, default="", max_length=64)),
                ("vehicle_name", models.CharField(blank=True, default="", max_length=120)),
                ("vehicle_brand", models.CharField(blank=True, default="", max_length=120)),
                ("vehicle_model", models.IntegerField(blank=True, null=True)),
                ("mileage", models.IntegerField(blank=True, null=True)),
                ("customer", owner_fk("customer", "vehicles")),
                ("company", owner_fk("company", "vehicles")),
                ("show_room", owner_fk("showroom", "vehicles")),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [models.Index(fields=["party_code"], name="vehicle_party_code_idx")],
                "constraints": [
                    models.CheckConstraint(condition=single_owner(), name="vehicle_single_owner"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Invoice",
            fields=base_fields() + recycle_fields() + owner_tag_fields() + [
                ("invoice_no", models.CharField(blank=True, max_length=32, null=True)),
                ("job_no", models.CharField(blank=True, max_length=32, null=True)),
                ("date", models.CharField(blank=True, default="", max_length=32)),
                ("net_total", amount(default=Decimal("0.00"))),
                ("advance", amount(default=Decimal("0.00"))),
                ("due", amount(default=Decimal("0.00"))),
                ("discount", amount(default=Decimal("0.00"))),
                ("customer", owner_fk("customer", "invoices")),
                ("company", owner_fk("company", "invoices")),
                ("show_room", owner_fk("showroom", "invoices")),
                ("vehicle", owner_fk("vehicle", "invoices")),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["invoice_no"], name="invoice_invoice_no_idx"),
                    models.Index(fields=["job_no"], name="invoice_job_no_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(condition=models.Q(due__gte=0), name="invoice_due_non_negative"),
                    models.CheckConstraint(condition=single_owner(), name="invoice_single_owner"),
                ],
            },
        ),
        migrations.CreateModel(
            name="MoneyReceipt",
            fields=base_fields() + recycle_fields() + owner_tag_fields() + [
                ("money_receipt_id", models.CharField(max_length=16, unique=True)),
                ("thanks_from", models.CharField(blank=True, default="", max_length=200)),
                ("date", models.CharField(blank=True, default="", max_length=32)),
                ("job_no", models.CharField(blank=True, max_length=32, null=True)),
                ("payment_method", models.CharField(blank=True, default="", max_length=40)),
                ("account_number", models.CharField(blank=True, default="", max_length=64)),
                ("check_number", models.CharField(blank=True, default="", max_length=64)),
                ("bank_name", models.CharField(blank=True, default="", max_length=120)),
                ("against_bill_no_method", models.CharField(blank=True, default="", max_length=64)),
                ("payment_status", models.CharField(choices=[("advance", "Advance"), ("final", "Final")], default="advance", max_length=10)),
                ("total_amount", amount()),
                ("advance", amount(blank=True, null=True)),
                ("remaining", amount(blank=True, null=True)),
                ("total_amount_in_words", models.CharField(blank=True, default="", max_length=255)),
                ("advance_in_words", models.CharField(blank=True, default="", max_length=255)),
                ("remaining_in_words", models.CharField(blank=True, default="", max_length=255)),
                ("chassis_no", models.CharField(blank=True, default="", max_length=64)),
                ("full_reg_number", models.CharField(blank=True, default="", max_length=64)),
                ("vehicle", owner_fk("vehicle", "money_receipts")),
                ("invoice", owner_fk("invoice", "money_receipts")),
                ("customer", owner_fk("customer", "money_receipts")),
                ("company", owner_fk("company", "money_receipts")),
                ("show_room", owner_fk("showroom", "money_receipts")),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["job_no"], name="receipt_job_no_idx"),
                    models.Index(fields=["is_recycled", "created_at"], name="receipt_recycled_created_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(remaining__isnull=True) | models.Q(remaining__gte=0),
                        name="money_receipt_remaining_non_negative",
                    ),
                    models.CheckConstraint(condition=single_owner(), name="money_receipt_single_owner"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Salary",
            fields=base_fields() + [
                ("month_of_salary", models.CharField(max_length=20)),
                ("salary_amount", amount(default=Decimal("0.00"))),
                ("overtime_amount", amount(default=Decimal("0.00"))),
                ("total_payment", amount(default=Decimal("0.00"))),
                ("paid", amount(default=Decimal("0.00"))),
                ("due", amount(default=Decimal("0.00"))),
                (
                    "employee",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="salaries",
                        to="workshop_core.employee",
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("employee", "month_of_salary"), name="uq_salary_employee_month"
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="AuditLog",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("action", models.CharField(max_length=50)),
                ("object_type", models.CharField(max_length=100)),
                ("object_id", models.CharField(max_length=100)),
                ("changes", models.JSONField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "user",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "indexes": [
                    models.Index(fields=["object_type", "object_id"], name="auditlog_object_idx"),
                    models.Index(fields=["created_at"], name="auditlog_created_at_idx"),
                ],
            },
        ),
    ]
