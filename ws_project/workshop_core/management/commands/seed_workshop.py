from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction

from workshop_core.models import Customer, Employee, Invoice, Vehicle
from workshop_core.models.money_receipt import ADVANCE_AGAINST_BILL
from workshop_core.services import create_company_with_vehicle, create_money_receipt
from workshop_core.services.numbering import (generate_customer_code,
                                              generate_employee_code)

User = get_user_model()


class Command(BaseCommand):
    help = (
        "Seed demo workshop data: a customer with a vehicle, a company with "
        "its fleet vehicle, an open invoice and one advance receipt against it."
    )

    # Define command-line arguments
    def add_arguments(self, parser):
        parser.add_argument(
            "--username", default="demo", help="Username for the demo staff user."
        )
        parser.add_argument(
            "--password", default="demo123", help="Password for the demo staff user."
        )
        parser.add_argument(
            "--job-no", default="JOB-0001", help="Job number of the demo invoice."
        )

    @transaction.atomic
    def handle(self, *args, **options):
        username = options["username"]
        job_no = options["job_no"]

        # 1. Staff user (receipts are audited against it)
        user, created = User.objects.get_or_create(
            username=username,
            defaults={"email": f"{username}@example.com", "is_staff": True},
        )
        if created:
            user.set_password(options["password"])
            user.save()
        self.stdout.write(self.style.SUCCESS(f"Staff user: {user.username}"))

        # 2. Walk-in customer with one vehicle
        customer = Customer.objects.create(
            customer_code=generate_customer_code(),
            customer_name="Demo Customer",
            customer_contact="01700000000",
            full_customer_num="+88001700000000",
        )
        vehicle = Vehicle.objects.create(
            chassis_no=f"DEMO-{customer.customer_code}",
            full_reg_num="Dhaka Metro-GA 11-2233",
            vehicle_name="Corolla",
            vehicle_brand="Toyota",
            vehicle_model=2018,
            customer=customer,
            user_type="customer",
            party_code=customer.customer_code,
        )
        self.stdout.write(self.style.SUCCESS(f"Created customer: {customer}"))

        # 3. Company with its first fleet vehicle
        company = create_company_with_vehicle(
            {"company_name": "Demo Logistics Ltd", "user_type": "company"},
            {"chassis_no": f"FLEET-{customer.customer_code}", "vehicle_name": "Hiace"},
            user=user,
        )
        self.stdout.write(self.style.SUCCESS(f"Created company: {company}"))

        # 4. Open invoice for the customer's job
        invoice = Invoice.objects.create(
            invoice_no=f"INV-{job_no}",
            job_no=job_no,
            net_total=Decimal("15000.00"),
            customer=customer,
            vehicle=vehicle,
            user_type="customer",
            party_code=customer.customer_code,
        )

        # 5. Advance receipt, reconciled against the invoice
        receipt = create_money_receipt(
            {
                "thanks_from": customer.customer_name,
                "job_no": job_no,
                "against_bill_no_method": ADVANCE_AGAINST_BILL,
                "payment_method": "Cash",
                "total_amount": "15000",
                "advance": "5000",
                "remaining": "10000",
                "chassis_no": vehicle.chassis_no,
                "user_type": "customer",
                "party_code": customer.customer_code,
            },
            user=user,
        )
        invoice.refresh_from_db()
        self.stdout.write(self.style.SUCCESS(
            f"Created receipt {receipt.money_receipt_id}: invoice {invoice.invoice_no} "
            f"advance={invoice.advance} due={invoice.due}"
        ))

        # 6. One employee for salary screens
        employee = Employee.objects.create(
            employee_code=generate_employee_code(), full_name="Demo Mechanic",
            designation="Mechanic",
        )
        self.stdout.write(self.style.SUCCESS(f"Created employee: {employee}"))
        self.stdout.write(self.style.SUCCESS("Demo workshop data seeded successfully!"))
