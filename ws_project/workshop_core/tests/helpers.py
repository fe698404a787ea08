from decimal import Decimal

from ..models import Company, Customer, Invoice, ShowRoom, Vehicle


def make_customer(code="CU-0001", name="Rahim Uddin", **extra):
    return Customer.objects.create(customer_code=code, customer_name=name, **extra)


def make_company(code="C-0001", name="Acme Transport", **extra):
    return Company.objects.create(company_code=code, company_name=name, **extra)


def make_showroom(code="SR-0001", name="City Motors", **extra):
    return ShowRoom.objects.create(showroom_code=code, showroom_name=name, **extra)


def make_vehicle(chassis_no="CH-1", owner=None, **extra):
    fields = {"chassis_no": chassis_no, "full_reg_num": f"REG-{chassis_no}"}
    if isinstance(owner, Customer):
        fields.update(customer=owner, user_type="customer", party_code=owner.customer_code)
    elif isinstance(owner, Company):
        fields.update(company=owner, user_type="company", party_code=owner.company_code)
    elif isinstance(owner, ShowRoom):
        fields.update(show_room=owner, user_type="showRoom", party_code=owner.showroom_code)
    fields.update(extra)
    return Vehicle.objects.create(**fields)


def make_invoice(job_no="JOB-1", net_total="10000", advance="0", invoice_no=None, **extra):
    return Invoice.objects.create(
        invoice_no=invoice_no,
        job_no=job_no,
        net_total=Decimal(net_total),
        advance=Decimal(advance),
        **extra,
    )
