"""Plain dict renderings of models for the JSON views."""
from .utils import format_to_indian_currency


def _amount(value):
    return None if value is None else str(value)


def _date(value):
    return value.isoformat() if value else None


def serialize_party(party):
    if party is None:
        return None
    data = {"id": str(party.pk), "user_type": party.user_type}
    for field in party._meta.concrete_fields:
        if field.name.endswith(("_code", "_name", "_contact", "_num", "_email", "_address")):
            data[field.name] = getattr(party, field.name)
    return data


def serialize_vehicle(vehicle):
    if vehicle is None:
        return None
    return {
        "id": str(vehicle.pk),
        "chassis_no": vehicle.chassis_no,
        "car_registration_no": vehicle.car_registration_no,
        "full_reg_num": vehicle.full_reg_num,
        "vehicle_name": vehicle.vehicle_name,
        "vehicle_brand": vehicle.vehicle_brand,
        "vehicle_model": vehicle.vehicle_model,
        "mileage": vehicle.mileage,
        "user_type": vehicle.user_type,
        "party_code": vehicle.party_code,
    }


def serialize_invoice(invoice):
    if invoice is None:
        return None
    return {
        "id": str(invoice.pk),
        "invoice_no": invoice.invoice_no,
        "job_no": invoice.job_no,
        "net_total": _amount(invoice.net_total),
        "advance": _amount(invoice.advance),
        "due": _amount(invoice.due),
    }


def serialize_money_receipt(receipt):
    data = {
        "id": str(receipt.pk),
        "money_receipt_id": receipt.money_receipt_id,
        "thanks_from": receipt.thanks_from,
        "date": receipt.date,
        "job_no": receipt.job_no,
        "payment_method": receipt.payment_method,
        "account_number": receipt.account_number,
        "check_number": receipt.check_number,
        "bank_name": receipt.bank_name,
        "against_bill_no_method": receipt.against_bill_no_method,
        "payment_status": receipt.payment_status,
        "total_amount": _amount(receipt.total_amount),
        "advance": _amount(receipt.advance),
        "remaining": _amount(receipt.remaining),
        # display form, e.g. "1,50,000"
        "total_amount_display": format_to_indian_currency(receipt.total_amount),
        "total_amount_in_words": receipt.total_amount_in_words,
        "advance_in_words": receipt.advance_in_words,
        "remaining_in_words": receipt.remaining_in_words,
        "chassis_no": receipt.chassis_no,
        "full_reg_number": receipt.full_reg_number,
        "user_type": receipt.user_type,
        "party_code": receipt.party_code,
        "owner": serialize_party(receipt.owner),
        "vehicle": serialize_vehicle(receipt.vehicle),
        "invoice": serialize_invoice(receipt.invoice),
        "is_recycled": receipt.is_recycled,
        "recycled_at": _date(receipt.recycled_at),
        "created_at": _date(receipt.created_at),
    }
    # only set by listings
    if hasattr(receipt, "payment_color"):
        data["payment_color"] = receipt.payment_color
    return data


def serialize_company(company, detail=False):
    data = serialize_party(company)
    data.update({
        "vehicle_username": company.vehicle_username,
        "vehicles": [serialize_vehicle(v) for v in company.vehicles.all()],
        "is_recycled": company.is_recycled,
        "recycled_at": _date(company.recycled_at),
        "created_at": _date(company.created_at),
    })
    if detail:
        data["invoices"] = [serialize_invoice(i) for i in company.invoices.all()]
        data["money_receipts"] = [
            {
                "id": str(r.pk),
                "money_receipt_id": r.money_receipt_id,
                "total_amount": _amount(r.total_amount),
                "remaining": _amount(r.remaining),
            }
            for r in company.money_receipts.all()
        ]
    return data


def serialize_salary(salary):
    return {
        "id": str(salary.pk),
        "employee": {
            "id": str(salary.employee.pk),
            "employee_code": salary.employee.employee_code,
            "full_name": salary.employee.full_name,
        },
        "month_of_salary": salary.month_of_salary,
        "salary_amount": _amount(salary.salary_amount),
        "overtime_amount": _amount(salary.overtime_amount),
        "total_payment": _amount(salary.total_payment),
        "paid": _amount(salary.paid),
        "due": _amount(salary.due),
    }


def serialize_bulk_result(result):
    return {
        "matched_count": result.matched_count,
        "modified_count": result.modified_count,
    }
