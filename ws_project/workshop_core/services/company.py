import logging

from ..exceptions import Conflict, NotFound
from ..models import Company, Vehicle
from ..utils import sanitize_payload
from . import recycle_bin
from .audit_helper import log_action
from .common import get_or_not_found
from .numbering import generate_company_code, save_with_code
from .search import search_companies
from .unit_of_work import unit_of_work

logger = logging.getLogger(__name__)

COMPANY_FIELDS = frozenset({
    "user_type",
    "company_name",
    "company_contact",
    "full_company_num",
    "company_email",
    "company_address",
    "vehicle_username",
})
VEHICLE_FIELDS = frozenset({
    "chassis_no",
    "car_registration_no",
    "full_reg_num",
    "vehicle_name",
    "vehicle_brand",
    "vehicle_model",
    "mileage",
})


def _new_company_vehicle(company, data):
    """Vehicle owned by company, keyed by its company code."""
    vehicle = Vehicle(
        **data,
        company=company,
        party_code=company.company_code,
        user_type=company.user_type,
    )
    vehicle.full_clean()
    vehicle.save()
    return vehicle


# ----------------------------
# Create
# ----------------------------
@unit_of_work
def create_company_with_vehicle(company, vehicle, *, user=None):
    """
    Create a company together with its first vehicle.
    A company payload that is not of type "company", or comes without
    a vehicle, is rejected and nothing is stored.
    """
    company_data = sanitize_payload(company, COMPANY_FIELDS)
    vehicle_data = sanitize_payload(vehicle, VEHICLE_FIELDS)

    if company_data.get("user_type", "company") != "company" or not vehicle_data:
        raise Conflict("Something went wrong")

    obj = Company(**company_data)
    obj.full_clean(exclude=["company_code"])
    save_with_code(obj, "company_code", generate_company_code)

    new_vehicle = _new_company_vehicle(obj, vehicle_data)

    log_action(
        action="create",
        instance=obj,
        user=user,
        changes={"company_code": obj.company_code, "chassis_no": new_vehicle.chassis_no},
    )
    return obj


# ----------------------------
# Read
# ----------------------------
def list_companies(limit=None, page=None, search_term=None, is_recycled=None):
    return search_companies(
        limit=limit, page=page, search_term=search_term, is_recycled=is_recycled
    )


def get_company(pk):
    """Company with its vehicles, invoices and money receipts loaded."""
    return get_or_not_found(
        Company,
        pk,
        "No company found",
        queryset=Company.objects.prefetch_related(
            "vehicles",
            "invoices__vehicle",
            "money_receipts",
        ),
    )


# ----------------------------
# Update
# ----------------------------
@unit_of_work
def update_company(pk, company, vehicle=None, *, user=None):
    """
    Partial update of the company. When the vehicle payload carries a
    chassis number the vehicle is updated in place, or created for
    this company when no vehicle has that chassis yet.
    """
    company_data = sanitize_payload(company, COMPANY_FIELDS)
    vehicle_data = sanitize_payload(vehicle, VEHICLE_FIELDS)

    obj = get_or_not_found(Company, pk, "No company available", lock=True)
    for field, value in company_data.items():
        setattr(obj, field, value)
    obj.full_clean()
    obj.save()

    changes = {field: str(value) for field, value in company_data.items()}

    chassis_no = vehicle_data.get("chassis_no")
    if chassis_no:
        existing = (
            Vehicle.objects.select_for_update().filter(chassis_no=chassis_no).first()
        )
        if existing is not None:
            for field, value in vehicle_data.items():
                setattr(existing, field, value)
            existing.full_clean()
            existing.save()
            changes["vehicle_updated"] = chassis_no
        else:
            _new_company_vehicle(obj, vehicle_data)
            changes["vehicle_added"] = chassis_no

    log_action(action="update", instance=obj, user=user, changes=changes or None)
    return obj


# ----------------------------
# Delete
# ----------------------------
@unit_of_work
def permanently_delete_company(pk, *, user=None):
    """Remove the company and every vehicle registered under its code."""
    obj = get_or_not_found(Company, pk, "No company exist.", lock=True)

    vehicles_deleted, _ = Vehicle.objects.filter(party_code=obj.company_code).delete()

    company_pk = obj.pk
    deleted, _ = Company.objects.filter(pk=company_pk).delete()
    if not deleted:
        raise NotFound("No company available")

    logger.info(
        "Deleted company %s with %s vehicles", obj.company_code, vehicles_deleted
    )
    log_action(
        action="delete",
        object_type="Company",
        object_id=company_pk,
        user=user,
        changes={"company_code": obj.company_code, "vehicles_deleted": vehicles_deleted},
    )
    return None


delete_company = permanently_delete_company


# ----------------------------
# Recycle bin
# ----------------------------
def move_company_to_recycle_bin(pk, *, user=None):
    return recycle_bin.move_to_recycle_bin(
        Company, pk, not_found_message="No company exist.", user=user
    )


def restore_company_from_recycle_bin(pk, *, user=None):
    return recycle_bin.restore_from_recycle_bin(
        Company, pk, not_found_message="No company exist.", user=user
    )


def move_all_companies_to_recycle_bin(*, user=None):
    return recycle_bin.move_all_to_recycle_bin(Company, user=user)


def restore_all_companies_from_recycle_bin(*, user=None):
    return recycle_bin.restore_all_from_recycle_bin(Company, user=user)
