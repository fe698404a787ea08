import calendar
import uuid

from django.utils import timezone

from ..exceptions import Conflict, NotFound
from ..models import Employee, Salary
from ..utils import sanitize_payload, to_decimal
from .audit_helper import log_action
from .common import get_or_not_found
from .search import paginate
from .unit_of_work import unit_of_work

SALARY_FIELDS = frozenset({
    "month_of_salary",
    "salary_amount",
    "overtime_amount",
    "total_payment",
    "paid",
    "due",
})
SALARY_AMOUNT_FIELDS = (
    "salary_amount", "overtime_amount", "total_payment", "paid", "due"
)


def current_month_name(today=None):
    today = today or timezone.localdate()
    return calendar.month_name[today.month]


def _as_uuid(value):
    try:
        return uuid.UUID(str(value))
    except ValueError:
        return None


def _clean_salary_payload(payload):
    data = sanitize_payload(payload, SALARY_FIELDS)
    for field in SALARY_AMOUNT_FIELDS:
        if field in data:
            data[field] = to_decimal(data[field], data[field])
    return data


# ----------------------------
# Create
# ----------------------------
@unit_of_work
def create_salaries(entries, *, user=None):
    """
    Record a batch of monthly salaries. Each entry names its employee by id.
    Either the whole batch is stored or none of it:
    - unknown employee -> NotFound
    - employee already paid for that month (stored, or twice in the batch)
      -> Conflict
    """
    entries = list(entries or [])
    employee_ids = {_as_uuid(entry.get("employee")) for entry in entries} - {None}

    # Bulk lookups, one query each
    employees = Employee.objects.in_bulk(employee_ids)
    taken = set(
        Salary.objects.filter(employee_id__in=list(employees))
        .values_list("employee_id", "month_of_salary")
    )

    created = []
    for entry in entries:
        employee = employees.get(_as_uuid(entry.get("employee")))
        if employee is None:
            raise NotFound(f"Employee with ID {entry.get('employee')} not found.")

        data = _clean_salary_payload(entry)
        key = (employee.pk, data.get("month_of_salary"))
        if key in taken:
            raise Conflict("Salary already added in this month.")
        taken.add(key)

        salary = Salary(employee=employee, **data)
        salary.full_clean()
        salary.save()
        created.append(salary)

        log_action(
            action="create",
            instance=salary,
            user=user,
            changes={
                "employee": employee.employee_code,
                "month_of_salary": salary.month_of_salary,
                "total_payment": str(salary.total_payment),
            },
        )
    return created


# ----------------------------
# Read
# ----------------------------
def list_salaries(employee_id=None, limit=None, page=None):
    qs = Salary.objects.select_related("employee").order_by("-created_at")
    if employee_id:
        employee_id = _as_uuid(employee_id)
        qs = qs.filter(employee_id=employee_id) if employee_id else qs.none()
    items, meta = paginate(qs, limit, page)
    return {"items": items, "meta": meta}


def get_current_month_salaries(search_term=None):
    """
    Salaries grouped by month: the current month by default,
    or the month named by search_term.
    """
    month = (search_term or "").strip() or current_month_name()
    salaries = list(
        Salary.objects.select_related("employee")
        .filter(month_of_salary=month)
        .order_by("-created_at")
    )
    if not salaries:
        raise NotFound(f"No salary data exist within {month} month")
    return [{"month": month, "salaries": salaries}]


# ----------------------------
# Update / delete
# ----------------------------
@unit_of_work
def update_salary(pk, payload, *, user=None):
    salary = get_or_not_found(Salary, pk, "No salary found", lock=True)
    data = _clean_salary_payload(payload)
    for field, value in data.items():
        setattr(salary, field, value)
    salary.full_clean()
    salary.save()
    log_action(
        action="update",
        instance=salary,
        user=user,
        changes={field: str(value) for field, value in data.items()} or None,
    )
    return salary


@unit_of_work
def delete_salary(pk, *, user=None):
    salary = get_or_not_found(Salary, pk, "No salary found", lock=True)
    salary_pk = salary.pk
    salary.delete()
    log_action(
        action="delete",
        object_type="Salary",
        object_id=salary_pk,
        user=user,
        changes={"month_of_salary": salary.month_of_salary},
    )
    return None
