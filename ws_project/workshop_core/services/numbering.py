import logging
import re

from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction

from ..models import Company, Customer, Employee, MoneyReceipt, ShowRoom

logger = logging.getLogger(__name__)

_TRAILING_DIGITS = re.compile(r"(\d+)$")
MAX_CODE_ATTEMPTS = 3


def next_code(model, field, prefix="", width=4):
    """
    Next sequential business code for model.field, e.g. "C-0007".
    Based on the most recently created row carrying the prefix.
    """
    last = (
        model.objects.filter(**{f"{field}__startswith": prefix})
        .order_by("-created_at")
        .values_list(field, flat=True)
        .first()
    )
    number = 0
    if last:
        match = _TRAILING_DIGITS.search(last)
        if match:
            number = int(match.group(1))
    return f"{prefix}{number + 1:0{width}d}"


def _code_taken(error, field):
    # a unique-check failure on the code column and nothing else
    return set(getattr(error, "error_dict", {})) == {field}


def save_with_code(obj, field, generate):
    """
    Give obj a fresh code from generate() and insert it.
    Two concurrent creates can read the same last code; the loser
    gets a new code and tries again, up to MAX_CODE_ATTEMPTS times.
    """
    for attempt in range(1, MAX_CODE_ATTEMPTS + 1):
        setattr(obj, field, generate())
        try:
            with transaction.atomic():
                obj.save()
            return obj
        except (IntegrityError, ValidationError) as e:
            if isinstance(e, ValidationError) and not _code_taken(e, field):
                raise
            if attempt == MAX_CODE_ATTEMPTS:
                raise
            logger.warning(
                "%s %s %s already taken, retrying (%s/%s)",
                obj.__class__.__name__, field, getattr(obj, field),
                attempt, MAX_CODE_ATTEMPTS,
            )


def generate_money_receipt_id():
    return next_code(MoneyReceipt, "money_receipt_id")


def generate_company_code():
    return next_code(Company, "company_code", prefix="C-")


def generate_customer_code():
    return next_code(Customer, "customer_code", prefix="CU-")


def generate_showroom_code():
    return next_code(ShowRoom, "showroom_code", prefix="SR-")


def generate_employee_code():
    return next_code(Employee, "employee_code", prefix="E-")
