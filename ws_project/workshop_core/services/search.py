import math
import uuid
from dataclasses import dataclass
from decimal import Decimal

from django.db.models import Q

from ..models import Company, MoneyReceipt
from ..utils import to_decimal

TEXT = "text"
NUMBER = "number"

# Traffic-light colors for a job's outstanding balance
PAID_COLOR = "#2dce89"
PARTIAL_COLOR = "#ffad46"
UNPAID_COLOR = "#f5365c"


@dataclass(frozen=True)
class SearchField:
    """One searchable column: ORM path + how the term is compared."""
    path: str
    kind: str = TEXT

    def condition(self, term, number):
        if self.kind == NUMBER:
            # numeric columns only match numeric terms, by equality
            if number is None:
                return None
            return Q((f"{self.path}__exact", number))
        # icontains is a literal substring match: the term never
        # acts as a pattern, so metacharacters need no escaping
        return Q((f"{self.path}__icontains", term))


MONEY_RECEIPT_SEARCH_FIELDS = (
    SearchField("money_receipt_id"),
    SearchField("date"),
    SearchField("job_no"),
    SearchField("thanks_from"),
    SearchField("chassis_no"),
    SearchField("full_reg_number"),
    SearchField("customer__customer_name"),
    SearchField("customer__customer_contact"),
    SearchField("customer__full_customer_num"),
    SearchField("company__company_name"),
    SearchField("company__company_contact"),
    SearchField("company__full_company_num"),
    SearchField("show_room__showroom_name"),
    SearchField("show_room__showroom_contact"),
    SearchField("show_room__full_showroom_num"),
    SearchField("vehicle__vehicle_name"),
    SearchField("vehicle__full_reg_num"),
    SearchField("vehicle__car_registration_no"),
    SearchField("total_amount", NUMBER),
    SearchField("remaining", NUMBER),
)

COMPANY_SEARCH_FIELDS = (
    SearchField("company_code"),
    SearchField("company_name"),
    SearchField("company_contact"),
    SearchField("full_company_num"),
    SearchField("company_email"),
    SearchField("company_address"),
    SearchField("vehicle_username"),
    SearchField("vehicles__vehicle_name"),
    SearchField("vehicles__full_reg_num"),
    SearchField("vehicles__car_registration_no"),
    SearchField("vehicles__vehicle_model", NUMBER),
)


# ----------------------------
# Query building
# ----------------------------
def build_search_q(search_term, fields):
    """OR of every field's condition. Empty Q when there is no term."""
    term = (search_term or "").strip()
    if not term:
        return Q()

    number = to_decimal(term)
    query = Q()
    for field in fields:
        condition = field.condition(term, number)
        if condition is not None:
            query |= condition
    return query


def owner_q(owner_id):
    """Rows whose customer, company, vehicle or show room is owner_id."""
    try:
        owner_id = uuid.UUID(str(owner_id))
    except ValueError:
        return None
    return (
        Q(customer_id=owner_id)
        | Q(company_id=owner_id)
        | Q(vehicle_id=owner_id)
        | Q(show_room_id=owner_id)
    )


def _positive_int(value):
    try:
        value = int(value)
    except (TypeError, ValueError):
        return None
    return value if value > 0 else None


def paginate(queryset, limit=None, page=None):
    """
    Slice only when both limit and page are given; otherwise the
    whole matching set is returned.
    """
    limit = _positive_int(limit)
    page = _positive_int(page)
    total = queryset.count()

    if limit and page:
        offset = (page - 1) * limit
        items = list(queryset[offset:offset + limit])
        total_pages = math.ceil(total / limit)
    else:
        items = list(queryset)
        total_pages = 1 if total else 0

    meta = {
        "total_data": total,
        "total_pages": total_pages,
        "current_page": page,
    }
    return items, meta


# ----------------------------
# Payment colors
# ----------------------------
def payment_color(remaining, total_amount):
    color = PAID_COLOR
    if remaining > 0 and remaining < total_amount:
        color = PARTIAL_COLOR
    elif remaining >= total_amount:
        color = UNPAID_COLOR
    return color


def apply_payment_colors(receipts):
    """
    Group this page's receipts by job_no, sum their totals and take the
    first receipt's remaining as the job balance; every receipt of the
    job gets the same color. Page-local: other pages are not consulted.
    """
    jobs = {}
    for receipt in receipts:
        receipt.payment_color = None
        if not receipt.job_no:
            continue
        group = jobs.setdefault(
            receipt.job_no,
            {"receipts": [], "total_amount": Decimal("0"), "remaining": Decimal("0")},
        )
        group["receipts"].append(receipt)
        group["total_amount"] += receipt.total_amount or 0
        if len(group["receipts"]) == 1:
            group["remaining"] = receipt.remaining or Decimal("0")

    for group in jobs.values():
        color = payment_color(group["remaining"], group["total_amount"])
        for receipt in group["receipts"]:
            receipt.payment_color = color
    return receipts


# ----------------------------
# Listings
# ----------------------------
def search_money_receipts(
    owner_id=None,
    limit=None,
    page=None,
    search_term=None,
    is_recycled=None,
    dues_only=False,
):
    qs = MoneyReceipt.objects.select_related(
        "vehicle", "company", "customer", "show_room", "invoice"
    )

    if owner_id:
        condition = owner_q(owner_id)
        qs = qs.filter(condition) if condition is not None else qs.none()

    qs = qs.filter(build_search_q(search_term, MONEY_RECEIPT_SEARCH_FIELDS))
    qs = qs.by_recycled_flag(is_recycled)
    if dues_only:
        qs = qs.filter(remaining__gt=0)

    qs = qs.order_by("-created_at")
    items, meta = paginate(qs, limit, page)
    apply_payment_colors(items)
    return {"items": items, "meta": meta}


def search_companies(limit=None, page=None, search_term=None, is_recycled=None):
    qs = Company.objects.prefetch_related("vehicles")

    search_q = build_search_q(search_term, COMPANY_SEARCH_FIELDS)
    if search_q:
        # vehicle joins can repeat a company
        qs = qs.filter(search_q).distinct()
    qs = qs.by_recycled_flag(is_recycled).order_by("-created_at")

    items, meta = paginate(qs, limit, page)
    meta["page_numbers"] = list(range(1, meta["total_pages"] + 1))
    return {"items": items, "meta": meta}
