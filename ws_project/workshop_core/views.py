import functools
import json

from django.core.exceptions import ValidationError
from django.http import HttpResponse, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from . import services
from .exceptions import WorkshopError
from .serializers import (serialize_bulk_result, serialize_company,
                          serialize_money_receipt, serialize_salary)


def _error(message, status):
    return JsonResponse({"success": False, "message": message}, status=status)


def json_view(view):
    """
    Map service errors to JSON responses:
    WorkshopError -> its status_code, ValidationError -> 400.
    """
    @functools.wraps(view)
    def wrapper(request, *args, **kwargs):
        try:
            return view(request, *args, **kwargs)
        except WorkshopError as e:
            return _error(e.message, e.status_code)
        except ValidationError as e:
            return _error("; ".join(e.messages), 400)
    return csrf_exempt(wrapper)


def _body(request, expect_object=True):
    if not request.body:
        return {}
    try:
        body = json.loads(request.body)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON body: {e.msg}")
    if expect_object and not isinstance(body, dict):
        raise ValidationError("JSON body must be an object")
    return body


def _user(request):
    user = getattr(request, "user", None)
    return user if user is not None and user.is_authenticated else None


def _ok(data=None, message="", status=200):
    return JsonResponse(
        {"success": True, "message": message, "data": data}, status=status
    )


def _listing_params(request):
    params = request.GET
    return {
        "limit": params.get("limit"),
        "page": params.get("page"),
        "search_term": params.get("searchTerm") or params.get("search_term"),
        "is_recycled": params.get("isRecycled") or params.get("is_recycled"),
    }


def _listing(result, serializer):
    return {
        "items": [serializer(item) for item in result["items"]],
        "meta": result["meta"],
    }


# ----------------------------
# Money receipts
# ----------------------------
@json_view
@require_http_methods(["GET", "POST"])
def money_receipts_view(request):
    if request.method == "POST":
        receipt = services.create_money_receipt(_body(request), user=_user(request))
        return _ok(serialize_money_receipt(receipt), "Money receipt created", 201)

    result = services.list_money_receipts(
        owner_id=request.GET.get("id"), **_listing_params(request)
    )
    return _ok(_listing(result, serialize_money_receipt))


@json_view
@require_http_methods(["GET"])
def due_money_receipts_view(request):
    result = services.list_due_money_receipts(
        owner_id=request.GET.get("id"), **_listing_params(request)
    )
    return _ok(_listing(result, serialize_money_receipt))


@json_view
@require_http_methods(["GET", "PUT", "PATCH", "DELETE"])
def money_receipt_detail_view(request, pk):
    if request.method == "GET":
        return _ok(serialize_money_receipt(services.get_money_receipt(pk)))
    if request.method == "DELETE":
        services.delete_money_receipt(pk, user=_user(request))
        return _ok(None, "Money receipt deleted")
    receipt = services.update_money_receipt(pk, _body(request), user=_user(request))
    return _ok(serialize_money_receipt(receipt), "Money receipt updated")


@json_view
@require_http_methods(["DELETE"])
def money_receipt_permanent_delete_view(request, pk):
    services.permanently_delete_money_receipt(pk, user=_user(request))
    return _ok(None, "Money receipt permanently deleted")


@json_view
@require_http_methods(["PATCH", "POST"])
def money_receipt_recycle_view(request, pk):
    receipt = services.move_money_receipt_to_recycle_bin(pk, user=_user(request))
    return _ok(serialize_money_receipt(receipt), "Money receipt moved to recycle bin")


@json_view
@require_http_methods(["PATCH", "POST"])
def money_receipt_restore_view(request, pk):
    receipt = services.restore_money_receipt_from_recycle_bin(pk, user=_user(request))
    return _ok(serialize_money_receipt(receipt), "Money receipt restored")


@json_view
@require_http_methods(["PATCH", "POST"])
def money_receipts_recycle_all_view(request):
    result = services.move_all_money_receipts_to_recycle_bin(user=_user(request))
    return _ok(serialize_bulk_result(result), "Money receipts moved to recycle bin")


@json_view
@require_http_methods(["PATCH", "POST"])
def money_receipts_restore_all_view(request):
    result = services.restore_all_money_receipts_from_recycle_bin(user=_user(request))
    return _ok(serialize_bulk_result(result), "Money receipts restored")


@json_view
@require_http_methods(["GET"])
def money_receipt_pdf_view(request, pk):
    pdf = services.generate_money_receipt_pdf(pk, request.GET.get("imageUrl"))
    response = HttpResponse(pdf, content_type="application/pdf")
    response["Content-Disposition"] = f'inline; filename="money-receipt-{pk}.pdf"'
    return response


# ----------------------------
# Companies
# ----------------------------
@json_view
@require_http_methods(["GET", "POST"])
def companies_view(request):
    if request.method == "POST":
        body = _body(request)
        company = services.create_company_with_vehicle(
            body.get("company"), body.get("vehicle"), user=_user(request)
        )
        return _ok(serialize_company(company), "Company created", 201)

    result = services.list_companies(**_listing_params(request))
    return _ok(_listing(result, serialize_company))


@json_view
@require_http_methods(["GET", "PUT", "PATCH", "DELETE"])
def company_detail_view(request, pk):
    if request.method == "GET":
        return _ok(serialize_company(services.get_company(pk), detail=True))
    if request.method == "DELETE":
        services.delete_company(pk, user=_user(request))
        return _ok(None, "Company deleted")
    body = _body(request)
    company = services.update_company(
        pk, body.get("company"), body.get("vehicle"), user=_user(request)
    )
    return _ok(serialize_company(company), "Company updated")


@json_view
@require_http_methods(["DELETE"])
def company_permanent_delete_view(request, pk):
    services.permanently_delete_company(pk, user=_user(request))
    return _ok(None, "Company permanently deleted")


@json_view
@require_http_methods(["PATCH", "POST"])
def company_recycle_view(request, pk):
    company = services.move_company_to_recycle_bin(pk, user=_user(request))
    return _ok(serialize_company(company), "Company moved to recycle bin")


@json_view
@require_http_methods(["PATCH", "POST"])
def company_restore_view(request, pk):
    company = services.restore_company_from_recycle_bin(pk, user=_user(request))
    return _ok(serialize_company(company), "Company restored")


@json_view
@require_http_methods(["PATCH", "POST"])
def companies_recycle_all_view(request):
    result = services.move_all_companies_to_recycle_bin(user=_user(request))
    return _ok(serialize_bulk_result(result), "Companies moved to recycle bin")


@json_view
@require_http_methods(["PATCH", "POST"])
def companies_restore_all_view(request):
    result = services.restore_all_companies_from_recycle_bin(user=_user(request))
    return _ok(serialize_bulk_result(result), "Companies restored")


# ----------------------------
# Salaries
# ----------------------------
@json_view
@require_http_methods(["GET", "POST"])
def salaries_view(request):
    if request.method == "POST":
        body = _body(request, expect_object=False)
        entries = body if isinstance(body, list) else [body]
        if not all(isinstance(entry, dict) for entry in entries):
            raise ValidationError("Each salary entry must be an object")
        services.create_salaries(entries, user=_user(request))
        return _ok(None, "Salary created", 201)

    result = services.list_salaries(
        employee_id=request.GET.get("id"),
        limit=request.GET.get("limit"),
        page=request.GET.get("page"),
    )
    return _ok(_listing(result, serialize_salary))


@json_view
@require_http_methods(["GET"])
def current_month_salaries_view(request):
    groups = services.get_current_month_salaries(request.GET.get("searchTerm"))
    return _ok([
        {"month": group["month"], "salaries": [serialize_salary(s) for s in group["salaries"]]}
        for group in groups
    ])


@json_view
@require_http_methods(["PUT", "PATCH", "DELETE"])
def salary_detail_view(request, pk):
    if request.method == "DELETE":
        services.delete_salary(pk, user=_user(request))
        return _ok(None, "Salary deleted")
    salary = services.update_salary(pk, _body(request), user=_user(request))
    return _ok(serialize_salary(salary), "Salary updated")
