import json
import uuid
from unittest import mock

from django.test import TestCase
from django.urls import reverse

from ..models import Employee, MoneyReceipt
from ..models.money_receipt import ADVANCE_AGAINST_BILL
from .helpers import make_customer, make_invoice


class JsonClientMixin:
    def send(self, method, name, data=None, args=None):
        return getattr(self.client, method)(
            reverse(f"workshop_core:{name}", args=args),
            data=json.dumps(data) if data is not None else "",
            content_type="application/json",
        )


class MoneyReceiptViewTests(JsonClientMixin, TestCase):
    def setUp(self):
        make_customer()
        make_invoice(job_no="JOB-1", net_total="10000")

    def test_create_then_list(self):
        response = self.send("post", "money-receipts", {
            "job_no": "JOB-1",
            "against_bill_no_method": ADVANCE_AGAINST_BILL,
            "total_amount": 10000,
            "advance": 3000,
            "remaining": 7000,
            "user_type": "customer",
            "party_code": "CU-0001",
        })
        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertTrue(body["success"])
        self.assertEqual(body["data"]["money_receipt_id"], "0001")
        self.assertEqual(body["data"]["total_amount_display"], "10,000")
        self.assertEqual(body["data"]["owner"]["customer_code"], "CU-0001")
        self.assertIsNotNone(body["data"]["invoice"])

        listing = self.client.get(
            reverse("workshop_core:money-receipts"), {"limit": 10, "page": 1}
        ).json()
        self.assertEqual(
            listing["data"]["meta"],
            {"total_data": 1, "total_pages": 1, "current_page": 1},
        )
        self.assertEqual(listing["data"]["items"][0]["payment_color"], "#ffad46")

    def test_validation_error_is_400(self):
        response = self.send("post", "money-receipts", {"remaining": "-5"})
        self.assertEqual(response.status_code, 400)
        self.assertFalse(response.json()["success"])
        self.assertFalse(MoneyReceipt.objects.exists())

    def test_malformed_json_is_400(self):
        response = self.client.post(
            reverse("workshop_core:money-receipts"),
            data="{oops",
            content_type="application/json",
        )
        self.assertEqual(response.status_code, 400)

    def test_non_object_body_is_400(self):
        response = self.send("post", "money-receipts", [1, 2])
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["message"], "JSON body must be an object")
        self.assertFalse(MoneyReceipt.objects.exists())

    def test_unknown_receipt_is_404(self):
        response = self.client.get(
            reverse("workshop_core:money-receipt-detail", args=[uuid.uuid4()])
        )
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["message"], "No money receipt found")

    def test_recycle_and_restore_all(self):
        MoneyReceipt.objects.create(money_receipt_id="0001", total_amount=1)
        response = self.send("patch", "money-receipts-recycle-all")
        self.assertEqual(response.json()["data"], {"matched_count": 1, "modified_count": 1})
        response = self.send("patch", "money-receipts-restore-all")
        self.assertEqual(response.json()["data"]["modified_count"], 1)

    def test_pdf(self):
        receipt = MoneyReceipt.objects.create(money_receipt_id="0001", total_amount=1)
        with mock.patch("workshop_core.services.rendering.requests.get") as get:
            response = self.client.get(
                reverse("workshop_core:money-receipt-pdf", args=[receipt.pk])
            )
        get.assert_not_called()
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response["Content-Type"], "application/pdf")
        self.assertTrue(response.content.startswith(b"%PDF"))

    def test_wrong_method_is_405(self):
        response = self.client.put(reverse("workshop_core:money-receipts-due"))
        self.assertEqual(response.status_code, 405)


class CompanyViewTests(JsonClientMixin, TestCase):
    def test_company_without_vehicle_is_409(self):
        response = self.send("post", "companies", {
            "company": {"company_name": "Acme", "user_type": "company"},
        })
        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json()["message"], "Something went wrong")

    def test_non_object_bodies_are_400(self):
        self.assertEqual(self.send("post", "companies", ["Acme"]).status_code, 400)
        response = self.send("post", "companies", {"company": "Acme", "vehicle": {"chassis_no": "A-1"}})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["message"], "Payload must be an object")

    def test_create_detail_and_delete(self):
        response = self.send("post", "companies", {
            "company": {"company_name": "Acme", "user_type": "company"},
            "vehicle": {"chassis_no": "ACME-1"},
        })
        self.assertEqual(response.status_code, 201)
        company_id = response.json()["data"]["id"]

        detail = self.client.get(
            reverse("workshop_core:company-detail", args=[company_id])
        ).json()
        self.assertEqual(detail["data"]["vehicles"][0]["chassis_no"], "ACME-1")
        self.assertEqual(detail["data"]["money_receipts"], [])

        response = self.send("delete", "company-permanent-delete", args=[company_id])
        self.assertEqual(response.status_code, 200)
        response = self.client.get(
            reverse("workshop_core:company-detail", args=[company_id])
        )
        self.assertEqual(response.status_code, 404)


class SalaryViewTests(JsonClientMixin, TestCase):
    def test_batch_then_duplicate(self):
        employee = Employee.objects.create(employee_code="E-0001", full_name="Karim")
        entry = {
            "employee": str(employee.pk),
            "month_of_salary": "March",
            "salary_amount": "100",
        }

        self.assertEqual(self.send("post", "salaries", [entry]).status_code, 201)
        self.assertEqual(self.send("post", "salaries", [entry]).status_code, 409)

        response = self.send("post", "salaries", [1, 2])
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["message"], "Each salary entry must be an object")

        current = self.client.get(
            reverse("workshop_core:salaries-current-month"), {"searchTerm": "March"}
        ).json()
        self.assertEqual(
            current["data"][0]["salaries"][0]["employee"]["employee_code"], "E-0001"
        )
