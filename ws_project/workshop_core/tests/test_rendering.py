import uuid
from unittest import mock

import requests
from django.test import TestCase

from ..exceptions import NotFound, RenderingFailure
from ..services import create_money_receipt, generate_money_receipt_pdf
from ..services import rendering


class RenderingTests(TestCase):
    def setUp(self):
        self.receipt = create_money_receipt({
            "thanks_from": "Rahim <Uddin> & Sons",
            "total_amount": "150000",
            "advance": "50000",
            "remaining": "100000",
            "payment_method": "Bank",
            "bank_name": "Sonali Bank",
            "check_number": "CHK-77",
        })

    def test_pdf_without_logo_when_fetch_fails(self):
        with mock.patch.object(
            rendering.requests, "get", side_effect=requests.ConnectionError("offline")
        ):
            with self.assertLogs("workshop_core.services.rendering", "WARNING") as logs:
                pdf = generate_money_receipt_pdf(self.receipt.pk, "http://assets.local")

        self.assertTrue(pdf.startswith(b"%PDF"))
        self.assertIn("Failed to load logo", logs.output[0])

    def test_non_image_logo_is_skipped(self):
        response = mock.Mock(content=b"<html>not an image</html>")
        response.raise_for_status.return_value = None
        with mock.patch.object(rendering.requests, "get", return_value=response) as get:
            with self.assertLogs("workshop_core.services.rendering", "WARNING"):
                pdf = generate_money_receipt_pdf(self.receipt.pk, "http://assets.local/")

        self.assertTrue(pdf.startswith(b"%PDF"))
        url = get.call_args.args[0]
        self.assertEqual(url, "http://assets.local/images/world-auto-solution.jpg")

    def test_no_image_url_skips_fetch(self):
        with mock.patch.object(rendering.requests, "get") as get:
            pdf = generate_money_receipt_pdf(self.receipt.pk)
        get.assert_not_called()
        self.assertTrue(pdf.startswith(b"%PDF"))

    def test_missing_receipt(self):
        with self.assertRaises(NotFound):
            generate_money_receipt_pdf(uuid.uuid4())

    def test_layout_failure(self):
        with mock.patch.object(rendering.SimpleDocTemplate, "build", side_effect=ValueError("bad")):
            with self.assertRaises(RenderingFailure):
                generate_money_receipt_pdf(self.receipt.pk)
