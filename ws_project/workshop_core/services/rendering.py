import logging
from io import BytesIO

import requests
from django.conf import settings
from django.utils.html import escape
from reportlab.lib import colors
from reportlab.lib.enums import TA_RIGHT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.utils import ImageReader
from reportlab.platypus import Image, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from ..exceptions import RenderingFailure
from ..utils import format_to_indian_currency
from .money_receipt import get_money_receipt

logger = logging.getLogger(__name__)

DEFAULT_LOGO_PATH = "/images/world-auto-solution.jpg"
DEFAULT_HTTP_TIMEOUT = 10


def fetch_logo(image_url):
    """
    Download the workshop logo from image_url + WORKSHOP_LOGO_PATH.
    Best effort: any failure is logged and yields None.
    """
    if not image_url:
        return None

    path = getattr(settings, "WORKSHOP_LOGO_PATH", DEFAULT_LOGO_PATH)
    timeout = getattr(settings, "WORKSHOP_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT)
    logo_url = f"{image_url.rstrip('/')}{path}"

    try:
        response = requests.get(logo_url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        logger.warning("Failed to load logo from %s: %s", logo_url, exc)
        return None

    data = BytesIO(response.content)
    try:
        # reject payloads that are not images before they reach the layout
        ImageReader(data).getSize()
    except Exception as exc:
        logger.warning("Logo at %s is not a usable image: %s", logo_url, exc)
        return None
    data.seek(0)
    return data


def _text(value):
    return escape("" if value is None else str(value))


def _money(value):
    if value is None:
        return "-"
    return format_to_indian_currency(value)


def _receipt_story(receipt, logo):
    styles = getSampleStyleSheet()
    styles.add(ParagraphStyle(name="Right", parent=styles["Normal"], alignment=TA_RIGHT))
    story = []

    # ----- header -----
    heading = Paragraph("<b>MONEY RECEIPT</b>", styles["Title"])
    meta = Paragraph(
        f"Receipt No: {_text(receipt.money_receipt_id)}<br/>"
        f"Date: {_text(receipt.date) or '-'}<br/>"
        f"Job No: {_text(receipt.job_no) or '-'}",
        styles["Right"],
    )
    left = Image(logo, width=120, height=50, kind="proportional") if logo else heading
    header = Table([[left, meta]], colWidths=[300, 200])
    story.append(header)
    if logo:
        story.append(heading)
    story.append(Spacer(1, 16))

    # ----- who paid, for what -----
    vehicle = receipt.vehicle
    details = [
        ["Thanks from", _text(receipt.thanks_from) or "-"],
        ["Against bill", _text(receipt.against_bill_no_method) or "-"],
        ["Chassis no", _text(receipt.chassis_no) or "-"],
        ["Registration", _text(receipt.full_reg_number) or "-"],
        ["Vehicle", _text(vehicle.vehicle_name) if vehicle else "-"],
        ["Payment method", _text(receipt.payment_method) or "-"],
    ]
    if receipt.bank_name or receipt.check_number:
        details.append(["Bank", _text(receipt.bank_name) or "-"])
        details.append(["Cheque no", _text(receipt.check_number) or "-"])
        details.append(["Account no", _text(receipt.account_number) or "-"])

    detail_table = Table(details, colWidths=[150, 350])
    detail_table.setStyle(TableStyle([
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
        ("BACKGROUND", (0, 0), (0, -1), colors.whitesmoke),
        ("TOPPADDING", (0, 0), (-1, -1), 6),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
    ]))
    story.append(detail_table)
    story.append(Spacer(1, 16))

    # ----- amounts -----
    amounts = Table(
        [
            ["", "Amount", "In words"],
            ["Total", _money(receipt.total_amount), Paragraph(_text(receipt.total_amount_in_words), styles["Normal"])],
            ["Advance", _money(receipt.advance), Paragraph(_text(receipt.advance_in_words), styles["Normal"])],
            ["Remaining", _money(receipt.remaining), Paragraph(_text(receipt.remaining_in_words), styles["Normal"])],
        ],
        colWidths=[90, 110, 300],
    )
    amounts.setStyle(TableStyle([
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
        ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
        ("ALIGN", (1, 1), (1, -1), "RIGHT"),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
    ]))
    story.append(amounts)
    story.append(Spacer(1, 40))
    story.append(Paragraph("Authorized signature", styles["Right"]))
    return story


def generate_money_receipt_pdf(receipt_id, image_url=None):
    """
    A4 PDF of a committed money receipt, as bytes.
    Raises NotFound for an unknown receipt and RenderingFailure when
    the document cannot be built. A missing logo is not an error.
    """
    receipt = get_money_receipt(receipt_id)
    logo = fetch_logo(image_url)

    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        rightMargin=20,
        leftMargin=20,
        topMargin=20,
        bottomMargin=20,
        title=f"Money receipt {receipt.money_receipt_id}",
    )
    try:
        doc.build(_receipt_story(receipt, logo))
    except Exception as exc:
        logger.exception("Error generating PDF for money receipt %s", receipt.pk)
        raise RenderingFailure("PDF generation failed") from exc
    return buffer.getvalue()
