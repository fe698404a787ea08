import logging

from celery import shared_task
from django.core.files.base import ContentFile
from django.core.files.storage import default_storage

logger = logging.getLogger(__name__)


@shared_task  # register this function as a Celery task
def archive_money_receipt_pdf(receipt_pk, image_url=None):
    """
    Render a committed receipt and keep a copy in default storage,
    under receipts/<money_receipt_id>.pdf. Returns the stored name.
    """
    # import lazily to avoid circular imports at module import time
    from .services.rendering import generate_money_receipt_pdf
    from .services.money_receipt import get_money_receipt

    receipt = get_money_receipt(receipt_pk)
    pdf = generate_money_receipt_pdf(receipt.pk, image_url)

    name = f"receipts/{receipt.money_receipt_id}.pdf"
    # a re-render replaces the previous copy
    if default_storage.exists(name):
        default_storage.delete(name)
    stored = default_storage.save(name, ContentFile(pdf))
    logger.info("Archived money receipt %s as %s", receipt.money_receipt_id, stored)
    return stored
