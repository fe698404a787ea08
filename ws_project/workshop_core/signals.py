from django.db.models.signals import pre_save
from django.dispatch import receiver

from .models import Invoice, MoneyReceipt

"""Keep payment_status in step with the receipt's against-bill mode."""


# fires on every save(), update_fields saves included
@receiver(pre_save, sender=MoneyReceipt)
def derive_payment_status(sender, instance, **kwargs):
    instance.payment_status = MoneyReceipt.payment_status_for(
        instance.against_bill_no_method
    )


"""Invoice due always mirrors max(net_total - advance, 0)."""


@receiver(pre_save, sender=Invoice)
def sync_invoice_due(sender, instance, **kwargs):
    instance.due = Invoice.compute_due(instance.net_total, instance.advance)
