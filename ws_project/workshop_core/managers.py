from django.db import models
from django.utils import timezone


# -----------------------------------------
# Recycle bin (soft delete) scoping shared
# by every model that can be recycled
# -----------------------------------------
class RecycleBinQuerySet(models.QuerySet):
    def active(self):
        # rows visible in default listings
        return self.filter(is_recycled=False)

    def recycled(self):
        # rows sitting in the recycle bin
        return self.filter(is_recycled=True)

    def by_recycled_flag(self, flag):
        """Filter by the 'true'/'false' string a listing receives.
        None means no filtering."""
        if flag is None:
            return self
        if isinstance(flag, str):
            flag = flag.strip().lower() == "true"
        return self.filter(is_recycled=bool(flag))

    def move_to_recycle_bin(self):
        # returns number of rows matched (and updated)
        return self.update(is_recycled=True, recycled_at=timezone.now())

    def restore_from_recycle_bin(self):
        # only rows currently recycled are touched
        return self.recycled().update(is_recycled=False, recycled_at=None)

    # Enables query:
    # MoneyReceipt.objects.active().filter(job_no="0001")


class RecycleBinManager(models.Manager.from_queryset(RecycleBinQuerySet)):
    """Attach RecycleBinQuerySet to .objects so
    .active() / .recycled() are always available."""
    pass
