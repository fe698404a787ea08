import logging
from typing import NamedTuple

from django.utils import timezone

from .audit_helper import log_action
from .common import get_or_not_found
from .unit_of_work import unit_of_work

logger = logging.getLogger(__name__)


class BulkResult(NamedTuple):
    matched_count: int
    modified_count: int


# ----------------------------
# Single row transitions
# ----------------------------
@unit_of_work
def move_to_recycle_bin(model, pk, *, not_found_message=None, user=None):
    """Active -> Recycled. Hides the row from default listings."""
    obj = get_or_not_found(
        model, pk, not_found_message or f"{model.__name__} not available."
    )
    obj.is_recycled = True
    obj.recycled_at = timezone.now()
    # update() skips model validation, the row itself is unchanged
    model.objects.filter(pk=obj.pk).update(
        is_recycled=obj.is_recycled, recycled_at=obj.recycled_at
    )
    log_action(action="recycle", instance=obj, user=user)
    return obj


@unit_of_work
def restore_from_recycle_bin(model, pk, *, not_found_message=None, user=None):
    """Recycled -> Active. recycled_at is cleared."""
    obj = get_or_not_found(
        model, pk, not_found_message or f"{model.__name__} not available."
    )
    obj.is_recycled = False
    obj.recycled_at = None
    model.objects.filter(pk=obj.pk).update(is_recycled=False, recycled_at=None)
    log_action(action="restore", instance=obj, user=user)
    return obj


# ----------------------------
# Bulk transitions
# ----------------------------
@unit_of_work
def move_all_to_recycle_bin(model, *, user=None):
    """Every row of the collection goes to the recycle bin."""
    matched = model.objects.count()
    modified = model.objects.all().move_to_recycle_bin()
    logger.info("Moved %s %s rows to recycle bin", modified, model.__name__)
    log_action(
        action="recycle_all",
        object_type=model.__name__,
        user=user,
        changes={"modified": modified},
    )
    return BulkResult(matched, modified)


@unit_of_work
def restore_all_from_recycle_bin(model, *, user=None):
    """Only rows currently recycled are restored; recycled_at is unset."""
    matched = model.objects.recycled().count()
    modified = model.objects.all().restore_from_recycle_bin()
    logger.info("Restored %s %s rows from recycle bin", modified, model.__name__)
    log_action(
        action="restore_all",
        object_type=model.__name__,
        user=user,
        changes={"modified": modified},
    )
    return BulkResult(matched, modified)
