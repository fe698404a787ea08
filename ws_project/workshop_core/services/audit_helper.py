from ..models import AuditLog


def log_action(
    *,
    action: str,
    instance=None,
    object_type: str | None = None,
    object_id=None,
    user=None,
    changes: dict | None = None,
):
    """
    Central audit logger.
    Call it inside the unit of work so the entry commits
    (or rolls back) together with the change it describes.
    """
    if instance is not None:
        object_type = object_type or instance.__class__.__name__
        object_id = object_id if object_id is not None else instance.pk

    return AuditLog.objects.create(
        user=user,
        action=action,
        object_type=object_type or "",
        object_id=str(object_id) if object_id is not None else "",
        changes=changes,
    )
