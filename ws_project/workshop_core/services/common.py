from django.core.exceptions import ValidationError

from ..exceptions import NotFound


def get_or_not_found(model, pk, message, *, lock=False, queryset=None):
    """
    Fetch model row by primary key or raise NotFound.
    Malformed ids (not a UUID) are reported as not found too.
    """
    qs = queryset if queryset is not None else model.objects.all()
    if lock:
        # Lock the row until the surrounding unit of work finishes
        qs = qs.select_for_update()
    try:
        obj = qs.filter(pk=pk).first()
    except (ValidationError, ValueError):
        obj = None
    if obj is None:
        raise NotFound(message)
    return obj
