import functools

from django.db import transaction


class UnitOfWork:
    """
    Do-work / commit-or-rollback boundary for multi-row writes.

    Everything `work` writes is visible to later steps of the same unit and
    to nobody else until commit. Any exception rolls every write back and
    is re-raised unchanged.

        UnitOfWork().run(create_receipt, payload)

        with UnitOfWork() as uow:
            ...
            uow.on_commit(lambda: notify(receipt.pk))
    """

    def __init__(self, using=None, durable=False):
        self.using = using
        self.durable = durable
        self._atomic = None

    def run(self, work, *args, **kwargs):
        # Everything inside either succeeds
        # as one unit or rolls back if something fails
        with transaction.atomic(using=self.using, durable=self.durable):
            return work(*args, **kwargs)

    def on_commit(self, func):
        """Run func only after the outermost transaction commits.
        Dropped if the unit rolls back."""
        transaction.on_commit(func, using=self.using)

    def __enter__(self):
        self._atomic = transaction.atomic(using=self.using, durable=self.durable)
        self._atomic.__enter__()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        atomic, self._atomic = self._atomic, None
        # returns False, so the original exception keeps propagating
        return atomic.__exit__(exc_type, exc_value, traceback)


def unit_of_work(func=None, *, using=None):
    """Decorator form: the whole service function is one unit of work."""
    if func is None:
        return functools.partial(unit_of_work, using=using)

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        return UnitOfWork(using=using).run(func, *args, **kwargs)

    return wrapper
