from django.apps import AppConfig


class WorkshopCoreConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "workshop_core"
    verbose_name = "Workshop ledger"

    # ensure receivers are registered
    def ready(self):
        import workshop_core.signals  # noqa: F401
