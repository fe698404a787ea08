class WorkshopError(Exception):
    """Base class for errors surfaced to callers of the service layer."""
    status_code = 500
    default_message = "Something went wrong"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFound(WorkshopError):
    """Raised when a referenced receipt, invoice, company,
    salary or employee does not exist."""
    status_code = 404
    default_message = "Not found"


class Conflict(WorkshopError):
    """Raised when a business rule is violated
    (e.g. duplicate salary for the same month)."""
    status_code = 409
    default_message = "Conflict"


class RenderingFailure(WorkshopError):
    """Raised when PDF generation fails.
    Never rolls back data: rendering runs against committed rows."""
    status_code = 500
    default_message = "PDF generation failed"
