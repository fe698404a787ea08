from .actions import move_selected_to_recycle_bin, restore_selected_from_recycle_bin
from .auditlog import AuditLogAdmin
from .inlines import MoneyReceiptInline, VehicleInline
from .invoice import InvoiceAdmin, MoneyReceiptAdmin
from .mixins import RecycleBinAdminMixin
from .party import CompanyAdmin, CustomerAdmin, ShowRoomAdmin, VehicleAdmin
from .ReadOnly import ReadOnlyAdmin
from .salary import EmployeeAdmin, SalaryAdmin
