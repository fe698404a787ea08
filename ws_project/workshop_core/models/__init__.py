from .auditlog import AuditLog
from .invoice import Invoice
from .money_receipt import MoneyReceipt
from .party import Company, Customer, ShowRoom
from .salary import Employee, Salary
from .vehicle import Vehicle
