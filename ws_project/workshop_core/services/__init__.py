from .company import (
    create_company_with_vehicle,
    delete_company,
    get_company,
    list_companies,
    move_all_companies_to_recycle_bin,
    move_company_to_recycle_bin,
    permanently_delete_company,
    restore_all_companies_from_recycle_bin,
    restore_company_from_recycle_bin,
    update_company,
)
from .money_receipt import (
    create_money_receipt,
    delete_money_receipt,
    get_money_receipt,
    list_due_money_receipts,
    list_money_receipts,
    move_all_money_receipts_to_recycle_bin,
    move_money_receipt_to_recycle_bin,
    permanently_delete_money_receipt,
    restore_all_money_receipts_from_recycle_bin,
    restore_money_receipt_from_recycle_bin,
    update_money_receipt,
)
from .rendering import generate_money_receipt_pdf
from .salary import (
    create_salaries,
    delete_salary,
    get_current_month_salaries,
    list_salaries,
    update_salary,
)
from .unit_of_work import UnitOfWork, unit_of_work
