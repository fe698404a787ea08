from django.urls import path

from . import views

app_name = "workshop_core"

urlpatterns = [
    # money receipts
    path("money-receipts/", views.money_receipts_view, name="money-receipts"),
    path("money-receipts/due/", views.due_money_receipts_view, name="money-receipts-due"),
    path("money-receipts/recycle-all/", views.money_receipts_recycle_all_view, name="money-receipts-recycle-all"),
    path("money-receipts/restore-all/", views.money_receipts_restore_all_view, name="money-receipts-restore-all"),
    path("money-receipts/<str:pk>/", views.money_receipt_detail_view, name="money-receipt-detail"),
    path("money-receipts/<str:pk>/permanent/", views.money_receipt_permanent_delete_view, name="money-receipt-permanent-delete"),
    path("money-receipts/<str:pk>/recycle/", views.money_receipt_recycle_view, name="money-receipt-recycle"),
    path("money-receipts/<str:pk>/restore/", views.money_receipt_restore_view, name="money-receipt-restore"),
    path("money-receipts/<str:pk>/pdf/", views.money_receipt_pdf_view, name="money-receipt-pdf"),
    # companies
    path("companies/", views.companies_view, name="companies"),
    path("companies/recycle-all/", views.companies_recycle_all_view, name="companies-recycle-all"),
    path("companies/restore-all/", views.companies_restore_all_view, name="companies-restore-all"),
    path("companies/<str:pk>/", views.company_detail_view, name="company-detail"),
    path("companies/<str:pk>/permanent/", views.company_permanent_delete_view, name="company-permanent-delete"),
    path("companies/<str:pk>/recycle/", views.company_recycle_view, name="company-recycle"),
    path("companies/<str:pk>/restore/", views.company_restore_view, name="company-restore"),
    # salaries
    path("salaries/", views.salaries_view, name="salaries"),
    path("salaries/current-month/", views.current_month_salaries_view, name="salaries-current-month"),
    path("salaries/<str:pk>/", views.salary_detail_view, name="salary-detail"),
]
