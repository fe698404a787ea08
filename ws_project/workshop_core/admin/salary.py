from django.contrib import admin

from ..models import Employee, Salary


class SalaryInline(admin.TabularInline):
    model = Salary
    extra = 0
    fields = ("month_of_salary", "salary_amount", "overtime_amount", "total_payment", "paid", "due")


# Register `Employee` model
@admin.register(Employee)
class EmployeeAdmin(admin.ModelAdmin):
    list_display = ("employee_code", "full_name", "designation", "phone")
    search_fields = ("employee_code", "full_name", "phone")
    inlines = [SalaryInline]


# Register `Salary` model
@admin.register(Salary)
class SalaryAdmin(admin.ModelAdmin):
    list_display = ("employee", "month_of_salary", "total_payment", "paid", "due")
    list_filter = ("month_of_salary",)
    search_fields = ("employee__full_name", "employee__employee_code", "month_of_salary")
    list_select_related = ("employee",)
