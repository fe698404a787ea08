from django.contrib import admin

from ..models import Company, Customer, ShowRoom, Vehicle

from .inlines import VehicleInline
from .mixins import RecycleBinAdminMixin


# Register `Customer` model
@admin.register(Customer)
class CustomerAdmin(RecycleBinAdminMixin, admin.ModelAdmin):
    list_display = ("customer_code", "customer_name", "full_customer_num", "customer_email")
    search_fields = ("customer_code", "customer_name", "customer_contact", "full_customer_num")


# Register `Company` model
@admin.register(Company)
class CompanyAdmin(RecycleBinAdminMixin, admin.ModelAdmin):
    list_display = ("company_code", "company_name", "full_company_num", "vehicle_username")
    search_fields = (
        "company_code", "company_name", "company_contact", "full_company_num",
        "vehicles__chassis_no", "vehicles__full_reg_num",
    )
    inlines = [VehicleInline]


# Register `ShowRoom` model
@admin.register(ShowRoom)
class ShowRoomAdmin(RecycleBinAdminMixin, admin.ModelAdmin):
    list_display = ("showroom_code", "showroom_name", "full_showroom_num", "showroom_email")
    search_fields = ("showroom_code", "showroom_name", "showroom_contact", "full_showroom_num")


# Register `Vehicle` model
@admin.register(Vehicle)
class VehicleAdmin(admin.ModelAdmin):
    list_display = ("chassis_no", "full_reg_num", "vehicle_name", "user_type", "party_code")
    list_filter = ("user_type", "vehicle_brand")
    search_fields = ("chassis_no", "full_reg_num", "car_registration_no", "vehicle_name", "party_code")
    raw_id_fields = ("customer", "company", "show_room")
