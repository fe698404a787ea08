import uuid
from unittest import mock

from django.core.exceptions import ValidationError
from django.test import TestCase

from ..exceptions import Conflict, NotFound
from ..models import AuditLog, Company, Vehicle
from ..services import (create_company_with_vehicle, delete_company,
                        get_company, list_companies,
                        move_company_to_recycle_bin,
                        permanently_delete_company, update_company)
from .helpers import make_company, make_customer, make_vehicle

COMPANY = {
    "company_name": "Acme Transport",
    "company_contact": "01811",
    "company_email": "ops@acme.test",
    "user_type": "company",
}
VEHICLE = {
    "chassis_no": "ACME-1",
    "full_reg_num": "DHA-11",
    "vehicle_name": "Hiace",
    "vehicle_model": 2018,
}


class CreateCompanyTests(TestCase):
    def test_creates_company_and_vehicle(self):
        company = create_company_with_vehicle(COMPANY, VEHICLE)
        self.assertEqual(company.company_code, "C-0001")

        vehicle = Vehicle.objects.get(chassis_no="ACME-1")
        self.assertEqual(vehicle.company, company)
        self.assertEqual(vehicle.party_code, company.company_code)
        self.assertEqual(vehicle.user_type, "company")
        self.assertEqual(list(company.vehicles.all()), [vehicle])
        self.assertTrue(AuditLog.objects.filter(action="create", object_type="Company").exists())

    def test_codes_are_sequential(self):
        create_company_with_vehicle(COMPANY, VEHICLE)
        second = create_company_with_vehicle(COMPANY, {**VEHICLE, "chassis_no": "ACME-2"})
        self.assertEqual(second.company_code, "C-0002")

    def test_without_vehicle_conflicts_and_stores_nothing(self):
        with self.assertRaises(Conflict):
            create_company_with_vehicle(COMPANY, None)
        with self.assertRaises(Conflict):
            create_company_with_vehicle(COMPANY, {"chassis_no": ""})
        self.assertFalse(Company.objects.exists())

    def test_wrong_user_type_conflicts(self):
        with self.assertRaises(Conflict) as ctx:
            create_company_with_vehicle({**COMPANY, "user_type": "customer"}, VEHICLE)
        self.assertEqual(ctx.exception.message, "Something went wrong")
        self.assertFalse(Company.objects.exists())
        self.assertFalse(Vehicle.objects.exists())

    def test_unknown_user_type_conflicts(self):
        with self.assertRaises(Conflict) as ctx:
            create_company_with_vehicle({**COMPANY, "user_type": "vendor"}, VEHICLE)
        self.assertEqual(ctx.exception.message, "Something went wrong")
        self.assertFalse(Company.objects.exists())
        self.assertFalse(Vehicle.objects.exists())

    def test_taken_code_is_regenerated(self):
        make_company(code="C-0001")
        with mock.patch(
            "workshop_core.services.company.generate_company_code",
            side_effect=["C-0001", "C-0002"],
        ):
            company = create_company_with_vehicle(COMPANY, VEHICLE)
        self.assertEqual(company.company_code, "C-0002")
        self.assertEqual(Company.objects.filter(company_code="C-0001").count(), 1)

    def test_duplicate_chassis_rolls_back_company(self):
        make_vehicle("ACME-1")
        with self.assertRaises(ValidationError):
            create_company_with_vehicle(COMPANY, VEHICLE)
        self.assertFalse(Company.objects.exists())


class CompanyLifecycleTests(TestCase):
    def setUp(self):
        self.company = create_company_with_vehicle(COMPANY, VEHICLE)

    def test_update_fields_and_add_new_vehicle(self):
        update_company(
            self.company.pk,
            {"company_name": "Acme Logistics", "company_contact": ""},
            {"chassis_no": "ACME-2", "vehicle_name": "Canter"},
        )
        self.company.refresh_from_db()
        self.assertEqual(self.company.company_name, "Acme Logistics")
        # blank values never overwrite
        self.assertEqual(self.company.company_contact, "01811")
        new_vehicle = Vehicle.objects.get(chassis_no="ACME-2")
        self.assertEqual(new_vehicle.company, self.company)
        self.assertEqual(new_vehicle.party_code, "C-0001")
        self.assertEqual(self.company.vehicles.count(), 2)

    def test_update_existing_vehicle_in_place(self):
        update_company(self.company.pk, {}, {"chassis_no": "ACME-1", "mileage": 52000})
        self.assertEqual(Vehicle.objects.count(), 1)
        self.assertEqual(Vehicle.objects.get(chassis_no="ACME-1").mileage, 52000)

    def test_update_without_chassis_skips_vehicle(self):
        update_company(self.company.pk, {"vehicle_username": "driver"}, {"vehicle_name": "X"})
        self.assertEqual(Vehicle.objects.count(), 1)

    def test_update_missing(self):
        with self.assertRaises(NotFound):
            update_company(uuid.uuid4(), {"company_name": "x"})

    def test_permanent_delete_removes_company_and_vehicles(self):
        update_company(self.company.pk, {}, {"chassis_no": "ACME-2"})
        other = make_vehicle("OTHER-1", owner=make_customer())

        permanently_delete_company(self.company.pk)

        with self.assertRaises(NotFound):
            get_company(self.company.pk)
        self.assertFalse(Vehicle.objects.filter(chassis_no__in=["ACME-1", "ACME-2"]).exists())
        self.assertTrue(Vehicle.objects.filter(pk=other.pk).exists())

    def test_delete_missing(self):
        with self.assertRaises(NotFound):
            delete_company(uuid.uuid4())

    def test_get_company_loads_relations(self):
        company = get_company(self.company.pk)
        self.assertEqual([v.chassis_no for v in company.vehicles.all()], ["ACME-1"])
        self.assertEqual(list(company.money_receipts.all()), [])


class ListCompaniesTests(TestCase):
    def setUp(self):
        self.acme = create_company_with_vehicle(COMPANY, VEHICLE)
        self.beta = create_company_with_vehicle(
            {"company_name": "Beta Cargo", "user_type": "company"},
            {"chassis_no": "BETA-1", "vehicle_name": "Canter", "vehicle_model": 2015},
        )

    def test_search_by_vehicle_fields(self):
        items = list_companies(search_term="hiace")["items"]
        self.assertEqual(items, [self.acme])

    def test_search_by_vehicle_model_number(self):
        items = list_companies(search_term="2015")["items"]
        self.assertEqual(items, [self.beta])

    def test_company_with_two_matching_vehicles_listed_once(self):
        update_company(self.acme.pk, {}, {"chassis_no": "ACME-2", "vehicle_name": "Hiace"})
        result = list_companies(search_term="hiace")
        self.assertEqual(result["items"], [self.acme])
        self.assertEqual(result["meta"]["total_data"], 1)

    def test_page_numbers(self):
        result = list_companies(limit=1, page=1)
        self.assertEqual(result["meta"]["page_numbers"], [1, 2])
        self.assertEqual(result["items"], [self.beta])

    def test_recycled_filter(self):
        move_company_to_recycle_bin(self.acme.pk)
        self.assertEqual(list_companies(is_recycled="true")["items"], [self.acme])
        self.assertEqual(list_companies(is_recycled="false")["items"], [self.beta])
