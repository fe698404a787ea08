import uuid
from decimal import Decimal

from django.test import TestCase

from ..exceptions import Conflict, NotFound
from ..models import Employee, Salary
from ..services import (create_salaries, delete_salary,
                        get_current_month_salaries, list_salaries,
                        update_salary)
from ..services.salary import current_month_name


class SalaryTests(TestCase):
    def setUp(self):
        self.karim = Employee.objects.create(employee_code="E-0001", full_name="Karim")
        self.salma = Employee.objects.create(employee_code="E-0002", full_name="Salma")

    def entry(self, employee, month="January", **extra):
        data = {
            "employee": str(employee.pk),
            "month_of_salary": month,
            "salary_amount": "20000",
            "overtime_amount": "1500",
            "total_payment": "21500",
            "paid": "20000",
            "due": "1500",
        }
        data.update(extra)
        return data

    def test_batch_create(self):
        created = create_salaries([self.entry(self.karim), self.entry(self.salma)])
        self.assertEqual(len(created), 2)
        self.assertEqual(self.karim.salaries.get().total_payment, Decimal("21500"))

    def test_duplicate_month_conflicts_and_rolls_back_batch(self):
        create_salaries([self.entry(self.karim)])
        with self.assertRaises(Conflict) as ctx:
            create_salaries([self.entry(self.salma), self.entry(self.karim)])
        self.assertEqual(ctx.exception.message, "Salary already added in this month.")
        self.assertFalse(self.salma.salaries.exists())

    def test_duplicate_inside_one_batch(self):
        with self.assertRaises(Conflict):
            create_salaries([self.entry(self.karim), self.entry(self.karim)])
        self.assertFalse(Salary.objects.exists())

    def test_unknown_employee(self):
        missing = uuid.uuid4()
        with self.assertRaises(NotFound) as ctx:
            create_salaries([self.entry(self.karim), {"employee": str(missing), "month_of_salary": "January"}])
        self.assertIn(str(missing), ctx.exception.message)
        self.assertFalse(Salary.objects.exists())
        with self.assertRaises(NotFound):
            create_salaries([{"employee": "garbage", "month_of_salary": "January"}])

    def test_list_per_employee_with_pages(self):
        create_salaries([self.entry(self.karim, month) for month in ("January", "February", "March")])
        create_salaries([self.entry(self.salma)])

        result = list_salaries(employee_id=self.karim.pk, limit=2, page=1)
        self.assertEqual(len(result["items"]), 2)
        self.assertEqual(result["meta"]["total_data"], 3)
        self.assertEqual(result["meta"]["total_pages"], 2)
        self.assertEqual(list_salaries()["meta"]["total_data"], 4)
        self.assertEqual(list_salaries(employee_id="bad")["items"], [])

    def test_current_month_and_named_month(self):
        month = current_month_name()
        create_salaries([self.entry(self.karim, month)])

        groups = get_current_month_salaries()
        self.assertEqual(groups[0]["month"], month)
        self.assertEqual(len(groups[0]["salaries"]), 1)

        other = "January" if month != "January" else "February"
        with self.assertRaises(NotFound):
            get_current_month_salaries(other)

    def test_update_and_delete(self):
        salary = create_salaries([self.entry(self.karim)])[0]
        updated = update_salary(salary.pk, {"paid": "21500", "due": "0"})
        self.assertEqual(updated.due, Decimal("0"))

        delete_salary(salary.pk)
        self.assertFalse(Salary.objects.exists())
        with self.assertRaises(NotFound):
            delete_salary(salary.pk)
        with self.assertRaises(NotFound):
            update_salary(salary.pk, {"paid": "1"})
