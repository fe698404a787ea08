from django.test import TestCase, TransactionTestCase

from ..models import Customer
from ..services.unit_of_work import UnitOfWork, unit_of_work


class UnitOfWorkTests(TransactionTestCase):
    def test_run_commits(self):
        UnitOfWork().run(Customer.objects.create, customer_code="CU-1", customer_name="A")
        self.assertTrue(Customer.objects.filter(customer_code="CU-1").exists())

    def test_exception_rolls_back_every_write(self):
        def work():
            Customer.objects.create(customer_code="CU-1", customer_name="A")
            Customer.objects.create(customer_code="CU-2", customer_name="B")
            raise RuntimeError("late failure")

        with self.assertRaises(RuntimeError):
            UnitOfWork().run(work)
        self.assertFalse(Customer.objects.exists())

    def test_context_manager_and_on_commit(self):
        called = []
        with UnitOfWork() as uow:
            Customer.objects.create(customer_code="CU-1", customer_name="A")
            uow.on_commit(lambda: called.append("committed"))
            self.assertEqual(called, [])
        self.assertEqual(called, ["committed"])

    def test_on_commit_dropped_on_rollback(self):
        called = []
        with self.assertRaises(ValueError):
            with UnitOfWork() as uow:
                uow.on_commit(lambda: called.append("committed"))
                raise ValueError("abort")
        self.assertEqual(called, [])


class DecoratorTests(TestCase):
    def test_decorated_function_is_atomic(self):
        @unit_of_work
        def create_two_then_fail():
            Customer.objects.create(customer_code="CU-1", customer_name="A")
            raise RuntimeError("nope")

        with self.assertRaises(RuntimeError):
            create_two_then_fail()
        self.assertFalse(Customer.objects.exists())

    def test_decorator_with_arguments_keeps_return_value(self):
        @unit_of_work(using="default")
        def create(code):
            return Customer.objects.create(customer_code=code, customer_name="A")

        self.assertEqual(create("CU-9").customer_code, "CU-9")
