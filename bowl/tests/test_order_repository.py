import tempfile
import threading
import unittest
from datetime import datetime
from pathlib import Path

from bowl.domain.Order import OrderItem
from bowl.infra.Customer_Repository import CustomerRepository
from bowl.infra.Order_Repository import OrderRepository


class TestOrderRepository(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.data_dir = Path(self._tmp.name)
        self.repo = OrderRepository(self.data_dir)

    def tearDown(self):
        self._tmp.cleanup()

    def _run_parallel(self, target, count=8):
        barrier = threading.Barrier(count)
        errors = []

        def worker(i):
            try:
                barrier.wait()
                target(i)
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(count)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        self.assertEqual(errors, [])

    def test_upsert_uses_given_creation_time(self):
        order = self.repo.upsert("c1", "2026-03-09", [OrderItem("oats", 1)],
                                 created_at=datetime(2026, 3, 3, 10, 0, 30))
        self.assertEqual(order.created_at, "2026-03-03T10:00:30")
        # A resubmit keeps the original timestamp
        again = self.repo.upsert("c1", "2026-03-09", [OrderItem("yogurt", 1)],
                                 created_at=datetime(2026, 3, 4, 9, 0))
        self.assertEqual(again.created_at, "2026-03-03T10:00:30")
        self.assertEqual(self.repo.find("c1", "2026-03-09").items, [OrderItem("yogurt", 1)])

    def test_concurrent_upserts_keep_every_order(self):
        self._run_parallel(lambda i: self.repo.upsert(f"c{i}", "2026-03-09", [OrderItem("oats", 1)]))
        orders = self.repo.get_for_date("2026-03-09")
        self.assertEqual(sorted(o.customer_id for o in orders), sorted(f"c{i}" for i in range(8)))

    def test_concurrent_logins_keep_every_customer(self):
        customers = CustomerRepository(self.data_dir)
        self._run_parallel(lambda i: customers.find_or_create(f"Gast {i}", "1990-01-01"))
        self.assertEqual(len(customers.get_all()), 8)
