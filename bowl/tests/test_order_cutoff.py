import unittest
from datetime import datetime, timezone

from bowl.logic.scheduling.delivery import get_cutoff_for_delivery, is_order_closed_for_delivery

# Monday delivery
DELIVERY = "2026-03-09"


class TestOrderCutoff(unittest.TestCase):

    def test_thursday_cutoff_before_monday(self):
        self.assertEqual(get_cutoff_for_delivery(DELIVERY, 3, 16, 0), datetime(2026, 3, 5, 16, 0))

    def test_closed_exactly_at_cutoff(self):
        self.assertFalse(is_order_closed_for_delivery(DELIVERY, 3, 16, 0, now=datetime(2026, 3, 5, 15, 59)))
        self.assertTrue(is_order_closed_for_delivery(DELIVERY, 3, 16, 0, now=datetime(2026, 3, 5, 16, 0)))
        self.assertTrue(is_order_closed_for_delivery(DELIVERY, 3, 16, 0, now=datetime(2026, 3, 9, 7, 0)))

    def test_future_cutoff_is_open(self):
        self.assertFalse(is_order_closed_for_delivery(DELIVERY, 3, 16, 0, now=datetime(2026, 2, 20, 9, 0)))

    def test_same_weekday_cutoff_is_on_delivery_day(self):
        self.assertEqual(get_cutoff_for_delivery(DELIVERY, 0, 8, 30), datetime(2026, 3, 9, 8, 30))
        self.assertFalse(is_order_closed_for_delivery(DELIVERY, 0, 8, 30, now=datetime(2026, 3, 9, 8, 29)))
        self.assertTrue(is_order_closed_for_delivery(DELIVERY, 0, 8, 30, now=datetime(2026, 3, 9, 8, 30)))

    def test_walks_back_at_most_six_days(self):
        # Sunday cutoff: the day before
        self.assertEqual(get_cutoff_for_delivery(DELIVERY, 6, 12, 0), datetime(2026, 3, 8, 12, 0))
        # Tuesday cutoff: six days before
        self.assertEqual(get_cutoff_for_delivery(DELIVERY, 1, 12, 0), datetime(2026, 3, 3, 12, 0))

    def test_invalid_cutoff_weekday_defaults_to_monday(self):
        self.assertEqual(get_cutoff_for_delivery(DELIVERY, 42, 10, 0), datetime(2026, 3, 9, 10, 0))

    def test_aware_now_is_compared_in_local_time(self):
        # Friday noon UTC is past Thursday 16:00 in every local zone; Tuesday noon UTC is before it
        self.assertTrue(is_order_closed_for_delivery(
            DELIVERY, 3, 16, 0, now=datetime(2026, 3, 6, 12, 0, tzinfo=timezone.utc)))
        self.assertFalse(is_order_closed_for_delivery(
            DELIVERY, 3, 16, 0, now=datetime(2026, 3, 3, 12, 0, tzinfo=timezone.utc)))
