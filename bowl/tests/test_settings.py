import json
import tempfile
import unittest
from pathlib import Path

from bowl.domain.Settings import AppSettings
from bowl.infra.Settings_Repository import SettingsRepository


class TestAppSettings(unittest.TestCase):

    def test_defaults_when_empty(self):
        s = AppSettings.from_rows([])
        self.assertEqual(s.delivery_weekday, 0)
        self.assertEqual(s.order_cutoff_weekday, 3)
        self.assertEqual(s.order_cutoff_hour, 16)
        self.assertEqual(s.order_cutoff_minute, 0)
        self.assertEqual(s.paused_delivery_dates, [])
        self.assertEqual(s.repeat_factor, 0.5)

    def test_legacy_cutoff_weekday(self):
        self.assertEqual(AppSettings.from_rows({"order_cutoff_weekday": "4"}).order_cutoff_weekday, 3)
        self.assertEqual(AppSettings.from_rows({"order_cutoff_weekday": "2"}).order_cutoff_weekday, 2)

    def test_unparsable_or_out_of_range_values_default(self):
        s = AppSettings.from_rows({
            "delivery_weekday": "9",
            "order_cutoff_hour": "abc",
            "order_cutoff_minute": "75",
            "mehrfach_portion_faktor": "viel",
        })
        self.assertEqual(s.delivery_weekday, 0)
        self.assertEqual(s.order_cutoff_hour, 16)
        self.assertEqual(s.order_cutoff_minute, 0)
        self.assertEqual(s.repeat_factor, 0.5)

    def test_repeat_factor_clamped(self):
        self.assertEqual(AppSettings.from_rows({"mehrfach_portion_faktor": "1.7"}).repeat_factor, 1.0)
        self.assertEqual(AppSettings.from_rows({"mehrfach_portion_faktor": "-0.2"}).repeat_factor, 0.0)
        self.assertEqual(AppSettings.from_rows({"mehrfach_portion_faktor": "0.25"}).repeat_factor, 0.25)

    def test_key_value_rows(self):
        rows = [
            {"key": "delivery_weekday", "value": "2"},
            {"key": "paused_delivery_dates", "value": "2026-03-04,2026-03-11"},
            {"key": "order_cutoff_hour", "value": None},
        ]
        s = AppSettings.from_rows(rows)
        self.assertEqual(s.delivery_weekday, 2)
        self.assertEqual(s.paused_set, {"2026-03-04", "2026-03-11"})
        self.assertEqual(s.order_cutoff_hour, 16)

    def test_rows_round_trip(self):
        s = AppSettings(4, 2, 9, 45, ["2026-03-09"], 0.75)
        self.assertEqual(AppSettings.from_rows(s.to_rows()).to_dict(), s.to_dict())


class TestSettingsRepository(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.data_dir = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_missing_file_gives_defaults(self):
        self.assertEqual(SettingsRepository(self.data_dir).load().to_dict(), AppSettings().to_dict())

    def test_save_keeps_unknown_keys(self):
        path = self.data_dir / "settings.json"
        path.write_text(json.dumps([{"key": "admin_note", "value": "hi"},
                                    {"key": "delivery_weekday", "value": "0"}]), encoding="utf-8")
        repo = SettingsRepository(self.data_dir)
        repo.save(AppSettings(delivery_weekday=5))
        rows = {r["key"]: r["value"] for r in json.loads(path.read_text(encoding="utf-8"))}
        self.assertEqual(rows["admin_note"], "hi")
        self.assertEqual(rows["delivery_weekday"], "5")
        self.assertEqual(repo.load().delivery_weekday, 5)

    def test_corrupt_file_gives_defaults(self):
        (self.data_dir / "settings.json").write_text("{not json", encoding="utf-8")
        with self.assertLogs("bowl.infra.storage", level="ERROR"):
            settings = SettingsRepository(self.data_dir).load()
        self.assertEqual(settings.order_cutoff_hour, 16)
