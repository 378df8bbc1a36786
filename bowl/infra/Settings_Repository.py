"""Settings repository: app_settings key/value rows <-> AppSettings."""
import logging
from pathlib import Path
from typing import Optional

from bowl.domain.Settings import AppSettings
from bowl.infra.paths import SETTINGS_FILENAME, data_file
from bowl.infra.storage import atomic_write, read_json, write_lock

logger = logging.getLogger(__name__)


class SettingsRepository:
    def __init__(self, data_dir: Optional[Path] = None):
        self.path = data_file(SETTINGS_FILENAME, data_dir)

    def load_rows(self):
        return read_json(self.path, [])

    def load(self) -> AppSettings:
        return AppSettings.from_rows(self.load_rows())

    def save(self, settings: AppSettings) -> AppSettings:
        # Upsert on key: keep rows this app does not know about
        with write_lock:
            rows = {r.get("key"): r for r in self.load_rows() if isinstance(r, dict)}
            for row in settings.to_rows():
                rows[row["key"]] = row
            atomic_write(self.path, list(rows.values()))
        logger.info(f"Settings saved: {settings}")
        return settings
