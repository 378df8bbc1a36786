"""JSON file helpers shared by the repositories (graceful reads, atomic writes)."""
import json
import logging
import os
import tempfile
from pathlib import Path
from threading import RLock

logger = logging.getLogger(__name__)

# Held around every load-modify-write of a data file
write_lock = RLock()


def read_json(path: Path, default):
    """Load JSON from `path`; missing or corrupt files yield `default`."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.warning(f"Data file not found: {path}. Using empty data.")
        return default
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {path}: {e}")
        return default
    if not isinstance(data, type(default)):
        logger.error(f"Unexpected content in {path}: expected {type(default).__name__}")
        return default
    return data


def atomic_write(path: Path, data) -> None:
    """Write JSON through a temp file in the same directory, then rename over `path`."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=str(path.parent), prefix=f".{path.stem}_", suffix=".json")
    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as tmp:
            json.dump(data, tmp, indent=2, ensure_ascii=False)
        os.replace(tmp_path, path)
    finally:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
