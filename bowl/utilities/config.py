"""Configuration management for the Bowl ordering application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO').upper()

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('BOWL_DATA_DIR', str(BASE_DIR / 'data'))).resolve()


def effective_log_level() -> str:
    """DEBUG=true forces debug logging; otherwise LOG_LEVEL applies."""
    return 'DEBUG' if DEBUG else LOG_LEVEL
