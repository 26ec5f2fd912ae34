"""Configuration management for the Reading Plans application."""
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
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('DATA_DIR', str(BASE_DIR / 'data')))

# Plan data source: a base URL wins over the local directory when set
PLAN_DATA_DIR: Final[Path] = Path(os.getenv('PLAN_DATA_DIR', str(DATA_DIR / 'reading-plans')))
PLAN_BASE_URL: Final[str] = os.getenv('PLAN_BASE_URL', '').rstrip('/')
PLAN_FETCH_TIMEOUT: Final[float] = float(os.getenv('PLAN_FETCH_TIMEOUT', '10'))

# Start dates, current plan and completed readings
PROGRESS_FILE: Final[Path] = Path(os.getenv('PROGRESS_FILE', str(DATA_DIR / 'progress.json')))
