"""Configuration management for the fitness program tracker."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Telegram bot (empty token disables the bot and the reminder scheduler)
BOT_TOKEN: Final[str] = os.getenv('BOT_TOKEN', '')

# All reminders fire against this zone, regardless of the user's locale
TIMEZONE: Final[str] = os.getenv('TIMEZONE', 'Asia/Tehran')

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '3001'))
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO').upper()
CORS_ORIGINS: Final[list[str]] = [o.strip() for o in os.getenv('CORS_ORIGINS', '*').split(',') if o.strip()]

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = BASE_DIR / 'data'
DB_FILE: Final[Path] = Path(os.getenv('DB_FILE', str(DATA_DIR / 'db.json')))
