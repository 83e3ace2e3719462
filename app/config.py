# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
from typing import Optional
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
# API Settings
_API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:3000/api")
_API_TIMEOUT = int(os.getenv("API_TIMEOUT", "30"))
_API_VERIFY_SSL = os.getenv("API_VERIFY_SSL", "true").lower() in ("true", "1", "yes")
_API_TOKEN = os.getenv("API_TOKEN", None)

# Wizard draft persistence: "settings" (QSettings), "file" or "memory"
_WIZARD_STORAGE = os.getenv("WIZARD_STORAGE", "settings").lower()


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "Biochar Tracker"
    APP_TITLE: str = "Biochar Carbon Removal - Supply Chain Data Entry"
    VERSION: str = "1.0.0"
    ORGANIZATION: str = "Biochar Tracker"

    # HTTP API Backend Settings
    API_BASE_URL: str = _API_BASE_URL
    API_TIMEOUT: int = _API_TIMEOUT
    API_VERIFY_SSL: bool = _API_VERIFY_SSL
    API_TOKEN: Optional[str] = _API_TOKEN

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    DATA_DIR: Path = PROJECT_ROOT / "data"
    DRAFTS_DIR: Path = DATA_DIR / "drafts"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"

    # Wizard persistence
    WIZARD_STORAGE_BACKEND: str = _WIZARD_STORAGE
    SETTINGS_ORGANIZATION: str = "BiocharTracker"
    SETTINGS_APPLICATION: str = "wizards"

    # Logging
    LOG_FILE: str = "app.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3

    # UI Settings
    WINDOW_MIN_WIDTH: int = 900
    WINDOW_MIN_HEIGHT: int = 640

    # Date/Time Formats
    DATE_FORMAT: str = "%Y-%m-%d"
    QT_DATE_FORMAT: str = "yyyy-MM-dd"
    DATE_FORMAT_DISPLAY: str = "%d %b %Y"


# Wizard storage keys (one draft per entry flow)
class StorageKeys:
    PRODUCTION_WIZARD = "production-wizard"
    SEQUESTRATION_WIZARD = "sequestration-wizard"


# Controlled vocabularies
class Vocabularies:
    # Value, Label
    SEQUESTRATION_TYPES = [
        ("soil", "Soil Amendment"),
        ("compost", "Compost Blend"),
        ("construction", "Construction Material"),
        ("filtration", "Filtration Media"),
        ("other", "Other"),
    ]

    STORAGE_CONDITIONS = [
        ("covered_outdoor", "Covered Outdoor"),
        ("uncovered_outdoor", "Uncovered Outdoor"),
        ("indoor", "Indoor"),
        ("climate_controlled", "Climate Controlled"),
    ]

    @classmethod
    def get_label(cls, vocabulary: list, value: str) -> str:
        for code, label in vocabulary:
            if code == value:
                return label
        return value or ""
