#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Biochar Tracker - Supply chain data entry
Main entry point for the application

Usage:
    python main.py [production|sequestration]
"""

import sys
from pathlib import Path

# Add project directory to Python path (MUST be before any project imports)
sys.path.insert(0, str(Path(__file__).parent))

from PyQt5.QtWidgets import QApplication
from PyQt5.QtCore import Qt

from app.config import Config
from services.api_client import get_api_client
from services.exceptions import ApiException, NetworkException
from ui.error_handler import ErrorHandler
from ui.font_utils import set_application_default_font
from utils.logger import setup_logger

WIZARDS = ("production", "sequestration")


def _load_options(loader, label, logger):
    """Fetch dropdown options; the wizard still opens with none."""
    try:
        options = loader()
        logger.info(f">> Loaded {len(options)} {label}")
        return options
    except (ApiException, NetworkException) as e:
        message = ErrorHandler.handle(e, context=label, show_dialog=False)
        logger.warning(f">> Could not load {label} (continuing without): {message}")
        return []


def create_wizard(kind: str, logger):
    """Build the requested entry wizard with its options."""
    client = get_api_client()

    if kind == "production":
        from ui.wizards.production import ProductionWizard
        feedstock = _load_options(client.list_feedstock_deliveries, "feedstock deliveries", logger)
        return ProductionWizard(feedstock_options=feedstock, api_client=client)

    from ui.wizards.sequestration import SequestrationWizard
    batches = _load_options(client.list_production_batches, "production batches", logger)
    return SequestrationWizard(batch_options=batches, api_client=client)


def main():
    """Main application entry point."""

    kind = sys.argv[1] if len(sys.argv) > 1 else "production"
    if kind not in WIZARDS:
        print(f"Usage: python main.py [{'|'.join(WIZARDS)}]")
        sys.exit(2)

    # Set Qt attributes BEFORE creating QApplication
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    # Initialize logging
    logger = setup_logger()

    try:
        app = QApplication(sys.argv)
        app.setApplicationName(Config.APP_NAME)
        app.setOrganizationName(Config.ORGANIZATION)

        # Set application-wide default font BEFORE creating any widgets
        set_application_default_font()

        logger.info("=" * 80)
        logger.info(f"Starting {Config.APP_NAME} ({kind} wizard)")
        logger.info(f"API: {Config.API_BASE_URL}")
        logger.info("=" * 80)

        wizard = create_wizard(kind, logger)
        wizard.setWindowTitle(f"{Config.APP_NAME} - {wizard.get_wizard_title()}")
        wizard.setMinimumSize(Config.WINDOW_MIN_WIDTH, Config.WINDOW_MIN_HEIGHT)

        wizard.wizard_completed.connect(
            lambda result: ErrorHandler.show_success(wizard, "Record saved successfully.")
        )
        wizard.wizard_cancelled.connect(wizard.close)
        wizard.show()

        exit_code = app.exec_()
        logger.info(f"Application closed with exit code: {exit_code}")
        sys.exit(exit_code)

    except ImportError as e:
        error_msg = f"Import Error: {e}"
        print(f"\n[ERROR] {error_msg}")
        print("\nPossible causes:")
        print("1. Missing dependencies - Run: pip install -e .")
        print("2. Python path issue - Make sure you're in the correct directory")
        logger.exception(error_msg)
        sys.exit(1)

    except Exception as e:
        error_msg = f"Fatal error during application startup: {e}"
        print(f"\n[ERROR] {error_msg}")
        print(f"\nPlease check {Config.LOG_PATH} for details")
        logger.exception(error_msg)
        sys.exit(1)


if __name__ == "__main__":
    main()
