# -*- coding: utf-8 -*-
"""
Production Batch Wizard.

Multi-step wizard for recording a biochar production batch.

Steps:
1. Basic Info - Production date and feedstock delivery
2. Input Feedstock - Input weight
3. Output Biochar - Output weight
4. Temperature - Temperature profile (optional)
5. Notes & Summary - Notes and review (optional)

New batches keep a draft under StorageKeys.PRODUCTION_WIZARD; editing an
existing batch is never persisted.
"""

from datetime import date
from typing import Any, Dict, List, Optional

from ui.wizards.framework import BaseWizard, BaseStep, WizardStep
from ui.wizards.framework.wizard_storage import WizardStorage
from ui.wizards.production.steps import (
    BasicInfoStep,
    InputFeedstockStep,
    OutputBiocharStep,
    TemperatureStep,
    SummaryStep
)
from services.api_client import BiocharApiClient, get_api_client
from services.wizard.step_validator import ProductionStepValidator
from app.config import Config, StorageKeys
from utils.logger import get_logger

logger = get_logger(__name__)

PRODUCTION_STEPS = [
    WizardStep("basic_info", "Basic Info", "Production date and feedstock delivery"),
    WizardStep("input_feedstock", "Input Feedstock", "Feedstock weight used"),
    WizardStep("output_biochar", "Output Biochar", "Output weight produced"),
    WizardStep("temperature", "Temperature", "Temperature profile data", is_optional=True),
    WizardStep("summary", "Notes & Summary", "Review and complete", is_optional=True),
]


class ProductionWizard(BaseWizard):
    """Production batch entry wizard."""

    def __init__(
        self,
        feedstock_options: Optional[List[Dict[str, Any]]] = None,
        initial_data: Optional[Dict[str, Any]] = None,
        batch_id: Optional[str] = None,
        api_client: Optional[BiocharApiClient] = None,
        storage: Optional[WizardStorage] = None,
        parent=None
    ):
        """
        Args:
            feedstock_options: Deliveries offered in step 1
            initial_data: Existing batch values when editing
            batch_id: Batch being edited; None creates a new batch
            api_client: Submission collaborator (defaults to the shared client)
            storage: Draft store
        """
        self.feedstock_options = feedstock_options or []
        self.batch_id = batch_id
        self._initial_data = dict(initial_data or {})
        self.api_client = api_client
        super().__init__(storage=storage, parent=parent)

    def create_initial_steps(self) -> List[WizardStep]:
        return list(PRODUCTION_STEPS)

    def create_step_widgets(self) -> Dict[str, BaseStep]:
        validator = ProductionStepValidator
        steps = [
            BasicInfoStep(self.controller, validator, feedstock_options=self.feedstock_options),
            InputFeedstockStep(self.controller, validator),
            OutputBiocharStep(self.controller, validator),
            TemperatureStep(self.controller, validator),
            SummaryStep(self.controller, validator),
        ]
        return {step.step_id: step for step in steps}

    def get_storage_key(self) -> Optional[str]:
        return None if self.batch_id else StorageKeys.PRODUCTION_WIZARD

    def get_initial_data(self) -> Dict[str, Any]:
        data = {"production_date": date.today().strftime(Config.DATE_FORMAT)}
        data.update(self._initial_data)
        return data

    def get_wizard_title(self) -> str:
        return "Edit Production Batch" if self.batch_id else "New Production Batch"

    def get_submit_button_text(self) -> str:
        return "Save Batch" if self.batch_id else "Create Batch"

    def get_error_context(self) -> str:
        return "production"

    def build_payload(self, data: Dict[str, Any]) -> Dict[str, Any]:
        payload = dict(data)
        payload["status"] = "complete"
        payload["wizard_step"] = len(PRODUCTION_STEPS)
        return payload

    def on_submit(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        client = self.api_client or get_api_client()
        if self.batch_id:
            logger.info(f"Updating production batch {self.batch_id}")
            return client.update_production_batch(self.batch_id, payload)
        logger.info("Creating production batch")
        return client.create_production_batch(payload)
