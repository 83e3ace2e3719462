# -*- coding: utf-8 -*-
"""
Sequestration Event Wizard.

Multi-step wizard for recording the delivery of biochar to a
sequestration site.

Steps:
1. Storage Flag - Was the biochar stored before delivery?
2. Storage Details - Location and period (only when stored)
3. Batch Linkage - Production batches and quantities
4. Delivery Info - Date, postcode and sequestration type
5. Regulatory - Permits (optional)
6. Notes & Summary - Notes and review (optional)
"""

from typing import Any, Dict, List, Optional

from ui.wizards.framework import BaseWizard, BaseStep, WizardStep
from ui.wizards.framework.wizard_storage import WizardStorage
from ui.wizards.sequestration.steps import (
    StorageFlagStep,
    StorageDetailsStep,
    BatchLinkageStep,
    DeliveryInfoStep,
    RegulatoryStep,
    SequestrationSummaryStep
)
from services.api_client import BiocharApiClient, get_api_client
from services.wizard.step_validator import SequestrationStepValidator
from app.config import StorageKeys
from utils.logger import get_logger

logger = get_logger(__name__)

STORAGE_DETAILS_STEP_ID = "storage_details"

SEQUESTRATION_STEPS = [
    WizardStep("storage_flag", "Storage", "Storage before delivery", is_valid=True),
    WizardStep(STORAGE_DETAILS_STEP_ID, "Storage Details", "Location and storage period"),
    WizardStep("batch_linkage", "Batches", "Production batches delivered"),
    WizardStep("delivery_info", "Delivery", "Final delivery details"),
    WizardStep("regulatory", "Regulatory", "Permits and licenses", is_optional=True),
    WizardStep("summary", "Notes & Summary", "Review and complete", is_optional=True),
]


def sequestration_steps(storage_before_delivery: bool) -> List[WizardStep]:
    """Step list for the flow, with Storage Details only when stored."""
    if storage_before_delivery:
        return list(SEQUESTRATION_STEPS)
    return [step for step in SEQUESTRATION_STEPS if step.id != STORAGE_DETAILS_STEP_ID]


class SequestrationWizard(BaseWizard):
    """Sequestration event entry wizard."""

    def __init__(
        self,
        batch_options: Optional[List[Dict[str, Any]]] = None,
        initial_data: Optional[Dict[str, Any]] = None,
        event_id: Optional[str] = None,
        api_client: Optional[BiocharApiClient] = None,
        storage: Optional[WizardStorage] = None,
        parent=None
    ):
        """
        Args:
            batch_options: Production batches offered in the linkage step
            initial_data: Existing event values when editing
            event_id: Event being edited; None creates a new event
            api_client: Submission collaborator (defaults to the shared client)
            storage: Draft store
        """
        self.batch_options = batch_options or []
        self.event_id = event_id
        self._initial_data = dict(initial_data or {})
        self.api_client = api_client
        super().__init__(storage=storage, parent=parent)

    def create_initial_steps(self) -> List[WizardStep]:
        return sequestration_steps(bool(self.get_initial_data().get("storage_before_delivery")))

    def create_step_widgets(self) -> Dict[str, BaseStep]:
        validator = SequestrationStepValidator
        steps = [
            StorageFlagStep(self.controller, validator),
            StorageDetailsStep(self.controller, validator),
            BatchLinkageStep(self.controller, validator, batch_options=self.batch_options),
            DeliveryInfoStep(self.controller, validator),
            RegulatoryStep(self.controller, validator),
            SequestrationSummaryStep(self.controller, validator),
        ]
        return {step.step_id: step for step in steps}

    def resolve_steps(self, data: Dict[str, Any]) -> List[WizardStep]:
        """Steps for the storage answer in data, keeping known validity."""
        known = {step.id: step for step in self.controller.steps}
        resolved = []
        for step in sequestration_steps(bool(data.get("storage_before_delivery"))):
            current = known.get(step.id)
            resolved.append(step.with_validity(current.is_valid) if current else step)
        return resolved

    def _on_data_changed(self, partial: dict):
        if "storage_before_delivery" not in partial:
            return

        steps = self.resolve_steps(self.controller.data)
        if [s.id for s in steps] == [s.id for s in self.controller.steps]:
            return

        logger.info(f"Storage before delivery: {partial['storage_before_delivery']}, rebuilding steps")
        self.controller.update_steps(steps)

        details = self.step_widgets.get(STORAGE_DETAILS_STEP_ID)
        if details is not None and self.controller.index_of(STORAGE_DETAILS_STEP_ID) >= 0:
            details.initialize()
            details.refresh_validity()

    def get_storage_key(self) -> Optional[str]:
        return None if self.event_id else StorageKeys.SEQUESTRATION_WIZARD

    def get_initial_data(self) -> Dict[str, Any]:
        data = {"storage_before_delivery": False, "production_batches": []}
        data.update(self._initial_data)
        return data

    def get_wizard_title(self) -> str:
        return "Edit Sequestration Event" if self.event_id else "New Sequestration Event"

    def get_submit_button_text(self) -> str:
        return "Save Event" if self.event_id else "Create Event"

    def get_error_context(self) -> str:
        return "sequestration"

    def build_payload(self, data: Dict[str, Any]) -> Dict[str, Any]:
        payload = dict(data)
        if not payload.get("storage_before_delivery"):
            for key in ("storage_location", "storage_start_date", "storage_end_date",
                        "storage_container_ids", "storage_conditions"):
                payload.pop(key, None)
        payload["status"] = "complete"
        payload["wizard_step"] = len(SEQUESTRATION_STEPS)
        return payload

    def on_submit(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        client = self.api_client or get_api_client()
        if self.event_id:
            logger.info(f"Updating sequestration event {self.event_id}")
            return client.update_sequestration_event(self.event_id, payload)
        logger.info("Creating sequestration event")
        return client.create_sequestration_event(payload)
