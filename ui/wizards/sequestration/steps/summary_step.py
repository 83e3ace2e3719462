# -*- coding: utf-8 -*-
"""
Summary Step - Step 6 of the Sequestration Event Wizard (optional).
"""

from typing import Any, Dict, List, Tuple

from PyQt5.QtWidgets import QFormLayout, QFrame, QLabel, QTextEdit

from ui.wizards.framework import BaseStep
from services.wizard.step_validator import parse_date, to_number
from app.config import Config, Vocabularies


def _display_date(value) -> str:
    parsed = parse_date(value)
    return parsed.strftime(Config.DATE_FORMAT_DISPLAY) if parsed else "-"


def sequestration_summary(data: Dict[str, Any]) -> List[Tuple[str, str]]:
    """Label/value rows describing a sequestration event draft."""
    batches = data.get("production_batches") or []
    total = sum(to_number(link.get("quantity_tonnes")) or 0 for link in batches)

    sequestration_type = data.get("sequestration_type")
    if sequestration_type == "other" and data.get("sequestration_type_other"):
        type_label = f"Other: {data['sequestration_type_other']}"
    else:
        type_label = Vocabularies.get_label(Vocabularies.SEQUESTRATION_TYPES, sequestration_type) or "-"

    rows = [("Storage Before Delivery", "Yes" if data.get("storage_before_delivery") else "No")]
    if data.get("storage_before_delivery"):
        rows.append(("Storage Location", data.get("storage_location") or "-"))
        rows.append(("Storage Period", f"{_display_date(data.get('storage_start_date'))} - "
                                       f"{_display_date(data.get('storage_end_date'))}"))
    rows.extend([
        ("Linked Batches", f"{len(batches)} ({total:g} t)"),
        ("Delivery Date", _display_date(data.get("final_delivery_date"))),
        ("Delivery Postcode", data.get("delivery_postcode") or "-"),
        ("Sequestration Type", type_label),
    ])
    return rows


class SequestrationSummaryStep(BaseStep):
    """Step 6: Notes and review."""

    step_id = "summary"

    def setup_ui(self):
        self.notes_input = QTextEdit()
        self.notes_input.setPlaceholderText("Any additional notes about this sequestration event...")
        self.notes_input.setFixedHeight(90)
        self.notes_input.textChanged.connect(self.on_field_changed)
        self.main_layout.addWidget(QLabel("Notes"))
        self.main_layout.addWidget(self.notes_input)

        card = QFrame()
        card.setStyleSheet("QFrame { background-color: #FFFFFF; border: 1px solid #DEE2E6; border-radius: 8px; }")
        self.summary_form = QFormLayout(card)
        self.main_layout.addWidget(card)
        self.main_layout.addStretch()

    def populate_data(self):
        self.notes_input.setPlainText(self.get_value("notes") or "")
        while self.summary_form.rowCount():
            self.summary_form.removeRow(0)
        for label, value in sequestration_summary(self.controller.data):
            self.summary_form.addRow(label, QLabel(value))

    def collect_data(self) -> Dict[str, Any]:
        return {"notes": self.notes_input.toPlainText().strip() or None}
