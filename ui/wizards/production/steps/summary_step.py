# -*- coding: utf-8 -*-
"""
Summary Step - Step 5 of the Production Batch Wizard (optional).

Notes plus a read-only summary of the accumulated data.
"""

from typing import Any, Dict, List, Tuple

from PyQt5.QtWidgets import QFormLayout, QFrame, QLabel, QTextEdit

from ui.wizards.framework import BaseStep
from ui.wizards.production.steps.output_biochar_step import conversion_rate
from services.wizard.step_validator import parse_date
from app.config import Config


def _tonnes(value) -> str:
    return f"{value:g} t" if isinstance(value, (int, float)) else "-"


def production_summary(data: Dict[str, Any]) -> List[Tuple[str, str]]:
    """Label/value rows describing a production batch draft."""
    production_date = parse_date(data.get("production_date"))
    rate = conversion_rate(
        data.get("input_feedstock_weight_tonnes"),
        data.get("output_biochar_weight_tonnes")
    )
    temperatures = [
        data.get(key) for key in ("temperature_min", "temperature_avg", "temperature_max")
    ]

    return [
        ("Production Date", production_date.strftime(Config.DATE_FORMAT_DISPLAY) if production_date else "-"),
        ("Input Weight", _tonnes(data.get("input_feedstock_weight_tonnes"))),
        ("Output Weight", _tonnes(data.get("output_biochar_weight_tonnes"))),
        ("Conversion Rate", f"{rate:.1f}%" if rate is not None else "-"),
        ("Temperature (min / avg / max)",
         " / ".join("-" if t is None else f"{t:g}°C" for t in temperatures)),
    ]


class SummaryStep(BaseStep):
    """Step 5: Notes and review."""

    step_id = "summary"

    def setup_ui(self):
        self.notes_input = QTextEdit()
        self.notes_input.setPlaceholderText("Any additional notes about this production batch...")
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
        self._render_summary()

    def collect_data(self) -> Dict[str, Any]:
        return {"notes": self.notes_input.toPlainText().strip() or None}

    def _render_summary(self):
        while self.summary_form.rowCount():
            self.summary_form.removeRow(0)
        for label, value in production_summary(self.controller.data):
            self.summary_form.addRow(label, QLabel(value))
