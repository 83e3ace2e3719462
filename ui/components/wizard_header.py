# -*- coding: utf-8 -*-
"""
Wizard Stepper Component - Header showing progress through a wizard.

Features:
- Title
- One indicator per step (checkmark once passed, number otherwise)
- "Step X of N" label and progress bar
"""

from typing import List, Optional

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QProgressBar
)
from PyQt5.QtCore import Qt

from ui.design_system import Colors, StepperDimensions
from ui.font_utils import create_font, FontManager

CHECKMARK = "✓"


class WizardStepper(QWidget):
    """
    Step indicator header.

    An indicator is clickable when its step lies behind the current one or
    when the step is valid or optional. Clicks call controller.go_to_step().

    Usage:
        stepper = WizardStepper(controller, title="New Production Batch")
    """

    def __init__(self, controller: 'WizardController', title: str = "", parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.controller = controller
        self.title_text = title
        self.indicators: List[QPushButton] = []

        self._setup_ui()

        self.controller.steps_changed.connect(self.rebuild)
        self.controller.step_changed.connect(lambda _old, _new: self.refresh())
        self.controller.navigation_changed.connect(self.refresh)
        self.rebuild()

    def _setup_ui(self):
        self.setStyleSheet(f"""
            QWidget {{
                background-color: {Colors.BACKGROUND};
            }}
        """)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        self.title_label = QLabel(self.title_text)
        self.title_label.setFont(create_font(size=FontManager.SIZE_TITLE, weight=FontManager.WEIGHT_SEMIBOLD))
        self.title_label.setStyleSheet(f"color: {Colors.TEXT_PRIMARY};")
        layout.addWidget(self.title_label)

        self.indicator_row = QHBoxLayout()
        self.indicator_row.setSpacing(16)
        layout.addLayout(self.indicator_row)

        progress_layout = QHBoxLayout()
        progress_layout.setSpacing(8)

        self.progress_label = QLabel()
        self.progress_label.setStyleSheet(f"color: {Colors.TEXT_SECONDARY};")
        progress_layout.addWidget(self.progress_label)

        self.progress_bar = QProgressBar()
        self.progress_bar.setMaximum(100)
        self.progress_bar.setTextVisible(False)
        self.progress_bar.setFixedHeight(StepperDimensions.PROGRESS_HEIGHT)
        self.progress_bar.setStyleSheet(f"""
            QProgressBar {{
                border: none;
                background-color: {Colors.DIVIDER};
                border-radius: 3px;
            }}
            QProgressBar::chunk {{
                background-color: {Colors.PRIMARY};
                border-radius: 3px;
            }}
        """)
        progress_layout.addWidget(self.progress_bar, 1)
        layout.addLayout(progress_layout)

    def rebuild(self):
        """Recreate the indicators after the step list changed."""
        while self.indicator_row.count():
            item = self.indicator_row.takeAt(0)
            if item.widget():
                item.widget().deleteLater()

        self.indicators = []
        for index, step in enumerate(self.controller.steps):
            cell = QWidget()
            cell_layout = QVBoxLayout(cell)
            cell_layout.setContentsMargins(0, 0, 0, 0)
            cell_layout.setSpacing(4)

            button = QPushButton()
            button.setFixedSize(StepperDimensions.INDICATOR_SIZE, StepperDimensions.INDICATOR_SIZE)
            button.clicked.connect(lambda _checked=False, i=index: self.controller.go_to_step(i))
            cell_layout.addWidget(button, 0, Qt.AlignHCenter)

            label = QLabel(step.title)
            label.setFont(create_font(size=FontManager.SIZE_BODY, weight=FontManager.WEIGHT_MEDIUM))
            label.setAlignment(Qt.AlignHCenter)
            if step.description:
                label.setToolTip(step.description)
            cell_layout.addWidget(label)

            self.indicator_row.addWidget(cell)
            self.indicators.append(button)

        self.indicator_row.addStretch()
        self.refresh()

    def refresh(self):
        """Update indicator states, progress label and bar."""
        controller = self.controller
        current = controller.current_step_index
        steps = controller.steps

        for index, (button, step) in enumerate(zip(self.indicators, steps)):
            is_past = index < current
            is_current = index == current
            button.setText(CHECKMARK if is_past else str(index + 1))
            button.setEnabled(self.is_navigable(index) and not controller.is_submitting)
            button.setStyleSheet(self._indicator_style(is_past, is_current))

        self.progress_label.setText(f"Step {current + 1} of {len(steps)}")
        self.progress_bar.setValue(int(controller.progress))

    def is_navigable(self, index: int) -> bool:
        """Past steps, and later valid steps reachable through passable ones."""
        current = self.controller.current_step_index
        if index < current:
            return True
        if index == current or not self.controller.steps[index].can_leave():
            return False
        return self.controller.blocking_step(index) is None

    @staticmethod
    def _indicator_style(is_past: bool, is_current: bool) -> str:
        radius = StepperDimensions.INDICATOR_SIZE // 2
        if is_past:
            colors = f"background-color: {Colors.PRIMARY}; color: white; border: none;"
        elif is_current:
            colors = f"background-color: white; color: {Colors.PRIMARY}; border: 2px solid {Colors.PRIMARY};"
        else:
            colors = f"background-color: white; color: {Colors.TEXT_SECONDARY}; border: 2px solid {Colors.BORDER_DEFAULT};"
        return f"""
            QPushButton {{ {colors} border-radius: {radius}px; font-weight: 600; }}
            QPushButton:disabled {{ color: {Colors.TEXT_DISABLED}; }}
        """
