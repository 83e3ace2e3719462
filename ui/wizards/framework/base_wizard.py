# -*- coding: utf-8 -*-
"""
Base Wizard - Abstract base class for all entry wizards.

Provides unified wizard UI with:
- Stepper header with title and progress
- Content area (current step title, description, step widget)
- Inline error label
- Navigation footer (Cancel, Previous, Skip, Next/Complete)

The session is rehydrated before any step content is built, so a resumed
draft never flashes default values.
"""

from typing import Any, Dict, List, Optional
from abc import ABCMeta, abstractmethod

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QLabel, QFrame, QStackedWidget, QScrollArea
)
from PyQt5.QtCore import pyqtSignal

from .base_step import BaseStep
from .wizard_controller import WizardController
from .wizard_step import WizardStep
from .wizard_storage import WizardStorage
from ui.components.wizard_footer import WizardNavigation
from ui.components.wizard_header import WizardStepper
from ui.design_system import Colors
from ui.font_utils import create_font, FontManager
from services.error_mapper import map_exception
from services.exceptions import ApiException, NetworkException, ValidationException
from utils.logger import get_logger

logger = get_logger(__name__)


# Combine PyQt5 metaclass with ABC metaclass
class ABCQWidgetMeta(type(QWidget), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class BaseWizard(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for wizards.

    Subclasses must implement:
    - create_initial_steps(): Step descriptors in traversal order
    - create_step_widgets(): One BaseStep per step id
    - on_submit(payload): Send the accumulated data, return the API result

    And may override:
    - get_storage_key() / get_initial_data()
    - resolve_steps(data): Step list derived from data (conditional steps)
    - build_payload(data): Final submission body
    """

    # Signals
    wizard_completed = pyqtSignal(dict)
    wizard_cancelled = pyqtSignal()

    def __init__(self, storage: Optional[WizardStorage] = None, parent: Optional[QWidget] = None):
        """
        Initialize the wizard.

        Args:
            storage: Snapshot store (defaults to the configured backend)
            parent: Parent widget
        """
        super().__init__(parent)

        self.controller = WizardController(
            self.create_initial_steps(),
            storage_key=self.get_storage_key(),
            initial_data=self.get_initial_data(),
            storage=storage,
            parent=self
        )
        self.controller.initialize(self.resolve_steps)

        self.step_widgets: Dict[str, BaseStep] = self.create_step_widgets()
        self._active_widget: Optional[BaseStep] = None

        self._setup_ui()

        self._restore_all()

        self.controller.step_changed.connect(self._on_step_changed)
        self.controller.steps_changed.connect(self._update_content_header)
        self.controller.data_changed.connect(self._on_data_changed)
        self.controller.submitting_changed.connect(self._on_submitting_changed)

        self._show_current_step()

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def create_initial_steps(self) -> List[WizardStep]:
        """Return the step descriptors in traversal order."""
        pass

    @abstractmethod
    def create_step_widgets(self) -> Dict[str, BaseStep]:
        """Return the content widget for every step id the flow can show."""
        pass

    @abstractmethod
    def on_submit(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Submit the accumulated data.

        Raises:
            ApiException, NetworkException or ValidationException on failure
        """
        pass

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def get_wizard_title(self) -> str:
        return "Wizard"

    def get_submit_button_text(self) -> str:
        return "Complete"

    def get_storage_key(self) -> Optional[str]:
        """Snapshot key; None disables draft persistence."""
        return None

    def get_initial_data(self) -> Dict[str, Any]:
        return {}

    def get_error_context(self) -> str:
        return self.__class__.__name__

    def resolve_steps(self, data: Dict[str, Any]) -> List[WizardStep]:
        """Step list for the given data. Default: the current list."""
        return self.controller.steps

    def build_payload(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return dict(data)

    def validate_all(self) -> List[str]:
        """Errors of every required step, gathered from the step widgets."""
        errors = []
        for step in self.controller.steps:
            if step.is_optional:
                continue
            widget = self.step_widgets.get(step.id)
            if widget is None:
                continue
            widget.reveal_errors()
            errors.extend(widget.refresh_validity().errors)
        return errors

    # =========================================================================
    # UI Setup
    # =========================================================================

    def _setup_ui(self):
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        self.stepper = WizardStepper(self.controller, title=self.get_wizard_title())
        main_layout.addWidget(self.stepper)

        separator = QFrame()
        separator.setFrameShape(QFrame.HLine)
        separator.setStyleSheet(f"background-color: {Colors.BORDER_DEFAULT};")
        separator.setFixedHeight(1)
        main_layout.addWidget(separator)

        content = QWidget()
        content_layout = QVBoxLayout(content)
        content_layout.setContentsMargins(20, 16, 20, 16)
        content_layout.setSpacing(8)

        self.step_title_label = QLabel()
        self.step_title_label.setFont(create_font(size=FontManager.SIZE_HEADING, weight=FontManager.WEIGHT_SEMIBOLD))
        content_layout.addWidget(self.step_title_label)

        self.step_description_label = QLabel()
        self.step_description_label.setStyleSheet(f"color: {Colors.TEXT_SECONDARY};")
        content_layout.addWidget(self.step_description_label)

        self.error_label = QLabel()
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(f"color: {Colors.ERROR};")
        self.error_label.hide()
        content_layout.addWidget(self.error_label)

        self.step_container = QStackedWidget()
        for widget in self.step_widgets.values():
            self.step_container.addWidget(widget)
        content_layout.addWidget(self.step_container, 1)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.NoFrame)
        scroll.setWidget(content)
        main_layout.addWidget(scroll, 1)

        self.navigation = WizardNavigation(
            self.controller,
            complete_label=self.get_submit_button_text()
        )
        self.navigation.complete_requested.connect(self._handle_complete)
        self.navigation.cancel_clicked.connect(self._handle_cancel)
        main_layout.addWidget(self.navigation)

    # =========================================================================
    # Event Handlers
    # =========================================================================

    def _restore_all(self):
        """Every widget reports its validity so the stepper and guards match the data."""
        for widget in self.step_widgets.values():
            widget.initialize()
            widget.reveal_errors(False)
            widget.restore()

    def _show_current_step(self):
        step = self.controller.current_step
        widget = self.step_widgets.get(step.id)

        if self._active_widget is not None and self._active_widget is not widget:
            self._active_widget.on_hide()

        self._active_widget = widget
        if widget is not None:
            self.step_container.setCurrentWidget(widget)
            widget.on_show()
        else:
            logger.warning(f"No widget registered for step '{step.id}'")

        self._update_content_header()

    def _update_content_header(self):
        step = self.controller.current_step
        self.step_title_label.setText(step.title)
        self.step_description_label.setText(step.description)
        self.step_description_label.setVisible(bool(step.description))

    def _on_step_changed(self, old_index: int, new_index: int):
        self.clear_error()
        self._show_current_step()

    def _on_data_changed(self, partial: dict):
        """Hook for flows whose step list depends on captured answers."""
        pass

    def _on_submitting_changed(self, is_submitting: bool):
        self.step_container.setEnabled(not is_submitting)

    # =========================================================================
    # Actions
    # =========================================================================

    def _handle_complete(self):
        self.controller.complete(self._submit)

    def _submit(self):
        if self._active_widget is not None:
            self._active_widget.commit()

        errors = self.validate_all()
        if errors:
            self.show_error(map_exception(
                ValidationException("Please complete the required fields", errors=errors),
                self.get_error_context()
            ))
            return

        payload = self.build_payload(self.controller.data)
        self.controller.set_submitting(True)
        try:
            result = self.on_submit(payload)
        except (ApiException, NetworkException, ValidationException) as e:
            logger.error(f"Submission failed: {e}")
            self.show_error(map_exception(e, self.get_error_context()))
            return
        finally:
            self.controller.set_submitting(False)

        logger.info(f"{self.get_wizard_title()} submitted")
        self.controller.reset()
        self._restore_all()
        self.wizard_completed.emit(result if isinstance(result, dict) else {})

    def _handle_cancel(self):
        logger.info(f"{self.get_wizard_title()} cancelled")
        self.controller.reset()
        self._restore_all()
        self.wizard_cancelled.emit()

    def show_error(self, message: str):
        self.error_label.setText(message)
        self.error_label.show()

    def clear_error(self):
        self.error_label.clear()
        self.error_label.hide()
