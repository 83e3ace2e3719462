# -*- coding: utf-8 -*-
"""
Wizard Controller - Navigation guards and action verbs over a WizardState.

Handles:
- Derived view (current step, first/last, progress)
- Guard predicates (can_go_next / can_go_previous)
- Verbs (go_next, go_previous, skip, go_to_step, complete)
- Validity reports from step widgets

Navigation never raises: a verb is either applied (returns True) or is a
no-op (returns False). While is_submitting is set every verb is a no-op.

The controller is built once per flow and passed explicitly to every widget
that needs it.
"""

from typing import Any, Callable, Dict, List, Mapping, Optional

from PyQt5.QtCore import QObject, pyqtSignal

from .wizard_state import StepsResolver, WizardState
from .wizard_step import WizardStep
from .wizard_storage import WizardStorage
from utils.logger import get_logger

logger = get_logger(__name__)


class WizardController(QObject):
    """
    Drives a wizard session.

    Usage:
        controller = WizardController(steps, storage_key="production-wizard")
        controller.initialize()
        controller.set_step_valid("basic_info", True)
        controller.go_next()
    """

    # Signals
    step_changed = pyqtSignal(int, int)  # old_index, new_index
    steps_changed = pyqtSignal()
    data_changed = pyqtSignal(dict)  # merged partial
    navigation_changed = pyqtSignal()
    submitting_changed = pyqtSignal(bool)

    def __init__(
        self,
        initial_steps: List[WizardStep],
        storage_key: Optional[str] = None,
        initial_data: Optional[Mapping[str, Any]] = None,
        storage: Optional[WizardStorage] = None,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.state = WizardState(
            initial_steps,
            storage_key=storage_key,
            initial_data=initial_data,
            storage=storage
        )
        self._is_submitting = False

    def initialize(self, resolve_steps: Optional[StepsResolver] = None):
        """Rehydrate the session. Hosts must call this before rendering steps."""
        if self.state.is_initialized:
            return
        self.state.initialize(resolve_steps)
        logger.debug(
            f"Wizard initialized: {len(self.steps)} steps, "
            f"starting at {self.current_step_index}"
        )
        self.steps_changed.emit()
        self.step_changed.emit(0, self.current_step_index)
        self.navigation_changed.emit()

    # =========================================================================
    # Derived view
    # =========================================================================

    @property
    def is_initialized(self) -> bool:
        return self.state.is_initialized

    @property
    def steps(self) -> List[WizardStep]:
        return self.state.steps

    @property
    def data(self) -> Dict[str, Any]:
        return self.state.data

    @property
    def current_step_index(self) -> int:
        return self.state.current_step_index

    @property
    def current_step(self) -> WizardStep:
        steps = self.state.steps
        index = self.state.current_step_index
        if 0 <= index < len(steps):
            return steps[index]
        return steps[0]

    @property
    def is_first_step(self) -> bool:
        return self.current_step_index == 0

    @property
    def is_last_step(self) -> bool:
        return self.current_step_index == len(self.state.steps) - 1

    @property
    def can_go_previous(self) -> bool:
        return not self.is_first_step

    @property
    def can_go_next(self) -> bool:
        return self.current_step.can_leave()

    @property
    def progress(self) -> float:
        """Progress percentage, counting the current step as reached."""
        return (self.current_step_index + 1) / len(self.state.steps) * 100.0

    @property
    def is_submitting(self) -> bool:
        return self._is_submitting

    def index_of(self, step_id: str) -> int:
        """Position of a step id, or -1 when it is not in the list."""
        for index, step in enumerate(self.state.steps):
            if step.id == step_id:
                return index
        return -1

    # =========================================================================
    # Verbs
    # =========================================================================

    def go_next(self) -> bool:
        """Advance one step when the current step allows it."""
        if self._is_submitting:
            return False
        if not self.can_go_next:
            logger.debug(f"Cannot go next: step '{self.current_step.id}' is not valid")
            return False
        if self.is_last_step:
            logger.debug("Cannot go next: already at last step")
            return False
        return self._move_to(self.current_step_index + 1)

    def go_previous(self) -> bool:
        """Go back one step."""
        if self._is_submitting:
            return False
        if not self.can_go_previous:
            logger.debug("Cannot go previous: already at first step")
            return False
        return self._move_to(self.current_step_index - 1)

    def skip(self) -> bool:
        """Advance past an optional step regardless of its validity."""
        if self._is_submitting:
            return False
        step = self.current_step
        if not step.is_optional:
            logger.debug(f"Cannot skip required step '{step.id}'")
            return False
        if self.is_last_step:
            return False
        logger.info(f"Skipping optional step '{step.id}'")
        return self._move_to(self.current_step_index + 1)

    def go_to_step(self, index: int) -> bool:
        """
        Jump to a step.

        Backward jumps are always allowed. A forward jump requires every step
        from the current one up to (not including) the target to be valid or
        optional.
        """
        if self._is_submitting:
            return False

        steps = self.state.steps
        if index < 0 or index >= len(steps):
            logger.debug(f"Ignoring jump to invalid index {index}")
            return False

        current = self.current_step_index
        if index == current:
            return False

        blocker = self.blocking_step(index)
        if blocker is not None:
            logger.debug(f"Jump to {index} blocked by step '{blocker.id}'")
            return False

        return self._move_to(index)

    def blocking_step(self, index: int) -> Optional[WizardStep]:
        """First step between the current one and `index` that cannot be left, if any."""
        for step in self.state.steps[self.current_step_index:index]:
            if not step.can_leave():
                return step
        return None

    def complete(self, on_complete: Callable[[], Any]) -> bool:
        """Invoke the host's completion callback from the last step."""
        if self._is_submitting:
            logger.debug("Ignoring complete: submission in progress")
            return False
        if not self.is_last_step:
            logger.debug("Ignoring complete: not on the last step")
            return False

        logger.info("Completing wizard")
        on_complete()
        return True

    def _move_to(self, new_index: int) -> bool:
        old_index = self.current_step_index
        self.state.set_current_step_index(new_index)
        logger.info(f"Navigating: Step {old_index} → {new_index} ({self.current_step.id})")
        self.step_changed.emit(old_index, new_index)
        self.navigation_changed.emit()
        return True

    # =========================================================================
    # Forwarded mutations
    # =========================================================================

    def update_data(self, partial: Mapping[str, Any]):
        """Merge fields into the shared data bag."""
        partial = dict(partial)
        self.state.update_data(partial)
        self.data_changed.emit(partial)

    def update_steps(self, new_steps: List[WizardStep]):
        """Replace the step list, clamping the position when it shrinks."""
        old_index = self.current_step_index
        self.state.update_steps(new_steps)
        logger.debug(f"Steps updated: {[step.id for step in self.state.steps]}")

        self.steps_changed.emit()
        if self.current_step_index != old_index:
            self.step_changed.emit(old_index, self.current_step_index)
        self.navigation_changed.emit()

    def set_step_valid(self, step_id: str, is_valid: bool):
        """Record the validity a step widget reports for its own data."""
        steps = self.state.steps
        changed = False
        for position, step in enumerate(steps):
            if step.id != step_id:
                continue
            if not callable(step.is_valid) and step.is_valid == is_valid:
                return
            steps[position] = step.with_validity(is_valid)
            changed = True
            break

        if not changed:
            return

        logger.debug(f"Step '{step_id}' is now {'valid' if is_valid else 'invalid'}")
        self.state.update_steps(steps)
        self.steps_changed.emit()
        self.navigation_changed.emit()

    def set_submitting(self, is_submitting: bool):
        """Block every verb while an external submission is running."""
        if is_submitting == self._is_submitting:
            return
        self._is_submitting = is_submitting
        self.submitting_changed.emit(is_submitting)
        self.navigation_changed.emit()

    def reset(self):
        """Restart the flow and clear the persisted snapshot."""
        old_index = self.current_step_index
        self.state.reset()

        self.steps_changed.emit()
        self.data_changed.emit(self.state.data)
        if old_index != 0:
            self.step_changed.emit(old_index, 0)
        self.navigation_changed.emit()
