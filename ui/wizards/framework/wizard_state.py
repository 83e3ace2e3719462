# -*- coding: utf-8 -*-
"""
Wizard State - The mutable session behind a wizard.

Owns:
- The ordered step list
- The current position
- The accumulated data bag (union of every field captured so far)
- Snapshot persistence under an optional storage key

The state knows nothing about validation or UI; navigation rules live in
WizardController. Snapshots are stored as JSON:

    {"current_step_index": 2, "data": {...}}

There is no schema version. Step ids must stay stable between releases for
a resumed snapshot to make sense.
"""

import json
from typing import Any, Callable, Dict, List, Mapping, Optional

from .wizard_step import WizardStep, ensure_unique_ids
from .wizard_storage import WizardStorage, create_wizard_storage
from utils.logger import get_logger

logger = get_logger(__name__)

StepsResolver = Callable[[Dict[str, Any]], List[WizardStep]]


class WizardState:
    """
    Wizard session state.

    Usage:
        state = WizardState(steps, storage_key="production-wizard",
                            storage=MemoryWizardStorage())
        state.initialize()
        state.update_data({"production_date": "2026-01-05"})
        state.set_current_step_index(1)
    """

    def __init__(
        self,
        initial_steps: List[WizardStep],
        storage_key: Optional[str] = None,
        initial_data: Optional[Mapping[str, Any]] = None,
        storage: Optional[WizardStorage] = None
    ):
        """
        Args:
            initial_steps: Ordered steps; order defines traversal order
            storage_key: Snapshot key; no persistence when None
            initial_data: Starting data bag, also restored by reset()
            storage: Snapshot store (defaults to the configured backend)
        """
        self._initial_steps = ensure_unique_ids(initial_steps)
        self._initial_data: Dict[str, Any] = dict(initial_data or {})
        self.storage_key = storage_key

        if storage is None and storage_key:
            storage = create_wizard_storage()
        self.storage = storage

        self._steps: List[WizardStep] = list(self._initial_steps)
        self._current_step_index = 0
        self._data: Dict[str, Any] = dict(self._initial_data)
        self._is_initialized = False

    # =========================================================================
    # Read access
    # =========================================================================

    @property
    def steps(self) -> List[WizardStep]:
        return list(self._steps)

    @property
    def current_step_index(self) -> int:
        return self._current_step_index

    @property
    def data(self) -> Dict[str, Any]:
        """Copy of the data bag; mutate through update_data()."""
        return dict(self._data)

    @property
    def is_initialized(self) -> bool:
        return self._is_initialized

    @property
    def initial_data(self) -> Dict[str, Any]:
        return dict(self._initial_data)

    def snapshot(self) -> Dict[str, Any]:
        """Return the persisted pair of position and data."""
        return {
            "current_step_index": self._current_step_index,
            "data": dict(self._data),
        }

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def initialize(self, resolve_steps: Optional[StepsResolver] = None):
        """
        Load the persisted snapshot, if any, exactly once.

        A snapshot overrides initial_data and the starting index. A corrupt
        snapshot is discarded and the session starts from the initial values.

        Args:
            resolve_steps: Optional hook rebuilding the step list from the
                loaded data (for flows whose steps depend on earlier answers)
        """
        if self._is_initialized:
            return

        snapshot = self._load_snapshot()
        if snapshot is not None:
            self._current_step_index = snapshot["current_step_index"]
            self._data = snapshot["data"]
            logger.info(
                f"Resumed wizard '{self.storage_key}' at step {self._current_step_index} "
                f"with {len(self._data)} field(s)"
            )

        if resolve_steps is not None:
            self._steps = ensure_unique_ids(resolve_steps(dict(self._data)))

        self._current_step_index = self._clamp(self._current_step_index)
        self._is_initialized = True

    def _load_snapshot(self) -> Optional[Dict[str, Any]]:
        """Read and validate the stored snapshot; None when missing or corrupt."""
        if not self.storage_key or self.storage is None:
            return None

        try:
            raw = self.storage.get(self.storage_key)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read wizard snapshot '{self.storage_key}': {e}")
            return None

        if not raw:
            return None

        try:
            parsed = json.loads(raw)
        except ValueError as e:
            logger.warning(f"Discarding unparseable wizard snapshot '{self.storage_key}': {e}")
            return None

        if not isinstance(parsed, dict):
            logger.warning(f"Discarding wizard snapshot '{self.storage_key}': not an object")
            return None

        index = parsed.get("current_step_index")
        data = parsed.get("data")
        if isinstance(index, bool) or not isinstance(index, int) or not isinstance(data, dict):
            logger.warning(
                f"Discarding wizard snapshot '{self.storage_key}': "
                f"unexpected shape (index={index!r}, data type={type(data).__name__})"
            )
            return None

        return {"current_step_index": index, "data": data}

    # =========================================================================
    # Mutations
    # =========================================================================

    def update_data(self, partial: Mapping[str, Any]):
        """Shallow-merge partial into the data bag."""
        self._data.update(partial)
        self._persist()

    def set_current_step_index(self, index: int):
        """Set the position directly. Bounds are the caller's responsibility."""
        self._current_step_index = index
        self._persist()

    def update_steps(self, new_steps: List[WizardStep]):
        """
        Replace the step list.

        When the new list is shorter the index is clamped to the last step.
        """
        self._steps = ensure_unique_ids(new_steps)
        clamped = self._clamp(self._current_step_index)
        if clamped != self._current_step_index:
            logger.debug(f"Step list shrank, clamping index {self._current_step_index} -> {clamped}")
            self._current_step_index = clamped
            self._persist()

    def reset(self):
        """Restore the initial steps, data and position, and drop the snapshot."""
        self._steps = list(self._initial_steps)
        self._current_step_index = 0
        self._data = dict(self._initial_data)

        if self.storage_key and self.storage is not None:
            try:
                self.storage.delete(self.storage_key)
            except OSError as e:
                logger.warning(f"Could not delete wizard snapshot '{self.storage_key}': {e}")
        logger.info(f"Wizard '{self.storage_key or 'unsaved'}' reset")

    # =========================================================================
    # Helpers
    # =========================================================================

    def _clamp(self, index: int) -> int:
        return max(0, min(index, len(self._steps) - 1))

    def _persist(self):
        """Write the snapshot once initialized. Failures are logged, never raised."""
        if not self._is_initialized or not self.storage_key or self.storage is None:
            return

        try:
            payload = json.dumps(self.snapshot(), ensure_ascii=False, default=str)
            self.storage.set(self.storage_key, payload)
        except (OSError, TypeError, ValueError) as e:
            logger.warning(f"Could not persist wizard snapshot '{self.storage_key}': {e}")
