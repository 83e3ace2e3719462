# -*- coding: utf-8 -*-
"""
Wizard Step - Descriptor for one stage of a wizard flow.

A step only carries presentation text and two flags the engine reads:
- is_optional: the step may be bypassed without being valid
- is_valid: reported by the step's input widget, never computed here
"""

from dataclasses import dataclass, replace
from typing import Callable, Iterable, List, Union

Validity = Union[bool, Callable[[], bool]]


@dataclass
class WizardStep:
    """Descriptor of a single wizard step."""
    id: str
    title: str
    description: str = ""
    is_valid: Validity = False
    is_optional: bool = False

    def check_valid(self) -> bool:
        """Resolve is_valid whether it was given as a flag or a predicate."""
        if callable(self.is_valid):
            return bool(self.is_valid())
        return bool(self.is_valid)

    def can_leave(self) -> bool:
        """True when forward navigation out of this step is allowed."""
        return self.is_optional or self.check_valid()

    def with_validity(self, is_valid: bool) -> 'WizardStep':
        """Return a copy carrying a new validity flag."""
        return replace(self, is_valid=is_valid)


def ensure_unique_ids(steps: Iterable[WizardStep]) -> List[WizardStep]:
    """
    Validate a step list and return it as a new list.

    Raises:
        ValueError: If the list is empty or an id appears twice
    """
    steps = list(steps)
    if not steps:
        raise ValueError("A wizard needs at least one step")

    seen = set()
    for step in steps:
        if step.id in seen:
            raise ValueError(f"Duplicate wizard step id: {step.id!r}")
        seen.add(step.id)
    return steps
