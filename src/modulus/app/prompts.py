"""
Interactive selector.

Every prompt returns either the entered value or PromptOutcome.CANCELLED.
Callers check for cancellation after each prompt and stop before any file
is written.
"""

from enum import Enum
from pathlib import Path
from typing import Protocol

import questionary

from modulus.domain.constants import DEFAULT_DESTINATION
from modulus.domain.schemas import Selection, Template
from modulus.templates.registry import get_template


class PromptOutcome(str, Enum):
    """Non-value prompt results."""

    CANCELLED = "cancelled"


PromptResult = str | PromptOutcome


# =============================================================================
# Selector Protocol (for dependency injection)
# =============================================================================


class Selector(Protocol):
    """Source of user choices for one run."""

    def choose_template(self, names: list[str]) -> PromptResult:
        """Pick one template display name."""
        ...

    def ask_destination(self, default: str = DEFAULT_DESTINATION) -> PromptResult:
        """Destination directory, default '.'."""
        ...

    def ask_variable(self, variable: str, prompt: str) -> PromptResult:
        """Value for one template variable."""
        ...


class QuestionarySelector:
    """Terminal prompts backed by questionary. Ctrl-C maps to CANCELLED."""

    @staticmethod
    def _result(answer: str | None) -> PromptResult:
        if answer is None:
            return PromptOutcome.CANCELLED
        return answer

    def choose_template(self, names: list[str]) -> PromptResult:
        return self._result(questionary.select("Template", choices=names).ask())

    def ask_destination(self, default: str = DEFAULT_DESTINATION) -> PromptResult:
        answer = questionary.text("Destination", default=default).ask()
        if answer is not None and not answer.strip():
            answer = default
        return self._result(answer)

    def ask_variable(self, variable: str, prompt: str) -> PromptResult:
        return self._result(questionary.text(prompt).ask())


# =============================================================================
# Selection Flow
# =============================================================================


def collect_selection(
    catalog: dict[str, Template],
    selector: Selector,
) -> Selection | PromptOutcome:
    """
    Run the prompts in order: template, destination, variables.

    Args:
        catalog: display name → Template
        selector: prompt implementation

    Returns:
        Selection, or PromptOutcome.CANCELLED at the first cancelled prompt

    Raises:
        ModulusError: TEMPLATE_NOT_FOUND
    """
    name = selector.choose_template(sorted(catalog))
    if name is PromptOutcome.CANCELLED:
        return PromptOutcome.CANCELLED
    template = get_template(catalog, name)

    destination = selector.ask_destination(DEFAULT_DESTINATION)
    if destination is PromptOutcome.CANCELLED:
        return PromptOutcome.CANCELLED

    bindings: dict[str, str] = {}
    for variable, prompt in template.variables.items():
        value = selector.ask_variable(variable, prompt)
        if value is PromptOutcome.CANCELLED:
            return PromptOutcome.CANCELLED
        bindings[variable] = value

    return Selection(
        template=template,
        destination=Path(destination).expanduser(),
        bindings=bindings,
    )
