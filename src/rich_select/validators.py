"""Validators for multi-select answers.

A validator receives the checked options (canonical index order) and returns
a :class:`~rich_select.types.Validation`. A rejection keeps the prompt open
and shows the message; exceptions raised by a validator propagate.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence

from .types import ListOption, Validation

MultiOptionValidator = Callable[[Sequence[ListOption[Any]]], Validation]


def min_selections(count: int, message: str | None = None) -> MultiOptionValidator:
    """Require at least ``count`` checked options."""
    if message is None:
        noun = "option" if count == 1 else "options"
        message = f"Please select at least {count} {noun}"

    def validator(selected: Sequence[ListOption[Any]]) -> Validation:
        if len(selected) < count:
            return Validation.invalid(message)
        return Validation.valid()

    return validator


def max_selections(count: int, message: str | None = None) -> MultiOptionValidator:
    """Allow at most ``count`` checked options."""
    if message is None:
        noun = "option" if count == 1 else "options"
        message = f"Please select at most {count} {noun}"

    def validator(selected: Sequence[ListOption[Any]]) -> Validation:
        if len(selected) > count:
            return Validation.invalid(message)
        return Validation.valid()

    return validator
