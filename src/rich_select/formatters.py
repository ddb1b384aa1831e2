"""Formatters turning a final answer into the text shown after submission."""

from __future__ import annotations

from typing import Any, Callable, Sequence

from .types import ListOption

OptionFormatter = Callable[[ListOption[Any]], str]
MultiOptionFormatter = Callable[[Sequence[ListOption[Any]]], str]


def default_option_formatter(option: ListOption[Any]) -> str:
    return str(option.value)


def default_multi_option_formatter(options: Sequence[ListOption[Any]]) -> str:
    """Join the selected values with commas, in canonical index order."""
    return ", ".join(str(option.value) for option in options)
