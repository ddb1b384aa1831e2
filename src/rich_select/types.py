"""Type definitions for rich_select.

Shared enums and dataclasses used by the scoring, pagination and prompt
modules.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ListOption(Generic[T]):
    """An option value paired with its canonical index in the option list."""

    index: int
    value: T

    def __str__(self) -> str:
        return str(self.value)


class ActionResult(str, Enum):
    """Outcome of handling an action: whether the screen must be redrawn."""

    CLEAN = "clean"
    NEEDS_REDRAW = "needs_redraw"

    def __str__(self) -> str:
        return self.value

    @property
    def needs_redraw(self) -> bool:
        return self is ActionResult.NEEDS_REDRAW

    def merge(self, other: "ActionResult") -> "ActionResult":
        """Combine two results; redraw wins."""
        if self.needs_redraw or other.needs_redraw:
            return ActionResult.NEEDS_REDRAW
        return ActionResult.CLEAN


class InputActionResult(str, Enum):
    """Outcome of an edit on the filter input."""

    CONTENT_CHANGED = "content_changed"
    POSITION_CHANGED = "position_changed"
    UNCHANGED = "unchanged"

    def __str__(self) -> str:
        return self.value

    def to_action_result(self) -> ActionResult:
        if self is InputActionResult.UNCHANGED:
            return ActionResult.CLEAN
        return ActionResult.NEEDS_REDRAW


@dataclass(frozen=True)
class Validation:
    """Result of validating the checked options of a multi-select prompt.

    Use :meth:`valid` and :meth:`invalid` instead of the constructor.
    """

    is_valid: bool
    message: str | None = None

    @classmethod
    def valid(cls) -> "Validation":
        return cls(is_valid=True)

    @classmethod
    def invalid(cls, message: str) -> "Validation":
        return cls(is_valid=False, message=message)


@dataclass(frozen=True)
class Page(Generic[T]):
    """A window over the scored options.

    Attributes:
        content: Options visible in this page, in display order.
        cursor: Position of the highlighted row inside ``content``, or None.
        offset: Position of ``content[0]`` inside the scored options.
        total: Number of scored options the page was cut from.
    """

    content: list[ListOption[T]]
    cursor: int | None
    offset: int
    total: int

    @property
    def first(self) -> bool:
        """Whether the page starts at the first scored option."""
        return self.offset == 0

    @property
    def last(self) -> bool:
        """Whether the page ends at the last scored option."""
        return self.offset + len(self.content) >= self.total

    def __len__(self) -> int:
        return len(self.content)
